"""Bump-and-reprice checks.

Numerical Greeks via central finite differences that work with **any**
scalar pricer taking an :class:`OptionRequest`, and the put-call parity
gap of the closed-form kernel.
"""

from __future__ import annotations

from math import exp
from typing import Callable

from .core import OptionRequest, CALL, PUT

__all__ = [
    "numerical_greeks",
    "parity_gap",
]


# ---------------------------------------------------------------------------
# Numerical Greeks
# ---------------------------------------------------------------------------

def numerical_greeks(
    pricer_func: Callable[[OptionRequest], float],
    req: OptionRequest,
    *,
    bump_pct: float = 0.01,
) -> dict[str, float]:
    """Compute Greeks via central finite differences on an arbitrary pricer.

    Parameters
    ----------
    pricer_func : callable
        ``pricer_func(req) -> float``.
    req : OptionRequest
        Point at which the Greeks are taken.
    bump_pct : float
        Relative bump size for spot and vol (default 0.01).  The spot bump
        is capped at half the spot; the vol down-bump is floored at 1e-6.

    Returns
    -------
    dict[str, float]
        Keys: ``delta``, ``gamma``, ``vega``, ``theta``.  Theta follows the
        closed-form convention: dPrice/dt per year, i.e. minus the
        derivative in time-to-expiry.
    """
    P0 = pricer_func(req)

    # --- Delta & Gamma (spot bump) ---
    eps_S = min(bump_pct, 0.5) * req.spot
    P_up = pricer_func(req.replace(spot=req.spot + eps_S))
    P_dn = pricer_func(req.replace(spot=req.spot - eps_S))
    delta = (P_up - P_dn) / (2.0 * eps_S)
    gamma = (P_up - 2.0 * P0 + P_dn) / (eps_S ** 2)

    # --- Vega (vol bump) ---
    eps_v = max(bump_pct * req.volatility, 1e-4)
    sig_up = req.volatility + eps_v
    sig_dn = max(req.volatility - eps_v, 1e-6)
    P_vup = pricer_func(req.replace(volatility=sig_up))
    P_vdn = pricer_func(req.replace(volatility=sig_dn))
    vega = (P_vup - P_vdn) / (sig_up - sig_dn)

    # --- Theta (1-day bump, halved for very short expiries) ---
    dt = min(1.0 / 365.0, 0.5 * req.time_to_expiry)
    P_tup = pricer_func(req.replace(time_to_expiry=req.time_to_expiry + dt))
    P_tdn = pricer_func(req.replace(time_to_expiry=req.time_to_expiry - dt))
    theta = -(P_tup - P_tdn) / (2.0 * dt)

    return {
        "delta": float(delta),
        "gamma": float(gamma),
        "vega": float(vega),
        "theta": float(theta),
    }


# ---------------------------------------------------------------------------
# Put-call parity
# ---------------------------------------------------------------------------

def parity_gap(req: OptionRequest) -> float:
    """``C - P - (S - K exp(-rT))`` for the request's parameters (side ignored)."""
    from .black_scholes import price as bs_price

    call_px = bs_price(req.replace(side=CALL))
    put_px = bs_price(req.replace(side=PUT))
    forward_gap = req.spot - req.strike * exp(-req.risk_free_rate * req.time_to_expiry)
    return call_px - put_px - forward_gap
