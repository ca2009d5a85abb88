# black_scholes_vec.py
# Vectorised Black-Scholes price and Greeks.
# All public functions accept scalars *or* NumPy arrays and broadcast.

from __future__ import annotations
import numpy as np

from .core import OptionSide, InvalidParameter
from .normal import cdf_vec as _N

_SQRT_2PI = np.sqrt(2 * np.pi)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------
def _d1_d2(S, K, T, r, sigma):
    """Compute d1, d2 arrays.  All inputs broadcast."""
    if not all(np.all(np.isfinite(x)) for x in (S, K, T, r, sigma)):
        raise InvalidParameter("S, K, T, r, sigma must be finite.")
    if np.any(S <= 0) or np.any(K <= 0) or np.any(T <= 0) or np.any(sigma <= 0):
        raise InvalidParameter("S, K, T, sigma must be positive.")
    sig_sqrt_T = sigma * np.sqrt(T)
    d1 = (np.log(S / K) + (r + 0.5 * sigma * sigma) * T) / sig_sqrt_T
    d2 = d1 - sig_sqrt_T
    return d1, d2


def _sign(side) -> np.ndarray:
    """Return +1.0 where side is a call, -1.0 where it is a put."""
    side = np.asarray(side, dtype=object)
    if side.ndim == 0:
        return np.float64(OptionSide.parse(side.item()).sign)
    signs = [OptionSide.parse(s).sign for s in side.flat]
    return np.array(signs, dtype=float).reshape(side.shape)


# ---------------------------------------------------------------------------
# Vectorised price and Greeks
# ---------------------------------------------------------------------------
def price_and_greeks_vec(S, K, T, r, sigma, side) -> dict[str, np.ndarray]:
    """Vectorised Black-Scholes price and Greeks.

    Parameters accept scalars or arrays; NumPy broadcasting rules apply.
    ``side`` may be a single side or an array of sides (``OptionSide``
    members or ``"call"``/``"put"`` strings).

    Returns
    -------
    dict[str, np.ndarray]
        Keys: price, delta, gamma, vega, theta.  Vega is dPrice/dSigma
        (absolute), theta is dPrice/dt (per year).
    """
    S, K, T, r, sigma = (np.asarray(x, dtype=float) for x in (S, K, T, r, sigma))
    d1, d2 = _d1_d2(S, K, T, r, sigma)
    sign = _sign(side)
    disc_r = np.exp(-r * T)
    g_d1 = np.exp(-0.5 * d1 * d1)

    price = sign * (S * _N(sign * d1) - K * disc_r * _N(sign * d2))

    # Common
    gamma = g_d1 / (S * sigma * np.sqrt(2 * np.pi * T))
    vega  = S * np.sqrt(T) * g_d1 / _SQRT_2PI

    delta = sign * _N(sign * d1)
    theta = (-0.5 * sigma * S * g_d1 / np.sqrt(2 * np.pi * T)
             - sign * r * K * disc_r * _N(sign * d2))

    price, delta, gamma, vega, theta = np.broadcast_arrays(price, delta, gamma, vega, theta)
    return {"price": price, "delta": delta, "gamma": gamma, "vega": vega, "theta": theta}
