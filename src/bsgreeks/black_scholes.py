import math
from math import log, sqrt, exp
from typing import Dict, Tuple
from .core import OptionRequest, OptionResult, InvalidParameter
from .normal import cdf

_SQRT_2PI = math.sqrt(2 * math.pi)


def d1_d2(S, K, T, r, sigma) -> Tuple[float, float]:
    if not all(math.isfinite(x) for x in (S, K, T, r, sigma)):
        raise InvalidParameter("S, K, T, r, sigma must be finite.")
    if T <= 0 or sigma <= 0 or S <= 0 or K <= 0:
        raise InvalidParameter("S, K, T, sigma must be positive.")
    srt = sigma * sqrt(T)
    d1 = (log(S / K) + (r + 0.5 * sigma * sigma) * T) / srt
    d2 = d1 - srt
    return d1, d2


def _unpack(req: OptionRequest):
    return (req.spot, req.strike, req.time_to_expiry,
            req.risk_free_rate, req.volatility, req.side.sign)


def price(req: OptionRequest) -> float:
    S, K, T, r, sigma, sign = _unpack(req)
    d1, d2 = d1_d2(S, K, T, r, sigma)
    disc_r = exp(-r * T)
    if sign > 0:
        return S * cdf(d1) - K * disc_r * cdf(d2)
    return K * disc_r * cdf(-d2) - S * cdf(-d1)


def greeks(req: OptionRequest) -> Dict[str, float]:
    """Returns greeks with sigma in absolute units (vega is dPrice/dSigma, not per 1%)."""
    S, K, T, r, sigma, sign = _unpack(req)
    d1, d2 = d1_d2(S, K, T, r, sigma)
    g_d1   = exp(-0.5 * d1 * d1)        # sqrt(2*pi) * pdf(d1)
    disc_r = exp(-r * T)

    # Side-independent
    gamma = g_d1 / (S * sigma * sqrt(2 * math.pi * T))
    vega  = S * sqrt(T) * g_d1 / _SQRT_2PI

    delta = sign * cdf(sign * d1)
    theta = (-0.5 * sigma * S * g_d1 / sqrt(2 * math.pi * T)
             - sign * r * K * disc_r * cdf(sign * d2))

    return {"delta": delta, "gamma": gamma, "vega": vega, "theta": theta}


def price_and_greeks(req: OptionRequest) -> OptionResult:
    """Black-Scholes fair value and Greeks of a European option."""
    return OptionResult(price=price(req), **greeks(req))
