# normal.py
# Standard normal CDF via the Abramowitz & Stegun 7.1.26 rational
# approximation of erf.  Absolute error <= 7.5e-8 on Phi.

from __future__ import annotations
import math
import numpy as np

_P  = 0.3275911
_A1 = 0.254829592
_A2 = -0.284496736
_A3 = 1.421413741
_A4 = -1.453152027
_A5 = 1.061405429

INV_SQRT_2PI = 0.3989422804014327   # 1 / sqrt(2*pi)
_INV_SQRT_2  = 0.7071067811865476


def _poly(t):
    return t * (_A1 + t * (_A2 + t * (_A3 + t * (_A4 + t * _A5))))


def cdf(x: float) -> float:
    """Phi(x).  ``cdf(+inf) == 1``, ``cdf(-inf) == 0``, NaN propagates."""
    t = 1.0 / (1.0 + _P * abs(x) * _INV_SQRT_2)
    tail = 0.5 * _poly(t) * math.exp(-0.5 * x * x)
    if x >= 0.0:
        return 1.0 - tail
    return tail


def pdf(x: float) -> float:
    return INV_SQRT_2PI * math.exp(-0.5 * x * x)


def cdf_vec(x) -> np.ndarray:
    """Array version of :func:`cdf`; same coefficients, same branch rule."""
    x = np.asarray(x, dtype=float)
    t = 1.0 / (1.0 + _P * np.abs(x) * _INV_SQRT_2)
    tail = 0.5 * _poly(t) * np.exp(-0.5 * x * x)
    return np.where(x >= 0.0, 1.0 - tail, tail)
