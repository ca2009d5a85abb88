# bsgreeks — Black-Scholes pricing kernel
# Public API

# Data model
from .core import OptionRequest, OptionResult, OptionSide, InvalidParameter, CALL, PUT

# Normal approximation
from .normal import cdf, pdf, cdf_vec

# Closed-form kernel
from .black_scholes import price_and_greeks, price as bs_price, greeks as bs_greeks, d1_d2

# Vectorised kernel
from .black_scholes_vec import price_and_greeks_vec

# Bump-and-reprice checks
from .risk import numerical_greeks, parity_gap

__all__ = [
    # Data model
    "OptionRequest", "OptionResult", "OptionSide", "InvalidParameter", "CALL", "PUT",
    # Normal approximation
    "cdf", "pdf", "cdf_vec",
    # Closed form
    "price_and_greeks", "bs_price", "bs_greeks", "d1_d2",
    # Vectorised
    "price_and_greeks_vec",
    # Checks
    "numerical_greeks", "parity_gap",
]

__version__ = "0.1.0"
