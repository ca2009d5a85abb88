from __future__ import annotations
import dataclasses
import math
from dataclasses import dataclass
from enum import Enum


class InvalidParameter(ValueError):
    """Raised when a pricing input lies outside the closed-form domain."""


class OptionSide(str, Enum):
    CALL = "call"
    PUT = "put"

    @property
    def sign(self) -> int:
        """+1 for calls, -1 for puts."""
        return 1 if self is OptionSide.CALL else -1

    @classmethod
    def parse(cls, text) -> OptionSide:
        """Accept ``"call"``/``"c"``/``"put"``/``"p"`` in any case."""
        if isinstance(text, cls):
            return text
        s = str(text).strip().lower()
        if s in {"call", "c"}:
            return cls.CALL
        if s in {"put", "p"}:
            return cls.PUT
        raise ValueError(f"side must be 'call' or 'put', got {text!r}")


CALL = OptionSide.CALL
PUT  = OptionSide.PUT


# ---------------------------------------------------------------------------
# Request / result values
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class OptionRequest:
    """Market and contract inputs for one European option.

    Parameters
    ----------
    spot : float
        Current underlying price (S).
    strike : float
        Strike price (K).
    time_to_expiry : float
        Years until expiry (T).
    risk_free_rate : float
        Continuously-compounded annual rate (r).
    volatility : float
        Annualised volatility of log-returns (sigma).
    side : OptionSide
        ``CALL`` or ``PUT``; ``"call"``/``"c"``/``"put"``/``"p"`` are coerced.

    Degenerate inputs are rejected rather than priced: the closed form
    divides by ``sigma * sqrt(T)`` and takes ``log(S / K)``.
    """
    spot: float
    strike: float
    time_to_expiry: float          # years
    risk_free_rate: float          # continuous
    volatility: float
    side: OptionSide = CALL

    def __post_init__(self):
        object.__setattr__(self, "side", OptionSide.parse(self.side))
        for name in ("spot", "strike", "time_to_expiry", "risk_free_rate", "volatility"):
            value = getattr(self, name)
            if not math.isfinite(value):
                raise InvalidParameter(f"{name} must be finite, got {value}")
        if self.spot <= 0:
            raise InvalidParameter(f"spot must be positive, got {self.spot}")
        if self.strike <= 0:
            raise InvalidParameter(f"strike must be positive, got {self.strike}")
        if self.time_to_expiry <= 0:
            raise InvalidParameter(
                f"time_to_expiry must be positive, got {self.time_to_expiry}"
            )
        if self.volatility <= 0:
            raise InvalidParameter(f"volatility must be positive, got {self.volatility}")

    def replace(self, **changes) -> OptionRequest:
        """Return a copy with some fields changed (validated again)."""
        return dataclasses.replace(self, **changes)


@dataclass(frozen=True)
class OptionResult:
    """Price and first/second-order sensitivities.

    Vega is dPrice/dSigma in absolute units (not per 1%), theta is
    dPrice/dt per year.
    """
    price: float
    delta: float
    gamma: float
    vega: float
    theta: float

    def as_dict(self) -> dict[str, float]:
        return {
            "price": self.price,
            "delta": self.delta,
            "gamma": self.gamma,
            "vega": self.vega,
            "theta": self.theta,
        }

    def format(self, digits: int = 2) -> str:
        lines = ["Option Parameters:"]
        for key, value in self.as_dict().items():
            lines.append(f"{key.capitalize()}: {value:.{digits}f}")
        return "\n".join(lines)
