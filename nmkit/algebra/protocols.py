"""Rounding policies for the shared elimination routine."""

from typing import Protocol

from nmkit.algebra.rounding import round_to_significant_digits
from nmkit.core.settings import DEFAULT_SETTINGS


class RoundingPolicy(Protocol):
    """
    Applied to every intermediate product and difference during elimination.
    Lets one routine serve both the hand-calculation solver and the
    full-precision solve inside Newton's method.
    """

    def __call__(self, value: float) -> float:
        """
        Round one intermediate result.

        Args:
            value: Freshly computed product, difference or quotient

        Returns:
            Value as it should be stored
        """
        ...


class ExactArithmetic:
    """No-op policy: keep full double precision."""

    def __call__(self, value: float) -> float:
        return value

    def __repr__(self) -> str:
        return "ExactArithmetic()"


class SignificantDigits:
    """Round every intermediate to a fixed number of significant digits."""

    def __init__(self, digits: int, tie_tol: float = DEFAULT_SETTINGS.tie_tol):
        # Validates digits up front.
        round_to_significant_digits(1.0, digits, tie_tol=tie_tol)
        self.digits = digits
        self.tie_tol = tie_tol

    def __call__(self, value: float) -> float:
        return round_to_significant_digits(value, self.digits, tie_tol=self.tie_tol)

    def __repr__(self) -> str:
        return f"SignificantDigits({self.digits})"


EXACT = ExactArithmetic()
