"""Round to N significant digits, half-to-even."""

import math
from numbers import Integral

import numpy as np

from nmkit.core.errors import InvalidArgumentError
from nmkit.core.settings import DEFAULT_SETTINGS

# Scale/unscale in extended precision so the multiplication itself does
# not move the value off the decimal grid.
_WIDE = np.longdouble


def _round_half_to_even(x: np.longdouble, tie_tol: float) -> np.longdouble:
    """Round a non-negative wide float to an integer; ties within tie_tol go to even."""
    integer_part = np.floor(x)
    fractional_part = x - integer_part

    if fractional_part > 0.5 + tie_tol:
        return integer_part + 1
    if fractional_part < 0.5 - tie_tol:
        return integer_part

    is_even = abs(np.fmod(integer_part, _WIDE(2))) < tie_tol
    return integer_part if is_even else integer_part + 1


def round_to_significant_digits(
    value: float,
    digits: int,
    *,
    tie_tol: float = DEFAULT_SETTINGS.tie_tol,
) -> float:
    """
    Round value to ``digits`` significant decimal digits.

    Ties are broken half-to-even. A tie is a scaled fractional part within
    ``tie_tol`` of 0.5, so binary neighbours of a decimal half (1.35 is
    stored as 1.3500000000000000888...) still count as halves.

    Args:
        value: Number to round
        digits: Positive number of significant digits

    Returns:
        Rounded value; zero and non-finite inputs are returned unchanged.

    Raises:
        InvalidArgumentError: if digits is not a positive integer

    Examples:
        >>> round_to_significant_digits(1.25, 2)
        1.2
        >>> round_to_significant_digits(1350.0, 2)
        1400.0
    """
    if isinstance(digits, bool) or not isinstance(digits, Integral) or digits <= 0:
        raise InvalidArgumentError(f"significant digits must be a positive integer, got {digits!r}")

    value = float(value)
    if value == 0.0 or not math.isfinite(value):
        return value

    magnitude = _WIDE(abs(value))
    sign = -1 if value < 0.0 else 1

    exponent = np.floor(np.log10(magnitude))
    scale = np.power(_WIDE(10), _WIDE(int(digits) - 1) - exponent)
    if not np.isfinite(scale) or scale == 0:
        return value

    rounded = _round_half_to_even(magnitude * scale, tie_tol)
    return float(sign * (rounded / scale))
