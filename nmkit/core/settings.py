"""Numeric constants used by the solvers."""

from dataclasses import dataclass, fields, replace
from numbers import Integral

from nmkit.core.errors import InvalidArgumentError


@dataclass(frozen=True)
class SolverSettings:
    """Tolerances and iteration caps.

    The defaults are the values the textbook algorithms are defined with;
    changing them changes documented outputs.
    """

    pivot_tol: float = 1e-15        # smallest admissible |pivot| / |a_ii|
    tie_tol: float = 1e-12          # half-way detection in round-half-to-even

    bisection_max_iter: int = 1000
    regula_falsi_max_iter: int = 100_000
    secant_max_iter: int = 100_000
    newton_max_iter: int = 1000
    newton_system_max_iter: int = 100

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if f.name.endswith("_tol"):
                if not value > 0.0:
                    raise InvalidArgumentError(f"{f.name} must be > 0, got {value!r}")
            elif isinstance(value, bool) or not isinstance(value, Integral) or value <= 0:
                raise InvalidArgumentError(
                    f"{f.name} must be a positive integer, got {value!r}"
                )

    def with_overrides(self, **overrides) -> "SolverSettings":
        """Return a copy with the given fields replaced."""
        return replace(self, **overrides)


DEFAULT_SETTINGS = SolverSettings()
