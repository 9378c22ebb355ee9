"""Demonstration equations for the scalar root-finders."""

from dataclasses import dataclass

import numpy as np

from nmkit.core.errors import InvalidArgumentError
from nmkit.nonlinear.equations import ScalarEquation, ScalarFunction


@dataclass(frozen=True)
class ScalarProblem:
    """Equation, its derivative and one of its two bracketing intervals."""

    eq_id: int
    interval_id: int
    statement: str
    equation: ScalarEquation
    derivative: ScalarFunction
    a: float
    b: float
    eps: float = 1e-7

    @property
    def midpoint(self) -> float:
        return (self.a + self.b) / 2.0


# eq_id -> (statement, f, f', (first interval, second interval))
_EQUATIONS = {
    1: (
        "x^2 - 4x + 4 - ln(x) = 0",
        lambda x: x * x - 4.0 * x + 4.0 - np.log(x),
        lambda x: 2.0 * x - 4.0 - 1.0 / x,
        ((1.0, 2.0), (2.0, 4.0)),
    ),
    2: (
        "x + 1 - 2 sin(pi x) = 0",
        lambda x: x + 1.0 - 2.0 * np.sin(np.pi * x),
        lambda x: 1.0 - 2.0 * np.pi * np.cos(np.pi * x),
        ((0.0, 0.5), (0.5, 1.0)),
    ),
    3: (
        "e^x - 3x^2 = 0",
        lambda x: np.exp(x) - 3.0 * x * x,
        lambda x: np.exp(x) - 6.0 * x,
        ((0.0, 1.0), (3.0, 5.0)),
    ),
    4: (
        "2x cos(2x) - (x-2)^2 = 0",
        lambda x: 2.0 * x * np.cos(2.0 * x) - (x - 2.0) ** 2,
        lambda x: 2.0 * np.cos(2.0 * x) - 4.0 * x * np.sin(2.0 * x) - 2.0 * (x - 2.0),
        ((2.0, 3.0), (3.0, 4.0)),
    ),
}


def scalar_problem(eq_id: int, interval_id: int = 1) -> ScalarProblem:
    """
    Demonstration equation 1-4 on interval 1 or 2.

    Args:
        eq_id: Equation number
        interval_id: Which of the equation's two brackets to use

    Returns:
        Problem with eps = 1e-7
    """
    if eq_id not in _EQUATIONS:
        raise InvalidArgumentError(f"invalid equation {eq_id!r}; use 1-4")
    if interval_id not in (1, 2):
        raise InvalidArgumentError(f"invalid interval {interval_id!r}; use 1 or 2")

    statement, f, df, intervals = _EQUATIONS[eq_id]
    a, b = intervals[interval_id - 1]
    return ScalarProblem(
        eq_id=eq_id,
        interval_id=interval_id,
        statement=statement,
        equation=ScalarEquation(f),
        derivative=lambda x, df=df: float(df(x)),
        a=a,
        b=b,
    )
