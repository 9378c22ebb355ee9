"""Demonstration systems for Newton's method."""

from dataclasses import dataclass

import numpy as np

from nmkit.core.errors import InvalidArgumentError
from nmkit.core.matrix import Matrix
from nmkit.core.vector import Vector
from nmkit.nonlinear.equations import NonlinearSystem


@dataclass(frozen=True)
class NonlinearProblem:
    system_id: int
    statement: str
    system: NonlinearSystem
    start: tuple[float, ...]
    eps: float = 1e-5

    @property
    def x0(self) -> Vector:
        return Vector(self.start)


def _system1() -> NonlinearSystem:
    # f3 = x2 (7 x2 x3)^-1 - 1 simplified for x2 != 0
    def F(x):
        x1, x2, x3 = x
        return Vector([
            x1 + 2.0 * x2 * x2 - x2 - 2.0 * x3,
            x2 - 8.0 * x2 * x2 + 10.0 * x3,
            1.0 / (7.0 * x3) - 1.0,
        ])

    def J(x):
        _, x2, x3 = x
        return Matrix.from_rows([
            [1.0, 4.0 * x2 - 1.0, -2.0],
            [0.0, 1.0 - 16.0 * x2, 10.0],
            [0.0, 0.0, -1.0 / (7.0 * x3 * x3)],
        ])

    return NonlinearSystem(F, J)


def _system2() -> NonlinearSystem:
    def F(x):
        x1, x2, x3 = x
        return np.array([
            x1 * x1 + x2 - 37.0,
            x1 - x2 * x2 - 5.0,
            x1 + x2 + x3 - 3.0,
        ])

    def J(x):
        x1, x2, _ = x
        return np.array([
            [2.0 * x1, 1.0, 0.0],
            [1.0, -2.0 * x2, 0.0],
            [1.0, 1.0, 1.0],
        ])

    return NonlinearSystem(F, J)


def _system3() -> NonlinearSystem:
    def F(x):
        x1, x2 = x
        return np.array([
            x1 * x1 + x2 * x2 - x1,
            x1 * x1 - x2 * x2 - x2,
        ])

    def J(x):
        x1, x2 = x
        return np.array([
            [2.0 * x1 - 1.0, 2.0 * x2],
            [2.0 * x1, -2.0 * x2 - 1.0],
        ])

    return NonlinearSystem(F, J)


def _system4() -> NonlinearSystem:
    def F(x):
        x1, x2 = x
        return np.array([
            3.0 * x1 * x1 - x2 * x2,
            3.0 * x1 * x2 * x2 - x1 ** 3 - 1.0,
        ])

    def J(x):
        x1, x2 = x
        return np.array([
            [6.0 * x1, -2.0 * x2],
            [3.0 * x2 * x2 - 3.0 * x1 * x1, 6.0 * x1 * x2],
        ])

    return NonlinearSystem(F, J)


_PROBLEMS = {
    1: (
        "x1 + 2x2^2 - x2 - 2x3 = 0;  x2 - 8x2^2 + 10x3 = 0;  1/(7x3) - 1 = 0",
        _system1,
        (0.3, 0.5, 0.14),
    ),
    2: (
        "x1^2 + x2 - 37 = 0;  x1 - x2^2 - 5 = 0;  x1 + x2 + x3 - 3 = 0",
        _system2,
        (6.0, 6.0, -9.0),
    ),
    3: (
        "x1^2 + x2^2 - x1 = 0;  x1^2 - x2^2 - x2 = 0",
        _system3,
        (0.5, 0.5),
    ),
    4: (
        "3x1^2 - x2^2 = 0;  3x1 x2^2 - x1^3 - 1 = 0",
        _system4,
        (1.0, 2.0),
    ),
}


def nonlinear_problem(system_id: int) -> NonlinearProblem:
    """Newton demonstration system 1-4 with its start vector (eps = 1e-5)."""
    if system_id not in _PROBLEMS:
        raise InvalidArgumentError(f"invalid system {system_id!r}; use 1, 2, 3, or 4")
    statement, build, start = _PROBLEMS[system_id]
    return NonlinearProblem(system_id, statement, build(), start)
