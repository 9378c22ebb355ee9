"""Demonstration linear systems for the direct and iterative solvers."""

from dataclasses import dataclass

import numpy as np

from nmkit.core.errors import InvalidArgumentError
from nmkit.core.matrix import Matrix
from nmkit.core.vector import Vector
from nmkit.linear.system import LinearSystem


@dataclass(frozen=True)
class GaussProblem:
    """System solved by hand-rounded Gaussian elimination."""

    system_id: int
    system: LinearSystem
    significant_digits: int = 3


@dataclass(frozen=True)
class IterativeProblem:
    """Diagonally dominant system for Jacobi / Gauss-Seidel."""

    system_id: int
    system: LinearSystem
    iterations: int = 2

    @property
    def x0(self) -> Vector:
        """Zero starting vector."""
        return Vector.zeros(self.system.size)


def _system(rows, rhs) -> LinearSystem:
    return LinearSystem(Matrix.from_rows(rows), Vector(rhs))


def _gauss_systems() -> dict[int, LinearSystem]:
    pi, e = np.pi, np.e
    sqrt2, sqrt3, sqrt5 = np.sqrt(2.0), np.sqrt(3.0), np.sqrt(5.0)
    return {
        1: _system(
            [[3.03, -12.1, 14.0],
             [-3.03, 12.1, -7.0],
             [6.11, -14.2, 21.0]],
            [-119.0, 120.0, -139.0],
        ),
        2: _system(
            [[3.333, 15920.0, 10.333],
             [2.222, 16.71, 9.612],
             [-1.5611, 5.1792, -1.6855]],
            [7953.0, 0.965, 2714.0],
        ),
        3: _system(
            [[2.12, -2.12, 51.3, 100.0],
             [0.333, -0.333, -12.2, 19.7],
             [6.19, 8.20, -1.0, -2.01],
             [-5.73, 6.12, 1.0, -1.0]],
            [pi, sqrt2, 0.0, -1.0],
        ),
        4: _system(
            [[pi, sqrt2, -1.0, 1.0],
             [e, -1.0, 1.0, 2.0],
             [1.0, 1.0, -sqrt3, 1.0],
             [-1.0, -1.0, 1.0, -sqrt5]],
            [0.0, 1.0, 2.0, 3.0],
        ),
    }


def _iterative_systems() -> dict[int, LinearSystem]:
    return {
        1: _system(
            [[4, 1, 1, 0, 1],
             [-1, -3, 1, 1, 0],
             [2, 1, 5, -1, -1],
             [-1, -1, -1, 4, 0],
             [0, 2, -1, 1, 4]],
            [6, 6, 6, 6, 6],
        ),
        2: _system(
            [[4, -1, 0, -1, 0, 0],
             [-1, 4, -1, 0, -1, 0],
             [0, -1, 4, 0, 0, -1],
             [-1, 0, 0, 4, -1, 0],
             [0, -1, 0, -1, 4, -1],
             [0, 0, -1, 0, -1, 4]],
            [0, 5, 0, 6, -2, 6],
        ),
        3: _system(
            [[10, 5, 0, 0],
             [5, 10, -4, 0],
             [0, -4, 8, -1],
             [0, 0, -1, 5]],
            [6, 25, -11, -11],
        ),
        4: _system(
            [[4, 1, -1, 1],
             [1, 4, -1, -1],
             [-1, -1, 5, 1],
             [1, -1, 1, 3]],
            [-2, -1, 0, 1],
        ),
    }


def gauss_problem(system_id: int) -> GaussProblem:
    """Direct-solve demonstration system 1-4 (3 significant digits)."""
    systems = _gauss_systems()
    if system_id not in systems:
        raise InvalidArgumentError(f"invalid system {system_id!r}; use 1-4")
    return GaussProblem(system_id, systems[system_id])


def iterative_problem(system_id: int) -> IterativeProblem:
    """Iterative demonstration system 1-4 (2 sweeps from zero)."""
    systems = _iterative_systems()
    if system_id not in systems:
        raise InvalidArgumentError(f"invalid system {system_id!r}; use 1-4")
    return IterativeProblem(system_id, systems[system_id])
