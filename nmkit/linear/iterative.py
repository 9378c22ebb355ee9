"""Stationary iterative solvers: Jacobi and Gauss-Seidel."""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from numbers import Integral
from typing import Any, Optional

import numpy as np
from numpy.typing import NDArray

from nmkit.core.errors import DimensionMismatchError, InvalidArgumentError, SingularMatrixError
from nmkit.core.settings import DEFAULT_SETTINGS, SolverSettings
from nmkit.core.trace import Trace
from nmkit.core.vector import Vector
from nmkit.linear.system import LinearSystem

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IterativeStep:
    """Iterate after ``iter`` sweeps (iter 0 is the initial guess)."""

    iter: int
    x: Vector

    def to_dict(self) -> dict[str, Any]:
        return {"iter": self.iter, "x": self.x.to_list()}


IterativeTrace = Trace[IterativeStep]


class StationarySolver(ABC):
    """
    Fixed-count stationary iteration x <- (b - (A - D) x) / D.

    Subclasses differ only in which vector the off-diagonal sum reads.
    There is no tolerance test: exactly ``iterations`` sweeps are made.
    """

    name: str = "stationary"

    def iterate(
        self,
        system: LinearSystem,
        x0: Vector,
        iterations: int,
        trace: Optional[IterativeTrace] = None,
        *,
        settings: SolverSettings = DEFAULT_SETTINGS,
    ) -> Vector:
        """
        Run the iteration.

        Args:
            system: Square system of size n
            x0: Initial guess of length n
            iterations: Number of sweeps (>= 0)
            trace: Optional log, one step for x0 and one per sweep
            settings: Diagonal tolerance

        Returns:
            Iterate after the last sweep

        Raises:
            InvalidArgumentError: if iterations is negative or not an integer
            DimensionMismatchError: if A, b and x0 do not agree in size
            SingularMatrixError: if a diagonal entry is numerically zero
        """
        label = f"{type(self).__name__}.iterate"
        if isinstance(iterations, bool) or not isinstance(iterations, Integral) or iterations < 0:
            raise InvalidArgumentError(f"{label}: iterations must be a non-negative integer")

        n = system.size
        if not system.is_consistent():
            raise DimensionMismatchError(f"{label}: dimension mismatch")
        if len(x0) != n:
            raise DimensionMismatchError(f"{label}: x0 dimension mismatch ({len(x0)} != {n})")

        a = system.matrix.to_numpy()
        b = system.rhs.to_numpy()
        x = x0.to_numpy()

        if trace is not None:
            trace.clear()
            trace.record(IterativeStep(0, Vector(x)))

        for it in range(iterations):
            x = self._sweep(a, b, x, settings.pivot_tol)
            if trace is not None:
                trace.record(IterativeStep(it + 1, Vector(x)))

        logger.debug("%s: %d sweeps on n=%d", label, iterations, n)
        return Vector(x)

    @abstractmethod
    def _sweep(self, a: NDArray, b: NDArray, x: NDArray, pivot_tol: float) -> NDArray:
        """
        One pass over all rows.

        Args:
            a: Coefficient matrix (n, n)
            b: Right-hand side (n,)
            x: Current iterate; owned by the solver and may be overwritten
            pivot_tol: Smallest admissible |a_ii|

        Returns:
            Next iterate
        """
        ...

    def _diagonal(self, a: NDArray, i: int, pivot_tol: float) -> float:
        aii = a[i, i]
        if abs(aii) < pivot_tol:
            raise SingularMatrixError(
                f"{type(self).__name__}.iterate: zero diagonal entry in row {i}"
            )
        return aii


def _off_diagonal_sum(a: NDArray, i: int, x: NDArray) -> float:
    # Left-to-right accumulation keeps results bit-for-bit reproducible.
    total = 0.0
    for j in range(a.shape[1]):
        if j != i:
            total += a[i, j] * x[j]
    return total


class JacobiSolver(StationarySolver):
    """Every row reads only the previous full iterate."""

    name = "jacobi"

    def _sweep(self, a: NDArray, b: NDArray, x: NDArray, pivot_tol: float) -> NDArray:
        x_next = np.empty_like(x)
        for i in range(x.shape[0]):
            aii = self._diagonal(a, i, pivot_tol)
            x_next[i] = (b[i] - _off_diagonal_sum(a, i, x)) / aii
        return x_next


class GaussSeidelSolver(StationarySolver):
    """Rows are updated in place, so row i sees rows < i of the current sweep."""

    name = "gaussSeidel"

    def _sweep(self, a: NDArray, b: NDArray, x: NDArray, pivot_tol: float) -> NDArray:
        for i in range(x.shape[0]):
            aii = self._diagonal(a, i, pivot_tol)
            x[i] = (b[i] - _off_diagonal_sum(a, i, x)) / aii
        return x
