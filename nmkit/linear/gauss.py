"""Direct solve with partial pivoting and hand-calculation rounding."""

import logging
from numbers import Integral
from typing import Optional

from nmkit.algebra.dense import GaussianEliminationTrace, pivoted_solve
from nmkit.algebra.protocols import SignificantDigits
from nmkit.core.errors import DimensionMismatchError, InvalidArgumentError
from nmkit.core.settings import DEFAULT_SETTINGS, SolverSettings
from nmkit.core.vector import Vector
from nmkit.linear.system import LinearSystem

logger = logging.getLogger(__name__)


class GaussianElimination:
    """
    Gaussian elimination that rounds every intermediate result.

    Each multiplier, product and difference is rounded to the requested
    number of significant digits, reproducing the error a person solving
    the system by hand accumulates. The rounding is part of the result,
    not a presentation step.
    """

    @staticmethod
    def solve(
        system: LinearSystem,
        significant_digits: int,
        trace: Optional[GaussianEliminationTrace] = None,
        *,
        settings: SolverSettings = DEFAULT_SETTINGS,
    ) -> Vector:
        """
        Solve the system.

        Args:
            system: Square system of size n
            significant_digits: Digits kept after every arithmetic step (> 0)
            trace: Optional log of pivot snapshots and labelled operations
            settings: Pivot and tie tolerances

        Returns:
            Solution vector x of length n

        Raises:
            InvalidArgumentError: if significant_digits is not a positive integer
            DimensionMismatchError: if A is not n x n or b has the wrong length
            SingularMatrixError: if no usable pivot exists in some column
        """
        if isinstance(significant_digits, bool) or not isinstance(significant_digits, Integral) \
                or significant_digits <= 0:
            raise InvalidArgumentError(
                f"GaussianElimination.solve: significant_digits must be positive, got {significant_digits!r}"
            )
        if not system.is_consistent():
            A = system.matrix
            raise DimensionMismatchError(
                f"GaussianElimination.solve: dimension mismatch "
                f"(A is {A.rows}x{A.cols}, b has {system.size} entries)"
            )

        if trace is not None:
            trace.clear()

        logger.debug(
            "GaussianElimination.solve: n=%d, significant_digits=%d", system.size, significant_digits
        )
        return pivoted_solve(
            system.matrix,
            system.rhs,
            rounding=SignificantDigits(significant_digits, tie_tol=settings.tie_tol),
            pivot_tol=settings.pivot_tol,
            trace=trace,
            context="GaussianElimination.solve",
        )


def gaussian_elimination(
    system: LinearSystem,
    significant_digits: int,
    trace: Optional[GaussianEliminationTrace] = None,
    *,
    settings: SolverSettings = DEFAULT_SETTINGS,
) -> Vector:
    """Function form of GaussianElimination.solve."""
    return GaussianElimination.solve(system, significant_digits, trace, settings=settings)
