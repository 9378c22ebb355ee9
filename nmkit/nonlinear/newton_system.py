"""Newton's method for systems of nonlinear equations."""

import logging
from dataclasses import dataclass
from typing import Any, Optional

from nmkit.algebra.dense import pivoted_solve
from nmkit.algebra.protocols import EXACT
from nmkit.core.errors import (
    DimensionMismatchError,
    InvalidArgumentError,
    NonConvergenceError,
    SingularMatrixError,
)
from nmkit.core.matrix import Matrix
from nmkit.core.settings import DEFAULT_SETTINGS, SolverSettings
from nmkit.core.trace import Trace
from nmkit.core.vector import Vector
from nmkit.nonlinear.equations import NonlinearSystem

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NewtonSystemStep:
    """State at the start of an iteration and the update computed from it."""

    iter: int
    x: Vector
    fx: Vector
    jac: Matrix
    delta: Vector

    def to_dict(self) -> dict[str, Any]:
        return {
            "iter": self.iter,
            "x": self.x.to_list(),
            "fx": self.fx.to_list(),
            "jac": self.jac.to_lists(),
            "delta": self.delta.to_list(),
        }


NewtonSystemTrace = Trace[NewtonSystemStep]


class NewtonSolver:
    """Newton iteration x <- x + delta with J(x) delta = -F(x)."""

    @staticmethod
    def solve(
        system: NonlinearSystem,
        x0: Vector,
        eps: float,
        trace: Optional[NewtonSystemTrace] = None,
        *,
        settings: SolverSettings = DEFAULT_SETTINGS,
    ) -> Vector:
        """
        Newton's method for F(x) = 0.

        The linear step is solved by partial-pivot Gaussian elimination in
        full double precision. Iteration stops when ||F(x)||_inf <= eps, or
        after an update with ||delta||_inf / max(||x||_inf, 1) <= eps.

        Args:
            system: F and its Jacobian J
            x0: Non-empty, finite initial guess
            eps: Tolerance (> 0)
            trace: Optional log, one step per Jacobian solve
            settings: Pivot tolerance and iteration cap

        Returns:
            Approximate solution

        Raises:
            InvalidArgumentError: bad eps or x0
            DimensionMismatchError: F(x) or J(x) does not match len(x)
            SingularMatrixError: J(x) is numerically singular
            NonConvergenceError: non-finite F, delta or x, or iteration cap reached
        """
        if not eps > 0.0:
            raise InvalidArgumentError("NewtonSolver.solve: eps must be positive")
        if len(x0) == 0:
            raise InvalidArgumentError("NewtonSolver.solve: x0 must be non-empty")
        if not x0.is_finite():
            raise InvalidArgumentError("NewtonSolver.solve: x0 contains non-finite values")

        if trace is not None:
            trace.clear()

        x = x0.copy()
        n = len(x)
        for it in range(settings.newton_system_max_iter):
            fx = system.evaluate(x)
            if len(fx) != n:
                raise DimensionMismatchError(
                    f"NewtonSolver.solve: F(x) has {len(fx)} components, x has {n}"
                )
            if not fx.is_finite():
                raise NonConvergenceError("NewtonSolver.solve: F(x) became non-finite")

            residual = fx.norm_inf()
            logger.debug("NewtonSolver: iter=%d ||F||_inf=%.3e", it, residual)
            if residual <= eps:
                return x

            jac = system.jacobian(x)
            if jac.shape != (n, n):
                raise DimensionMismatchError(
                    f"NewtonSolver.solve: J(x) is {jac.rows}x{jac.cols}, expected {n}x{n}"
                )

            try:
                delta = pivoted_solve(
                    jac, -fx, rounding=EXACT, pivot_tol=settings.pivot_tol,
                    context="NewtonSolver.solve",
                )
            except SingularMatrixError as exc:
                raise SingularMatrixError(
                    f"NewtonSolver.solve: singular Jacobian at iteration {it} ({exc})"
                ) from exc
            if not delta.is_finite():
                raise NonConvergenceError("NewtonSolver.solve: update became non-finite")

            if trace is not None:
                trace.record(NewtonSystemStep(it, x.copy(), fx, jac, delta))

            x = x + delta
            if not x.is_finite():
                raise NonConvergenceError("NewtonSolver.solve: iterate became non-finite")

            if delta.norm_inf() / max(x.norm_inf(), 1.0) <= eps:
                logger.debug("NewtonSolver: step criterion met at iter=%d", it)
                return x

        raise NonConvergenceError("NewtonSolver.solve: maximum iterations reached")
