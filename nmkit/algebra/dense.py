"""Gaussian elimination with partial pivoting, shared by the direct and Newton solvers."""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

import numpy as np

from nmkit.algebra.protocols import EXACT, RoundingPolicy
from nmkit.core.errors import DimensionMismatchError, SingularMatrixError
from nmkit.core.matrix import Matrix
from nmkit.core.settings import DEFAULT_SETTINGS
from nmkit.core.vector import Vector

logger = logging.getLogger(__name__)


class Phase(Enum):
    """Stage of the direct solve an operation belongs to."""
    FORWARD = "forward"
    BACK = "back"


@dataclass(frozen=True)
class ForwardStep:
    """Working system after all rows below pivot column k were eliminated."""

    k: int
    pivot_row: int
    swapped: bool
    A: Matrix
    b: Vector

    def to_dict(self) -> dict[str, Any]:
        return {
            "k": self.k,
            "pivotRow": self.pivot_row,
            "swapped": self.swapped,
            "A": self.A.to_lists(),
            "b": self.b.to_list(),
        }


@dataclass(frozen=True)
class OperationStep:
    """One labelled operation and the augmented system right after it."""

    phase: Phase
    op: str
    A: Matrix
    b: Vector
    solve_index: Optional[int] = None   # set on back-substitution steps
    solve_value: Optional[float] = None

    @property
    def has_solve_value(self) -> bool:
        return self.solve_index is not None

    def to_dict(self) -> dict[str, Any]:
        return {
            "phase": self.phase.value,
            "op": self.op,
            "A": self.A.to_lists(),
            "b": self.b.to_list(),
            "hasSolveValue": self.has_solve_value,
            "solveIndex": self.solve_index if self.has_solve_value else 0,
            "solveValue": self.solve_value if self.has_solve_value else 0.0,
        }


@dataclass
class GaussianEliminationTrace:
    """Per-pivot snapshots plus the fine-grained operation log."""

    forward_steps: list[ForwardStep] = field(default_factory=list)
    operations: list[OperationStep] = field(default_factory=list)

    def clear(self) -> None:
        self.forward_steps.clear()
        self.operations.clear()

    @property
    def final_solution(self) -> Optional[Vector]:
        """Values carried by the back-substitution steps, or None if incomplete."""
        back = [op for op in self.operations if op.has_solve_value]
        if not back or len(back) != len(back[0].b):
            return None
        x = Vector.zeros(len(back))
        for op in back:
            x[op.solve_index] = op.solve_value
        return x

    def to_dict(self) -> dict[str, Any]:
        return {
            "forwardElimination": [s.to_dict() for s in self.forward_steps],
            "operations": [op.to_dict() for op in self.operations],
        }


def _fmt(value: float) -> str:
    return f"{value:.8g}"


def pivoted_solve(
    A: Matrix,
    b: Vector,
    *,
    rounding: RoundingPolicy = EXACT,
    pivot_tol: float = DEFAULT_SETTINGS.pivot_tol,
    trace: Optional[GaussianEliminationTrace] = None,
    context: str = "pivoted_solve",
) -> Vector:
    """
    Solve A x = b by forward elimination with partial pivoting and back substitution.

    Every multiplier, product, difference and quotient passes through
    ``rounding`` before it is stored, so a significant-digit policy
    reproduces hand calculation step by step. With ``EXACT`` this is plain
    double-precision elimination.

    Args:
        A: Square coefficient matrix (not modified)
        b: Right-hand side (not modified)
        rounding: Policy applied to each intermediate result
        pivot_tol: Pivots and diagonals below this magnitude are singular
        trace: Optional log filled with snapshots and operation labels
        context: Prefix for error messages

    Returns:
        Solution x

    Raises:
        DimensionMismatchError: if A is not n x n with n = len(b)
        SingularMatrixError: if a pivot column or diagonal is numerically zero
    """
    n = len(b)
    if A.shape != (n, n):
        raise DimensionMismatchError(
            f"{context}: dimension mismatch (A is {A.rows}x{A.cols}, b has {n} entries)"
        )

    a = A.to_numpy()
    v = b.to_numpy()

    def record(phase: Phase, op: str, index=None, value=None) -> None:
        if trace is not None:
            trace.operations.append(
                OperationStep(phase, op, Matrix.from_rows(a), Vector(v), index, value)
            )

    record(Phase.FORWARD, "Initial augmented matrix")

    for k in range(n):
        pivot_row = k
        max_abs = abs(a[k, k])
        for i in range(k + 1, n):
            candidate = abs(a[i, k])
            if candidate > max_abs:
                max_abs = candidate
                pivot_row = i

        if max_abs < pivot_tol:
            raise SingularMatrixError(f"{context}: singular matrix (zero pivot in column {k})")

        record(Phase.FORWARD, f"Choose pivot in column {k + 1}: R{pivot_row + 1}")

        swapped = pivot_row != k
        if swapped:
            a[[k, pivot_row]] = a[[pivot_row, k]]
            v[k], v[pivot_row] = v[pivot_row], v[k]
            record(Phase.FORWARD, f"Swap rows: R{k + 1} <-> R{pivot_row + 1}")

        pivot = a[k, k]
        for i in range(k + 1, n):
            m = rounding(a[i, k] / pivot)
            a[i, k] = 0.0
            for j in range(k + 1, n):
                a[i, j] = rounding(a[i, j] - rounding(m * a[k, j]))
            v[i] = rounding(v[i] - rounding(m * v[k]))
            record(Phase.FORWARD, f"R{i + 1} <- R{i + 1} - ({_fmt(m)}) * R{k + 1}")

        if trace is not None:
            trace.forward_steps.append(
                ForwardStep(k, pivot_row, swapped, Matrix.from_rows(a), Vector(v))
            )

    record(Phase.FORWARD, "Upper triangular matrix (after elimination)")

    x = np.zeros(n)
    for i in range(n - 1, -1, -1):
        acc = 0.0
        for j in range(i + 1, n):
            acc = rounding(acc + rounding(a[i, j] * x[j]))

        diag = a[i, i]
        if abs(diag) < pivot_tol:
            raise SingularMatrixError(f"{context}: singular matrix (zero diagonal in row {i})")

        x[i] = rounding(rounding(v[i] - acc) / diag)
        record(Phase.BACK, f"Back substitution: x{i + 1} = {_fmt(x[i])}", i, float(x[i]))

    record(Phase.BACK, "Final solution (after back substitution)")
    logger.debug("%s: solved %dx%d system with %r", context, n, n, rounding)
    return Vector(x)
