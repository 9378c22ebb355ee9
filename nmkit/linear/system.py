"""Coefficient matrix paired with a right-hand side."""

import numpy as np

from nmkit.core.errors import DimensionMismatchError
from nmkit.core.matrix import Matrix
from nmkit.core.vector import Vector


class LinearSystem:
    """
    Immutable pair (A, b).

    Shapes are not checked here; each solver validates that A is n x n
    with n = len(b) before use.
    """

    __slots__ = ("_A", "_b")

    def __init__(self, A: Matrix, b: Vector):
        self._A = A.copy()
        self._b = b.copy()

    @property
    def size(self) -> int:
        return len(self._b)

    @property
    def matrix(self) -> Matrix:
        """Copy of A."""
        return self._A.copy()

    @property
    def rhs(self) -> Vector:
        """Copy of b."""
        return self._b.copy()

    def is_consistent(self) -> bool:
        """True if A is square and matches b's length."""
        return self._A.shape == (self.size, self.size)

    def residual_inf(self, x: Vector) -> float:
        """Infinity norm of A x - b."""
        if not self.is_consistent() or len(x) != self.size:
            raise DimensionMismatchError(
                f"LinearSystem.residual_inf: A is {self._A.rows}x{self._A.cols}, "
                f"b has {self.size} entries, x has {len(x)}"
            )
        r = self._A.to_numpy() @ np.asarray(x) - self._b.to_numpy()
        return float(np.max(np.abs(r))) if r.size else 0.0

    def __repr__(self) -> str:
        return f"LinearSystem(A={self._A!r}, b={self._b!r})"
