"""Dense row-major matrix."""

from numbers import Integral
from typing import Sequence, Union

import numpy as np
from numpy.typing import NDArray

from nmkit.core.errors import DimensionMismatchError
from nmkit.core.vector import Vector


class Matrix:
    """
    rows x cols matrix of reals, stored row-major in a float64 array.

    ``m[i, j]`` is bounds-checked on ``0 <= i < rows``, ``0 <= j < cols``.
    """

    __slots__ = ("_data",)

    def __init__(self, rows: int, cols: int):
        if rows < 0 or cols < 0:
            raise ValueError(f"Matrix shape must be non-negative, got ({rows}, {cols})")
        self._data = np.zeros((int(rows), int(cols)), dtype=np.float64)

    @classmethod
    def from_rows(cls, rows: Union[Sequence[Sequence[float]], NDArray]) -> "Matrix":
        """Build a matrix from nested sequences or a 2-D array."""
        try:
            data = np.array(rows, dtype=np.float64, copy=True)
        except ValueError as exc:
            raise DimensionMismatchError(f"Matrix rows are ragged: {exc}") from exc
        if data.ndim == 1 and data.size == 0:
            data = data.reshape(0, 0)
        if data.ndim != 2:
            raise DimensionMismatchError(
                f"Matrix requires 2-D data, got shape {data.shape}"
            )
        m = cls.__new__(cls)
        m._data = data
        return m

    @classmethod
    def identity(cls, n: int) -> "Matrix":
        """n x n identity."""
        return cls.from_rows(np.eye(n))

    @property
    def rows(self) -> int:
        return self._data.shape[0]

    @property
    def cols(self) -> int:
        return self._data.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        return self._data.shape

    def is_square(self) -> bool:
        return self.rows == self.cols

    def _check_index(self, key) -> tuple[int, int]:
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError("Matrix index must be a pair (i, j)")
        i, j = key
        for idx in (i, j):
            if isinstance(idx, bool) or not isinstance(idx, Integral):
                raise TypeError(
                    f"Matrix index must be an integer, got {type(idx).__name__}"
                )
        if not (0 <= i < self.rows and 0 <= j < self.cols):
            raise IndexError(
                f"Matrix index ({i}, {j}) out of range for shape {self.shape}"
            )
        return int(i), int(j)

    def __getitem__(self, key) -> float:
        return float(self._data[self._check_index(key)])

    def __setitem__(self, key, value: float) -> None:
        self._data[self._check_index(key)] = value

    def __array__(self, dtype=None, copy=None):
        if dtype is None:
            return self._data.copy()
        return self._data.astype(dtype)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    __hash__ = None

    def __repr__(self) -> str:
        return f"Matrix.from_rows({self.to_lists()!r})"

    def multiply(self, x: Vector) -> Vector:
        """
        Matrix-vector product.

        Raises:
            DimensionMismatchError: if ``len(x) != cols``
        """
        if len(x) != self.cols:
            raise DimensionMismatchError(
                f"Matrix.multiply: vector of size {len(x)} for matrix with {self.cols} columns"
            )
        return Vector(self._data @ x.to_numpy())

    def __matmul__(self, x):
        if isinstance(x, Vector):
            return self.multiply(x)
        return NotImplemented

    def _check_row(self, i) -> int:
        if isinstance(i, bool) or not isinstance(i, Integral):
            raise TypeError(f"Matrix row index must be an integer, got {type(i).__name__}")
        if not 0 <= i < self.rows:
            raise IndexError(f"Matrix row {i} out of range [0, {self.rows})")
        return int(i)

    def row(self, i: int) -> Vector:
        """Copy of row i."""
        return Vector(self._data[self._check_row(i)])

    def swap_rows(self, i: int, k: int) -> None:
        """Exchange rows i and k in place."""
        i, k = self._check_row(i), self._check_row(k)
        self._data[[i, k]] = self._data[[k, i]]

    def copy(self) -> "Matrix":
        return Matrix.from_rows(self._data)

    def to_lists(self) -> list[list[float]]:
        return [[float(v) for v in row] for row in self._data]

    def to_numpy(self) -> NDArray:
        """Copy of the backing array."""
        return self._data.copy()
