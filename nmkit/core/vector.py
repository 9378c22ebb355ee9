"""Dense fixed-length vector."""

from numbers import Integral, Real
from typing import Iterable, Iterator, Union

import numpy as np
from numpy.typing import NDArray

from nmkit.core.errors import DimensionMismatchError


class Vector:
    """
    Fixed-length sequence of reals backed by a float64 array.

    The length is fixed at construction. Element access is bounds-checked
    on ``[0, size)``; negative indices are rejected rather than wrapped.
    """

    __slots__ = ("_data",)

    def __init__(self, values: Union[Iterable[float], NDArray, int] = ()):
        """
        Args:
            values: Components, or an integer length for a zero vector.
        """
        if isinstance(values, Integral) and not isinstance(values, bool):
            if values < 0:
                raise ValueError(f"Vector size must be non-negative, got {values}")
            data = np.zeros(int(values), dtype=np.float64)
        else:
            try:
                data = np.array(values, dtype=np.float64, copy=True)
            except ValueError as exc:
                raise DimensionMismatchError(f"Vector data is ragged: {exc}") from exc
            if data.ndim != 1:
                raise DimensionMismatchError(
                    f"Vector requires 1-D data, got shape {data.shape}"
                )
        self._data = data

    @classmethod
    def zeros(cls, n: int) -> "Vector":
        """Zero-filled vector of length n."""
        return cls(n)

    @property
    def size(self) -> int:
        return self._data.shape[0]

    def __len__(self) -> int:
        return self._data.shape[0]

    def _check_index(self, i) -> int:
        if isinstance(i, bool) or not isinstance(i, Integral):
            raise TypeError(f"Vector index must be an integer, got {type(i).__name__}")
        if not 0 <= i < self._data.shape[0]:
            raise IndexError(f"Vector index {i} out of range [0, {self._data.shape[0]})")
        return int(i)

    def __getitem__(self, i) -> float:
        return float(self._data[self._check_index(i)])

    def __setitem__(self, i, value: float) -> None:
        self._data[self._check_index(i)] = value

    def __iter__(self) -> Iterator[float]:
        return (float(v) for v in self._data)

    def __array__(self, dtype=None, copy=None):
        if dtype is None:
            return self._data.copy()
        return self._data.astype(dtype)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._data.shape == other._data.shape and bool(
            np.array_equal(self._data, other._data)
        )

    __hash__ = None

    def __repr__(self) -> str:
        return f"Vector({self.to_list()!r})"

    def _check_same_size(self, other: "Vector", op: str) -> None:
        if len(other) != len(self):
            raise DimensionMismatchError(
                f"Vector {op}: sizes {len(self)} and {len(other)} differ"
            )

    def __add__(self, other: "Vector") -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_same_size(other, "addition")
        return Vector(self._data + other._data)

    def __sub__(self, other: "Vector") -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_same_size(other, "subtraction")
        return Vector(self._data - other._data)

    def __neg__(self) -> "Vector":
        return Vector(-self._data)

    def __mul__(self, scalar: float) -> "Vector":
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vector(self._data * float(scalar))

    __rmul__ = __mul__

    def norm_inf(self) -> float:
        """Maximum absolute component (0.0 for an empty vector)."""
        if self._data.size == 0:
            return 0.0
        return float(np.max(np.abs(self._data)))

    def is_finite(self) -> bool:
        return bool(np.all(np.isfinite(self._data)))

    def copy(self) -> "Vector":
        return Vector(self._data)

    def to_list(self) -> list[float]:
        return [float(v) for v in self._data]

    def to_numpy(self) -> NDArray:
        """Copy of the backing array."""
        return self._data.copy()
