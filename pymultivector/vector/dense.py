"""
ArrayVector: a dense, NumPy-backed vector.

Satisfies the Vector and LocalVector protocols, so it can be stored in a
MultiVector and filled from arrays. It is the reference vector used by
the test suite and by anyone who wants batched operations on plain
NumPy data.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymultivector.core.exceptions import (
    InvalidNormSelectorError,
    SizeMismatchError,
    ValidationError,
)
from pymultivector.core.norms import NORM_L1, NORM_L2, NORM_LINF, ALL_NORMS
from pymultivector.core.protocols import LocalVector
from pymultivector.core.validation import check_array, check_1d, check_length


class ArrayVector:
    """
    Dense float64 vector.

    Construction:
        ArrayVector([1.0, 2.0, 3.0])
        ArrayVector.zeros(5)
        ArrayVector.full(5, 1.0)

    The constructor always copies its input, so no two ArrayVectors
    share storage unless the caller reaches into get_local().
    """

    def __init__(self, values: ArrayLike):
        arr = check_array(values, 'values')
        check_1d(arr, 'values')
        self._data: NDArray[np.float64] = np.array(arr, dtype=np.float64, copy=True)

    @classmethod
    def zeros(cls, n: int) -> ArrayVector:
        """Vector of n zeros."""
        return cls(np.zeros(n, dtype=np.float64))

    @classmethod
    def full(cls, n: int, value: float) -> ArrayVector:
        """Vector of n entries all equal to value."""
        return cls(np.full(n, value, dtype=np.float64))

    # === Vector capability ===

    def copy(self) -> ArrayVector:
        return ArrayVector(self._data)

    def zero(self) -> None:
        self._data[:] = 0.0

    def axpy(self, a: float, x: LocalVector) -> None:
        """In place: self += a * x."""
        self._data += float(a) * self._entries_of(x, 'x')

    def inner(self, x: LocalVector) -> float:
        return float(np.dot(self._data, self._entries_of(x, 'x')))

    def __imul__(self, a: float) -> ArrayVector:
        self._data *= float(a)
        return self

    def norm(self, norm_type: str) -> float:
        """
        Named norm.

        Args:
            norm_type: One of 'l1', 'l2', 'linf'

        Raises:
            InvalidNormSelectorError: For any other selector
        """
        if norm_type == NORM_L2:
            return float(np.linalg.norm(self._data))
        if norm_type == NORM_L1:
            return float(np.sum(np.abs(self._data)))
        if norm_type == NORM_LINF:
            if self._data.size == 0:
                return 0.0
            return float(np.max(np.abs(self._data)))
        raise InvalidNormSelectorError(
            f"Unknown norm type: {norm_type!r}. Must be one of {ALL_NORMS}.",
            norm_type=norm_type,
            supported=ALL_NORMS,
        )

    # === Local array access ===

    def size(self) -> int:
        return int(self._data.shape[0])

    def get_local(self) -> NDArray[np.floating[Any]]:
        """Return a copy of the entries."""
        return self._data.copy()

    def set_local(self, values: ArrayLike) -> None:
        """Overwrite the entries from an array of matching length."""
        arr = check_array(values, 'values')
        check_1d(arr, 'values')
        check_length(arr, self.size(), 'values')
        self._data[:] = arr

    # === Helpers ===

    def _entries_of(self, x, name: str) -> NDArray[np.floating[Any]]:
        if isinstance(x, ArrayVector):
            other = x._data
        elif isinstance(x, LocalVector):
            other = np.asarray(x.get_local(), dtype=np.float64)
        else:
            raise ValidationError(
                f"{name}: expected a vector with local array access, got {type(x).__name__}"
            )
        if other.shape[0] != self._data.shape[0]:
            raise SizeMismatchError(
                f"{name}: vector of size {other.shape[0]} does not match size {self._data.shape[0]}",
                name=name,
                expected=int(self._data.shape[0]),
                actual=int(other.shape[0]),
            )
        return other

    def __len__(self) -> int:
        return self.size()

    def __repr__(self) -> str:
        return f"ArrayVector(size={self.size()})"
