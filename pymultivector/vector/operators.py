"""
MatrixOperator: applies a matrix to LocalVectors.

Wraps a dense array, a SciPy sparse matrix, or any SciPy LinearOperator
through scipy.sparse.linalg.aslinearoperator, and exposes the
mult/transpmult pair expected by the batched operator routines.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray
from scipy.sparse.linalg import aslinearoperator

from pymultivector.core.exceptions import SizeMismatchError, ValidationError
from pymultivector.core.protocols import LocalVector
from pymultivector.core.validation import check_array, check_2d
from pymultivector.vector.dense import ArrayVector


class MatrixOperator:
    """
    Linear operator y = A x over LocalVectors.

    Construction:
        MatrixOperator(np.eye(5))
        MatrixOperator(scipy.sparse.diags([1.0, 2.0, 3.0]))
    """

    def __init__(self, A):
        if isinstance(A, (list, tuple)):
            A = check_array(A, 'A')
            check_2d(A, 'A')
        try:
            self._op = aslinearoperator(A)
        except (TypeError, ValueError) as e:
            raise ValidationError(f"A: cannot be used as a linear operator: {e}") from e

    @property
    def shape(self) -> tuple[int, int]:
        return tuple(int(s) for s in self._op.shape)

    def init_vector(self, dim: int) -> ArrayVector:
        """
        Zero vector compatible with the range (dim=0) or domain (dim=1).
        """
        if dim not in (0, 1):
            raise ValidationError(f"dim: expected 0 or 1, got {dim}")
        return ArrayVector.zeros(self.shape[dim])

    def mult(self, x: LocalVector, y: LocalVector) -> None:
        """Overwrite y with A x."""
        n_rows, n_cols = self.shape
        xv = _local_entries(x, n_cols, 'x')
        _local_entries(y, n_rows, 'y')
        y.set_local(np.asarray(self._op.matvec(xv), dtype=np.float64).ravel())

    def transpmult(self, x: LocalVector, y: LocalVector) -> None:
        """Overwrite y with A^T x."""
        n_rows, n_cols = self.shape
        xv = _local_entries(x, n_rows, 'x')
        _local_entries(y, n_cols, 'y')
        y.set_local(np.asarray(self._op.rmatvec(xv), dtype=np.float64).ravel())

    def __repr__(self) -> str:
        return f"MatrixOperator(shape={self.shape})"


def _local_entries(v, expected: int, name: str) -> NDArray[np.floating[Any]]:
    """Entries of v, after checking v exposes them and has the right size."""
    if not isinstance(v, LocalVector):
        raise ValidationError(
            f"{name}: expected a vector with local array access, got {type(v).__name__}"
        )
    size = v.size()
    if size != expected:
        raise SizeMismatchError(
            f"{name}: vector of size {size} does not match operator dimension {expected}",
            name=name,
            expected=expected,
            actual=size,
        )
    return np.asarray(v.get_local(), dtype=np.float64)
