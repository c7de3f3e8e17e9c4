"""
Batched operator application and dense-matrix products on MultiVectors.

    mat_mv_mult(A, x, y)       y[i] = A x[i]
    mat_mv_transpmult(A, x, y) y[i] = A^T x[i]
    mv_dsmat_mult(X, A, Y)     Y = X A for a dense (X.nvec(), Y.nvec()) matrix
    normal(sigma, mv, rng)     fill with N(0, sigma^2) samples
    to_array(mv), from_array(array)
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymultivector.core.exceptions import SizeMismatchError, ValidationError
from pymultivector.core.protocols import LocalVector, Operator
from pymultivector.core.validation import check_array, check_2d, check_finite
from pymultivector.multivector.multivector import MultiVector
from pymultivector.vector.dense import ArrayVector


def _check_same_nvec(x: MultiVector, y: MultiVector) -> None:
    if x.nvec() != y.nvec():
        raise SizeMismatchError(
            f"x and y have non-matching number of vectors ({x.nvec()} vs {y.nvec()})",
            name='y',
            expected=x.nvec(),
            actual=y.nvec(),
        )


def _check_multivectors(**named) -> None:
    for name, mv in named.items():
        if not isinstance(mv, MultiVector):
            raise ValidationError(f"{name}: expected a MultiVector, got {type(mv).__name__}")


def mat_mv_mult(A, x: MultiVector, y: MultiVector) -> None:
    """
    Apply A to every vector of x: y[i] = A x[i].

    Operators that know how to act on a whole multivector at once may
    provide mat_mv_mult(x, y); it is used in preference to the loop.
    """
    _check_multivectors(x=x, y=y)
    _check_same_nvec(x, y)
    if hasattr(A, 'mat_mv_mult'):
        A.mat_mv_mult(x, y)
        return
    if not isinstance(A, Operator):
        raise ValidationError(f"A: operator must provide mult(x, y), got {type(A).__name__}")

    for xi, yi in zip(x, y):
        A.mult(xi, yi)


def mat_mv_transpmult(A, x: MultiVector, y: MultiVector) -> None:
    """Apply the transpose of A to every vector of x: y[i] = A^T x[i]."""
    _check_multivectors(x=x, y=y)
    _check_same_nvec(x, y)
    if not hasattr(A, 'transpmult'):
        raise ValidationError(
            f"A: operator must provide transpmult(x, y), got {type(A).__name__}"
        )

    for xi, yi in zip(x, y):
        A.transpmult(xi, yi)


def mv_dsmat_mult(X: MultiVector, A: ArrayLike, Y: MultiVector) -> None:
    """
    Multivector times dense matrix: Y = X A.

    Each Y[j] is overwritten with sum_i A[i, j] * X[i].

    Args:
        X: Multivector with m vectors
        A: Dense matrix, shape (m, n)
        Y: Multivector with n vectors, same layout as X
    """
    _check_multivectors(X=X, Y=Y)
    if X.shares_storage_with(Y):
        raise ValidationError("Y: must not share storage with X")
    A = check_array(A, 'A')
    check_2d(A, 'A')
    check_finite(A, 'A')
    if A.shape != (X.nvec(), Y.nvec()):
        raise SizeMismatchError(
            f"A: expected shape ({X.nvec()}, {Y.nvec()}), got {A.shape}",
            name='A',
            expected=X.nvec() * Y.nvec(),
            actual=int(A.size),
        )

    for j, yj in enumerate(Y):
        yj.zero()
        X.reduce(yj, A[:, j])


def normal(sigma: float, mv: MultiVector, rng: np.random.Generator | None = None) -> None:
    """
    Overwrite every vector of mv with independent N(0, sigma^2) samples.

    Vectors are filled in index order from a single generator, so a
    seeded rng gives reproducible multivectors.

    Args:
        sigma: Standard deviation, >= 0
        mv: Multivector of LocalVectors
        rng: numpy Generator; a fresh default_rng() if None
    """
    _check_multivectors(mv=mv)
    if sigma < 0:
        raise ValidationError(f"sigma: must be non-negative, got {sigma}")
    for i, vi in enumerate(mv):
        if not isinstance(vi, LocalVector):
            raise ValidationError(
                f"mv[{i}]: random filling needs local array access, got {type(vi).__name__}"
            )
    if rng is None:
        rng = np.random.default_rng()

    for vi in mv:
        vi.set_local(sigma * rng.standard_normal(vi.size()))


def to_array(mv: MultiVector) -> NDArray[np.floating[Any]]:
    """
    Stack the vectors of mv as rows of a (nvec, n) array.

    An empty multivector gives an array of shape (0, 0).
    """
    _check_multivectors(mv=mv)
    rows = []
    for i, vi in enumerate(mv):
        if not isinstance(vi, LocalVector):
            raise ValidationError(
                f"mv[{i}]: array conversion needs local array access, got {type(vi).__name__}"
            )
        rows.append(np.asarray(vi.get_local(), dtype=np.float64))
    if not rows:
        return np.empty((0, 0), dtype=np.float64)
    return np.vstack(rows)


def from_array(array: ArrayLike) -> MultiVector:
    """
    Build a multivector of ArrayVectors from the rows of a 2D array.
    """
    arr = check_array(array, 'array')
    check_2d(arr, 'array')
    n_vec, n = arr.shape

    mv = MultiVector(ArrayVector.zeros(n), n_vec)
    for i in range(n_vec):
        mv[i].set_local(arr[i])
    return mv
