"""
Boundary adapters for MultiVector.

These functions are the host-facing call surface: they accept plain
Python/NumPy arguments, allocate the float64 result buffers, and
dispatch the overloaded forms (scalar vs. per-slice axpy, single-slot
vs. per-slice scale). Coefficient arrays are validated here as well as
in the core, so the core stays safe to call directly.

Public API:
    empty(), from_vector(v, nvec), copy_of(mv)
    nvec(mv), set_size_from_vector(mv, v, nvec)
    dot(mv, target)       - (N,) or flat (size1*size2,) / (N*N,) array
    reduce(mv, v, alpha)  - v += sum_i alpha[i] * mv[i]
    axpy(mv, a, y)        - broadcast or per-slice, chosen by argument types
    scale(mv, k, a) / scale(mv, a)
    zero(mv), norm(mv, norm_type), swap(a, b)
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymultivector.core.exceptions import ValidationError
from pymultivector.core.protocols import Vector
from pymultivector.core.validation import check_array, check_1d, check_finite
from pymultivector.multivector.multivector import MultiVector


def _coefficients(values: ArrayLike, name: str) -> NDArray[np.floating[Any]]:
    """Validate a coefficient array and return it as contiguous float64."""
    arr = check_array(values, name)
    check_1d(arr, name)
    check_finite(arr, name)
    return np.ascontiguousarray(arr, dtype=np.float64)


def _scalar(value, name: str) -> float:
    """Validate a finite real scalar; 0-d arrays are accepted."""
    arr = check_array(value, name)
    if arr.ndim != 0:
        raise ValidationError(f"{name}: expected a scalar, got ndim={arr.ndim}")
    check_finite(arr, name)
    return float(arr)


def _check_multivector(mv, name: str = 'mv') -> MultiVector:
    if not isinstance(mv, MultiVector):
        raise ValidationError(f"{name}: expected a MultiVector, got {type(mv).__name__}")
    return mv


# === Construction ===

def empty() -> MultiVector:
    """A multivector with no vectors, not yet sized."""
    return MultiVector()


def from_vector(v: Vector, nvec: int) -> MultiVector:
    """nvec zeroed copies of the template vector v."""
    return MultiVector(v, nvec)


def copy_of(mv: MultiVector) -> MultiVector:
    """Deep copy of mv."""
    return MultiVector(_check_multivector(mv))


def nvec(mv: MultiVector) -> int:
    """Number of vectors in the multivector."""
    return _check_multivector(mv).nvec()


def set_size_from_vector(mv: MultiVector, v: Vector, nvec: int) -> None:
    """Initialize mv from template v and the number of vectors nvec."""
    _check_multivector(mv).set_size_from_vector(v, nvec)


# === Inner products ===

def dot(mv: MultiVector, target: Vector | MultiVector) -> NDArray[np.float64]:
    """
    Inner products of every vector in mv with target.

    Parameters
    ----------
    mv : MultiVector
    target : vector or MultiVector
        A vector gives an array of shape (mv.nvec(),). A multivector
        gives a flat array of shape (mv.nvec() * target.nvec(),) laid out
        row-major by mv index; reshape to (size1, size2) for a matrix.
        Passing mv itself gives the symmetric Gram matrix, flat (N*N,).

    Returns
    -------
    numpy.ndarray of float64
    """
    _check_multivector(mv)
    if isinstance(target, MultiVector):
        out = np.empty(mv.nvec() * target.nvec(), dtype=np.float64)
        mv.dot_multivector(target, out)
    else:
        out = np.empty(mv.nvec(), dtype=np.float64)
        mv.dot_vector(target, out)
    return out


# === Updates ===

def reduce(mv: MultiVector, v: Vector, alpha: ArrayLike) -> None:
    """Computes v += sum_i alpha[i] * mv[i]."""
    _check_multivector(mv).reduce(v, _coefficients(alpha, 'alpha'))


def axpy(mv: MultiVector, a, y) -> None:
    """
    Batched axpy, dispatched on argument types.

    axpy(mv, a, y) with scalar a and vector y:
        mv[k] += a * y for k in range(mv.nvec())
    axpy(mv, a, y) with array a and MultiVector y:
        mv[k] += a[k] * y[k] for k in range(mv.nvec())
    """
    _check_multivector(mv)
    if isinstance(y, MultiVector):
        if np.ndim(a) != 1:
            raise ValidationError(
                f"a: per-slice axpy with a MultiVector needs a 1D coefficient array, "
                f"got ndim={np.ndim(a)}"
            )
        mv.axpy_slices(_coefficients(a, 'a'), y)
    else:
        if np.ndim(a) != 0:
            raise ValidationError(
                f"a: broadcast axpy with a single vector needs a scalar, got ndim={np.ndim(a)}"
            )
        mv.axpy(_scalar(a, 'a'), y)


def scale(mv: MultiVector, *args) -> None:
    """
    Batched scaling.

    scale(mv, k, a): mv[k] *= a
    scale(mv, a):    mv[k] *= a[k] for k in range(mv.nvec())
    """
    _check_multivector(mv)
    if len(args) == 2:
        k, a = args
        mv.scale(k, _scalar(a, 'a'))
    elif len(args) == 1:
        mv.scale_slices(_coefficients(args[0], 'a'))
    else:
        raise ValidationError(
            f"scale: expected (k, a) or (a,), got {len(args)} arguments"
        )


def zero(mv: MultiVector) -> None:
    """Zero out all entries of the multivector."""
    _check_multivector(mv).zero()


# === Norms ===

def norm(mv: MultiVector, norm_type: str) -> NDArray[np.float64]:
    """
    Norm of each vector in the multivector separately.

    Returns
    -------
    numpy.ndarray of float64, shape (mv.nvec(),)
    """
    _check_multivector(mv)
    out = np.empty(mv.nvec(), dtype=np.float64)
    mv.norm_all(norm_type, out)
    return out


# === Ownership ===

def swap(a: MultiVector, b: MultiVector) -> None:
    """Swap the contents of a and b without copying."""
    _check_multivector(a, 'a').swap(_check_multivector(b, 'b'))
