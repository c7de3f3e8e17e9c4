"""
MultiVector: an ordered collection of N vectors of identical layout.

The container owns its N vector slots and implements every batched
operation as a fixed-order loop of single-vector operations, so results
are reproducible call to call. Output and coefficient buffers are
supplied by the caller; this module fills and reads them but never
allocates them (see multivector.bindings for the allocating adapters).

Error policy:
    Every argument is validated before the first slot is touched, so a
    rejected call leaves the multivector unchanged. Errors raised by the
    vectors themselves in the middle of a loop propagate immediately and
    leave the earlier slots already updated; there is no rollback.

Thread safety:
    None. Concurrent use of one instance needs external locking.
"""

from __future__ import annotations

from typing import Any, Iterator
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymultivector.core.exceptions import (
    UninitializedVectorError,
    ValidationError,
)
from pymultivector.core.protocols import Vector
from pymultivector.core.validation import (
    check_1d,
    check_array,
    check_index,
    check_length,
    check_nonnegative_count,
    check_output_buffer,
)


class MultiVector:
    """
    Ordered collection of vectors supporting batched linear algebra.

    Construction:
        MultiVector()               # empty, not yet sized
        MultiVector(v, nvec)        # nvec zeroed copies of template v
        MultiVector(other)          # deep copy of another multivector

    Slots are accessed by 0-based index. mv[i] returns the stored vector
    itself, so in-place updates through the handle are visible in the
    multivector. The handle stays valid until the slot is reassigned, the
    multivector is resized, or it is swapped away.
    """

    def __init__(self, source: Vector | MultiVector | None = None, nvec: int | None = None):
        self._mv: list[Any] = []
        self._initialized = False

        if source is None:
            if nvec is not None:
                raise ValidationError("nvec: given without a template vector")
        elif isinstance(source, MultiVector):
            if nvec is not None:
                raise ValidationError("nvec: not accepted when copying a multivector")
            self._mv = [vj.copy() for vj in source._mv]
            self._initialized = source._initialized
        else:
            if nvec is None:
                raise ValidationError("nvec: required when constructing from a template vector")
            self.set_size_from_vector(source, nvec)

    # === Sizing ===

    def set_size_from_vector(self, v: Vector, nvec: int) -> None:
        """
        Discard all slots and reallocate nvec zeroed copies of v.

        Args:
            v: Template vector; only its layout is used
            nvec: Number of vectors, >= 0
        """
        _check_vector(v, 'v')
        nvec = check_nonnegative_count(nvec, 'nvec')

        slots = []
        for _ in range(nvec):
            vj = v.copy()
            vj.zero()
            slots.append(vj)

        self._mv = slots
        self._initialized = True

    def nvec(self) -> int:
        """Number of vectors in the multivector."""
        return len(self._mv)

    @property
    def is_initialized(self) -> bool:
        """False only for a default-constructed multivector never sized."""
        return self._initialized

    # === Access ===

    def __len__(self) -> int:
        return len(self._mv)

    def __getitem__(self, i: int) -> Vector:
        return self._mv[check_index(i, len(self._mv), 'i')]

    def __setitem__(self, i: int, v: Vector) -> None:
        """Store an independent copy of v in slot i."""
        i = check_index(i, len(self._mv), 'i')
        _check_vector(v, 'v')
        self._mv[i] = v.copy()

    def __iter__(self) -> Iterator[Vector]:
        return iter(self._mv)

    def shares_storage_with(self, other: MultiVector) -> bool:
        """
        True if both multivectors hold the very same slot sequence.

        This is identity, not equality: a copy never shares storage with
        its original, even when every value agrees.
        """
        return isinstance(other, MultiVector) and other._mv is self._mv

    # === Copying ===

    def copy(self) -> MultiVector:
        """Deep copy; every slot is copied through the vector's own copy()."""
        return MultiVector(self)

    def __copy__(self) -> MultiVector:
        return MultiVector(self)

    def __deepcopy__(self, memo) -> MultiVector:
        result = MultiVector(self)
        memo[id(self)] = result
        return result

    # === Inner products ===

    def dot_vector(self, v: Vector, out: NDArray[np.float64]) -> None:
        """
        Fill out[i] = <self[i], v>.

        Args:
            v: Vector to take inner products against
            out: Caller-allocated float64 buffer of length nvec()
        """
        self._require_initialized('dot_vector')
        _check_vector(v, 'v')
        check_output_buffer(out, len(self._mv))

        for i, vi in enumerate(self._mv):
            out[i] = vi.inner(v)

    def dot_multivector(self, other: MultiVector, out: NDArray[np.float64]) -> None:
        """
        Fill out with the inner products against another multivector.

        General case: out[i*size2 + j] = <self[i], other[j]>, filled in
        that nested-loop order (row-major by self index).

        If other is this very multivector (same storage, not merely equal
        values) the symmetric Gram matrix is computed by dot_self instead.

        Args:
            other: Multivector to take inner products against
            out: Caller-allocated float64 buffer of length
                 nvec() * other.nvec()
        """
        self._require_initialized('dot_multivector')
        if not isinstance(other, MultiVector):
            raise ValidationError(
                f"other: expected a MultiVector, got {type(other).__name__}"
            )
        if self.shares_storage_with(other):
            self.dot_self(out)
            return

        other._require_initialized('dot_multivector')
        check_output_buffer(out, len(self._mv) * len(other._mv))

        k = 0
        for vi in self._mv:
            for vj in other._mv:
                out[k] = vi.inner(vj)
                k += 1

    def dot_self(self, out: NDArray[np.float64]) -> None:
        """
        Fill out with the N x N Gram matrix of self against self.

        One inner product per unordered pair {i, j}, written to both
        out[i + N*j] and out[j + N*i], so the result is exactly symmetric.

        Args:
            out: Caller-allocated float64 buffer of length nvec()**2
        """
        self._require_initialized('dot_self')
        s = len(self._mv)
        check_output_buffer(out, s * s)

        mv = self._mv
        for i in range(s):
            out[i + s * i] = mv[i].inner(mv[i])
            for j in range(i):
                out[i + s * j] = out[j + s * i] = mv[i].inner(mv[j])

    # === Updates ===

    def reduce(self, v: Vector, alpha: ArrayLike) -> None:
        """
        In place: v += sum_i alpha[i] * self[i].

        Accumulates by axpy in index order. self is not modified.

        Args:
            v: Vector to accumulate into
            alpha: Coefficients, length nvec()
        """
        self._require_initialized('reduce')
        _check_vector(v, 'v')
        alpha = self._coefficients(alpha, 'alpha')

        for ai, vi in zip(alpha, self._mv):
            v.axpy(float(ai), vi)

    def axpy(self, a: float, y: Vector) -> None:
        """Assign self[k] += a * y for every k."""
        self._require_initialized('axpy')
        a = _check_scalar(a, 'a')
        _check_vector(y, 'y')

        for vi in self._mv:
            vi.axpy(a, y)

    def axpy_slices(self, a: ArrayLike, y: MultiVector) -> None:
        """
        Assign self[k] += a[k] * y[k] for every k.

        Args:
            a: Coefficients, length nvec()
            y: Multivector with nvec() vectors
        """
        self._require_initialized('axpy_slices')
        a = self._coefficients(a, 'a')
        if not isinstance(y, MultiVector):
            raise ValidationError(f"y: expected a MultiVector, got {type(y).__name__}")
        y._require_initialized('axpy_slices')
        check_length(y, len(self._mv), 'y')

        for ak, vk, yk in zip(a, self._mv, y._mv):
            vk.axpy(float(ak), yk)

    def scale(self, k: int, a: float) -> None:
        """Assign self[k] *= a."""
        self._require_initialized('scale')
        k = check_index(k, len(self._mv), 'k')
        a = _check_scalar(a, 'a')

        # Slot is never rebound, so handles from self[k] stay valid
        self._mv[k].__imul__(a)

    def scale_slices(self, a: ArrayLike) -> None:
        """Assign self[k] *= a[k] for every k."""
        self._require_initialized('scale_slices')
        a = self._coefficients(a, 'a')

        for k in range(len(self._mv)):
            self._mv[k].__imul__(float(a[k]))

    def zero(self) -> None:
        """Zero out all entries of the multivector."""
        for vi in self._mv:
            vi.zero()

    # === Norms ===

    def norm_all(self, norm_type: str, out: NDArray[np.float64]) -> None:
        """
        Fill out[i] = self[i].norm(norm_type).

        The selector is passed to the vectors untouched; an unknown name
        is rejected by the vector type itself.
        """
        self._require_initialized('norm_all')
        check_output_buffer(out, len(self._mv))

        for i, vi in enumerate(self._mv):
            out[i] = vi.norm(norm_type)

    # === Ownership ===

    def swap(self, other: MultiVector) -> None:
        """Exchange the slot sequences of self and other. No copies are made."""
        if not isinstance(other, MultiVector):
            raise ValidationError(f"other: expected a MultiVector, got {type(other).__name__}")
        self._mv, other._mv = other._mv, self._mv
        self._initialized, other._initialized = other._initialized, self._initialized

    # === Allocating conveniences ===

    def dot(self, target: Vector | MultiVector) -> NDArray[np.float64]:
        """Inner products with a vector or multivector, as a new flat array."""
        from pymultivector.multivector import bindings
        return bindings.dot(self, target)

    def norm(self, norm_type: str) -> NDArray[np.float64]:
        """Norm of each vector separately, as a new array."""
        from pymultivector.multivector import bindings
        return bindings.norm(self, norm_type)

    def b_orthogonalize(self, B):
        """B-orthonormalize self in place; see orthogonalize.b_orthogonalize."""
        from pymultivector.multivector.orthogonalize import b_orthogonalize
        return b_orthogonalize(self, B)

    def orthogonalize(self):
        """Orthonormalize self in place; see orthogonalize.orthogonalize."""
        from pymultivector.multivector.orthogonalize import orthogonalize
        return orthogonalize(self)

    # === Helpers ===

    def _require_initialized(self, operation: str) -> None:
        if not self._initialized:
            raise UninitializedVectorError(
                f"{operation}: multivector was never sized; "
                f"construct it from a template vector or call set_size_from_vector()",
                operation=operation,
            )

    def _coefficients(self, values: ArrayLike, name: str) -> NDArray[np.floating[Any]]:
        arr = check_array(values, name)
        check_1d(arr, name)
        check_length(arr, len(self._mv), name)
        return arr

    def __repr__(self) -> str:
        if not self._initialized:
            return "MultiVector(uninitialized)"
        return f"MultiVector(nvec={len(self._mv)})"


def _check_vector(v, name: str) -> None:
    if not isinstance(v, Vector):
        raise ValidationError(
            f"{name}: expected a vector providing copy, zero, axpy, inner, "
            f"*= and norm, got {type(v).__name__}"
        )


def _check_scalar(a, name: str) -> float:
    if isinstance(a, (bool, np.bool_)) or not isinstance(a, (int, float, np.integer, np.floating)):
        raise ValidationError(f"{name}: expected a real scalar, got {type(a).__name__}")
    return float(a)
