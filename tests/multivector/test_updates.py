"""
Tests for in-place batched updates: reduce, axpy, axpy_slices, scale,
scale_slices, zero.

Validates:
    - Arithmetic against NumPy references
    - Size mismatches raise before any slot is touched
    - Failures raised by a vector mid-loop propagate and leave earlier
      slots updated
"""

import numpy as np
import pytest

from pymultivector import ArrayVector, MultiVector
from pymultivector.core.exceptions import (
    IndexOutOfRangeError,
    SizeMismatchError,
    UninitializedVectorError,
    ValidationError,
)
from pymultivector.multivector import from_array, to_array


# ═══════════════════════════════════════════════════════════════════════
# reduce
# ═══════════════════════════════════════════════════════════════════════


class TestReduce:

    @pytest.mark.parametrize("k", [0, 1, 2])
    def test_one_hot_adds_single_slot(self, random_mv, random_rows, rng, k):
        v0 = rng.standard_normal(6)
        v = ArrayVector(v0)
        alpha = np.zeros(3)
        alpha[k] = 1.0
        random_mv.reduce(v, alpha)
        np.testing.assert_array_equal(v.get_local(), v0 + random_rows[k])

    def test_linear_combination(self, random_mv, random_rows):
        v = ArrayVector.zeros(6)
        alpha = np.array([0.5, -1.0, 2.0])
        random_mv.reduce(v, alpha)
        np.testing.assert_allclose(v.get_local(), alpha @ random_rows, rtol=1e-12, atol=1e-12)

    def test_self_not_modified(self, random_mv, random_rows):
        random_mv.reduce(ArrayVector.zeros(6), [1.0, 1.0, 1.0])
        np.testing.assert_array_equal(to_array(random_mv), random_rows)

    def test_alpha_length_mismatch(self, random_mv):
        v = ArrayVector.full(6, 1.0)
        with pytest.raises(SizeMismatchError) as exc_info:
            random_mv.reduce(v, [1.0, 2.0])
        assert exc_info.value.expected == 3
        np.testing.assert_array_equal(v.get_local(), np.ones(6))

    def test_uninitialized(self, empty_mv):
        with pytest.raises(UninitializedVectorError):
            empty_mv.reduce(ArrayVector.zeros(2), [])


# ═══════════════════════════════════════════════════════════════════════
# axpy
# ═══════════════════════════════════════════════════════════════════════


class TestAxpyBroadcast:

    def test_three_slots(self, random_mv, random_rows):
        y = np.arange(6, dtype=np.float64)
        random_mv.axpy(2.0, ArrayVector(y))
        for vi, row in zip(random_mv, random_rows):
            np.testing.assert_allclose(vi.get_local(), row + 2.0 * y, rtol=1e-12)

    def test_integer_scalar(self, template):
        mv = MultiVector(template, 2)
        mv.axpy(3, template)
        np.testing.assert_array_equal(to_array(mv), np.full((2, 5), 3.0))

    def test_array_scalar_rejected(self, random_mv):
        with pytest.raises(ValidationError, match="real scalar"):
            random_mv.axpy(np.ones(3), ArrayVector.zeros(6))

    def test_non_vector_rejected(self, random_mv):
        with pytest.raises(ValidationError):
            random_mv.axpy(1.0, np.ones(6))

    def test_uninitialized(self, empty_mv):
        with pytest.raises(UninitializedVectorError):
            empty_mv.axpy(1.0, ArrayVector.zeros(2))


class TestAxpySlices:

    def test_per_slice(self, random_rows, rng):
        Y = rng.standard_normal((3, 6))
        mv = from_array(random_rows)
        a = np.array([1.0, -2.0, 0.5])
        mv.axpy_slices(a, from_array(Y))
        np.testing.assert_allclose(to_array(mv), random_rows + a[:, None] * Y, rtol=1e-12)

    def test_coefficient_length_mismatch(self, random_mv, random_rows, rng):
        with pytest.raises(SizeMismatchError):
            random_mv.axpy_slices([1.0, 2.0], from_array(rng.standard_normal((3, 6))))
        np.testing.assert_array_equal(to_array(random_mv), random_rows)

    def test_multivector_length_mismatch(self, random_mv, random_rows, rng):
        with pytest.raises(SizeMismatchError):
            random_mv.axpy_slices([1.0, 2.0, 3.0], from_array(rng.standard_normal((2, 6))))
        np.testing.assert_array_equal(to_array(random_mv), random_rows)

    def test_y_must_be_multivector(self, random_mv):
        with pytest.raises(ValidationError):
            random_mv.axpy_slices([1.0, 2.0, 3.0], ArrayVector.zeros(6))

    def test_y_uninitialized(self, random_mv, empty_mv):
        with pytest.raises(UninitializedVectorError):
            random_mv.axpy_slices([1.0, 2.0, 3.0], empty_mv)


# ═══════════════════════════════════════════════════════════════════════
# scale / zero
# ═══════════════════════════════════════════════════════════════════════


class DetachingVector(ArrayVector):
    """ArrayVector whose *= scales in place but returns a fresh copy."""

    def copy(self):
        return DetachingVector(self.get_local())

    def __imul__(self, a):
        super().__imul__(a)
        return self.copy()


class TestScale:

    def test_single_slot(self, random_mv, random_rows):
        random_mv.scale(1, -3.0)
        expected = random_rows.copy()
        expected[1] *= -3.0
        np.testing.assert_array_equal(to_array(random_mv), expected)

    def test_single_slot_keeps_handle(self, random_mv):
        handle = random_mv[2]
        random_mv.scale(2, 2.0)
        assert random_mv[2] is handle

    def test_imul_returning_new_object_keeps_slots(self):
        mv = MultiVector(DetachingVector(np.zeros(2)), 2)
        mv[0].set_local([1.0, 2.0])
        mv[1].set_local([3.0, 4.0])
        handles = list(mv)

        mv.scale(0, 2.0)
        mv.scale_slices([10.0, -1.0])

        assert all(x is y for x, y in zip(mv, handles))
        np.testing.assert_array_equal(handles[0].get_local(), [20.0, 40.0])
        np.testing.assert_array_equal(handles[1].get_local(), [-3.0, -4.0])

    @pytest.mark.parametrize("k", [3, -1])
    def test_single_slot_out_of_range(self, random_mv, random_rows, k):
        with pytest.raises(IndexOutOfRangeError):
            random_mv.scale(k, 2.0)
        np.testing.assert_array_equal(to_array(random_mv), random_rows)

    def test_single_slot_uninitialized(self, empty_mv):
        with pytest.raises(UninitializedVectorError):
            empty_mv.scale(0, 2.0)

    def test_per_slice(self, random_mv, random_rows):
        a = np.array([2.0, 0.0, -1.0])
        random_mv.scale_slices(a)
        np.testing.assert_array_equal(to_array(random_mv), a[:, None] * random_rows)

    def test_per_slice_length_mismatch_mutates_nothing(self, random_mv, random_rows):
        with pytest.raises(SizeMismatchError):
            random_mv.scale_slices([2.0, 2.0])
        np.testing.assert_array_equal(to_array(random_mv), random_rows)

    def test_per_slice_2d_rejected(self, random_mv):
        with pytest.raises(ValidationError):
            random_mv.scale_slices(np.ones((3, 1)))


class TestZero:

    def test_zero(self, random_mv):
        random_mv.zero()
        np.testing.assert_array_equal(to_array(random_mv), np.zeros((3, 6)))

    def test_zero_on_uninitialized_is_noop(self, empty_mv):
        empty_mv.zero()
        assert empty_mv.nvec() == 0


# ═══════════════════════════════════════════════════════════════════════
# Failures from the vector capability
# ═══════════════════════════════════════════════════════════════════════


class BrokenVector(ArrayVector):
    """ArrayVector whose copies refuse to be scaled after `fail_after` calls."""

    scale_calls = 0
    fail_after = 1

    def copy(self):
        return BrokenVector(self.get_local())

    def __imul__(self, a):
        BrokenVector.scale_calls += 1
        if BrokenVector.scale_calls > BrokenVector.fail_after:
            raise FloatingPointError("vector backend failure")
        return super().__imul__(a)


class TestPartialFailure:

    def test_backend_error_propagates_after_partial_update(self):
        BrokenVector.scale_calls = 0
        mv = MultiVector(BrokenVector(np.zeros(2)), 3)
        for i in range(3):
            mv[i].set_local([1.0, 1.0])

        with pytest.raises(FloatingPointError):
            mv.scale_slices([2.0, 3.0, 4.0])

        np.testing.assert_array_equal(mv[0].get_local(), [2.0, 2.0])
        np.testing.assert_array_equal(mv[1].get_local(), [1.0, 1.0])
        np.testing.assert_array_equal(mv[2].get_local(), [1.0, 1.0])
