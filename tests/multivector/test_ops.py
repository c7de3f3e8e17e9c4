"""
Tests for batched operator application, dense-matrix products, random
filling and array conversion.
"""

import numpy as np
import pytest
import scipy.sparse as sp

from pymultivector import ArrayVector, MatrixOperator, MultiVector
from pymultivector.core.exceptions import SizeMismatchError, ValidationError
from pymultivector.multivector import (
    from_array,
    mat_mv_mult,
    mat_mv_transpmult,
    mv_dsmat_mult,
    normal,
    to_array,
)


class TestMatMvMult:

    def test_dense(self, random_mv, random_rows, rng):
        A = rng.standard_normal((4, 6))
        y = MultiVector(ArrayVector.zeros(4), 3)
        mat_mv_mult(MatrixOperator(A), random_mv, y)
        np.testing.assert_allclose(to_array(y), random_rows @ A.T, rtol=1e-12, atol=1e-12)

    def test_sparse(self, random_mv, random_rows):
        D = sp.diags(np.arange(1.0, 7.0)).tocsr()
        y = MultiVector(ArrayVector.zeros(6), 3)
        mat_mv_mult(MatrixOperator(D), random_mv, y)
        np.testing.assert_allclose(to_array(y), random_rows * np.arange(1.0, 7.0), rtol=1e-12)

    def test_operator_batch_hook_used(self, random_mv):
        class BatchOperator:
            called = False

            def mat_mv_mult(self, x, y):
                BatchOperator.called = True

        y = MultiVector(ArrayVector.zeros(6), 3)
        mat_mv_mult(BatchOperator(), random_mv, y)
        assert BatchOperator.called

    def test_duck_typed_operator(self, random_mv, random_rows):
        class Negate:
            def mult(self, x, y):
                y.zero()
                y.axpy(-1.0, x)

        y = MultiVector(ArrayVector.zeros(6), 3)
        mat_mv_mult(Negate(), random_mv, y)
        np.testing.assert_array_equal(to_array(y), -random_rows)

    def test_nvec_mismatch(self, random_mv):
        y = MultiVector(ArrayVector.zeros(6), 2)
        with pytest.raises(SizeMismatchError, match="non-matching"):
            mat_mv_mult(MatrixOperator(np.eye(6)), random_mv, y)

    def test_operator_without_mult(self, random_mv):
        y = MultiVector(ArrayVector.zeros(6), 3)
        with pytest.raises(ValidationError, match="mult"):
            mat_mv_mult(object(), random_mv, y)


class TestMatMvTranspmult:

    def test_transpose(self, rng):
        A = rng.standard_normal((6, 4))
        X = rng.standard_normal((2, 6))
        y = MultiVector(ArrayVector.zeros(4), 2)
        mat_mv_transpmult(MatrixOperator(A), from_array(X), y)
        np.testing.assert_allclose(to_array(y), X @ A, rtol=1e-12, atol=1e-12)

    def test_requires_transpmult(self, random_mv):
        class MultOnly:
            def mult(self, x, y):
                pass

        y = MultiVector(ArrayVector.zeros(6), 3)
        with pytest.raises(ValidationError, match="transpmult"):
            mat_mv_transpmult(MultOnly(), random_mv, y)


class TestMvDsmatMult:

    def test_product(self, random_mv, random_rows, rng):
        A = rng.standard_normal((3, 2))
        Y = MultiVector(ArrayVector.zeros(6), 2)
        Y[0] = ArrayVector.full(6, 99.0)
        mv_dsmat_mult(random_mv, A, Y)
        np.testing.assert_allclose(to_array(Y), A.T @ random_rows, rtol=1e-12, atol=1e-12)

    def test_shape_mismatch(self, random_mv):
        Y = MultiVector(ArrayVector.zeros(6), 2)
        with pytest.raises(SizeMismatchError, match="expected shape"):
            mv_dsmat_mult(random_mv, np.ones((2, 2)), Y)

    def test_aliasing_rejected(self, random_mv):
        with pytest.raises(ValidationError, match="share storage"):
            mv_dsmat_mult(random_mv, np.eye(3), random_mv)


class TestNormal:

    def test_reproducible(self, template):
        a = MultiVector(template, 3)
        b = MultiVector(template, 3)
        normal(1.0, a, np.random.default_rng(7))
        normal(1.0, b, np.random.default_rng(7))
        np.testing.assert_array_equal(to_array(a), to_array(b))

    def test_scaling(self):
        mv = MultiVector(ArrayVector.zeros(20000), 1)
        normal(3.0, mv, np.random.default_rng(0))
        assert np.std(mv[0].get_local()) == pytest.approx(3.0, rel=0.05)

    def test_negative_sigma(self, template):
        with pytest.raises(ValidationError):
            normal(-1.0, MultiVector(template, 1))


class TestArrayConversion:

    def test_round_trip(self, random_rows):
        np.testing.assert_array_equal(to_array(from_array(random_rows)), random_rows)

    def test_empty(self):
        mv = from_array(np.empty((0, 4)))
        assert mv.nvec() == 0
        assert mv.is_initialized
        assert to_array(mv).shape == (0, 0)

    def test_1d_rejected(self):
        with pytest.raises(ValidationError):
            from_array(np.ones(3))
