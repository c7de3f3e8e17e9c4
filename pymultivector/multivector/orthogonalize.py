"""
Gram-Schmidt orthogonalization of a MultiVector.

Modified Gram-Schmidt with iterative reorthogonalization: the projection
against the previous vectors is repeated while it cancels more than 90%
of the norm, and a vector whose norm collapses to round-off level is
declared dependent and set to zero.

    b_orthogonalize(mv, B)  Q^T B Q = I, mv = Q R (in place, mv becomes Q)
    orthogonalize(mv)       same with the Euclidean inner product
"""

from __future__ import annotations

import math
import warnings

import numpy as np

from pymultivector.core.exceptions import ValidationError
from pymultivector.core.protocols import Operator
from pymultivector.core.result import Result
from pymultivector.core.compute.timing import Timer
from pymultivector.core.compute.precision import (
    EPSILON_64,
    is_numerically_zero,
    needs_reorthogonalization,
)
from pymultivector.multivector.multivector import MultiVector
from pymultivector.multivector.solution import (
    OrthogonalizationParams,
    OrthogonalizationSolution,
)


class _IdentityOperator:
    """y = x, using only the vector capability."""

    def mult(self, x, y) -> None:
        y.zero()
        y.axpy(1.0, x)


def _b_norm(Bv, v) -> float:
    # Round-off can push <Bv, v> slightly below zero for a dependent vector
    return math.sqrt(max(Bv.inner(v), 0.0))


def _mgs(mv: MultiVector, B, method: str) -> OrthogonalizationSolution:
    if not isinstance(mv, MultiVector):
        raise ValidationError(f"mv: expected a MultiVector, got {type(mv).__name__}")
    mv._require_initialized(method)
    if not isinstance(B, Operator):
        raise ValidationError(f"B: operator must provide mult(x, y), got {type(B).__name__}")

    timer = Timer()
    timer.start()

    n = mv.nvec()
    Bq = MultiVector(mv[0], n) if n > 0 else MultiVector(mv)
    r = np.zeros((n, n), dtype=np.float64)
    passes = np.zeros(n, dtype=np.int64)
    eps = EPSILON_64

    for k in range(n):
        with timer.section('operator'):
            B.mult(mv[k], Bq[k])
        t = _b_norm(Bq[k], mv[k])

        u = 0
        while True:
            u += 1
            with timer.section('projection'):
                for i in range(k):
                    s = Bq[i].inner(mv[k])
                    r[i, k] += s
                    mv[k].axpy(-s, mv[i])
            with timer.section('operator'):
                B.mult(mv[k], Bq[k])
            tt = _b_norm(Bq[k], mv[k])

            if needs_reorthogonalization(tt, t, eps):
                t = tt
                continue
            if is_numerically_zero(tt, t, eps):
                tt = 0.0
            break

        passes[k] = u
        r[k, k] = tt
        with timer.section('normalization'):
            factor = 1.0 / tt if tt > 0.0 else 0.0
            mv.scale(k, factor)
            Bq.scale(k, factor)

    timer.stop()

    dropped = [k for k in range(n) if r[k, k] == 0.0]
    warnings_list: list[str] = []
    if dropped:
        msg = (
            f"{len(dropped)} of {n} vectors are linearly dependent and were set "
            f"to zero (indices {dropped})"
        )
        warnings.warn(msg, RuntimeWarning, stacklevel=3)
        warnings_list.append(msg)

    result = Result(
        params=OrthogonalizationParams(Bq=Bq, r=r, reorthogonalizations=passes),
        info={
            'method': method,
            'n_dropped': len(dropped),
            'dropped_indices': tuple(dropped),
            'reorthogonalizations': int(np.sum(passes > 1)),
        },
        timing=timer.result(),
        backend_name='cpu_mgs',
        warnings=tuple(warnings_list),
    )
    return OrthogonalizationSolution(_result=result)


def b_orthogonalize(mv: MultiVector, B: Operator) -> OrthogonalizationSolution:
    """
    QR factorization of mv in the inner product defined by B.

    On return mv holds Q. In exact arithmetic:
        Q^T B Q = I,  R = Q^T B mv_old,  mv_old = Q R,  span(Q) = span(mv_old)

    Parameters
    ----------
    mv : MultiVector
        Vectors to orthogonalize; overwritten with Q.
    B : operator
        Symmetric positive definite operator providing mult(x, y).

    Returns
    -------
    OrthogonalizationSolution with Bq (B applied to Q) and r.
    """
    return _mgs(mv, B, method='b_orthogonalize')


def orthogonalize(mv: MultiVector) -> OrthogonalizationSolution:
    """
    QR factorization of mv in the Euclidean inner product.

    On return mv holds orthonormal Q with mv_old = Q R. The solution's Bq
    is an independent copy of Q.
    """
    return _mgs(mv, _IdentityOperator(), method='orthogonalize')
