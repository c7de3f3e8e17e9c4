"""
MultiVector module.

An ordered collection of N vectors of identical layout with batched
inner products, linear combinations, scaling and norms.

Public API:
    MultiVector            - the container (fills caller-provided buffers)
    bindings               - allocating adapters: dot(), norm(), axpy(), scale() ...
    mat_mv_mult(A, x, y)   - y[i] = A x[i]
    mat_mv_transpmult(A, x, y)
    mv_dsmat_mult(X, A, Y) - Y = X A for a dense matrix A
    normal(sigma, mv, rng) - Gaussian random fill
    to_array(mv), from_array(array)
    b_orthogonalize(mv, B), orthogonalize(mv)
"""

from pymultivector.multivector.multivector import MultiVector
from pymultivector.multivector import bindings
from pymultivector.multivector.ops import (
    mat_mv_mult,
    mat_mv_transpmult,
    mv_dsmat_mult,
    normal,
    to_array,
    from_array,
)
from pymultivector.multivector.solution import (
    OrthogonalizationParams,
    OrthogonalizationSolution,
)
from pymultivector.multivector.orthogonalize import b_orthogonalize, orthogonalize

__all__ = [
    "MultiVector",
    "bindings",
    "mat_mv_mult",
    "mat_mv_transpmult",
    "mv_dsmat_mult",
    "normal",
    "to_array",
    "from_array",
    "OrthogonalizationParams",
    "OrthogonalizationSolution",
    "b_orthogonalize",
    "orthogonalize",
]
