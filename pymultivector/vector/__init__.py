"""
Reference vector types.

Public API:
    ArrayVector     - dense NumPy-backed vector satisfying the vector capability
    MatrixOperator  - dense/sparse matrix acting on ArrayVectors
"""

from pymultivector.vector.dense import ArrayVector
from pymultivector.vector.operators import MatrixOperator

__all__ = [
    "ArrayVector",
    "MatrixOperator",
]
