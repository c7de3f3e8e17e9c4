"""
PyMultiVector: batched linear algebra over collections of vectors.

A MultiVector holds N vectors of identical layout (finite-element
coefficient vectors, Krylov bases, random probing sets) and provides
batched inner products, linear combinations, scaling and norms on top of
whatever vector type it stores.

Submodules:
    core: Exceptions, validators, protocols, result envelope
    vector: ArrayVector reference vector and MatrixOperator
    multivector: MultiVector, boundary adapters, Gram-Schmidt
"""

__version__ = "0.1.0"

from pymultivector import core
from pymultivector import vector
from pymultivector import multivector
from pymultivector.multivector import MultiVector
from pymultivector.vector import ArrayVector, MatrixOperator

__all__ = [
    "__version__",
    "core",
    "vector",
    "multivector",
    "MultiVector",
    "ArrayVector",
    "MatrixOperator",
]
