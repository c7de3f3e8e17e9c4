"""
Core infrastructure for PyMultiVector.

Shared abstractions used by the vector and multivector subpackages.

Key components:
    protocols: Vector, LocalVector, Operator protocols
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    norms: Norm selector constants
    compute: Timing, precision and tolerance utilities
"""

from pymultivector.core.protocols import Vector, LocalVector, Operator
from pymultivector.core.result import Result
from pymultivector.core.exceptions import (
    PyMultiVectorError,
    ValidationError,
    DimensionError,
    SizeMismatchError,
    IndexOutOfRangeError,
    InvalidNormSelectorError,
    UninitializedVectorError,
)

__all__ = [
    # Protocols
    "Vector",
    "LocalVector",
    "Operator",
    # Result
    "Result",
    # Exceptions
    "PyMultiVectorError",
    "ValidationError",
    "DimensionError",
    "SizeMismatchError",
    "IndexOutOfRangeError",
    "InvalidNormSelectorError",
    "UninitializedVectorError",
]
