"""
Core protocols for PyMultiVector.

These define the structural interfaces the MultiVector core consumes. We
use Protocol (structural typing) rather than ABC (nominal typing) so that
any vector type (PETSc wrappers, FEniCS vectors, the bundled ArrayVector)
can be stored without inheriting from a library base class.

Design Principles:
    - Minimal contracts: the core needs six vector operations, nothing else
    - Optional extensions (local array access, transpose application) are
      separate protocols checked with isinstance()
"""

from typing import Protocol, Any, runtime_checkable

import numpy as np
from numpy.typing import NDArray


@runtime_checkable
class Vector(Protocol):
    """
    The vector capability: the sole dependency surface of MultiVector.

    A MultiVector treats its vectors as black boxes. Storage layout,
    parallel distribution and the arithmetic itself belong to the vector.
    """

    def copy(self) -> 'Vector':
        """Return an independently owned copy."""
        ...

    def zero(self) -> None:
        """Set every entry to the additive identity, in place."""
        ...

    def axpy(self, a: float, x: 'Vector') -> None:
        """In place: self += a * x."""
        ...

    def inner(self, x: 'Vector') -> float:
        """Inner product <self, x>."""
        ...

    def __imul__(self, a: float) -> 'Vector':
        """In place: self *= a. The return value is ignored by MultiVector."""
        ...

    def norm(self, norm_type: str) -> float:
        """
        Named norm of the vector.

        The set of accepted names belongs to the vector type. Unknown
        names must raise InvalidNormSelectorError.
        """
        ...


@runtime_checkable
class LocalVector(Vector, Protocol):
    """
    A vector whose entries can be read and written as a NumPy array.

    Needed by random filling and array conversion, never by the core.
    """

    def size(self) -> int:
        """Global number of entries."""
        ...

    def get_local(self) -> NDArray[np.floating[Any]]:
        """Return a copy of the entries."""
        ...

    def set_local(self, values: NDArray[np.floating[Any]]) -> None:
        """Overwrite the entries from an array of matching length."""
        ...


@runtime_checkable
class Operator(Protocol):
    """
    A linear operator acting on vectors: y = A x.

    Operators that also support y = A^T x expose transpmult(x, y), which
    is not part of this protocol and is checked with hasattr().
    """

    def mult(self, x: Vector, y: Vector) -> None:
        """Overwrite y with A x."""
        ...
