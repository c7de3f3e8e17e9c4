"""
Exception hierarchy for PyMultiVector.

All exceptions inherit from PyMultiVectorError to allow catching any
library-specific error. Every error here is a caller error (a violated
precondition) and is raised at the call boundary before any slot is
mutated.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyMultiVectorError(Exception):
    """Base exception for all PyMultiVector errors."""
    pass


class ValidationError(PyMultiVectorError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when array shapes don't match expected dimensions.
    """
    pass


class SizeMismatchError(DimensionError):
    """
    A buffer or multivector length disagrees with the required size.

    Raised by per-slice operations (axpy, scale, reduce) and by output
    buffers of the batched inner products and norms.

    Attributes:
        name: Name of the offending argument
        expected: Required length
        actual: Length that was supplied
    """

    def __init__(
        self,
        message: str,
        name: str | None = None,
        expected: int | None = None,
        actual: int | None = None,
    ):
        super().__init__(message)
        self.name = name
        self.expected = expected
        self.actual = actual


class IndexOutOfRangeError(ValidationError, IndexError):
    """
    Slot index outside [0, N).

    Also an IndexError so that plain Python iteration protocols behave.

    Attributes:
        index: The requested index
        size: Number of slots in the multivector
    """

    def __init__(self, message: str, index: int | None = None, size: int | None = None):
        super().__init__(message)
        self.index = index
        self.size = size


class InvalidNormSelectorError(ValidationError):
    """
    Unsupported norm-type string.

    Raised by the vector capability and surfaced unchanged through
    MultiVector.norm_all.

    Attributes:
        norm_type: The rejected selector
        supported: The selectors the vector understands
    """

    def __init__(
        self,
        message: str,
        norm_type: str | None = None,
        supported: tuple[str, ...] | None = None,
    ):
        super().__init__(message)
        self.norm_type = norm_type
        self.supported = supported


class UninitializedVectorError(PyMultiVectorError):
    """
    Per-element operation on a multivector that was never sized.

    Attributes:
        operation: Name of the operation that was attempted
    """

    def __init__(self, message: str, operation: str | None = None):
        super().__init__(message)
        self.operation = operation
