"""
Generic result container for PyMultiVector algorithms.

Iterative algorithms built on top of MultiVector (Gram-Schmidt and
friends) return their payload inside this envelope so that timing,
diagnostics and warnings travel with the numbers.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (method, passes, dropped vectors)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope.

    Type Parameters:
        P: The algorithm-specific parameter payload type

    Attributes:
        params: Algorithm-specific payload
        info: Structured metadata (method, diagnostics)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the routine that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=OrthogonalizationParams(Bq=Bq, r=r, reorthogonalizations=passes),
        ...     info={'method': 'mgs_reorth', 'n_dropped': 0},
        ...     timing={'total_seconds': 0.01},
        ...     backend_name='cpu_mgs',
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
