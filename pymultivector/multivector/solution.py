"""
Orthogonalization solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator
import numpy as np
from numpy.typing import NDArray

from pymultivector.core.result import Result
from pymultivector.multivector.multivector import MultiVector


@dataclass(frozen=True)
class OrthogonalizationParams:
    """
    Parameter payload for Gram-Schmidt orthogonalization.

    Bq: multivector holding B q[k] for the orthonormalized q[k]
    r: upper triangular (N, N) factor, original = Q R
    reorthogonalizations: projection passes used per vector, shape (N,)
    """
    Bq: MultiVector
    r: NDArray[np.floating[Any]]
    reorthogonalizations: NDArray[np.integer[Any]]


@dataclass
class OrthogonalizationSolution:
    """
    User-facing orthogonalization results.

    Wraps Result[OrthogonalizationParams]. Unpacks as (Bq, r):

        Bq, r = b_orthogonalize(mv, B)
    """
    _result: Result[OrthogonalizationParams]

    @property
    def Bq(self) -> MultiVector:
        """B applied to each orthonormal vector."""
        return self._result.params.Bq

    @property
    def r(self) -> NDArray[np.floating[Any]]:
        """Upper triangular factor, shape (N, N)."""
        return self._result.params.r

    @property
    def reorthogonalizations(self) -> NDArray[np.integer[Any]]:
        """Projection passes per vector (1 means no reorthogonalization)."""
        return self._result.params.reorthogonalizations

    @property
    def n_dropped(self) -> int:
        """Vectors found linearly dependent and set to zero."""
        return int(self._result.info['n_dropped'])

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def __iter__(self) -> Iterator[Any]:
        yield self.Bq
        yield self.r

    def summary(self) -> str:
        """Short text report."""
        n = self.r.shape[0]
        lines = [
            f"Gram-Schmidt orthogonalization ({self.info['method']})",
            f"  vectors:             {n}",
            f"  dropped (dependent): {self.n_dropped}",
        ]
        if n > 0:
            lines.append(f"  max passes:          {int(np.max(self.reorthogonalizations))}")
            lines.append(
                "  diag(R):             "
                + " ".join(f"{x:.6g}" for x in np.diag(self.r))
            )
        for w in self.warnings:
            lines.append(f"  warning: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"OrthogonalizationSolution(nvec={self.r.shape[0]}, "
            f"n_dropped={self.n_dropped}, method={self.info['method']!r})"
        )
