"""
Shared compute infrastructure for PyMultiVector.

Submodules:
    timing: Execution timing utilities
    precision: Machine epsilon and reorthogonalization thresholds
    tolerances: Tolerance tiers for numerical comparison
"""

from pymultivector.core.compute.timing import Timer
from pymultivector.core.compute.precision import EPSILON_64
from pymultivector.core.compute.tolerances import (
    ToleranceTier,
    CPU_FP64,
    CPU_FP64_ILL_CONDITIONED,
)

__all__ = [
    # Timing
    "Timer",
    # Precision
    "EPSILON_64",
    # Tolerances
    "ToleranceTier",
    "CPU_FP64",
    "CPU_FP64_ILL_CONDITIONED",
]
