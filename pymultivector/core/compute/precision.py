"""
Numerical precision constants.

Machine epsilon and the thresholds that drive reorthogonalization in
Gram-Schmidt.
"""

import numpy as np


# Machine epsilon for float64
EPSILON_64: float = float(np.finfo(np.float64).eps)  # ~2.22e-16

# A projected vector whose norm falls below REORTH_LOWER_FACTOR * eps * t
# (t = norm before projection) is treated as linearly dependent.
REORTH_LOWER_FACTOR: float = 10.0

# Projection is repeated while the norm shrank below REORTH_UPPER_FACTOR * t.
REORTH_UPPER_FACTOR: float = 0.1


def needs_reorthogonalization(tt: float, t: float, eps: float = EPSILON_64) -> bool:
    """
    Decide whether another projection pass is required.

    Args:
        tt: Norm after the current projection pass
        t: Norm before the current pass
        eps: Machine epsilon

    Returns:
        True while cancellation was severe but the vector is not yet
        numerically zero.
    """
    return REORTH_LOWER_FACTOR * eps * t < tt < REORTH_UPPER_FACTOR * t


def is_numerically_zero(tt: float, t: float, eps: float = EPSILON_64) -> bool:
    """True if the projected norm tt is at round-off level relative to t."""
    return tt < REORTH_LOWER_FACTOR * eps * t
