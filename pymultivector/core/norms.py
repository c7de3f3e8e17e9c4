"""
Norm selector constants for PyMultiVector.

This module is the SINGLE SOURCE OF TRUTH for the norm names understood
by the bundled ArrayVector. Import from here, never use raw strings.

Other vector types may accept a different set; MultiVector.norm_all
passes the selector through untouched.

Usage:
    from pymultivector.core.norms import NORM_L2

    norms = bindings.norm(mv, NORM_L2)
"""

# Sum of absolute values
NORM_L1 = 'l1'

# Euclidean norm, sqrt(<x, x>)
NORM_L2 = 'l2'

# Largest absolute entry
NORM_LINF = 'linf'

ALL_NORMS = (NORM_L1, NORM_L2, NORM_LINF)

__all__ = [
    'NORM_L1',
    'NORM_L2',
    'NORM_LINF',
    'ALL_NORMS',
]
