"""
Tolerance tiers for numerical validation.

Defines precision expectations for batched results:
- CPU FP64 (reference): round-off level agreement with NumPy
- CPU FP64, ill-conditioned: relaxed for nearly dependent vector sets

Used by the test suite when comparing batched results and orthogonal
bases against NumPy.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerances for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


CPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='cpu_fp64',
    description='CPU double precision, matches NumPy reference',
)

# Nearly dependent inputs (cond > 1e4)
CPU_FP64_ILL_CONDITIONED = ToleranceTier(
    rtol=1e-4,
    atol=1e-6,
    name='cpu_fp64_ill_conditioned',
    description='CPU double precision, ill-conditioned (cond > 1e4)',
)
