"""
Tolerance tiers for numerical validation.

- CPU FP64: deterministic reductions, compared to machine precision
- Monte Carlo: empirical moments of sampled values
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


CPU_FP64 = ToleranceTier(
    rtol=1e-12,
    atol=1e-12,
    name='cpu_fp64',
    description='CPU double precision reductions',
)

# 100,000 draws put the standard error of the mean near 0.003
MONTE_CARLO = ToleranceTier(
    rtol=0.0,
    atol=0.05,
    name='monte_carlo',
    description='Empirical mean/sd of sampled values',
)
