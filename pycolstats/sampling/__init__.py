"""
Gaussian sampling.

Usage:
    from pycolstats.sampling import randn, randn_mtx, seed

    x = randn(rng=42)
    m = randn_mtx(3, 4, rng=np.random.default_rng(0), method='box_muller')

    seed(7)        # re-seed the process-wide generator
    y = randn()    # uses it
"""

from pycolstats.sampling._generator import get_default_rng, seed
from pycolstats.sampling.solvers import SamplerMethod, randn, randn_mtx

__all__ = [
    "randn",
    "randn_mtx",
    "seed",
    "get_default_rng",
    "SamplerMethod",
]
