"""
Shared compute infrastructure for pycolstats.

Submodules:
    timing: Execution timing utilities
    tolerances: Numerical comparison tiers
"""

from pycolstats.core.compute.timing import Timer
from pycolstats.core.compute.tolerances import (
    ToleranceTier,
    CPU_FP64,
    MONTE_CARLO,
)

__all__ = [
    "Timer",
    "ToleranceTier",
    "CPU_FP64",
    "MONTE_CARLO",
]
