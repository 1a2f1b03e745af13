"""
Core infrastructure for pycolstats.

Key components:
    protocols: Backend protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input and buffer validators
    compute: Timing and tolerance tiers
"""

from pycolstats.core.protocols import Backend
from pycolstats.core.result import Result
from pycolstats.core.exceptions import (
    ColStatsError,
    ValidationError,
    DimensionError,
    InvalidDimensionError,
)

__all__ = [
    # Protocols
    "Backend",
    # Result
    "Result",
    # Exceptions
    "ColStatsError",
    "ValidationError",
    "DimensionError",
    "InvalidDimensionError",
]
