"""
Generic result container for pycolstats computations.

The Result class is the envelope the result-object API (describe())
returns. It keeps timing, warnings and provenance next to the
domain-specific parameter payload.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (dimensions, computed statistics)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

import platform
from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

import numpy as np

P = TypeVar('P')  # Parameter payload type


def _default_provenance() -> dict[str, str]:
    """Version metadata recorded with every result."""
    from pycolstats import __version__

    return {
        'pycolstats_version': __version__,
        'numpy_version': np.__version__,
        'python_version': platform.python_version(),
    }


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for column statistics.

    Attributes:
        params: Domain-specific parameters (means, standard deviations, ...)
        info: Structured metadata (dimensions, computed statistics)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation
        provenance: Library versions that produced the result

    Examples:
        >>> Result(
        ...     params=ColumnParams(mean=mean, sd=sd),
        ...     info={'dim_i': 3, 'dim_j': 2},
        ...     timing={'total_seconds': 0.001, 'mean': 0.0004},
        ...     backend_name='cpu_columnwise'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
    provenance: dict[str, str] = field(default_factory=_default_provenance)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
