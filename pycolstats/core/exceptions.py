"""
Exception hierarchy for pycolstats.

All exceptions inherit from ColStatsError so callers can catch any
library-specific error in one place.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages state the actual value and what was expected
    - Numerical edge cases (NaN, Inf) are results, not exceptions
"""


class ColStatsError(Exception):
    """Base exception for all pycolstats errors."""
    pass


class ValidationError(ColStatsError):
    """
    Input validation failed.

    Raised for non-numeric data, unusable output buffers and unknown
    option values.
    """
    pass


class DimensionError(ValidationError):
    """
    Buffer or vector is too small for the requested shape.

    Raised when a matrix buffer holds fewer than dim_i * dim_j values,
    a column vector holds fewer than dim_j values, or an array has the
    wrong rank.
    """
    pass


class InvalidDimensionError(DimensionError):
    """
    A matrix dimension is not a positive integer.

    Attributes:
        name: Parameter name ('dim_i' or 'dim_j')
        value: The rejected value
    """

    def __init__(self, message: str, name: str | None = None, value: object = None):
        super().__init__(message)
        self.name = name
        self.value = value
