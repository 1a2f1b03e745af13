"""
Tests for the pycolstats exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via ColStatsError)
    - Diagnostic attributes on InvalidDimensionError
"""

import pytest

from pycolstats.core.exceptions import (
    ColStatsError,
    DimensionError,
    InvalidDimensionError,
    ValidationError,
)


class TestInheritance:
    """Every exception is catchable via ColStatsError."""

    def test_validation_error_is_colstats_error(self):
        with pytest.raises(ColStatsError):
            raise ValidationError("bad input")

    def test_dimension_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise DimensionError("too short")

    def test_invalid_dimension_is_dimension_error(self):
        with pytest.raises(DimensionError):
            raise InvalidDimensionError("dim_i: must be >= 1, got 0")

    def test_invalid_dimension_is_colstats_error(self):
        with pytest.raises(ColStatsError):
            raise InvalidDimensionError("dim_j: must be >= 1, got -1")


class TestInvalidDimensionAttributes:

    def test_attributes_stored(self):
        err = InvalidDimensionError("dim_i: must be >= 1, got 0", name="dim_i", value=0)
        assert err.name == "dim_i"
        assert err.value == 0
        assert "got 0" in str(err)

    def test_attributes_default_none(self):
        err = InvalidDimensionError("bad")
        assert err.name is None
        assert err.value is None
