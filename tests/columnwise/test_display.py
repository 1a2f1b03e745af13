"""
Tests for format_matrix() and show_matrix().
"""

import io

import numpy as np
import pytest

from pycolstats.columnwise import format_matrix, show_matrix
from pycolstats.core.exceptions import InvalidDimensionError


class TestFormatMatrix:

    def test_fixed_point_five_decimals(self):
        assert format_matrix([1.0, -2.5, 3.14159265, 0.0], 2, 2) == (
            "1.00000 -2.50000\n3.14159 0.00000"
        )

    def test_single_row(self):
        assert format_matrix([1.0, 2.0, 3.0], 1, 3) == "1.00000 2.00000 3.00000"

    def test_large_and_special_values(self):
        text = format_matrix([12345.678901, np.nan, np.inf], 1, 3)
        assert text == "12345.67890 nan inf"

    def test_invalid_dimension(self):
        with pytest.raises(InvalidDimensionError):
            format_matrix([1.0], 1, 0)


class TestShowMatrix:

    def test_writes_to_file(self):
        buf = io.StringIO()
        show_matrix([1.0, 2.0, 3.0, 4.0, 5.0, 6.0], 3, 2, file=buf)
        assert buf.getvalue() == "1.00000 2.00000\n3.00000 4.00000\n5.00000 6.00000\n"

    def test_defaults_to_stdout(self, capsys):
        show_matrix([0.5], 1, 1)
        assert capsys.readouterr().out == "0.50000\n"
