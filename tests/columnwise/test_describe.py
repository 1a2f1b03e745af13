"""
Tests for describe(), MatrixDesign and the CPU backend.
"""

import numpy as np
import pytest

from pycolstats.columnwise import (
    ColumnSolution,
    MatrixDesign,
    describe,
)
from pycolstats.columnwise.backends.cpu import CPUColumnBackend
from pycolstats.core.exceptions import (
    DimensionError,
    InvalidDimensionError,
    ValidationError,
)
from pycolstats.core.protocols import Backend


class FakeFrame:
    """Just enough of a DataFrame for MatrixDesign.from_array()."""

    def __init__(self, values, columns):
        self.values = np.asarray(values)
        self.columns = columns


class TestMatrixDesign:

    def test_from_buffer(self, small_matrix):
        design = MatrixDesign.from_buffer(small_matrix, 3, 2)
        assert design.dim_i == 3
        assert design.dim_j == 2
        assert design.columns is None
        np.testing.assert_array_equal(design.data, [[1, 2], [3, 4], [5, 6]])

    def test_from_array_2d(self):
        design = MatrixDesign.from_array([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])
        assert (design.dim_i, design.dim_j) == (2, 3)

    def test_from_array_1d_reshaped(self):
        design = MatrixDesign.from_array([1.0, 2.0, 3.0])
        assert design.data.shape == (3, 1)

    def test_from_array_keeps_column_names(self):
        design = MatrixDesign.from_array(FakeFrame([[1.0, 2.0], [3.0, 4.0]], ["x", "y"]))
        assert design.columns == ("x", "y")

    def test_from_array_rejects_3d(self):
        with pytest.raises(DimensionError, match="3D"):
            MatrixDesign.from_array(np.zeros((2, 2, 2)))

    def test_from_array_rejects_empty(self):
        with pytest.raises(InvalidDimensionError):
            MatrixDesign.from_array(np.zeros((0, 3)))

    def test_from_buffer_rejects_short(self):
        with pytest.raises(DimensionError):
            MatrixDesign.from_buffer([1.0, 2.0], 2, 2)

    def test_allows_nan_and_inf(self):
        design = MatrixDesign.from_array([[np.nan, np.inf], [1.0, 2.0]])
        assert design.dim_i == 2

    def test_repr(self, small_matrix):
        assert repr(MatrixDesign.from_buffer(small_matrix, 3, 2)) == "MatrixDesign(dim_i=3, dim_j=2)"


class TestCPUBackend:

    def test_satisfies_backend_protocol(self):
        assert isinstance(CPUColumnBackend(), Backend)

    def test_name(self):
        assert CPUColumnBackend().name == 'cpu_columnwise'

    def test_mean_only(self, small_matrix):
        result = CPUColumnBackend().solve(
            MatrixDesign.from_buffer(small_matrix, 3, 2), compute={'mean'}
        )
        np.testing.assert_array_equal(result.params.mean, [3.0, 4.0])
        assert result.params.sd is None
        assert result.params.centered is None

    def test_sd_without_mean_leaves_mean_unset(self, small_matrix):
        result = CPUColumnBackend().solve(
            MatrixDesign.from_buffer(small_matrix, 3, 2), compute={'sd'}
        )
        assert result.params.mean is None
        np.testing.assert_allclose(result.params.sd, [2.0, 2.0])

    def test_unknown_statistic(self, small_matrix):
        with pytest.raises(ValidationError, match="median"):
            CPUColumnBackend().solve(
                MatrixDesign.from_buffer(small_matrix, 3, 2), compute={'median'}
            )

    def test_timing_sections(self, small_matrix):
        result = CPUColumnBackend().solve(MatrixDesign.from_buffer(small_matrix, 3, 2))
        for key in ('total_seconds', 'mean', 'sd', 'centered'):
            assert key in result.timing


class TestDescribe:

    def test_small_matrix_buffer(self, small_matrix):
        result = describe(small_matrix, 3, 2)
        assert isinstance(result, ColumnSolution)
        np.testing.assert_array_equal(result.mean, [3.0, 4.0])
        np.testing.assert_allclose(result.sd, [2.0, 2.0])
        np.testing.assert_array_equal(result.centered, [[-2, -2], [0, 0], [2, 2]])

    def test_array_input(self, random_matrix):
        result = describe(random_matrix)
        np.testing.assert_allclose(result.mean, random_matrix.mean(axis=0), rtol=1e-12)
        np.testing.assert_allclose(result.sd, random_matrix.std(axis=0, ddof=1), rtol=1e-10)
        assert result.dim_i == 50
        assert result.dim_j == 4

    def test_accepts_design(self, small_matrix):
        design = MatrixDesign.from_buffer(small_matrix, 3, 2)
        assert describe(design).dim_i == 3

    def test_one_dim_only_rejected(self, small_matrix):
        with pytest.raises(ValidationError, match="both dim_i and dim_j"):
            describe(small_matrix, 3)

    def test_design_with_dims_rejected(self):
        design = MatrixDesign.from_buffer([1, 2, 3, 4, 5, 6], 3, 2)
        with pytest.raises(ValidationError, match="cannot be given with a MatrixDesign"):
            describe(design, 2, 3)

    def test_metadata(self, small_matrix):
        result = describe(small_matrix, 3, 2)
        assert result.backend_name == 'cpu_columnwise'
        assert result.info['dim_i'] == 3
        assert result.info['computed'] == ['centered', 'mean', 'sd']
        assert result.timing['total_seconds'] >= 0.0
        assert result.warnings == ()

    def test_single_row_recorded_as_warning(self):
        result = describe([[1.0, 2.0]])
        assert np.all(np.isnan(result.sd))
        assert any("undefined" in w for w in result.warnings)

    def test_summary_table(self, small_matrix):
        text = describe(small_matrix, 3, 2).summary()
        lines = text.splitlines()
        assert lines[0] == "Column statistics (dim_i=3, dim_j=2):"
        assert "V1" in lines[1] and "V2" in lines[1]
        assert lines[2].startswith("Mean")
        assert "3.000000" in lines[2] and "4.000000" in lines[2]
        assert lines[3].startswith("SD")
        assert "2.000000" in lines[3]

    def test_summary_uses_column_names(self):
        text = describe(FakeFrame([[1.0, 2.0], [3.0, 4.0]], ["height", "weight"])).summary()
        assert "height" in text and "weight" in text

    def test_repr(self, small_matrix):
        r = repr(describe(small_matrix, 3, 2))
        assert r == "ColumnSolution(dim_i=3, dim_j=2, computed=[mean, sd, centered])"
