"""
Column-wise statistics over row-major matrices.

Public API:
    col_mean(a, dim_i, dim_j)                 - Mean of each column
    col_std(a, mean, dim_i, dim_j)            - Sample standard deviation (n-1)
    remove_mean_col(a, mean, dim_i, dim_j)    - Subtract column means
    modify_mean_stddev(mtx, m, s, dim_i, dim_j) - In-place x * s + m
    standardize_columns(mtx, dim_i, dim_j)    - Per-column z-score, then rescale
    format_matrix / show_matrix               - Text display
    describe(data)                            - All statistics at once
"""

from pycolstats.columnwise.design import MatrixDesign
from pycolstats.columnwise.solution import ColumnParams, ColumnSolution
from pycolstats.columnwise.solvers import (
    col_mean,
    col_std,
    remove_mean_col,
    modify_mean_stddev,
    standardize_columns,
    describe,
)
from pycolstats.columnwise._display import format_matrix, show_matrix

__all__ = [
    "col_mean",
    "col_std",
    "remove_mean_col",
    "modify_mean_stddev",
    "standardize_columns",
    "describe",
    "format_matrix",
    "show_matrix",
    "MatrixDesign",
    "ColumnParams",
    "ColumnSolution",
]
