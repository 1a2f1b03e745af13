"""
pycolstats: column-wise statistics for row-major matrices.

Per-column mean and sample standard deviation, centering, rescaling,
Gaussian sampling and console display, over flat row-major buffers with
explicit (dim_i, dim_j).

Submodules:
    columnwise: Column statistics, centering, rescaling, display
    sampling: Normally distributed scalars and matrices
"""

__version__ = "0.1.0"

from pycolstats import columnwise
from pycolstats import sampling
from pycolstats.columnwise import (
    col_mean,
    col_std,
    remove_mean_col,
    modify_mean_stddev,
    standardize_columns,
    describe,
    format_matrix,
    show_matrix,
    MatrixDesign,
    ColumnSolution,
)
from pycolstats.sampling import randn, randn_mtx, seed, get_default_rng

__all__ = [
    "__version__",
    "columnwise",
    "sampling",
    "col_mean",
    "col_std",
    "remove_mean_col",
    "modify_mean_stddev",
    "standardize_columns",
    "describe",
    "format_matrix",
    "show_matrix",
    "MatrixDesign",
    "ColumnSolution",
    "randn",
    "randn_mtx",
    "seed",
    "get_default_rng",
]
