"""
Buffer-level API for column-wise statistics.

Every function takes a row-major buffer plus explicit (dim_i, dim_j).
Inputs may be any numeric array-like; only the leading dim_i * dim_j
values (dim_j for column vectors) are used. Output buffers passed as
`out=` must be writable, C-contiguous float ndarrays and are filled in
place. All validation happens before anything is written.

describe() is the result-object entry point over the same kernels.
"""

from __future__ import annotations

import warnings

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pycolstats.core.exceptions import ValidationError
from pycolstats.core.validation import (
    as_matrix,
    as_vector,
    as_writable_matrix,
    as_writable_vector,
    check_scalar,
)
from pycolstats.columnwise.design import MatrixDesign
from pycolstats.columnwise.solution import ColumnSolution
from pycolstats.columnwise.backends.cpu import (
    CPUColumnBackend,
    affine_rescale,
    column_mean,
    column_std,
    subtract_mean,
)


def _warn_no_degrees_of_freedom(func: str, dim_i: int) -> None:
    warnings.warn(
        f"{func}: dim_i={dim_i} leaves no degrees of freedom; "
        f"sample standard deviation is NaN/Inf",
        RuntimeWarning,
        stacklevel=3,
    )


def col_mean(
    a: ArrayLike,
    dim_i: int,
    dim_j: int,
    *,
    out: NDArray | None = None,
) -> NDArray:
    """
    Mean of each column of a dim_i x dim_j matrix.

    Parameters
    ----------
    a : array-like
        Row-major matrix buffer.
    dim_i, dim_j : int
        Number of rows and columns.
    out : ndarray, optional
        Receives the dim_j means.

    Returns
    -------
    ndarray of shape (dim_j,), or `out`.
    """
    data = as_matrix(a, dim_i, dim_j, 'a')
    target = None if out is None else as_writable_vector(out, data.shape[1], 'out')

    mean = column_mean(data)
    if target is None:
        return mean
    target[...] = mean
    return out


def col_std(
    a: ArrayLike,
    mean: ArrayLike,
    dim_i: int,
    dim_j: int,
    *,
    out: NDArray | None = None,
) -> NDArray:
    """
    Sample standard deviation (divisor dim_i - 1) of each column.

    `mean` is taken as given, normally the output of col_mean(). With
    dim_i == 1 the result is NaN (Inf if `mean` does not match the row)
    and a RuntimeWarning is emitted; no exception is raised.

    Returns
    -------
    ndarray of shape (dim_j,), or `out`.
    """
    data = as_matrix(a, dim_i, dim_j, 'a')
    mean_vec = as_vector(mean, data.shape[1], 'mean')
    target = None if out is None else as_writable_vector(out, data.shape[1], 'out')

    if data.shape[0] < 2:
        _warn_no_degrees_of_freedom('col_std', data.shape[0])

    std = column_std(data, mean_vec)
    if target is None:
        return std
    target[...] = std
    return out


def remove_mean_col(
    a: ArrayLike,
    mean: ArrayLike,
    dim_i: int,
    dim_j: int,
    *,
    out: NDArray | None = None,
) -> NDArray:
    """
    Subtract each column's mean from every value of that column.

    `out` may be `a` itself for in-place centering; the operation is
    elementwise so aliasing is safe.

    Returns
    -------
    ndarray of shape (dim_i, dim_j), or `out`.
    """
    data = as_matrix(a, dim_i, dim_j, 'a')
    mean_vec = as_vector(mean, data.shape[1], 'mean')

    if out is None:
        return subtract_mean(data, mean_vec)

    target = as_writable_matrix(out, data.shape[0], data.shape[1], 'out')
    subtract_mean(data, mean_vec, out=target)
    return out


def modify_mean_stddev(
    mtx: NDArray,
    new_mean: float,
    new_stddev: float,
    dim_i: int,
    dim_j: int,
) -> NDArray:
    """
    Rescale a matrix in place: every value becomes x * new_stddev + new_mean.

    This is a plain affine map with one target for the whole matrix. It
    does not re-center by the matrix's own column statistics, so the
    result only has the requested mean and deviation when the input is
    already standardized (mean 0, sd 1). See standardize_columns() for
    the variant that standardizes first. new_stddev == 0 sets every value
    to new_mean.

    Element (r, c) is addressed as mtx[r * dim_j + c], i.e. with row
    stride dim_j like every other routine here. An earlier version of this
    routine wrote to mtx[i * dim_i + j], which only agrees for square
    matrices and runs past the buffer otherwise; that indexing is not
    reproduced.

    Returns
    -------
    `mtx`, modified in place.

    Raises
    ------
    ValidationError
        If new_mean or new_stddev is not a real number, or mtx cannot be
        written in place. The buffer is untouched in that case.
    """
    new_mean = check_scalar(new_mean, 'new_mean')
    new_stddev = check_scalar(new_stddev, 'new_stddev')
    target = as_writable_matrix(mtx, dim_i, dim_j, 'mtx')
    affine_rescale(target, new_mean, new_stddev)
    return mtx


def standardize_columns(
    mtx: NDArray,
    dim_i: int,
    dim_j: int,
    *,
    new_mean: float = 0.0,
    new_stddev: float = 1.0,
) -> NDArray:
    """
    Give every column exactly the target mean and sample standard deviation.

    Each column is z-scored with its own mean and sample standard
    deviation, then modify_mean_stddev() is applied. Constant columns and
    dim_i == 1 produce NaN (with a RuntimeWarning).

    Returns
    -------
    `mtx`, modified in place.
    """
    new_mean = check_scalar(new_mean, 'new_mean')
    new_stddev = check_scalar(new_stddev, 'new_stddev')
    target = as_writable_matrix(mtx, dim_i, dim_j, 'mtx')

    if target.shape[0] < 2:
        _warn_no_degrees_of_freedom('standardize_columns', target.shape[0])

    mean = column_mean(target)
    std = column_std(target, mean)
    if np.any(std == 0):
        warnings.warn(
            f"standardize_columns: columns {np.flatnonzero(std == 0).tolist()} "
            f"are constant and become NaN",
            RuntimeWarning,
            stacklevel=2,
        )

    subtract_mean(target, mean, out=target)
    with np.errstate(divide='ignore', invalid='ignore'):
        np.divide(target, std, out=target)
    affine_rescale(target, new_mean, new_stddev)
    return mtx


def describe(
    data: ArrayLike | MatrixDesign,
    dim_i: int | None = None,
    dim_j: int | None = None,
) -> ColumnSolution:
    """
    Column means, sample standard deviations and the centered matrix.

    Parameters
    ----------
    data : array-like or MatrixDesign
        With dim_i and dim_j: a row-major buffer. Without: a 1D or 2D
        array (or DataFrame-like object).
    dim_i, dim_j : int, optional
        Buffer dimensions; give both or neither. Not accepted together
        with a MatrixDesign, which already carries its shape.

    Returns
    -------
    ColumnSolution with mean, sd and centered populated.
    """
    if (dim_i is None) != (dim_j is None):
        raise ValidationError("describe: give both dim_i and dim_j, or neither")

    if isinstance(data, MatrixDesign):
        if dim_i is not None:
            raise ValidationError(
                f"describe: dim_i and dim_j cannot be given with a MatrixDesign "
                f"(design is {data.dim_i}x{data.dim_j})"
            )
        design = data
    elif dim_i is not None:
        design = MatrixDesign.from_buffer(data, dim_i, dim_j)
    else:
        design = MatrixDesign.from_array(data)

    result = CPUColumnBackend().solve(design, compute={'mean', 'sd', 'centered'})
    return ColumnSolution(_result=result, _design=design)
