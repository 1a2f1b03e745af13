"""
MatrixDesign: data wrapper for column-wise statistics.

Wraps a validated (dim_i, dim_j) row-major view of the caller's data.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pycolstats.core.exceptions import DimensionError
from pycolstats.core.validation import as_matrix, check_array, check_dimension


@dataclass(frozen=True)
class MatrixDesign:
    """
    Design for column-wise statistics.

    Holds a dim_i x dim_j matrix (rows x columns). NaN and Inf are allowed
    and propagate through every statistic. Immutable after construction.

    Construction:
        MatrixDesign.from_buffer(buffer, dim_i, dim_j)
        MatrixDesign.from_array(data)
    """
    _data: NDArray[np.floating[Any]]
    _dim_i: int
    _dim_j: int
    _columns: tuple[str, ...] | None

    @classmethod
    def from_buffer(cls, buffer: ArrayLike, dim_i: int, dim_j: int) -> MatrixDesign:
        """
        Build MatrixDesign from a row-major buffer.

        Parameters
        ----------
        buffer : array-like
            Flat (or already 2D) buffer of at least dim_i * dim_j values.
            Element (row, col) is read from flat offset row * dim_j + col.
        dim_i, dim_j : int
            Number of rows and columns, both >= 1.
        """
        data = as_matrix(buffer, dim_i, dim_j, 'buffer')
        return cls(_data=data, _dim_i=data.shape[0], _dim_j=data.shape[1], _columns=None)

    @classmethod
    def from_array(cls, data) -> MatrixDesign:
        """
        Build MatrixDesign from a 1D or 2D array.

        Objects exposing .values (a DataFrame) are unwrapped and their
        .columns kept as column names. 1D input is reshaped to (n, 1).
        """
        if hasattr(data, 'values'):
            columns = tuple(str(c) for c in data.columns) if hasattr(data, 'columns') else None
            array = check_array(data.values, 'data')
        else:
            columns = None
            array = check_array(data, 'data')

        if array.ndim == 1:
            array = array.reshape(-1, 1)

        if array.ndim != 2:
            raise DimensionError(
                f"data: expected 1D or 2D array, got {array.ndim}D with shape {array.shape}"
            )

        dim_i = check_dimension(array.shape[0], 'dim_i')
        dim_j = check_dimension(array.shape[1], 'dim_j')
        return cls(
            _data=np.ascontiguousarray(array),
            _dim_i=dim_i,
            _dim_j=dim_j,
            _columns=columns,
        )

    @property
    def data(self) -> NDArray[np.floating[Any]]:
        """Matrix (dim_i x dim_j)."""
        return self._data

    @property
    def dim_i(self) -> int:
        """Number of rows."""
        return self._dim_i

    @property
    def dim_j(self) -> int:
        """Number of columns."""
        return self._dim_j

    @property
    def columns(self) -> tuple[str, ...] | None:
        """Column names, or None if not available."""
        return self._columns

    def __repr__(self) -> str:
        return f"MatrixDesign(dim_i={self._dim_i}, dim_j={self._dim_j})"
