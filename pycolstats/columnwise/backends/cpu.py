"""
CPU backend for column-wise statistics.

The module-level kernels operate on validated (dim_i, dim_j) float64
views; the buffer API in columnwise.solvers calls them directly.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray

from pycolstats.core.exceptions import ValidationError
from pycolstats.core.result import Result
from pycolstats.core.compute.timing import Timer
from pycolstats.columnwise.design import MatrixDesign
from pycolstats.columnwise.solution import ColumnParams


VALID_STATISTICS = frozenset({'mean', 'sd', 'centered'})


def column_mean(data: NDArray) -> NDArray:
    """Per-column arithmetic mean: column sums divided by dim_i."""
    return np.sum(data, axis=0) / data.shape[0]


def column_std(data: NDArray, mean: NDArray) -> NDArray:
    """
    Per-column sample standard deviation around the supplied mean.

    Divides by dim_i - 1. With a single row the divisor is zero and the
    result is NaN (Inf if `mean` differs from the row).
    """
    deviations = data - mean
    with np.errstate(divide='ignore', invalid='ignore'):
        return np.sqrt(np.sum(deviations * deviations, axis=0) / (data.shape[0] - 1))


def subtract_mean(data: NDArray, mean: NDArray, out: NDArray | None = None) -> NDArray:
    """Elementwise data[r, c] - mean[c]. `out` may be `data` itself."""
    return np.subtract(data, mean, out=out)


def affine_rescale(data: NDArray, new_mean: float, new_stddev: float) -> NDArray:
    """In place: data * new_stddev + new_mean, the same scalars for every element."""
    np.multiply(data, new_stddev, out=data)
    np.add(data, new_mean, out=data)
    return data


class CPUColumnBackend:
    """CPU reference backend for column-wise statistics."""

    @property
    def name(self) -> str:
        return 'cpu_columnwise'

    def solve(
        self,
        design: MatrixDesign,
        *,
        compute: set[str] = VALID_STATISTICS,
    ) -> Result[ColumnParams]:
        """
        Compute requested column statistics.

        Parameters
        ----------
        design : MatrixDesign
        compute : set of str
            Subset of {'mean', 'sd', 'centered'}. 'sd' and 'centered'
            need the means and compute them when not requested.
        """
        unknown = set(compute) - VALID_STATISTICS
        if unknown:
            raise ValidationError(f"Unknown statistics requested: {sorted(unknown)}")

        timer = Timer()
        timer.start()

        data = design.data
        warnings_list: list[str] = []

        mean = None
        sd = None
        centered = None

        if compute:
            with timer.section('mean'):
                mean = column_mean(data)

        if 'sd' in compute:
            with timer.section('sd'):
                sd = column_std(data, mean)
            if design.dim_i < 2:
                warnings_list.append(
                    f"dim_i={design.dim_i}: sample standard deviation is undefined (NaN)"
                )

        if 'centered' in compute:
            with timer.section('centered'):
                centered = subtract_mean(data, mean)

        timer.stop()

        params = ColumnParams(
            mean=mean if 'mean' in compute else None,
            sd=sd,
            centered=centered,
        )

        info: dict[str, Any] = {
            'dim_i': design.dim_i,
            'dim_j': design.dim_j,
            'computed': sorted(compute),
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
