"""
Column statistics solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from pycolstats.core.result import Result

if TYPE_CHECKING:
    from pycolstats.columnwise.design import MatrixDesign


@dataclass(frozen=True)
class ColumnParams:
    """
    Parameter payload for column statistics.

    Fields are None when not requested from the backend.
    """
    # Per-column statistics: shape (dim_j,)
    mean: NDArray[np.floating[Any]] | None = None
    sd: NDArray[np.floating[Any]] | None = None

    # Mean-removed matrix: shape (dim_i, dim_j)
    centered: NDArray[np.floating[Any]] | None = None


@dataclass
class ColumnSolution:
    """
    User-facing column statistics.

    Wraps Result[ColumnParams] and provides convenient accessors.
    """
    _result: Result[ColumnParams]
    _design: 'MatrixDesign'

    @property
    def mean(self) -> NDArray[np.floating[Any]] | None:
        """Per-column means, shape (dim_j,)."""
        return self._result.params.mean

    @property
    def sd(self) -> NDArray[np.floating[Any]] | None:
        """Per-column sample standard deviation (n-1), shape (dim_j,)."""
        return self._result.params.sd

    @property
    def centered(self) -> NDArray[np.floating[Any]] | None:
        """Matrix with each column's mean removed, shape (dim_i, dim_j)."""
        return self._result.params.centered

    @property
    def dim_i(self) -> int:
        return self._design.dim_i

    @property
    def dim_j(self) -> int:
        return self._design.dim_j

    @property
    def columns(self) -> tuple[str, ...] | None:
        """Column names from the design."""
        return self._design.columns

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Per-column table of mean and standard deviation."""
        rows = []
        if self.mean is not None:
            rows.append(("Mean", self.mean))
        if self.sd is not None:
            rows.append(("SD", self.sd))

        lines = [f"Column statistics (dim_i={self.dim_i}, dim_j={self.dim_j}):"]
        if not rows:
            return lines[0]

        cols = self.columns or tuple(f"V{j+1}" for j in range(self.dim_j))
        col_widths = [
            max(len(cols[j]), max(len(f"{values[j]:.6f}") for _, values in rows))
            for j in range(self.dim_j)
        ]
        label_width = max(len(label) for label, _ in rows)

        header = " " * (label_width + 2)
        header += "  ".join(c.rjust(w) for c, w in zip(cols, col_widths))
        lines.append(header)

        for label, values in rows:
            row = label.ljust(label_width) + "  "
            row += "  ".join(
                f"{values[j]:.6f}".rjust(w) for j, w in enumerate(col_widths)
            )
            lines.append(row)

        for warning in self.warnings:
            lines.append(f"Warning: {warning}")

        return "\n".join(lines)

    def __repr__(self) -> str:
        params = self._result.params
        computed = [
            name for name in ('mean', 'sd', 'centered')
            if getattr(params, name) is not None
        ]
        stats_str = ", ".join(computed) if computed else "none"
        return (
            f"ColumnSolution(dim_i={self.dim_i}, dim_j={self.dim_j}, "
            f"computed=[{stats_str}])"
        )
