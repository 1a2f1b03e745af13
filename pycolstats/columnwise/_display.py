"""
Console display of row-major matrices.
"""

from __future__ import annotations

import sys
from typing import TextIO

from numpy.typing import ArrayLike

from pycolstats.core.validation import as_matrix


def format_matrix(a: ArrayLike, dim_i: int, dim_j: int) -> str:
    """
    Render a matrix as text: one line per row, values as %2.5f
    separated by single spaces.
    """
    data = as_matrix(a, dim_i, dim_j, 'a')
    return "\n".join(
        " ".join(f"{value:2.5f}" for value in row)
        for row in data
    )


def show_matrix(
    a: ArrayLike,
    dim_i: int,
    dim_j: int,
    *,
    file: TextIO | None = None,
) -> None:
    """Write format_matrix() output, newline-terminated, to `file` (default stdout)."""
    text = format_matrix(a, dim_i, dim_j)
    stream = sys.stdout if file is None else file
    stream.write(text + "\n")
