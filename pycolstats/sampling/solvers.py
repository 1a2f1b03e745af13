"""
Normally distributed pseudo-random values.

Two transforms over a uniform generator are available:

'single_draw' (default)
    One uniform u in [0, 1) feeds both radius and angle:
    sqrt(-2 ln u) * cos(2 pi u). This is the historical randn of this
    library and is kept bit-for-bit. Because u is reused, the values are
    not standard normal: their mean is about 0.056 and their standard
    deviation about 1.056.

'box_muller'
    Textbook Box-Muller with two independent uniforms:
    sqrt(-2 ln(1 - u1)) * cos(2 pi u2). Standard normal.

A uniform draw of exactly 0 under 'single_draw' gives +inf; it is
returned, not raised.
"""

from __future__ import annotations

import warnings
from typing import Literal

import numpy as np
from numpy.typing import NDArray

from pycolstats.core.exceptions import ValidationError
from pycolstats.core.validation import as_writable_matrix, check_dimension
from pycolstats.sampling._generator import resolve_rng

SamplerMethod = Literal['single_draw', 'box_muller']

_TWO_PI = 6.2831853071795864769252867665590057683943387987502


def _single_draw(u: NDArray) -> NDArray:
    with np.errstate(divide='ignore'):
        return np.sqrt(-2.0 * np.log(u)) * np.cos(_TWO_PI * u)


def _box_muller(u1: NDArray, u2: NDArray) -> NDArray:
    # 1 - u1 lies in (0, 1], so the log is finite
    return np.sqrt(-2.0 * np.log1p(-u1)) * np.cos(_TWO_PI * u2)


def _check_method(method: str) -> None:
    if method not in ('single_draw', 'box_muller'):
        raise ValidationError(
            f"Unknown sampler method: {method!r}. "
            f"Must be 'single_draw' or 'box_muller'."
        )


def _sample(gen: np.random.Generator, count: int, method: str) -> NDArray:
    """`count` samples, consuming the generator as `count` scalar calls would."""
    if method == 'single_draw':
        return _single_draw(gen.random(count))
    uniforms = gen.random((count, 2))
    return _box_muller(uniforms[:, 0], uniforms[:, 1])


def randn(
    rng: np.random.Generator | int | None = None,
    *,
    method: SamplerMethod = 'single_draw',
) -> float:
    """
    One normally distributed value.

    Parameters
    ----------
    rng : Generator, int or None
        Uniform source. None uses the process-wide generator (not
        thread-safe); an int seeds a fresh Generator.
    method : str
        'single_draw' (default) or 'box_muller'.
    """
    _check_method(method)
    gen = resolve_rng(rng)
    return float(_sample(gen, 1, method)[0])


def randn_mtx(
    dim_i: int,
    dim_j: int,
    *,
    rng: np.random.Generator | int | None = None,
    method: SamplerMethod = 'single_draw',
    out: NDArray | None = None,
) -> NDArray:
    """
    A dim_i x dim_j matrix of independent randn() values, filled row by row.

    Elements equal successive randn() calls on the same generator.
    Non-finite values (a uniform draw of 0) are kept and reported with a
    RuntimeWarning.

    Returns
    -------
    ndarray of shape (dim_i, dim_j), or `out` filled in place.
    """
    dim_i = check_dimension(dim_i, 'dim_i')
    dim_j = check_dimension(dim_j, 'dim_j')
    _check_method(method)
    target = None if out is None else as_writable_matrix(out, dim_i, dim_j, 'out')
    gen = resolve_rng(rng)

    values = _sample(gen, dim_i * dim_j, method).reshape(dim_i, dim_j)

    if not np.all(np.isfinite(values)):
        warnings.warn(
            f"randn_mtx: {int(np.sum(~np.isfinite(values)))} non-finite values "
            f"from a uniform draw of 0",
            RuntimeWarning,
            stacklevel=2,
        )

    if target is None:
        return values
    target[...] = values
    return out
