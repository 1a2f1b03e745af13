"""
Uniform generator handling for the Gaussian sampler.

A process-wide default numpy Generator backs every call that does not
pass its own. It is shared mutable state: calls that rely on it are not
thread-safe. Pass `rng=` (a seed or a Generator) to own the state.
"""

from __future__ import annotations

import numbers

import numpy as np

from pycolstats.core.exceptions import ValidationError

_default_rng: np.random.Generator | None = None


def get_default_rng() -> np.random.Generator:
    """Return the process-wide generator, creating it (OS-seeded) on first use."""
    global _default_rng
    if _default_rng is None:
        _default_rng = np.random.default_rng()
    return _default_rng


def seed(value: int | None = None) -> None:
    """Re-seed the process-wide generator. None draws fresh OS entropy."""
    global _default_rng
    _default_rng = np.random.default_rng(value)


def resolve_rng(rng: np.random.Generator | int | None) -> np.random.Generator:
    """
    Turn an `rng=` argument into a Generator.

    None -> process-wide default, int -> fresh Generator seeded with it,
    Generator -> itself.
    """
    if rng is None:
        return get_default_rng()
    if isinstance(rng, np.random.Generator):
        return rng
    if isinstance(rng, numbers.Integral) and not isinstance(rng, bool):
        return np.random.default_rng(int(rng))
    raise ValidationError(
        f"rng: expected None, an int seed or numpy.random.Generator, "
        f"got {type(rng).__name__}"
    )
