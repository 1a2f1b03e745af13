"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def small_matrix():
    """3 x 2 matrix [[1,2],[3,4],[5,6]] as a flat row-major buffer."""
    return np.array([1.0, 2.0, 3.0, 4.0, 5.0, 6.0])


@pytest.fixture
def random_matrix(rng):
    """50 x 4 matrix with distinct column locations and scales."""
    return rng.standard_normal((50, 4)) * np.array([1.0, 2.0, 0.5, 10.0]) + np.array([0.0, -3.0, 7.0, 100.0])
