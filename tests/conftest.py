"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pymatrix.dense import from_elements


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def square_float(rng):
    """Random 4x4 float matrix."""
    values = rng.standard_normal(16).tolist()
    return from_elements(4, 4, values)


@pytest.fixture
def wide_int():
    """2x3 integer matrix."""
    return from_elements(2, 3, [1, 2, 3, 4, 5, 6])


@pytest.fixture
def tall_int():
    """3x2 integer matrix."""
    return from_elements(3, 2, [7, 8, 9, 10, 11, 12])
