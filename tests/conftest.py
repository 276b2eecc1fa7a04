"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pymatrix import Mat


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def int_matrix(rng):
    """
    Factory for matrices with small integer-valued entries.

    Integer-valued float64 products and sums are exact, so algebraic
    identities can be checked with ==.
    """
    def make(rows, cols):
        return Mat[rows, cols](rng.integers(-9, 10, size=(rows, cols)))
    return make


@pytest.fixture
def int_components(rng):
    """Factory for tuples of small integer-valued floats."""
    def make(n):
        return tuple(float(v) for v in rng.integers(-9, 10, size=n))
    return make
