"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pymultivector import ArrayVector, MultiVector
from pymultivector.multivector import from_array


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def template():
    """Dimension-5 template vector filled with ones."""
    return ArrayVector.full(5, 1.0)


@pytest.fixture
def random_rows(rng):
    """(3, 6) array of standard normal rows."""
    return rng.standard_normal((3, 6))


@pytest.fixture
def random_mv(random_rows):
    """MultiVector holding the rows of random_rows."""
    return from_array(random_rows)


@pytest.fixture
def empty_mv():
    """Default-constructed, never sized."""
    return MultiVector()
