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
def collinear_points():
    """Exactly y = 2x; exact arithmetic holds."""
    return [(1.0, 2.0), (2.0, 4.0), (3.0, 6.0)]


@pytest.fixture
def reference_points():
    """Six-point dataset with hand-checkable sums."""
    return [(43, 99), (21, 65), (25, 79), (42, 75), (57, 87), (59, 81)]


@pytest.fixture
def constant_x_points():
    """Every x identical: slope undefined."""
    return [(5.0, 1.0), (5.0, 2.0), (5.0, 3.0)]


@pytest.fixture
def noisy_line(rng):
    """y = 3 - 0.5x plus noise."""
    n = 200
    x = rng.uniform(-10, 10, n)
    y = 3.0 - 0.5 * x + rng.standard_normal(n) * 0.1
    return x, y
