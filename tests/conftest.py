"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


def _uniform(seed, size):
    p = np.random.default_rng(seed).uniform(0.0, 1.0, size=size)
    # a few small values so the stepwise methods have something to reject
    p[: max(1, size // 4)] /= 100.0
    return p


def _tied(seed, size):
    levels = np.array([0.0, 0.001, 0.01, 0.04, 0.04, 0.2, 0.5, 1.0])
    return np.random.default_rng(seed).choice(levels, size=size)


P_VECTORS = {
    "k1": np.array([0.03]),
    "k1-large": np.array([0.7]),
    "k2": np.array([0.04, 0.01]),
    "k2-tied": np.array([0.02, 0.02]),
    "uniform-12": _uniform(42, 12),
    "uniform-50": _uniform(7, 50),
    "uniform-200": _uniform(11, 200),
    "heavy-ties-40": _tied(3, 40),
    "heavy-ties-9": _tied(5, 9),
    "zeros-and-ones": np.array([0.0, 1.0, 0.0, 0.5, 1.0, 0.02]),
}


@pytest.fixture(params=list(P_VECTORS))
def p_vector(request):
    """p-value vectors of several sizes, including k = 1, k = 2 and heavy ties."""
    return P_VECTORS[request.param].copy()
