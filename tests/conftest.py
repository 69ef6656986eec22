"""
Pytest configuration and shared fixtures for procedural_noise tests.

This file provides:
1. Sample coordinate sets drawn from a seeded numpy generator
2. A brute-force Voronoi F1 reference built straight on the cell hashes
3. Helper assertions for value ranges

Usage:
    pytest tests/ -v
"""

import math
import os
import sys

import numpy as np
import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))


# =============================================================================
# PYTEST FIXTURES
# =============================================================================

@pytest.fixture
def rng():
    """Seeded generator so every run samples the same points."""
    return np.random.default_rng(1234)


@pytest.fixture
def points_2d(rng):
    return [tuple(float(c) for c in p) for p in rng.uniform(-20.0, 20.0, size=(32, 2))]


@pytest.fixture
def points_3d(rng):
    return [tuple(float(c) for c in p) for p in rng.uniform(-20.0, 20.0, size=(24, 3))]


@pytest.fixture
def points_by_dims(rng):
    """Coordinates of every supported arity, keyed by dimension count."""
    return {dims: [tuple(float(c) for c in p) for p in rng.uniform(-50.0, 50.0, size=(12, dims))]
            for dims in range(1, 5)}


@pytest.fixture
def brute_force_f1():
    """
    Reference F1 over the 3^D neighborhood using the PCG cell hash directly.

    Returns (distance, position) in lattice space, Euclidean metric.
    """
    from procedural_noise.hash import hash_int_to_vec

    def _f1(coord, randomness=1.0):
        cell = [math.floor(c) for c in coord]
        best = (float('inf'), None)
        for offset in np.ndindex(*(3,) * len(coord)):
            neighbor = [c + o - 1 for c, o in zip(cell, offset)]
            jitter = hash_int_to_vec(neighbor)
            point = tuple(n + j * randomness for n, j in zip(neighbor, jitter))
            d = math.dist(point, coord)
            if d < best[0]:
                best = (d, point)
        return best

    return _f1


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def assert_unit_range(values, msg=""):
    """Assert that every value is finite and in [0, 1]."""
    for v in values:
        assert math.isfinite(v), f"Non-finite value {v}. {msg}"
        assert 0.0 <= v <= 1.0, f"Value {v} outside [0, 1]. {msg}"
