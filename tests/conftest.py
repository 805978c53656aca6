"""
Pytest configuration and fixtures for the pylibnoise test suite.

This file contains shared fixtures, marker registration and small helpers
used across the test suite.
"""
import os
import sys
import pytest
import numpy as np


def pytest_configure(config):
    """Configure pytest with custom settings."""
    # Add the package root to Python path for testing
    package_root = os.path.dirname(os.path.dirname(__file__))
    if package_root not in sys.path:
        sys.path.insert(0, package_root)

    config.addinivalue_line("markers", "unit: fast tests of a single component")
    config.addinivalue_line("markers", "integration: tests of whole module graphs and maps")
    config.addinivalue_line("markers", "slow: tests that evaluate many points or large maps")
    config.addinivalue_line("markers", "importtest: import smoke tests")


def pytest_collection_modifyitems(config, items):
    """Add markers derived from test location and name."""
    for item in items:
        if "taichi" in item.name.lower():
            item.add_marker("slow")

        if "test_imports.py" in str(item.fspath):
            item.add_marker("importtest")


@pytest.fixture(scope="session")
def random_points():
    """Reproducible cloud of 10,000 points in [-100, 100)^3."""
    rng = np.random.default_rng(42)
    pts = rng.uniform(-100.0, 100.0, size=(3, 10_000))
    return pts[0], pts[1], pts[2]


@pytest.fixture(scope="session")
def small_grid():
    """Small 2D grid of coordinates (x, y, z) with y = 0."""
    xs = np.linspace(-2.0, 2.0, 17)
    zs = np.linspace(-1.5, 1.5, 13)
    X, Z = np.meshgrid(xs, zs)
    return X, np.zeros_like(X), Z


@pytest.fixture
def skip_if_no_taichi():
    """Skip test if Taichi is not available or fails to initialize."""
    try:
        import taichi as ti
        ti.init(arch=ti.cpu, offline_cache=False)
        return True
    except Exception:
        pytest.skip("Taichi not available or initialization failed")


class GraphFactory:
    """Helper class building small module graphs for tests."""

    @staticmethod
    def terrain(seed=0):
        """Select between a Perlin and a ridged field, warped by Turbulence."""
        import pylibnoise as pln

        lowlands = pln.Perlin(frequency=2.0, persistence=0.25, seed=seed)
        mountains = pln.RidgedMultifractal(frequency=2.0, octave_count=4, seed=seed + 1)
        mask = pln.Perlin(frequency=0.5, octave_count=3, seed=seed + 2)
        select = pln.Select(lowlands, mountains, mask, minimum=0.0, maximum=1000.0, fall_off=0.125)
        return pln.Turbulence(select, power=0.125, frequency=4.0, roughness=2, seed=seed + 3)

    @staticmethod
    def diamond(seed=0):
        """One Perlin shared by both inputs of a Max."""
        import pylibnoise as pln

        shared = pln.Perlin(seed=seed, octave_count=3)
        return pln.Max(pln.Translate(shared, 0.5, 0.0, 0.5), pln.Rotate(shared, 0.0, 45.0, 0.0))


@pytest.fixture
def graph_factory():
    """Provide access to test graph builders."""
    return GraphFactory()
