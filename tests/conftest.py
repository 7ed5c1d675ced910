"""Pytest configuration and shared fixtures."""

import pytest

from core.ray import Ray
from core.vector import point, vector
from geometry.sphere import Sphere
from geometry.world import default_world


@pytest.fixture
def world():
    """Two concentric spheres and one light."""
    return default_world()


@pytest.fixture
def sphere():
    return Sphere()


@pytest.fixture
def ray_along_z():
    """Ray starting at z=-5 pointing at the origin."""
    return Ray(point(0, 0, -5), vector(0, 0, 1))


@pytest.fixture
def temp_output_dir(tmp_path):
    """Provide a temporary directory for test outputs."""
    out = tmp_path / "outputs"
    out.mkdir()
    return out
