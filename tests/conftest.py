"""Shared fixtures for the ray tracer tests."""

import pytest

from phongtracer.core.vector import Vector3
from phongtracer.core.ray import Ray
from phongtracer.materials.material import Material


@pytest.fixture
def white():
    return Vector3(1.0, 1.0, 1.0)


@pytest.fixture
def forward_ray():
    """Ray from the origin looking down +z."""
    return Ray(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, 1.0))


@pytest.fixture
def white_material(white):
    return Material(white, ambient=0.1, diffuse=1.0, specular=10.0)
