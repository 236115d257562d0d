"""
Pytest fixtures and helpers for Sphere Tracer tests.
"""

import numpy as np
import pytest
from sphere_tracer import constants
from sphere_tracer.canvas import Canvas
from sphere_tracer.color import Color
from sphere_tracer.geometry import Sphere, vec3
from sphere_tracer.scene import Scene


@pytest.fixture
def unit_sphere():
    """Radius-1 sphere five units down the +Z axis."""
    return Sphere(vec3(0.0, 0.0, 5.0), 1.0)


@pytest.fixture
def forward():
    """Standard +Z ray direction."""
    return vec3(0.0, 0.0, 1.0)


@pytest.fixture
def demo_scene():
    """The four-sphere demo scene."""
    return Scene.from_spheres(constants.DEMO_SPHERES)


@pytest.fixture
def canvas():
    """Small canvas for drawing tests."""
    return Canvas(4, 3)


@pytest.fixture
def hit_color():
    return Color(0, 255, 0)


def assert_pixel(canvas, x, y, rgb):
    """Assert the RGB stored at (x, y), with alpha pinned to 0."""
    assert canvas.get_pixel(x, y) == (*rgb, 0), f"Pixel ({x}, {y}) mismatch"


def silhouette_mask(width, height, cx, cy, radius):
    """Analytic disc coverage for a sphere centered on the z=0 plane."""
    ys, xs = np.mgrid[0:height, 0:width]
    return (xs - cx) ** 2 + (ys - cy) ** 2 <= radius ** 2
