"""Orthographic sphere ray tracer."""

from .canvas import Canvas
from .color import Color
from .errors import BoundsError, CanvasClosedError, EncodeError, RenderError
from .geometry import Ray, Renderable, Sphere, vec3
from .raytracer import Raytracer, render
from .scene import Scene

__all__ = [
    "BoundsError",
    "Canvas",
    "CanvasClosedError",
    "Color",
    "EncodeError",
    "Ray",
    "Raytracer",
    "RenderError",
    "Renderable",
    "Scene",
    "Sphere",
    "render",
    "vec3",
]
