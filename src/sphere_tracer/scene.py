"""
Ordered collection of renderable objects.
"""
import logging

from sphere_tracer.geometry import Renderable, Sphere

logger = logging.getLogger(__name__)


class Scene:
    """
    Objects to be rendered, kept in insertion order.

    The order is the test order used for every pixel. Objects are never
    removed or reordered, and there is no spatial index: a query costs
    O(len(scene)).
    """

    def __init__(self):
        self.renderables = []

    @classmethod
    def from_spheres(cls, specs):
        """
        Build a scene from (center, radius) pairs.

        Args:
            specs: Iterable of ((x, y, z), radius)
        """
        scene = cls()
        for center, radius in specs:
            scene.add(Sphere(center, radius))
        return scene

    def add(self, renderable):
        """Append an object to the end of the scene."""
        if not isinstance(renderable, Renderable):
            raise TypeError(f"Scene only accepts Renderable objects, got {type(renderable).__name__}")
        self.renderables.append(renderable)
        logger.debug("Added %r (scene size %d)", renderable, len(self.renderables))

    def __len__(self):
        return len(self.renderables)

    def __iter__(self):
        return iter(self.renderables)

    def __repr__(self):
        return f"Scene({self.renderables!r})"
