"""
Ray-geometry intersection for the Sphere Tracer.

Vectors are float32 numpy arrays of shape (3,). All intersection arithmetic is
carried out in single precision so the scalar and vectorized solvers classify
every ray identically.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass

import numpy as np


def vec3(x, y, z):
    """Handy shorthand to make a single-precision 3-vector."""
    return np.array([x, y, z], dtype=np.float32)


def as_vec3(value, name="vector"):
    """
    Coerce a sequence or array into a read-only float32 3-vector.

    Raises:
        ValueError: If the value does not have exactly three components
    """
    arr = np.array(value, dtype=np.float32)
    if arr.shape != (3,):
        raise ValueError(f"{name} must have shape (3,), got {arr.shape}")
    arr.flags.writeable = False
    return arr


def dot(a, b):
    """
    Component-wise dot product over the last axis.

    Works on (3,) vectors and (N, 3) batches alike. The sum is spelled out so
    the accumulation order never depends on the array layout.
    """
    return a[..., 0] * b[..., 0] + a[..., 1] * b[..., 1] + a[..., 2] * b[..., 2]


@dataclass(frozen=True, eq=False)
class Ray:
    """
    Half-line starting at `origin` and heading along `direction`.

    The direction is used as given; callers are expected to pass unit vectors.
    """
    origin: np.ndarray
    direction: np.ndarray

    def __post_init__(self):
        object.__setattr__(self, "origin", as_vec3(self.origin, "origin"))
        object.__setattr__(self, "direction", as_vec3(self.direction, "direction"))


class Renderable(ABC):
    """Anything a ray can be tested against."""

    @abstractmethod
    def intersect(self, ray):
        """
        Return the hit distance along `ray`, or None on a miss.
        """

    def intersect_many(self, origins, direction):
        """
        Intersect a batch of parallel rays.

        Args:
            origins: (N, 3) array of ray origins
            direction: (3,) direction shared by every ray

        Returns:
            (N,) float32 array of hit distances (inf where no intersection)
        """
        origins = np.asarray(origins, dtype=np.float32).reshape(-1, 3)
        direction = as_vec3(direction, "direction")

        distances = np.full(origins.shape[0], np.inf, dtype=np.float32)
        for i, origin in enumerate(origins):
            t = self.intersect(Ray(origin, direction))
            if t is not None:
                distances[i] = t
        return distances


@dataclass(frozen=True, eq=False)
class Sphere(Renderable):
    """
    Analytic sphere.

    Attributes:
        center: (3,) center point
        radius: Radius, finite and strictly positive
    """
    center: np.ndarray
    radius: float

    def __post_init__(self):
        center = as_vec3(self.center, "center")
        if not np.all(np.isfinite(center)):
            raise ValueError(f"center must be finite, got {center}")
        radius = np.float32(self.radius)
        if not np.isfinite(radius) or radius <= 0:
            raise ValueError(f"radius must be finite and > 0, got {self.radius}")
        object.__setattr__(self, "center", center)
        object.__setattr__(self, "radius", radius)

    def __eq__(self, other):
        if not isinstance(other, Sphere):
            return NotImplemented
        return bool(np.array_equal(self.center, other.center)) and self.radius == other.radius

    def __hash__(self):
        return hash((tuple(self.center.tolist()), float(self.radius)))

    def intersect(self, ray):
        """
        Distance along the ray at which it touches or enters the sphere.

        Geometric solution: project the center onto the ray, compare the
        squared distance from the center to the ray's line against r^2, then
        step back and forward by the half chord.

        Args:
            ray: Ray with a unit direction

        Returns:
            The smaller of the two roots, or None on a miss. When the origin
            is inside the sphere the smaller root is negative.
        """
        # L = C - O
        center_dir = self.center - ray.origin

        # t_ca = L . D
        proj = dot(center_dir, ray.direction)
        if proj < 0:
            # Center is behind the origin
            return None

        # d^2 = L . L - t_ca^2
        perp_dist_sq = dot(center_dir, center_dir) - proj * proj
        radius_sq = self.radius * self.radius

        # Inclusive: a tangent ray is a hit
        if perp_dist_sq > radius_sq:
            return None

        # t_hc = sqrt(r^2 - d^2)
        half_chord = np.sqrt(radius_sq - perp_dist_sq)
        t_near = proj - half_chord
        t_far = proj + half_chord

        if t_near < 0 and t_far < 0:
            return None

        return float(min(t_near, t_far))

    def intersect_many(self, origins, direction):
        """
        Vectorized version of `intersect` for parallel rays.

        Args:
            origins: (N, 3) array of ray origins
            direction: (3,) unit direction shared by every ray

        Returns:
            (N,) float32 array of hit distances (inf where no intersection)
        """
        origins = np.asarray(origins, dtype=np.float32).reshape(-1, 3)
        direction = as_vec3(direction, "direction")

        center_dir = self.center[None, :] - origins
        proj = dot(center_dir, direction[None, :])
        perp_dist_sq = dot(center_dir, center_dir) - proj * proj
        radius_sq = self.radius * self.radius

        hit = ~(proj < 0) & ~(perp_dist_sq > radius_sq)

        # Only take the root where the discriminant is known to be non-negative
        half_chord = np.zeros_like(proj)
        half_chord[hit] = np.sqrt(radius_sq - perp_dist_sq[hit])
        t_near = proj - half_chord
        t_far = proj + half_chord

        hit &= ~((t_near < 0) & (t_far < 0))

        return np.where(hit, np.minimum(t_near, t_far), np.float32(np.inf)).astype(np.float32)
