"""
Orthographic ray casting of a Scene onto a Canvas.
"""
import logging
from concurrent.futures import ThreadPoolExecutor

import numpy as np

from sphere_tracer import constants
from sphere_tracer.color import Color
from sphere_tracer.geometry import Ray, as_vec3, vec3

logger = logging.getLogger(__name__)


class Raytracer:
    """
    Casts one ray per pixel along +Z and paints every hit with a flat color.

    Pixel (x, y) is sampled by the ray starting at (x, y, 0). Objects are tested
    in scene order and any hit counts; there is no nearest-surface selection
    across objects since every hit is painted the same color.
    """

    def __init__(self, scene, hit_color=None):
        self.scene = scene
        self.hit_color = hit_color if hit_color is not None else Color.from_rgb(constants.HIT_COLOR_RGB)
        self.direction = as_vec3(constants.RAY_DIRECTION, "direction")

    def trace(self, x, y):
        """Return True if the ray through pixel (x, y) hits any object."""
        ray = Ray(vec3(x, y, 0.0), self.direction)
        return any(obj.intersect(ray) is not None for obj in self.scene)

    def trace_rows(self, width, y_start, y_stop):
        """
        Hit mask for a band of rows.

        Args:
            width: Number of pixels per row
            y_start, y_stop: Half-open row range

        Returns:
            (y_stop - y_start, width) boolean array
        """
        ys, xs = np.mgrid[y_start:y_stop, 0:width]
        origins = np.stack(
            [xs.ravel(), ys.ravel(), np.zeros(xs.size)], axis=1
        ).astype(np.float32)

        hits = np.zeros(origins.shape[0], dtype=bool)
        for obj in self.scene:
            hits |= obj.intersect_many(origins, self.direction) < np.inf
        return hits.reshape(y_stop - y_start, width)

    def hit_mask(self, width, height, workers=1, chunk_rows=constants.DEFAULT_CHUNK_ROWS):
        """
        Hit mask for the full (height, width) extent.

        Rows are traced in disjoint bands of `chunk_rows`, so the per-band
        temporaries stay bounded. With more than one worker the bands are
        traced concurrently and stitched back together in order.
        """
        if workers < 1:
            raise ValueError(f"workers must be >= 1, got {workers}")
        if chunk_rows < 1:
            raise ValueError(f"chunk_rows must be >= 1, got {chunk_rows}")

        bands = [(y, min(height, y + chunk_rows)) for y in range(0, height, chunk_rows)]
        mask = np.zeros((height, width), dtype=bool)

        if workers == 1:
            for y_start, y_stop in bands:
                mask[y_start:y_stop] = self.trace_rows(width, y_start, y_stop)
            return mask

        with ThreadPoolExecutor(max_workers=workers) as executor:
            futures = [
                (y_start, y_stop, executor.submit(self.trace_rows, width, y_start, y_stop))
                for y_start, y_stop in bands
            ]
            for y_start, y_stop, future in futures:
                mask[y_start:y_stop] = future.result()
        return mask

    def render(self, canvas, workers=1, chunk_rows=constants.DEFAULT_CHUNK_ROWS):
        """
        Render the scene into `canvas`.

        Pixels without a hit keep whatever the canvas already holds (for
        example a backdrop). The scene is only read.

        Args:
            canvas: Target Canvas
            workers: Number of threads used to trace row bands
            chunk_rows: Rows per band when workers > 1

        Returns:
            The (height, width) boolean hit mask
        """
        width, height = canvas.get_dimensions()
        logger.debug("Rendering %d objects onto %dx%d canvas with %d worker(s)",
                     len(self.scene), width, height, workers)

        mask = self.hit_mask(width, height, workers=workers, chunk_rows=chunk_rows)
        canvas.draw_mask(mask, self.hit_color)

        logger.debug("Painted %d of %d pixels", int(mask.sum()), width * height)
        return mask


def render(scene, canvas, **kwargs):
    """Render `scene` into `canvas` with a default Raytracer."""
    hit_color = kwargs.pop("hit_color", None)
    return Raytracer(scene, hit_color=hit_color).render(canvas, **kwargs)
