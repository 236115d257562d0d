"""
Pixel buffer with bounds-checked drawing and image export.
"""
import logging

import numpy as np
import PIL.Image

from sphere_tracer import constants
from sphere_tracer.color import Color
from sphere_tracer.errors import BoundsError, CanvasClosedError, EncodeError

logger = logging.getLogger(__name__)


class Canvas:
    """
    Fixed-size RGBA pixel buffer.

    Pixels are stored row-major in a (height, width, 4) uint8 array and start
    out black with alpha 0. Once saved the canvas is closed and every further
    draw or save raises CanvasClosedError.
    """

    def __init__(self, width=constants.DEFAULT_WIDTH, height=constants.DEFAULT_HEIGHT):
        for name, value in (("width", width), ("height", height)):
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                raise ValueError(f"{name} must be an int, got {value!r}")
            if value <= 0:
                raise ValueError(f"{name} must be > 0, got {value}")

        self.width = int(width)
        self.height = int(height)
        self.pixels = np.zeros((self.height, self.width, 4), dtype=np.uint8)
        self.closed = False

    def __repr__(self):
        return f"Canvas(width={self.width}, height={self.height})"

    def _check_open(self):
        if self.closed:
            raise CanvasClosedError("canvas has already been saved")

    def _check_point(self, x, y):
        for value in (x, y):
            if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, np.integer)):
                raise BoundsError(
                    f"pixel coordinates must be integers, got ({x!r}, {y!r})",
                    point=(x, y),
                    dimensions=(self.width, self.height),
                )
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise BoundsError(
                f"drawing outside of canvas: point ({x}, {y}) outside dimensions "
                f"({self.width}/{self.height})",
                point=(x, y),
                dimensions=(self.width, self.height),
            )

    def get_dimensions(self):
        """Return (width, height)."""
        return (self.width, self.height)

    def draw(self, x, y, color):
        """
        Write a single pixel.

        Raises:
            BoundsError: If (x, y) is outside the canvas
        """
        self._check_open()
        self._check_point(x, y)
        self.pixels[y, x] = color.to_pixel()

    def draw_area(self, x, y, block_width, colors):
        """
        Write a rectangular block of pixels.

        Element i of `colors` lands on (x + i % block_width, y + i // block_width).
        The whole block is checked before anything is written.

        Args:
            x, y: Top-left corner of the block
            block_width: Number of columns in the block
            colors: Row-major sequence of Color

        Raises:
            BoundsError: If any part of the block falls outside the canvas
        """
        self._check_open()
        if block_width <= 0:
            raise ValueError(f"block_width must be > 0, got {block_width}")

        colors = list(colors)
        if not colors:
            return
        block_height = -(-len(colors) // block_width)

        if x < 0 or y < 0 or x + block_width > self.width or y + block_height > self.height:
            raise BoundsError(
                f"drawing outside of canvas: drawing area ({x}-{x + block_width}, "
                f"{y}-{y + block_height}) outside dimensions ({self.width}/{self.height})",
                point=(x, y),
                dimensions=(self.width, self.height),
            )

        values = np.array([color.to_pixel() for color in colors], dtype=np.uint8)

        full_rows = len(colors) // block_width
        if full_rows:
            block = values[:full_rows * block_width].reshape(full_rows, block_width, 4)
            self.pixels[y:y + full_rows, x:x + block_width] = block

        # Trailing partial row
        remainder = values[full_rows * block_width:]
        if len(remainder):
            self.pixels[y + full_rows, x:x + len(remainder)] = remainder

    def draw_mask(self, mask, color):
        """
        Paint `color` wherever a (height, width) boolean mask is set.

        Raises:
            BoundsError: If the mask does not match the canvas extent
        """
        self._check_open()
        mask = np.asarray(mask, dtype=bool)
        if mask.shape != (self.height, self.width):
            raise BoundsError(
                f"mask shape {mask.shape} does not match canvas dimensions "
                f"({self.width}/{self.height})",
                dimensions=(self.width, self.height),
            )
        self.pixels[mask] = color.to_pixel()

    def get_pixel(self, x, y):
        """Return the stored (r, g, b, a) tuple at (x, y)."""
        self._check_point(x, y)
        return tuple(int(c) for c in self.pixels[y, x])

    def get_color(self, x, y):
        """Return the Color at (x, y), ignoring alpha."""
        r, g, b, _ = self.get_pixel(x, y)
        return Color(r, g, b)

    def to_array(self):
        """Copy of the (height, width, 4) uint8 buffer."""
        return self.pixels.copy()

    def to_image(self):
        """Pillow RGBA image of the current buffer."""
        return PIL.Image.fromarray(self.pixels)

    def save(self, path):
        """
        Encode the canvas and write it to `path`.

        The format follows the file extension. Saving closes the canvas.

        Raises:
            EncodeError: If the codec or the filesystem rejects the write
        """
        self._check_open()
        try:
            self.to_image().save(path)
        except (OSError, ValueError, KeyError) as exc:
            raise EncodeError(f"failed to save canvas to {path}: {exc}") from exc
        finally:
            self.closed = True
        logger.debug("Saved %dx%d canvas to %s", self.width, self.height, path)
