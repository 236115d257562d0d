"""
Vertical gradient backdrop painted before the scene is rendered.
"""
import numpy as np

from sphere_tracer import constants
from sphere_tracer.color import Color


def gradient_colors(width, height, top=constants.BACKDROP_TOP_RGB,
                    bottom=constants.BACKDROP_BOTTOM_RGB):
    """
    Row-major colors of a top-to-bottom linear gradient.

    For row y, t = y / height and each channel is top * (1 - t) + bottom * t,
    truncated to an integer byte.

    Args:
        width, height: Extent of the gradient in pixels
        top: (r, g, b) at row 0
        bottom: (r, g, b) approached at row `height`

    Returns:
        list of Color, length width * height
    """
    top = np.array(top, dtype=np.float32)
    bottom = np.array(bottom, dtype=np.float32)

    t = (np.arange(height, dtype=np.float32) / np.float32(height))[:, None]
    rows = (top[None, :] * (np.float32(1.0) - t) + bottom[None, :] * t).astype(np.uint8)

    row_colors = [Color.from_rgb(rgb) for rgb in rows]
    return [color for color in row_colors for _ in range(width)]


def paint_backdrop(canvas, top=constants.BACKDROP_TOP_RGB, bottom=constants.BACKDROP_BOTTOM_RGB):
    """Fill the whole canvas with the gradient."""
    width, height = canvas.get_dimensions()
    canvas.draw_area(0, 0, width, gradient_colors(width, height, top, bottom))
