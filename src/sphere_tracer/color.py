"""
8-bit RGB color values.
"""
from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class Color:
    """
    Immutable RGB intensity triple.

    Attributes:
        red, green, blue: Channel intensities in 0..255
    """
    red: int
    green: int
    blue: int

    def __post_init__(self):
        """Validate that every channel is an 8-bit integer."""
        for name in ("red", "green", "blue"):
            value = getattr(self, name)
            if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, np.integer)):
                raise ValueError(f"{name} must be an int, got {value!r}")
            if not 0 <= value <= 255:
                raise ValueError(f"{name} must be in 0..255, got {value}")

    @classmethod
    def from_rgb(cls, rgb):
        """Build a Color from any (r, g, b) sequence."""
        red, green, blue = rgb
        return cls(int(red), int(green), int(blue))

    def to_pixel(self):
        """
        Convert to the RGBA layout stored in the canvas buffer.

        Alpha is always 0, so saved images are fully transparent.
        """
        return (self.red, self.green, self.blue, 0)
