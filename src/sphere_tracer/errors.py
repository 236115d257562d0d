"""
Exception types raised by the Sphere Tracer.

None of these are retryable: a bounds or encode failure aborts the
operation that raised it and leaves recovery to the caller.
"""


class RenderError(Exception):
    """Base class for all Sphere Tracer errors."""


class BoundsError(RenderError, IndexError):
    """A draw or read addressed pixels outside the canvas."""

    def __init__(self, message, point=None, dimensions=None):
        super().__init__(message)
        self.point = point
        self.dimensions = dimensions


class EncodeError(RenderError, OSError):
    """The image codec failed to encode or write the canvas."""


class CanvasClosedError(RenderError, RuntimeError):
    """The canvas was already saved and can no longer be used."""
