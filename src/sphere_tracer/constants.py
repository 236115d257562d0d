"""
Default parameters and configuration for the Sphere Tracer.
"""

# Canvas
DEFAULT_WIDTH = 800
DEFAULT_HEIGHT = 600

# Output
DEFAULT_OUTPUT = "render.png"

# Camera (orthographic, looking down +Z from the z=0 plane)
RAY_DIRECTION = (0.0, 0.0, 1.0)

# Colors (8-bit RGB)
HIT_COLOR_RGB = (0, 255, 0)
BACKDROP_TOP_RGB = (122, 170, 255)     # Sky blue
BACKDROP_BOTTOM_RGB = (220, 220, 230)  # Haze

# Parallel rendering
DEFAULT_CHUNK_ROWS = 64

# Demo scene: (center, radius) in pixel units
DEMO_SPHERES = [
    ((150.0, 150.0, 0.0), 100.0),
    ((300.0, 300.0, 0.0), 32.0),
    ((550.0, 450.0, 0.0), 50.0),
    ((600.0, -20.0, 0.0), 300.0),  # Partly off-canvas
]
