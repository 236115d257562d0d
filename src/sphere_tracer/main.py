import argparse
import logging
import sys
import time

from sphere_tracer import constants
from sphere_tracer.backdrop import paint_backdrop
from sphere_tracer.canvas import Canvas
from sphere_tracer.errors import RenderError
from sphere_tracer.raytracer import Raytracer
from sphere_tracer.scene import Scene


def render_demo(width, height, output, backdrop=True, workers=1):
    """Render the demo scene and save it to `output`."""
    scene = Scene.from_spheres(constants.DEMO_SPHERES)
    canvas = Canvas(width, height)

    print(f"\n--- Rendering {len(scene)} spheres ({width}x{height}) ---")
    t0 = time.time()
    if backdrop:
        paint_backdrop(canvas)
        print(f"  Backdrop painted in {time.time() - t0:.2f}s")

    t1 = time.time()
    mask = Raytracer(scene).render(canvas, workers=workers)
    print(f"  Traced {width * height} rays in {time.time() - t1:.2f}s ({int(mask.sum())} hits)")

    canvas.save(output)
    print(f"Render complete: {output}")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Sphere Tracer CLI")
    parser.add_argument("--ui", action="store_true", help="Launch the interactive Gradio UI")
    parser.add_argument("--width", type=int, default=constants.DEFAULT_WIDTH, help="Canvas width in pixels")
    parser.add_argument("--height", type=int, default=constants.DEFAULT_HEIGHT, help="Canvas height in pixels")
    parser.add_argument("--output", default=constants.DEFAULT_OUTPUT, help="Output image path")
    parser.add_argument("--no-backdrop", action="store_true", help="Leave the background black")
    parser.add_argument("--workers", type=int, default=1, help="Threads used to trace row bands")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")

    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    if args.ui:
        from sphere_tracer.ui import create_ui
        print("Launching UI...")
        demo = create_ui()
        demo.launch()
        return 0

    try:
        render_demo(args.width, args.height, args.output,
                    backdrop=not args.no_backdrop, workers=args.workers)
    except (RenderError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


def run_ui():
    """Entry point for sphere-tracer-ui command."""
    return main(["--ui"])


if __name__ == "__main__":
    sys.exit(main())
