import numpy as np
import pytest
from conftest import assert_pixel, silhouette_mask
from sphere_tracer import constants
from sphere_tracer.backdrop import gradient_colors, paint_backdrop
from sphere_tracer.canvas import Canvas
from sphere_tracer.color import Color
from sphere_tracer.geometry import Sphere
from sphere_tracer.raytracer import Raytracer, render
from sphere_tracer.scene import Scene


def test_end_to_end_demo_sphere():
    """Center, outside and boundary pixels of the first demo sphere."""
    scene = Scene()
    scene.add(Sphere((150.0, 150.0, 0.0), 100.0))
    canvas = Canvas(800, 600)
    paint_backdrop(canvas)

    Raytracer(scene).render(canvas)

    assert_pixel(canvas, 150, 150, (0, 255, 0))
    assert_pixel(canvas, 0, 0, (122, 170, 255))
    assert_pixel(canvas, 250, 150, (0, 255, 0))  # Exactly on the silhouette
    # Row 150 of 600 sits at t = 0.25 on the backdrop
    assert_pixel(canvas, 251, 150, (146, 182, 248))
    backdrop = gradient_colors(800, 600)[150 * 800 + 251]
    assert canvas.get_color(251, 150) == backdrop


def test_single_sphere_matches_analytic_silhouette():
    scene = Scene.from_spheres([((20.0, 15.0, 0.0), 9.0)])
    canvas = Canvas(40, 30)
    mask = Raytracer(scene).render(canvas)

    np.testing.assert_array_equal(mask, silhouette_mask(40, 30, 20, 15, 9))


def test_demo_scene_is_union_of_silhouettes(demo_scene):
    canvas = Canvas(800, 600)
    mask = Raytracer(demo_scene).render(canvas)

    expected = np.zeros((600, 800), dtype=bool)
    for (cx, cy, _), radius in constants.DEMO_SPHERES:
        expected |= silhouette_mask(800, 600, cx, cy, radius)
    np.testing.assert_array_equal(mask, expected)


def test_unhit_pixels_keep_previous_content():
    scene = Scene.from_spheres([((2.0, 2.0, 0.0), 1.0)])
    canvas = Canvas(5, 5)
    Raytracer(scene).render(canvas)

    assert_pixel(canvas, 2, 2, (0, 255, 0))
    assert_pixel(canvas, 0, 0, (0, 0, 0))


def test_empty_scene_paints_nothing():
    canvas = Canvas(6, 4)
    mask = Raytracer(Scene()).render(canvas)
    assert not mask.any()
    assert not canvas.to_array().any()


def test_sphere_behind_image_plane_is_invisible():
    scene = Scene.from_spheres([((5.0, 5.0, -10.0), 4.0)])
    canvas = Canvas(10, 10)
    assert not Raytracer(scene).render(canvas).any()


def test_custom_hit_color():
    scene = Scene.from_spheres([((1.0, 1.0, 0.0), 1.0)])
    canvas = Canvas(3, 3)
    render(scene, canvas, hit_color=Color(9, 9, 9))
    assert_pixel(canvas, 1, 1, (9, 9, 9))


def test_trace_agrees_with_render_mask(demo_scene):
    tracer = Raytracer(demo_scene)
    mask = tracer.hit_mask(800, 600)
    for x, y in [(150, 150), (250, 150), (251, 150), (0, 0), (300, 300),
                 (550, 400), (600, 280), (600, 281), (799, 599), (400, 10)]:
        assert tracer.trace(x, y) == mask[y, x], f"Mismatch at ({x}, {y})"


def test_parallel_render_matches_serial(demo_scene):
    serial = Canvas(200, 170)
    parallel = Canvas(200, 170)

    Raytracer(demo_scene).render(serial)
    Raytracer(demo_scene).render(parallel, workers=3, chunk_rows=7)

    np.testing.assert_array_equal(serial.to_array(), parallel.to_array())


def test_render_does_not_mutate_scene(demo_scene):
    before = list(demo_scene)
    Raytracer(demo_scene).render(Canvas(50, 50), workers=2)
    assert list(demo_scene) == before


@pytest.mark.parametrize("kwargs", [{"workers": 0}, {"workers": 2, "chunk_rows": 0}])
def test_invalid_worker_settings(kwargs):
    with pytest.raises(ValueError):
        Raytracer(Scene()).render(Canvas(4, 4), **kwargs)


def test_serial_render_traces_bounded_bands(demo_scene, monkeypatch):
    """A single worker still traces at most chunk_rows rows at a time."""
    tracer = Raytracer(demo_scene)
    full = tracer.trace_rows(60, 0, 20)

    bands = []
    trace_rows = tracer.trace_rows

    def recording_trace_rows(width, y_start, y_stop):
        bands.append((y_start, y_stop))
        return trace_rows(width, y_start, y_stop)

    monkeypatch.setattr(tracer, "trace_rows", recording_trace_rows)
    mask = tracer.hit_mask(60, 20, chunk_rows=7)

    assert bands == [(0, 7), (7, 14), (14, 20)]
    np.testing.assert_array_equal(mask, full)


if __name__ == "__main__":
    pytest.main([__file__])
