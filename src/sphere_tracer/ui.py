import gradio as gr

from sphere_tracer import constants
from sphere_tracer.backdrop import paint_backdrop
from sphere_tracer.canvas import Canvas
from sphere_tracer.geometry import Sphere
from sphere_tracer.raytracer import Raytracer
from sphere_tracer.scene import Scene

CSS = """
.gradio-container { background-color: #0b0f19 !important; color: #e5e7eb !important; }
#output_img { background-color: #0b0f19 !important; border-radius: 8px; overflow: hidden; border: none !important; }
#output_img img { object-fit: contain; }
"""


def render_frame(width, height, cx, cy, radius, use_demo, use_backdrop):
    """Render one preview image for the current slider values."""
    scene = Scene.from_spheres(constants.DEMO_SPHERES) if use_demo else Scene()
    scene.add(Sphere((cx, cy, 0.0), radius))

    canvas = Canvas(int(width), int(height))
    if use_backdrop:
        paint_backdrop(canvas)
    Raytracer(scene).render(canvas)

    # Saved files keep alpha 0; drop it so the preview is visible
    return canvas.to_image().convert("RGB")


def create_ui():

    with gr.Blocks(title="Sphere Tracer") as demo:

        gr.Markdown("# Sphere Tracer")
        gr.Markdown("Orthographic ray casting of analytic spheres.")

        with gr.Row():
            with gr.Column(scale=1):
                with gr.Group():
                    gr.Markdown("### Canvas")
                    width = gr.Slider(minimum=64, maximum=1600, value=constants.DEFAULT_WIDTH, step=16, label="Width")
                    height = gr.Slider(minimum=64, maximum=1200, value=constants.DEFAULT_HEIGHT, step=16, label="Height")
                    backdrop_toggle = gr.Checkbox(value=True, label="Backdrop", info="Vertical sky gradient")

                with gr.Group():
                    gr.Markdown("### Sphere")
                    cx = gr.Slider(minimum=-200, maximum=1800, value=400, label="Center X")
                    cy = gr.Slider(minimum=-200, maximum=1400, value=300, label="Center Y")
                    radius = gr.Slider(minimum=1, maximum=600, value=80, label="Radius")
                    demo_toggle = gr.Checkbox(value=True, label="Demo spheres", info="Include the default scene")
                    reset_btn = gr.Button("Reset", variant="secondary")

            with gr.Column(scale=2):
                output_img = gr.Image(label="Render", interactive=False, elem_id="output_img")

        inputs = [width, height, cx, cy, radius, demo_toggle, backdrop_toggle]

        def reset_view():
            return [constants.DEFAULT_WIDTH, constants.DEFAULT_HEIGHT, 400, 300, 80, True, True]

        reset_btn.click(fn=reset_view, outputs=inputs)

        for input_comp in inputs:
            input_comp.change(fn=render_frame, inputs=inputs, outputs=output_img,
                              trigger_mode="always_last", show_progress="hidden")

        demo.load(fn=render_frame, inputs=inputs, outputs=output_img, show_progress="hidden")

    return demo


if __name__ == "__main__":
    demo = create_ui()
    demo.launch(css=CSS)
