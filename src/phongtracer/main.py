# main.py
import argparse
import os
import sys
import time
from typing import List, Optional
from phongtracer.core.vector import Vector3
from phongtracer.geometry.world import Scene
from phongtracer.geometry.sphere import Sphere
from phongtracer.geometry.triangle import Triangle
from phongtracer.materials.presets import ColorPresets, LightPresets, MaterialPresets
from phongtracer.renderer.raytracer import Renderer
from phongtracer.renderer.tone_mapping import encode_back_buffer
from phongtracer.renderer.image_io import MAX_TGA_DIMENSION, save_png, write_tga

FORMATS = ("tga", "png")

class RenderSettings:
    """Output size, field of view and destination of a single render."""
    def __init__(self, width: int = 1920, height: int = 1080, fov_y: float = 20.0,
                 output: str = "output.tga", image_format: Optional[str] = None,
                 preview: bool = False, quiet: bool = False):
        self.width = width
        self.height = height
        self.fov_y = fov_y
        self.output = output
        # Fall back to the file suffix, then to TGA
        if image_format is None:
            suffix = os.path.splitext(output)[1].lower().lstrip(".")
            image_format = suffix if suffix in FORMATS else "tga"
        self.image_format = image_format
        self.preview = preview
        self.quiet = quiet

    def validate(self) -> "RenderSettings":
        if not (0 < self.width <= MAX_TGA_DIMENSION and 0 < self.height <= MAX_TGA_DIMENSION):
            raise ValueError(f"Resolution must be within 1..{MAX_TGA_DIMENSION}, got {self.width}x{self.height}")
        if not (0.0 < self.fov_y < 180.0):
            raise ValueError(f"Field of view must be between 0 and 180 degrees, got {self.fov_y}")
        if self.image_format not in FORMATS:
            raise ValueError(f"Unknown output format '{self.image_format}', expected one of {', '.join(FORMATS)}")
        return self

def default_scene() -> Scene:
    """
    The fixed scene: a red sphere straight ahead on a gray floor made of two
    triangles, lit by a white Phong light to its right and an ambient fill.
    """
    scene = Scene()

    scene.add(Sphere(Vector3(0, 0, 10), 1.0, MaterialPresets.plastic(ColorPresets.RED)))

    # Both floor triangles wind so that their normals point up (+y)
    floor = MaterialPresets.matte(ColorPresets.GRAY)
    scene.add(Triangle(Vector3(-5, -1, 5), Vector3(-5, -1, 20), Vector3(5, -1, 5), floor))
    scene.add(Triangle(Vector3(5, -1, 5), Vector3(-5, -1, 20), Vector3(5, -1, 20), floor))

    scene.add_light(LightPresets.white_light(Vector3(10, 0, 10), intensity=1.0))
    scene.add_light(LightPresets.fill_light(Vector3(0, 5, 0), intensity=0.5))
    return scene

def render_to_file(settings: RenderSettings, scene: Optional[Scene] = None) -> str:
    """
    Renders the scene, gamma encodes it and writes the image. Returns the
    path that was written.
    """
    settings.validate()
    if scene is None:
        scene = default_scene()
    log = (lambda *args: None) if settings.quiet else print

    log("\n=== Rendering ===")
    log(f"Resolution: {settings.width}x{settings.height}, fov: {settings.fov_y}")
    log(f"Scene: {len(scene.objects)} objects, {len(scene.lights)} lights")

    step = max(1, settings.height // 10)

    def report(done: int, total: int):
        if done % step == 0 or done == total:
            log(f"Rows {done}/{total} ({100.0 * done / total:.0f}%)")

    start = time.perf_counter()
    renderer = Renderer(settings.width, settings.height, settings.fov_y)
    back_buffer = renderer.render(scene, progress=report)
    front_buffer = encode_back_buffer(back_buffer, settings.width, settings.height)
    log(f"Rendered in {time.perf_counter() - start:.2f}s")

    if settings.image_format == "png":
        save_png(settings.output, front_buffer, settings.width, settings.height)
    else:
        write_tga(settings.output, front_buffer, settings.width, settings.height)
    log(f"Wrote {settings.output}")

    if settings.preview:
        from phongtracer.renderer.preview import show_image
        show_image(front_buffer, settings.width, settings.height)

    return settings.output

def build_parser() -> argparse.ArgumentParser:
    defaults = RenderSettings()
    parser = argparse.ArgumentParser(
        prog="phongtracer",
        description="Render the built-in scene with Phong shading and hard shadows.")
    parser.add_argument('--width', type=int, default=defaults.width)
    parser.add_argument('--height', type=int, default=defaults.height)
    parser.add_argument('--fov', type=float, default=defaults.fov_y,
                        help="vertical field of view in degrees")
    parser.add_argument('--output', '-o', default=defaults.output)
    parser.add_argument('--format', choices=FORMATS, default=None,
                        help="image format, guessed from the output suffix by default")
    parser.add_argument('--preview', action='store_true',
                        help="show the result in a window when done")
    parser.add_argument('--quiet', '-q', action='store_true')
    return parser

def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    settings = RenderSettings(width=args.width, height=args.height, fov_y=args.fov,
                              output=args.output, image_format=args.format,
                              preview=args.preview, quiet=args.quiet)
    try:
        settings.validate()
    except ValueError as e:
        parser.error(str(e))
    render_to_file(settings)
    return 0

if __name__ == "__main__":
    sys.exit(main())
