# renderer/raytracer.py
from typing import Callable, List, Optional
import numpy as np
from phongtracer.core.vector import Vector3
from phongtracer.core.ray import Ray
from phongtracer.core.utils import clamp_color, reflect
from phongtracer.camera.camera import Camera
from phongtracer.geometry.hittable import Hittable
from phongtracer.geometry.world import Scene, is_occluded, nearest_hit
from phongtracer.materials.light import Light, LightMode

CHANNELS = 4

def trace_phong(ray: Ray, objects: List[Hittable], lights: List[Light]) -> Vector3:
    """
    Shades one primary ray with the Phong model and hard shadows.

    Returns black when nothing is hit. For every light, an occluded hit only
    keeps the ambient term (if the light mode has one). The accumulated color
    is clipped to [0, 1] per channel.
    """
    found = nearest_hit(ray, objects)
    if found is None:
        return Vector3(0.0, 0.0, 0.0)

    obj, rec = found
    material = obj.material
    view_dir = -ray.direction
    color = Vector3(0.0, 0.0, 0.0)

    for light in lights:
        intensity = 0.0
        specular = 0.0

        if light.contributes(LightMode.AMBIENT):
            intensity += material.ambient

        if not is_occluded(rec, light, objects, obj):
            light_dir = light.position - rec.point
            # Inverse-square falloff from the distance before normalizing
            attenuation = 1.0 / light_dir.dot(light_dir)
            light_dir.normalize()

            if light.contributes(LightMode.DIFFUSE):
                intensity += attenuation * max(0.0, rec.normal.dot(light_dir)) * material.diffuse

            if light.contributes(LightMode.SPECULAR):
                r = reflect(light_dir, rec.normal)
                specular = max(0.0, view_dir.dot(r)) ** (material.specular * light.intensity)

        color = (color
                 + light.color * material.color * light.intensity * intensity
                 + light.color * light.intensity * specular)

    return clamp_color(color)

class Renderer:
    """
    Casts one primary ray per pixel and stores the shaded colors in a flat
    float32 back buffer of width*height*4 entries, row-major, laid out as
    [R, G, B, unused] per pixel.
    """
    def __init__(self, width: int, height: int, fov_y: float):
        self.width = width
        self.height = height
        self.camera = Camera(width, height, fov_y)
        self.back_buffer = np.zeros(width * height * CHANNELS, dtype=np.float32)

    def pixel_offset(self, x: int, y: int) -> int:
        return (y * self.width + x) * CHANNELS

    def render_pixel(self, scene: Scene, x: int, y: int) -> Vector3:
        return trace_phong(self.camera.get_ray(x, y), scene.objects, scene.lights)

    def render(self, scene: Scene,
               progress: Optional[Callable[[int, int], None]] = None) -> np.ndarray:
        """
        Renders the scene into the back buffer and returns it.

        progress, when given, is called after every finished row with the
        number of rows done and the total row count.
        """
        self.back_buffer.fill(0.0)
        for y in range(self.height):
            for x in range(self.width):
                color = self.render_pixel(scene, x, y)
                k = self.pixel_offset(x, y)
                self.back_buffer[k + 0] = color.x
                self.back_buffer[k + 1] = color.y
                self.back_buffer[k + 2] = color.z
            if progress is not None:
                progress(y + 1, self.height)
        return self.back_buffer
