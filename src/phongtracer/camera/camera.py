# camera/camera.py
import math
from phongtracer.core.vector import Vector3
from phongtracer.core.ray import Ray

# Fixed eye behind the screen plane and the forward push added to every ray.
EYE = Vector3(0.0, 0.0, -0.2)
FORWARD_OFFSET = Vector3(0.0, 0.0, 1.0)

class Camera:
    """
    Simplified pinhole camera looking down +z.

    Each pixel gets its own origin on the z=0 screen plane. The direction is
    (origin - EYE) + FORWARD_OFFSET, normalized. This is not a look-at camera.
    """
    def __init__(self, width: int, height: int, fov_y: float):
        self.width = width
        self.height = height
        self.fov_y = fov_y  # Vertical field of view in degrees
        self.update_camera()

    def update_camera(self):
        """Recomputes the screen-plane scale from the fov and aspect ratio."""
        self.aspect_ratio = self.width / self.height
        self.inv_width = 1.0 / self.width
        self.inv_height = 1.0 / self.height
        self.angle = math.tan(math.radians(self.fov_y / 2.0))

    def screen_coords(self, x: int, y: int):
        s = (2.0 * x * self.inv_width - 1.0) * self.angle * self.aspect_ratio
        t = (2.0 * y * self.inv_height - 1.0) * self.angle
        return s, t

    def get_ray(self, x: int, y: int) -> Ray:
        s, t = self.screen_coords(x, y)
        origin = Vector3(s, t, 0.0)
        direction = (origin - EYE) + FORWARD_OFFSET
        return Ray(origin, direction.normalize())
