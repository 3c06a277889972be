# geometry/sphere.py
import math
from typing import Optional
from phongtracer.core.vector import Vector3
from phongtracer.core.ray import Ray
from phongtracer.geometry.hittable import Hittable, HitRecord, T_MIN
from phongtracer.materials.material import Material

class Sphere(Hittable):
    """
    Represents a sphere defined by its center, radius, and material.
    """
    def __init__(self, center: Vector3, radius: float, material: Material):
        self.center = center
        self.radius = radius
        self.material = material

    def intersect(self, ray: Ray, t_min: float = T_MIN,
                  t_max: float = math.inf) -> Optional[HitRecord]:
        # The direction is unit length, so the quadratic is t^2 + 2bt + c = 0.
        oc = ray.origin - self.center
        b = oc.dot(ray.direction)
        c = oc.dot(oc) - self.radius * self.radius
        discriminant = b * b - c

        if discriminant <= 0:
            return None

        sqrt_disc = math.sqrt(discriminant)
        # Near root first, the far root only when the near one is out of range
        root = -b - sqrt_disc
        if not (t_min < root < t_max):
            root = -b + sqrt_disc
            if not (t_min < root < t_max):
                return None

        point = ray.at(root)
        normal = (point - self.center).normalize()
        return HitRecord(point, normal, root)

    def __repr__(self) -> str:
        return f"Sphere(center={self.center!r}, radius={self.radius})"
