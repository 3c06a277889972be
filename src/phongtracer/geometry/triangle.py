# geometry/triangle.py
import math
from typing import Optional
from phongtracer.core.vector import Vector3
from phongtracer.core.ray import Ray
from phongtracer.geometry.hittable import Hittable, HitRecord, T_MIN
from phongtracer.materials.material import Material

EPSILON = 1e-7

class Triangle(Hittable):
    """
    A single flat-shaded triangle.

    The face normal is cross(v1 - v0, v2 - v0), so its orientation follows
    the winding order of the vertices. It is not interpolated.
    """
    def __init__(self, v0: Vector3, v1: Vector3, v2: Vector3, material: Material):
        self.v0 = v0
        self.v1 = v1
        self.v2 = v2
        self.material = material

    def normal(self) -> Vector3:
        return (self.v1 - self.v0).cross(self.v2 - self.v0).normalize()

    def intersect(self, ray: Ray, t_min: float = T_MIN,
                  t_max: float = math.inf) -> Optional[HitRecord]:
        """
        Möller–Trumbore intersection.

        t_min and t_max are accepted for interface compatibility but only the
        fixed EPSILON bound is applied to t.
        """
        edge1 = self.v1 - self.v0
        edge2 = self.v2 - self.v0
        h = ray.direction.cross(edge2)
        a = edge1.dot(h)

        # Ray is parallel to the triangle plane
        if abs(a) < EPSILON:
            return None

        f = 1.0 / a
        s = ray.origin - self.v0
        u = f * s.dot(h)
        if u < 0.0 or u > 1.0:
            return None

        q = s.cross(edge1)
        v = f * ray.direction.dot(q)
        if v < 0.0 or u + v > 1.0:
            return None

        t = f * edge2.dot(q)
        if t <= EPSILON:
            return None

        return HitRecord(ray.at(t), edge1.cross(edge2).normalize(), t)

    def __repr__(self) -> str:
        return f"Triangle({self.v0!r}, {self.v1!r}, {self.v2!r})"
