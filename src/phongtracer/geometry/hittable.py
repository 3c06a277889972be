# geometry/hittable.py
import math
from typing import Optional
from phongtracer.core.vector import Vector3
from phongtracer.core.ray import Ray

# Lower bound on accepted hits, keeps shadow rays off their own surface.
T_MIN = 0.001

class HitRecord:
    """
    Records details of a ray-object intersection.
    """
    __slots__ = ("point", "normal", "t")

    def __init__(self, point: Vector3, normal: Vector3, t: float):
        self.point = point      # World-space intersection point
        self.normal = normal    # Unit normal pointing out of the surface
        self.t = t              # Ray parameter at intersection

    def __repr__(self) -> str:
        return f"HitRecord(point={self.point!r}, normal={self.normal!r}, t={self.t})"

class Hittable:
    """
    Abstract class for objects that can be hit by a ray.
    """
    material = None

    def intersect(self, ray: Ray, t_min: float = T_MIN,
                  t_max: float = math.inf) -> Optional[HitRecord]:
        raise NotImplementedError("intersect() must be implemented by subclasses.")
