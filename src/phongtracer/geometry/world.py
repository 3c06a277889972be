# geometry/world.py
from typing import Iterable, List, Optional, Tuple
from phongtracer.core.ray import Ray
from phongtracer.core.utils import distance_squared
from phongtracer.geometry.hittable import Hittable, HitRecord
from phongtracer.materials.light import Light

def nearest_hit(ray: Ray, objects: Iterable[Hittable]) -> Optional[Tuple[Hittable, HitRecord]]:
    """
    Returns the object whose hit point is closest to the ray origin, with its
    hit record, or None when nothing is hit.

    Closeness is the squared distance from the origin to the hit point, not
    the ray parameter. On ties the earlier object wins.
    """
    closest = None
    closest_dist = None
    for obj in objects:
        rec = obj.intersect(ray)
        if rec is None:
            continue
        dist = distance_squared(rec.point, ray.origin)
        if closest_dist is None or dist < closest_dist:
            closest_dist = dist
            closest = (obj, rec)
    return closest

def is_occluded(rec: HitRecord, light: Light, objects: Iterable[Hittable],
                exclude: Hittable) -> bool:
    """
    Shadow test from a hit point toward a light.

    The object that was hit is skipped. Only shadow hits strictly closer to
    the hit point than the light is count as occluders. Both distances are
    squared and measured from the hit point.
    """
    to_light = light.position - rec.point
    light_dist = to_light.dot(to_light)
    shadow_ray = Ray(rec.point, to_light.normalize())
    for obj in objects:
        if obj is exclude:
            continue
        shadow_rec = obj.intersect(shadow_ray)
        if shadow_rec is not None and distance_squared(shadow_rec.point, rec.point) < light_dist:
            return True
    return False

class Scene:
    """
    Ordered objects and lights, built once before rendering and only read
    while tracing.
    """
    def __init__(self, objects: Optional[List[Hittable]] = None,
                 lights: Optional[List[Light]] = None):
        self.objects: List[Hittable] = list(objects) if objects else []
        self.lights: List[Light] = list(lights) if lights else []

    def add(self, obj: Hittable):
        self.objects.append(obj)

    def add_light(self, light: Light):
        self.lights.append(light)

    def clear(self):
        self.objects.clear()
        self.lights.clear()

    def __len__(self) -> int:
        return len(self.objects)

    def nearest_hit(self, ray: Ray) -> Optional[Tuple[Hittable, HitRecord]]:
        return nearest_hit(ray, self.objects)

    def is_occluded(self, rec: HitRecord, light: Light, exclude: Hittable) -> bool:
        return is_occluded(rec, light, self.objects, exclude)
