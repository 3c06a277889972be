# core/utils.py
from phongtracer.core.vector import Vector3

def reflect(l: Vector3, n: Vector3) -> Vector3:
    """
    Mirrors the light direction l about the normal n: R = 2*(l.n)*n - l.
    Both vectors point away from the surface.
    """
    return n * (2 * l.dot(n)) - l

def distance_squared(a: Vector3, b: Vector3) -> float:
    d = a - b
    return d.dot(d)

def clamp(value: float, lo: float = 0.0, hi: float = 1.0) -> float:
    if value < lo:
        return lo
    if value > hi:
        return hi
    return value

def clamp_color(color: Vector3) -> Vector3:
    """
    Hard clips every channel to [0, 1]. No tone mapping.
    """
    return Vector3(clamp(color.x), clamp(color.y), clamp(color.z))
