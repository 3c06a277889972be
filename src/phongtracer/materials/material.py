# materials/material.py
from phongtracer.core.vector import Vector3

class Material:
    """
    Surface properties for the Phong shading model.

    Args:
        color: Base RGB color of the surface.
        ambient: Constant contribution added for ambient lights.
        diffuse: Lambertian coefficient.
        specular: Phong exponent. It is used directly as the power of the
            specular term, not as a multiplier.

    A material is shared by every object that uses it and cannot be changed
    once built. color is handed out as a copy, so in-place Vector3 operations
    on it never reach the other objects using the material.
    """
    __slots__ = ("_color", "ambient", "diffuse", "specular")

    def __init__(self, color: Vector3, ambient: float, diffuse: float, specular: float):
        object.__setattr__(self, "_color", color.copy())
        object.__setattr__(self, "ambient", ambient)
        object.__setattr__(self, "diffuse", diffuse)
        object.__setattr__(self, "specular", specular)

    @property
    def color(self) -> Vector3:
        return self._color.copy()

    def __setattr__(self, name, value):
        raise AttributeError(f"Material is immutable, cannot set '{name}'")

    def __repr__(self) -> str:
        return (f"Material(color={self.color!r}, ambient={self.ambient}, "
                f"diffuse={self.diffuse}, specular={self.specular})")
