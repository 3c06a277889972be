# materials/light.py
import enum
from phongtracer.core.vector import Vector3

class LightMode(enum.IntFlag):
    """Selects which Phong terms a light contributes."""
    AMBIENT = 1
    DIFFUSE = 2
    SPECULAR = 4
    PHONG = AMBIENT | DIFFUSE | SPECULAR

class Light:
    """
    A point light.

    intensity scales the light color and is also multiplied into the
    specular exponent of the surfaces it lights. position and color are
    handed out as copies, so a light cannot be changed through them.
    """
    __slots__ = ("_position", "_color", "intensity", "mode")

    def __init__(self, position: Vector3, color: Vector3, intensity: float = 1.0,
                 mode: LightMode = LightMode.PHONG):
        object.__setattr__(self, "_position", position.copy())
        object.__setattr__(self, "_color", color.copy())
        object.__setattr__(self, "intensity", intensity)
        object.__setattr__(self, "mode", LightMode(mode))

    def __setattr__(self, name, value):
        raise AttributeError(f"Light is immutable, cannot set '{name}'")

    @property
    def position(self) -> Vector3:
        return self._position.copy()

    @property
    def color(self) -> Vector3:
        return self._color.copy()

    def contributes(self, term: LightMode) -> bool:
        return bool(self.mode & term)

    def __repr__(self) -> str:
        return (f"Light(position={self.position!r}, color={self.color!r}, "
                f"intensity={self.intensity}, mode={self.mode!r})")
