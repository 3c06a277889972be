# materials/presets.py
from phongtracer.core.vector import Vector3
from phongtracer.materials.material import Material
from phongtracer.materials.light import Light, LightMode

class _PresetColor:
    """Class attribute that hands out a fresh Vector3 on every access."""
    def __init__(self, r: float, g: float, b: float):
        self.rgb = (r, g, b)

    def __get__(self, obj, owner) -> Vector3:
        return Vector3(*self.rgb)

class ColorPresets:
    """Common color presets for materials and lights."""

    # Pure primaries
    RED = _PresetColor(1.0, 0.0, 0.0)
    GREEN = _PresetColor(0.0, 1.0, 0.0)
    BLUE = _PresetColor(0.0, 0.0, 1.0)

    # Softer tones
    ORANGE = _PresetColor(0.9, 0.6, 0.1)
    YELLOW = _PresetColor(0.9, 0.9, 0.1)
    PURPLE = _PresetColor(0.6, 0.2, 0.8)

    # Neutral colors
    WHITE = _PresetColor(1.0, 1.0, 1.0)
    GRAY = _PresetColor(0.5, 0.5, 0.5)
    BLACK = _PresetColor(0.0, 0.0, 0.0)

class MaterialPresets:
    """Predefined Phong materials."""

    @staticmethod
    def matte(color: Vector3) -> Material:
        """Mostly diffuse, with a very broad highlight."""
        return Material(color, ambient=0.1, diffuse=0.9, specular=1.0)

    @staticmethod
    def plastic(color: Vector3) -> Material:
        return Material(color, ambient=0.1, diffuse=0.7, specular=10.0)

    @staticmethod
    def shiny(color: Vector3) -> Material:
        """Tight highlight from a high Phong exponent."""
        return Material(color, ambient=0.1, diffuse=0.6, specular=50.0)

class LightPresets:
    """Predefined point lights with different colors and intensities."""

    @staticmethod
    def white_light(position: Vector3, intensity: float = 1.0) -> Light:
        return Light(position, ColorPresets.WHITE, intensity, LightMode.PHONG)

    @staticmethod
    def warm_light(position: Vector3, intensity: float = 1.0) -> Light:
        return Light(position, Vector3(1.0, 0.95, 0.9), intensity, LightMode.PHONG)

    @staticmethod
    def fill_light(position: Vector3, intensity: float = 0.5) -> Light:
        """Ambient-only light, lifts shadowed areas without adding highlights."""
        return Light(position, ColorPresets.WHITE, intensity, LightMode.AMBIENT)
