# materials/presets.py
from core.vector import color, point
from materials.material import Material
from materials.light import PointLight


class ColorPresets:
    """Colors of the demo scene."""

    ORANGE = color(1.0, 0.8, 0.1)
    YELLOW = color(0.9, 0.9, 0.1)
    GREEN = color(0.1, 1.0, 0.5)
    WALL = color(1.0, 0.9, 0.9)


class MaterialPresets:
    """Predefined Phong materials."""

    @staticmethod
    def matte(c=None) -> Material:
        """No highlight at all."""
        return Material(color=c if c is not None else ColorPresets.WALL, specular=0.0)

    @staticmethod
    def plastic(c=None) -> Material:
        return Material(color=c if c is not None else ColorPresets.GREEN,
                        diffuse=0.7, specular=0.3)


class LightPresets:
    """Predefined point lights."""

    @staticmethod
    def white_light(x: float = -10.0, y: float = 10.0, z: float = -10.0, intensity: float = 1.0) -> PointLight:
        return PointLight(point(x, y, z), color(1.0, 1.0, 1.0) * intensity)
