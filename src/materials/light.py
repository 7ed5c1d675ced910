# materials/light.py
from core.vector import Vector4


class PointLight:
    """
    A light source with no size, emitting from a single position.
    The intensity carries the light's color.
    """
    def __init__(self, position: Vector4, intensity: Vector4):
        self.position = position
        self.intensity = intensity

    def __eq__(self, other) -> bool:
        if not isinstance(other, PointLight):
            return NotImplemented
        return self.position == other.position and self.intensity == other.intensity

    __hash__ = None

    def __repr__(self) -> str:
        return f"PointLight({self.position}, {self.intensity})"
