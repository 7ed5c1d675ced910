# materials/material.py
from core.utils import equal
from core.vector import WHITE, Vector4


class Material:
    """
    Phong surface parameters. ambient, diffuse and specular are typically in
    [0, 1], shininess in [10, 200]. All values are non-negative.
    """
    def __init__(self, color: Vector4 = None, ambient: float = 0.1, diffuse: float = 0.9,
                 specular: float = 0.9, shininess: float = 200.0):
        self.color = color if color is not None else WHITE
        self.ambient = ambient
        self.diffuse = diffuse
        self.specular = specular
        self.shininess = shininess

    def __eq__(self, other) -> bool:
        if not isinstance(other, Material):
            return NotImplemented
        return (self.color == other.color
                and equal(self.ambient, other.ambient)
                and equal(self.diffuse, other.diffuse)
                and equal(self.specular, other.specular)
                and equal(self.shininess, other.shininess))

    __hash__ = None

    def __repr__(self) -> str:
        return (f"Material(color={self.color}, ambient={self.ambient}, diffuse={self.diffuse}, "
                f"specular={self.specular}, shininess={self.shininess})")
