# core/ray.py
from core.vector import Vector4, point, vector


class Ray:
    """
    Represents a ray in 3D space with an origin point and a direction vector.
    """
    __slots__ = ('origin', 'direction')

    def __init__(self, origin: Vector4 = None, direction: Vector4 = None):
        self.origin = origin if origin is not None else point(0, 0, 0)
        self.direction = direction if direction is not None else vector(1, 0, 0)

    def at(self, t: float) -> Vector4:
        """
        Returns the point along the ray at parameter t.
        """
        return self.origin + self.direction * t

    def transform(self, m) -> "Ray":
        """
        Returns a new ray with origin and direction multiplied by the matrix m.
        """
        return Ray(m * self.origin, m * self.direction)

    def __repr__(self) -> str:
        return f"Ray({self.origin}, {self.direction})"
