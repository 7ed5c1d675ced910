# geometry/cube.py
from typing import List
from core.matrix import Matrix
from core.ray import Ray
from core.vector import Vector4
from geometry.hittable import Shape
from materials.material import Material


class Cube(Shape):
    """
    Placeholder for an axis-aligned cube. It takes part in worlds and shape
    collections but is never hit by a ray.
    """
    def __init__(self, transform: Matrix = None, material: Material = None, side: float = 1.0):
        super().__init__(transform, material)
        self.side = side

    def local_intersect(self, ray: Ray) -> List[float]:
        return []

    def local_normal_at(self, local_point: Vector4) -> Vector4:
        raise NotImplementedError("Cube surfaces are not implemented.")
