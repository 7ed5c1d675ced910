# geometry/sphere.py
import math
from typing import List
from core.matrix import Matrix
from core.ray import Ray
from core.utils import equal
from core.vector import Vector4, point
from geometry.hittable import Shape
from materials.material import Material


class Sphere(Shape):
    """
    A sphere centered at the origin of its object space. Position and size
    in the world come from the transform.
    """
    def __init__(self, transform: Matrix = None, material: Material = None, radius: float = 1.0):
        super().__init__(transform, material)
        self.center = point(0, 0, 0)
        self.radius = radius

    def local_intersect(self, ray: Ray) -> List[float]:
        oc = ray.origin - self.center
        a = ray.direction.dot(ray.direction)
        b = 2.0 * ray.direction.dot(oc)
        # A singular transform collapses the local direction to zero.
        if a == 0:
            return []
        c = oc.dot(oc) - self.radius * self.radius
        discriminant = b * b - 4 * a * c

        if discriminant < 0:
            return []

        sqrt_disc = math.sqrt(discriminant)
        t1 = (-b - sqrt_disc) / (2 * a)
        t2 = (-b + sqrt_disc) / (2 * a)
        return [t1, t2]

    def local_normal_at(self, local_point: Vector4) -> Vector4:
        return local_point - self.center

    def __eq__(self, other) -> bool:
        if not isinstance(other, Sphere):
            return NotImplemented
        return (self.center == other.center and equal(self.radius, other.radius)
                and self.transform == other.transform and self.material == other.material)

    __hash__ = object.__hash__


def default_sphere() -> Sphere:
    return Sphere()
