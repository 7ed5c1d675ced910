# geometry/hittable.py
from typing import Iterable, List, Optional
from core.matrix import Matrix, identity
from core.ray import Ray
from core.utils import equal
from core.vector import Vector4, vector
from materials.material import Material


class Intersection:
    """
    Connects a ray parameter t with the shape that was hit.
    The shape reference is borrowed; the world owning the shape outlives it.
    """
    __slots__ = ('t', 'shape')

    def __init__(self, t: float, shape: "Shape"):
        self.t = t
        self.shape = shape

    def __eq__(self, other) -> bool:
        if not isinstance(other, Intersection):
            return NotImplemented
        return equal(self.t, other.t) and self.shape is other.shape

    __hash__ = None

    def __repr__(self) -> str:
        return f"Intersection({self.t}, {type(self.shape).__name__})"


def intersections(*xs: Intersection) -> List[Intersection]:
    """Collects intersections in the order given."""
    return list(xs)


def hit(xs: Iterable[Intersection]) -> Optional[Intersection]:
    """
    Returns the intersection with the lowest non-negative t, or None.
    Entries behind the ray origin are skipped, not removed.
    """
    best = None
    for i in xs:
        if i.t >= 0 and (best is None or i.t < best.t):
            best = i
    return best


class Shape:
    """
    Abstract base for objects that can be hit by a ray.

    Subclasses work in their own object space and implement
    local_intersect() and local_normal_at(); the transform into and out of
    that space is handled here.
    """
    def __init__(self, transform: Matrix = None, material: Material = None):
        self.material = material if material is not None else Material()
        self.transform = transform if transform is not None else identity()

    @property
    def transform(self) -> Matrix:
        return self._transform

    @transform.setter
    def transform(self, m: Matrix) -> None:
        # The inverse is needed for every ray, so compute it once here.
        self._transform = m
        self._inverse = m.inverse()
        self._normal_matrix = self._inverse.transpose()

    @property
    def inverse_transform(self) -> Matrix:
        return self._inverse

    def intersect(self, ray: Ray) -> List[Intersection]:
        local_ray = self._inverse * ray
        return [Intersection(t, self) for t in self.local_intersect(local_ray)]

    def normal_at(self, world_point: Vector4) -> Vector4:
        local_point = self._inverse * world_point
        local_normal = self.local_normal_at(local_point)
        world_normal = self._normal_matrix * local_normal
        return vector(world_normal.x, world_normal.y, world_normal.z).normalize()

    def local_intersect(self, ray: Ray) -> List[float]:
        raise NotImplementedError("local_intersect() must be implemented by subclasses.")

    def local_normal_at(self, local_point: Vector4) -> Vector4:
        raise NotImplementedError("local_normal_at() must be implemented by subclasses.")
