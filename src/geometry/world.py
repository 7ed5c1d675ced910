# geometry/world.py
from typing import List
from core.ray import Ray
from core.transform import scaling
from core.utils import EPSILON, get_logger
from core.vector import Vector4, color, point
from geometry.hittable import Intersection, Shape, hit
from geometry.sphere import Sphere
from materials.light import PointLight
from materials.material import Material

logger = get_logger(__name__)


class World:
    """
    Owns every shape and light of a scene. Intersections handed out by the
    world reference its shapes and are only valid while the world is alive.
    """
    def __init__(self):
        self.objects: List[Shape] = []
        self.lights: List[PointLight] = []

    def add_object(self, obj: Shape) -> int:
        """Adds a shape and returns its index in the world."""
        self.objects.append(obj)
        return len(self.objects) - 1

    def add_light(self, light: PointLight) -> int:
        self.lights.append(light)
        return len(self.lights) - 1

    def intersect(self, ray: Ray) -> List[Intersection]:
        """
        Intersections of the ray with every shape, in world order and unsorted.
        """
        xs: List[Intersection] = []
        for obj in self.objects:
            xs.extend(obj.intersect(ray))
        return xs

    def is_shadowed(self, position: Vector4) -> bool:
        """
        True if some shape sits between the position and any of the lights.
        """
        for light in self.lights:
            if self.is_shadowed_from(light, position):
                return True
        return False

    def is_shadowed_from(self, light: PointLight, position: Vector4) -> bool:
        v = light.position - position
        distance = v.magnitude()
        # Roots within EPSILON of the origin are the surface the position lies on.
        xs = [i for i in self.intersect(Ray(position, v.normalize())) if i.t > EPSILON]
        h = hit(xs)
        return h is not None and h.t < distance

    def __len__(self) -> int:
        return len(self.objects)


def intersect_world(world: World, ray: Ray) -> List[Intersection]:
    return world.intersect(ray)


def is_shadowed(world: World, position: Vector4) -> bool:
    return world.is_shadowed(position)


def default_world() -> World:
    """
    Two concentric spheres lit by a single white light, the reference scene
    for shading tests.
    """
    world = World()
    world.add_light(PointLight(point(-10, 10, -10), color(1, 1, 1)))
    world.add_object(Sphere(material=Material(color=color(0.8, 1.0, 0.6), diffuse=0.7, specular=0.2)))
    world.add_object(Sphere(transform=scaling(0.5, 0.5, 0.5)))
    logger.debug("Default world created with %d objects and %d lights", len(world.objects), len(world.lights))
    return world
