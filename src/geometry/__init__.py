from geometry.hittable import Intersection, Shape, hit, intersections
from geometry.sphere import Sphere, default_sphere
from geometry.cube import Cube
from geometry.world import World, default_world, intersect_world, is_shadowed
