# renderer/shading.py
from core.ray import Ray
from core.utils import reflect
from core.vector import BLACK, Vector4, color
from geometry.hittable import Intersection, Shape, hit
from geometry.world import World
from materials.light import PointLight
from materials.material import Material


class PrepareComputation:
    """
    Values at an intersection that the shading step needs: the point in
    world space, the eye vector pointing back toward the ray origin and the
    surface normal. When the eye is inside the shape the normal is flipped
    so it still faces the eye, and inside is set.
    """
    __slots__ = ('t', 'shape', 'point', 'eye', 'normal', 'inside')

    def __init__(self, t: float, shape: Shape, point: Vector4, eye: Vector4,
                 normal: Vector4, inside: bool = False):
        self.t = t
        self.shape = shape
        self.point = point
        self.eye = eye
        self.normal = normal
        self.inside = inside


def prepare_computations(i: Intersection, ray: Ray) -> PrepareComputation:
    position = ray.at(i.t)
    eye = -ray.direction
    normal = i.shape.normal_at(position)
    inside = False
    if normal.dot(eye) < 0:
        inside = True
        normal = -normal
    return PrepareComputation(i.t, i.shape, position, eye, normal, inside)


def lighting(material: Material, light: PointLight, position: Vector4,
             eye: Vector4, normal: Vector4, in_shadow: bool = False) -> Vector4:
    """
    Phong reflection: ambient + diffuse + specular for a single light.
    Points in shadow get the ambient term only.
    """
    effective_color = material.color * light.intensity
    ambient = effective_color * material.ambient
    if in_shadow:
        return ambient

    light_v = (light.position - position).normalize()
    light_dot_normal = light_v.dot(normal)
    if light_dot_normal < 0:
        # Light is on the other side of the surface.
        diffuse = BLACK
        specular = BLACK
    else:
        diffuse = effective_color * material.diffuse * light_dot_normal
        reflect_v = reflect(-light_v, normal)
        reflect_dot_eye = reflect_v.dot(eye)
        if reflect_dot_eye <= 0:
            specular = BLACK
        else:
            factor = reflect_dot_eye ** material.shininess
            specular = light.intensity * material.specular * factor

    return ambient + diffuse + specular


def shade_hit(world: World, comps: PrepareComputation) -> Vector4:
    result = color(0, 0, 0)
    for light in world.lights:
        shadowed = world.is_shadowed_from(light, comps.point)
        result = result + lighting(comps.shape.material, light, comps.point,
                                   comps.eye, comps.normal, shadowed)
    return result


def color_at(world: World, ray: Ray) -> Vector4:
    """
    Color seen along the ray, black when nothing is hit.
    """
    h = hit(world.intersect(ray))
    if h is None:
        return color(0, 0, 0)
    return shade_hit(world, prepare_computations(h, ray))
