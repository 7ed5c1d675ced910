# core/transform.py
"""
Factories for the affine transforms used to place shapes and the camera.
All angles are in radians.
"""
import math
from core.matrix import Matrix, identity
from core.vector import Vector4


def translation(x: float, y: float, z: float) -> Matrix:
    m = identity()
    m.set(0, 3, x)
    m.set(1, 3, y)
    m.set(2, 3, z)
    return m


def scaling(x: float, y: float, z: float) -> Matrix:
    m = identity()
    m.set(0, 0, x)
    m.set(1, 1, y)
    m.set(2, 2, z)
    return m


def rotate_x(rad: float) -> Matrix:
    m = identity()
    c = math.cos(rad)
    s = math.sin(rad)
    m.set(1, 1, c)
    m.set(1, 2, -s)
    m.set(2, 1, s)
    m.set(2, 2, c)
    return m


def rotate_y(rad: float) -> Matrix:
    m = identity()
    c = math.cos(rad)
    s = math.sin(rad)
    m.set(0, 0, c)
    m.set(0, 2, s)
    m.set(2, 0, -s)
    m.set(2, 2, c)
    return m


def rotate_z(rad: float) -> Matrix:
    m = identity()
    c = math.cos(rad)
    s = math.sin(rad)
    m.set(0, 0, c)
    m.set(0, 1, -s)
    m.set(1, 0, s)
    m.set(1, 1, c)
    return m


def shearing(xy: float, xz: float, yx: float, yz: float, zx: float, zy: float) -> Matrix:
    """
    Each coefficient moves one component in proportion to another, e.g. xy
    moves x in proportion to y.
    """
    return Matrix([
        [1.0, xy, xz, 0.0],
        [yx, 1.0, yz, 0.0],
        [zx, zy, 1.0, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ])


def translate_scale_rotate(trans_x: float, trans_y: float, trans_z: float,
                           scale_x: float, scale_y: float, scale_z: float,
                           alfa_x: float, alfa_y: float, alfa_z: float) -> Matrix:
    """
    Combines translation, rotation and scaling into one transform. Applied
    to a point, the scaling happens first and the translation last.
    """
    rotation = rotate_x(alfa_x) * rotate_y(alfa_y) * rotate_z(alfa_z)
    return translation(trans_x, trans_y, trans_z) * rotation * scaling(scale_x, scale_y, scale_z)


def view_transform(frm: Vector4, to: Vector4, up: Vector4) -> Matrix:
    """
    Orients the world relative to the eye so that the eye sits at the
    origin looking down -z.
    """
    # forward points from the target back to the eye, i.e. along +z of camera space.
    forward = (frm - to).normalize()
    left = up.cross(forward).normalize()
    true_up = forward.cross(left)
    orientation = Matrix([
        [left.x, left.y, left.z, 0.0],
        [true_up.x, true_up.y, true_up.z, 0.0],
        [forward.x, forward.y, forward.z, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ])
    return orientation * translation(-frm.x, -frm.y, -frm.z)
