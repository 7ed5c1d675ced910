# core/vector.py
import math
import numbers
from core.utils import EPSILON, equal


class Vector4:
    """
    A 4-component tuple used for points (w=1), vectors (w=0) and colors
    (r, g, b, intensity). Instances are immutable; every operation returns
    a new tuple.
    """
    __slots__ = ('_x', '_y', '_z', '_w')

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0, w: float = 0.0):
        self._x = float(x)
        self._y = float(y)
        self._z = float(z)
        self._w = float(w)

    @property
    def x(self) -> float:
        return self._x

    @property
    def y(self) -> float:
        return self._y

    @property
    def z(self) -> float:
        return self._z

    @property
    def w(self) -> float:
        return self._w

    # Color view of the same components.
    @property
    def r(self) -> float:
        return self._x

    @property
    def g(self) -> float:
        return self._y

    @property
    def b(self) -> float:
        return self._z

    @property
    def i(self) -> float:
        return self._w

    def __iter__(self):
        yield self._x
        yield self._y
        yield self._z
        yield self._w

    def __getitem__(self, index: int) -> float:
        return (self._x, self._y, self._z, self._w)[index]

    def __add__(self, other: "Vector4") -> "Vector4":
        return Vector4(self._x + other.x, self._y + other.y, self._z + other.z, self._w + other.w)

    def __sub__(self, other: "Vector4") -> "Vector4":
        return Vector4(self._x - other.x, self._y - other.y, self._z - other.z, self._w - other.w)

    def __neg__(self) -> "Vector4":
        return Vector4(-self._x, -self._y, -self._z, -self._w)

    def __mul__(self, other):
        # Scalar multiplication.
        if isinstance(other, numbers.Real):
            return Vector4(self._x * other, self._y * other, self._z * other, self._w * other)
        # Hadamard product, used to blend colors.
        return Vector4(self._x * other.x, self._y * other.y, self._z * other.z, self._w * other.w)

    def __rmul__(self, other: float) -> "Vector4":
        return self.__mul__(other)

    def __truediv__(self, s: float) -> "Vector4":
        return Vector4(self._x / s, self._y / s, self._z / s, self._w / s)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector4):
            return NotImplemented
        return (equal(self._x, other.x) and equal(self._y, other.y)
                and equal(self._z, other.z) and equal(self._w, other.w))

    __hash__ = None

    def dot(self, other: "Vector4") -> float:
        return self._x * other.x + self._y * other.y + self._z * other.z + self._w * other.w

    def cross(self, other: "Vector4") -> "Vector4":
        """
        Cross product of the xyz parts. The result is always a vector.
        """
        return vector(
            self._y * other.z - self._z * other.y,
            self._z * other.x - self._x * other.z,
            self._x * other.y - self._y * other.x
        )

    def magnitude_squared(self) -> float:
        return self.dot(self)

    def magnitude(self) -> float:
        return math.sqrt(self.magnitude_squared())

    def normalize(self) -> "Vector4":
        """
        Returns the unit tuple. A zero tuple is returned unchanged; callers
        must not rely on normalizing a zero vector.
        """
        m = self.magnitude()
        if m == 0:
            return Vector4(self._x, self._y, self._z, self._w)
        return self / m

    def is_point(self) -> bool:
        return abs(self._w - 1.0) < EPSILON

    def is_vector(self) -> bool:
        return abs(self._w) < EPSILON

    def __repr__(self) -> str:
        return f"Vector4({self._x}, {self._y}, {self._z}, {self._w})"


def point(x: float, y: float, z: float) -> Vector4:
    return Vector4(x, y, z, 1.0)


def vector(x: float, y: float, z: float) -> Vector4:
    return Vector4(x, y, z, 0.0)


def color(r: float, g: float, b: float) -> Vector4:
    return Vector4(r, g, b, 0.0)


BLACK = color(0.0, 0.0, 0.0)
WHITE = color(1.0, 1.0, 1.0)
