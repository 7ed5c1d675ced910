"""Tests for the 4-component tuple algebra."""

import math

import pytest

from core.utils import EPSILON, equal, radians, reflect
from core.vector import Vector4, color, point, vector


class TestConstruction:

    def test_point_has_w_one(self):
        p = point(4.3, -4.2, 3.1)
        assert p.w == 1.0
        assert p.is_point()
        assert not p.is_vector()

    def test_vector_has_w_zero(self):
        v = vector(4.3, -4.2, 3.1)
        assert v.w == 0.0
        assert v.is_vector()
        assert not v.is_point()

    def test_color_components(self):
        c = color(-0.5, 0.4, 1.7)
        assert (c.r, c.g, c.b) == (-0.5, 0.4, 1.7)

    def test_tuple_is_immutable(self):
        v = vector(1, 2, 3)
        with pytest.raises(AttributeError):
            v.x = 5


class TestEquality:

    def test_scalar_tolerance(self):
        assert equal(1.0, 1.003)
        assert not equal(1.0, 1.004)

    def test_tuple_tolerance(self):
        assert point(1, 2, 3) == point(1.002, 1.998, 3.0)
        assert point(1, 2, 3) != point(1.01, 2, 3)

    def test_point_differs_from_vector(self):
        assert point(1, 2, 3) != vector(1, 2, 3)

    def test_epsilon_value(self):
        assert EPSILON == pytest.approx(0.0035)


class TestArithmetic:

    def test_point_plus_vector(self):
        assert Vector4(3, -2, 5, 1) + Vector4(-2, 3, 1, 0) == Vector4(1, 1, 6, 1)

    def test_point_minus_point_is_vector(self):
        assert point(3, 2, 1) - point(5, 6, 7) == vector(-2, -4, -6)

    def test_point_minus_vector_is_point(self):
        assert point(3, 2, 1) - vector(5, 6, 7) == point(-2, -4, -6)

    def test_negate(self):
        assert -Vector4(1, -2, 3, -4) == Vector4(-1, 2, -3, 4)

    def test_scalar_multiply_and_divide(self):
        a = Vector4(1, -2, 3, -4)
        assert a * 3.5 == Vector4(3.5, -7, 10.5, -14)
        assert 0.5 * a == Vector4(0.5, -1, 1.5, -2)
        assert a / 2 == Vector4(0.5, -1, 1.5, -2)

    def test_hadamard_product(self):
        assert color(1, 0.2, 0.4) * color(0.9, 1, 0.1) == color(0.9, 0.2, 0.04)

    def test_add_colors(self):
        assert color(0.9, 0.6, 0.75) + color(0.7, 0.1, 0.25) == color(1.6, 0.7, 1.0)


class TestProducts:

    def test_magnitude(self):
        assert vector(1, 0, 0).magnitude() == 1
        assert vector(1, 2, 3).magnitude() == pytest.approx(math.sqrt(14))
        assert vector(-1, -2, -3).magnitude_squared() == pytest.approx(14)

    def test_normalize(self):
        assert vector(4, 0, 0).normalize() == vector(1, 0, 0)
        n = vector(1, 2, 3).normalize()
        assert n == vector(0.26726, 0.53452, 0.80178)
        assert equal(n.magnitude(), 1.0)

    @pytest.mark.parametrize("v", [vector(0.001, 0, 0), vector(-3, 7, 12), vector(1e3, -2e2, 5)])
    def test_normalized_vectors_have_unit_length(self, v):
        assert equal(v.normalize().magnitude(), 1.0)

    def test_normalize_zero_vector_does_not_raise(self):
        assert vector(0, 0, 0).normalize() == vector(0, 0, 0)

    def test_dot(self):
        assert vector(1, 2, 3).dot(vector(2, 3, 4)) == 20

    def test_cross(self):
        a = vector(1, 2, 3)
        b = vector(2, 3, 4)
        assert a.cross(b) == vector(-1, 2, -1)
        assert b.cross(a) == vector(1, -2, 1)


class TestHelpers:

    def test_radians(self):
        assert radians(180) == pytest.approx(math.pi)
        assert radians(90) == pytest.approx(math.pi / 2)

    def test_reflect_at_45_degrees(self):
        assert reflect(vector(1, -1, 0), vector(0, 1, 0)) == vector(1, 1, 0)

    def test_reflect_off_slanted_surface(self):
        k = math.sqrt(2) / 2
        assert reflect(vector(0, -1, 0), vector(k, k, 0)) == vector(1, 0, 0)
