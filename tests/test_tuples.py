"""Unit tests for homogeneous points and vectors.

Tests cover:
- w component for points and vectors
- Point/vector arithmetic rules and rejected combinations
- Magnitude, normalization, dot and cross products, reflection
- Read-only backing storage
"""

import math

import pytest

from helpers import assert_tuple_close


class TestConstruction:
    """Tests for Point and Vector construction."""

    def test_point_has_w_one(self):
        from src.raycore.core.tuples import Point

        p = Point(4.3, -4.2, 3.1)
        assert p.x == 4.3
        assert p.y == -4.2
        assert p.z == 3.1
        assert p.w == 1.0

    def test_vector_has_w_zero(self):
        from src.raycore.core.tuples import Vector

        v = Vector(4.3, -4.2, 3.1)
        assert v.w == 0.0

    def test_backing_array_is_read_only(self):
        """The w component (and every other) cannot be mutated in place."""
        from src.raycore.core.tuples import Point

        p = Point(1.0, 2.0, 3.0)
        with pytest.raises(ValueError):
            p.data[3] = 0.0
        assert p.w == 1.0

    def test_from_array_picks_type_by_w(self):
        from src.raycore.core.tuples import Point, Vector, from_array

        assert isinstance(from_array([1.0, 2.0, 3.0, 1.0]), Point)
        assert isinstance(from_array([1.0, 2.0, 3.0, 0.0]), Vector)
        assert_tuple_close(from_array([2.0, 4.0, 6.0, 2.0]), Point(1.0, 2.0, 3.0))

    def test_equality_uses_tolerance(self):
        from src.raycore.core.tuples import Point, Vector

        assert Point(1.0, 2.0, 3.0) == Point(1.0, 2.0, 3.000001)
        assert Point(1.0, 2.0, 3.0) != Point(1.0, 2.0, 3.1)
        assert Point(1.0, 2.0, 3.0) != Vector(1.0, 2.0, 3.0)


class TestArithmetic:
    """Tests for the point/vector arithmetic rules."""

    def test_point_minus_point_is_vector(self):
        from src.raycore.core.tuples import Point, Vector

        assert_tuple_close(Point(3.0, 2.0, 1.0) - Point(5.0, 6.0, 7.0), Vector(-2.0, -4.0, -6.0))

    def test_point_plus_vector_is_point(self):
        from src.raycore.core.tuples import Point, Vector

        assert_tuple_close(Point(3.0, -2.0, 5.0) + Vector(-2.0, 3.0, 1.0), Point(1.0, 1.0, 6.0))
        assert_tuple_close(Vector(-2.0, 3.0, 1.0) + Point(3.0, -2.0, 5.0), Point(1.0, 1.0, 6.0))

    def test_point_minus_vector_is_point(self):
        from src.raycore.core.tuples import Point, Vector

        assert_tuple_close(Point(3.0, 2.0, 1.0) - Vector(5.0, 6.0, 7.0), Point(-2.0, -4.0, -6.0))

    def test_vector_plus_vector_is_vector(self):
        from src.raycore.core.tuples import Vector

        assert_tuple_close(Vector(1.0, 2.0, 3.0) + Vector(1.0, 1.0, 1.0), Vector(2.0, 3.0, 4.0))
        assert_tuple_close(Vector(3.0, 2.0, 1.0) - Vector(5.0, 6.0, 7.0), Vector(-2.0, -4.0, -6.0))

    def test_point_plus_point_is_rejected(self):
        from src.raycore.core.tuples import Point

        with pytest.raises(TypeError):
            Point(1.0, 0.0, 0.0) + Point(0.0, 1.0, 0.0)

    def test_vector_minus_point_is_rejected(self):
        from src.raycore.core.tuples import Point, Vector

        with pytest.raises(TypeError):
            Vector(1.0, 0.0, 0.0) - Point(0.0, 1.0, 0.0)

    def test_scalar_multiply_and_divide(self):
        from src.raycore.core.tuples import Vector

        v = Vector(1.0, -2.0, 3.0)
        assert_tuple_close(v * 3.5, Vector(3.5, -7.0, 10.5))
        assert_tuple_close(0.5 * v, Vector(0.5, -1.0, 1.5))
        assert_tuple_close(v / 2.0, Vector(0.5, -1.0, 1.5))
        assert_tuple_close(-v, Vector(-1.0, 2.0, -3.0))


class TestVectorOperations:
    """Tests for magnitude, normalize, dot, cross and reflect."""

    def test_magnitude(self):
        from src.raycore.core.tuples import Vector

        assert Vector(1.0, 0.0, 0.0).magnitude() == 1.0
        assert abs(Vector(1.0, 2.0, 3.0).magnitude() - math.sqrt(14.0)) < 1e-9

    def test_normalize(self):
        from src.raycore.core.tuples import Vector

        n = Vector(1.0, 2.0, 3.0).normalize()
        assert abs(n.magnitude() - 1.0) < 1e-9
        assert_tuple_close(Vector(4.0, 0.0, 0.0).normalize(), Vector(1.0, 0.0, 0.0))

    def test_normalize_zero_vector(self):
        from src.raycore.core.tuples import Vector

        assert_tuple_close(Vector(0.0, 0.0, 0.0).normalize(), Vector(0.0, 0.0, 0.0))

    def test_dot_and_cross(self):
        from src.raycore.core.tuples import Vector

        a = Vector(1.0, 2.0, 3.0)
        b = Vector(2.0, 3.0, 4.0)
        assert a.dot(b) == 20.0
        assert_tuple_close(a.cross(b), Vector(-1.0, 2.0, -1.0))
        assert_tuple_close(b.cross(a), Vector(1.0, -2.0, 1.0))

    def test_reflect_off_slanted_surface(self):
        from src.raycore.core.tuples import Vector

        v = Vector(0.0, -1.0, 0.0)
        n = Vector(math.sqrt(2) / 2, math.sqrt(2) / 2, 0.0)
        assert_tuple_close(v.reflect(n), Vector(1.0, 0.0, 0.0))
