"""Unit tests for the cone primitive.

Tests cover:
- Body hits for rays through and tangent to the double cone
- Rays parallel to a generating line (single root from the linear case)
- Capped cones with disk radius |y|
- Body and cap normals
"""

import math

import pytest

from helpers import assert_ts_close, assert_tuple_close


class TestConeIntersection:
    """Tests for ray-cone intersection."""

    @pytest.mark.parametrize(
        "origin,direction,expected",
        [
            ((0, 0, -5), (0, 0, 1), [5.0, 5.0]),
            ((0, 0, -5), (1, 1, 1), [8.66025, 8.66025]),
            ((1, 1, -5), (-0.5, -1, 1), [4.55006, 49.44994]),
        ],
    )
    def test_ray_hits(self, origin, direction, expected):
        from src.raycore.core.ray import make_ray
        from src.raycore.geometry.cone import Cone

        ray = make_ray(origin, direction, normalize=True)
        assert_ts_close(sorted(Cone().local_intersect(ray)), expected, tol=1e-4)

    def test_ray_parallel_to_one_half(self):
        """a = 0 but b != 0 still gives exactly one intersection."""
        from src.raycore.core.ray import make_ray
        from src.raycore.geometry.cone import Cone

        ray = make_ray((0, 0, -1), (0, 1, 1), normalize=True)
        ts = Cone().local_intersect(ray)
        assert_ts_close(ts, [0.70711], tol=1e-4)

        # The reported point lies on the cone x^2 + z^2 = y^2
        p = ray.position(ts[0])
        assert abs(p.x * p.x + p.z * p.z - p.y * p.y) < 1e-6

    def test_linear_case_respects_bounds(self):
        from src.raycore.core.ray import make_ray
        from src.raycore.geometry.cone import Cone

        ray = make_ray((0, 0, -1), (0, 1, 1), normalize=True)
        # The single hit is at y = 0.5
        assert Cone.limited(0.6, 1.0).local_intersect(ray) == []
        assert_ts_close(Cone.limited(0.4, 1.0).local_intersect(ray), [0.70711], tol=1e-4)

    @pytest.mark.parametrize(
        "origin,direction,count",
        [
            ((0, 0, -5), (0, 1, 0), 0),
            ((0, 0, -0.25), (0, 1, 1), 2),
            ((0, 0, -0.25), (0, 1, 0), 4),
        ],
    )
    def test_capped_cone(self, origin, direction, count):
        from src.raycore.core.ray import make_ray
        from src.raycore.geometry.cone import Cone

        ray = make_ray(origin, direction, normalize=True)
        assert len(Cone.capped(-0.5, 0.5).local_intersect(ray)) == count

    def test_closed_needs_finite_bounds(self):
        from src.raycore.geometry.cone import Cone

        with pytest.raises(ValueError):
            Cone(closed=True)

    def test_shares_bounded_behaviour_with_cylinder(self):
        from src.raycore.geometry.base import BoundedGeometry
        from src.raycore.geometry.cone import Cone
        from src.raycore.geometry.cylinder import Cylinder

        cone = Cone.capped(-1.0, 2.0)
        assert isinstance(cone, BoundedGeometry)
        assert isinstance(Cylinder(), BoundedGeometry)
        assert (cone.min_y, cone.max_y, cone.closed) == (-1.0, 2.0, True)
        assert repr(cone) == "Cone(min_y=-1.0, max_y=2.0, closed=True)"
        with pytest.raises(ValueError):
            Cone.limited(2.0, 1.0)


class TestConeNormal:
    """Tests for cone surface normals."""

    @pytest.mark.parametrize(
        "point,normal",
        [
            ((0, 0, 0), (0, 0, 0)),
            ((1, 1, 1), (1, -math.sqrt(2), 1)),
            ((-1, -1, 0), (-1, 1, 0)),
        ],
    )
    def test_body_normal(self, point, normal):
        from src.raycore.core.tuples import Point, Vector
        from src.raycore.geometry.cone import Cone

        assert_tuple_close(Cone().local_normal(Point(*point)), Vector(*normal))

    def test_cap_normals(self):
        from src.raycore.core.tuples import Point, Vector
        from src.raycore.geometry.cone import Cone

        c = Cone.capped(-1.0, 2.0)
        assert_tuple_close(c.local_normal(Point(1.0, 2.0, 0.5)), Vector(0.0, 1.0, 0.0))
        assert_tuple_close(c.local_normal(Point(0.5, -1.0, 0.0)), Vector(0.0, -1.0, 0.0))
