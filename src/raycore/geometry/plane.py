"""Infinite xz plane primitive.

The plane contains the object-space x and z axes; its normal is +y everywhere.
A ray whose direction has (almost) no y component is parallel to the plane
and never intersects it, even when it lies inside it.
"""

import taichi as ti

from src.raycore.core.ray import Ray
from src.raycore.core.runtime import EPSILON
from src.raycore.core.tuples import Point, Vector

from .base import Geometry, Roots, empty_roots, read_roots, roots_field, vec3


@ti.func
def intersect_plane(origin: vec3, direction: vec3) -> Roots:
    roots = empty_roots()
    if ti.abs(direction.y) >= EPSILON:
        roots[0] = -origin.y / direction.y
    return roots


@ti.kernel
def _plane_kernel(
    out: ti.template(),
    ox: ti.f64,
    oy: ti.f64,
    oz: ti.f64,
    dx: ti.f64,
    dy: ti.f64,
    dz: ti.f64,
):
    out[None] = intersect_plane(vec3(ox, oy, oz), vec3(dx, dy, dz))


class Plane(Geometry):
    """The object-space xz plane."""

    kind = "plane"

    def local_intersect(self, ray: Ray) -> list[float]:
        out = roots_field()
        _plane_kernel(out, *ray.origin, *ray.direction)
        return read_roots(out)

    def local_normal(self, point: Point) -> Vector:
        return Vector(0.0, 1.0, 0.0)
