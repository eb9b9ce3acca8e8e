"""Unit sphere primitive.

The sphere is centred on the object-space origin with radius 1. Ray-sphere
intersection solves the quadratic

    |origin + t * direction|^2 = 1

with a = dot(d, d), b = 2 * dot(d, o), c = dot(o, o) - 1. A tangent ray has a
zero discriminant and reports the same t twice.

Example:
    >>> from src.raycore.core.ray import make_ray
    >>> from src.raycore.geometry.sphere import Sphere
    >>> Sphere().local_intersect(make_ray((0, 0, -5), (0, 0, 1)))
    [4.0, 6.0]
"""

import taichi as ti
import taichi.math as tm

from src.raycore.core.ray import Ray
from src.raycore.core.tuples import Point, Vector

from .base import Geometry, Roots, empty_roots, read_roots, roots_field, vec3


@ti.func
def intersect_sphere(origin: vec3, direction: vec3) -> Roots:
    """Intersect an object-space ray with the unit sphere.

    Args:
        origin: Object-space ray origin.
        direction: Object-space ray direction (need not be normalized).

    Returns:
        Roots with the near and far t values in slots 0 and 1, or all MISS.
    """
    roots = empty_roots()
    a = tm.dot(direction, direction)
    b = 2.0 * tm.dot(direction, origin)
    c = tm.dot(origin, origin) - 1.0
    discriminant = b * b - 4.0 * a * c

    if a > 0.0 and discriminant >= 0.0:
        sqrt_d = ti.sqrt(discriminant)
        t0 = (-b - sqrt_d) / (2.0 * a)
        t1 = (-b + sqrt_d) / (2.0 * a)
        if t0 > t1:
            temp = t0
            t0 = t1
            t1 = temp
        roots[0] = t0
        roots[1] = t1

    return roots


@ti.kernel
def _sphere_kernel(
    out: ti.template(),
    ox: ti.f64,
    oy: ti.f64,
    oz: ti.f64,
    dx: ti.f64,
    dy: ti.f64,
    dz: ti.f64,
):
    out[None] = intersect_sphere(vec3(ox, oy, oz), vec3(dx, dy, dz))


class Sphere(Geometry):
    """A unit sphere centred on the object-space origin."""

    kind = "sphere"

    def local_intersect(self, ray: Ray) -> list[float]:
        out = roots_field()
        _sphere_kernel(out, *ray.origin, *ray.direction)
        return read_roots(out)

    def local_normal(self, point: Point) -> Vector:
        return point - Point(0.0, 0.0, 0.0)
