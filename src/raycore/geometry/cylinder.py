"""Unit-radius cylinder primitive, optionally truncated and capped.

The cylinder's axis is the object-space y axis and its radius is 1. It may be
truncated to min_y < y < max_y (both infinite by default) and, when truncated,
closed with flat disks at y = min_y and y = max_y.

Body intersection solves

    (ox + t*dx)^2 + (oz + t*dz)^2 = 1

with a = dx^2 + dz^2, b = 2*ox*dx + 2*oz*dz, c = ox^2 + oz^2 - 1. When a is
below EPSILON the ray runs parallel to the axis and can only reach the caps.
Each body root is kept only when its height lies strictly inside
(min_y, max_y); points exactly on a cap boundary belong to the cap test.

Cap intersection intersects the planes y = min_y and y = max_y and keeps a
root when the hit lies within the unit disk. A cap root that coincides with an
accepted body root (a ray crossing the rim) is reported once.

Roots slots: 0/1 body near/far, 2 bottom cap, 3 top cap.

Example:
    >>> from src.raycore.geometry.cylinder import Cylinder
    >>> open_cylinder = Cylinder()
    >>> limited = Cylinder.limited(1.0, 2.0)
    >>> capped = Cylinder.capped(1.0, 2.0)
"""

import taichi as ti

from src.raycore.core.ray import Ray
from src.raycore.core.runtime import EPSILON
from src.raycore.core.tuples import Point, Vector

from .base import BoundedGeometry, Roots, cap_root, empty_roots, read_roots, roots_field, vec3


@ti.func
def intersect_cylinder(origin: vec3, direction: vec3, min_y: ti.f64, max_y: ti.f64, closed: ti.i32) -> Roots:
    """Intersect an object-space ray with a (possibly truncated) cylinder.

    Args:
        origin: Object-space ray origin.
        direction: Object-space ray direction (need not be normalized).
        min_y: Lower truncation height (-MISS when unbounded).
        max_y: Upper truncation height (MISS when unbounded).
        closed: 1 if the cylinder has caps at min_y and max_y.

    Returns:
        Roots holding every accepted t, with MISS in rejected slots.
    """
    roots = empty_roots()

    a = direction.x * direction.x + direction.z * direction.z
    if a >= EPSILON:
        b = 2.0 * origin.x * direction.x + 2.0 * origin.z * direction.z
        c = origin.x * origin.x + origin.z * origin.z - 1.0
        discriminant = b * b - 4.0 * a * c

        if discriminant >= 0.0:
            sqrt_d = ti.sqrt(discriminant)
            t0 = (-b - sqrt_d) / (2.0 * a)
            t1 = (-b + sqrt_d) / (2.0 * a)
            if t0 > t1:
                temp = t0
                t0 = t1
                t1 = temp

            y0 = origin.y + t0 * direction.y
            if min_y < y0 and y0 < max_y:
                roots[0] = t0
            y1 = origin.y + t1 * direction.y
            if min_y < y1 and y1 < max_y:
                roots[1] = t1

    if closed != 0 and ti.abs(direction.y) > EPSILON:
        roots[2] = cap_root(origin, direction, min_y, 1.0, roots)
        roots[3] = cap_root(origin, direction, max_y, 1.0, roots)

    return roots


@ti.kernel
def _cylinder_kernel(
    out: ti.template(),
    ox: ti.f64,
    oy: ti.f64,
    oz: ti.f64,
    dx: ti.f64,
    dy: ti.f64,
    dz: ti.f64,
    min_y: ti.f64,
    max_y: ti.f64,
    closed: ti.i32,
):
    out[None] = intersect_cylinder(vec3(ox, oy, oz), vec3(dx, dy, dz), min_y, max_y, closed)


class Cylinder(BoundedGeometry):
    """A unit-radius cylinder around the object-space y axis.

    Open and unbounded by default; see BoundedGeometry for min_y, max_y,
    closed and the limited()/capped() constructors.
    """

    kind = "cylinder"

    def local_intersect(self, ray: Ray) -> list[float]:
        out = roots_field()
        _cylinder_kernel(out, *ray.origin, *ray.direction, *self.kernel_args())
        return read_roots(out)

    def local_normal(self, point: Point) -> Vector:
        dist = point.x * point.x + point.z * point.z
        if dist < 1.0 and point.y >= self._max_y - EPSILON:
            return Vector(0.0, 1.0, 0.0)
        if dist < 1.0 and point.y <= self._min_y + EPSILON:
            return Vector(0.0, -1.0, 0.0)
        return Vector(point.x, 0.0, point.z)
