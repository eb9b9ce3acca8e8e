"""Double-napped cone primitive, optionally truncated and capped.

The cone x^2 + z^2 = y^2 has its apex at the object-space origin and opens
along +y and -y with unit slope, so its radius at height y is |y|. Bounds and
caps work as for the cylinder except that a cap disk at y = h has radius |h|.

Body intersection uses

    a = dx^2 - dy^2 + dz^2
    b = 2*ox*dx - 2*oy*dy + 2*oz*dz
    c = ox^2 - oy^2 + oz^2

When a is (almost) zero the ray is parallel to one of the cone's generating
lines and the equation degenerates to b*t + c = 0: a single root -c / b
remains as long as b is not zero as well.

Roots slots: 0/1 body near/far (slot 0 only in the linear case), 2 bottom cap,
3 top cap.
"""

import math

import taichi as ti

from src.raycore.core.ray import Ray
from src.raycore.core.runtime import EPSILON
from src.raycore.core.tuples import Point, Vector

from .base import BoundedGeometry, Roots, cap_root, empty_roots, read_roots, roots_field, vec3


@ti.func
def intersect_cone(origin: vec3, direction: vec3, min_y: ti.f64, max_y: ti.f64, closed: ti.i32) -> Roots:
    """Intersect an object-space ray with a (possibly truncated) cone.

    Args:
        origin: Object-space ray origin.
        direction: Object-space ray direction (need not be normalized).
        min_y: Lower truncation height (-MISS when unbounded).
        max_y: Upper truncation height (MISS when unbounded).
        closed: 1 if the cone has caps at min_y and max_y.

    Returns:
        Roots holding every accepted t, with MISS in rejected slots.
    """
    roots = empty_roots()

    a = direction.x * direction.x - direction.y * direction.y + direction.z * direction.z
    b = 2.0 * origin.x * direction.x - 2.0 * origin.y * direction.y + 2.0 * origin.z * direction.z
    c = origin.x * origin.x - origin.y * origin.y + origin.z * origin.z

    if ti.abs(a) < EPSILON:
        if ti.abs(b) >= EPSILON:
            t = -c / b
            y = origin.y + t * direction.y
            if min_y < y and y < max_y:
                roots[0] = t
    else:
        discriminant = b * b - 4.0 * a * c
        # Tangent rays can produce tiny negative discriminants
        if discriminant > -EPSILON:
            sqrt_d = ti.sqrt(ti.max(discriminant, 0.0))
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
        roots[2] = cap_root(origin, direction, min_y, ti.abs(min_y), roots)
        roots[3] = cap_root(origin, direction, max_y, ti.abs(max_y), roots)

    return roots


@ti.kernel
def _cone_kernel(
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
    out[None] = intersect_cone(vec3(ox, oy, oz), vec3(dx, dy, dz), min_y, max_y, closed)


class Cone(BoundedGeometry):
    """A double-napped cone around the object-space y axis.

    Open and unbounded by default; see BoundedGeometry for min_y, max_y,
    closed and the limited()/capped() constructors.
    """

    kind = "cone"

    def local_intersect(self, ray: Ray) -> list[float]:
        out = roots_field()
        _cone_kernel(out, *ray.origin, *ray.direction, *self.kernel_args())
        return read_roots(out)

    def local_normal(self, point: Point) -> Vector:
        dist = point.x * point.x + point.z * point.z
        if dist < self._max_y * self._max_y and point.y >= self._max_y - EPSILON:
            return Vector(0.0, 1.0, 0.0)
        if dist < self._min_y * self._min_y and point.y <= self._min_y + EPSILON:
            return Vector(0.0, -1.0, 0.0)

        y = math.sqrt(dist)
        if point.y > 0.0:
            y = -y
        return Vector(point.x, y, point.z)
