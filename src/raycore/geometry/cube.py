"""Axis-aligned cube primitive.

The cube spans [-1, 1] on every object-space axis. Intersection uses the slab
method: each axis yields an interval of t for which the ray lies between that
axis' two faces, and the ray hits the cube over the overlap of the three
intervals. An empty overlap (near > far) is a miss.

A ray parallel to a pair of faces never crosses them; it stays inside that
slab for all t when its origin is between the faces and outside it otherwise.
"""

import taichi as ti

from src.raycore.core.ray import Ray
from src.raycore.core.runtime import EPSILON, MISS
from src.raycore.core.tuples import Point, Vector

from .base import Geometry, Roots, empty_roots, read_roots, roots_field, vec3


@ti.func
def _slab(origin: ti.f64, direction: ti.f64):
    """Return the (near, far) t interval for one axis of the cube."""
    t_near = -MISS
    t_far = MISS
    if ti.abs(direction) >= EPSILON:
        t_near = (-1.0 - origin) / direction
        t_far = (1.0 - origin) / direction
        if t_near > t_far:
            temp = t_near
            t_near = t_far
            t_far = temp
    elif origin < -1.0 or origin > 1.0:
        # Parallel and outside the slab: empty interval
        t_near = MISS
        t_far = -MISS
    return t_near, t_far


@ti.func
def intersect_cube(origin: vec3, direction: vec3) -> Roots:
    """Intersect an object-space ray with the [-1, 1] cube.

    Returns:
        Roots with the entry and exit t values in slots 0 and 1, or all MISS.
    """
    roots = empty_roots()
    x_near, x_far = _slab(origin.x, direction.x)
    y_near, y_far = _slab(origin.y, direction.y)
    z_near, z_far = _slab(origin.z, direction.z)

    t_near = ti.max(ti.max(x_near, y_near), z_near)
    t_far = ti.min(ti.min(x_far, y_far), z_far)

    # A zero direction inside the cube gives an unbounded interval: not a hit
    if t_near <= t_far and t_far < MISS and t_near > -MISS:
        roots[0] = t_near
        roots[1] = t_far
    return roots


@ti.kernel
def _cube_kernel(
    out: ti.template(),
    ox: ti.f64,
    oy: ti.f64,
    oz: ti.f64,
    dx: ti.f64,
    dy: ti.f64,
    dz: ti.f64,
):
    out[None] = intersect_cube(vec3(ox, oy, oz), vec3(dx, dy, dz))


class Cube(Geometry):
    """An axis-aligned cube spanning [-1, 1] in object space."""

    kind = "cube"

    def local_intersect(self, ray: Ray) -> list[float]:
        out = roots_field()
        _cube_kernel(out, *ray.origin, *ray.direction)
        return read_roots(out)

    def local_normal(self, point: Point) -> Vector:
        # The face is the axis with the largest absolute coordinate
        ax, ay, az = abs(point.x), abs(point.y), abs(point.z)
        max_c = max(ax, ay, az)
        if max_c == ax:
            return Vector(point.x, 0.0, 0.0)
        if max_c == ay:
            return Vector(0.0, point.y, 0.0)
        return Vector(0.0, 0.0, point.z)
