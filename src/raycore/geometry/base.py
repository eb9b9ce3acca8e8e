"""Shared interface and Taichi plumbing for geometric primitives.

Every primitive lives in its own object space with a canonical equation
(unit sphere, xz plane, [-1, 1] cube, unit-radius cylinder, unit-slope cone)
and answers two questions about an object-space ray or point:

    local_intersect(ray) -> list of t values (unsorted)
    local_normal(point)  -> object-space normal vector

The intersection math is written as Taichi functions (@ti.func) that return a
fixed-size Roots vector, one slot per candidate surface (e.g. cylinder body
entry, body exit, bottom cap, top cap). Rejected candidates hold the MISS
sentinel. A tiny per-primitive kernel evaluates the function for one ray and
writes the Roots into a 0-d vector field that Python then reads back.

Example:
    >>> from src.raycore.core.runtime import init
    >>> from src.raycore.core.ray import make_ray
    >>> from src.raycore.geometry.cylinder import Cylinder
    >>> init()
    >>> Cylinder().local_intersect(make_ray((0, 0, -5), (0, 0, 1)))
    [4.0, 6.0]
"""

import logging
import math
from abc import ABC, abstractmethod

import taichi as ti

from src.raycore.core.ray import Ray
from src.raycore.core.runtime import EPSILON, MAX_ROOTS, MISS, is_initialised
from src.raycore.core.tuples import Point, Vector

logger = logging.getLogger(__name__)

# Type aliases for double-precision Taichi vectors
vec3 = ti.types.vector(3, ti.f64)
Roots = ti.types.vector(MAX_ROOTS, ti.f64)

# Output field shared by all primitive kernels, allocated after ti.init()
_roots_field = None


def roots_field():
    """Return the 0-d Roots field used to read kernel results back.

    The field is created lazily so that it belongs to the Taichi runtime that
    is active at the first intersection query.

    Raises:
        RuntimeError: If init() has not been called. Taichi would otherwise
            initialise itself with its own defaults (f32, fast math).
    """
    global _roots_field
    if not is_initialised():
        raise RuntimeError("Taichi is not initialised; call src.raycore.core.runtime.init() first")
    if _roots_field is None:
        _roots_field = ti.Vector.field(MAX_ROOTS, dtype=ti.f64, shape=())
    return _roots_field


def reset_roots_field() -> None:
    """Forget the output field (required after ti.reset() or a second ti.init())."""
    global _roots_field
    _roots_field = None


def read_roots(out) -> list[float]:
    """Read a Roots field and drop the MISS slots, keeping slot order."""
    roots = [float(t) for t in out.to_numpy() if t != MISS]
    logger.debug(f"Kernel returned {len(roots)} root(s): {roots}")
    return roots


@ti.func
def empty_roots() -> Roots:
    """Create a Roots vector with every slot set to MISS."""
    return Roots(MISS, MISS, MISS, MISS)


@ti.func
def cap_root(origin: vec3, direction: vec3, plane_y: ti.f64, radius: ti.f64, body: Roots) -> ti.f64:
    """Intersect a ray with a horizontal disk closing off a cylinder or cone.

    The caller must ensure the ray is not parallel to the disk (|dy| > EPSILON).

    Args:
        origin: Object-space ray origin.
        direction: Object-space ray direction.
        plane_y: Height of the disk.
        radius: Disk radius.
        body: Roots already accepted for the curved body; a cap root that
            coincides with one of them (a ray crossing the rim) is dropped.

    Returns:
        The t value of the hit, or MISS.
    """
    result = MISS
    t = (plane_y - origin.y) / direction.y
    x = origin.x + t * direction.x
    z = origin.z + t * direction.z
    if x * x + z * z <= radius * radius + EPSILON:
        result = t
        for i in ti.static(range(MAX_ROOTS)):
            if ti.abs(t - body[i]) < EPSILON:
                result = MISS
    return result


class Geometry(ABC):
    """A primitive shape in its own object space."""

    #: Short identifier used in reprs and log messages.
    kind = "geometry"

    @abstractmethod
    def local_intersect(self, ray: Ray) -> list[float]:
        """Intersect an object-space ray with this primitive.

        Args:
            ray: The ray, already transformed into object space.

        Returns:
            The t values of every accepted intersection, not sorted.
        """

    @abstractmethod
    def local_normal(self, point: Point) -> Vector:
        """Compute the outward normal at an object-space surface point."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class BoundedGeometry(Geometry):
    """A primitive around the y axis that may be truncated and capped.

    Attributes:
        min_y: Lower truncation height (default -inf).
        max_y: Upper truncation height (default +inf).
        closed: Whether flat caps close off the primitive at min_y and max_y.
    """

    def __init__(self, min_y: float = -math.inf, max_y: float = math.inf, closed: bool = False) -> None:
        min_y = float(min_y)
        max_y = float(max_y)
        if min_y > max_y:
            raise ValueError(f"{self.kind} min_y = {min_y} is above max_y = {max_y}")
        if closed and not (math.isfinite(min_y) and math.isfinite(max_y)):
            raise ValueError(f"A closed {self.kind} needs finite bounds, got [{min_y}, {max_y}]")
        self._min_y = min_y
        self._max_y = max_y
        self._closed = bool(closed)

    @classmethod
    def limited(cls, min_y: float, max_y: float) -> "BoundedGeometry":
        """Create an open primitive truncated to min_y < y < max_y."""
        return cls(min_y, max_y, closed=False)

    @classmethod
    def capped(cls, min_y: float, max_y: float) -> "BoundedGeometry":
        """Create a truncated primitive closed with caps at min_y and max_y."""
        return cls(min_y, max_y, closed=True)

    @property
    def min_y(self) -> float:
        return self._min_y

    @property
    def max_y(self) -> float:
        return self._max_y

    @property
    def closed(self) -> bool:
        return self._closed

    def kernel_args(self) -> tuple[float, float, int]:
        """Bounds and cap flag as passed to a kernel, with infinities clamped to +-MISS."""
        return max(self._min_y, -MISS), min(self._max_y, MISS), int(self._closed)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(min_y={self._min_y}, max_y={self._max_y}, closed={self._closed})"
