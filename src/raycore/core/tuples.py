"""Homogeneous points and vectors.

Points and vectors are 4-tuples (x, y, z, w) where w is 1 for points and 0 for
vectors. A single 4x4 matrix product therefore translates points but leaves
vectors untouched, and the arithmetic below keeps the w component consistent:

    point - point   -> vector
    point +- vector -> point
    vector +- vector -> vector

Combinations without a geometric meaning (point + point, vector - point)
raise TypeError. The backing numpy array is read-only, so w never changes
after construction.

Example:
    >>> from src.raycore.core.tuples import Point, Vector
    >>> p = Point(1.0, 2.0, 3.0)
    >>> v = Vector(0.0, 0.0, 1.0)
    >>> p + v
    Point(1.0, 2.0, 4.0)
"""

from __future__ import annotations

import math

import numpy as np
import numpy.typing as npt

from src.raycore.core.runtime import EPSILON


class _Tuple4:
    """Read-only homogeneous 4-tuple shared by Point and Vector."""

    __slots__ = ("_data",)

    W = 0.0

    def __init__(self, x: float, y: float, z: float) -> None:
        data = np.array([x, y, z, self.W], dtype=np.float64)
        data.setflags(write=False)
        self._data = data

    @property
    def x(self) -> float:
        return float(self._data[0])

    @property
    def y(self) -> float:
        return float(self._data[1])

    @property
    def z(self) -> float:
        return float(self._data[2])

    @property
    def w(self) -> float:
        return float(self._data[3])

    @property
    def data(self) -> npt.NDArray[np.float64]:
        """The read-only (4,) array backing this tuple."""
        return self._data

    def xyz(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, _Tuple4) or self.W != other.W:
            return NotImplemented
        return bool(np.all(np.abs(self._data - other._data) < EPSILON))

    __hash__ = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.x}, {self.y}, {self.z})"


class Point(_Tuple4):
    """A position in space (w = 1)."""

    __slots__ = ()

    W = 1.0

    def __add__(self, other: object) -> Point:
        if isinstance(other, Vector):
            return Point(*(self._data[:3] + other.data[:3]))
        return NotImplemented

    def __sub__(self, other: object) -> Point | Vector:
        if isinstance(other, Point):
            return Vector(*(self._data[:3] - other.data[:3]))
        if isinstance(other, Vector):
            return Point(*(self._data[:3] - other.data[:3]))
        return NotImplemented


class Vector(_Tuple4):
    """A direction or displacement (w = 0)."""

    __slots__ = ()

    W = 0.0

    def __add__(self, other: object) -> Point | Vector:
        if isinstance(other, Vector):
            return Vector(*(self._data[:3] + other.data[:3]))
        if isinstance(other, Point):
            return Point(*(self._data[:3] + other.data[:3]))
        return NotImplemented

    def __sub__(self, other: object) -> Vector:
        if isinstance(other, Vector):
            return Vector(*(self._data[:3] - other.data[:3]))
        return NotImplemented

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y, -self.z)

    def __mul__(self, scalar: float) -> Vector:
        if isinstance(scalar, (int, float)):
            return Vector(*(self._data[:3] * scalar))
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vector:
        if isinstance(scalar, (int, float)):
            return Vector(*(self._data[:3] / scalar))
        return NotImplemented

    def magnitude(self) -> float:
        return math.sqrt(self.dot(self))

    def normalize(self) -> Vector:
        """Scale to unit length. A zero vector is returned unchanged."""
        m = self.magnitude()
        if m == 0.0:
            return self
        return self / m

    def dot(self, other: Vector) -> float:
        return float(np.dot(self._data[:3], other.data[:3]))

    def cross(self, other: Vector) -> Vector:
        return Vector(*np.cross(self._data[:3], other.data[:3]))

    def reflect(self, normal: Vector) -> Vector:
        """Reflect this vector about a unit normal."""
        return self - normal * (2.0 * self.dot(normal))


def from_array(data: npt.ArrayLike) -> Point | Vector:
    """Build a Point or Vector from a homogeneous (4,) array.

    The w component selects the type: 0 gives a Vector, anything else a Point
    (divided through by w when it is not exactly 1).
    """
    x, y, z, w = (float(c) for c in np.asarray(data, dtype=np.float64))
    if w == 0.0:
        return Vector(x, y, z)
    if w != 1.0:
        x, y, z = x / w, y / w, z / w
    return Point(x, y, z)
