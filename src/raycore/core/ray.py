"""Ray data structure.

A ray is an origin point plus a direction vector. Rays are immutable:
transforming one into another coordinate space produces a new Ray.

The direction is not normalised. Transforming a unit world-space ray into a
scaled object space yields a non-unit direction, and t values found in object
space stay valid in world space only while that scale is kept.

Example:
    >>> from src.raycore.core.ray import Ray
    >>> from src.raycore.core.tuples import Point, Vector
    >>> ray = Ray(Point(0.0, 0.0, -5.0), Vector(0.0, 0.0, 1.0))
    >>> ray.position(5.0)
    Point(0.0, 0.0, 0.0)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from src.raycore.core.tuples import Point, Vector

if TYPE_CHECKING:
    from src.raycore.core.matrix import Matrix


@dataclass(frozen=True)
class Ray:
    """A ray with an origin point and direction vector.

    Attributes:
        origin: The starting point of the ray.
        direction: The direction vector of the ray. Not required to be unit
            length.
    """

    origin: Point
    direction: Vector

    def __post_init__(self) -> None:
        if not isinstance(self.origin, Point):
            raise TypeError(f"Ray origin must be a Point, got {type(self.origin).__name__}")
        if not isinstance(self.direction, Vector):
            raise TypeError(f"Ray direction must be a Vector, got {type(self.direction).__name__}")

    def position(self, t: float) -> Point:
        """Compute the point along the ray at parameter t.

        Args:
            t: The parameter value. Negative values lie behind the origin.

        Returns:
            The point origin + t * direction.
        """
        return self.origin + self.direction * t

    def transform(self, matrix: Matrix) -> Ray:
        """Return this ray expressed in the space the matrix maps into."""
        return Ray(matrix @ self.origin, matrix @ self.direction)


def make_ray(origin: tuple[float, float, float], direction: tuple[float, float, float], *, normalize: bool = False) -> Ray:
    """Create a ray from plain coordinate triples.

    Args:
        origin: (x, y, z) of the origin point.
        direction: (x, y, z) of the direction vector.
        normalize: Scale the direction to unit length first.

    Returns:
        A new Ray instance.
    """
    d = Vector(*direction)
    if normalize:
        d = d.normalize()
    return Ray(Point(*origin), d)
