"""Intersection records and ordered intersection lists.

An Intersection pairs a distance t along a world-space ray with the entity
that was struck. It refers to the entity through a weak reference, so
intersection records never keep an entity alive.

An IntersectionList holds intersections sorted by t. Its hit (the nearest
intersection with t >= 0) is derived from the current contents on every
access rather than stored.

Example:
    >>> from src.raycore.core.ray import make_ray
    >>> from src.raycore.geometry.sphere import Sphere
    >>> from src.raycore.scene.entity import Entity
    >>> from src.raycore.scene.intersection import intersect
    >>> ball = Entity(Sphere(), name="ball")
    >>> xs = intersect(make_ray((0, 0, 0), (0, 0, 1)), ball)
    >>> [i.t for i in xs]
    [-1.0, 1.0]
    >>> xs.hit.t
    1.0
"""

from __future__ import annotations

import functools
import weakref
from dataclasses import dataclass
from itertools import chain
from typing import TYPE_CHECKING, Iterable, Iterator

from src.raycore.core.runtime import EPSILON
from src.raycore.core.tuples import Point, Vector

if TYPE_CHECKING:
    from src.raycore.core.ray import Ray
    from src.raycore.scene.entity import Entity


@dataclass(frozen=True)
class HitRecord:
    """Surface information at an intersection, prepared for shading.

    Attributes:
        t: Distance along the ray.
        entity: The entity that was hit.
        point: World-space hit point.
        eye: Unit vector from the hit point back towards the ray origin.
        normal: World-space unit normal, flipped to face the eye.
        front_face: True when the ray hit the outside of the surface.
        over_point: The hit point nudged along the normal by EPSILON, for
            spawning secondary rays without self-intersection.
    """

    t: float
    entity: Entity
    point: Point
    eye: Vector
    normal: Vector
    front_face: bool
    over_point: Point


@functools.total_ordering
class Intersection:
    """A distance along a ray paired with the entity it struck.

    Intersections order by t. Negative t lies behind the ray origin.
    """

    __slots__ = ("_t", "_entity_ref")

    def __init__(self, t: float, entity: Entity) -> None:
        self._t = float(t)
        self._entity_ref = weakref.ref(entity)

    @property
    def t(self) -> float:
        return self._t

    @property
    def entity(self) -> Entity | None:
        """The entity that was hit, or None if it no longer exists."""
        return self._entity_ref()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Intersection):
            return NotImplemented
        return self._t == other.t and self.entity is other.entity

    def __lt__(self, other: Intersection) -> bool:
        if not isinstance(other, Intersection):
            return NotImplemented
        return self._t < other.t

    __hash__ = None

    def __repr__(self) -> str:
        entity = self.entity
        name = entity.name if entity is not None else "<gone>"
        return f"Intersection(t={self._t}, entity={name!r})"

    def position(self, ray: Ray) -> Point:
        """World-space point where this intersection lies on the ray."""
        return ray.position(self._t)

    def prepare(self, ray: Ray) -> HitRecord:
        """Compute the surface information the shading stage needs.

        Args:
            ray: The world-space ray that produced this intersection.

        Returns:
            A HitRecord for this intersection.

        Raises:
            RuntimeError: If the entity has been destroyed.
        """
        entity = self.entity
        if entity is None:
            raise RuntimeError(f"Entity for intersection at t={self._t} no longer exists")

        point = ray.position(self._t)
        eye = (-ray.direction).normalize()
        normal = entity.normal_at(point)
        front_face = normal.dot(eye) >= 0.0
        if not front_face:
            normal = -normal

        return HitRecord(
            t=self._t,
            entity=entity,
            point=point,
            eye=eye,
            normal=normal,
            front_face=front_face,
            over_point=point + normal * EPSILON,
        )


class IntersectionList:
    """An immutable, t-ordered sequence of intersections."""

    __slots__ = ("_items",)

    def __init__(self, intersections: Iterable[Intersection] = ()) -> None:
        self._items = tuple(sorted(intersections))

    @classmethod
    def merge(cls, *lists: Iterable[Intersection]) -> IntersectionList:
        """Combine several lists (e.g. one per entity) into one ordered list."""
        return cls(chain.from_iterable(lists))

    @property
    def all(self) -> tuple[Intersection, ...]:
        return self._items

    @property
    def ts(self) -> list[float]:
        return [i.t for i in self._items]

    @property
    def hit(self) -> Intersection | None:
        """The intersection with the smallest non-negative t, if any."""
        for intersection in self._items:
            if intersection.t >= 0.0:
                return intersection
        return None

    def __add__(self, other: IntersectionList) -> IntersectionList:
        if not isinstance(other, IntersectionList):
            return NotImplemented
        return IntersectionList.merge(self, other)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Intersection]:
        return iter(self._items)

    def __getitem__(self, index: int) -> Intersection:
        return self._items[index]

    def __repr__(self) -> str:
        return f"IntersectionList({list(self._items)!r})"


def intersect(ray: Ray, entity: Entity) -> IntersectionList:
    """Intersect a world-space ray with one entity.

    Args:
        ray: The ray in world space.
        entity: The entity to test.

    Returns:
        The entity's intersections, sorted by t.
    """
    return entity.intersect(ray)


def intersect_entities(ray: Ray, entities: Iterable[Entity]) -> IntersectionList:
    """Intersect a world-space ray with several entities and merge the results."""
    return IntersectionList.merge(*(entity.intersect(ray) for entity in entities))
