"""Scene entities: a primitive placed in the world by an affine transform.

An Entity owns one geometry, one material, a name, and a forward transform
(object space -> parent space) together with its cached inverse. Both matrices
are stored as one tuple and replaced together whenever the transform changes,
so the inverse can never fall out of step with the forward transform and a
concurrent reader sees either the old pair or the new one.

Transform mutators compose in world order: each new operation is applied
after the existing transform, so

    >>> e = Entity(Sphere()).scale(2.0).translate(0.0, 1.0, 0.0)

first scales the sphere and then moves it up. Every mutator returns the entity
for chaining.

Entities may have a parent. Rays and points then pass through the parent's
world-to-object transform before the entity's own, and normals go back out
through each level's inverse transpose.

Example:
    >>> import math
    >>> from src.raycore.core.ray import make_ray
    >>> from src.raycore.geometry.cylinder import Cylinder
    >>> from src.raycore.scene.entity import Entity
    >>> pillar = Entity(Cylinder.capped(0.0, 1.0), name="pillar").scale(1.0, 3.0, 1.0)
    >>> xs = pillar.intersect(make_ray((0, 1.5, -5), (0, 0, 1)))
    >>> xs.ts
    [4.0, 6.0]
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from src.raycore.core.matrix import (
    Matrix,
    identity,
    rotation_x,
    rotation_y,
    rotation_z,
    scaling,
    shearing,
    translation,
)
from src.raycore.core.ray import Ray
from src.raycore.core.tuples import Point, Vector
from src.raycore.geometry.base import Geometry
from src.raycore.scene.intersection import Intersection, IntersectionList
from src.raycore.scene.material import Material

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EntityConfig:
    """Complete, immutable description of an entity.

    Attributes:
        geometry: The primitive the entity places in the scene.
        material: Surface material (default Material()).
        name: Human-readable name used in reprs and logs.
        transform: Object-to-parent transform (default identity).
    """

    geometry: Geometry
    material: Material = field(default_factory=Material)
    name: str = ""
    transform: Matrix = field(default_factory=identity)


class Entity:
    """A geometry placed in the scene by a transform."""

    def __init__(
        self,
        geometry: Geometry,
        *,
        material: Material | None = None,
        name: str = "",
        transform: Matrix | None = None,
        parent: Entity | None = None,
    ) -> None:
        if not isinstance(geometry, Geometry):
            raise TypeError(f"Entity geometry must be a Geometry, got {type(geometry).__name__}")
        self._geometry = geometry
        self._material = material if material is not None else Material()
        self.name = name
        self._parent: Entity | None = None
        self._transforms = (identity(), identity())
        if transform is not None:
            self.set_transform(transform)
        if parent is not None:
            self.set_parent(parent)

    @classmethod
    def from_config(cls, config: EntityConfig, parent: Entity | None = None) -> Entity:
        """Create a fully configured entity in one step."""
        return cls(
            config.geometry,
            material=config.material,
            name=config.name,
            transform=config.transform,
            parent=parent,
        )

    # =========================================================================
    # Components
    # =========================================================================

    @property
    def geometry(self) -> Geometry:
        return self._geometry

    @property
    def material(self) -> Material:
        return self._material

    @material.setter
    def material(self, material: Material) -> None:
        if not isinstance(material, Material):
            raise TypeError(f"Entity material must be a Material, got {type(material).__name__}")
        self._material = material

    @property
    def parent(self) -> Entity | None:
        return self._parent

    def set_parent(self, parent: Entity | None) -> Entity:
        """Attach this entity under a parent (or detach it with None).

        Raises:
            ValueError: If the parent chain would contain this entity.
        """
        node = parent
        while node is not None:
            if node is self:
                raise ValueError(f"Entity {self.name!r} cannot be its own ancestor")
            node = node.parent
        self._parent = parent
        return self

    # =========================================================================
    # Transform
    # =========================================================================

    @property
    def transform(self) -> Matrix:
        """Object-to-parent transform."""
        return self._transforms[0]

    @property
    def inverse(self) -> Matrix:
        """Cached inverse of the transform (parent-to-object)."""
        return self._transforms[1]

    def set_transform(self, matrix: Matrix) -> Entity:
        """Replace the transform and recompute its inverse.

        Raises:
            ValueError: If the matrix is not invertible. The previous
                transform is kept.
        """
        inverse = matrix.inverse()
        self._transforms = (matrix, inverse)
        logger.debug(f"Entity {self.name!r} transform set to {matrix}")
        return self

    def reset_transform(self) -> Entity:
        return self.set_transform(identity())

    def apply(self, matrix: Matrix) -> Entity:
        """Apply a transform after the current one."""
        return self.set_transform(matrix @ self.transform)

    def scale(self, x: float, y: float | None = None, z: float | None = None) -> Entity:
        """Scale uniformly (one argument) or per axis (three arguments)."""
        return self.apply(scaling(x, y, z))

    def translate(self, x: float, y: float, z: float) -> Entity:
        return self.apply(translation(x, y, z))

    def rotate_x(self, radians: float) -> Entity:
        return self.apply(rotation_x(radians))

    def rotate_y(self, radians: float) -> Entity:
        return self.apply(rotation_y(radians))

    def rotate_z(self, radians: float) -> Entity:
        return self.apply(rotation_z(radians))

    def shear(self, xy: float, xz: float, yx: float, yz: float, zx: float, zy: float) -> Entity:
        return self.apply(shearing(xy, xz, yx, yz, zx, zy))

    # =========================================================================
    # Space conversions
    # =========================================================================

    def world_to_object_matrix(self) -> Matrix:
        """The full world-to-object transform, including every parent."""
        if self._parent is None:
            return self.inverse
        return self.inverse @ self._parent.world_to_object_matrix()

    def world_to_object(self, point: Point) -> Point:
        """Convert a world-space point into this entity's object space."""
        return self.world_to_object_matrix() @ point

    def normal_to_world(self, normal: Vector) -> Vector:
        """Convert an object-space normal into a world-space unit normal.

        Normals transform by the inverse transpose so that they stay
        perpendicular to the surface under non-uniform scaling. Matrix @ Vector
        forces w back to 0, since the transposed translation row would
        otherwise leak into it.
        """
        world = (self.inverse.transpose() @ normal).normalize()
        if self._parent is not None:
            world = self._parent.normal_to_world(world)
        return world

    # =========================================================================
    # Queries
    # =========================================================================

    def intersect(self, ray: Ray) -> IntersectionList:
        """Intersect a world-space ray with this entity.

        Args:
            ray: The ray in world space.

        Returns:
            Every intersection with this entity, sorted by t. The t values
            are distances along the world-space ray.

        Raises:
            RuntimeError: If src.raycore.core.runtime.init() has not been called.
        """
        local_ray = ray.transform(self.world_to_object_matrix())
        t_values = self._geometry.local_intersect(local_ray)
        return IntersectionList(Intersection(t, self) for t in t_values)

    def normal_at(self, world_point: Point) -> Vector:
        """Compute the world-space unit normal at a point on the surface."""
        local_point = self.world_to_object(world_point)
        local_normal = self._geometry.local_normal(local_point)
        return self.normal_to_world(local_normal)

    def __repr__(self) -> str:
        return f"Entity(name={self.name!r}, geometry={self._geometry!r})"
