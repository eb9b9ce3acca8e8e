"""Scene module for entities and intersection records.

Components:
    material: Surface material owned by an entity
    entity: Entity (geometry + material + transform) and EntityConfig
    intersection: Intersection, IntersectionList, HitRecord and the
        ray/entity intersection entry points

Data flow for a query:
    world ray -> Entity.world_to_object_matrix() -> object-space ray
    -> Geometry.local_intersect() -> t values -> Intersection(t, entity)
    -> IntersectionList (sorted, hit derived on access)
"""

from .entity import Entity, EntityConfig
from .intersection import HitRecord, Intersection, IntersectionList, intersect, intersect_entities
from .material import Material

__all__ = [
    "Entity",
    "EntityConfig",
    "Material",
    "Intersection",
    "IntersectionList",
    "HitRecord",
    "intersect",
    "intersect_entities",
]
