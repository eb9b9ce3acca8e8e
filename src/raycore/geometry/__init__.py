"""Geometry module for shape primitives.

This module provides the primitives an entity can own:

Components:
    base: Geometry and BoundedGeometry interfaces, Roots vector type and the
        shared cap test
    sphere: Unit sphere
    plane: Infinite xz plane
    cube: Axis-aligned [-1, 1] cube
    cylinder: Unit-radius cylinder, open, truncated or capped
    cone: Double-napped cone, open, truncated or capped

Intersection routines are implemented as Taichi functions (@ti.func) working
in object space, so they can be composed into larger kernels. Each primitive
class wraps its routine in a small kernel for single-ray queries:

    t_values = geometry.local_intersect(object_space_ray)
    normal = geometry.local_normal(object_space_point)
"""

from .base import BoundedGeometry, Geometry, Roots, cap_root, empty_roots, read_roots, roots_field, vec3
from .cone import Cone, intersect_cone
from .cube import Cube, intersect_cube
from .cylinder import Cylinder, intersect_cylinder
from .plane import Plane, intersect_plane
from .sphere import Sphere, intersect_sphere

__all__ = [
    "Geometry",
    "BoundedGeometry",
    "Roots",
    "vec3",
    "cap_root",
    "empty_roots",
    "read_roots",
    "roots_field",
    "Sphere",
    "intersect_sphere",
    "Plane",
    "intersect_plane",
    "Cube",
    "intersect_cube",
    "Cylinder",
    "intersect_cylinder",
    "Cone",
    "intersect_cone",
]
