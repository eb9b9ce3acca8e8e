"""Core module.

This module contains the fundamental building blocks for space conversions:

Components:
    runtime: EPSILON and other process-wide constants, Taichi initialisation
    tuples: Homogeneous Point and Vector types
    matrix: 4x4 affine matrices and transformation builders
    ray: Ray data structure and coordinate-space transformation

Everything here runs in Python scope on numpy arrays; the per-primitive
intersection math lives in the geometry module as Taichi functions.
"""

from .matrix import (
    Matrix,
    identity,
    rotation_x,
    rotation_y,
    rotation_z,
    scaling,
    shearing,
    translation,
    view_transform,
)
from .ray import Ray, make_ray
from .runtime import EPSILON, MAX_ROOTS, MISS, almost_equal, init, is_initialised
from .tuples import Point, Vector, from_array

__all__ = [
    "EPSILON",
    "MISS",
    "MAX_ROOTS",
    "init",
    "is_initialised",
    "almost_equal",
    "Point",
    "Vector",
    "from_array",
    "Matrix",
    "identity",
    "translation",
    "scaling",
    "rotation_x",
    "rotation_y",
    "rotation_z",
    "shearing",
    "view_transform",
    "Ray",
    "make_ray",
]
