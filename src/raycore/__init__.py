"""Geometric core of a Taichi-based ray tracer.

This package answers two questions for a renderer:
- Where does a world-space ray strike an entity with an arbitrary affine transform?
- What is the outward surface normal at a struck point?

Subpackages:
    core: Runtime constants, homogeneous points/vectors, 4x4 matrices and rays
    geometry: Primitive shapes (sphere, plane, cube, cylinder, cone) and their
        object-space intersection routines
    scene: Entities, materials and intersection records
"""

__version__ = "0.1.0"
