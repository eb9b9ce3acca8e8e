"""4x4 affine transformation matrices.

Matrix is an immutable wrapper around a numpy float64 (4, 4) array. The @
operator composes matrices and transforms points and vectors:

    >>> from src.raycore.core.matrix import scaling, translation
    >>> from src.raycore.core.tuples import Point, Vector
    >>> m = translation(5.0, 0.0, 0.0) @ scaling(2.0)
    >>> m @ Point(1.0, 1.0, 1.0)
    Point(7.0, 2.0, 2.0)
    >>> m @ Vector(1.0, 1.0, 1.0)
    Vector(2.0, 2.0, 2.0)

Composition reads right to left: in ``A @ B @ p`` the transform B is applied
to p first.
"""

from __future__ import annotations

import math

import numpy as np
import numpy.typing as npt

from src.raycore.core.runtime import EPSILON
from src.raycore.core.tuples import Point, Vector, from_array


class Matrix:
    """An immutable 4x4 matrix."""

    __slots__ = ("_data",)

    def __init__(self, rows: npt.ArrayLike) -> None:
        data = np.array(rows, dtype=np.float64)
        if data.shape != (4, 4):
            raise ValueError(f"Matrix must be 4x4, got shape {data.shape}")
        data.setflags(write=False)
        self._data = data

    @property
    def data(self) -> npt.NDArray[np.float64]:
        """The read-only (4, 4) array backing this matrix."""
        return self._data

    def __getitem__(self, index):
        return float(self._data[index])

    def __matmul__(self, other):
        if isinstance(other, Matrix):
            return Matrix(self._data @ other.data)
        if isinstance(other, Point):
            return from_array(self._data @ other.data)
        if isinstance(other, Vector):
            # Vectors stay vectors: w is forced back to 0
            return Vector(*(self._data @ other.data)[:3])
        return NotImplemented

    def transpose(self) -> Matrix:
        return Matrix(self._data.T)

    def determinant(self) -> float:
        return float(np.linalg.det(self._data))

    @property
    def is_invertible(self) -> bool:
        return abs(self.determinant()) > 0.0

    def inverse(self) -> Matrix:
        """Return the inverse matrix.

        Raises:
            ValueError: If the matrix is singular.
        """
        try:
            return Matrix(np.linalg.inv(self._data))
        except np.linalg.LinAlgError as e:
            raise ValueError(f"Matrix is not invertible: {e}") from e

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return bool(np.all(np.abs(self._data - other.data) < EPSILON))

    __hash__ = None

    def __repr__(self) -> str:
        rows = ", ".join(str(list(row)) for row in self._data.tolist())
        return f"Matrix([{rows}])"


# =============================================================================
# Transformation Builders
# =============================================================================


def identity() -> Matrix:
    return Matrix(np.identity(4))


def translation(x: float, y: float, z: float) -> Matrix:
    m = np.identity(4)
    m[0:3, 3] = (x, y, z)
    return Matrix(m)


def scaling(x: float, y: float | None = None, z: float | None = None) -> Matrix:
    """Build a scaling matrix.

    A single argument scales uniformly; otherwise each axis is given.
    """
    if y is None and z is None:
        y = z = x
    elif y is None or z is None:
        raise ValueError("scaling() takes either one factor or all three")
    return Matrix(np.diag([x, y, z, 1.0]))


def rotation_x(radians: float) -> Matrix:
    c, s = math.cos(radians), math.sin(radians)
    return Matrix(
        [
            [1.0, 0.0, 0.0, 0.0],
            [0.0, c, -s, 0.0],
            [0.0, s, c, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def rotation_y(radians: float) -> Matrix:
    c, s = math.cos(radians), math.sin(radians)
    return Matrix(
        [
            [c, 0.0, s, 0.0],
            [0.0, 1.0, 0.0, 0.0],
            [-s, 0.0, c, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def rotation_z(radians: float) -> Matrix:
    c, s = math.cos(radians), math.sin(radians)
    return Matrix(
        [
            [c, -s, 0.0, 0.0],
            [s, c, 0.0, 0.0],
            [0.0, 0.0, 1.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def shearing(xy: float, xz: float, yx: float, yz: float, zx: float, zy: float) -> Matrix:
    """Build a shearing matrix.

    Each argument moves one coordinate in proportion to another, e.g. ``xy``
    moves x in proportion to y.
    """
    return Matrix(
        [
            [1.0, xy, xz, 0.0],
            [yx, 1.0, yz, 0.0],
            [zx, zy, 1.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def view_transform(eye: Point, target: Point, up: Vector) -> Matrix:
    """Build the world-to-camera matrix for an eye looking at a target.

    Args:
        eye: Camera position.
        target: Point the camera looks at.
        up: Approximate up direction (need not be orthogonal or unit length).

    Returns:
        A matrix that maps world space into a frame with the eye at the
        origin looking down -z.
    """
    forward = (target - eye).normalize()
    left = forward.cross(up.normalize())
    true_up = left.cross(forward)
    orientation = Matrix(
        [
            [left.x, left.y, left.z, 0.0],
            [true_up.x, true_up.y, true_up.z, 0.0],
            [-forward.x, -forward.y, -forward.z, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )
    return orientation @ translation(-eye.x, -eye.y, -eye.z)
