"""Axis-aligned 3D directions and the rigid frames attached to folded faces.

The canonical frame is a face lying in the screen plane and facing the viewer:
normal +Z, right +X, up +Y. Every other face frame is reached from it by a
chain of quarter turns around axis-aligned vectors.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import numpy as np

from .space import Direction


class Direction3D(Enum):
    X = (1, 0, 0)
    NEG_X = (-1, 0, 0)
    Y = (0, 1, 0)
    NEG_Y = (0, -1, 0)
    Z = (0, 0, 1)
    NEG_Z = (0, 0, -1)

    @property
    def vector(self) -> np.ndarray:
        return np.array(self.value, dtype=np.int8)

    @classmethod
    def from_vector(cls, vec: np.ndarray) -> "Direction3D":
        return cls(tuple(int(v) for v in vec))

    def __neg__(self) -> "Direction3D":
        return _NEGATION[self]

    def __mul__(self, other: "Direction3D") -> "Direction3D":
        """Right-handed cross product; defined only for orthogonal pairs."""
        try:
            return _CROSS_TABLE[(self, other)]
        except KeyError:
            raise ValueError(f"Cross product of parallel axes {self.name} and {other.name} is undefined") from None

    def is_parallel(self, other: "Direction3D") -> bool:
        return other is self or other is -self

    def rotate_around(self, axis: "Direction3D") -> "Direction3D":
        """Quarter turn around ``axis``; vectors along the axis are fixed."""
        if self.is_parallel(axis):
            return self
        return axis * self


def _build_tables() -> tuple[dict, dict]:
    negation: dict[Direction3D, Direction3D] = {}
    cross: dict[tuple[Direction3D, Direction3D], Direction3D] = {}
    for a in Direction3D:
        negation[a] = Direction3D.from_vector(-a.vector)
        for b in Direction3D:
            product = np.cross(a.vector, b.vector)
            if not product.any():
                continue
            cross[(a, b)] = Direction3D.from_vector(product)

    if len(cross) != 24:
        raise RuntimeError(f"Expected 24 orthogonal axis pairs, got {len(cross)}")
    return negation, cross


_NEGATION, _CROSS_TABLE = _build_tables()

# Axis the canonical face turns around when folded across its edge in a direction.
ROTATION_AXIS_REL_Z = {
    Direction.UP: Direction3D.NEG_X,
    Direction.DOWN: Direction3D.X,
    Direction.RIGHT: Direction3D.Y,
    Direction.LEFT: Direction3D.NEG_Y,
}

# In-plane tangent of the canonical face pointing towards its edge in a direction.
FACE_DIRECTION_REL_Z = {
    Direction.UP: Direction3D.Y,
    Direction.DOWN: Direction3D.NEG_Y,
    Direction.RIGHT: Direction3D.X,
    Direction.LEFT: Direction3D.NEG_X,
}


@dataclass(frozen=True)
class Orientation:
    normal: Direction3D = Direction3D.Z
    left: Direction3D = Direction3D.NEG_X
    right: Direction3D = Direction3D.X
    up: Direction3D = Direction3D.Y
    down: Direction3D = Direction3D.NEG_Y

    def tangent(self, direction: Direction) -> Direction3D:
        if direction is Direction.UP:
            return self.up
        if direction is Direction.DOWN:
            return self.down
        if direction is Direction.LEFT:
            return self.left
        return self.right

    def rotation_axis_for(self, direction: Direction) -> Direction3D:
        return self.normal * self.tangent(direction)

    def rotate(self, axis: Direction3D) -> "Orientation":
        return Orientation(
            normal=self.normal.rotate_around(axis),
            left=self.left.rotate_around(axis),
            right=self.right.rotate_around(axis),
            up=self.up.rotate_around(axis),
            down=self.down.rotate_around(axis),
        )

    def fields(self) -> tuple[Direction3D, ...]:
        return (self.normal, self.left, self.right, self.up, self.down)

    def is_rigid(self) -> bool:
        """True when the fields form a right-handed frame (right x up == normal)."""
        return (
            self.left is -self.right
            and self.down is -self.up
            and not self.right.is_parallel(self.up)
            and self.right * self.up is self.normal
        )


CANONICAL = Orientation()
