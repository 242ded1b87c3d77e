"""Flat 2D algebra: points, cardinal directions and quarter-turn rotations."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Point:
    x: int
    y: int

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def __neg__(self) -> "Point":
        return Point(-self.x, -self.y)

    def scale(self, k: int) -> "Point":
        return Point(self.x * k, self.y * k)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


class Rotation(Enum):
    """Quarter turns as seen on the screen; RIGHT is clockwise."""

    NONE = 0
    RIGHT = 1
    HALF = 2
    LEFT = 3

    @classmethod
    def from_char(cls, char: str) -> "Rotation":
        try:
            return _ROTATION_CHARS[char]
        except KeyError:
            raise ValueError(f"'{char}' is not a valid rotation character") from None

    def compose(self, other: "Rotation") -> "Rotation":
        return Rotation((self.value + other.value) % 4)

    def inverse(self) -> "Rotation":
        return Rotation((-self.value) % 4)

    @staticmethod
    def between(start: "Direction", end: "Direction") -> "Rotation":
        """Return the rotation taking ``start`` to ``end``."""
        for rotation in Rotation:
            if start.rotate(rotation) == end:
                return rotation
        raise ValueError(f"No rotation maps {start} to {end}")


_ROTATION_CHARS = {
    "L": Rotation.LEFT,
    "R": Rotation.RIGHT,
    "H": Rotation.HALF,
    "N": Rotation.NONE,
}


class Direction(Enum):
    # Values are the facing codes used by the password.
    RIGHT = 0
    DOWN = 1
    LEFT = 2
    UP = 3

    def as_vector(self) -> Point:
        return _DIRECTION_VECTORS[self]

    def as_int(self) -> int:
        return self.value

    def as_char(self) -> str:
        return _DIRECTION_CHARS[self]

    def inverse(self) -> "Direction":
        return _ROTATE_TABLE[(self, Rotation.HALF)]

    def rotate(self, rotation: Rotation) -> "Direction":
        return _ROTATE_TABLE[(self, rotation)]


# Reading order used wherever all four edges are visited.
DIRECTIONS = (Direction.UP, Direction.LEFT, Direction.DOWN, Direction.RIGHT)

_DIRECTION_VECTORS = {
    Direction.UP: Point(0, -1),
    Direction.DOWN: Point(0, 1),
    Direction.LEFT: Point(-1, 0),
    Direction.RIGHT: Point(1, 0),
}

_DIRECTION_CHARS = {
    Direction.RIGHT: ">",
    Direction.DOWN: "v",
    Direction.LEFT: "<",
    Direction.UP: "^",
}

_ROTATE_TABLE = {
    (Direction.UP, Rotation.LEFT): Direction.LEFT,
    (Direction.LEFT, Rotation.LEFT): Direction.DOWN,
    (Direction.DOWN, Rotation.LEFT): Direction.RIGHT,
    (Direction.RIGHT, Rotation.LEFT): Direction.UP,
    (Direction.UP, Rotation.RIGHT): Direction.RIGHT,
    (Direction.LEFT, Rotation.RIGHT): Direction.UP,
    (Direction.DOWN, Rotation.RIGHT): Direction.LEFT,
    (Direction.RIGHT, Rotation.RIGHT): Direction.DOWN,
    (Direction.UP, Rotation.HALF): Direction.DOWN,
    (Direction.LEFT, Rotation.HALF): Direction.RIGHT,
    (Direction.DOWN, Rotation.HALF): Direction.UP,
    (Direction.RIGHT, Rotation.HALF): Direction.LEFT,
    (Direction.UP, Rotation.NONE): Direction.UP,
    (Direction.LEFT, Rotation.NONE): Direction.LEFT,
    (Direction.DOWN, Rotation.NONE): Direction.DOWN,
    (Direction.RIGHT, Rotation.NONE): Direction.RIGHT,
}


def rotate_local(point: Point, rotation: Rotation, size: int) -> Point:
    """Rotate a 1-indexed face-local point about the centre of a ``size`` face."""
    if rotation is Rotation.NONE:
        return point
    if rotation is Rotation.LEFT:
        return Point(point.y, size + 1 - point.x)
    if rotation is Rotation.RIGHT:
        return Point(size + 1 - point.y, point.x)
    return Point(size + 1 - point.x, size + 1 - point.y)
