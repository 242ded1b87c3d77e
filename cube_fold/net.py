"""Face and net storage.

Faces live in a single table owned by the net, keyed by their position in the
face grid. Glue slots refer to neighbouring faces by that key.
"""

from __future__ import annotations

from enum import Enum

import numpy as np

from .errors import ParseError, UngluedEdgeError
from .space import DIRECTIONS, Direction, Point, Rotation


class Tile(Enum):
    CLEAR = 0
    STONE = 1

    @classmethod
    def from_char(cls, char: str) -> "Tile":
        if char == ".":
            return cls.CLEAR
        if char == "#":
            return cls.STONE
        raise ParseError(f"'{char}' is not a valid tile character")

    def to_char(self) -> str:
        return "." if self is Tile.CLEAR else "#"


EdgeGlue = tuple[Point, Rotation]

_MISSING = -1


class Face:
    def __init__(self, size: int):
        self.size = size
        self.tiles = np.full((size, size), _MISSING, dtype=np.int8)  # indexed [row, col]
        self.glue: dict[Direction, EdgeGlue] = {}

    def set_tile(self, local: Point, tile: Tile) -> None:
        self.tiles[local.y - 1, local.x - 1] = tile.value

    def get_tile(self, local: Point) -> Tile | None:
        if not (1 <= local.x <= self.size and 1 <= local.y <= self.size):
            return None
        value = int(self.tiles[local.y - 1, local.x - 1])
        return None if value == _MISSING else Tile(value)

    def is_complete(self) -> bool:
        return not np.any(self.tiles == _MISSING)

    def get_glue(self, direction: Direction) -> EdgeGlue | None:
        return self.glue.get(direction)


class Net:
    """Flat layout of square faces plus the glue found when folding it."""

    def __init__(self, face_size: int):
        if face_size <= 0:
            raise ParseError(f"Face size must be positive, got {face_size}")
        self.face_size = face_size
        self.faces: dict[Point, Face] = {}
        self.sealed = False

    # Coordinates

    def face_key(self, point: Point) -> Point:
        return Point((point.x - 1) // self.face_size, (point.y - 1) // self.face_size)

    def local_point(self, point: Point) -> Point:
        return Point((point.x - 1) % self.face_size + 1, (point.y - 1) % self.face_size + 1)

    def global_point(self, face: Point, local: Point) -> Point:
        return face.scale(self.face_size) + local

    # Tiles

    def add_tile(self, point: Point, tile: Tile) -> None:
        self._check_not_sealed()
        key = self.face_key(point)
        face = self.faces.get(key)
        if face is None:
            face = Face(self.face_size)
            self.faces[key] = face
        face.set_tile(self.local_point(point), tile)

    def get_tile(self, point: Point) -> Tile | None:
        face = self.faces.get(self.face_key(point))
        if face is None:
            return None
        return face.get_tile(self.local_point(point))

    def has_face(self, face: Point) -> bool:
        return face in self.faces

    def face_keys(self) -> list[Point]:
        """Face keys in reading order (top row first)."""
        return sorted(self.faces, key=lambda p: (p.y, p.x))

    def flat_neighbours(self, face: Point) -> list[tuple[Point, Direction]]:
        neighbours = []
        for direction in DIRECTIONS:
            candidate = face + direction.as_vector()
            if self.has_face(candidate):
                neighbours.append((candidate, direction))
        return neighbours

    def validate(self) -> None:
        for key in self.face_keys():
            if not self.faces[key].is_complete():
                raise ParseError(
                    f"Face at {key} is not a complete {self.face_size}x{self.face_size} block; "
                    "map dimensions must be multiples of the face size"
                )

    def bounds(self) -> Point:
        """Largest global coordinate covered by any face."""
        max_x = max(key.x for key in self.faces) + 1
        max_y = max(key.y for key in self.faces) + 1
        return Point(max_x * self.face_size, max_y * self.face_size)

    # Glue

    def glue(self, face_a: Point, face_b: Point, direction: Direction, rotation: Rotation) -> None:
        self._check_not_sealed()
        self.faces[face_a].glue[direction] = (face_b, rotation)

    def bidirectional_glue(self, face_a: Point, face_b: Point, direction: Direction, rotation: Rotation) -> None:
        """Glue ``face_a``'s edge to ``face_b`` and the matching edge of ``face_b`` back.

        Leaving ``face_a`` facing ``direction`` arrives on ``face_b`` facing
        ``direction.rotate(rotation)``, so the shared edge of ``face_b`` is the
        opposite of that arrival direction.
        """
        self.glue(face_a, face_b, direction, rotation)
        self.glue(face_b, face_a, direction.rotate(rotation).inverse(), rotation.inverse())

    def get_glue(self, face: Point, direction: Direction) -> EdgeGlue:
        glue = self.faces[face].get_glue(direction)
        if glue is None:
            raise UngluedEdgeError(f"Face {face} has no glue on its {direction.name.lower()} edge")
        return glue

    def unglued_directions(self, face: Point) -> list[Direction]:
        slots = self.faces[face].glue
        return [direction for direction in DIRECTIONS if direction not in slots]

    def is_fully_glued(self, face: Point) -> bool:
        return not self.unglued_directions(face)

    def seal(self) -> None:
        self.sealed = True

    def _check_not_sealed(self) -> None:
        if self.sealed:
            raise RuntimeError("Net is sealed after gluing and can no longer be modified")
