"""Marker traversal over the surface of a folded net."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Union

from .net import Net, Tile
from .space import Direction, Point, Rotation, rotate_local

Instruction = Union[int, Rotation]


@dataclass
class Marker:
    position: Point
    facing: Direction

    def rotate_in_place(self, rotation: Rotation) -> None:
        self.facing = self.facing.rotate(rotation)

    def copy(self) -> "Marker":
        return Marker(self.position, self.facing)

    def __str__(self) -> str:
        return f"{self.position}{self.facing.as_char()}"


def password(marker: Marker) -> int:
    return 1000 * marker.position.y + 4 * marker.position.x + marker.facing.as_int()


def _entry_point(local: Point, leaving: Direction, size: int) -> Point:
    """Where a marker leaving an edge lands on an unrotated neighbour."""
    if leaving is Direction.RIGHT:
        return Point(1, local.y)
    if leaving is Direction.LEFT:
        return Point(size, local.y)
    if leaving is Direction.UP:
        return Point(local.x, size)
    return Point(local.x, 1)


class CubeWalker:
    """Walks a single marker over a glued net."""

    def __init__(self, net: Net, marker: Marker, record_trail: bool = False):
        self.net = net
        self.marker = marker
        self.record_trail = record_trail
        self.trail: list[Marker] = [marker.copy()] if record_trail else []

    def _record(self) -> None:
        if self.record_trail:
            self.trail.append(self.marker.copy())

    def rotate_in_place(self, rotation: Rotation) -> None:
        self.marker.rotate_in_place(rotation)
        self._record()

    def _wrap(self) -> tuple[Point, Direction]:
        net = self.net
        position = self.marker.position
        facing = self.marker.facing
        neighbour, rotation = net.get_glue(net.face_key(position), facing)
        entry = _entry_point(net.local_point(position), facing, net.face_size)
        entry = rotate_local(entry, rotation, net.face_size)
        return net.global_point(neighbour, entry), facing.rotate(rotation)

    def _next(self) -> tuple[Point, Direction]:
        position = self.marker.position
        facing = self.marker.facing
        candidate = position + facing.as_vector()
        if self.net.face_key(candidate) == self.net.face_key(position):
            return candidate, facing
        return self._wrap()

    def step(self, distance: int) -> int:
        """Move up to ``distance`` tiles forward; return how many were taken."""
        for taken in range(distance):
            position, facing = self._next()
            if self.net.get_tile(position) is not Tile.CLEAR:
                return taken
            self.marker.position = position
            self.marker.facing = facing
            self._record()
        return distance

    def apply(self, instruction: Instruction) -> None:
        if isinstance(instruction, Rotation):
            self.rotate_in_place(instruction)
        else:
            self.step(instruction)

    def run(self, instructions: Iterable[Instruction]) -> Marker:
        for instruction in instructions:
            self.apply(instruction)
        return self.marker

    def password(self) -> int:
        return password(self.marker)
