"""Read a map and instruction string into a net, instructions and start marker."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .engine import Instruction, Marker
from .errors import ParseError
from .net import Net, Tile
from .space import Direction, Point, Rotation


@dataclass
class ParsedInput:
    net: Net
    instructions: list[Instruction]
    start: Marker


def parse_instructions(text: str) -> list[Instruction]:
    """Split ``10R5L5`` into ``[10, Rotation.RIGHT, 5, Rotation.LEFT, 5]``."""
    instructions: list[Instruction] = []
    digits = ""
    for char in text.strip():
        if char.isdigit():
            digits += char
            continue
        if char not in ("L", "R"):
            raise ParseError(f"Invalid instruction character '{char}'")
        if digits:
            instructions.append(int(digits))
            digits = ""
        instructions.append(Rotation.from_char(char))
    if digits:
        instructions.append(int(digits))
    return instructions


def parse_input(text: str, face_size: int) -> ParsedInput:
    lines = text.splitlines()
    try:
        split = next(i for i, line in enumerate(lines) if not line.strip())
    except StopIteration:
        raise ParseError("Missing blank line between the map and the instructions") from None

    map_lines = lines[:split]
    instruction_lines = [line for line in lines[split + 1 :] if line.strip()]
    if not map_lines:
        raise ParseError("Map is empty")
    if len(instruction_lines) != 1:
        raise ParseError(f"Expected one instruction line, found {len(instruction_lines)}")

    net = Net(face_size)
    start: Point | None = None
    for row, line in enumerate(map_lines, start=1):
        for col, char in enumerate(line.rstrip("\n"), start=1):
            if char == " ":
                continue
            tile = Tile.from_char(char)
            point = Point(col, row)
            net.add_tile(point, tile)
            if start is None and tile is Tile.CLEAR:
                start = point
    net.validate()

    if start is None:
        raise ParseError("Map has no clear tile to start from")

    return ParsedInput(
        net=net,
        instructions=parse_instructions(instruction_lines[0]),
        start=Marker(start, Direction.RIGHT),
    )


def read_input(path: str | Path, face_size: int) -> ParsedInput:
    with open(path, "r", encoding="utf-8") as f:
        return parse_input(f.read(), face_size)
