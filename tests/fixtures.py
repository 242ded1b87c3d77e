"""Shared sample inputs for the test suite."""

from __future__ import annotations

SAMPLE_INPUT = "\n".join(
    [
        "        ...#",
        "        .#..",
        "        #...",
        "        ....",
        "...#.......#",
        "........#...",
        "..#....#....",
        "..........#.",
        "        ...#....",
        "        .....#..",
        "        .#......",
        "        ......#.",
        "",
        "10R5L5R10L4R5L5",
        "",
    ]
)

SAMPLE_FACE_SIZE = 4
SAMPLE_PASSWORD = 5031

# Face layouts; "X" marks a face in the face grid.
SAMPLE_LAYOUT = ["  X ", "XXX ", "  XX"]
CROSS_LAYOUT = [" X ", "XXX", " X ", " X "]
STAIRS_LAYOUT = ["XX  ", " XX ", "  XX"]
LINE_LAYOUT = ["X   ", "XXXX", "   X"]
FIVE_FACES = [" X ", "XXX", " X "]
SEVEN_FACES = [" X  ", "XXXX", " X  ", " X  "]
BLOCK_LAYOUT = ["XXX", "XXX"]
DISCONNECTED = ["XX  ", "   X", "XXX "]


def layout_text(layout: list[str], size: int, instructions: str = "1", stones: set[tuple[int, int]] = frozenset()) -> str:
    """Expand a face layout into a map of clear tiles followed by instructions.

    ``stones`` holds 1-indexed global (x, y) points to mark as stone.
    """
    rows = []
    for face_row in layout:
        for _ in range(size):
            rows.append("".join(("." if c == "X" else " ") * size for c in face_row).rstrip())
    if stones:
        grid = [list(row) for row in rows]
        for x, y in stones:
            grid[y - 1][x - 1] = "#"
        rows = ["".join(row) for row in grid]
    return "\n".join(rows + ["", instructions, ""])
