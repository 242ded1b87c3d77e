"""Debug views of a net and a walked trail. Never called from inside a walk."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

import matplotlib.pyplot as plt
import numpy as np

from .engine import Marker
from .net import Net, Tile
from .space import Point


def render_text(net: Net, marker: Marker | None = None, trail: Sequence[Marker] = ()) -> str:
    """Draw the map, overlaying trail markers and then the current marker."""
    bounds = net.bounds()
    overlay: dict[Point, str] = {m.position: m.facing.as_char() for m in trail}
    if marker is not None:
        overlay[marker.position] = marker.facing.as_char()

    rows = []
    for y in range(1, bounds.y + 1):
        chars = []
        for x in range(1, bounds.x + 1):
            point = Point(x, y)
            if point in overlay:
                chars.append(overlay[point])
                continue
            tile = net.get_tile(point)
            chars.append(" " if tile is None else tile.to_char())
        rows.append("".join(chars).rstrip())
    return "\n".join(rows)


def write_trail(trail: Sequence[Marker], path: str | Path) -> Path:
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    body = "".join(f"{i}: {m.position}, {m.facing.as_char()}\n" for i, m in enumerate(trail))
    out.write_text(body, encoding="utf-8")
    return out


def tile_image(net: Net) -> np.ndarray:
    """Map as an image array: 0 off the net, 1 clear, 2 stone."""
    bounds = net.bounds()
    image = np.zeros((bounds.y, bounds.x), dtype=np.int8)
    n = net.face_size
    for key, face in net.faces.items():
        block = np.where(face.tiles == Tile.STONE.value, 2, 1)
        image[key.y * n : (key.y + 1) * n, key.x * n : (key.x + 1) * n] = block
    return image


def plot_trail(net: Net, trail: Sequence[Marker], output: str | Path) -> Path:
    image = tile_image(net)
    xs = np.array([m.position.x - 1 for m in trail], dtype=np.int64)
    ys = np.array([m.position.y - 1 for m in trail], dtype=np.int64)

    fig, ax = plt.subplots(figsize=(8, 8 * image.shape[0] / max(image.shape[1], 1)))
    ax.imshow(image, cmap="Greys", vmin=0, vmax=2, interpolation="nearest")
    if len(trail) > 0:
        ax.plot(xs, ys, ".", color="tab:red", markersize=3)
        ax.plot(xs[-1], ys[-1], "o", color="tab:blue", markersize=6)
    ax.set_title("Walked trail")
    ax.set_xticks([])
    ax.set_yticks([])
    fig.tight_layout()

    out = Path(output)
    out.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(out, dpi=150)
    plt.close(fig)
    return out
