"""Cube-net folding and surface traversal package."""

from .engine import CubeWalker, Marker, password
from .errors import InvalidNetError, ParseError, UngluedEdgeError
from .folding import fold_net, propagate_orientations, resolve_glue
from .net import Net, Tile
from .reader import parse_input, read_input

__all__ = [
    "CubeWalker",
    "InvalidNetError",
    "Marker",
    "Net",
    "ParseError",
    "Tile",
    "UngluedEdgeError",
    "fold_net",
    "parse_input",
    "password",
    "propagate_orientations",
    "read_input",
    "resolve_glue",
]
