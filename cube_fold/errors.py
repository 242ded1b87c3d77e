"""Exceptions raised while reading, folding and walking a cube net."""

from __future__ import annotations


class ParseError(ValueError):
    """Raised when the map or the instruction string is malformed."""


class InvalidNetError(ValueError):
    """Raised when the faces of a map do not fold into a cube."""


class UngluedEdgeError(RuntimeError):
    """Raised when a face edge has no glue after gluing has completed.

    This is an internal invariant violation, never a property of the input.
    """
