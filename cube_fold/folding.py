"""Fold a flat net into a cube and glue every face edge.

Folding only uses the flat adjacency of the net. Starting from a root face in
the canonical frame, a breadth-first walk turns each neighbour's frame a
quarter turn around the seam it shares with its parent. Once each face has a
frame, the outward normals identify which face sits across every edge, and
replaying the recorded turns tells how the two coordinate systems line up.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field

from .errors import InvalidNetError, UngluedEdgeError
from .net import Net
from .space import DIRECTIONS, Direction, Point, Rotation
from .space3d import CANONICAL, FACE_DIRECTION_REL_Z, Direction3D, Orientation

N_CUBE_FACES = 6


@dataclass
class FoldResult:
    root: Point
    orientations: dict[Point, Orientation] = field(default_factory=dict)
    normal_to_face: dict[Direction3D, Point] = field(default_factory=dict)
    previous_hop: dict[Point, tuple[Point, Direction3D]] = field(default_factory=dict)

    def normal_of(self, face: Point) -> Direction3D:
        return self.orientations[face].normal

    def axes_to(self, face: Point) -> list[Direction3D]:
        """Rotation axes applied on the way from the root to ``face``, in order."""
        axes: list[Direction3D] = []
        current = face
        while current != self.root:
            parent, axis = self.previous_hop[current]
            axes.append(axis)
            current = parent
        axes.reverse()
        return axes

    def replay(self, face: Point, vector: Direction3D) -> Direction3D:
        """Carry a canonical-frame vector through the turns that reached ``face``."""
        for axis in self.axes_to(face):
            vector = vector.rotate_around(axis)
        return vector


def propagate_orientations(net: Net, root: Point | None = None) -> FoldResult:
    keys = net.face_keys()
    if len(keys) != N_CUBE_FACES:
        raise InvalidNetError(f"A cube net needs exactly {N_CUBE_FACES} faces, found {len(keys)}")
    if root is None:
        root = keys[0]
    elif not net.has_face(root):
        raise InvalidNetError(f"Root {root} is not a face of the net")

    result = FoldResult(root=root)
    result.orientations[root] = CANONICAL
    result.normal_to_face[CANONICAL.normal] = root

    queue: deque[Point] = deque([root])
    while queue:
        current = queue.popleft()
        orientation = result.orientations[current]
        for neighbour, direction in net.flat_neighbours(current):
            if neighbour in result.orientations:
                continue
            axis = orientation.rotation_axis_for(direction)
            folded = orientation.rotate(axis)
            if folded.normal in result.normal_to_face:
                clash = result.normal_to_face[folded.normal]
                raise InvalidNetError(
                    f"Faces {clash} and {neighbour} both fold onto the {folded.normal.name} side of the cube"
                )
            result.orientations[neighbour] = folded
            result.normal_to_face[folded.normal] = neighbour
            result.previous_hop[neighbour] = (current, axis)
            queue.append(neighbour)

    if len(result.orientations) != N_CUBE_FACES:
        raise InvalidNetError(
            f"Only {len(result.orientations)} of {N_CUBE_FACES} faces are connected to face {root}"
        )
    return result


def _seam_direction(fold: FoldResult, face: Point, towards: Direction3D) -> Direction:
    """Direction on ``face`` whose edge lies on the ``towards`` side of the cube."""
    for direction in DIRECTIONS:
        if fold.replay(face, FACE_DIRECTION_REL_Z[direction]) is towards:
            return direction
    raise InvalidNetError(f"Face {face} has no edge towards {towards.name}")


def resolve_glue(net: Net, fold: FoldResult) -> None:
    for face in net.face_keys():
        if net.is_fully_glued(face):
            continue
        orientation = fold.orientations[face]
        for direction in net.unglued_directions(face):
            target = fold.normal_to_face[orientation.tangent(direction)]
            target_edge = _seam_direction(fold, target, orientation.normal)
            rotation = Rotation.between(direction, target_edge.inverse())
            net.bidirectional_glue(face, target, direction, rotation)


def fold_net(net: Net, root: Point | None = None) -> FoldResult:
    """Fold ``net`` into a cube, glue every edge and seal the net."""
    fold = propagate_orientations(net, root)
    resolve_glue(net, fold)
    for face in net.face_keys():
        if not net.is_fully_glued(face):
            missing = ", ".join(d.name.lower() for d in net.unglued_directions(face))
            raise UngluedEdgeError(f"Face {face} is still missing glue on: {missing}")
    net.seal()
    return fold
