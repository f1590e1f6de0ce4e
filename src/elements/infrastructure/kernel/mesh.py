"""Polygon-face boundary meshes produced by the mesh kernel."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

# A face is its outer loop followed by zero or more hole loops, each a tuple
# of vertex indices. Outer loops wind counter-clockwise seen from outside,
# holes wind the other way.
Face = tuple[tuple[int, ...], ...]


def _loop_volume(coords: np.ndarray) -> float:
    """Signed volume of the cone from the origin to a planar loop (times 6)."""
    first = coords[0]
    total = 0.0
    for second, third in zip(coords[1:-1], coords[2:]):
        total += float(np.dot(first, np.cross(second, third)))
    return total


@dataclass(frozen=True)
class BooleanMesh:
    """Boolean-ready polygon soup: one entry per face, holes included.

    Attributes:
        polygons: For each face, the outer loop coordinates followed by
            the hole loop coordinates.
    """

    polygons: tuple[tuple[np.ndarray, ...], ...] = field(default=())

    @property
    def polygon_count(self) -> int:
        return len(self.polygons)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BooleanMesh):
            return NotImplemented
        if len(self.polygons) != len(other.polygons):
            return False
        for ours, theirs in zip(self.polygons, other.polygons):
            if len(ours) != len(theirs):
                return False
            if not all(np.array_equal(a, b) for a, b in zip(ours, theirs)):
                return False
        return True

    __hash__ = None  # type: ignore[assignment]


class MeshSolid:
    """A closed (or zero-thickness) boundary made of planar polygon faces.

    Attributes:
        vertices: (n, 3) array of vertex coordinates.
        faces: Faces as index loops into ``vertices``.
    """

    def __init__(self, vertices: np.ndarray, faces: list[Face]) -> None:
        self.vertices = np.asarray(vertices, dtype=float).reshape(-1, 3)
        self.faces = list(faces)

    @property
    def face_count(self) -> int:
        return len(self.faces)

    @property
    def vertex_count(self) -> int:
        return len(self.vertices)

    def volume(self) -> float:
        """Signed enclosed volume by the divergence theorem.

        Positive for outward-facing faces, negative for a flipped solid and
        zero for a lamina.
        """
        total = 0.0
        for face in self.faces:
            for loop in face:
                if len(loop) >= 3:
                    total += _loop_volume(self.vertices[list(loop)])
        return total / 6.0

    def bounds(self) -> tuple[np.ndarray, np.ndarray]:
        """Minimum and maximum corners of the axis-aligned bounds."""
        if len(self.vertices) == 0:
            return np.zeros(3), np.zeros(3)
        return self.vertices.min(axis=0), self.vertices.max(axis=0)

    def to_boolean_representation(self) -> BooleanMesh:
        return BooleanMesh(
            tuple(
                tuple(self.vertices[list(loop)] for loop in face)
                for face in self.faces
            )
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MeshSolid):
            return NotImplemented
        return self.faces == other.faces and np.array_equal(self.vertices, other.vertices)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"MeshSolid(vertices={self.vertex_count}, faces={self.face_count})"
