"""Deterministic polygon-face geometry kernel.

Builds boundary meshes for extrusions, sweeps and laminae directly from
profile loops. Faces keep their holes as inner loops, so no triangulation
is performed, and there is no boolean evaluation: voids are carried in the
boolean-ready representation for a downstream consumer.
"""

from __future__ import annotations

import logging
from typing import Sequence

import numpy as np

from elements.domain.constants import DEFAULT_ARC_DIVISIONS, EPSILON
from elements.domain.exceptions import GeometryGenerationError
from elements.domain.services import predicates
from elements.domain.value_objects import (
    Arc,
    Line,
    Polygon,
    Polyline,
    Profile,
    Vector3,
)

from .mesh import Face, MeshSolid

logger = logging.getLogger(__name__)


def _profile_loops(profile: Profile, reference: np.ndarray) -> list[np.ndarray]:
    """Perimeter and void coordinates, wound about ``reference``.

    The perimeter winds counter-clockwise about ``reference`` and every
    void winds the other way.
    """
    perimeter = profile.perimeter.vertices
    outer = predicates.to_array(perimeter)
    if predicates.signed_area(perimeter, reference) < 0.0:
        outer = outer[::-1]
    loops = [outer]
    for void in profile.voids or []:
        inner = predicates.to_array(void.vertices)
        if predicates.signed_area(void.vertices, reference) > 0.0:
            inner = inner[::-1]
        loops.append(inner)
    return loops


def _offsets(sizes: list[int]) -> list[int]:
    offsets = [0]
    for size in sizes[:-1]:
        offsets.append(offsets[-1] + size)
    return offsets


def _side_faces(offsets: list[int], sizes: list[int], start: int, end: int) -> list[Face]:
    """Quads joining a section whose vertices begin at ``start`` to one at ``end``."""
    faces: list[Face] = []
    for offset, size in zip(offsets, sizes):
        for i in range(size):
            j = (i + 1) % size
            faces.append(
                ((start + offset + i, start + offset + j, end + offset + j, end + offset + i),)
            )
    return faces


def _cap(offsets: list[int], sizes: list[int], base: int, reverse: bool) -> Face:
    loops = []
    for offset, size in zip(offsets, sizes):
        loop = tuple(base + offset + i for i in range(size))
        loops.append(tuple(reversed(loop)) if reverse else loop)
    return tuple(loops)


def _flip(faces: list[Face]) -> list[Face]:
    return [tuple(tuple(reversed(loop)) for loop in face) for face in faces]


def _unit(vector: np.ndarray) -> np.ndarray:
    return vector / np.linalg.norm(vector)


class MeshKernel:
    """Geometry kernel producing ``MeshSolid`` boundaries.

    Args:
        arc_divisions: Chords per full turn used to sample arcs for sweeps.
    """

    def __init__(self, arc_divisions: int = DEFAULT_ARC_DIVISIONS) -> None:
        self.arc_divisions = arc_divisions

    def create_extrude(
        self,
        profile: Profile,
        height: float,
        direction: Vector3,
        flipped: bool,
    ) -> MeshSolid:
        """Extrude every loop of the profile by ``height`` along ``direction``.

        A zero height gives a zero-volume solid made of two coincident caps.

        Raises:
            GeometryGenerationError: If the height is negative or the
                direction lies in the plane of the profile.
        """
        if height < 0.0:
            raise GeometryGenerationError(
                f"The extrusion height must not be negative, got {height}."
            )
        if direction.length() == 0.0:
            raise GeometryGenerationError("The extrusion direction has zero length.")

        unit = np.array(direction.unit().to_tuple())
        normal = predicates.polygon_normal(profile.perimeter.vertices)
        if abs(float(normal @ unit)) < EPSILON:
            raise GeometryGenerationError(
                f"The extrusion direction ({direction}) lies in the plane of the profile."
            )

        loops = _profile_loops(profile, unit)
        sizes = [len(loop) for loop in loops]
        offsets = _offsets(sizes)
        bottom = np.vstack(loops)
        if height == 0.0:
            vertices = bottom
            faces = [_cap(offsets, sizes, 0, reverse=True), _cap(offsets, sizes, 0, reverse=False)]
        else:
            count = len(bottom)
            vertices = np.vstack((bottom, bottom + unit * height))
            faces = [
                _cap(offsets, sizes, 0, reverse=True),
                _cap(offsets, sizes, count, reverse=False),
            ]
            faces.extend(_side_faces(offsets, sizes, 0, count))
        if flipped:
            faces = _flip(faces)

        logger.debug(f"Extruded {len(loops)} loop(s) into {len(faces)} faces")
        return MeshSolid(vertices, faces)

    def create_sweep_along_curve(
        self,
        profile: Profile,
        curve: Line | Arc | Polyline,
        start_setback: float,
        end_setback: float,
    ) -> MeshSolid:
        """Sweep an XY profile along a curve with mitred joints.

        The profile's Z axis follows the curve tangent. At the start of the
        path its Y axis points as close to world +Z as the tangent allows.
        A closed polygon without setbacks produces a ring with no end caps.

        Raises:
            GeometryGenerationError: If a setback is negative, the setbacks
                consume the whole curve, the path doubles back on itself, or
                the sections cannot be placed with finite coordinates.
        """
        if start_setback < 0.0 or end_setback < 0.0:
            raise GeometryGenerationError(
                f"Sweep setbacks must not be negative, got {start_setback} and {end_setback}."
            )

        path = self._sample(curve)
        closed = isinstance(curve, Polygon) and start_setback == 0.0 and end_setback == 0.0
        if isinstance(curve, Polygon) and not closed:
            path = np.vstack((path, path[:1]))
        if not closed:
            path = self._trim(path, start_setback, end_setback)

        directions = [_unit(b - a) for a, b in zip(path[:-1], path[1:])]
        if closed:
            directions.append(_unit(path[0] - path[-1]))

        loops = _profile_loops(profile, np.array([0.0, 0.0, 1.0]))
        sizes = [len(loop) for loop in loops]
        offsets = _offsets(sizes)
        local = np.vstack(loops)

        frame = self._frame(directions)
        first = path[0] + local[:, :1] * frame[0] + local[:, 1:2] * frame[1]

        sections = []
        if closed:
            first = self._project(first, directions[0], path[0], directions[-1] + directions[0])
        sections.append(first)
        for index in range(1, len(path)):
            incoming = directions[index - 1]
            if closed or index < len(path) - 1:
                miter = incoming + directions[index % len(directions)]
            else:
                miter = incoming
            sections.append(self._project(sections[-1], incoming, path[index], miter))

        count = len(local)
        faces: list[Face] = []
        for index in range(len(sections) - 1):
            faces.extend(_side_faces(offsets, sizes, index * count, (index + 1) * count))
        if closed:
            faces.extend(_side_faces(offsets, sizes, (len(sections) - 1) * count, 0))
        else:
            faces.append(_cap(offsets, sizes, 0, reverse=True))
            faces.append(_cap(offsets, sizes, (len(sections) - 1) * count, reverse=False))

        vertices = np.vstack(sections)
        if not np.isfinite(vertices).all():
            raise GeometryGenerationError("The sweep produced non-finite vertex coordinates.")

        logger.debug(f"Swept {len(loops)} loop(s) through {len(sections)} sections")
        return MeshSolid(vertices, faces)

    def create_lamina(self, perimeter: Polygon) -> MeshSolid:
        """A front and a back face sharing the perimeter's vertices."""
        vertices = predicates.to_array(perimeter.vertices)
        loop = tuple(range(len(vertices)))
        return MeshSolid(vertices, [(loop,), (tuple(reversed(loop)),)])

    def _sample(self, curve: Line | Arc | Polyline) -> np.ndarray:
        if isinstance(curve, Arc):
            points: Sequence[Vector3] = curve.points(self.arc_divisions)
        else:
            points = curve.points()
        return predicates.to_array(points)

    @staticmethod
    def _trim(path: np.ndarray, start_setback: float, end_setback: float) -> np.ndarray:
        lengths = np.linalg.norm(np.diff(path, axis=0), axis=1)
        total = float(lengths.sum())
        if start_setback + end_setback >= total - EPSILON:
            raise GeometryGenerationError(
                f"The setbacks ({start_setback} + {end_setback}) consume the whole "
                f"curve of length {total:.4f}."
            )
        stations = np.concatenate(([0.0], np.cumsum(lengths)))
        start = start_setback
        end = total - end_setback

        def point_at(distance: float) -> np.ndarray:
            index = int(np.searchsorted(stations, distance, side="right")) - 1
            index = min(max(index, 0), len(lengths) - 1)
            u = (distance - stations[index]) / lengths[index]
            return path[index] + (path[index + 1] - path[index]) * u

        inner = [p for p, s in zip(path, stations) if start + EPSILON < s < end - EPSILON]
        return np.vstack([point_at(start), *inner, point_at(end)])

    @staticmethod
    def _frame(directions: list[np.ndarray]) -> tuple[np.ndarray, np.ndarray]:
        """Profile X and Y axes in world space for the first path segment.

        Later sections are carried along the path by projection, so only the
        first tangent picks the frame: world +Z is up unless that tangent is
        vertical, then +X.
        """
        tangent = directions[0]
        up = np.array([0.0, 0.0, 1.0])
        if np.linalg.norm(np.cross(up, tangent)) < EPSILON:
            up = np.array([1.0, 0.0, 0.0])
        x_axis = _unit(np.cross(up, tangent))
        y_axis = np.cross(tangent, x_axis)
        return x_axis, y_axis

    @staticmethod
    def _project(
        section: np.ndarray,
        direction: np.ndarray,
        origin: np.ndarray,
        normal: np.ndarray,
    ) -> np.ndarray:
        """Slide a section along ``direction`` onto the plane at ``origin``."""
        if np.linalg.norm(normal) < EPSILON:
            raise GeometryGenerationError("The sweep path doubles back on itself.")
        normal = _unit(normal)
        denominator = float(direction @ normal)
        if abs(denominator) < EPSILON:
            raise GeometryGenerationError("The sweep path doubles back on itself.")
        distances = ((origin - section) @ normal) / denominator
        return section + distances[:, None] * direction
