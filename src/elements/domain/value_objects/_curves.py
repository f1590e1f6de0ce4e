"""Curve value objects: lines, arcs, polylines and polygons."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from ..constants import DEFAULT_ARC_DIVISIONS
from ..services import predicates
from ..validation import validated
from ._matrix import Transform
from ._plane import Plane
from ._vector import Vector3


@validated
@dataclass(frozen=True)
class Line:
    """A straight segment between two distinct points."""

    start: Vector3
    end: Vector3

    def length(self) -> float:
        return self.start.distance_to(self.end)

    def direction(self) -> Vector3:
        """Unit vector from start to end."""
        return (self.end - self.start).unit()

    def point_at(self, u: float) -> Vector3:
        """Point at normalized parameter ``u`` in [0, 1]."""
        return self.start + (self.end - self.start) * u

    def reversed(self) -> "Line":
        return Line(self.end, self.start)

    def points(self) -> list[Vector3]:
        return [self.start, self.end]

    def transformed(self, transform: Transform) -> "Line":
        return Line(transform.of_point(self.start), transform.of_point(self.end))


@validated
@dataclass(frozen=True)
class Arc:
    """A circular arc in the XY plane of its center.

    Angles are in degrees, measured counter-clockwise from +X.

    Attributes:
        center: Center of the arc.
        radius: Radius, strictly positive.
        start_angle: Angle of the start point in degrees.
        end_angle: Angle of the end point in degrees.
    """

    center: Vector3
    radius: float
    start_angle: float = 0.0
    end_angle: float = 90.0

    def point_at(self, u: float) -> Vector3:
        """Point at normalized parameter ``u`` in [0, 1]."""
        angle = math.radians(self.start_angle + (self.end_angle - self.start_angle) * u)
        return Vector3(
            self.center.x + self.radius * math.cos(angle),
            self.center.y + self.radius * math.sin(angle),
            self.center.z,
        )

    @property
    def start(self) -> Vector3:
        return self.point_at(0.0)

    @property
    def end(self) -> Vector3:
        return self.point_at(1.0)

    def length(self) -> float:
        return 2 * math.pi * self.radius * abs(self.end_angle - self.start_angle) / 360.0

    def points(self, divisions: int = DEFAULT_ARC_DIVISIONS) -> list[Vector3]:
        """Sample the arc with ``divisions`` chords per full turn (at least one)."""
        sweep = abs(self.end_angle - self.start_angle)
        count = max(1, math.ceil(divisions * sweep / 360.0))
        return [self.point_at(i / count) for i in range(count + 1)]

    def to_polyline(self, divisions: int = DEFAULT_ARC_DIVISIONS) -> "Polyline":
        return Polyline(tuple(self.points(divisions)))


@validated
@dataclass(frozen=True)
class Polyline:
    """An open, ordered chain of coplanar vertices.

    Consecutive vertices must be further apart than the minimum segment
    length.
    """

    vertices: Sequence[Vector3]

    def __post_init__(self) -> None:
        object.__setattr__(self, "vertices", tuple(self.vertices))

    @property
    def closed(self) -> bool:
        return False

    @property
    def start(self) -> Vector3:
        return self.vertices[0]

    @property
    def end(self) -> Vector3:
        return self.vertices[-1]

    def segments(self) -> list[Line]:
        return [
            Line(self.vertices[a], self.vertices[b])
            for a, b in predicates.segments(self.vertices, self.closed)
        ]

    def length(self) -> float:
        return sum(segment.length() for segment in self.segments())

    def point_at(self, u: float) -> Vector3:
        """Point at normalized arc-length parameter ``u`` in [0, 1]."""
        lines = self.segments()
        target = max(0.0, min(1.0, u)) * self.length()
        travelled = 0.0
        for line in lines:
            length = line.length()
            if travelled + length >= target:
                return line.point_at((target - travelled) / length)
            travelled += length
        return lines[-1].end

    def points(self) -> list[Vector3]:
        return list(self.vertices)

    def transformed(self, transform: Transform) -> "Polyline":
        return type(self)(tuple(transform.of_point(v) for v in self.vertices))


@validated
@dataclass(frozen=True)
class Polygon(Polyline):
    """A closed, non-self-intersecting planar loop.

    The closing segment from the last vertex back to the first is implicit;
    do not repeat the first vertex.
    """

    @property
    def closed(self) -> bool:
        return True

    def normal(self) -> Vector3:
        """Unit normal following the right-hand rule for the winding."""
        return Vector3(*predicates.polygon_normal(self.vertices))

    def plane(self) -> Plane:
        return Plane(self.vertices[0], self.normal())

    def area(self) -> float:
        """Unsigned area of the loop."""
        normal = predicates.polygon_normal(self.vertices)
        return abs(predicates.signed_area(self.vertices, normal))

    def is_clockwise(self, reference: Vector3 | None = None) -> bool:
        """True if the loop winds clockwise about ``reference`` (default +Z)."""
        reference_normal = None
        if reference is not None:
            reference_normal = predicates.to_array([reference])[0]
        return predicates.signed_area(self.vertices, reference_normal) < 0.0

    def reversed(self) -> "Polygon":
        return type(self)(tuple(reversed(self.vertices)))

    def centroid(self) -> Vector3:
        count = len(self.vertices)
        return Vector3(
            sum(v.x for v in self.vertices) / count,
            sum(v.y for v in self.vertices) / count,
            sum(v.z for v in self.vertices) / count,
        )

    @classmethod
    def rectangle(cls, width: float, height: float, origin: Vector3 | None = None) -> "Polygon":
        """Counter-clockwise axis-aligned rectangle centred on ``origin``."""
        center = origin if origin is not None else Vector3()
        half_w = width / 2
        half_h = height / 2
        return cls(
            (
                Vector3(center.x - half_w, center.y - half_h, center.z),
                Vector3(center.x + half_w, center.y - half_h, center.z),
                Vector3(center.x + half_w, center.y + half_h, center.z),
                Vector3(center.x - half_w, center.y + half_h, center.z),
            )
        )
