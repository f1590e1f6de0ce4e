"""Axis-aligned bounding box value object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from ..validation import validated
from ._vector import Vector3


@validated
@dataclass(frozen=True)
class BBox3:
    """Axis-aligned box between ``min`` and ``max`` corners.

    The box must have extent along X and along Y.
    """

    min: Vector3
    max: Vector3

    @classmethod
    def from_points(cls, points: Iterable[Vector3]) -> "BBox3":
        """Smallest box containing every point."""
        points = list(points)
        return cls(
            Vector3(
                min(p.x for p in points),
                min(p.y for p in points),
                min(p.z for p in points),
            ),
            Vector3(
                max(p.x for p in points),
                max(p.y for p in points),
                max(p.z for p in points),
            ),
        )

    def center(self) -> Vector3:
        return self.min.average(self.max)

    def size(self) -> Vector3:
        return self.max - self.min

    def contains(self, point: Vector3) -> bool:
        return (
            self.min.x <= point.x <= self.max.x
            and self.min.y <= point.y <= self.max.y
            and self.min.z <= point.z <= self.max.z
        )
