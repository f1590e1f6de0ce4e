"""Plane value object."""

from __future__ import annotations

from dataclasses import dataclass

from ..constants import EPSILON
from ..validation import validated
from ._vector import ORIGIN, Z_AXIS, Vector3


@validated
@dataclass(frozen=True)
class Plane:
    """An infinite plane through ``origin`` with a non-zero ``normal``."""

    origin: Vector3 = ORIGIN
    normal: Vector3 = Z_AXIS

    def signed_distance_to(self, point: Vector3) -> float:
        """Distance from the plane to a point, positive on the normal side."""
        return self.normal.unit().dot(point - self.origin)

    def project(self, point: Vector3) -> Vector3:
        """Project a point onto the plane along its normal."""
        unit_normal = self.normal.unit()
        return point - unit_normal * unit_normal.dot(point - self.origin)

    def contains(self, point: Vector3, tolerance: float = EPSILON) -> bool:
        return abs(self.signed_distance_to(point)) < tolerance
