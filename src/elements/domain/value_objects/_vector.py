"""Three-dimensional vector value object."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Iterator

from ..constants import EPSILON
from ..exceptions import InvalidArgumentError
from ..validation import ConstructionMode, validated


@validated
@dataclass(frozen=True)
class Vector3:
    """Immutable 3D vector or point.

    Components must be finite; NaN or infinite components are rejected at
    construction.
    """

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def from_iterable(cls, values: Iterable[float]) -> "Vector3":
        """Build a vector from two or three numbers (z defaults to 0)."""
        components = [float(v) for v in values]
        if len(components) == 2:
            components.append(0.0)
        return cls(*components)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scale: float) -> "Vector3":
        return Vector3(self.x * scale, self.y * scale, self.z * scale)

    __rmul__ = __mul__

    def __truediv__(self, scale: float) -> "Vector3":
        return Vector3(self.x / scale, self.y / scale, self.z / scale)

    def __neg__(self) -> "Vector3":
        return self.negate()

    def negate(self) -> "Vector3":
        """Return the vector pointing the opposite way."""
        return Vector3(-self.x, -self.y, -self.z)

    def dot(self, other: "Vector3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector3") -> "Vector3":
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def unit(self) -> "Vector3":
        """Return the unit-length vector with the same direction.

        Raises:
            InvalidArgumentError: If the vector has zero length.
        """
        length = self.length()
        if length == 0.0:
            raise InvalidArgumentError("A zero-length vector cannot be unitized.")
        return Vector3(self.x / length, self.y / length, self.z / length)

    def distance_to(self, other: "Vector3") -> float:
        return (other - self).length()

    def is_zero(self, tolerance: float = EPSILON) -> bool:
        """True if every component is within ``tolerance`` of zero."""
        return (
            abs(self.x) < tolerance
            and abs(self.y) < tolerance
            and abs(self.z) < tolerance
        )

    def is_almost_equal_to(self, other: "Vector3", tolerance: float = EPSILON) -> bool:
        """Component-wise comparison within ``tolerance``."""
        return (
            abs(self.x - other.x) < tolerance
            and abs(self.y - other.y) < tolerance
            and abs(self.z - other.z) < tolerance
        )

    def is_parallel_to(self, other: "Vector3", tolerance: float = EPSILON) -> bool:
        """True if the vectors point along the same line (either sense)."""
        return self.unit().cross(other.unit()).length() < tolerance

    def average(self, other: "Vector3") -> "Vector3":
        return Vector3(
            (self.x + other.x) / 2, (self.y + other.y) / 2, (self.z + other.z) / 2
        )

    def to_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def __str__(self) -> str:
        return f"X:{self.x:.4f}, Y:{self.y:.4f}, Z:{self.z:.4f}"


# Module constants are known-good and built before the validator table exists.
ORIGIN = Vector3(0.0, 0.0, 0.0, mode=ConstructionMode.TRUSTED)
X_AXIS = Vector3(1.0, 0.0, 0.0, mode=ConstructionMode.TRUSTED)
Y_AXIS = Vector3(0.0, 1.0, 0.0, mode=ConstructionMode.TRUSTED)
Z_AXIS = Vector3(0.0, 0.0, 1.0, mode=ConstructionMode.TRUSTED)
