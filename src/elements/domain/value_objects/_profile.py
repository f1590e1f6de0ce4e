"""Profile value object: a perimeter with optional voids."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..services import predicates
from ..validation import validated
from ._curves import Polygon
from ._matrix import Transform


@validated
@dataclass
class Profile:
    """A planar perimeter with zero or more voids.

    Voids given as None are normalised to an empty list after construction,
    and every void is re-wound opposite to the perimeter so that boolean
    subtraction behaves the same regardless of input winding.

    Attributes:
        perimeter: Outer boundary.
        voids: Inner boundaries.
        name: Optional display name.
    """

    perimeter: Polygon
    voids: list[Polygon] | None = field(default=None)
    name: str | None = None

    def orient_voids(self) -> None:
        """Re-wind every void opposite to the perimeter."""
        if self.voids is None:
            return
        self.voids = [
            void.reversed()
            if predicates.needs_reversal(void.vertices, self.perimeter.vertices)
            else void
            for void in self.voids
        ]

    def area(self) -> float:
        """Perimeter area minus the void areas."""
        return self.perimeter.area() - sum(void.area() for void in self.voids or [])

    def reversed(self) -> "Profile":
        return Profile(
            self.perimeter.reversed(),
            [void.reversed() for void in self.voids or []],
            self.name,
        )

    def transformed(self, transform: Transform) -> "Profile":
        return Profile(
            self.perimeter.transformed(transform),
            [void.transformed(transform) for void in self.voids or []],
            self.name,
        )
