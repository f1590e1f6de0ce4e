"""Linear dimensions measured between two points."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .value_objects import ORIGIN, Z_AXIS, Plane, Vector3


class Dimension(ABC):
    """A dimension drawn in ``plane`` (the world XY plane by default)."""

    def __init__(self, plane: Plane | None = None) -> None:
        self.plane = plane if plane is not None else Plane(ORIGIN, Z_AXIS)

    @property
    @abstractmethod
    def value(self) -> float:
        """The measured length."""
        ...


class LinearDimension(Dimension):
    """A dimension whose points are projected onto a reference plane.

    Args:
        start: Start of the dimension.
        end: End of the dimension.
        reference_plane: Plane the start and end points are projected onto
            before measuring.
        plane: Plane in which the dimension is drawn.
    """

    def __init__(
        self,
        start: Vector3,
        end: Vector3,
        reference_plane: Plane,
        plane: Plane | None = None,
    ) -> None:
        super().__init__(plane)
        self.start = start
        self.end = end
        self.reference_plane = reference_plane

    @property
    def value(self) -> float:
        return self.reference_plane.project(self.start).distance_to(
            self.reference_plane.project(self.end)
        )


class AlignedDimension(LinearDimension):
    """A dimension parallel to the segment between its points.

    The reference plane contains the segment and is offset from it by
    ``offset`` along the in-plane perpendicular.
    """

    def __init__(
        self,
        start: Vector3,
        end: Vector3,
        offset: float = 0.0,
        plane: Plane | None = None,
    ) -> None:
        dimension_plane = plane if plane is not None else Plane(ORIGIN, Z_AXIS)
        perpendicular = (end - start).unit().cross(dimension_plane.normal.unit())
        reference_plane = Plane(start + perpendicular * offset, perpendicular)
        super().__init__(start, end, reference_plane, dimension_plane)
        self.offset = offset
