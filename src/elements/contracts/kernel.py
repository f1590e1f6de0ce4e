"""Geometry kernel protocols.

The kernel turns validated solid-operation parameters into boundary
geometry. Solid operations only call it; the default implementation lives
in ``elements.infrastructure.kernel``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from elements.domain.value_objects import (
        Arc,
        Line,
        Polygon,
        Polyline,
        Profile,
        Vector3,
    )


@runtime_checkable
class BooleanGeometry(Protocol):
    """Boolean-ready representation of a solid (input to union/subtract/intersect)."""

    @property
    def polygon_count(self) -> int:
        """Return the number of planar polygons in the representation."""
        ...


@runtime_checkable
class Solid(Protocol):
    """Boundary representation produced by a kernel."""

    def to_boolean_representation(self) -> BooleanGeometry:
        """Convert the solid into its boolean-ready representation."""
        ...

    def volume(self) -> float:
        """Return the enclosed volume (negative for an inside-out solid)."""
        ...


class GeometryKernel(Protocol):
    """Protocol for the solid-generation kernel.

    Every method either returns a solid or raises
    ``GeometryGenerationError`` when the parameters cannot produce one.

    Example:
        ```python
        class RecordingKernel:
            def create_extrude(self, profile, height, direction, flipped):
                ...
        ```
    """

    def create_extrude(
        self,
        profile: Profile,
        height: float,
        direction: Vector3,
        flipped: bool,
    ) -> Solid:
        """Extrude a profile along a direction to a height.

        Args:
            profile: Profile to extrude.
            height: Extrusion distance.
            direction: Extrusion direction (need not be unit length).
            flipped: Reverse every face so normals point inward.

        Returns:
            The extruded solid.
        """
        ...

    def create_sweep_along_curve(
        self,
        profile: Profile,
        curve: Line | Arc | Polyline,
        start_setback: float,
        end_setback: float,
    ) -> Solid:
        """Sweep a profile along a curve, trimmed by the setbacks.

        Args:
            profile: Profile defined in the XY plane.
            curve: Path of the sweep.
            start_setback: Distance trimmed from the start of the curve.
            end_setback: Distance trimmed from the end of the curve.

        Returns:
            The swept solid.
        """
        ...

    def create_lamina(self, perimeter: Polygon) -> Solid:
        """Create a zero-thickness planar solid from a closed perimeter.

        Args:
            perimeter: Boundary of the lamina.

        Returns:
            The lamina solid.
        """
        ...
