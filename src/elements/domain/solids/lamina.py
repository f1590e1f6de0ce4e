"""Zero-thickness planar solid."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..validation import ConstructionMode, validated
from ..value_objects import Polygon
from .base import SolidOperation

if TYPE_CHECKING:
    from elements.contracts.kernel import GeometryKernel, Solid


@validated
class Lamina(SolidOperation):
    """A planar solid with no thickness, bounded by a perimeter.

    Args:
        perimeter: The closed boundary of the lamina.
        is_void: If True, the lamina is subtracted from the other solids.
        kernel: Geometry kernel; defaults to the application kernel.
        mode: Construction mode; defaults to the process-wide switch.
    """

    parameter_names = ("perimeter",)

    def __init__(
        self,
        perimeter: Polygon,
        is_void: bool = False,
        kernel: "GeometryKernel | None" = None,
        mode: ConstructionMode | None = None,
    ) -> None:
        super().__init__(is_void=is_void, kernel=kernel, mode=mode)
        self._init_parameters(perimeter=perimeter)
        self._rebuild()

    @property
    def perimeter(self) -> Polygon:
        return self._perimeter

    @perimeter.setter
    def perimeter(self, value: Polygon) -> None:
        self._set_parameter("perimeter", value)

    def _generate(self) -> "Solid":
        return self.kernel.create_lamina(self._perimeter)
