"""Geometric elements: entities that carry a material and a representation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .solids import Extrude, SolidOperation
from .validation import ConstructionMode, validated
from .value_objects import Z_AXIS, Material, Profile, Transform

if TYPE_CHECKING:
    from elements.contracts.kernel import GeometryKernel


@validated
class GeometricElement:
    """An element with a transform, a material and solid operations.

    A material is assigned after construction when none is given.

    Attributes:
        transform: Placement of the element.
        material: Surface material.
        representation: Solid operations making up the element's geometry.
        is_element_definition: The element is a definition to be instanced.
        name: Optional display name.
    """

    def __init__(
        self,
        transform: Transform | None = None,
        material: Material | None = None,
        representation: list[SolidOperation] | None = None,
        is_element_definition: bool = False,
        name: str | None = None,
    ) -> None:
        self.transform = transform if transform is not None else Transform()
        self.material = material
        self.representation = representation if representation is not None else []
        self.is_element_definition = is_element_definition
        self.name = name

    def solid_operations(self) -> list[SolidOperation]:
        return list(self.representation)

    def voids(self) -> list[SolidOperation]:
        return [op for op in self.representation if op.is_void]


@validated
class Mass(GeometricElement):
    """An extruded profile standing on its transform's XY plane.

    The mass owns one Extrude in its representation; changing ``profile``
    or ``height`` updates that extrude in place.

    Args:
        profile: Footprint of the mass.
        height: Height of the mass, not negative.
        material: Surface material; defaults to the built-in default.
        transform: Placement of the mass.
        name: Optional display name.
        kernel: Geometry kernel for the extrude.
    """

    def __init__(
        self,
        profile: Profile,
        height: float = 1.0,
        material: Material | None = None,
        transform: Transform | None = None,
        name: str | None = None,
        kernel: "GeometryKernel | None" = None,
        mode: ConstructionMode | None = None,
    ) -> None:
        self._extrude = Extrude(profile, height, Z_AXIS, kernel=kernel, mode=mode)
        super().__init__(
            transform=transform,
            material=material,
            representation=[self._extrude],
            name=name,
            mode=mode,
        )

    @property
    def profile(self) -> Profile:
        return self._extrude.profile

    @profile.setter
    def profile(self, value: Profile) -> None:
        self._extrude.profile = value

    @property
    def height(self) -> float:
        return self._extrude.height

    @height.setter
    def height(self, value: float) -> None:
        self._extrude.height = value

    def volume(self) -> float:
        """Volume of the derived solid."""
        return self._extrude.solid.volume()
