"""Extrusion of a profile along a direction."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..validation import ConstructionMode, validated
from ..value_objects import Profile, Vector3
from .base import SolidOperation

if TYPE_CHECKING:
    from elements.contracts.kernel import GeometryKernel, Solid


@validated
class Extrude(SolidOperation):
    """An extrusion of a profile, in a direction, to a height.

    Setting ``profile``, ``height``, ``direction`` or ``flipped`` recomputes
    the solid before the assignment returns. Assigning the current value
    is a no-op.

    Args:
        profile: The profile to extrude.
        height: The height (length) of the extrusion, not negative.
        direction: The direction of the extrusion, non-zero.
        is_void: If True, the extrusion is subtracted from the other solids
            of its representation.
        flipped: If True, the solid is turned inside out with normals
            facing in. Boolean results with other operations may be
            unexpected.
        kernel: Geometry kernel; defaults to the application kernel.
        mode: Construction mode; defaults to the process-wide switch.
    """

    parameter_names = ("profile", "height", "direction", "flipped")

    def __init__(
        self,
        profile: Profile,
        height: float,
        direction: Vector3,
        is_void: bool = False,
        flipped: bool = False,
        kernel: "GeometryKernel | None" = None,
        mode: ConstructionMode | None = None,
    ) -> None:
        super().__init__(is_void=is_void, kernel=kernel, mode=mode)
        self._init_parameters(
            profile=profile,
            height=height,
            direction=direction,
            flipped=flipped,
        )
        self._rebuild()

    @property
    def profile(self) -> Profile:
        return self._profile

    @profile.setter
    def profile(self, value: Profile) -> None:
        self._set_parameter("profile", value)

    @property
    def height(self) -> float:
        return self._height

    @height.setter
    def height(self, value: float) -> None:
        self._set_parameter("height", value)

    @property
    def direction(self) -> Vector3:
        return self._direction

    @direction.setter
    def direction(self, value: Vector3) -> None:
        self._set_parameter("direction", value)

    @property
    def flipped(self) -> bool:
        return self._flipped

    @flipped.setter
    def flipped(self, value: bool) -> None:
        self._set_parameter("flipped", value)

    def _generate(self) -> "Solid":
        return self.kernel.create_extrude(
            self._profile, self._height, self._direction, self._flipped
        )
