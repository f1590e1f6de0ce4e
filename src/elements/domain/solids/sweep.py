"""Sweep of a profile along a curve."""

from __future__ import annotations

from typing import TYPE_CHECKING, Union

from ..validation import ConstructionMode, validated
from ..value_objects import Arc, Line, Polyline, Profile
from .base import SolidOperation

if TYPE_CHECKING:
    from elements.contracts.kernel import GeometryKernel, Solid

Curve = Union[Line, Arc, Polyline]


@validated
class Sweep(SolidOperation):
    """A profile swept along a curve.

    The profile is defined in the XY plane and is carried along the curve
    with its Z axis following the curve tangent. The setbacks trim the
    curve at its start and end before sweeping.

    Args:
        profile: The profile to sweep.
        curve: The path (line, arc, polyline or polygon).
        start_setback: Distance trimmed from the start of the curve.
        end_setback: Distance trimmed from the end of the curve.
        is_void: If True, the sweep is subtracted from the other solids.
        kernel: Geometry kernel; defaults to the application kernel.
        mode: Construction mode; defaults to the process-wide switch.
    """

    parameter_names = ("profile", "curve", "start_setback", "end_setback")

    def __init__(
        self,
        profile: Profile,
        curve: Curve,
        start_setback: float = 0.0,
        end_setback: float = 0.0,
        is_void: bool = False,
        kernel: "GeometryKernel | None" = None,
        mode: ConstructionMode | None = None,
    ) -> None:
        super().__init__(is_void=is_void, kernel=kernel, mode=mode)
        self._init_parameters(
            profile=profile,
            curve=curve,
            start_setback=start_setback,
            end_setback=end_setback,
        )
        self._rebuild()

    @property
    def profile(self) -> Profile:
        return self._profile

    @profile.setter
    def profile(self, value: Profile) -> None:
        self._set_parameter("profile", value)

    @property
    def curve(self) -> Curve:
        return self._curve

    @curve.setter
    def curve(self, value: Curve) -> None:
        self._set_parameter("curve", value)

    @property
    def start_setback(self) -> float:
        return self._start_setback

    @start_setback.setter
    def start_setback(self, value: float) -> None:
        self._set_parameter("start_setback", value)

    @property
    def end_setback(self) -> float:
        return self._end_setback

    @end_setback.setter
    def end_setback(self, value: float) -> None:
        self._set_parameter("end_setback", value)

    def _generate(self) -> "Solid":
        return self.kernel.create_sweep_along_curve(
            self._profile, self._curve, self._start_setback, self._end_setback
        )
