"""Entity validators and the default validator table.

Each validator checks the raw constructor arguments of exactly one entity
type before construction and may normalise the instance afterwards. The
table returned by ``default_validators`` is loaded into the
``ValidatorRegistry`` on first use.
"""

from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Any, Mapping

from ..exceptions import (
    GeometricInconsistencyError,
    InvalidArgumentError,
    OutOfRangeError,
)
from ..services import predicates
from .modes import ConstructionMode

logger = logging.getLogger(__name__)


class _NoPostConstruct:
    """Mixin for validators without a post-construction action."""

    def post_construct(self, instance: Any) -> None:
        return None


class Vector3Validator(_NoPostConstruct):
    """Rejects NaN and infinite components."""

    @property
    def validates_type(self) -> type:
        from ..value_objects import Vector3

        return Vector3

    def pre_construct(self, arguments: Mapping[str, Any]) -> None:
        components = (arguments["x"], arguments["y"], arguments["z"])
        if any(math.isnan(c) for c in components):
            raise OutOfRangeError(
                "The vector could not be created. One or more of the components was NaN."
            )
        if any(math.isinf(c) for c in components):
            raise OutOfRangeError(
                "The vector could not be created. One or more of the components was infinity."
            )


class ColorValidator(_NoPostConstruct):
    """Rejects channels outside [0, 1]."""

    @property
    def validates_type(self) -> type:
        from ..value_objects import Color

        return Color

    def pre_construct(self, arguments: Mapping[str, Any]) -> None:
        channels = [arguments[name] for name in ("red", "green", "blue", "alpha")]
        if any(c < 0.0 for c in channels):
            raise OutOfRangeError(
                "The color could not be created. All components must have a value "
                "greater than or equal to 0.0."
            )
        if any(c > 1.0 for c in channels):
            raise OutOfRangeError(
                "The color could not be created. All components must have a value "
                "less than or equal to 1.0."
            )


class PlaneValidator(_NoPostConstruct):
    """Rejects a zero-length normal."""

    @property
    def validates_type(self) -> type:
        from ..value_objects import Plane

        return Plane

    def pre_construct(self, arguments: Mapping[str, Any]) -> None:
        normal = arguments["normal"]
        if normal.is_zero():
            raise InvalidArgumentError(
                f"The plane could not be constructed. The normal, {normal}, has zero length."
            )


class LineValidator(_NoPostConstruct):
    """Rejects coincident start and end points."""

    @property
    def validates_type(self) -> type:
        from ..value_objects import Line

        return Line

    def pre_construct(self, arguments: Mapping[str, Any]) -> None:
        start = arguments["start"]
        end = arguments["end"]
        if start.is_almost_equal_to(end):
            raise InvalidArgumentError(
                "The line could not be created. The start and end points of the line "
                f"cannot be the same: start {start}, end {end}"
            )


class PolylineValidator(_NoPostConstruct):
    """Rejects non-coplanar vertices and too-short open segments."""

    closed = False
    minimum_vertices = 2

    @property
    def validates_type(self) -> type:
        from ..value_objects import Polyline

        return Polyline

    def pre_construct(self, arguments: Mapping[str, Any]) -> None:
        vertices = list(arguments["vertices"])
        kind = type(self).__name__.removesuffix("Validator").lower()
        if len(vertices) < self.minimum_vertices:
            raise InvalidArgumentError(
                f"The {kind} could not be created. At least {self.minimum_vertices} "
                f"vertices are required, got {len(vertices)}."
            )
        if not predicates.are_coplanar(vertices):
            raise GeometricInconsistencyError(
                f"The {kind} could not be created. The provided vertices are not coplanar."
            )
        predicates.check_segment_lengths(vertices, closed=self.closed)


class PolygonValidator(PolylineValidator):
    """Polyline checks over the closed loop, plus no self-intersection."""

    closed = True
    minimum_vertices = 3

    @property
    def validates_type(self) -> type:
        from ..value_objects import Polygon

        return Polygon

    def pre_construct(self, arguments: Mapping[str, Any]) -> None:
        super().pre_construct(arguments)
        predicates.check_self_intersection(list(arguments["vertices"]))


class ArcValidator(_NoPostConstruct):
    """Rejects angles above 360 degrees, equal angles and non-positive radii."""

    @property
    def validates_type(self) -> type:
        from ..value_objects import Arc

        return Arc

    def pre_construct(self, arguments: Mapping[str, Any]) -> None:
        radius = arguments["radius"]
        start_angle = arguments["start_angle"]
        end_angle = arguments["end_angle"]

        if end_angle > 360.0 or start_angle > 360.0:
            raise OutOfRangeError(
                "The arc could not be created. The start and end angles must be "
                "less than or equal to 360.0."
            )
        if end_angle == start_angle:
            raise InvalidArgumentError(
                f"The arc could not be created. The start angle ({start_angle}) "
                f"cannot be equal to the end angle ({end_angle})."
            )
        if radius <= 0.0:
            raise OutOfRangeError(
                f"The arc could not be created. The provided radius ({radius}) "
                "must be greater than 0.0."
            )


class BBox3Validator(_NoPostConstruct):
    """Rejects boxes with no extent along X or Y."""

    @property
    def validates_type(self) -> type:
        from ..value_objects import BBox3

        return BBox3

    def pre_construct(self, arguments: Mapping[str, Any]) -> None:
        low = arguments["min"]
        high = arguments["max"]
        if low.x == high.x or low.y == high.y:
            raise GeometricInconsistencyError(
                "The bounding box will have zero volume, please ensure that the "
                "min and max don't have any identical vertex values."
            )


class MatrixValidator(_NoPostConstruct):
    """Rejects component sequences that are not exactly 12 long."""

    @property
    def validates_type(self) -> type:
        from ..value_objects import Matrix

        return Matrix

    def pre_construct(self, arguments: Mapping[str, Any]) -> None:
        components = list(arguments["components"])
        if len(components) != 12:
            raise OutOfRangeError(
                "The matrix could not be created. The component array must have "
                f"12 values, got {len(components)}."
            )


class ProfileValidator:
    """Rejects a non-coplanar perimeter; defaults and re-winds voids."""

    @property
    def validates_type(self) -> type:
        from ..value_objects import Profile

        return Profile

    def pre_construct(self, arguments: Mapping[str, Any]) -> None:
        perimeter = arguments["perimeter"]
        if perimeter is not None and not predicates.are_coplanar(perimeter.vertices):
            raise GeometricInconsistencyError(
                "To construct a profile, all points must lie in the same plane."
            )

    def post_construct(self, instance: Any) -> None:
        if instance.voids is None:
            instance.voids = []
        instance.orient_voids()


class MaterialValidator:
    """Rejects specular, glossiness and tuple color channels outside [0, 1].

    A texture path that does not point at an existing file is dropped
    after construction with a warning, so the material is still created.
    """

    @property
    def validates_type(self) -> type:
        from ..value_objects import Material

        return Material

    def pre_construct(self, arguments: Mapping[str, Any]) -> None:
        specular = arguments["specular_factor"]
        glossiness = arguments["glossiness_factor"]
        if specular < 0.0 or glossiness < 0.0:
            raise OutOfRangeError(
                "The material could not be created. Specular and glossiness values "
                "must be greater than or equal to 0.0."
            )
        if specular > 1.0 or glossiness > 1.0:
            raise OutOfRangeError(
                "The material could not be created. Specular and glossiness values "
                "must be less than or equal to 1.0."
            )
        from ..value_objects import Color

        Color.from_tuple(arguments["color"], mode=ConstructionMode.VALIDATED)

    def post_construct(self, instance: Any) -> None:
        if instance.texture is not None and not Path(instance.texture).is_file():
            logger.warning(
                f"Texture '{instance.texture}' for material '{instance.name}' "
                "does not exist; the texture has been removed."
            )
            instance.texture = None


class GeometricElementValidator:
    """Assigns the default material when none was supplied."""

    @property
    def validates_type(self) -> type:
        from ..entities import GeometricElement

        return GeometricElement

    def pre_construct(self, arguments: Mapping[str, Any]) -> None:
        return None

    def post_construct(self, instance: Any) -> None:
        if instance.material is None:
            from ..value_objects import BuiltInMaterials

            instance.material = BuiltInMaterials.DEFAULT


class MassValidator(_NoPostConstruct):
    """Rejects a negative mass height."""

    @property
    def validates_type(self) -> type:
        from ..entities import Mass

        return Mass

    def pre_construct(self, arguments: Mapping[str, Any]) -> None:
        if arguments["height"] < 0.0:
            raise OutOfRangeError(
                f"The mass could not be created. The height ({arguments['height']}) "
                "must not be negative."
            )


class ExtrudeValidator(_NoPostConstruct):
    """Rejects a zero-length direction, a negative height and a missing profile.

    Recomputation of the solid is owned by the extrude itself, so there is
    no post-construction action.
    """

    @property
    def validates_type(self) -> type:
        from ..solids import Extrude

        return Extrude

    def pre_construct(self, arguments: Mapping[str, Any]) -> None:
        direction = arguments["direction"]
        if direction is None or direction.length() == 0:
            raise InvalidArgumentError(
                "The extrude cannot be created. The provided direction has zero length."
            )
        if arguments["height"] < 0.0:
            raise OutOfRangeError(
                f"The extrude cannot be created. The height ({arguments['height']}) "
                "must not be negative."
            )
        if arguments["profile"] is None:
            raise InvalidArgumentError(
                "The extrude cannot be created. A profile is required."
            )


class SweepValidator(_NoPostConstruct):
    """Rejects a missing profile or curve."""

    @property
    def validates_type(self) -> type:
        from ..solids import Sweep

        return Sweep

    def pre_construct(self, arguments: Mapping[str, Any]) -> None:
        if arguments["profile"] is None:
            raise InvalidArgumentError("The sweep cannot be created. A profile is required.")
        if arguments["curve"] is None:
            raise InvalidArgumentError("The sweep cannot be created. A curve is required.")


class LaminaValidator(_NoPostConstruct):
    """Rejects a missing perimeter."""

    @property
    def validates_type(self) -> type:
        from ..solids import Lamina

        return Lamina

    def pre_construct(self, arguments: Mapping[str, Any]) -> None:
        if arguments["perimeter"] is None:
            raise InvalidArgumentError(
                "The lamina cannot be created. A perimeter is required."
            )


def default_validators() -> list[Any]:
    """Build one instance of every built-in validator."""
    return [
        Vector3Validator(),
        ColorValidator(),
        PlaneValidator(),
        LineValidator(),
        PolylineValidator(),
        PolygonValidator(),
        ArcValidator(),
        BBox3Validator(),
        MatrixValidator(),
        ProfileValidator(),
        MaterialValidator(),
        GeometricElementValidator(),
        MassValidator(),
        ExtrudeValidator(),
        SweepValidator(),
        LaminaValidator(),
    ]
