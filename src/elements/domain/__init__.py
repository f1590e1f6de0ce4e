"""Domain layer - geometry, validation and solid operations."""

from .constants import EPSILON
from .dimensions import AlignedDimension, Dimension, LinearDimension
from .entities import GeometricElement, Mass
from .exceptions import (
    ElementsError,
    GeometricInconsistencyError,
    GeometryGenerationError,
    InvalidArgumentError,
    OutOfRangeError,
)
from .solids import Curve, Extrude, Lamina, SolidOperation, Sweep
from .validation import ConstructionMode, ValidatorRegistry, validated
from .value_objects import (
    ORIGIN,
    X_AXIS,
    Y_AXIS,
    Z_AXIS,
    Arc,
    BBox3,
    BuiltInMaterials,
    Color,
    Colors,
    Line,
    Material,
    Matrix,
    Plane,
    Polygon,
    Polyline,
    Profile,
    Transform,
    Vector3,
)

__all__ = [
    "AlignedDimension",
    "Arc",
    "BBox3",
    "BuiltInMaterials",
    "Color",
    "Colors",
    "ConstructionMode",
    "Curve",
    "Dimension",
    "EPSILON",
    "ElementsError",
    "Extrude",
    "GeometricElement",
    "GeometricInconsistencyError",
    "GeometryGenerationError",
    "InvalidArgumentError",
    "Lamina",
    "Line",
    "LinearDimension",
    "Mass",
    "Material",
    "Matrix",
    "ORIGIN",
    "OutOfRangeError",
    "Plane",
    "Polygon",
    "Polyline",
    "Profile",
    "SolidOperation",
    "Sweep",
    "Transform",
    "ValidatorRegistry",
    "Vector3",
    "X_AXIS",
    "Y_AXIS",
    "Z_AXIS",
    "validated",
]
