"""Geometric and material value objects.

Every type here is validated on construction (see
``elements.domain.validation``). Types are defined in private submodules
and re-exported from this package.
"""

from ._bbox import BBox3
from ._color import Color, Colors
from ._curves import Arc, Line, Polygon, Polyline
from ._material import BuiltInMaterials, Material
from ._matrix import Matrix, Transform
from ._plane import Plane
from ._profile import Profile
from ._vector import ORIGIN, X_AXIS, Y_AXIS, Z_AXIS, Vector3

__all__ = [
    "Arc",
    "BBox3",
    "BuiltInMaterials",
    "Color",
    "Colors",
    "Line",
    "Material",
    "Matrix",
    "ORIGIN",
    "Plane",
    "Polygon",
    "Polyline",
    "Profile",
    "Transform",
    "Vector3",
    "X_AXIS",
    "Y_AXIS",
    "Z_AXIS",
]
