"""Matrix and transform value objects."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from ..validation import ConstructionMode, validated
from ._plane import Plane
from ._vector import ORIGIN, X_AXIS, Z_AXIS, Vector3

_IDENTITY_COMPONENTS = (1.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0)


@validated
@dataclass(frozen=True)
class Matrix:
    """A 3x4 affine matrix stored as 12 row-major components.

    Rows 0-2 hold the X, Y and Z axes, row 3 holds the translation.
    """

    components: Sequence[float] = _IDENTITY_COMPONENTS

    def __post_init__(self) -> None:
        object.__setattr__(self, "components", tuple(float(c) for c in self.components))

    @classmethod
    def from_array(cls, array: np.ndarray) -> "Matrix":
        """Build a matrix from a 4x4 homogeneous array (row-vector convention)."""
        return cls(tuple(array[:4, :3].reshape(12)))

    def to_array(self) -> np.ndarray:
        """Return the 4x4 homogeneous array (row-vector convention)."""
        array = np.zeros((4, 4))
        array[:4, :3] = np.array(self.components).reshape(4, 3)
        array[3, 3] = 1.0
        return array

    def row(self, index: int) -> Vector3:
        start = index * 3
        return Vector3(*self.components[start:start + 3])


@dataclass(frozen=True)
class Transform:
    """A right-handed coordinate system: origin plus X, Y, Z axes."""

    matrix: Matrix = Matrix(_IDENTITY_COMPONENTS, mode=ConstructionMode.TRUSTED)

    @classmethod
    def identity(cls) -> "Transform":
        return cls()

    @classmethod
    def from_origin(cls, origin: Vector3) -> "Transform":
        """A translation-only transform."""
        return cls.from_axes(origin, X_AXIS, Z_AXIS)

    @classmethod
    def from_axes(
        cls,
        origin: Vector3 = ORIGIN,
        x_axis: Vector3 = X_AXIS,
        z_axis: Vector3 = Z_AXIS,
    ) -> "Transform":
        """Build a transform from an origin, an X axis and a Z axis.

        The X axis is re-orthogonalised against Z and Y completes the
        right-handed frame.
        """
        z = z_axis.unit()
        y = z.cross(x_axis).unit()
        x = y.cross(z).unit()
        return cls(
            Matrix(
                (x.x, x.y, x.z, y.x, y.y, y.z, z.x, z.y, z.z, origin.x, origin.y, origin.z)
            )
        )

    @classmethod
    def from_plane(cls, plane: Plane) -> "Transform":
        """A transform whose XY plane coincides with ``plane``."""
        normal = plane.normal.unit()
        reference = X_AXIS if abs(normal.dot(X_AXIS)) < 0.9 else Vector3(0.0, 1.0, 0.0)
        x_axis = reference - normal * normal.dot(reference)
        return cls.from_axes(plane.origin, x_axis, normal)

    @property
    def origin(self) -> Vector3:
        return self.matrix.row(3)

    @property
    def x_axis(self) -> Vector3:
        return self.matrix.row(0)

    @property
    def y_axis(self) -> Vector3:
        return self.matrix.row(1)

    @property
    def z_axis(self) -> Vector3:
        return self.matrix.row(2)

    def of_point(self, point: Vector3) -> Vector3:
        """Transform a point (translation applies)."""
        return (
            self.x_axis * point.x
            + self.y_axis * point.y
            + self.z_axis * point.z
            + self.origin
        )

    def of_vector(self, vector: Vector3) -> Vector3:
        """Transform a direction (translation ignored)."""
        return self.x_axis * vector.x + self.y_axis * vector.y + self.z_axis * vector.z

    def concatenated(self, other: "Transform") -> "Transform":
        """Apply this transform, then ``other``."""
        return Transform(Matrix.from_array(self.matrix.to_array() @ other.matrix.to_array()))

    def inverted(self) -> "Transform":
        return Transform(Matrix.from_array(np.linalg.inv(self.matrix.to_array())))

    def moved(self, offset: Vector3) -> "Transform":
        """A copy of this transform translated by ``offset``."""
        return self.concatenated(Transform.from_origin(offset))

    def xy_plane(self) -> Plane:
        return Plane(self.origin, self.z_axis)
