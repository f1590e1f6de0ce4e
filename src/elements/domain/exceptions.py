"""Exception hierarchy raised by entity construction and solid recomputation."""


class ElementsError(Exception):
    """Base class for all errors raised by the elements domain."""

    pass


class InvalidArgumentError(ElementsError, ValueError):
    """Raised when a single constructor or setter argument breaks a local invariant."""

    pass


class OutOfRangeError(ElementsError, ValueError):
    """Raised when a numeric argument falls outside its valid interval."""

    pass


class GeometricInconsistencyError(ElementsError, ValueError):
    """Raised when a structural geometric invariant fails.

    Examples are non-coplanar vertices, self-intersecting loops and
    degenerate bounding boxes.
    """

    pass


class GeometryGenerationError(ElementsError, RuntimeError):
    """Raised when the geometry kernel cannot produce a solid.

    The parameters that triggered the failure already passed validation;
    the solid operation that raised it stays failed until it is rebuilt
    successfully.
    """

    pass
