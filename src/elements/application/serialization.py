"""Conversion of entities to and from plain JSON-compatible data.

Only declared constructor parameters are written, each object tagged with
a ``discriminator`` naming its type. Derived solid caches are never
written; loading goes through the constructors, so every solid is
recomputed from its parameters.

Example:
    >>> data = to_dict(Vector3(1.0, 2.0, 3.0))
    >>> data
    {'discriminator': 'Vector3', 'x': 1.0, 'y': 2.0, 'z': 3.0}
    >>> from_dict(data)
    Vector3(x=1.0, y=2.0, z=3.0)
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from typing import Any

from elements.domain.entities import GeometricElement, Mass
from elements.domain.exceptions import InvalidArgumentError
from elements.domain.solids import Extrude, Lamina, Sweep
from elements.domain.validation import ConstructionMode
from elements.domain.value_objects import (
    Arc,
    BBox3,
    Color,
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

logger = logging.getLogger(__name__)

DISCRIMINATOR = "discriminator"


@dataclass(frozen=True)
class _Codec:
    """How one type is written and rebuilt.

    Attributes:
        cls: The type.
        fields: Constructor parameters, read back with ``getattr``.
        accepts_mode: The constructor takes a ``mode`` keyword.
    """

    cls: type
    fields: tuple[str, ...]
    accepts_mode: bool = True


_CODECS: dict[str, _Codec] = {
    codec.cls.__name__: codec
    for codec in (
        _Codec(Vector3, ("x", "y", "z")),
        _Codec(Color, ("red", "green", "blue", "alpha")),
        _Codec(Plane, ("origin", "normal")),
        _Codec(Line, ("start", "end")),
        _Codec(Arc, ("center", "radius", "start_angle", "end_angle")),
        _Codec(Polyline, ("vertices",)),
        _Codec(Polygon, ("vertices",)),
        _Codec(Matrix, ("components",)),
        _Codec(Transform, ("matrix",), accepts_mode=False),
        _Codec(BBox3, ("min", "max")),
        _Codec(Profile, ("perimeter", "voids", "name")),
        _Codec(
            Material,
            (
                "name",
                "color",
                "specular_factor",
                "glossiness_factor",
                "unlit",
                "texture",
                "double_sided",
                "repeat_texture",
                "normal_texture",
                "interpolate_texture",
                "emissive_texture",
                "emissive_factor",
                "id",
            ),
        ),
        _Codec(Extrude, ("profile", "height", "direction", "is_void", "flipped")),
        _Codec(Sweep, ("profile", "curve", "start_setback", "end_setback", "is_void")),
        _Codec(Lamina, ("perimeter", "is_void")),
        _Codec(
            GeometricElement,
            ("transform", "material", "representation", "is_element_definition", "name"),
        ),
        _Codec(Mass, ("profile", "height", "material", "transform", "name")),
    )
}


def serializable_types() -> list[str]:
    """Get the sorted discriminators that ``from_dict`` understands."""
    return sorted(_CODECS)


def _encode(value: Any) -> Any:
    if isinstance(value, (list, tuple)):
        return [_encode(item) for item in value]
    if isinstance(value, uuid.UUID):
        return str(value)
    if type(value).__name__ in _CODECS and _CODECS[type(value).__name__].cls is type(value):
        return to_dict(value)
    return value


def to_dict(entity: Any) -> dict[str, Any]:
    """Convert an entity to a JSON-compatible dictionary.

    Args:
        entity: Any value object, solid operation or element.

    Returns:
        The declared fields plus a ``discriminator``.

    Raises:
        TypeError: If the entity's type cannot be serialized.
    """
    codec = _CODECS.get(type(entity).__name__)
    if codec is None or codec.cls is not type(entity):
        raise TypeError(f"Cannot serialize object of type {type(entity).__name__}")
    data: dict[str, Any] = {DISCRIMINATOR: codec.cls.__name__}
    for name in codec.fields:
        data[name] = _encode(getattr(entity, name))
    return data


def _decode(value: Any, mode: ConstructionMode) -> Any:
    if isinstance(value, list):
        return [_decode(item, mode) for item in value]
    if isinstance(value, dict) and DISCRIMINATOR in value:
        return from_dict(value, mode=mode)
    return value


def from_dict(
    data: dict[str, Any], mode: ConstructionMode = ConstructionMode.TRUSTED
) -> Any:
    """Rebuild an entity from the output of ``to_dict``.

    Persisted data was valid when it was written, so construction is
    trusted by default. Pass ``ConstructionMode.VALIDATED`` to re-check
    data from an untrusted source.

    Args:
        data: Dictionary with a ``discriminator``.
        mode: Construction mode for every nested constructor.

    Returns:
        The rebuilt entity. Solid operations have recomputed their solids.

    Raises:
        InvalidArgumentError: If the discriminator is missing or unknown.
    """
    name = data.get(DISCRIMINATOR)
    codec = _CODECS.get(name) if isinstance(name, str) else None
    if codec is None:
        raise InvalidArgumentError(
            f"Unknown discriminator {name!r}. Available: {', '.join(serializable_types())}"
        )

    kwargs = {
        field: _decode(value, mode)
        for field, value in data.items()
        if field != DISCRIMINATOR
    }
    if codec.cls is Material and isinstance(kwargs.get("id"), str):
        kwargs["id"] = uuid.UUID(kwargs["id"])
    if codec.cls in (Polyline, Polygon, Matrix) and codec.fields[0] in kwargs:
        kwargs[codec.fields[0]] = tuple(kwargs[codec.fields[0]])
    if codec.accepts_mode:
        kwargs["mode"] = mode
    logger.debug(f"Constructing {name} ({ConstructionMode(mode).value})")
    return codec.cls(**kwargs)
