"""Material value object and built-in materials."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Sequence

from ..validation import ConstructionMode, validated
from ._color import Color, Colors


@validated
@dataclass
class Material:
    """A surface material.

    Attributes:
        name: Display name.
        color: Base color; an RGB or RGBA tuple is accepted.
        specular_factor: Specular factor in [0, 1].
        glossiness_factor: Glossiness factor in [0, 1].
        unlit: Render without lighting.
        texture: Path to a texture image. A path that does not resolve to an
            existing file is dropped (set to None) after construction.
        double_sided: Render both faces.
        repeat_texture: Tile the texture.
        normal_texture: Path to a normal map.
        interpolate_texture: Smooth texture sampling.
        emissive_texture: Path to an emissive map.
        emissive_factor: Scale applied to the emissive map.
        id: Stable identifier.
    """

    name: str
    color: Color | Sequence[float] = Colors.GRAY
    specular_factor: float = 0.1
    glossiness_factor: float = 0.1
    unlit: bool = False
    texture: str | None = None
    double_sided: bool = False
    repeat_texture: bool = True
    normal_texture: str | None = None
    interpolate_texture: bool = True
    emissive_texture: str | None = None
    emissive_factor: float = 1.0
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    def __post_init__(self) -> None:
        # Range checks on a tuple color belong to the material validator.
        self.color = Color.from_tuple(self.color, mode=ConstructionMode.TRUSTED)


def _builtin(name: str, color: Color, identifier: str, **kwargs: object) -> Material:
    return Material(
        name,
        color,
        id=uuid.UUID(identifier),
        mode=ConstructionMode.TRUSTED,
        **kwargs,
    )


class BuiltInMaterials:
    """Materials with fixed ids, so they round-trip to the same identity."""

    DEFAULT = _builtin("default", Colors.WHITE, "9babb829-9b96-4e73-97f4-9658d4d6c73c")
    CONCRETE = _builtin("Concrete", Colors.GRAY, "e376bab4-d2ff-4f4f-9d7a-2b3e2b1c6d44")
    STEEL = _builtin(
        "Steel",
        Colors.STEEL,
        "5f3c2cf3-0ac4-4a14-a0c6-3c4e6c2e1a61",
        specular_factor=0.9,
        glossiness_factor=0.9,
    )
    GLASS = _builtin(
        "Glass",
        Colors.GLASS,
        "2d8c1f04-6c53-4cb5-9a0e-8d2c9b9e0d21",
        specular_factor=0.7,
        glossiness_factor=0.9,
    )
    WOOD = _builtin("Wood", Colors.BEIGE, "a5e9d0f2-8b8e-4c63-b0a2-4e2cf0c8e8d5")
    VOID = _builtin(
        "void",
        Color(0.0, 0.0, 0.0, 0.0, mode=ConstructionMode.TRUSTED),
        "6a8bd9c3-4b3b-4d6b-8a5e-3f6c4c2f7b18",
    )
