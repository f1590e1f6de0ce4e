"""Color value object and named palette."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from ..validation import ConstructionMode, validated


@validated
@dataclass(frozen=True)
class Color:
    """Immutable RGBA color with every channel in [0, 1]."""

    red: float
    green: float
    blue: float
    alpha: float = 1.0

    @classmethod
    def from_tuple(
        cls, values: "Color | Sequence[float]", mode: ConstructionMode | None = None
    ) -> "Color":
        """Coerce an RGB or RGBA tuple into a Color (alpha defaults to 1).

        Colors pass through unchanged.
        """
        if isinstance(values, Color):
            return values
        return cls(*[float(v) for v in values], mode=mode)

    def to_tuple(self) -> tuple[float, float, float, float]:
        return (self.red, self.green, self.blue, self.alpha)


def _palette_color(red: float, green: float, blue: float, alpha: float = 1.0) -> Color:
    return Color(red, green, blue, alpha, mode=ConstructionMode.TRUSTED)


class Colors:
    """Named colors."""

    BLACK = _palette_color(0.0, 0.0, 0.0)
    WHITE = _palette_color(1.0, 1.0, 1.0)
    RED = _palette_color(1.0, 0.0, 0.0)
    GREEN = _palette_color(0.0, 1.0, 0.0)
    BLUE = _palette_color(0.0, 0.0, 1.0)
    GRAY = _palette_color(0.5, 0.5, 0.5)
    DARKGRAY = _palette_color(0.2, 0.2, 0.2)
    ORANGE = _palette_color(1.0, 0.5, 0.0)
    MINT = _palette_color(0.596, 1.0, 0.596)
    SAND = _palette_color(0.866, 0.85, 0.76)
    COBALT = _palette_color(0.0, 0.28, 0.67)
    AQUA = _palette_color(0.3, 0.7, 0.7)
    STEEL = _palette_color(0.6, 0.6, 0.6)
    BEIGE = _palette_color(0.96, 0.96, 0.86)
    GLASS = _palette_color(0.7, 0.7, 0.7, 0.3)
