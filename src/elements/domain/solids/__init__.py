"""Parametric solid operations: extrude, sweep and lamina."""

from .base import SolidOperation
from .extrude import Extrude
from .lamina import Lamina
from .sweep import Curve, Sweep

__all__ = [
    "Curve",
    "Extrude",
    "Lamina",
    "SolidOperation",
    "Sweep",
]
