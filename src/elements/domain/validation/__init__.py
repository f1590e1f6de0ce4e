"""Construction-time validation: modes, registry and constructor hooks."""

from .construction import validated
from .modes import ConstructionMode
from .registry import ValidatorRegistry

__all__ = [
    "ConstructionMode",
    "ValidatorRegistry",
    "validated",
]
