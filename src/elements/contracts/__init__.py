"""Contracts shared between the domain, application and infrastructure layers."""

from .kernel import BooleanGeometry, GeometryKernel, Solid
from .validators import EntityValidator

__all__ = [
    "BooleanGeometry",
    "EntityValidator",
    "GeometryKernel",
    "Solid",
]
