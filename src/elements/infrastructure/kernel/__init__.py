"""Default geometry kernel."""

from .kernel import MeshKernel
from .mesh import BooleanMesh, Face, MeshSolid

__all__ = [
    "BooleanMesh",
    "Face",
    "MeshKernel",
    "MeshSolid",
]
