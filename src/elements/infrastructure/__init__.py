"""Infrastructure layer - geometry kernel implementations."""

from .kernel import BooleanMesh, MeshKernel, MeshSolid

__all__ = [
    "BooleanMesh",
    "MeshKernel",
    "MeshSolid",
]
