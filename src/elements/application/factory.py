"""Service factory for dependency injection."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from elements.domain.constants import DEFAULT_ARC_DIVISIONS

if TYPE_CHECKING:
    from elements.contracts.kernel import GeometryKernel

logger = logging.getLogger(__name__)

KERNELS: frozenset[str] = frozenset({"mesh"})


@dataclass
class ServiceFactory:
    """Factory for the geometry kernel used by solid operations.

    Solid operations built without an explicit ``kernel`` ask the default
    factory for one the first time they recompute.

    Attributes:
        kernel_name: Name of the kernel implementation to create.
        arc_divisions: Chords per full turn when sampling arcs.

    Example:
        ```python
        factory = ServiceFactory(arc_divisions=72)
        set_factory(factory)
        extrude = Extrude(profile, 1.0, Z_AXIS)  # uses factory.get_kernel()
        ```
    """

    kernel_name: str = "mesh"
    arc_divisions: int = DEFAULT_ARC_DIVISIONS

    _kernel: "GeometryKernel | None" = field(default=None, init=False, repr=False)

    def get_kernel(self) -> "GeometryKernel":
        """Get or create the geometry kernel instance."""
        if self._kernel is None:
            if self.kernel_name not in KERNELS:
                raise ValueError(
                    f"Unknown kernel '{self.kernel_name}'. "
                    f"Available: {', '.join(sorted(KERNELS))}"
                )
            from elements.infrastructure.kernel import MeshKernel

            self._kernel = MeshKernel(arc_divisions=self.arc_divisions)
            logger.debug(f"Created '{self.kernel_name}' kernel")
        return self._kernel

    def configure(self, kernel_name: str, arc_divisions: int) -> None:
        """Change the kernel selection; the next get_kernel() builds a new kernel."""
        if kernel_name == self.kernel_name and arc_divisions == self.arc_divisions:
            return
        self.kernel_name = kernel_name
        self.arc_divisions = arc_divisions
        self._kernel = None

    def set_kernel(self, kernel: "GeometryKernel") -> None:
        """Use a specific kernel instance (for testing)."""
        self._kernel = kernel


# Default factory instance
_default_factory: ServiceFactory | None = None


def get_factory() -> ServiceFactory:
    """Get the default service factory."""
    global _default_factory
    if _default_factory is None:
        _default_factory = ServiceFactory()
    return _default_factory


def set_factory(factory: ServiceFactory | None) -> None:
    """Set a custom factory (for testing)."""
    global _default_factory
    _default_factory = factory


def reset_factory() -> None:
    """Reset the factory to default (for testing cleanup)."""
    global _default_factory
    _default_factory = None
