"""Base class for parametric solid operations.

A solid operation owns a cached solid and its boolean-ready
representation, both derived from its parameters through the geometry
kernel. The cache is never part of equality or of persisted state, and
``_rebuild`` is the only code that writes it.

Parameter changes go through ``_set_parameter``:

1. equal value: return without touching the kernel
2. validate the proposed parameter set with the type's own validator
3. commit the value and recompute the cache before returning
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, ClassVar

from ..exceptions import GeometryGenerationError
from ..validation import ConstructionMode, ValidatorRegistry

if TYPE_CHECKING:
    from elements.contracts.kernel import BooleanGeometry, GeometryKernel, Solid

logger = logging.getLogger(__name__)


class SolidOperation(ABC):
    """A parametric description that yields a solid through the kernel.

    Subclasses declare their parameter names in ``parameter_names`` and
    implement ``_generate``. Their constructors assign parameters through
    ``_init_parameters`` and finish with ``_rebuild``.

    Attributes:
        is_void: Subtract this solid from the others in a representation.
    """

    parameter_names: ClassVar[tuple[str, ...]] = ()

    def __init__(
        self,
        is_void: bool = False,
        kernel: "GeometryKernel | None" = None,
        mode: ConstructionMode | None = None,
    ) -> None:
        self.is_void = is_void
        self._kernel = kernel
        self._mode = ValidatorRegistry.resolve_mode(mode)
        self._solid: "Solid | None" = None
        self._boolean_geometry: "BooleanGeometry | None" = None
        self._failure: GeometryGenerationError | None = None

    @property
    def kernel(self) -> "GeometryKernel":
        if self._kernel is None:
            from elements.application.factory import get_factory

            self._kernel = get_factory().get_kernel()
        return self._kernel

    @property
    def mode(self) -> ConstructionMode:
        """The construction mode this operation was built with."""
        return self._mode

    @property
    def solid(self) -> "Solid":
        """The derived solid for the current parameters.

        Raises:
            GeometryGenerationError: If the last recomputation failed.
        """
        self._raise_if_failed()
        return self._solid

    @property
    def boolean_geometry(self) -> "BooleanGeometry":
        """The boolean-ready representation of ``solid``.

        Raises:
            GeometryGenerationError: If the last recomputation failed.
        """
        self._raise_if_failed()
        return self._boolean_geometry

    @property
    def is_failed(self) -> bool:
        return self._failure is not None

    def parameters(self) -> dict[str, Any]:
        """Current declared parameters keyed by constructor argument name."""
        values = {name: getattr(self, f"_{name}") for name in self.parameter_names}
        values["is_void"] = self.is_void
        return values

    def rebuild(self) -> None:
        """Recompute the cache from the current parameters."""
        self._rebuild()

    @abstractmethod
    def _generate(self) -> "Solid":
        """Ask the kernel for a solid built from the current parameters."""
        ...

    def _init_parameters(self, **values: Any) -> None:
        for name, value in values.items():
            setattr(self, f"_{name}", value)

    def _set_parameter(self, name: str, value: Any) -> None:
        current = getattr(self, f"_{name}")
        if current == value:
            return
        if self._mode is ConstructionMode.VALIDATED:
            proposed = self.parameters()
            proposed[name] = value
            ValidatorRegistry.pre_construct(type(self), proposed)
        setattr(self, f"_{name}", value)
        self._rebuild()

    def _rebuild(self) -> None:
        self._solid = None
        self._boolean_geometry = None
        self._failure = None
        try:
            solid = self._generate()
            boolean_geometry = solid.to_boolean_representation()
        except GeometryGenerationError as e:
            self._failure = e
            logger.debug(f"{type(self).__name__} geometry generation failed: {e}")
            raise
        except Exception as e:
            self._failure = GeometryGenerationError(
                f"The {type(self).__name__} geometry could not be generated: {e!r}"
            )
            logger.debug(f"{type(self).__name__} geometry generation failed: {e!r}")
            raise self._failure from e
        self._solid = solid
        self._boolean_geometry = boolean_geometry
        logger.debug(f"Rebuilt {type(self).__name__} solid")

    def _raise_if_failed(self) -> None:
        if self._failure is not None:
            raise GeometryGenerationError(
                f"The {type(self).__name__} is in a failed state: {self._failure}"
            )
        if self._solid is None or self._boolean_geometry is None:
            raise GeometryGenerationError(
                f"The {type(self).__name__} has no generated solid."
            )

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.parameters() == other.parameters()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        arguments = ", ".join(f"{k}={v!r}" for k, v in self.parameters().items())
        return f"{type(self).__name__}({arguments})"
