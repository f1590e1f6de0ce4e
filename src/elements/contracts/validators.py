"""Validator protocol for construction-time entity validation.

This module defines the protocol that every entity validator implements.
Validators are looked up by entity type and invoked around construction:
``pre_construct`` sees the raw constructor arguments before any field is
assigned, ``post_construct`` sees the finished instance.
"""

from __future__ import annotations

from typing import Any, Mapping, Protocol, runtime_checkable


@runtime_checkable
class EntityValidator(Protocol):
    """Protocol for per-type construction validators.

    Attributes:
        validates_type: The exact entity type this validator is registered for.

    Example:
        class PlaneValidator:
            validates_type = Plane

            def pre_construct(self, arguments: Mapping[str, Any]) -> None:
                if arguments["normal"].is_zero():
                    raise InvalidArgumentError("The plane normal has zero length.")

            def post_construct(self, instance: Any) -> None:
                return None
    """

    @property
    def validates_type(self) -> type:
        """Return the entity type handled by this validator."""
        ...

    def pre_construct(self, arguments: Mapping[str, Any]) -> None:
        """Check the proposed constructor arguments.

        Args:
            arguments: Constructor arguments keyed by parameter name, with
                defaults already applied.

        Raises:
            InvalidArgumentError: A single argument violates a local invariant.
            OutOfRangeError: A numeric argument is outside its interval.
            GeometricInconsistencyError: A structural invariant fails.
        """
        ...

    def post_construct(self, instance: Any) -> None:
        """Fill defaults or derive secondary data on a constructed instance.

        Must be idempotent for an instance that is already in its final state.

        Args:
            instance: The fully field-assigned entity.
        """
        ...
