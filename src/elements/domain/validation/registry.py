"""Validator registry for construction-time entity validation.

This module provides the central type-keyed table of entity validators,
following the same registry pattern used by the exporter and configuration
validator registries. The default table is built on first use and is not
expected to change afterwards; ``register`` and ``clear`` exist for tests.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, ClassVar, Mapping

from .modes import ConstructionMode

if TYPE_CHECKING:
    from elements.contracts.validators import EntityValidator

logger = logging.getLogger(__name__)


class ValidatorRegistry:
    """Registry mapping entity types to their validators.

    Lookup is by exact type: a subclass does not inherit its base class
    validator, and a type without a validator is constructed unchecked.

    The registry also owns the process-wide validation switch. Constructors
    called with ``mode=None`` follow the switch; an explicit
    ``ConstructionMode`` always wins.

    Example:
        # Look up and run a validator directly
        ValidatorRegistry.pre_construct(Plane, {"origin": o, "normal": n})

        # Trusted bulk load
        ValidatorRegistry.disable_validation_on_construction()
        ...
        ValidatorRegistry.enable_validation_on_construction()
    """

    _validators: ClassVar[dict[type, "EntityValidator"]] = {}
    _defaults_loaded: ClassVar[bool] = False
    _validation_enabled: ClassVar[bool] = True

    @classmethod
    def _ensure_defaults(cls) -> None:
        if cls._defaults_loaded:
            return
        cls._defaults_loaded = True
        from .validators import default_validators

        for validator in default_validators():
            cls.register(validator)

    @classmethod
    def register(cls, validator: "EntityValidator") -> None:
        """Register a validator instance for its ``validates_type``.

        Args:
            validator: The validator instance to register.

        Note:
            If a validator is already registered for the same type, it is
            replaced and a warning is logged.
        """
        entity_type = validator.validates_type
        if entity_type in cls._validators:
            logger.warning(
                f"Overwriting existing validator for '{entity_type.__name__}'"
            )
        cls._validators[entity_type] = validator
        logger.debug(
            f"Registered validator for '{entity_type.__name__}': "
            f"{type(validator).__name__}"
        )

    @classmethod
    def get(cls, entity_type: type) -> "EntityValidator | None":
        """Get the validator registered for an exact type.

        Args:
            entity_type: The entity type to look up.

        Returns:
            The validator, or None when the type is not validated.
        """
        cls._ensure_defaults()
        return cls._validators.get(entity_type)

    @classmethod
    def is_registered(cls, entity_type: type) -> bool:
        """Check whether a validator exists for an exact type."""
        cls._ensure_defaults()
        return entity_type in cls._validators

    @classmethod
    def available(cls) -> list[str]:
        """Get the sorted names of all validated entity types."""
        cls._ensure_defaults()
        return sorted(entity_type.__name__ for entity_type in cls._validators)

    @classmethod
    def pre_construct(cls, entity_type: type, arguments: Mapping[str, Any]) -> None:
        """Run the pre-construction check for a type, if it has a validator."""
        validator = cls.get(entity_type)
        if validator is not None:
            validator.pre_construct(arguments)

    @classmethod
    def post_construct(cls, entity_type: type, instance: Any) -> None:
        """Run the post-construction action for a type, if it has a validator."""
        validator = cls.get(entity_type)
        if validator is not None:
            validator.post_construct(instance)

    @classmethod
    def validation_enabled(cls) -> bool:
        """Return the state of the process-wide validation switch."""
        return cls._validation_enabled

    @classmethod
    def disable_validation_on_construction(cls) -> None:
        """Skip both hooks for constructors called without an explicit mode."""
        cls._validation_enabled = False
        logger.debug("Validation on construction disabled")

    @classmethod
    def enable_validation_on_construction(cls) -> None:
        """Restore the default of validating every construction."""
        cls._validation_enabled = True
        logger.debug("Validation on construction enabled")

    @classmethod
    def resolve_mode(cls, mode: ConstructionMode | None) -> ConstructionMode:
        """Resolve an optional constructor mode against the process-wide switch.

        Args:
            mode: Explicit mode passed to a constructor, or None.

        Returns:
            The mode the constructor should use.
        """
        if mode is not None:
            return ConstructionMode(mode)
        if cls._validation_enabled:
            return ConstructionMode.VALIDATED
        return ConstructionMode.TRUSTED

    @classmethod
    def clear(cls) -> None:
        """Remove every registered validator without reloading the defaults.

        This is primarily useful for testing.
        """
        cls._validators.clear()
        cls._defaults_loaded = True

    @classmethod
    def reset(cls) -> None:
        """Restore the default validator table and re-enable validation.

        This is primarily useful for testing.
        """
        cls._validators.clear()
        cls._defaults_loaded = False
        cls._validation_enabled = True
