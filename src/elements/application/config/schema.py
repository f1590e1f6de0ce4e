"""Pydantic schemas for settings files and model documents.

Both schemas are strict (``extra="forbid"``) so that a misspelled key is
reported rather than silently ignored.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from elements.domain.constants import DEFAULT_ARC_DIVISIONS

# Supported schema versions for settings files and model documents
# Version 1.0: Initial schema
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


class ValidationSettings(BaseModel):
    """Construction-time validation settings.

    Attributes:
        enabled: Validate constructors called without an explicit mode.
    """

    model_config = ConfigDict(extra="forbid")

    enabled: bool = True


class KernelSettings(BaseModel):
    """Geometry kernel settings.

    Attributes:
        name: Kernel implementation (only "mesh" is available)
        arc_divisions: Chords per full turn when sampling arcs (4 to 720)
    """

    model_config = ConfigDict(extra="forbid")

    name: Literal["mesh"] = "mesh"
    arc_divisions: int = Field(default=DEFAULT_ARC_DIVISIONS, ge=4, le=720)


class ElementsSettings(BaseModel):
    """Root settings model.

    Attributes:
        schema_version: Settings schema version
        validation: Construction-time validation settings
        kernel: Geometry kernel settings
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = "1.0"
    validation: ValidationSettings = Field(default_factory=ValidationSettings)
    kernel: KernelSettings = Field(default_factory=KernelSettings)

    @field_validator("schema_version")
    @classmethod
    def validate_schema_version(cls, v: str) -> str:
        if v not in SUPPORTED_VERSIONS:
            raise ValueError(
                f"Unsupported schema version '{v}'. "
                f"Supported: {', '.join(sorted(SUPPORTED_VERSIONS))}"
            )
        return v


class ModelDocument(BaseModel):
    """A persisted set of elements.

    Each entry of ``elements`` is the output of ``to_dict``: declared
    fields plus a ``discriminator`` naming the type. Derived solids are
    never stored.

    Attributes:
        version: Document schema version
        elements: Serialized entities
    """

    model_config = ConfigDict(extra="forbid")

    version: str = "1.0"
    elements: list[dict[str, Any]] = Field(default_factory=list)

    @field_validator("version")
    @classmethod
    def validate_version(cls, v: str) -> str:
        if v not in SUPPORTED_VERSIONS:
            raise ValueError(
                f"Unsupported document version '{v}'. "
                f"Supported: {', '.join(sorted(SUPPORTED_VERSIONS))}"
            )
        return v

    @field_validator("elements")
    @classmethod
    def validate_discriminators(cls, v: list[dict[str, Any]]) -> list[dict[str, Any]]:
        """Ensure every entry names its type."""
        for index, entry in enumerate(v):
            if not isinstance(entry.get("discriminator"), str):
                raise ValueError(f"Element {index} has no 'discriminator' string")
        return v
