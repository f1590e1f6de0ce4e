"""Validation results and whole-document validation.

``validate_document`` rebuilds every element of a model document with
construction-time validation forced on and collects what goes wrong,
instead of stopping at the first failure.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterator

from elements.application.config.schema import ModelDocument
from elements.application.serialization import DISCRIMINATOR, from_dict
from elements.domain.exceptions import ElementsError
from elements.domain.validation import ConstructionMode

logger = logging.getLogger(__name__)


@dataclass
class ValidationError:
    """Represents a blocking validation error.

    Attributes:
        path: JSON path to the invalid entry (e.g., "elements[0]")
        message: Human-readable description of the error
        value: The invalid value that caused the error
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """Represents a non-blocking validation warning.

    The element can still be constructed, but not exactly as written.

    Attributes:
        path: JSON path to the concerning field
        message: Human-readable description of the concern
        suggestion: Optional suggested remediation
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Container for validation errors and warnings.

    Attributes:
        errors: List of blocking validation errors
        warnings: List of non-blocking validation warnings
    """

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the document has no blocking errors."""
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """Get the CLI exit code based on validation status.

        Returns:
            0 if valid with no warnings
            1 if there are errors
            2 if valid but has warnings
        """
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(
        self, path: str, message: str, value: Any = None
    ) -> "ValidationResult":
        """Add a validation error and return self for chaining."""
        self.errors.append(ValidationError(path=path, message=message, value=value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> "ValidationResult":
        """Add a validation warning and return self for chaining."""
        self.warnings.append(
            ValidationWarning(path=path, message=message, suggestion=suggestion)
        )
        return self

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        """Merge another ValidationResult into this one."""
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        return self


def _materials(data: Any, path: str) -> Iterator[tuple[str, dict[str, Any]]]:
    """Yield (path, material data) for every material nested in ``data``."""
    if isinstance(data, list):
        for index, item in enumerate(data):
            yield from _materials(item, f"{path}[{index}]")
    elif isinstance(data, dict):
        if data.get(DISCRIMINATOR) == "Material":
            yield path, data
        for key, value in data.items():
            yield from _materials(value, f"{path}.{key}")


def check_textures(data: Any, path: str) -> ValidationResult:
    """Warn about material textures that will be dropped on construction."""
    result = ValidationResult()
    for material_path, material in _materials(data, path):
        texture = material.get("texture")
        if texture is not None and not Path(texture).is_file():
            result.add_warning(
                f"{material_path}.texture",
                f"Texture '{texture}' does not exist and will be removed",
                suggestion="Check the texture path or remove it from the material",
            )
    return result


def validate_document(document: ModelDocument) -> ValidationResult:
    """Construct every element of a document with validation enabled.

    Each element is rebuilt independently, so one invalid element does not
    hide problems in the others. Solid operations recompute their
    geometry, so kernel failures are reported as errors too.

    Args:
        document: A loaded model document.

    Returns:
        ValidationResult with one error per element that failed to
        construct and one warning per texture that will be dropped.
    """
    result = ValidationResult()
    for index, entry in enumerate(document.elements):
        path = f"elements[{index}]"
        try:
            from_dict(entry, mode=ConstructionMode.VALIDATED)
        except ElementsError as e:
            result.add_error(path, str(e), value=entry.get(DISCRIMINATOR))
            continue
        except (TypeError, KeyError, AttributeError, ValueError) as e:
            result.add_error(path, f"Malformed {entry.get(DISCRIMINATOR)}: {e}")
            continue
        result.merge(check_textures(entry, path))

    logger.debug(
        f"Validated {len(document.elements)} element(s): "
        f"{len(result.errors)} error(s), {len(result.warnings)} warning(s)"
    )
    return result
