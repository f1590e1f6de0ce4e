"""Settings and model document loading with comprehensive error handling.

This module loads JSON settings files and model documents. It handles file
system errors, JSON parsing errors, and Pydantic validation errors with
clear, actionable error messages.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from elements.application.config.schema import ElementsSettings, ModelDocument
from elements.application.factory import ServiceFactory, get_factory
from elements.domain.validation import ValidatorRegistry

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class ConfigError(Exception):
    """Exception raised for settings-related errors.

    Attributes:
        message: The primary error message
        error_type: Category of error (file_not_found, json_parse, validation)
        path: Path to the file (if applicable)
        details: Additional error details (line/column for JSON, validation errors, etc.)
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        """Format error message for display."""
        return self.message


class ModelLoadError(ConfigError):
    """Exception raised when a model document cannot be loaded."""

    pass


def _format_json_path(loc: tuple[str | int, ...]) -> str:
    """Format a Pydantic location tuple as a JSON path string.

    Examples:
        >>> _format_json_path(("kernel", "arc_divisions"))
        'kernel.arc_divisions'
        >>> _format_json_path(("elements", 0))
        'elements[0]'
    """
    parts: list[str] = []
    for segment in loc:
        if isinstance(segment, int):
            if parts:
                parts[-1] = f"{parts[-1]}[{segment}]"
            else:
                parts.append(f"[{segment}]")
        else:
            parts.append(str(segment))
    return ".".join(parts)


def _extract_validation_errors(
    error: PydanticValidationError,
) -> list[dict[str, Any]]:
    """Extract path, message, value and error_type from a Pydantic error."""
    details: list[dict[str, Any]] = []
    for err in error.errors():
        details.append(
            {
                "path": _format_json_path(err["loc"]),
                "message": err["msg"],
                "value": err.get("input"),
                "error_type": err["type"],
            }
        )
    return details


def _format_validation_error_message(title: str, details: list[dict[str, Any]]) -> str:
    lines = [title]
    for detail in details:
        path = detail["path"]
        message = detail["message"]
        value = detail.get("value")
        if value is not None:
            lines.append(f"  - {path}: {message} (got: {value!r})")
        else:
            lines.append(f"  - {path}: {message}")
    return "\n".join(lines)


def _read_json(path: Path, error_class: type[ConfigError], kind: str) -> Any:
    """Read and parse a JSON file, raising ``error_class`` on failure."""
    if not path.exists():
        raise error_class(
            message=f"{kind} file not found: {path}",
            error_type="file_not_found",
            path=path,
        )

    try:
        content = path.read_text(encoding="utf-8")
    except PermissionError:
        raise error_class(
            message=f"Permission denied reading {kind.lower()} file: {path}",
            error_type="permission_denied",
            path=path,
        )
    except OSError as e:
        raise error_class(
            message=f"Error reading {kind.lower()} file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        )

    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        raise error_class(
            message=f"Invalid JSON in {kind.lower()} file: {path} (line {e.lineno}, column {e.colno}): {e.msg}",
            error_type="json_parse",
            path=path,
            details=[
                {
                    "line": e.lineno,
                    "column": e.colno,
                    "message": e.msg,
                }
            ],
        )


def _validate(
    model: type[ModelT],
    data: Any,
    error_class: type[ConfigError],
    title: str,
    path: Path | None = None,
) -> ModelT:
    try:
        return model.model_validate(data)
    except PydanticValidationError as e:
        details = _extract_validation_errors(e)
        raise error_class(
            message=_format_validation_error_message(title, details),
            error_type="validation",
            path=path,
            details=details,
        )


def load_settings(path: Path) -> ElementsSettings:
    """Load and validate settings from a JSON file.

    Args:
        path: Path to the JSON settings file

    Returns:
        A validated ElementsSettings instance

    Raises:
        ConfigError: If the file cannot be loaded or validated.
            The error_type attribute indicates the specific error category:
            - "file_not_found": File does not exist
            - "json_parse": Invalid JSON syntax
            - "validation": Schema validation failed
    """
    data = _read_json(path, ConfigError, "Settings")
    settings = _validate(
        ElementsSettings, data, ConfigError, "Settings validation failed:", path
    )
    logger.debug(f"Loaded settings from {path}")
    return settings


def load_settings_from_dict(data: dict[str, Any]) -> ElementsSettings:
    """Load and validate settings from a dictionary.

    Raises:
        ConfigError: If the data fails validation.
    """
    return _validate(ElementsSettings, data, ConfigError, "Settings validation failed:")


def apply_settings(
    settings: ElementsSettings, factory: ServiceFactory | None = None
) -> ServiceFactory:
    """Apply settings to the validation switch and the service factory.

    Args:
        settings: Settings to apply.
        factory: Factory to configure; defaults to the global factory.

    Returns:
        The configured factory.
    """
    if settings.validation.enabled:
        ValidatorRegistry.enable_validation_on_construction()
    else:
        ValidatorRegistry.disable_validation_on_construction()

    factory = factory if factory is not None else get_factory()
    factory.configure(settings.kernel.name, settings.kernel.arc_divisions)
    logger.info(
        f"Applied settings: validation {'on' if settings.validation.enabled else 'off'}, "
        f"kernel '{settings.kernel.name}'"
    )
    return factory


def load_document(path: Path) -> ModelDocument:
    """Load and validate a model document from a JSON file.

    The document's elements are not constructed here; see ``from_dict``
    and ``validate_document``.

    Raises:
        ModelLoadError: If the file cannot be loaded or does not match the
            document schema. ``error_type`` is one of "file_not_found",
            "json_parse" or "validation".
    """
    data = _read_json(path, ModelLoadError, "Model")
    document = _validate(
        ModelDocument, data, ModelLoadError, "Model document validation failed:", path
    )
    logger.info(f"Loaded {len(document.elements)} element(s) from {path}")
    return document


def load_document_from_dict(data: dict[str, Any]) -> ModelDocument:
    """Load and validate a model document from a dictionary.

    Raises:
        ModelLoadError: If the data fails validation.
    """
    return _validate(
        ModelDocument, data, ModelLoadError, "Model document validation failed:"
    )
