"""Settings and model document loading and validation.

Public API:
    - ElementsSettings: Root settings model
    - ModelDocument: Persisted set of serialized elements
    - load_settings / load_settings_from_dict: Load settings
    - apply_settings: Apply settings to the validation switch and factory
    - load_document / load_document_from_dict: Load a model document
    - ConfigError / ModelLoadError: Loading errors
    - ValidationResult / ValidationError / ValidationWarning: Validation results
    - validate_document: Construct every element with validation enabled

Example:
    >>> from pathlib import Path
    >>> from elements.application.config import load_document, validate_document
    >>>
    >>> document = load_document(Path("model.json"))
    >>> result = validate_document(document)
    >>> result.exit_code
    0
"""

from elements.application.config.loader import (
    ConfigError,
    ModelLoadError,
    apply_settings,
    load_document,
    load_document_from_dict,
    load_settings,
    load_settings_from_dict,
)
from elements.application.config.schema import (
    SUPPORTED_VERSIONS,
    ElementsSettings,
    KernelSettings,
    ModelDocument,
    ValidationSettings,
)
from elements.application.config.validator import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    check_textures,
    validate_document,
)

__all__ = [
    "ConfigError",
    "ElementsSettings",
    "KernelSettings",
    "ModelDocument",
    "ModelLoadError",
    "SUPPORTED_VERSIONS",
    "ValidationError",
    "ValidationResult",
    "ValidationSettings",
    "ValidationWarning",
    "apply_settings",
    "check_textures",
    "load_document",
    "load_document_from_dict",
    "load_settings",
    "load_settings_from_dict",
    "validate_document",
]
