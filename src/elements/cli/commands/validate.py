"""Validate command for checking model documents.

This module provides the `validate` command that loads a JSON model
document and constructs every element with validation enabled, reporting
errors and warnings.
"""

from pathlib import Path
from typing import Annotated

import typer

from elements.application.config import (
    ModelLoadError,
    ValidationResult,
    load_document,
    validate_document,
)


def validate_command(
    model_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON model document to validate"),
    ],
) -> None:
    """Validate a model document.

    Checks the document for:
    - JSON syntax errors
    - Schema errors (unknown keys, missing discriminators, bad version)
    - Construction errors (invalid arguments, out-of-range values,
      inconsistent geometry, solids the kernel cannot generate)
    - Material textures that do not exist

    Exit codes:
        0 - Document is valid with no warnings
        1 - Document has errors
        2 - Document is valid but has warnings

    Example:
        elements validate model.json
    """
    typer.echo(f"Validating {model_file}...")
    typer.echo()

    try:
        document = load_document(model_file)
    except ModelLoadError as e:
        _display_load_error(e)
        raise typer.Exit(code=1)

    result = validate_document(document)
    _display_validation_result(result)
    raise typer.Exit(code=result.exit_code)


def _display_load_error(error: ModelLoadError) -> None:
    """Display a document loading error.

    Args:
        error: The ModelLoadError to display
    """
    typer.echo("Errors:", err=True)
    if error.error_type == "file_not_found":
        typer.echo(f"  File not found: {error.path}", err=True)
    elif error.error_type == "json_parse":
        typer.echo("  Invalid JSON syntax", err=True)
        for detail in error.details:
            line = detail.get("line", "?")
            column = detail.get("column", "?")
            message = detail.get("message", "Unknown error")
            typer.echo(f"    Line {line}, Column {column}: {message}", err=True)
    elif error.error_type == "validation":
        for detail in error.details:
            path = detail.get("path", "unknown")
            message = detail.get("message", "Unknown error")
            value = detail.get("value")
            typer.echo(f"  {path}: {message}", err=True)
            if value is not None:
                typer.echo(f"    Value: {value!r}", err=True)
    else:
        typer.echo(f"  {error.message}", err=True)

    typer.echo()
    typer.echo("Validation failed.", err=True)


def _display_validation_result(result: ValidationResult) -> None:
    """Display validation results including errors and warnings.

    Args:
        result: The ValidationResult to display
    """
    if result.errors:
        typer.echo("Errors:", err=True)
        for error in result.errors:
            typer.echo(f"  {error.path}: {error.message}", err=True)
            if error.value is not None:
                typer.echo(f"    Type: {error.value}", err=True)
        typer.echo()

    if result.warnings:
        typer.echo("Warnings:")
        for warning in result.warnings:
            typer.echo(f"  {warning.path}: {warning.message}")
            if warning.suggestion:
                typer.echo(f"    Suggestion: {warning.suggestion}")
        typer.echo()

    if result.errors:
        typer.echo(
            f"Validation failed: {len(result.errors)} error(s), "
            f"{len(result.warnings)} warning(s)",
            err=True,
        )
    elif result.warnings:
        typer.echo(f"Validation passed with {len(result.warnings)} warning(s)")
    else:
        typer.echo("Validation passed. Document is valid.")
