"""Info command: summarise the derived solids of a model document."""

from pathlib import Path
from typing import Annotated, Any

import typer

from elements.application.config import ModelLoadError, load_document
from elements.application.serialization import DISCRIMINATOR, from_dict
from elements.domain import ElementsError, GeometricElement, SolidOperation


def _solid_lines(operation: SolidOperation, indent: str) -> list[str]:
    name = type(operation).__name__
    void = " (void)" if operation.is_void else ""
    solid = operation.solid
    faces = getattr(solid, "face_count", "?")
    return [f"{indent}{name}{void}: {faces} faces, volume {solid.volume():.4f}"]


def _describe(entity: Any) -> list[str]:
    if isinstance(entity, SolidOperation):
        return _solid_lines(entity, "    ")
    if isinstance(entity, GeometricElement):
        material = entity.material.name if entity.material is not None else "none"
        lines = [f"    material: {material}"]
        for operation in entity.solid_operations():
            lines.extend(_solid_lines(operation, "    "))
        return lines
    return []


def info_command(
    model_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON model document"),
    ],
) -> None:
    """Show the elements of a model document and their derived solids.

    Elements are rebuilt as stored (trusted), so every solid is recomputed
    from its parameters.

    Example:
        elements info model.json
    """
    try:
        document = load_document(model_file)
    except ModelLoadError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"{model_file}: {len(document.elements)} element(s)")
    failed = False
    for index, entry in enumerate(document.elements):
        label = entry.get("name") or entry[DISCRIMINATOR]
        typer.echo(f"  [{index}] {entry[DISCRIMINATOR]} {label!r}")
        try:
            entity = from_dict(entry)
            lines = _describe(entity)
        except ElementsError as e:
            typer.echo(f"    Error: {e}", err=True)
            failed = True
            continue
        except (TypeError, KeyError, AttributeError, ValueError) as e:
            typer.echo(f"    Error: Malformed {entry[DISCRIMINATOR]}: {e}", err=True)
            failed = True
            continue
        for line in lines:
            typer.echo(line)

    if failed:
        raise typer.Exit(code=1)
