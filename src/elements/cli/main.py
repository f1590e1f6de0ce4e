"""Typer CLI for parametric element documents."""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from elements import __version__
from elements.application.config import ConfigError, apply_settings, load_settings
from elements.cli.commands import info_command, validate_command

app = typer.Typer(
    name="elements",
    help="Validate and inspect parametric building element documents.",
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"elements {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    settings: Annotated[
        Optional[Path],
        typer.Option("--settings", help="Path to a JSON settings file"),
    ] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Enable debug logging")
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=_version_callback,
            is_eager=True,
            help="Show the version and exit",
        ),
    ] = False,
) -> None:
    """Validate and inspect parametric building element documents."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if settings is not None:
        try:
            apply_settings(load_settings(settings))
        except ConfigError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(code=1)


app.command(name="validate")(validate_command)
app.command(name="info")(info_command)


if __name__ == "__main__":
    app()
