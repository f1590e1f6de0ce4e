"""CLI command implementations for the elements application.

This package contains the subcommands for the elements CLI:
- validate: Validate a model document
- info: Summarise the derived solids of a model document
"""

from elements.cli.commands.info import info_command
from elements.cli.commands.validate import validate_command

__all__ = ["info_command", "validate_command"]
