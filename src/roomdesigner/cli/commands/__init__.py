"""CLI command implementations for the room designer.

This package contains subcommands for the room-designer CLI, including:
- validate: Validate a configuration file
"""

from roomdesigner.cli.commands.validate import validate_command

__all__ = ["validate_command"]
