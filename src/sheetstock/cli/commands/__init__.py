"""CLI command implementations for the sheetstock application.

- validate: Validate a configuration file
"""

from sheetstock.cli.commands.validate import display_config_error, validate_command

__all__ = ["display_config_error", "validate_command"]
