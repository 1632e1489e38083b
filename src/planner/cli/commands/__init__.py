"""CLI command implementations for the planner application.

This package contains subcommands for the planner CLI, including:
- validate: Validate a design file
- templates: List and initialize design templates
"""

from planner.cli.commands.templates import templates_app
from planner.cli.commands.validate import validate_command

__all__ = ["validate_command", "templates_app"]
