"""Validate command for checking design files."""

from pathlib import Path
from typing import Annotated

import typer

from planner.application.config import ConfigError, config_to_model, load_config
from planner.cli.commands.design_source import print_config_error
from planner.domain.services.validation import design_warnings


def validate_command(
    design_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON design file to validate"),
    ],
) -> None:
    """Validate a design file.

    Checks the file for JSON syntax errors and schema errors, then reports
    layout warnings such as items outside the room or overlapping items.

    Exit codes:
        0 - Design is valid with no warnings
        1 - Design has errors (cannot be loaded)
        2 - Design is valid but has warnings

    Example:
        planner validate my-garage.json
    """
    typer.echo(f"Validating {design_file}...")
    typer.echo()

    try:
        config = load_config(design_file)
    except ConfigError as e:
        print_config_error(e)
        typer.echo()
        typer.echo("Validation failed.", err=True)
        raise typer.Exit(code=1)

    warnings = design_warnings(config_to_model(config))

    if warnings:
        typer.echo("Warnings:")
        for warning in warnings:
            typer.echo(f"  {warning}")
        typer.echo()
        typer.echo(f"Validation passed with {len(warnings)} warning(s)")
        raise typer.Exit(code=2)

    typer.echo("Validation passed. Design is valid.")
