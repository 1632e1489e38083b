"""Shared design loading for CLI commands.

Commands take either a design file argument or ``--template NAME``; this
module turns whichever was given into a ConfigurationModel, printing errors
to stderr and exiting with code 1 on failure.
"""

from __future__ import annotations

from pathlib import Path

import typer

from planner.application.config import (
    ConfigError,
    config_to_model,
    load_config,
    load_price_book,
)
from planner.application.templates import TemplateManager, TemplateNotFoundError
from planner.domain.entities import ConfigurationModel

__all__ = ["load_design", "load_prices", "print_config_error"]


def print_config_error(error: ConfigError) -> None:
    """Print a ConfigError with its per-field details to stderr."""
    typer.echo("Errors:", err=True)
    if error.error_type == "json_parse":
        typer.echo("  Invalid JSON syntax", err=True)
        for detail in error.details:
            line = detail.get("line", "?")
            column = detail.get("column", "?")
            message = detail.get("message", "Unknown error")
            typer.echo(f"    Line {line}, Column {column}: {message}", err=True)
    elif error.error_type == "validation":
        for detail in error.details:
            path = detail.get("path") or "<root>"
            message = detail.get("message", "Unknown error")
            typer.echo(f"  {path}: {message}", err=True)
            value = detail.get("value")
            if value is not None and not isinstance(value, (dict, list)):
                typer.echo(f"    Value: {value!r}", err=True)
    else:
        typer.echo(f"  {error.message}", err=True)


def load_design(design_file: Path | None, template: str | None) -> ConfigurationModel:
    """Resolve the design named on the command line.

    Exactly one of ``design_file`` and ``template`` must be given.
    """
    if (design_file is None) == (template is None):
        typer.echo("Error: Provide a design file or --template, but not both.", err=True)
        raise typer.Exit(code=1)

    if template is not None:
        manager = TemplateManager()
        try:
            return manager.load_template(template)
        except TemplateNotFoundError:
            available = ", ".join(name for name, _ in manager.list_templates())
            typer.echo(f"Error: Template not found: {template}", err=True)
            typer.echo(f"Available templates: {available}", err=True)
            raise typer.Exit(code=1)

    try:
        return config_to_model(load_config(design_file))
    except ConfigError as e:
        print_config_error(e)
        raise typer.Exit(code=1)


def load_prices(price_book: Path | None) -> dict[str, float] | None:
    if price_book is None:
        return None
    try:
        return load_price_book(price_book)
    except ConfigError as e:
        print_config_error(e)
        raise typer.Exit(code=1)
