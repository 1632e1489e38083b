"""Templates commands for listing and initializing design templates.

This module provides the `templates` command group with subcommands for
listing the bundled garage and kitchen presets and copying one to a new
design file.
"""

from pathlib import Path
from typing import Annotated

import typer

from planner.application.templates import TemplateManager, TemplateNotFoundError

# Create a Typer app for the templates subcommand group
templates_app = typer.Typer(
    name="templates",
    help="Manage design templates.",
)


@templates_app.command(name="list")
def list_templates(
    planner_type: Annotated[
        str | None,
        typer.Option("--type", "-t", help="Only show 'garage' or 'kitchen' templates"),
    ] = None,
) -> None:
    """List the bundled design templates.

    Example:
        planner templates list --type garage
    """
    manager = TemplateManager()
    templates = manager.list_templates(planner_type)

    if not templates:
        typer.echo(f"No templates for planner type: {planner_type}", err=True)
        raise typer.Exit(code=1)

    typer.echo("Available templates:")
    typer.echo()

    max_name_width = max(len(name) for name, _ in templates)
    for name, description in templates:
        typer.echo(f"  {name:<{max_name_width}}  - {description}")

    typer.echo()
    typer.echo("Use 'planner templates init <name>' to create a design file from a template.")


@templates_app.command(name="init")
def init_template(
    name: Annotated[
        str,
        typer.Argument(help="Name of the template to initialize"),
    ],
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output file path (default: <name>.json)"),
    ] = None,
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite existing file"),
    ] = False,
) -> None:
    """Create a design file from a template.

    Examples:
        planner templates init garage-standard-double
        planner templates init kitchen-l-shape --output my-kitchen.json
    """
    manager = TemplateManager()

    if output is None:
        output = Path(f"{name}.json")

    if not manager.template_exists(name):
        available = ", ".join(n for n, _ in manager.list_templates())
        typer.echo(f"Error: Template not found: {name}", err=True)
        typer.echo(f"Available templates: {available}", err=True)
        raise typer.Exit(code=1)

    if output.exists() and not force:
        typer.echo(f"Error: File already exists: {output}", err=True)
        typer.echo("Use --force to overwrite.", err=True)
        raise typer.Exit(code=1)

    try:
        manager.init_template(name, output)
        typer.echo(f"Created: {output}")
    except TemplateNotFoundError:
        typer.echo(f"Error: Template not found: {name}", err=True)
        raise typer.Exit(code=1)
    except OSError as e:
        typer.echo(f"Error: Could not write file: {e}", err=True)
        raise typer.Exit(code=1)
