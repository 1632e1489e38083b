"""Typer CLI for garage and kitchen designs."""

from pathlib import Path
from typing import Annotated

import typer

from planner.cli.commands import templates_app, validate_command
from planner.cli.commands.design_source import load_design, load_prices
from planner.domain.value_objects import StructureWall
from planner.infrastructure.exporters import (
    BomExporter,
    ExporterRegistry,
    ExportManager,
    SvgExporter,
)

app = typer.Typer(
    name="planner",
    help="Lay out garages and kitchens and take off their materials.",
)

# Register subcommands
app.command(name="validate")(validate_command)
app.add_typer(templates_app, name="templates")


DesignFileArg = Annotated[
    Path | None,
    typer.Argument(help="Path to a JSON design file"),
]
TemplateOption = Annotated[
    str | None,
    typer.Option("--template", help="Use a bundled template instead of a design file"),
]


def _write_or_echo(content: str, output_file: Path | None) -> None:
    if output_file is None:
        typer.echo(content)
        return
    try:
        output_file.write_text(content, encoding="utf-8")
    except OSError as e:
        typer.echo(f"Error: Could not write file: {e}", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"Written to {output_file}")


@app.command()
def materials(
    design_file: DesignFileArg = None,
    template: TemplateOption = None,
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: text, csv, json"),
    ] = "text",
    price_book: Annotated[
        Path | None,
        typer.Option("--price-book", help="JSON file mapping line descriptions to unit prices"),
    ] = None,
    no_costs: Annotated[
        bool,
        typer.Option("--no-costs", help="Leave prices and totals out of the output"),
    ] = False,
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write to a file instead of stdout"),
    ] = None,
) -> None:
    """Print the bill of materials for a design.

    Examples:
        planner materials my-garage.json
        planner materials --template kitchen-l-shape --format csv
    """
    model = load_design(design_file, template)
    prices = load_prices(price_book)
    try:
        exporter = BomExporter(
            output_format=output_format,
            include_costs=not no_costs,
            price_book=prices,
        )
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    _write_or_echo(exporter.export_string(model), output_file)


@app.command()
def render(
    design_file: DesignFileArg = None,
    template: TemplateOption = None,
    view: Annotated[
        str,
        typer.Option("--view", "-v", help="Drawing to render: plan or elevation"),
    ] = "plan",
    wall: Annotated[
        StructureWall,
        typer.Option("--wall", "-w", help="Wall shown by an elevation"),
    ] = StructureWall.FRONT,
    grid: Annotated[
        bool | None,
        typer.Option("--grid/--no-grid", help="Override the design's grid setting"),
    ] = None,
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write to a file instead of stdout"),
    ] = None,
) -> None:
    """Render a plan or wall elevation as SVG.

    Examples:
        planner render my-kitchen.json -o plan.svg
        planner render --template garage-triple-bay --view elevation --wall front
    """
    model = load_design(design_file, template)
    try:
        exporter = SvgExporter(view=view, wall=wall, show_grid=grid)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    _write_or_echo(exporter.export_string(model), output_file)


@app.command()
def export(
    design_file: DesignFileArg = None,
    template: TemplateOption = None,
    formats: Annotated[
        str,
        typer.Option("--formats", help="Comma-separated export formats (or 'all')"),
    ] = "all",
    output_dir: Annotated[
        Path,
        typer.Option("--output-dir", "-d", help="Output directory"),
    ] = Path("."),
    project_name: Annotated[
        str,
        typer.Option("--project-name", help="Project name for output file naming"),
    ] = "design",
) -> None:
    """Export a design to several file formats at once.

    Example:
        planner export my-garage.json --formats svg,stl,bom --output-dir out
    """
    model = load_design(design_file, template)

    available = ExporterRegistry.available_formats()
    if formats.lower() == "all":
        selected = available
    else:
        selected = [f.strip().lower() for f in formats.split(",") if f.strip()]

    invalid = [f for f in selected if f not in available]
    if invalid:
        typer.echo(f"Unknown formats: {', '.join(invalid)}", err=True)
        typer.echo(f"Available formats: {', '.join(available)}", err=True)
        raise typer.Exit(code=1)
    if not selected:
        typer.echo("No valid formats to export.", err=True)
        raise typer.Exit(code=1)

    manager = ExportManager(output_dir)
    try:
        files = manager.export_all(selected, model, project_name)
    except OSError as e:
        typer.echo(f"Export error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo("Exported files:")
    for fmt, path in files.items():
        typer.echo(f"  {fmt.upper()}: {path}")


if __name__ == "__main__":
    app()
