"""SVG exporter for plan and elevation drawings.

Renders a projection DisplayList to an SVG document. Primitives are written
in paint order; a comment marks where each layer starts.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, ClassVar
from xml.sax.saxutils import escape

from planner.domain.services.projection import (
    Circle,
    DisplayList,
    ElevationViewConfig,
    Line,
    PlanViewConfig,
    Polygon,
    Rect,
    Text,
    project_elevation,
    project_plan,
)
from planner.domain.value_objects import StructureWall
from planner.infrastructure.exporters.base import ExporterRegistry

if TYPE_CHECKING:
    from planner.domain.entities import ConfigurationModel

FONT_FAMILY = "Arial, sans-serif"
DASH_PATTERN = "6,4"


def _num(value: float) -> str:
    return f"{value:.2f}".rstrip("0").rstrip(".")


def _stroke_attrs(stroke: str, stroke_width: float, dashed: bool = False) -> str:
    attrs = f'stroke="{stroke}" stroke-width="{_num(stroke_width)}"'
    if dashed:
        attrs += f' stroke-dasharray="{DASH_PATTERN}"'
    return attrs


def _render_primitive(primitive) -> str:
    if isinstance(primitive, Rect):
        return (
            f'  <rect x="{_num(primitive.x)}" y="{_num(primitive.y)}" '
            f'width="{_num(primitive.width)}" height="{_num(primitive.height)}" '
            f'fill="{primitive.fill}" '
            f"{_stroke_attrs(primitive.stroke, primitive.stroke_width, primitive.dashed)}/>"
        )
    if isinstance(primitive, Polygon):
        points = " ".join(f"{_num(x)},{_num(y)}" for x, y in primitive.points)
        return (
            f'  <polygon points="{points}" fill="{primitive.fill}" '
            f"{_stroke_attrs(primitive.stroke, primitive.stroke_width)}/>"
        )
    if isinstance(primitive, Line):
        return (
            f'  <line x1="{_num(primitive.x1)}" y1="{_num(primitive.y1)}" '
            f'x2="{_num(primitive.x2)}" y2="{_num(primitive.y2)}" '
            f"{_stroke_attrs(primitive.stroke, primitive.stroke_width, primitive.dashed)}/>"
        )
    if isinstance(primitive, Circle):
        return (
            f'  <circle cx="{_num(primitive.cx)}" cy="{_num(primitive.cy)}" '
            f'r="{_num(primitive.r)}" fill="{primitive.fill}" '
            f"{_stroke_attrs(primitive.stroke, primitive.stroke_width)}/>"
        )
    if isinstance(primitive, Text):
        transform = ""
        if primitive.rotation:
            transform = (
                f' transform="rotate({_num(primitive.rotation)} '
                f'{_num(primitive.x)} {_num(primitive.y)})"'
            )
        return (
            f'  <text x="{_num(primitive.x)}" y="{_num(primitive.y)}" '
            f'text-anchor="{primitive.anchor}" dominant-baseline="middle" '
            f'font-family="{FONT_FAMILY}" font-size="{_num(primitive.size)}" '
            f'fill="{primitive.fill}"{transform}>{escape(primitive.text)}</text>'
        )
    raise TypeError(f"Unsupported primitive: {type(primitive).__name__}")


def render_svg(display: DisplayList) -> str:
    """Render a DisplayList as a standalone SVG document."""
    parts: list[str] = [
        f'<svg width="{_num(display.width)}" height="{_num(display.height)}" '
        f'xmlns="http://www.w3.org/2000/svg">',
    ]
    if display.title:
        parts.append(f"  <title>{escape(display.title)}</title>")

    current_layer = None
    for primitive in display.primitives:
        if primitive.layer != current_layer:
            current_layer = primitive.layer
            parts.append("")
            parts.append(f"  <!-- {current_layer.title()} -->")
        parts.append(_render_primitive(primitive))

    parts.append("")
    parts.append("</svg>")
    return "\n".join(parts)


@ExporterRegistry.register("svg")
class SvgExporter:
    """Plan or elevation drawing as SVG.

    Attributes:
        view: "plan" or "elevation".
        wall: Wall shown by an elevation.
        show_grid: Force the plan grid on or off; None uses the design setting.
        pixels_per_inch: Fixed plan scale; None fits the default canvas.
    """

    format_name: ClassVar[str] = "svg"
    file_extension: ClassVar[str] = "svg"

    def __init__(
        self,
        view: str = "plan",
        wall: StructureWall = StructureWall.FRONT,
        show_grid: bool | None = None,
        pixels_per_inch: float | None = None,
    ) -> None:
        if view not in ("plan", "elevation"):
            raise ValueError(f"Unknown view '{view}'. Expected 'plan' or 'elevation'")
        self.view = view
        self.wall = wall
        self.show_grid = show_grid
        self.pixels_per_inch = pixels_per_inch

    def project(self, model: ConfigurationModel) -> DisplayList:
        if self.view == "elevation":
            return project_elevation(model, ElevationViewConfig(wall=self.wall))
        return project_plan(
            model,
            PlanViewConfig(show_grid=self.show_grid, pixels_per_inch=self.pixels_per_inch),
        )

    def export(self, model: ConfigurationModel, path: Path) -> None:
        path.write_text(self.export_string(model), encoding="utf-8")

    def export_string(self, model: ConfigurationModel) -> str:
        return render_svg(self.project(model))
