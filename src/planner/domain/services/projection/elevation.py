"""Front and side elevation projections.

An elevation looks straight at one wall: the horizontal axis runs along the
wall, the vertical axis is height above the floor. Items are drawn with the
same anchor rule the 3D scene uses, so a wall cabinet sits at the same
height in both views. Rotation is not reflected here; items are projected
with their unrotated extents.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ...value_objects import ItemKind, OpeningType, PlannerType, RoofStyle, StructureWall
from ..geometry import (
    INCHES_PER_FOOT,
    GAMBREL_BREAK_RATIO,
    ROOF_OVERHANG_FT,
    anchor_base_height,
    roof_peak,
    roof_profile,
    roof_rise,
    roof_side_profile,
)
from .display_list import DisplayList, Line, Polygon, Rect, Text
from .plan import APPLIANCE_FILL, CABINET_FILLS, OPENING_STYLES

if TYPE_CHECKING:
    from ...entities import ConfigurationModel, PlacedItem

__all__ = ["ElevationViewConfig", "project_elevation"]

WALL_FILL = "#f8fafc"
ROOF_FILL = "#94a3b8"
GROUND_STROKE = "#475569"

_VIEW_TITLES = {
    StructureWall.FRONT: "Front Elevation",
    StructureWall.BACK: "Back Elevation",
    StructureWall.LEFT: "Left Side Elevation",
    StructureWall.RIGHT: "Right Side Elevation",
}


@dataclass(frozen=True)
class ElevationViewConfig:
    """View settings for an elevation.

    Attributes:
        wall: Which wall is viewed; front/back show the width, left/right the length.
        canvas_width: Canvas width in pixels.
        canvas_height: Canvas height in pixels.
        padding: Margin in pixels.
        pixels_per_foot: Fixed scale; when None the drawing is fit to the canvas.
        show_labels: Draw dimension and opening labels.
    """

    wall: StructureWall = StructureWall.FRONT
    canvas_width: float = 800.0
    canvas_height: float = 400.0
    padding: float = 40.0
    pixels_per_foot: float | None = None
    show_labels: bool = True


def _roof_outline(model: ConfigurationModel, wall: StructureWall) -> list[tuple[float, float]]:
    room = model.room
    if wall.runs_along_width:
        return roof_profile(room.roof_style, room.width, room.roof_pitch)
    return roof_side_profile(room.roof_style, room.width, room.length, room.roof_pitch)


def project_elevation(
    model: ConfigurationModel, config: ElevationViewConfig | None = None
) -> DisplayList:
    """Project the model onto one wall's elevation."""
    config = config or ElevationViewConfig()
    room = model.room
    wall = config.wall
    span = room.width if wall.runs_along_width else room.length
    has_roof = model.planner_type is PlannerType.GARAGE
    peak = roof_peak(room.roof_style, room.width, room.roof_pitch) if has_roof else 0.0
    overhang = ROOF_OVERHANG_FT if has_roof else 0.0

    if config.pixels_per_foot is not None:
        scale = config.pixels_per_foot
        width = (span + 2 * overhang) * scale + 2 * config.padding
        height = (room.height + peak) * scale + 2 * config.padding
    else:
        width, height = config.canvas_width, config.canvas_height
        scale = min(
            (width - 2 * config.padding) / (span + 2 * overhang),
            (height - 2 * config.padding) / (room.height + peak),
        )

    left = config.padding + overhang * scale
    ground = config.padding + (room.height + peak) * scale
    eave = ground - room.height * scale

    def to_canvas(along: float, up: float) -> tuple[float, float]:
        """Feet along the wall and above the floor to pixels."""
        return (left + along * scale, ground - up * scale)

    display = DisplayList(width, height, title=_VIEW_TITLES[wall])
    display.add(Rect(0, 0, width, height, fill="#ffffff", stroke="none", layer="BACKGROUND"))
    display.add(Rect(left, eave, span * scale, room.height * scale, fill=WALL_FILL,
                     stroke="#1e293b", stroke_width=2.0, layer="WALLS"))

    if has_roof:
        outline = _roof_outline(model, wall)
        points = tuple(to_canvas(along, room.height + up) for along, up in outline)
        display.add(Polygon(points, fill=ROOF_FILL, stroke="#334155", stroke_width=2.0, layer="ROOF"))
        if not wall.runs_along_width and room.roof_style is RoofStyle.GAMBREL:
            knee = room.height + roof_rise(room.width, room.roof_pitch) * GAMBREL_BREAK_RATIO
            x1, y1 = to_canvas(-overhang, knee)
            x2, y2 = to_canvas(span + overhang, knee)
            display.add(Line(x1, y1, x2, y2, stroke="#334155", layer="ROOF"))

    for opening in model.openings_on(wall):
        fill, stroke = OPENING_STYLES[opening.opening_type]
        x, y = to_canvas(opening.offset_from_left, opening.offset_from_floor + opening.height)
        w = opening.width * scale
        h = opening.height * scale
        if opening.opening_type is OpeningType.OVERHEAD_DOOR:
            fill = "#dbeafe"
        display.add(Rect(x, y, w, h, fill=fill, stroke=stroke, stroke_width=2.0,
                         layer="OPENINGS", tag=opening.id))
        if opening.opening_type is OpeningType.OVERHEAD_DOOR:
            for i in range(1, 4):
                display.add(Line(x, y + h * i / 4, x + w, y + h * i / 4, stroke=stroke,
                                 layer="OPENINGS", tag=opening.id))
        elif opening.opening_type is OpeningType.WINDOW:
            display.add(Line(x + w / 2, y, x + w / 2, y + h, stroke=stroke,
                             layer="OPENINGS", tag=opening.id))

    for placed in model.items:
        display.add(_item_rect(placed, wall, to_canvas, scale))

    pad = config.padding
    display.add(Line(pad / 2, ground, width - pad / 2, ground, stroke=GROUND_STROKE,
                     stroke_width=2.0, layer="GROUND"))

    if config.show_labels:
        mid_x, _ = to_canvas(span / 2, 0)
        display.add(Text(mid_x, ground + 18, f"{span:g}'", size=12, fill="#64748b"))
        wall_x, wall_y = to_canvas(0, room.height / 2)
        display.add(Text(wall_x - 12, wall_y, f"{room.height:g}'", size=12,
                         fill="#64748b", rotation=-90.0))
        display.add(Text(width / 2, pad / 2, display.title, size=14, fill="#1e293b"))
    return display


def _item_rect(placed: PlacedItem, wall: StructureWall, to_canvas, scale: float) -> Rect:
    if wall.runs_along_width:
        along, extent = placed.x, placed.width
    else:
        along, extent = placed.y, placed.depth
    base = anchor_base_height(placed) / INCHES_PER_FOOT
    top = base + placed.height / INCHES_PER_FOOT
    x, y = to_canvas(along / INCHES_PER_FOOT, top)
    if placed.kind is ItemKind.CABINET:
        fill = CABINET_FILLS.get(placed.item.cabinet_type, "#d4a574")
    else:
        fill = APPLIANCE_FILL
    return Rect(x, y, extent / INCHES_PER_FOOT * scale, placed.height / INCHES_PER_FOOT * scale,
                fill=fill, stroke="#8b5a2b", layer="ITEMS", tag=placed.id)
