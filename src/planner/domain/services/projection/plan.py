"""Top-down plan projection.

``project_plan`` is a pure function of the model and a ``PlanViewConfig``.
Room inches map to canvas pixels by a single uniform scale plus padding; the
returned ``PlanView`` also maps pointer pixels back to room inches so a host
can feed the gesture state machine.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ...value_objects import CabinetType, ItemKind, OpeningType, PlannerType, StructureWall
from ..geometry import INCHES_PER_FOOT, item_corners, rotate_point, rotated_center, rotation_handle
from .display_list import Circle, DisplayList, Line, Polygon, Rect, Text

if TYPE_CHECKING:
    from ...entities import ConfigurationModel, Opening, PlacedItem

__all__ = ["PlanView", "PlanViewConfig", "plan_view", "project_plan"]

HANDLE_RADIUS_PX = 10.0
OPENING_THICKNESS_PX = 6.0

ROOM_STROKE = "#1e293b"
GRID_STROKE = "#e2e8f0"
SELECTED_STROKE = "#2563eb"

CABINET_FILLS: dict[CabinetType, str] = {
    CabinetType.BASE: "#d4a574",
    CabinetType.WALL: "#e8c9a0",
    CabinetType.TALL: "#b8875a",
    CabinetType.CORNER_BASE: "#c9955f",
    CabinetType.CORNER_WALL: "#e0bb8c",
    CabinetType.ISLAND: "#c19a6b",
    CabinetType.PENINSULA: "#c19a6b",
}
APPLIANCE_FILL = "#cbd5e1"

OPENING_STYLES: dict[OpeningType, tuple[str, str]] = {
    OpeningType.OVERHEAD_DOOR: ("#3b82f6", "#2563eb"),
    OpeningType.WALK_DOOR: ("#d1fae5", "#10b981"),
    OpeningType.SWING_DOOR: ("#d1fae5", "#10b981"),
    OpeningType.WINDOW: ("#e0f2fe", "#06b6d4"),
    OpeningType.PASSTHROUGH: ("#f1f5f9", "#64748b"),
}


@dataclass(frozen=True)
class PlanViewConfig:
    """View settings for the plan.

    Attributes:
        canvas_width: Canvas width in pixels (ignored when ``pixels_per_inch`` is set).
        canvas_height: Canvas height in pixels (ignored when ``pixels_per_inch`` is set).
        padding: Margin around the room in pixels.
        pixels_per_inch: Fixed scale; when None the room is fit to the canvas.
        show_grid: Overrides the model's grid flag when not None.
        selected_id: Item drawn highlighted with its rotation handle.
        show_labels: Draw item names and dimensions.
    """

    canvas_width: float = 800.0
    canvas_height: float = 600.0
    padding: float = 20.0
    pixels_per_inch: float | None = None
    show_grid: bool | None = None
    selected_id: str | None = None
    show_labels: bool = True


@dataclass(frozen=True)
class PlanView:
    """Resolved plan transform between room inches and canvas pixels."""

    scale: float
    padding: float
    width: float
    height: float

    def to_canvas(self, x: float, y: float) -> tuple[float, float]:
        return (self.padding + x * self.scale, self.padding + y * self.scale)

    def to_room(self, px: float, py: float) -> tuple[float, float]:
        return ((px - self.padding) / self.scale, (py - self.padding) / self.scale)

    def length(self, inches: float) -> float:
        return inches * self.scale


def plan_view(model: ConfigurationModel, config: PlanViewConfig | None = None) -> PlanView:
    """Resolve the scale and canvas size for a model."""
    config = config or PlanViewConfig()
    room = model.room
    if config.pixels_per_inch is not None:
        scale = config.pixels_per_inch
        return PlanView(
            scale=scale,
            padding=config.padding,
            width=room.width_in * scale + 2 * config.padding,
            height=room.length_in * scale + 2 * config.padding,
        )
    usable_w = max(config.canvas_width - 2 * config.padding, 1.0)
    usable_h = max(config.canvas_height - 2 * config.padding, 1.0)
    scale = min(usable_w / room.width_in, usable_h / room.length_in)
    return PlanView(scale, config.padding, config.canvas_width, config.canvas_height)


def project_plan(
    model: ConfigurationModel, config: PlanViewConfig | None = None
) -> DisplayList:
    """Project the model into a top-down display list."""
    config = config or PlanViewConfig()
    view = plan_view(model, config)
    room = model.room
    display = DisplayList(view.width, view.height, title="Floor Plan (Top View)")

    display.add(Rect(0, 0, view.width, view.height, fill="#ffffff", stroke="none", layer="BACKGROUND"))

    show_grid = model.show_grid if config.show_grid is None else config.show_grid
    if show_grid:
        display.extend(_grid_lines(model, view))

    ox, oy = view.to_canvas(0, 0)
    display.add(
        Rect(ox, oy, view.length(room.width_in), view.length(room.length_in),
             stroke=ROOM_STROKE, stroke_width=3.0, layer="WALLS")
    )

    if model.planner_type is PlannerType.GARAGE and room.bays > 1:
        bay_width = room.width_in / room.bays
        for i in range(1, room.bays):
            x, _ = view.to_canvas(bay_width * i, 0)
            display.add(Line(x, oy, x, oy + view.length(room.length_in),
                             stroke="#94a3b8", dashed=True, layer="BAYS"))

    for opening in model.structural_openings():
        display.extend(_opening_primitives(opening, model, view, config.show_labels))

    for placed in model.items:
        selected = placed.id == config.selected_id
        display.extend(_item_primitives(placed, view, selected, config.show_labels))

    if config.show_labels:
        display.extend(_dimension_labels(model, view))
    return display


def _grid_lines(model: ConfigurationModel, view: PlanView) -> list[Line]:
    room = model.room
    lines: list[Line] = []
    steps_x = int(math.floor(room.width_in / room.grid_size))
    steps_y = int(math.floor(room.length_in / room.grid_size))
    _, top = view.to_canvas(0, 0)
    _, bottom = view.to_canvas(0, room.length_in)
    left, _ = view.to_canvas(0, 0)
    right, _ = view.to_canvas(room.width_in, 0)
    for i in range(1, steps_x + 1):
        x, _ = view.to_canvas(i * room.grid_size, 0)
        lines.append(Line(x, top, x, bottom, stroke=GRID_STROKE, stroke_width=0.5, layer="GRID"))
    for j in range(1, steps_y + 1):
        _, y = view.to_canvas(0, j * room.grid_size)
        lines.append(Line(left, y, right, y, stroke=GRID_STROKE, stroke_width=0.5, layer="GRID"))
    return lines


def _opening_primitives(
    opening: Opening, model: ConfigurationModel, view: PlanView, show_labels: bool
) -> list:
    room = model.room
    fill, stroke = OPENING_STYLES[opening.opening_type]
    along = opening.offset_from_left * INCHES_PER_FOOT
    span = view.length(opening.width * INCHES_PER_FOOT)
    half = OPENING_THICKNESS_PX / 2

    if opening.wall.runs_along_width:
        wall_y = 0.0 if opening.wall is StructureWall.FRONT else room.length_in
        x, y = view.to_canvas(along, wall_y)
        rect = Rect(x, y - half, span, OPENING_THICKNESS_PX, fill=fill, stroke=stroke,
                    stroke_width=2.0, layer="OPENINGS", tag=opening.id)
        label_at = (x + span / 2, y - 12 if opening.wall is StructureWall.FRONT else y + 18)
        dividers = [
            Line(x + span * i / 4, y - half, x + span * i / 4, y + half,
                 stroke="#60a5fa", layer="OPENINGS", tag=opening.id)
            for i in range(1, 4)
        ]
    else:
        wall_x = 0.0 if opening.wall is StructureWall.LEFT else room.width_in
        x, y = view.to_canvas(wall_x, along)
        rect = Rect(x - half, y, OPENING_THICKNESS_PX, span, fill=fill, stroke=stroke,
                    stroke_width=2.0, layer="OPENINGS", tag=opening.id)
        label_at = (x - 14 if opening.wall is StructureWall.LEFT else x + 14, y + span / 2)
        dividers = [
            Line(x - half, y + span * i / 4, x + half, y + span * i / 4,
                 stroke="#60a5fa", layer="OPENINGS", tag=opening.id)
            for i in range(1, 4)
        ]

    primitives: list = [rect]
    if opening.opening_type is OpeningType.OVERHEAD_DOOR:
        primitives.extend(dividers)
    if show_labels:
        primitives.append(
            Text(label_at[0], label_at[1], _opening_label(opening), size=11,
                 fill=stroke, tag=opening.id)
        )
    return primitives


def _opening_label(opening: Opening) -> str:
    size = f"{opening.width:g}' × {opening.height:g}'"
    if opening.opening_type is OpeningType.OVERHEAD_DOOR:
        return f"{size} OH"
    if opening.opening_type is OpeningType.WALK_DOOR:
        return f"{opening.width:g}' Walk"
    return size


def _item_fill(placed: PlacedItem) -> str:
    if placed.kind is ItemKind.CABINET:
        return CABINET_FILLS.get(placed.item.cabinet_type, "#d4a574")
    return APPLIANCE_FILL


def _local_to_canvas(placed: PlacedItem, view: PlanView, lx: float, ly: float) -> tuple[float, float]:
    rx, ry = rotate_point(lx, ly, placed.rotation)
    return view.to_canvas(placed.x + rx, placed.y + ry)


def _item_primitives(
    placed: PlacedItem, view: PlanView, selected: bool, show_labels: bool
) -> list:
    points = tuple(view.to_canvas(c.x, c.y) for c in item_corners(placed))
    primitives: list = [
        Polygon(
            points,
            fill=_item_fill(placed),
            stroke=SELECTED_STROKE if selected else "#8b5a2b",
            stroke_width=2.0 if selected else 1.0,
            layer="ITEMS",
            tag=placed.id,
        )
    ]

    # Door splits run front to back; drawer fronts run across the width.
    if placed.kind is ItemKind.CABINET:
        doors = placed.item.door_count
        drawers = placed.item.drawer_count
        for i in range(1, doors):
            lx = placed.width * i / doors
            x1, y1 = _local_to_canvas(placed, view, lx, 0)
            x2, y2 = _local_to_canvas(placed, view, lx, placed.depth)
            primitives.append(Line(x1, y1, x2, y2, stroke="#8b5a2b", stroke_width=0.5,
                                   layer="ITEMS", tag=placed.id))
        for j in range(1, drawers):
            ly = placed.depth * j / drawers
            x1, y1 = _local_to_canvas(placed, view, 0, ly)
            x2, y2 = _local_to_canvas(placed, view, placed.width, ly)
            primitives.append(Line(x1, y1, x2, y2, stroke="#8b5a2b", stroke_width=0.5,
                                   layer="ITEMS", tag=placed.id))

    if show_labels:
        center = rotated_center(placed)
        cx, cy = view.to_canvas(center.x, center.y)
        primitives.append(Text(cx, cy, placed.name, size=10, rotation=placed.rotation, tag=placed.id))

    if selected:
        handle = rotation_handle(placed)
        hx, hy = view.to_canvas(handle.x, handle.y)
        primitives.append(Circle(hx, hy, HANDLE_RADIUS_PX, fill="#ffffff",
                                 stroke=SELECTED_STROKE, stroke_width=2.0,
                                 layer="HANDLES", tag=placed.id))
    return primitives


def _dimension_labels(model: ConfigurationModel, view: PlanView) -> list[Text]:
    room = model.room
    top_x, top_y = view.to_canvas(room.width_in / 2, 0)
    left_x, left_y = view.to_canvas(0, room.length_in / 2)
    return [
        Text(top_x, top_y - 6, f"{room.width:g}'", size=12, fill="#64748b"),
        Text(left_x - 6, left_y, f"{room.length:g}'", size=12, fill="#64748b", rotation=-90.0),
    ]
