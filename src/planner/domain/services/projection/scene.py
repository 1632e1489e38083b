"""3D scene projection.

Converts the model into solids in metres with a Y-up, room-centred origin.
A placed item's 2D corner maps to a 3D center by
``-room_extent / 2 + corner + item_extent / 2`` on each floor axis; its
height comes from the same anchor rule the elevations use.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ...value_objects import ItemKind, PlannerType, Point3D, RoofStyle, StructureWall
from ..geometry import (
    METERS_PER_FOOT,
    METERS_PER_INCH,
    ROOF_OVERHANG_FT,
    anchor_center_height,
    hip_inset,
    roof_profile,
)
from .plan import APPLIANCE_FILL, CABINET_FILLS

if TYPE_CHECKING:
    from ...entities import ConfigurationModel, Opening, PlacedItem

__all__ = ["Prism", "Scene", "SceneConfig", "Solid", "item_center", "project_scene"]

SLAB_THICKNESS_M = 0.1
INTERIOR_WALL_THICKNESS_M = 0.1
OPENING_DEPTH_M = 0.05

# Stud depth in inches plus 1/2" sheathing.
FRAMING_DEPTH_IN = {"2x4": 3.5 + 0.5, "2x6": 5.5 + 0.5}


@dataclass(frozen=True)
class Solid:
    """Axis-aligned box, optionally turned about the vertical axis.

    Attributes:
        name: Human-readable label.
        center: Box center in metres.
        size: (width, height, depth) in metres along x, y, z before rotation.
        rotation_y: Rotation about the vertical axis in radians.
        color: Hex display color.
        tag: Model id the solid was derived from.
    """

    name: str
    center: Point3D
    size: tuple[float, float, float]
    rotation_y: float = 0.0
    color: str = "#cccccc"
    tag: str | None = None

    def vertices(self) -> list[Point3D]:
        """The eight corners, bottom face first, counter-clockwise from -x -z."""
        hw, hh, hd = (s / 2 for s in self.size)
        cos_r = math.cos(self.rotation_y)
        sin_r = math.sin(self.rotation_y)
        corners = []
        for dy in (-hh, hh):
            for dx, dz in ((-hw, -hd), (hw, -hd), (hw, hd), (-hw, hd)):
                rx = dx * cos_r + dz * sin_r
                rz = -dx * sin_r + dz * cos_r
                corners.append(Point3D(self.center.x + rx, self.center.y + dy, self.center.z + rz))
        return corners


@dataclass(frozen=True)
class Prism:
    """Closed triangle mesh for non-box geometry such as roofs.

    Attributes:
        name: Human-readable label.
        vertices: Mesh vertices in metres.
        faces: Triangles as index triples into ``vertices``.
        color: Hex display color.
    """

    name: str
    vertices: tuple[Point3D, ...]
    faces: tuple[tuple[int, int, int], ...]
    color: str = "#94a3b8"


@dataclass
class Scene:
    """Everything the 3D view draws for one model snapshot."""

    solids: list[Solid] = field(default_factory=list)
    prisms: list[Prism] = field(default_factory=list)
    bounds: tuple[float, float, float] = (0.0, 0.0, 0.0)

    def tagged(self, tag: str) -> list[Solid]:
        return [solid for solid in self.solids if solid.tag == tag]

    @property
    def triangle_count(self) -> int:
        return 12 * len(self.solids) + sum(len(p.faces) for p in self.prisms)


@dataclass(frozen=True)
class SceneConfig:
    """Scene options.

    Attributes:
        include_structure: Emit slab, walls and roof.
        include_roof: Emit the roof (garage only).
    """

    include_structure: bool = True
    include_roof: bool = True


def item_center(model: ConfigurationModel, placed: PlacedItem) -> Point3D:
    """Scene-space center of a placed item."""
    room = model.room
    room_w = room.width * METERS_PER_FOOT
    room_l = room.length * METERS_PER_FOOT
    return Point3D(
        -room_w / 2 + placed.x * METERS_PER_INCH + placed.width * METERS_PER_INCH / 2,
        anchor_center_height(placed) * METERS_PER_INCH,
        -room_l / 2 + placed.y * METERS_PER_INCH + placed.depth * METERS_PER_INCH / 2,
    )


def project_scene(model: ConfigurationModel, config: SceneConfig | None = None) -> Scene:
    """Project the model into 3D solids."""
    config = config or SceneConfig()
    room = model.room
    room_w = room.width * METERS_PER_FOOT
    room_l = room.length * METERS_PER_FOOT
    room_h = room.height * METERS_PER_FOOT
    scene = Scene(bounds=(room_w, room_h, room_l))

    if config.include_structure:
        scene.solids.append(
            Solid("Floor", Point3D(0.0, -SLAB_THICKNESS_M / 2, 0.0),
                  (room_w, SLAB_THICKNESS_M, room_l), color="#d1d5db")
        )
        scene.solids.extend(_walls(model))
        for opening in model.structural_openings():
            scene.solids.append(_opening_solid(model, opening))
        if config.include_roof and model.planner_type is PlannerType.GARAGE:
            scene.prisms.append(_roof_prism(model))

    for placed in model.items:
        if placed.kind is ItemKind.CABINET:
            color = CABINET_FILLS.get(placed.item.cabinet_type, "#d4a574")
        else:
            color = APPLIANCE_FILL
        scene.solids.append(
            Solid(
                placed.name,
                item_center(model, placed),
                (placed.width * METERS_PER_INCH, placed.height * METERS_PER_INCH,
                 placed.depth * METERS_PER_INCH),
                rotation_y=-math.radians(placed.rotation),
                color=color,
                tag=placed.id,
            )
        )
    return scene


def _wall_thickness(model: ConfigurationModel) -> float:
    if model.planner_type is PlannerType.GARAGE:
        return FRAMING_DEPTH_IN[model.room.wall_framing.value] * METERS_PER_INCH
    return INTERIOR_WALL_THICKNESS_M


def _walls(model: ConfigurationModel) -> list[Solid]:
    room = model.room
    w = room.width * METERS_PER_FOOT
    d = room.length * METERS_PER_FOOT
    h = room.height * METERS_PER_FOOT
    t = _wall_thickness(model)
    y = h / 2
    return [
        Solid("Front Wall", Point3D(0.0, y, -d / 2 - t / 2), (w + 2 * t, h, t), color="#f8fafc"),
        Solid("Back Wall", Point3D(0.0, y, d / 2 + t / 2), (w + 2 * t, h, t), color="#f8fafc"),
        Solid("Left Wall", Point3D(-w / 2 - t / 2, y, 0.0), (t, h, d), color="#f1f5f9"),
        Solid("Right Wall", Point3D(w / 2 + t / 2, y, 0.0), (t, h, d), color="#f1f5f9"),
    ]


def _opening_solid(model: ConfigurationModel, opening: Opening) -> Solid:
    """Thin panel just outside the wall face where the opening is cut."""
    room = model.room
    w = room.width * METERS_PER_FOOT
    d = room.length * METERS_PER_FOOT
    t = _wall_thickness(model)
    along = (opening.offset_from_left + opening.width / 2) * METERS_PER_FOOT
    y = (opening.offset_from_floor + opening.height / 2) * METERS_PER_FOOT
    size_along = opening.width * METERS_PER_FOOT
    size_up = opening.height * METERS_PER_FOOT
    outside = t + OPENING_DEPTH_M / 2

    if opening.wall is StructureWall.FRONT:
        center = Point3D(-w / 2 + along, y, -d / 2 - outside)
        size = (size_along, size_up, OPENING_DEPTH_M)
    elif opening.wall is StructureWall.BACK:
        center = Point3D(-w / 2 + along, y, d / 2 + outside)
        size = (size_along, size_up, OPENING_DEPTH_M)
    elif opening.wall is StructureWall.LEFT:
        center = Point3D(-w / 2 - outside, y, -d / 2 + along)
        size = (OPENING_DEPTH_M, size_up, size_along)
    else:
        center = Point3D(w / 2 + outside, y, -d / 2 + along)
        size = (OPENING_DEPTH_M, size_up, size_along)
    color = "#dbeafe" if opening.is_door else "#e0f2fe"
    return Solid(opening.opening_type.value, center, size, color=color, tag=opening.id)


def _roof_prism(model: ConfigurationModel) -> Prism:
    """Extrude the gable-end profile along the length.

    Hip roofs pull their ridge vertices in from both ends so the ends slope.
    """
    room = model.room
    profile = roof_profile(room.roof_style, room.width, room.roof_pitch)
    overhang = ROOF_OVERHANG_FT
    wall_top = room.height
    half_w = room.width / 2
    z_front = -room.length / 2 - overhang
    z_back = room.length / 2 + overhang
    ridge_up = max(up for _, up in profile)
    inset = hip_inset(room.width, room.length) if room.roof_style is RoofStyle.HIP else 0.0

    vertices: list[Point3D] = []
    for z_end, direction in ((z_front, 1.0), (z_back, -1.0)):
        for along, up in profile:
            z = z_end
            if inset and up >= ridge_up and up > 0:
                z = z_end + direction * (inset + overhang)
            vertices.append(
                Point3D(
                    (along - half_w) * METERS_PER_FOOT,
                    (wall_top + up) * METERS_PER_FOOT,
                    z * METERS_PER_FOOT,
                )
            )

    n = len(profile)
    faces: list[tuple[int, int, int]] = []
    for i in range(1, n - 1):
        faces.append((0, i + 1, i))
        faces.append((n, n + i, n + i + 1))
    for i in range(n):
        j = (i + 1) % n
        faces.append((i, j, n + j))
        faces.append((i, n + j, n + i))
    return Prism("Roof", tuple(vertices), tuple(faces))
