"""Shared geometry for placement and every projection.

Unit constants, rotation helpers, the vertical anchor rule and the roof
profile all live here so the plan, elevation and 3D views cannot drift apart.
Room coordinates are inches with the origin at the top-left (north-west)
corner, x growing east and y growing south.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from ..value_objects import Point2D, RoofStyle

if TYPE_CHECKING:
    from ..entities import PlacedItem, RoomSpec

__all__ = [
    "INCHES_PER_FOOT",
    "METERS_PER_FOOT",
    "METERS_PER_INCH",
    "ROOF_WASTE_FACTORS",
    "ROTATION_SNAP_DEGREES",
    "WALL_MOUNT_HEIGHT_IN",
    "anchor_base_height",
    "anchor_center_height",
    "clamp",
    "hip_inset",
    "item_corners",
    "normalize_angle",
    "roof_area",
    "roof_peak",
    "roof_profile",
    "roof_rise",
    "roof_side_profile",
    "rotate_point",
    "rotated_center",
    "rotation_handle",
    "slope_length",
    "snap_angle",
    "to_local",
]

INCHES_PER_FOOT = 12.0
METERS_PER_INCH = 0.0254
METERS_PER_FOOT = 0.3048

# Wall cabinets hang with their bottom 1.2 m above the floor.
WALL_MOUNT_HEIGHT_M = 1.2
WALL_MOUNT_HEIGHT_IN = WALL_MOUNT_HEIGHT_M / METERS_PER_INCH

ROTATION_SNAP_DEGREES = 15.0

ROOF_WASTE_FACTORS: dict[RoofStyle, float] = {
    RoofStyle.GABLE: 1.10,
    RoofStyle.HIP: 1.15,
    RoofStyle.GAMBREL: 1.12,
    RoofStyle.FLAT: 1.05,
}

GAMBREL_BREAK_RATIO = 0.55
FLAT_ROOF_BAND_FT = 1.0
ROOF_OVERHANG_FT = 1.0


def clamp(value: float, low: float, high: float) -> float:
    """Clamp ``value`` into [low, high]; an empty range collapses to ``low``."""
    if high < low:
        return low
    return max(low, min(high, value))


def normalize_angle(degrees: float) -> float:
    """Wrap an angle into [0, 360). Non-finite input maps to 0."""
    if not math.isfinite(degrees):
        return 0.0
    wrapped = math.fmod(degrees, 360.0)
    if wrapped < 0:
        wrapped += 360.0
    if wrapped >= 360.0 or wrapped == 0.0:
        return 0.0
    return wrapped


def snap_angle(degrees: float, step: float = ROTATION_SNAP_DEGREES) -> float:
    """Round to the nearest ``step`` degrees and normalize."""
    if not math.isfinite(degrees):
        return 0.0
    return normalize_angle(round(degrees / step) * step)


def rotate_point(x: float, y: float, degrees: float) -> tuple[float, float]:
    """Rotate a vector about the origin (clockwise on screen, y down)."""
    theta = math.radians(degrees)
    cos_t = math.cos(theta)
    sin_t = math.sin(theta)
    return (x * cos_t - y * sin_t, x * sin_t + y * cos_t)


def item_corners(item: PlacedItem) -> list[Point2D]:
    """Corners of the rotated footprint, clockwise from the anchor."""
    local = [(0.0, 0.0), (item.width, 0.0), (item.width, item.depth), (0.0, item.depth)]
    corners = []
    for lx, ly in local:
        rx, ry = rotate_point(lx, ly, item.rotation)
        corners.append(Point2D(item.x + rx, item.y + ry))
    return corners


def rotated_center(item: PlacedItem) -> Point2D:
    """Center of the footprint after rotation about the anchor corner."""
    cx, cy = rotate_point(item.width / 2, item.depth / 2, item.rotation)
    return Point2D(item.x + cx, item.y + cy)


def rotation_handle(item: PlacedItem) -> Point2D:
    """Position of the rotation handle: the rotated far corner."""
    hx, hy = rotate_point(item.width, item.depth, item.rotation)
    return Point2D(item.x + hx, item.y + hy)


def to_local(item: PlacedItem, px: float, py: float) -> tuple[float, float]:
    """Map a room point into the item's unrotated local frame."""
    return rotate_point(px - item.x, py - item.y, -item.rotation)


def anchor_base_height(item: PlacedItem) -> float:
    """Height of the item's bottom face above the floor, in inches."""
    if item.is_wall_mounted:
        return WALL_MOUNT_HEIGHT_IN
    return 0.0


def anchor_center_height(item: PlacedItem) -> float:
    """Height of the item's vertical center above the floor, in inches."""
    return anchor_base_height(item) + item.height / 2


def roof_rise(span: float, pitch: float) -> float:
    """Rise over half the span for a pitch given as rise per 12 of run."""
    return (span / 2) * (pitch / 12)


def slope_length(span: float, pitch: float) -> float:
    run = span / 2
    rise = roof_rise(span, pitch)
    return math.sqrt(run * run + rise * rise)


def roof_area(room: RoomSpec) -> float:
    """Roof surface area in square feet, waste factor included."""
    waste = ROOF_WASTE_FACTORS.get(room.roof_style, 1.10)
    if room.roof_style is RoofStyle.FLAT:
        return room.width * room.length * waste
    return slope_length(room.width, room.roof_pitch) * 2 * room.length * waste


def roof_profile(
    style: RoofStyle,
    span: float,
    pitch: float,
    overhang: float = ROOF_OVERHANG_FT,
) -> list[tuple[float, float]]:
    """Roof outline above the wall plate, as (along, up) pairs in feet.

    ``along`` runs from ``-overhang`` to ``span + overhang``; ``up`` is the
    height above the top of the wall.
    """
    rise = roof_rise(span, pitch)
    left = -overhang
    right = span + overhang
    if style is RoofStyle.GABLE:
        return [(left, 0.0), (span / 2, rise), (right, 0.0)]
    if style is RoofStyle.HIP:
        return [(left, 0.0), (span * 0.25, rise), (span * 0.75, rise), (right, 0.0)]
    if style is RoofStyle.GAMBREL:
        run = span / 2
        knee = rise * GAMBREL_BREAK_RATIO
        return [
            (left, 0.0),
            (run * 0.3, knee),
            (span / 2 - run * 0.2, rise),
            (span / 2 + run * 0.2, rise),
            (span - run * 0.3, knee),
            (right, 0.0),
        ]
    return [(left, 0.0), (left, FLAT_ROOF_BAND_FT), (right, FLAT_ROOF_BAND_FT), (right, 0.0)]


def hip_inset(span: float, length: float) -> float:
    """How far a hip roof's ridge stops short of each end wall, in feet."""
    return min(span / 2, length / 2)


def roof_side_profile(
    style: RoofStyle,
    span: float,
    length: float,
    pitch: float,
    overhang: float = ROOF_OVERHANG_FT,
) -> list[tuple[float, float]]:
    """Roof outline seen from a side wall (ridge running left to right).

    ``span`` is the gable-end width that sets the rise; ``length`` is the
    wall being viewed.
    """
    rise = roof_rise(span, pitch)
    left = -overhang
    right = length + overhang
    if style is RoofStyle.HIP:
        inset = hip_inset(span, length)
        return [(left, 0.0), (inset, rise), (length - inset, rise), (right, 0.0)]
    if style is RoofStyle.FLAT:
        rise = FLAT_ROOF_BAND_FT
    return [(left, 0.0), (left, rise), (right, rise), (right, 0.0)]


def roof_peak(style: RoofStyle, span: float, pitch: float) -> float:
    """Highest point of the roof above the wall plate, in feet."""
    return max(up for _, up in roof_profile(style, span, pitch))
