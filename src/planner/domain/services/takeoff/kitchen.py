"""Kitchen take-off categories."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from ...value_objects import CabinetType
from .models import MaterialLineItem

if TYPE_CHECKING:
    from ...entities import ConfigurationModel, PlacedItem

__all__ = [
    "KITCHEN_CATEGORIES",
    "appliances",
    "cabinets",
    "countertop_area",
    "countertops",
    "hardware",
    "installation",
]

# Countertop depth in inches over a cabinet run.
COUNTER_DEPTH_IN = 25
ISLAND_COUNTER_DEPTH_IN = 36
EDGE_FACTOR = 1.5
BACKSPLASH_HEIGHT_FT = 1.5
COUNTERTOP_SECTION_SQFT = 20

_CABINET_GROUPS = (
    ("Base Cabinets", (CabinetType.BASE, CabinetType.CORNER_BASE, CabinetType.ISLAND,
                       CabinetType.PENINSULA)),
    ("Wall Cabinets", (CabinetType.WALL, CabinetType.CORNER_WALL)),
    ("Tall Cabinets", (CabinetType.TALL,)),
)


def _counter_cabinets(model: ConfigurationModel) -> list[PlacedItem]:
    return [c for c in model.cabinets if c.item.cabinet_type.is_counter_base]


def countertop_area(model: ConfigurationModel) -> float:
    """Countertop area in square feet over every counter-carrying cabinet."""
    total = 0.0
    for placed in _counter_cabinets(model):
        if placed.item.cabinet_type is CabinetType.ISLAND:
            depth = ISLAND_COUNTER_DEPTH_IN
        else:
            depth = COUNTER_DEPTH_IN
        total += placed.width * depth / 144
    return total


def cabinets(model: ConfigurationModel) -> list[MaterialLineItem]:
    """One line per distinct cabinet, finish and width, grouped by family."""
    default_finish = model.features.cabinet_finish
    lines = []
    for category, types in _CABINET_GROUPS:
        counts: dict[tuple[str, float, str], int] = {}
        prices: dict[tuple[str, float, str], float | None] = {}
        for placed in model.cabinets:
            if placed.item.cabinet_type not in types:
                continue
            finish = (placed.finish or default_finish).value
            key = (placed.name, placed.width, finish)
            counts[key] = counts.get(key, 0) + 1
            prices.setdefault(key, placed.item.unit_price)
        for key, count in counts.items():
            name, _, finish = key
            lines.append(MaterialLineItem(
                category, f"{name} - {finish} Finish", count, "ea", unit_price=prices[key],
            ))
    return lines


def countertops(model: ConfigurationModel) -> list[MaterialLineItem]:
    area = countertop_area(model)
    lines = []
    if area > 0:
        material = model.features.countertop_material.value
        edge = sum(c.width / 12 for c in _counter_cabinets(model)) * EDGE_FACTOR
        lines.append(MaterialLineItem("Countertops", f"{material} Countertop",
                                      math.ceil(area), "sq ft"))
        lines.append(MaterialLineItem("Countertops", "Countertop Edge Finishing",
                                      math.ceil(edge), "linear ft"))
    if model.features.has_backsplash:
        run = sum(c.width / 12 for c in model.cabinets
                  if c.item.cabinet_type is CabinetType.BASE)
        if run > 0:
            lines.append(MaterialLineItem("Countertops", "Tile Backsplash (Ceramic)",
                                          math.ceil(run * BACKSPLASH_HEIGHT_FT), "sq ft"))
    return lines


def appliances(model: ConfigurationModel) -> list[MaterialLineItem]:
    return [
        MaterialLineItem("Appliances", placed.name, 1, "ea", unit_price=placed.item.unit_price)
        for placed in model.appliances
    ]


def hardware(model: ConfigurationModel) -> list[MaterialLineItem]:
    found = model.cabinets
    if not found:
        return []
    door_total = sum(c.item.door_count for c in found)
    drawer_total = sum(c.item.drawer_count for c in found)
    lines = [
        MaterialLineItem("Hardware", "Cabinet Knobs/Pulls", door_total + drawer_total, "ea"),
        MaterialLineItem("Hardware", "Cabinet Hinges", door_total * 2, "ea"),
    ]
    if drawer_total > 0:
        lines.append(MaterialLineItem("Hardware", "Drawer Slides", drawer_total, "pair"))
    return lines


def installation(model: ConfigurationModel) -> list[MaterialLineItem]:
    lines = []
    cabinet_count = len(model.cabinets)
    if cabinet_count:
        lines.extend([
            MaterialLineItem("Installation", "Cabinet Installation Labor", cabinet_count, "ea"),
            MaterialLineItem("Installation", "Shims and Leveling Materials", 1, "set"),
            MaterialLineItem("Installation", "Cabinet Mounting Hardware", 1, "set"),
        ])
    area = countertop_area(model)
    if area > 0:
        lines.append(MaterialLineItem("Installation", "Countertop Installation Labor",
                                      math.ceil(area / COUNTERTOP_SECTION_SQFT), "section"))
    return lines


KITCHEN_CATEGORIES = (cabinets, countertops, appliances, hardware, installation)
