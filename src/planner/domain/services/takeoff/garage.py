"""Garage take-off categories.

Each function is a pure ``ConfigurationModel -> list[MaterialLineItem]``
mapping. Quantities are rounded up to whole purchasable units.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from ...value_objects import OpeningType, RoofingMaterial, SidingType
from ..geometry import roof_area
from .models import MaterialLineItem

if TYPE_CHECKING:
    from ...entities import ConfigurationModel

__all__ = [
    "GARAGE_CATEGORIES",
    "foundation",
    "framing",
    "gross_wall_area",
    "net_wall_area",
    "roofing",
    "siding",
    "doors",
    "windows",
    "hardware",
    "electrical",
    "insulation",
]

SHEET_SQFT = 32
SQUARE_SQFT = 100
SLAB_SQFT_PER_CU_YD = 80  # 4" slab, waste folded in
TRUSS_SPACING_FT = 2

WALK_DOOR_DESCRIPTION = "3' x 6'8\" Steel Walk Door"


def gross_wall_area(model: ConfigurationModel) -> float:
    """Exterior wall area in square feet, openings included."""
    return model.room.perimeter * model.room.height


def net_wall_area(model: ConfigurationModel) -> float:
    """Exterior wall area less every door and window, never negative."""
    opening_area = sum(opening.area for opening in model.structural_openings())
    return max(0.0, gross_wall_area(model) - opening_area)


def _line(description: str, quantity: float, unit: str, notes: str | None = None,
          *, category: str) -> MaterialLineItem:
    return MaterialLineItem(category, description, math.ceil(quantity), unit, notes=notes)


def foundation(model: ConfigurationModel) -> list[MaterialLineItem]:
    room = model.room
    area = room.floor_area
    return [
        _line('4" Concrete Slab', area / SLAB_SQFT_PER_CU_YD, "cu yd",
              f'{area:.0f} sq ft @ 4" thick', category="Foundation"),
        _line("6mil Vapor Barrier", area / 100, "roll", "100 sq ft per roll",
              category="Foundation"),
        _line('Gravel Base (4" compacted)', area / SLAB_SQFT_PER_CU_YD, "cu yd",
              category="Foundation"),
        _line('Rebar #4 @ 18" o.c.', (room.width + room.length) * 2.5 / 20, "piece",
              "20 ft lengths", category="Foundation"),
        _line("Wire Mesh (6x6 W1.4xW1.4)", area / 150, "roll", "5x150 ft rolls",
              category="Foundation"),
    ]


def framing(model: ConfigurationModel) -> list[MaterialLineItem]:
    room = model.room
    lumber = room.wall_framing.value
    perimeter = room.perimeter
    door_count = sum(1 for o in model.openings if o.opening_type is OpeningType.OVERHEAD_DOOR)
    trusses = math.ceil(room.length / TRUSS_SPACING_FT) + 1
    wall_area = net_wall_area(model)
    roof = roof_area(room)

    lines = [
        _line(f"{lumber} x 8' Studs (Pre-cut)", perimeter * 0.75, "piece",
              'Wall studs @ 16" o.c.', category="Framing"),
        _line(f"{lumber} x 8' Plates (Top/Bottom)", math.ceil(perimeter / 8) * 3, "piece",
              "Bottom plate and double top plate", category="Framing"),
        _line(f"{lumber} x 12' Headers", door_count + 2, "piece",
              "For door and window openings", category="Framing"),
        _line("2x4 x 8' Blocking/Bracing", perimeter / 4, "piece", category="Framing"),
    ]
    if model.features.has_attic_trusses:
        lines.append(_line(f"{room.width:g}' Attic Trusses", trusses, "piece",
                           "Engineered trusses with storage space", category="Framing"))
    else:
        lines.append(_line(f"{room.width:g}' Standard Roof Trusses", trusses, "piece",
                           f"{room.roof_pitch:g}/12 pitch", category="Framing"))
    lines.append(_line('7/16" OSB Wall Sheathing', wall_area / SHEET_SQFT, "sheet",
                       f"{math.ceil(wall_area)} sq ft", category="Framing"))
    lines.append(_line('7/16" OSB Roof Sheathing', roof / SHEET_SQFT, "sheet",
                       f"{math.ceil(roof)} sq ft", category="Framing"))
    return lines


def roofing(model: ConfigurationModel) -> list[MaterialLineItem]:
    room = model.room
    area = roof_area(room)
    squares = area / SQUARE_SQFT
    lines = [_line("15# Felt Underlayment", area / 400, "roll", "400 sq ft per roll",
                   category="Roofing")]

    material = room.roofing_material
    if material is RoofingMaterial.ASPHALT_SHINGLE:
        lines.append(_line("Architectural Shingles", squares, "square",
                           f"{area:.0f} sq ft total", category="Roofing"))
    elif material is RoofingMaterial.METAL:
        lines.append(_line("Metal Roofing Panels", area, "sq ft", "3 ft wide panels",
                           category="Roofing"))
    elif material is RoofingMaterial.RUBBER:
        lines.append(_line("EPDM Rubber Membrane", squares, "square", category="Roofing"))

    lines.extend([
        _line("Ridge Cap", room.length / 3, "bundle", "3 ft coverage per bundle",
              category="Roofing"),
        _line("Drip Edge", room.perimeter / 10, "piece", "10 ft lengths", category="Roofing"),
        _line('Roofing Nails (1-1/4")', squares, "box", "1 box per square",
              category="Roofing"),
    ])
    return lines


_SIDING_LINES = {
    SidingType.VINYL: ("Vinyl Siding", SQUARE_SQFT, "square"),
    SidingType.WOOD: ("LP SmartSide Panels", SHEET_SQFT, "sheet"),
    SidingType.METAL: ("Metal Siding Panels", 1, "sq ft"),
    SidingType.FIBER_CEMENT: ("Fiber Cement Siding", SQUARE_SQFT, "square"),
}


def siding(model: ConfigurationModel) -> list[MaterialLineItem]:
    room = model.room
    gross = gross_wall_area(model)
    net = net_wall_area(model)
    description, coverage, unit = _SIDING_LINES[room.siding_type]
    return [
        _line("House Wrap (Tyvek)", gross / 200, "roll", "200 sq ft per roll",
              category="Siding"),
        _line(description, net / coverage, unit, f"{net:.0f} sq ft", category="Siding"),
        _line("1x4 Trim Boards", room.perimeter * 2 / 12, "piece",
              "12 ft lengths for corners and openings", category="Siding"),
        _line("1x6 Fascia Boards", room.perimeter / 12, "piece", "12 ft lengths",
              category="Siding"),
    ]


def doors(model: ConfigurationModel) -> list[MaterialLineItem]:
    lines = []
    door_number = 0
    for opening in model.structural_openings():
        if not opening.is_door:
            continue
        door_number += 1
        if opening.opening_type is OpeningType.OVERHEAD_DOOR:
            lines.append(_line(
                f"{opening.width:g}'x{opening.height:g}' Overhead Garage Door", 1, "each",
                f"Door #{door_number} - {opening.wall.value} wall", category="Doors",
            ))
            lines.append(_line("Garage Door Opener", 1, "each",
                               f"For {opening.width:g}' door", category="Doors"))
        else:
            lines.append(_line(WALK_DOOR_DESCRIPTION, 1, "each", "Pre-hung with frame",
                               category="Doors"))
    return lines


def windows(model: ConfigurationModel) -> list[MaterialLineItem]:
    found = [o for o in model.openings if o.opening_type is OpeningType.WINDOW]
    return [
        _line(f"{window.width:g}'x{window.height:g}' Vinyl Window", 1, "each",
              f"Window #{index} - {window.wall.value} wall", category="Windows")
        for index, window in enumerate(found, start=1)
    ]


def hardware(model: ConfigurationModel) -> list[MaterialLineItem]:
    room = model.room
    return [
        _line("16d Common Nails", 5, "lb", "Framing nails", category="Hardware"),
        _line("8d Common Nails", 3, "lb", "Sheathing nails", category="Hardware"),
        _line("Joist Hangers", 24, "piece", "For blocking", category="Hardware"),
        _line("Hurricane Ties", room.length / 2, "piece", "Truss-to-wall connections",
              category="Hardware"),
        _line("Construction Adhesive", 6, "tube", category="Hardware"),
        _line('Anchor Bolts (1/2" x 10")', room.perimeter / 4, "piece", "4 ft spacing max",
              category="Hardware"),
    ]


def electrical(model: ConfigurationModel) -> list[MaterialLineItem]:
    if not model.features.has_electrical:
        return []
    area = model.room.floor_area
    return [
        _line("100A Sub-Panel", 1, "each", "8-12 circuit capacity", category="Electrical"),
        _line("14/2 Romex Wire", area / 50, "roll", "250 ft per roll", category="Electrical"),
        _line("LED Shop Lights (4ft)", area / 100, "fixture", "1 per 100 sq ft",
              category="Electrical"),
        _line("Outlets (GFCI)", 4, "each", "Duplex receptacles", category="Electrical"),
        _line("Light Switches", 2, "each", category="Electrical"),
        _line("Junction Boxes", 8, "each", category="Electrical"),
    ]


def insulation(model: ConfigurationModel) -> list[MaterialLineItem]:
    if not model.features.is_insulated:
        return []
    walls = gross_wall_area(model)
    roof = roof_area(model.room)
    return [
        _line("R-13 Fiberglass Batts (Walls)", walls / 100, "bag", "100 sq ft per bag",
              category="Insulation"),
        _line("R-30 Fiberglass Batts (Ceiling)", roof / 100, "bag", "100 sq ft per bag",
              category="Insulation"),
        _line("Vapor Barrier (6mil)", (walls + roof) / 200, "roll", "200 sq ft per roll",
              category="Insulation"),
    ]


GARAGE_CATEGORIES = (
    foundation,
    framing,
    roofing,
    siding,
    doors,
    windows,
    hardware,
    electrical,
    insulation,
)
