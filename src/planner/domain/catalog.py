"""Static catalog of placeable items.

Adding an entry here is all that is needed to make a new cabinet, appliance
or opening available; nothing in the engine switches on catalog ids.
"""

from __future__ import annotations

from .entities import ApplianceSpec, CabinetSpec, CatalogItem, OpeningSpec
from .value_objects import ApplianceType, CabinetType, OpeningType, PlannerType

__all__ = [
    "APPLIANCE_CATALOG",
    "CABINET_CATALOG",
    "OPENING_CATALOG",
    "catalog_for",
    "get_catalog_item",
]

BASE_HEIGHT = 34.5
BASE_DEPTH = 24.0
WALL_HEIGHT = 30.0
WALL_DEPTH = 12.0
TALL_HEIGHT = 84.0


def _base(width: int, doors: int = 0, drawers: int = 0) -> CabinetSpec:
    return CabinetSpec(
        id=f"base-{width}",
        name=f'Base Cabinet {width}"',
        cabinet_type=CabinetType.BASE,
        width=width,
        height=BASE_HEIGHT,
        depth=BASE_DEPTH,
        door_count=doors,
        drawer_count=drawers,
    )


def _wall(width: int, doors: int) -> CabinetSpec:
    return CabinetSpec(
        id=f"wall-{width}",
        name=f'Wall Cabinet {width}"',
        cabinet_type=CabinetType.WALL,
        width=width,
        height=WALL_HEIGHT,
        depth=WALL_DEPTH,
        door_count=doors,
    )


def _tall(width: int) -> CabinetSpec:
    return CabinetSpec(
        id=f"tall-{width}",
        name=f'Pantry Cabinet {width}"',
        cabinet_type=CabinetType.TALL,
        width=width,
        height=TALL_HEIGHT,
        depth=BASE_DEPTH,
        door_count=2,
    )


CABINET_CATALOG: tuple[CabinetSpec, ...] = (
    _base(12, drawers=3),
    _base(15, drawers=3),
    _base(18, doors=1),
    _base(21, doors=1),
    _base(24, doors=2),
    _base(30, doors=2),
    _base(36, doors=2),
    _wall(12, 1),
    _wall(15, 1),
    _wall(18, 1),
    _wall(21, 1),
    _wall(24, 2),
    _wall(30, 2),
    _wall(36, 2),
    _tall(18),
    _tall(24),
    _tall(30),
    CabinetSpec(
        id="corner-base-36",
        name="Corner Base Cabinet",
        cabinet_type=CabinetType.CORNER_BASE,
        width=36,
        height=BASE_HEIGHT,
        depth=36,
        door_count=2,
    ),
    CabinetSpec(
        id="corner-wall-24",
        name="Corner Wall Cabinet",
        cabinet_type=CabinetType.CORNER_WALL,
        width=24,
        height=WALL_HEIGHT,
        depth=24,
        door_count=2,
    ),
    CabinetSpec(
        id="island-36x36",
        name='Island Base 36"x36"',
        cabinet_type=CabinetType.ISLAND,
        width=36,
        height=BASE_HEIGHT,
        depth=36,
        door_count=4,
    ),
    CabinetSpec(
        id="island-48x36",
        name='Island Base 48"x36"',
        cabinet_type=CabinetType.ISLAND,
        width=48,
        height=BASE_HEIGHT,
        depth=36,
        door_count=6,
    ),
)

APPLIANCE_CATALOG: tuple[ApplianceSpec, ...] = (
    ApplianceSpec("fridge-36", 'Refrigerator 36"', ApplianceType.REFRIGERATOR, 36, 70, 30, 1200.0),
    ApplianceSpec("fridge-33", 'Refrigerator 33"', ApplianceType.REFRIGERATOR, 33, 70, 30, 1000.0),
    ApplianceSpec("stove-30", 'Gas Range 30"', ApplianceType.STOVE, 30, 36, 28, 800.0),
    ApplianceSpec("dishwasher-24", 'Dishwasher 24"', ApplianceType.DISHWASHER, 24, 34, 24, 600.0),
    ApplianceSpec("microwave-30", 'Over-Range Microwave 30"', ApplianceType.MICROWAVE, 30, 17, 16, 300.0),
    ApplianceSpec("sink-33", 'Undermount Sink 33"', ApplianceType.SINK, 33, 9, 22, 250.0),
)

# Garage openings; sizes are the common stock sizes used by the templates.
OPENING_CATALOG: tuple[OpeningSpec, ...] = (
    OpeningSpec("overhead-9x7", "9' x 7' Overhead Door", OpeningType.OVERHEAD_DOOR, 108, 84),
    OpeningSpec("overhead-9x8", "9' x 8' Overhead Door", OpeningType.OVERHEAD_DOOR, 108, 96),
    OpeningSpec("overhead-10x8", "10' x 8' Overhead Door", OpeningType.OVERHEAD_DOOR, 120, 96),
    OpeningSpec("overhead-16x7", "16' x 7' Overhead Door", OpeningType.OVERHEAD_DOOR, 192, 84),
    OpeningSpec("walk-door-36", "3' x 6'8\" Steel Walk Door", OpeningType.WALK_DOOR, 36, 80),
    OpeningSpec("window-3x2", "3' x 2' Vinyl Window", OpeningType.WINDOW, 36, 24, sill_height=60),
    OpeningSpec("window-3x3", "3' x 3' Vinyl Window", OpeningType.WINDOW, 36, 36, sill_height=60),
    OpeningSpec("window-4x3", "4' x 3' Vinyl Window", OpeningType.WINDOW, 48, 36, sill_height=60),
)

_INDEX: dict[str, CatalogItem] = {
    entry.id: entry
    for entry in (*CABINET_CATALOG, *APPLIANCE_CATALOG, *OPENING_CATALOG)
}


def get_catalog_item(item_id: str) -> CatalogItem:
    """Look up a catalog record by id.

    Raises:
        KeyError: If no catalog entry has that id.
    """
    try:
        return _INDEX[item_id]
    except KeyError:
        raise KeyError(f"Unknown catalog item: {item_id}") from None


def catalog_for(planner_type: PlannerType) -> tuple[CatalogItem, ...]:
    """Return the entries offered by a planner variant."""
    if planner_type is PlannerType.GARAGE:
        return OPENING_CATALOG
    return (*CABINET_CATALOG, *APPLIANCE_CATALOG)
