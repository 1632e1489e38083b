"""Unit tests for the item catalog and domain entities."""

import pytest

from planner.domain.catalog import (
    APPLIANCE_CATALOG,
    CABINET_CATALOG,
    OPENING_CATALOG,
    catalog_for,
    get_catalog_item,
)
from planner.domain.entities import (
    WALK_DOOR_ID,
    CabinetSpec,
    ConfigurationModel,
    Features,
    Opening,
    RoomSpec,
)
from planner.domain.value_objects import (
    CabinetType,
    ItemKind,
    OpeningType,
    PlannerType,
    StructureWall,
)


class TestCatalog:
    """Tests for catalog lookups."""

    def test_ids_are_unique(self) -> None:
        ids = [e.id for e in (*CABINET_CATALOG, *APPLIANCE_CATALOG, *OPENING_CATALOG)]
        assert len(ids) == len(set(ids))

    def test_get_catalog_item(self) -> None:
        item = get_catalog_item("base-24")
        assert item.kind is ItemKind.CABINET
        assert item.width == 24
        assert item.cabinet_type is CabinetType.BASE

    def test_unknown_id_raises_key_error(self) -> None:
        with pytest.raises(KeyError, match="Unknown catalog item"):
            get_catalog_item("base-99")

    def test_garage_offers_openings_only(self) -> None:
        assert all(e.kind is ItemKind.OPENING for e in catalog_for(PlannerType.GARAGE))

    def test_kitchen_offers_cabinets_and_appliances(self) -> None:
        kinds = {e.kind for e in catalog_for(PlannerType.KITCHEN)}
        assert kinds == {ItemKind.CABINET, ItemKind.APPLIANCE}

    def test_appliances_are_priced(self) -> None:
        assert all(a.unit_price is not None for a in APPLIANCE_CATALOG)

    def test_spec_rejects_non_positive_dimensions(self) -> None:
        with pytest.raises(ValueError):
            CabinetSpec("bad", "Bad", CabinetType.BASE, width=0, height=30, depth=24)


class TestRoomSpec:
    """Tests for RoomSpec clamping."""

    def test_sanitized_clamps_values(self) -> None:
        room = RoomSpec.sanitized(width=0, length=20, height=9, roof_pitch=40, bays=7,
                                  grid_size=0.1)
        assert room.width == 1.0
        assert room.roof_pitch == 24.0
        assert room.bays == 3
        assert room.grid_size == 0.5

    def test_with_changes_keeps_other_fields(self) -> None:
        room = RoomSpec(width=20, length=22, height=9).with_changes(width=-5)
        assert room.width == 1.0
        assert room.length == 22

    def test_derived_measurements(self) -> None:
        room = RoomSpec(width=20, length=22, height=9)
        assert room.width_in == 240
        assert room.floor_area == 440
        assert room.perimeter == 84


class TestStructuralOpenings:
    """Tests for the walk door implied by the feature flag."""

    def test_walk_door_added_for_garage(self) -> None:
        model = ConfigurationModel(
            planner_type=PlannerType.GARAGE,
            room=RoomSpec(width=20, length=20, height=9),
            features=Features(has_walk_door=True, walk_door_wall=StructureWall.RIGHT),
        )
        openings = model.structural_openings()
        assert len(openings) == 1
        door = openings[0]
        assert door.id == WALK_DOOR_ID
        assert door.opening_type is OpeningType.WALK_DOOR
        assert door.wall is StructureWall.RIGHT
        assert door.offset_from_left == pytest.approx(16.0)

    def test_no_walk_door_for_kitchen(self) -> None:
        model = ConfigurationModel(
            planner_type=PlannerType.KITCHEN,
            room=RoomSpec(width=12, length=14, height=8),
            features=Features(has_walk_door=True),
        )
        assert model.structural_openings() == []

    def test_opening_from_spec_converts_to_feet(self) -> None:
        opening = Opening.from_spec(get_catalog_item("window-3x2"), "w1", StructureWall.LEFT, 4)
        assert opening.width == 3
        assert opening.height == 2
        assert opening.offset_from_floor == 5
        assert opening.area == 6
        assert not opening.is_door
