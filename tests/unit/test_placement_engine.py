"""Unit tests for the PlacementEngine."""

import logging
import math

import pytest

from planner.domain.catalog import get_catalog_item
from planner.domain.entities import ConfigurationModel, Opening
from planner.domain.services.geometry import rotated_center
from planner.domain.services.placement import PlacementEngine, default_id_factory
from planner.domain.value_objects import ItemWall, OpeningType, StructureWall


@pytest.fixture
def engine(kitchen_model: ConfigurationModel, id_factory) -> PlacementEngine:
    return PlacementEngine(kitchen_model, id_factory=id_factory)


class TestAdd:
    """Tests for placing catalog items."""

    def test_add_uses_id_factory(self, engine: PlacementEngine) -> None:
        placed = engine.add(get_catalog_item("base-24"), 10, 0)
        assert placed.id == "cabinet-1"
        assert engine.model.items == [placed]

    def test_add_clamps_into_room(self, engine: PlacementEngine) -> None:
        """A 12x14 ft room is 144x168 in; the corner is clamped, never rejected."""
        placed = engine.add(get_catalog_item("base-24"), 500, -40)
        assert (placed.x, placed.y) == (120, 0)

    def test_add_snaps_when_enabled(self, engine: PlacementEngine) -> None:
        engine.update_room(snap_enabled=True)
        placed = engine.add(get_catalog_item("base-24"), 13, 17)
        assert (placed.x, placed.y) == (12, 18)

    def test_add_keeps_wall_assignment(self, engine: PlacementEngine) -> None:
        placed = engine.add(get_catalog_item("base-24"), 0, 36, wall=ItemWall.WEST)
        assert placed.wall is ItemWall.WEST

    def test_duplicate_id_is_replaced(
        self, engine: PlacementEngine, caplog: pytest.LogCaptureFixture
    ) -> None:
        first = engine.add(get_catalog_item("base-24"), 0, 0, item_id="cab-1")
        with caplog.at_level(logging.WARNING):
            second = engine.add(get_catalog_item("base-24"), 24, 0, item_id="cab-1")
        assert first.id == "cab-1"
        assert second.id == "cabinet-1"
        assert "already in use" in caplog.text

    def test_default_ids_are_unique(self) -> None:
        first = default_id_factory("cabinet")
        second = default_id_factory("cabinet")
        assert first.startswith("cabinet-")
        assert first != second


class TestMove:
    """Tests for dragging and snapping."""

    def test_move_clamps_to_east_wall(self, engine: PlacementEngine) -> None:
        placed = engine.add(get_catalog_item("base-24"), 10, 0)
        engine.move(placed.id, dx=200, dy=0)
        assert placed.x == 120

    def test_move_does_not_snap(self, engine: PlacementEngine) -> None:
        engine.update_room(snap_enabled=True)
        placed = engine.add(get_catalog_item("base-24"), 12, 0)
        engine.move(placed.id, dx=1, dy=2)
        assert (placed.x, placed.y) == (13, 2)

    def test_finalize_snaps(self, engine: PlacementEngine) -> None:
        engine.update_room(snap_enabled=True)
        placed = engine.add(get_catalog_item("base-24"), 12, 0)
        engine.move(placed.id, dx=4, dy=2)
        engine.finalize(placed.id)
        assert (placed.x, placed.y) == (18, 0)

    def test_finalize_without_snap_is_noop(self, engine: PlacementEngine) -> None:
        placed = engine.add(get_catalog_item("base-24"), 13, 5)
        engine.finalize(placed.id)
        assert (placed.x, placed.y) == (13, 5)

    def test_move_unknown_item_is_ignored(self, engine: PlacementEngine, caplog) -> None:
        with caplog.at_level(logging.WARNING):
            assert engine.move("missing", 1, 1) is None
        assert "missing" in caplog.text


class TestSnapToGrid:
    """Tests for grid snapping bounds."""

    @pytest.mark.parametrize("value,expected", [(13, 12), (12, 12), (15, 18), (-4, 0)])
    def test_rounds_to_nearest_line(self, engine: PlacementEngine, value, expected) -> None:
        assert engine.snap_to_grid(value, True, 24) == expected

    def test_upper_bound_stays_on_grid(self, engine: PlacementEngine) -> None:
        """144 - 25 = 119 does not fit the grid; the last line that fits is 114."""
        assert engine.snap_to_grid(200, True, 25) == 114

    def test_snap_is_idempotent(self, engine: PlacementEngine) -> None:
        once = engine.snap_to_grid(137, False, 30)
        assert engine.snap_to_grid(once, False, 30) == once

    @pytest.mark.parametrize("grid", [0.5, 2.54, 6, 7.3])
    @pytest.mark.parametrize("extent", [12, 24, 25, 36.5, 100])
    def test_snap_is_idempotent_and_contained(
        self, engine: PlacementEngine, grid: float, extent: float
    ) -> None:
        engine.update_room(grid_size=grid)
        for is_x, room_extent in ((True, 144), (False, 168)):
            for value in (-10, 0, 3.3, 61.7, 119, 143.9, 200):
                once = engine.snap_to_grid(value, is_x, extent)
                assert engine.snap_to_grid(once, is_x, extent) == once
                assert 0 <= once <= room_extent - extent + 1e-9


class TestRotation:
    """Tests for rotation and the rotation handle."""

    def test_rotate_step_wraps(self, engine: PlacementEngine) -> None:
        placed = engine.add(get_catalog_item("base-24"), 0, 0)
        engine.rotate_step(placed.id, clockwise=False)
        assert placed.rotation == 270
        engine.rotate_step(placed.id)
        engine.rotate_step(placed.id)
        assert placed.rotation == 90

    def test_set_rotation_snaps(self, engine: PlacementEngine) -> None:
        placed = engine.add(get_catalog_item("base-24"), 0, 0)
        engine.set_rotation(placed.id, 52)
        assert placed.rotation == 45
        engine.set_rotation(placed.id, 52, snap=False)
        assert placed.rotation == 52

    def test_rotation_does_not_move_anchor(self, engine: PlacementEngine) -> None:
        placed = engine.add(get_catalog_item("base-24"), 120, 144)
        engine.set_rotation(placed.id, 90)
        assert (placed.x, placed.y) == (120, 144)

    def test_rotation_handle_position(self, engine: PlacementEngine) -> None:
        placed = engine.add(get_catalog_item("wall-24"), 50, 50)
        handle = engine.rotation_handle(placed.id)
        assert (handle.x, handle.y) == (74, 62)
        assert engine.rotation_handle("missing") is None


class TestHitTest:
    """Tests for pointer hit testing."""

    def test_hit_uses_rotated_footprint(self, engine: PlacementEngine) -> None:
        """Turned 90 degrees, a 24x12 item at (50, 50) covers x 38..50, y 50..74."""
        placed = engine.add(get_catalog_item("wall-24"), 50, 50)
        engine.set_rotation(placed.id, 90)
        assert engine.hit_test(44, 70) is placed
        assert engine.hit_test(60, 55) is None

    @pytest.mark.parametrize("catalog_id", ["base-24", "wall-36", "tall-24"])
    @pytest.mark.parametrize("degrees", range(0, 360, 5))
    def test_rotated_center_hits_and_outside_circle_misses(
        self, engine: PlacementEngine, catalog_id: str, degrees: int
    ) -> None:
        placed = engine.add(get_catalog_item(catalog_id), 60, 70)
        engine.set_rotation(placed.id, degrees, snap=False)
        center = rotated_center(placed)
        radius = math.hypot(placed.width, placed.depth) / 2

        assert engine.hit_test(center.x, center.y) is placed
        for angle in range(0, 360, 45):
            theta = math.radians(angle)
            px = center.x + (radius + 1) * math.cos(theta)
            py = center.y + (radius + 1) * math.sin(theta)
            assert engine.hit_test(px, py) is None

    def test_topmost_item_wins(self, engine: PlacementEngine) -> None:
        engine.add(get_catalog_item("base-24"), 0, 0)
        top = engine.add(get_catalog_item("wall-24"), 0, 0)
        assert engine.hit_test(5, 5) is top

    def test_empty_space(self, engine: PlacementEngine) -> None:
        engine.add(get_catalog_item("base-24"), 0, 0)
        assert engine.hit_test(100, 100) is None

    def test_handle_hit_needs_selection(self, engine: PlacementEngine) -> None:
        placed = engine.add(get_catalog_item("wall-24"), 50, 50)
        assert not engine.hit_rotation_handle(74, 62)
        engine.select(placed.id)
        assert engine.hit_rotation_handle(75, 63)
        assert not engine.hit_rotation_handle(80, 62)


class TestEdits:
    """Tests for update and delete operations."""

    @pytest.mark.parametrize("rotation", [math.inf, -math.inf, math.nan])
    def test_non_finite_rotation_resets_to_zero(
        self, engine: PlacementEngine, rotation: float
    ) -> None:
        placed = engine.add(get_catalog_item("base-24"), 0, 0)
        engine.update_item(placed.id, rotation=rotation)
        assert placed.rotation == 0.0
        engine.set_rotation(placed.id, rotation)
        assert placed.rotation == 0.0

    def test_delete_clears_selection(self, engine: PlacementEngine) -> None:
        placed = engine.add(get_catalog_item("base-24"), 0, 0)
        engine.select(placed.id)
        assert engine.delete(placed.id)
        assert engine.selected_id is None
        assert engine.model.items == []

    def test_delete_unknown_returns_false(self, engine: PlacementEngine) -> None:
        assert engine.delete("missing") is False

    def test_select_unknown_keeps_selection(self, engine: PlacementEngine) -> None:
        placed = engine.add(get_catalog_item("base-24"), 0, 0)
        engine.select(placed.id)
        engine.select("missing")
        assert engine.selected_id == placed.id

    def test_update_item_reclamps(self, engine: PlacementEngine) -> None:
        placed = engine.add(get_catalog_item("base-24"), 0, 0)
        engine.update_item(placed.id, x=400, rotation=-90)
        assert placed.x == 120
        assert placed.rotation == 270

    def test_update_item_rejects_unknown_fields(self, engine: PlacementEngine) -> None:
        placed = engine.add(get_catalog_item("base-24"), 0, 0)
        with pytest.raises(ValueError, match="colour"):
            engine.update_item(placed.id, colour="red")

    def test_swapping_catalog_item_reclamps(self, engine: PlacementEngine) -> None:
        placed = engine.add(get_catalog_item("base-24"), 120, 0)
        engine.update_item(placed.id, item=get_catalog_item("base-36"))
        assert placed.x == 108

    def test_shrinking_room_pulls_items_inside(self, engine: PlacementEngine) -> None:
        placed = engine.add(get_catalog_item("base-24"), 120, 0)
        engine.update_room(width=10)
        assert engine.model.room.width == 10
        assert placed.x == 96

    def test_room_update_is_clamped(self, engine: PlacementEngine) -> None:
        engine.update_room(width=-3, roof_pitch=99)
        assert engine.model.room.width == 1
        assert engine.model.room.roof_pitch == 24

    def test_update_features(self, engine: PlacementEngine) -> None:
        engine.update_features(has_island=True)
        assert engine.model.features.has_island


class TestOpenings:
    """Tests for structural openings."""

    def test_add_opening_clamps_offset(self, garage_model: ConfigurationModel) -> None:
        engine = PlacementEngine(garage_model)
        opening = engine.add_opening(
            Opening("door-2", OpeningType.OVERHEAD_DOOR, 16, 7, StructureWall.FRONT, 10)
        )
        assert opening.offset_from_left == 4
        assert opening in garage_model.openings

    def test_add_opening_clamps_width_to_wall(self, garage_model: ConfigurationModel) -> None:
        engine = PlacementEngine(garage_model)
        opening = engine.add_opening(
            Opening("wide", OpeningType.PASSTHROUGH, 40, 7, StructureWall.LEFT)
        )
        assert opening.width == 20
        assert opening.offset_from_left == 0

    def test_update_opening(self, garage_model: ConfigurationModel) -> None:
        engine = PlacementEngine(garage_model)
        opening = engine.update_opening("door-1", offset_from_left=30)
        assert opening.offset_from_left == 4

    def test_update_unknown_opening(self, garage_model: ConfigurationModel) -> None:
        engine = PlacementEngine(garage_model)
        assert engine.update_opening("nope", width=3) is None

    def test_delete_opening(self, garage_model: ConfigurationModel) -> None:
        engine = PlacementEngine(garage_model)
        assert engine.delete_opening("door-1")
        assert garage_model.openings == []
        assert not engine.delete_opening("door-1")
