"""Unit tests for the pointer gesture state machine."""

import pytest

from planner.domain.catalog import get_catalog_item
from planner.domain.services.interaction import (
    Dragging,
    Idle,
    Rotating,
    pointer_down,
    pointer_leave,
    pointer_move,
    pointer_up,
)
from planner.domain.services.placement import PlacementEngine


@pytest.fixture
def engine(kitchen_model, id_factory) -> PlacementEngine:
    engine = PlacementEngine(kitchen_model, id_factory=id_factory)
    engine.add(get_catalog_item("wall-24"), 50, 50)
    return engine


class TestPointerDown:
    def test_press_on_item_starts_drag(self, engine: PlacementEngine) -> None:
        state = pointer_down(Idle(), engine, 60, 55)
        assert state == Dragging("cabinet-1", 60, 55)
        assert engine.selected_id == "cabinet-1"

    def test_press_on_empty_space_clears_selection(self, engine: PlacementEngine) -> None:
        engine.select("cabinet-1")
        state = pointer_down(Idle(), engine, 5, 5)
        assert isinstance(state, Idle)
        assert engine.selected_id is None

    def test_handle_wins_over_body(self, engine: PlacementEngine) -> None:
        """The handle at (74, 62) is also on the item's far corner."""
        engine.select("cabinet-1")
        state = pointer_down(Idle(), engine, 74, 62)
        assert isinstance(state, Rotating)
        assert (state.pivot_x, state.pivot_y) == (62, 56)
        assert state.initial_rotation == 0

    def test_handle_ignored_without_selection(self, engine: PlacementEngine) -> None:
        state = pointer_down(Idle(), engine, 74, 62)
        assert isinstance(state, Dragging)


class TestDragging:
    def test_drag_moves_by_delta(self, engine: PlacementEngine) -> None:
        state = pointer_down(Idle(), engine, 60, 55)
        state = pointer_move(state, engine, 70, 65)
        state = pointer_move(state, engine, 80, 60)
        placed = engine.get("cabinet-1")
        assert (placed.x, placed.y) == (70, 55)
        assert state == Dragging("cabinet-1", 80, 60)

    def test_drag_clamps_to_room(self, engine: PlacementEngine) -> None:
        state = pointer_down(Idle(), engine, 60, 55)
        pointer_move(state, engine, -500, 55)
        assert engine.get("cabinet-1").x == 0

    def test_release_snaps_when_enabled(self, engine: PlacementEngine) -> None:
        engine.model.room = engine.model.room.with_changes(snap_enabled=True)
        state = pointer_down(Idle(), engine, 60, 55)
        state = pointer_move(state, engine, 61, 56)
        state = pointer_up(state, engine, 61, 56)
        placed = engine.get("cabinet-1")
        assert isinstance(state, Idle)
        assert (placed.x, placed.y) == (54, 54)

    def test_leave_ends_drag_at_last_position(self, engine: PlacementEngine) -> None:
        state = pointer_down(Idle(), engine, 60, 55)
        state = pointer_move(state, engine, 65, 55)
        state = pointer_leave(state, engine, 900, 900)
        assert isinstance(state, Idle)
        assert engine.get("cabinet-1").x == 55


class TestRotating:
    def test_quarter_turn_about_center(self, engine: PlacementEngine) -> None:
        """Swinging the handle 90 degrees around the center turns the item 90."""
        engine.select("cabinet-1")
        state = pointer_down(Idle(), engine, 74, 62)
        state = pointer_move(state, engine, 56, 68)
        placed = engine.get("cabinet-1")
        assert placed.rotation == pytest.approx(90)
        assert (placed.x, placed.y) == (50, 50)
        assert isinstance(state, Rotating)

    def test_rotation_snaps_to_fifteen_degrees(self, engine: PlacementEngine) -> None:
        engine.select("cabinet-1")
        state = pointer_down(Idle(), engine, 74, 62)
        # 26.57 -> 45 degrees about the pivot: a delta of about 18.4
        pointer_move(state, engine, 68, 62)
        assert engine.get("cabinet-1").rotation == pytest.approx(15)

    def test_idle_move_is_ignored(self, engine: PlacementEngine) -> None:
        state = pointer_move(Idle(), engine, 10, 10)
        assert isinstance(state, Idle)
        assert engine.get("cabinet-1").x == 50
