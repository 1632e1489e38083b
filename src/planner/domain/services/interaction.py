"""Pointer gesture state machine for the plan view.

States are immutable; each transition function takes the current state, the
placement engine and a pointer position in room inches, applies any edit via
the engine and returns the next state. Dragging and rotating are mutually
exclusive: a press on the rotation handle always wins over a press on the
item body.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

from .geometry import rotated_center, snap_angle

if TYPE_CHECKING:
    from .placement import PlacementEngine

__all__ = [
    "Dragging",
    "GestureState",
    "Idle",
    "Rotating",
    "pointer_down",
    "pointer_leave",
    "pointer_move",
    "pointer_up",
]


@dataclass(frozen=True)
class Idle:
    """No gesture in progress."""


@dataclass(frozen=True)
class Dragging:
    """An item is following the pointer.

    Attributes:
        item_id: Item being dragged.
        last_x: Pointer x at the previous event (room inches).
        last_y: Pointer y at the previous event (room inches).
    """

    item_id: str
    last_x: float
    last_y: float


@dataclass(frozen=True)
class Rotating:
    """An item is being turned with its rotation handle.

    Attributes:
        item_id: Item being rotated.
        grab_angle: Pointer angle about the pivot when the handle was grabbed.
        initial_rotation: Item rotation when the handle was grabbed.
        pivot_x: Rotated item center at grab time.
        pivot_y: Rotated item center at grab time.
    """

    item_id: str
    grab_angle: float
    initial_rotation: float
    pivot_x: float
    pivot_y: float


GestureState = Union[Idle, Dragging, Rotating]

IDLE = Idle()


def _angle(px: float, py: float, cx: float, cy: float) -> float:
    return math.degrees(math.atan2(py - cy, px - cx))


def pointer_down(
    state: GestureState, engine: PlacementEngine, x: float, y: float
) -> GestureState:
    """Start a gesture. Empty space clears the selection."""
    if engine.selected_item is not None and engine.hit_rotation_handle(x, y):
        placed = engine.selected_item
        pivot = rotated_center(placed)
        return Rotating(
            item_id=placed.id,
            grab_angle=_angle(x, y, pivot.x, pivot.y),
            initial_rotation=placed.rotation,
            pivot_x=pivot.x,
            pivot_y=pivot.y,
        )

    hit = engine.hit_test(x, y)
    if hit is None:
        engine.select(None)
        return IDLE

    engine.select(hit.id)
    return Dragging(item_id=hit.id, last_x=x, last_y=y)


def pointer_move(
    state: GestureState, engine: PlacementEngine, x: float, y: float
) -> GestureState:
    """Continue the current gesture; idle moves are ignored."""
    if isinstance(state, Dragging):
        engine.move(state.item_id, x - state.last_x, y - state.last_y)
        return Dragging(item_id=state.item_id, last_x=x, last_y=y)

    if isinstance(state, Rotating):
        delta = _angle(x, y, state.pivot_x, state.pivot_y) - state.grab_angle
        engine.set_rotation(state.item_id, snap_angle(state.initial_rotation + delta))
        return state

    return state


def pointer_up(
    state: GestureState, engine: PlacementEngine, x: float, y: float
) -> GestureState:
    """End the gesture and snap a dragged item to the grid."""
    if isinstance(state, Dragging):
        engine.finalize(state.item_id)
    return IDLE


def pointer_leave(
    state: GestureState, engine: PlacementEngine, x: float, y: float
) -> GestureState:
    """Leaving the canvas ends the gesture at the last clamped position."""
    return pointer_up(state, engine, x, y)
