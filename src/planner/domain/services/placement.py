"""Placement engine: the only writer of a ConfigurationModel.

Every operation keeps the containment invariant: an item's unrotated
footprint stays inside the room. Out-of-range input is clamped, never
rejected. Operations on unknown ids are logged and ignored.
"""

from __future__ import annotations

import logging
import math
import random
import time
from dataclasses import replace
from typing import TYPE_CHECKING, Any, Callable

from ..entities import Opening, PlacedItem
from ..value_objects import ItemWall, StructureWall
from .geometry import clamp, normalize_angle, rotation_handle, snap_angle, to_local

if TYPE_CHECKING:
    from ..entities import CatalogItem, ConfigurationModel
    from ..value_objects import Point2D

__all__ = ["DEFAULT_HANDLE_RADIUS", "PlacementEngine", "default_id_factory"]

logger = logging.getLogger(__name__)

# 10 px at the plan's 4 px per inch.
DEFAULT_HANDLE_RADIUS = 2.5

_GRID_EPSILON = 1e-9
_ITEM_FIELDS = frozenset({"item", "x", "y", "rotation", "wall", "finish"})
_OPENING_FIELDS = frozenset(
    {"opening_type", "width", "height", "wall", "offset_from_left", "offset_from_floor"}
)


def default_id_factory(prefix: str) -> str:
    """Generate ids shaped like ``cabinet-1700000000000-k3j9x2a1b``."""
    stamp = int(time.time() * 1000)
    suffix = "".join(random.choices("abcdefghijklmnopqrstuvwxyz0123456789", k=9))
    return f"{prefix}-{stamp}-{suffix}"


class PlacementEngine:
    """Applies interactive edits to a configuration model.

    The engine also tracks the current selection, since deleting the
    selected item must clear it.

    Example:
        engine = PlacementEngine(model)
        placed = engine.add(get_catalog_item("base-24"), x=10, y=0)
        engine.move(placed.id, dx=200, dy=0)   # clamps to the east wall
    """

    def __init__(
        self,
        model: ConfigurationModel,
        id_factory: Callable[[str], str] | None = None,
        handle_radius: float = DEFAULT_HANDLE_RADIUS,
    ) -> None:
        self.model = model
        self.selected_id: str | None = None
        self.handle_radius = handle_radius
        self._id_factory = id_factory or default_id_factory

    # -- lookup -----------------------------------------------------------

    def get(self, item_id: str) -> PlacedItem | None:
        return self.model.find_item(item_id)

    @property
    def selected_item(self) -> PlacedItem | None:
        if self.selected_id is None:
            return None
        return self.model.find_item(self.selected_id)

    def select(self, item_id: str | None) -> None:
        if item_id is not None and self.model.find_item(item_id) is None:
            logger.warning(f"Cannot select unknown item '{item_id}'")
            return
        self.selected_id = item_id

    def _require(self, item_id: str, operation: str) -> PlacedItem | None:
        placed = self.model.find_item(item_id)
        if placed is None:
            logger.warning(f"Ignoring {operation} for unknown item '{item_id}'")
        return placed

    # -- bounds -----------------------------------------------------------

    def _room_extent(self, is_x: bool) -> float:
        room = self.model.room
        return room.width_in if is_x else room.length_in

    def clamp_coordinate(self, value: float, is_x: bool, item_extent: float) -> float:
        """Clamp a corner coordinate so the item stays inside the room."""
        return clamp(value, 0.0, self._room_extent(is_x) - item_extent)

    def snap_to_grid(self, value: float, is_x: bool, item_extent: float) -> float:
        """Round to the nearest grid multiple, then clamp into the room.

        The upper bound is the last grid line that still fits the item, so
        the result is always on the grid and snapping is idempotent. An item
        whose far-wall gap is off-grid therefore cannot sit flush with that wall.
        """
        grid = self.model.room.grid_size
        snapped = math.floor(value / grid + 0.5) * grid
        limit = self._room_extent(is_x) - item_extent
        upper = math.floor(limit / grid + _GRID_EPSILON) * grid
        return clamp(snapped, 0.0, upper)

    def _clamp_in_place(self, placed: PlacedItem) -> None:
        placed.x = self.clamp_coordinate(placed.x, True, placed.width)
        placed.y = self.clamp_coordinate(placed.y, False, placed.depth)

    def _snap_in_place(self, placed: PlacedItem) -> None:
        placed.x = self.snap_to_grid(placed.x, True, placed.width)
        placed.y = self.snap_to_grid(placed.y, False, placed.depth)

    # -- item operations --------------------------------------------------

    def add(
        self,
        item: CatalogItem,
        x: float,
        y: float,
        *,
        wall: ItemWall = ItemWall.NORTH,
        finish: Any = None,
        item_id: str | None = None,
    ) -> PlacedItem:
        """Place a catalog item with its corner at (x, y). Never rejects.

        An ``item_id`` already in use is replaced by a generated one.
        """
        if item_id and self.model.find_item(item_id) is not None:
            logger.warning(f"Item id '{item_id}' is already in use; generating a new id")
            item_id = None
        placed = PlacedItem(
            id=item_id or self._id_factory(item.kind.value),
            item=item,
            x=x,
            y=y,
            wall=wall,
            finish=finish,
        )
        self._clamp_in_place(placed)
        if self.model.room.snap_enabled:
            self._snap_in_place(placed)
        self.model.items.append(placed)
        logger.debug(f"Added '{placed.id}' ({item.id}) at ({placed.x}, {placed.y})")
        return placed

    def move(self, item_id: str, dx: float, dy: float) -> PlacedItem | None:
        """Translate an item by a delta. Clamped, not snapped."""
        placed = self._require(item_id, "move")
        if placed is None:
            return None
        placed.x = self.clamp_coordinate(placed.x + dx, True, placed.width)
        placed.y = self.clamp_coordinate(placed.y + dy, False, placed.depth)
        return placed

    def finalize(self, item_id: str) -> PlacedItem | None:
        """Snap an item to the grid at the end of a gesture, if enabled."""
        placed = self._require(item_id, "finalize")
        if placed is None:
            return None
        if self.model.room.snap_enabled:
            self._snap_in_place(placed)
            logger.debug(f"Snapped '{item_id}' to ({placed.x}, {placed.y})")
        return placed

    def rotate_step(self, item_id: str, clockwise: bool = True) -> PlacedItem | None:
        """Rotate by a fixed 90 degree step."""
        placed = self._require(item_id, "rotate")
        if placed is None:
            return None
        step = 90.0 if clockwise else -90.0
        placed.rotation = normalize_angle(placed.rotation + step)
        logger.debug(f"Rotated '{item_id}' to {placed.rotation}")
        return placed

    def set_rotation(
        self, item_id: str, degrees: float, snap: bool = True
    ) -> PlacedItem | None:
        """Set an absolute rotation, snapped to 15 degrees by default.

        Rotation never moves the anchor and never re-clamps.
        """
        placed = self._require(item_id, "rotate")
        if placed is None:
            return None
        placed.rotation = snap_angle(degrees) if snap else normalize_angle(degrees)
        return placed

    def rotation_handle(self, item_id: str) -> Point2D | None:
        placed = self.model.find_item(item_id)
        if placed is None:
            return None
        return rotation_handle(placed)

    def hit_test(self, px: float, py: float) -> PlacedItem | None:
        """Topmost item whose rotated footprint contains (px, py)."""
        for placed in reversed(self.model.items):
            lx, ly = to_local(placed, px, py)
            if 0 <= lx <= placed.width and 0 <= ly <= placed.depth:
                return placed
        return None

    def hit_rotation_handle(self, px: float, py: float) -> bool:
        """Whether (px, py) is on the selected item's rotation handle."""
        placed = self.selected_item
        if placed is None:
            return False
        handle = rotation_handle(placed)
        return math.hypot(px - handle.x, py - handle.y) <= self.handle_radius

    def delete(self, item_id: str) -> bool:
        placed = self._require(item_id, "delete")
        if placed is None:
            return False
        self.model.items.remove(placed)
        if self.selected_id == item_id:
            self.selected_id = None
        logger.debug(f"Deleted '{item_id}'")
        return True

    def update_item(self, item_id: str, **changes: Any) -> PlacedItem | None:
        """Apply a partial update to one item, then re-clamp it."""
        placed = self._require(item_id, "update")
        if placed is None:
            return None
        unknown = set(changes) - _ITEM_FIELDS
        if unknown:
            raise ValueError(f"Unknown item fields: {', '.join(sorted(unknown))}")
        for key, value in changes.items():
            setattr(placed, key, value)
        placed.rotation = normalize_angle(placed.rotation)
        self._clamp_in_place(placed)
        return placed

    # -- room -------------------------------------------------------------

    def update_room(self, **changes: Any) -> None:
        """Apply a partial room update and re-clamp every item and opening."""
        self.model.room = self.model.room.with_changes(**changes)
        for placed in self.model.items:
            self._clamp_in_place(placed)
        for opening in self.model.openings:
            self._clamp_opening(opening)
        logger.debug(f"Room updated: {changes}")

    def update_features(self, **changes: Any) -> None:
        self.model.features = replace(self.model.features, **changes)

    # -- openings ---------------------------------------------------------

    def _wall_length(self, wall: StructureWall) -> float:
        room = self.model.room
        return room.width if wall.runs_along_width else room.length

    def _clamp_opening(self, opening: Opening) -> None:
        room = self.model.room
        opening.width = clamp(opening.width, 0.5, self._wall_length(opening.wall))
        opening.height = clamp(opening.height, 0.5, room.height)
        opening.offset_from_left = clamp(
            opening.offset_from_left, 0.0, self._wall_length(opening.wall) - opening.width
        )
        opening.offset_from_floor = clamp(
            opening.offset_from_floor, 0.0, room.height - opening.height
        )

    def add_opening(self, opening: Opening) -> Opening:
        """Add a structural door or window, clamped onto its wall."""
        self._clamp_opening(opening)
        self.model.openings.append(opening)
        logger.debug(f"Added opening '{opening.id}' on {opening.wall.value} wall")
        return opening

    def update_opening(self, opening_id: str, **changes: Any) -> Opening | None:
        unknown = set(changes) - _OPENING_FIELDS
        if unknown:
            raise ValueError(f"Unknown opening fields: {', '.join(sorted(unknown))}")
        for opening in self.model.openings:
            if opening.id == opening_id:
                for key, value in changes.items():
                    setattr(opening, key, value)
                self._clamp_opening(opening)
                return opening
        logger.warning(f"Ignoring update for unknown opening '{opening_id}'")
        return None

    def delete_opening(self, opening_id: str) -> bool:
        for opening in self.model.openings:
            if opening.id == opening_id:
                self.model.openings.remove(opening)
                return True
        logger.warning(f"Ignoring delete for unknown opening '{opening_id}'")
        return False
