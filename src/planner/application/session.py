"""Planner session: the callback surface a host UI drives.

A session owns one ConfigurationModel and the gesture state for it. Every
mutation goes through the placement engine; listeners registered with
:meth:`PlannerSession.subscribe` are called after each change so the host can
re-render its views and refresh the take-off.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from planner.domain.entities import CatalogItem, ConfigurationModel, PlacedItem
from planner.domain.services.interaction import (
    GestureState,
    Idle,
    pointer_down,
    pointer_leave,
    pointer_move,
    pointer_up,
)
from planner.domain.services.placement import PlacementEngine
from planner.domain.services.takeoff import BillOfMaterials, calculate_materials
from planner.domain.services.validation import design_warnings
from planner.domain.value_objects import ItemWall

logger = logging.getLogger(__name__)

ChangeListener = Callable[[ConfigurationModel], None]


class PlannerSession:
    """Single owner of a design and its in-progress gesture.

    The ``on_*`` callbacks return nothing; hosts observe results through
    listeners or by reading :attr:`model`.

    Example:
        session = PlannerSession(TemplateManager().load_template("kitchen-blank"))
        session.subscribe(lambda model: redraw(model))
        session.on_add_item(get_catalog_item("base-24"), x=10, y=0)
    """

    def __init__(
        self,
        model: ConfigurationModel,
        id_factory: Callable[[str], str] | None = None,
    ) -> None:
        self.engine = PlacementEngine(model, id_factory=id_factory)
        self.gesture: GestureState = Idle()
        self._listeners: list[ChangeListener] = []

    @property
    def model(self) -> ConfigurationModel:
        return self.engine.model

    @property
    def selected_id(self) -> str | None:
        return self.engine.selected_id

    def subscribe(self, listener: ChangeListener) -> Callable[[], None]:
        """Register a change listener; returns a function that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _changed(self) -> None:
        for listener in list(self._listeners):
            listener(self.model)

    # -- host callbacks ---------------------------------------------------

    def on_add_item(
        self,
        item: CatalogItem,
        x: float = 0.0,
        y: float = 0.0,
        wall: ItemWall = ItemWall.NORTH,
    ) -> None:
        placed = self.engine.add(item, x, y, wall=wall)
        self.engine.select(placed.id)
        self._changed()

    def on_update_item(self, item_id: str, partial: Mapping[str, Any]) -> None:
        if self.engine.update_item(item_id, **dict(partial)) is not None:
            self._changed()

    def on_delete_item(self, item_id: str) -> None:
        if self.engine.delete(item_id):
            self._changed()

    def on_update_room_spec(self, partial: Mapping[str, Any]) -> None:
        self.engine.update_room(**dict(partial))
        self._changed()

    def on_update_features(self, partial: Mapping[str, Any]) -> None:
        self.engine.update_features(**dict(partial))
        self._changed()

    def on_rotate_selected(self, clockwise: bool = True) -> None:
        if self.selected_id is None:
            return
        self.engine.rotate_step(self.selected_id, clockwise)
        self._changed()

    # -- pointer events (room inches) -------------------------------------

    def on_pointer_down(self, x: float, y: float) -> None:
        self.gesture = pointer_down(self.gesture, self.engine, x, y)
        self._changed()

    def on_pointer_move(self, x: float, y: float) -> None:
        if isinstance(self.gesture, Idle):
            return
        self.gesture = pointer_move(self.gesture, self.engine, x, y)
        self._changed()

    def on_pointer_up(self, x: float, y: float) -> None:
        was_active = not isinstance(self.gesture, Idle)
        self.gesture = pointer_up(self.gesture, self.engine, x, y)
        if was_active:
            self._changed()

    def on_pointer_leave(self, x: float, y: float) -> None:
        was_active = not isinstance(self.gesture, Idle)
        self.gesture = pointer_leave(self.gesture, self.engine, x, y)
        if was_active:
            logger.debug("Pointer left the canvas; gesture ended")
            self._changed()

    # -- derived ----------------------------------------------------------

    def find_item(self, item_id: str) -> PlacedItem | None:
        return self.model.find_item(item_id)

    def materials(self, price_book: Mapping[str, float] | None = None) -> BillOfMaterials:
        return calculate_materials(self.model, price_book)

    def warnings(self) -> list[str]:
        return design_warnings(self.model)
