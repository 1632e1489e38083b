"""Materials take-off entry point."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING

from ...value_objects import PlannerType
from .garage import GARAGE_CATEGORIES
from .kitchen import KITCHEN_CATEGORIES
from .models import BillOfMaterials, MaterialLineItem

if TYPE_CHECKING:
    from ...entities import ConfigurationModel

__all__ = ["calculate_materials", "category_functions"]

logger = logging.getLogger(__name__)


def category_functions(planner_type: PlannerType):
    """The ordered category functions for a planner variant."""
    if planner_type is PlannerType.GARAGE:
        return GARAGE_CATEGORIES
    return KITCHEN_CATEGORIES


def calculate_materials(
    model: ConfigurationModel,
    price_book: Mapping[str, float] | None = None,
) -> BillOfMaterials:
    """Compute the bill of materials for a design.

    The result depends only on ``model`` and ``price_book``; calling it twice
    on an unchanged model yields equal results in the same order. Lines with
    a zero quantity are dropped, which also drops categories that have
    nothing to buy.

    Args:
        model: Design to take off.
        price_book: Optional description -> unit price mapping. An entry here
            overrides the catalog price for the matching line.

    Returns:
        BillOfMaterials with categories in calculation order.
    """
    price_book = price_book or {}
    lines: list[MaterialLineItem] = []
    for category in category_functions(model.planner_type):
        for line in category(model):
            if line.quantity <= 0:
                continue
            if line.description in price_book:
                line = line.with_price(price_book[line.description])
            lines.append(line)

    bom = BillOfMaterials(tuple(lines))
    logger.debug(
        f"Take-off for {model.planner_type.value} design '{model.name}': "
        f"{len(bom)} lines in {len(bom.categories)} categories"
    )
    return bom
