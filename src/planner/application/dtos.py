"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from planner.application.config.adapter import model_to_config
from planner.domain.entities import ConfigurationModel
from planner.domain.services.takeoff import (
    BillOfMaterials,
    MaterialLineItem,
    calculate_materials,
)


@dataclass
class QuotePayload:
    """Take-off handed to a quote generator, with the design it came from.

    The quote generator attaches pricing, customer and opportunity data; it
    sees only line items and the originating configuration.
    """

    line_items: list[MaterialLineItem]
    total_cost: float
    config: ConfigurationModel

    @classmethod
    def from_model(
        cls,
        model: ConfigurationModel,
        price_book: Mapping[str, float] | None = None,
    ) -> QuotePayload:
        bom = calculate_materials(model, price_book)
        return cls.from_bom(bom, model)

    @classmethod
    def from_bom(cls, bom: BillOfMaterials, model: ConfigurationModel) -> QuotePayload:
        return cls(
            line_items=list(bom.line_items),
            total_cost=bom.total_cost,
            config=model,
        )

    def to_dict(self) -> dict[str, Any]:
        """JSON-compatible form using the design-file shape for ``config``."""
        return {
            "line_items": [line.to_dict() for line in self.line_items],
            "total_cost": self.total_cost,
            "config": model_to_config(self.config).model_dump(mode="json"),
        }
