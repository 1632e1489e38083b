"""Bill of materials value types."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

__all__ = ["BillOfMaterials", "MaterialLineItem"]


@dataclass(frozen=True)
class MaterialLineItem:
    """One purchasable line of a take-off.

    Attributes:
        category: Grouping heading, e.g. "Foundation" or "Base Cabinets".
        description: What to buy.
        quantity: Whole purchasable units, always rounded up.
        unit: Unit of sale ("cu yd", "sheet", "ea", ...).
        unit_price: Price per unit, when known.
        notes: Free-form hint shown next to the line.
    """

    category: str
    description: str
    quantity: int
    unit: str
    unit_price: float | None = None
    notes: str | None = None

    def __post_init__(self) -> None:
        if self.quantity < 0:
            raise ValueError("Quantity must be non-negative")
        if self.unit_price is not None and self.unit_price < 0:
            raise ValueError("Unit price must be non-negative")

    @property
    def total_price(self) -> float | None:
        if self.unit_price is None:
            return None
        return self.quantity * self.unit_price

    def with_price(self, unit_price: float | None) -> MaterialLineItem:
        return replace(self, unit_price=unit_price)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "category": self.category,
            "description": self.description,
            "quantity": self.quantity,
            "unit": self.unit,
        }
        if self.unit_price is not None:
            data["unit_price"] = self.unit_price
            data["total_price"] = self.total_price
        if self.notes:
            data["notes"] = self.notes
        return data


@dataclass(frozen=True)
class BillOfMaterials:
    """Ordered line items with per-category and grand totals.

    Categories keep the order in which they first appear in ``line_items``.
    Unpriced lines count as zero in every total.
    """

    line_items: tuple[MaterialLineItem, ...] = field(default_factory=tuple)

    @property
    def categories(self) -> list[str]:
        seen: dict[str, None] = {}
        for line in self.line_items:
            seen.setdefault(line.category, None)
        return list(seen)

    def by_category(self) -> dict[str, list[MaterialLineItem]]:
        grouped: dict[str, list[MaterialLineItem]] = {}
        for line in self.line_items:
            grouped.setdefault(line.category, []).append(line)
        return grouped

    @property
    def category_totals(self) -> dict[str, float]:
        return {
            category: sum(line.total_price or 0.0 for line in lines)
            for category, lines in self.by_category().items()
        }

    @property
    def total_cost(self) -> float:
        return sum(self.category_totals.values())

    @property
    def is_empty(self) -> bool:
        return not self.line_items

    def __len__(self) -> int:
        return len(self.line_items)

    def __iter__(self):
        return iter(self.line_items)
