"""Common Pydantic schemas shared across requests and responses."""

from typing import Any

from pydantic import BaseModel, Field


class DesignPayloadSchema(BaseModel):
    """A design file body, validated later by the config loader."""

    config: dict[str, Any] = Field(..., description="Design configuration JSON")


class LineItemSchema(BaseModel):
    """One line of a materials take-off."""

    category: str = Field(..., description="Category heading")
    description: str = Field(..., description="What to buy")
    quantity: int = Field(..., ge=0, description="Whole purchasable units")
    unit: str = Field(..., description="Unit of sale")
    unit_price: float | None = Field(default=None, description="Price per unit")
    total_price: float | None = Field(default=None, description="quantity x unit_price")
    notes: str | None = Field(default=None, description="Additional notes")
