"""Pydantic request schemas for the REST API."""

from typing import Annotated

from pydantic import Field

from planner.domain.value_objects import StructureWall
from planner.web.schemas.common import DesignPayloadSchema


class DesignRequest(DesignPayloadSchema):
    """Request carrying just a design."""


class MaterialsRequest(DesignPayloadSchema):
    """Request for a materials take-off."""

    price_book: dict[str, Annotated[float, Field(ge=0)]] | None = Field(
        default=None, description="Line description -> non-negative unit price overrides"
    )


class PlanRequest(DesignPayloadSchema):
    """Request for a plan drawing."""

    show_grid: bool | None = Field(
        default=None, description="Override the design's grid setting"
    )
    pixels_per_inch: float | None = Field(
        default=None, gt=0, le=20, description="Fixed drawing scale"
    )
    selected_id: str | None = Field(
        default=None, description="Item to highlight with its rotation handle"
    )


class ElevationRequest(DesignPayloadSchema):
    """Request for a wall elevation drawing."""

    wall: StructureWall = Field(default=StructureWall.FRONT, description="Wall to draw")


class SceneRequest(DesignPayloadSchema):
    """Request for the 3D scene."""

    include_structure: bool = Field(default=True, description="Emit slab, walls and roof")
    include_roof: bool = Field(default=True, description="Emit the garage roof")
