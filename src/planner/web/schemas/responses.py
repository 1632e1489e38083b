"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field

from planner.web.schemas.common import LineItemSchema


class ValidationResultSchema(BaseModel):
    """Response for design validation."""

    is_valid: bool = Field(..., description="Whether the design loads")
    errors: list[dict[str, Any]] = Field(
        default_factory=list, description="Schema errors"
    )
    warnings: list[str] = Field(
        default_factory=list, description="Layout warnings"
    )


class MaterialsResponseSchema(BaseModel):
    """Response for a materials take-off."""

    line_items: list[LineItemSchema] = Field(..., description="Take-off lines in order")
    category_totals: dict[str, float] = Field(
        ..., description="Priced total per category"
    )
    total_cost: float = Field(..., description="Sum of priced lines")


class QuoteResponseSchema(BaseModel):
    """Take-off plus the normalized design it came from."""

    line_items: list[LineItemSchema] = Field(..., description="Take-off lines in order")
    total_cost: float = Field(..., description="Sum of priced lines")
    config: dict[str, Any] = Field(..., description="Normalized design configuration")


class SolidSchema(BaseModel):
    """Axis-aligned box rotated about its vertical axis."""

    name: str
    center: tuple[float, float, float] = Field(..., description="Centre in metres")
    size: tuple[float, float, float] = Field(..., description="Width, height, depth in metres")
    rotation_y: float = Field(default=0.0, description="Radians about the Y axis")
    color: str
    tag: str | None = None


class PrismSchema(BaseModel):
    """Triangle mesh, used for roofs."""

    name: str
    vertices: list[tuple[float, float, float]]
    faces: list[tuple[int, int, int]]
    color: str


class CameraSchema(BaseModel):
    """Default orbit camera for the design's planner."""

    theta: float
    phi: float
    distance: float
    min_distance: float
    max_distance: float
    position: tuple[float, float, float]


class SceneSchema(BaseModel):
    """Response for the 3D scene."""

    solids: list[SolidSchema]
    prisms: list[PrismSchema]
    bounds: tuple[float, float, float] = Field(..., description="Room extent in metres")
    camera: CameraSchema


class TemplateListItemSchema(BaseModel):
    """Single template in the list."""

    name: str = Field(..., description="Template name")
    description: str = Field(..., description="Template description")


class TemplateListSchema(BaseModel):
    """Response for template listing."""

    templates: list[TemplateListItemSchema] = Field(
        ..., description="Available templates"
    )


class TemplateContentSchema(BaseModel):
    """Response for template content."""

    name: str = Field(..., description="Template name")
    description: str = Field(..., description="Template description")
    content: dict[str, Any] = Field(..., description="Template design content")


class ExportFormatsSchema(BaseModel):
    """Response for available export formats."""

    formats: list[str] = Field(..., description="Available format names")


class ErrorResponseSchema(BaseModel):
    """Standard error response."""

    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Error type identifier")
    details: list[dict[str, Any]] | dict[str, Any] | None = Field(
        default=None, description="Additional error details"
    )
