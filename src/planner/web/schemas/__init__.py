"""Pydantic schemas for the REST API."""

from planner.web.schemas.common import DesignPayloadSchema, LineItemSchema
from planner.web.schemas.requests import (
    DesignRequest,
    ElevationRequest,
    MaterialsRequest,
    PlanRequest,
    SceneRequest,
)
from planner.web.schemas.responses import (
    CameraSchema,
    ErrorResponseSchema,
    ExportFormatsSchema,
    MaterialsResponseSchema,
    PrismSchema,
    QuoteResponseSchema,
    SceneSchema,
    SolidSchema,
    TemplateContentSchema,
    TemplateListItemSchema,
    TemplateListSchema,
    ValidationResultSchema,
)

__all__ = [
    # Common
    "DesignPayloadSchema",
    "LineItemSchema",
    # Requests
    "DesignRequest",
    "ElevationRequest",
    "MaterialsRequest",
    "PlanRequest",
    "SceneRequest",
    # Responses
    "CameraSchema",
    "ErrorResponseSchema",
    "ExportFormatsSchema",
    "MaterialsResponseSchema",
    "PrismSchema",
    "QuoteResponseSchema",
    "SceneSchema",
    "SolidSchema",
    "TemplateContentSchema",
    "TemplateListItemSchema",
    "TemplateListSchema",
    "ValidationResultSchema",
]
