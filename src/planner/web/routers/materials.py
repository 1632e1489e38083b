"""Materials take-off endpoints."""

from fastapi import APIRouter

from planner.application.dtos import QuotePayload
from planner.domain.services.takeoff import calculate_materials
from planner.web.dependencies import design_from_payload
from planner.web.schemas.requests import MaterialsRequest
from planner.web.schemas.responses import MaterialsResponseSchema, QuoteResponseSchema

router = APIRouter(prefix="/materials", tags=["materials"])


@router.post("", response_model=MaterialsResponseSchema)
async def take_off(request: MaterialsRequest) -> MaterialsResponseSchema:
    """Compute the bill of materials for a design."""
    model = design_from_payload(request.config)
    bom = calculate_materials(model, request.price_book)
    return MaterialsResponseSchema(
        line_items=[line.to_dict() for line in bom],
        category_totals=bom.category_totals,
        total_cost=bom.total_cost,
    )


@router.post("/quote", response_model=QuoteResponseSchema)
async def quote_payload(request: MaterialsRequest) -> QuoteResponseSchema:
    """Take-off bundled with the normalized design, as a quote generator expects it."""
    model = design_from_payload(request.config)
    payload = QuotePayload.from_model(model, request.price_book)
    return QuoteResponseSchema(**payload.to_dict())
