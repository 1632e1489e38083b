"""Design validation endpoints."""

from fastapi import APIRouter

from planner.application.config import ConfigError, config_to_model, load_config_from_dict
from planner.domain.services.validation import design_warnings
from planner.web.schemas.requests import DesignRequest
from planner.web.schemas.responses import ValidationResultSchema

router = APIRouter(prefix="/validate", tags=["validate"])


@router.post("", response_model=ValidationResultSchema)
async def validate_design(request: DesignRequest) -> ValidationResultSchema:
    """Validate a design and report layout warnings.

    Unlike the other endpoints an invalid design is not an error here; the
    problems are returned in ``errors`` with ``is_valid`` false.
    """
    try:
        config = load_config_from_dict(request.config)
    except ConfigError as e:
        errors = e.details or [{"path": "", "message": e.message}]
        return ValidationResultSchema(is_valid=False, errors=errors)

    return ValidationResultSchema(
        is_valid=True,
        warnings=design_warnings(config_to_model(config)),
    )
