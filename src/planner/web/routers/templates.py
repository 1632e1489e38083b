"""Template management endpoints."""

import json

from fastapi import APIRouter

from planner.application.templates.manager import TEMPLATE_METADATA
from planner.web.dependencies import TemplateManagerDep
from planner.web.schemas.responses import (
    TemplateContentSchema,
    TemplateListItemSchema,
    TemplateListSchema,
)

router = APIRouter(prefix="/templates", tags=["templates"])


@router.get("", response_model=TemplateListSchema)
async def list_templates(
    manager: TemplateManagerDep,
    planner_type: str | None = None,
) -> TemplateListSchema:
    """List available templates, optionally for one planner type."""
    templates = [
        TemplateListItemSchema(name=name, description=desc)
        for name, desc in manager.list_templates(planner_type)
    ]
    return TemplateListSchema(templates=templates)


@router.get("/{name}", response_model=TemplateContentSchema)
async def get_template(
    name: str,
    manager: TemplateManagerDep,
) -> TemplateContentSchema:
    """Get the content of a specific template.

    Raises:
        TemplateNotFoundError: If template does not exist (handled by exception handler).
    """
    content = json.loads(manager.get_template(name))
    return TemplateContentSchema(
        name=name,
        description=TEMPLATE_METADATA.get(name, ""),
        content=content,
    )
