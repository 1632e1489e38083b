"""Bundled design templates for the garage and kitchen planners."""

from planner.application.templates.manager import (
    TEMPLATE_METADATA,
    TemplateManager,
    TemplateNotFoundError,
)

__all__ = [
    "TEMPLATE_METADATA",
    "TemplateManager",
    "TemplateNotFoundError",
]
