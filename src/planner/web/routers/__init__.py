"""API routers for the REST API."""

from planner.web.routers.export import router as export_router
from planner.web.routers.materials import router as materials_router
from planner.web.routers.projections import router as projections_router
from planner.web.routers.templates import router as templates_router
from planner.web.routers.validate import router as validate_router

__all__ = [
    "export_router",
    "materials_router",
    "projections_router",
    "templates_router",
    "validate_router",
]
