"""FastAPI REST API for garage and kitchen designs.

This module provides a REST API for validating designs, computing material
take-offs, rendering projections and exporting to file formats.

Usage:
    uvicorn planner.web:app --reload
"""

from planner.web.app import app, create_app

__all__ = ["app", "create_app"]
