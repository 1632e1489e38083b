"""Export format endpoints."""

import tempfile
from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import Response

from planner.infrastructure.exporters import ExporterRegistry
from planner.web.dependencies import design_from_payload
from planner.web.exceptions import UnsupportedFormatError
from planner.web.schemas.requests import DesignRequest
from planner.web.schemas.responses import ExportFormatsSchema

router = APIRouter(prefix="/export", tags=["export"])

MEDIA_TYPES = {
    "bom": "text/plain",
    "dxf": "application/dxf",
    "json": "application/json",
    "stl": "application/octet-stream",
    "svg": "image/svg+xml",
}


@router.get("/formats", response_model=ExportFormatsSchema)
async def list_export_formats() -> ExportFormatsSchema:
    """List all available export formats."""
    return ExportFormatsSchema(formats=ExporterRegistry.available_formats())


@router.post("/{format_name}")
async def export_design(format_name: str, request: DesignRequest) -> Response:
    """Export a design as a file download.

    Raises:
        UnsupportedFormatError: If no exporter is registered for the format.
    """
    available = ExporterRegistry.available_formats()
    if format_name not in available:
        raise UnsupportedFormatError(format_name, available)

    model = design_from_payload(request.config)
    exporter = ExporterRegistry.get(format_name)()
    filename = f"design.{exporter.file_extension}"

    with tempfile.TemporaryDirectory() as tmp_dir:
        path = Path(tmp_dir) / filename
        exporter.export(model, path)
        content = path.read_bytes()

    return Response(
        content=content,
        media_type=MEDIA_TYPES.get(format_name, "application/octet-stream"),
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )
