"""Infrastructure layer - file exporters for designs."""

from .exporters import (
    BomExporter,
    DesignJsonExporter,
    DxfExporter,
    Exporter,
    ExporterRegistry,
    ExportManager,
    StlExporter,
    StlMeshBuilder,
    SvgExporter,
    render_svg,
)

__all__ = [
    "BomExporter",
    "DesignJsonExporter",
    "DxfExporter",
    "Exporter",
    "ExporterRegistry",
    "ExportManager",
    "StlExporter",
    "StlMeshBuilder",
    "SvgExporter",
    "render_svg",
]
