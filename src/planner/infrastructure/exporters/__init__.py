"""Exporter framework for design outputs.

This package provides a unified exporter framework with:
- Exporter Protocol: Defines the interface for all exporters
- ExporterRegistry: Central registry for format discovery
- ExportManager: Coordinates multi-format export operations

Registered exporters:
- bom: Materials take-off as text, CSV, or JSON
- dxf: DXF floor plan for CAD tools
- json: Normalized design file
- stl: STL mesh of the 3D scene
- svg: SVG plan or wall elevation

Usage:
    from planner.infrastructure.exporters import ExportManager, ExporterRegistry

    formats = ExporterRegistry.available_formats()

    bom_exporter = ExporterRegistry.get("bom")(output_format="csv")
    text = bom_exporter.export_string(model)

    manager = ExportManager(output_dir=Path("./output"))
    results = manager.export_all(["bom", "svg", "stl"], model, project_name="garage")
"""

from planner.infrastructure.exporters.base import (
    Exporter,
    ExporterRegistry,
    ExportManager,
)

# Import exporters to trigger registration
from planner.infrastructure.exporters.bom import BomExporter
from planner.infrastructure.exporters.design_json import DesignJsonExporter
from planner.infrastructure.exporters.dxf import DxfExporter
from planner.infrastructure.exporters.stl import StlExporter, StlMeshBuilder
from planner.infrastructure.exporters.svg import SvgExporter, render_svg

__all__ = [
    # Framework
    "Exporter",
    "ExporterRegistry",
    "ExportManager",
    # Registered exporters
    "BomExporter",
    "DesignJsonExporter",
    "DxfExporter",
    "StlExporter",
    "SvgExporter",
    # Helpers
    "StlMeshBuilder",
    "render_svg",
]
