"""DXF exporter for floor plans.

Writes an R2010 drawing of the plan in room units (inches, or millimetres).
DXF's Y axis points up, so room y is flipped; the front wall (room y=0) is
drawn at the top.
"""

from __future__ import annotations

import logging
from io import StringIO
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar, cast

import ezdxf
from ezdxf import units as dxf_units
from ezdxf.enums import TextEntityAlignment

from planner.domain.services.geometry import INCHES_PER_FOOT, item_corners, rotated_center
from planner.domain.value_objects import PlannerType, StructureWall
from planner.infrastructure.exporters.base import ExporterRegistry

if TYPE_CHECKING:
    from ezdxf.document import Drawing
    from ezdxf.layouts import Modelspace

    from planner.domain.entities import ConfigurationModel, Opening


logger = logging.getLogger(__name__)


LAYERS = {
    "WALLS": {"color": 7, "linetype": "CONTINUOUS"},  # White - room outline
    "OPENINGS": {"color": 4, "linetype": "CONTINUOUS"},  # Cyan - doors and windows
    "ITEMS": {"color": 3, "linetype": "CONTINUOUS"},  # Green - placed items
    "BAYS": {"color": 8, "linetype": "DASHED"},  # Gray - garage bay dividers
    "LABELS": {"color": 5, "linetype": "CONTINUOUS"},  # Blue - text
}

# Depth of the opening symbol drawn into the wall, in inches.
OPENING_SYMBOL_DEPTH_IN = 6.0


@ExporterRegistry.register("dxf")
class DxfExporter:
    """Floor plan as a DXF drawing.

    Attributes:
        format_name: "dxf"
        file_extension: "dxf"
    """

    format_name: ClassVar[str] = "dxf"
    file_extension: ClassVar[str] = "dxf"

    def __init__(self, units: str = "inches", include_labels: bool = True) -> None:
        if units not in ("inches", "mm"):
            raise ValueError(f"Invalid units: {units}. Must be 'inches' or 'mm'")
        self.units = units
        self.scale = 25.4 if units == "mm" else 1.0
        self.include_labels = include_labels

    def export(self, model: ConfigurationModel, path: Path) -> None:
        doc = self.build_document(model)
        doc.saveas(path)
        logger.info(f"Exported DXF plan to {path}")

    def export_string(self, model: ConfigurationModel) -> str:
        stream = StringIO()
        self.build_document(model).write(stream)
        return stream.getvalue()

    def build_document(self, model: ConfigurationModel) -> Drawing:
        doc = ezdxf.new("R2010")
        doc.units = dxf_units.MM if self.units == "mm" else dxf_units.IN
        self._setup_layers(doc)
        msp = doc.modelspace()
        self._draw_room(msp, model)
        for opening in model.structural_openings():
            self._draw_opening(msp, model, opening)
        self._draw_items(msp, model)
        return doc

    def _setup_layers(self, doc: Drawing) -> None:
        for name, props in LAYERS.items():
            layer = doc.layers.add(name, color=cast(int, props["color"]))
            if props["linetype"] == "DASHED":
                if "DASHED" not in doc.linetypes:
                    doc.linetypes.add(
                        "DASHED",
                        pattern=[0.5, 0.25, -0.25],
                        description="Dashed line",
                    )
                layer.dxf.linetype = "DASHED"

    def _point(self, model: ConfigurationModel, x: float, y: float) -> tuple[float, float]:
        """Room inches (y down) to drawing units (y up)."""
        return (x * self.scale, (model.room.length_in - y) * self.scale)

    def _draw_room(self, msp: Modelspace, model: ConfigurationModel) -> None:
        w = model.room.width_in
        l = model.room.length_in
        corners = [(0, 0), (w, 0), (w, l), (0, l)]
        msp.add_lwpolyline(
            [self._point(model, x, y) for x, y in corners],
            close=True,
            dxfattribs={"layer": "WALLS"},
        )
        if model.planner_type is PlannerType.GARAGE and model.room.bays > 1:
            bay_width = w / model.room.bays
            for i in range(1, model.room.bays):
                msp.add_line(
                    self._point(model, bay_width * i, 0),
                    self._point(model, bay_width * i, l),
                    dxfattribs={"layer": "BAYS"},
                )

    def _draw_opening(
        self, msp: Modelspace, model: ConfigurationModel, opening: Opening
    ) -> None:
        w = model.room.width_in
        l = model.room.length_in
        start = opening.offset_from_left * INCHES_PER_FOOT
        end = start + opening.width * INCHES_PER_FOOT
        depth = OPENING_SYMBOL_DEPTH_IN
        if opening.wall is StructureWall.FRONT:
            rect = [(start, 0), (end, 0), (end, depth), (start, depth)]
        elif opening.wall is StructureWall.BACK:
            rect = [(start, l - depth), (end, l - depth), (end, l), (start, l)]
        elif opening.wall is StructureWall.LEFT:
            rect = [(0, start), (depth, start), (depth, end), (0, end)]
        else:
            rect = [(w - depth, start), (w, start), (w, end), (w - depth, end)]
        msp.add_lwpolyline(
            [self._point(model, x, y) for x, y in rect],
            close=True,
            dxfattribs={"layer": "OPENINGS"},
        )

    def _draw_items(self, msp: Modelspace, model: ConfigurationModel) -> None:
        text_height = 2.0 * self.scale
        for placed in model.items:
            points = [self._point(model, c.x, c.y) for c in item_corners(placed)]
            msp.add_lwpolyline(points, close=True, dxfattribs={"layer": "ITEMS"})
            if self.include_labels:
                center = rotated_center(placed)
                msp.add_text(
                    placed.name,
                    height=text_height,
                    dxfattribs={"layer": "LABELS"},
                ).set_placement(
                    self._point(model, center.x, center.y),
                    align=TextEntityAlignment.MIDDLE_CENTER,
                )


__all__ = ["DxfExporter", "LAYERS"]
