"""Tests for the DXF exporter."""

from __future__ import annotations

from pathlib import Path

import ezdxf
import pytest

from planner.domain.catalog import get_catalog_item
from planner.domain.entities import PlacedItem
from planner.infrastructure.exporters import DxfExporter
from planner.infrastructure.exporters.dxf import LAYERS


def _entities(doc, layer: str) -> list:
    return [e for e in doc.modelspace() if e.dxf.layer == layer]


class TestDxfExporterInit:
    def test_defaults(self) -> None:
        exporter = DxfExporter()
        assert exporter.units == "inches"
        assert exporter.scale == 1.0

    def test_mm_units(self) -> None:
        assert DxfExporter(units="mm").scale == 25.4

    def test_invalid_units(self) -> None:
        with pytest.raises(ValueError, match="Invalid units"):
            DxfExporter(units="feet")


class TestDxfDocument:
    """Tests for the generated drawing."""

    def test_layers_created(self, garage_model) -> None:
        doc = DxfExporter().build_document(garage_model)
        for name in LAYERS:
            assert name in doc.layers

    def test_room_outline_flips_y(self, kitchen_model) -> None:
        doc = DxfExporter().build_document(kitchen_model)
        outline = _entities(doc, "WALLS")[0]
        points = [(round(x, 6), round(y, 6)) for x, y, *_ in outline.get_points()]
        assert points == [(0, 168), (144, 168), (144, 0), (0, 0)]
        assert outline.closed

    def test_front_opening_at_top(self, garage_model) -> None:
        doc = DxfExporter().build_document(garage_model)
        door = _entities(doc, "OPENINGS")[0]
        ys = {round(y, 6) for _, y, *_ in door.get_points()}
        assert ys == {240, 234}

    def test_bay_lines(self, garage_model) -> None:
        doc = DxfExporter().build_document(garage_model)
        bays = _entities(doc, "BAYS")
        assert len(bays) == 1
        assert bays[0].dxf.start.x == pytest.approx(120)

    def test_items_and_labels(self, kitchen_model) -> None:
        kitchen_model.items.append(PlacedItem("cab-1", get_catalog_item("base-24"), x=12))
        doc = DxfExporter().build_document(kitchen_model)
        assert len(_entities(doc, "ITEMS")) == 1
        labels = _entities(doc, "LABELS")
        assert [t.dxf.text for t in labels] == ['Base Cabinet 24"']

    def test_labels_can_be_disabled(self, kitchen_model) -> None:
        kitchen_model.items.append(PlacedItem("cab-1", get_catalog_item("base-24")))
        doc = DxfExporter(include_labels=False).build_document(kitchen_model)
        assert _entities(doc, "LABELS") == []

    def test_mm_scaling(self, kitchen_model) -> None:
        doc = DxfExporter(units="mm").build_document(kitchen_model)
        outline = _entities(doc, "WALLS")[0]
        xs = [x for x, *_ in outline.get_points()]
        assert max(xs) == pytest.approx(144 * 25.4)


class TestDxfExport:
    def test_export_file_is_readable(self, tmp_path: Path, garage_model) -> None:
        path = tmp_path / "plan.dxf"
        DxfExporter().export(garage_model, path)
        doc = ezdxf.readfile(str(path))
        assert len(_entities(doc, "OPENINGS")) == 1

    def test_export_string(self, kitchen_model) -> None:
        content = DxfExporter().export_string(kitchen_model)
        assert "SECTION" in content
        assert "WALLS" in content
