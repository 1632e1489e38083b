"""Unit tests for the BOM exporter."""

import csv
import io
import json

import pytest

from planner.domain.services.takeoff import BillOfMaterials, MaterialLineItem
from planner.infrastructure.exporters import BomExporter


@pytest.fixture
def bom() -> BillOfMaterials:
    return BillOfMaterials((
        MaterialLineItem("Appliances", 'Gas Range 30"', 1, "ea", unit_price=800.0),
        MaterialLineItem("Hardware", "Cabinet Hinges", 8, "ea", notes="Soft close"),
    ))


class TestBomExporterInit:
    def test_invalid_format(self) -> None:
        with pytest.raises(ValueError, match="Invalid output format"):
            BomExporter(output_format="xml")

    @pytest.mark.parametrize("fmt,ext", [("text", "txt"), ("csv", "csv"), ("json", "json")])
    def test_file_extension(self, fmt: str, ext: str) -> None:
        assert BomExporter(output_format=fmt).file_extension == ext


class TestTextFormat:
    def test_layout(self, bom: BillOfMaterials) -> None:
        text = BomExporter().format(bom)
        lines = text.splitlines()
        assert lines[1] == "BILL OF MATERIALS"
        assert "APPLIANCES" in lines
        assert '  Gas Range 30": 1 ea @ $800.00 = $800.00' in lines
        assert "  Cabinet Hinges: 8 ea" in lines
        assert "    (Soft close)" in lines
        assert "COST SUMMARY" in lines
        assert any(line.startswith("  TOTAL:") and line.endswith("800.00") for line in lines)

    def test_without_costs(self, bom: BillOfMaterials) -> None:
        text = BomExporter(include_costs=False).format(bom)
        assert "$" not in text
        assert "COST SUMMARY" not in text

    def test_empty(self) -> None:
        assert "(No materials)" in BomExporter().format(BillOfMaterials())


class TestCsvFormat:
    def test_rows(self, bom: BillOfMaterials) -> None:
        rows = list(csv.reader(io.StringIO(BomExporter(output_format="csv").format(bom))))
        assert rows[0] == ["Category", "Item", "Quantity", "Unit", "Notes",
                           "Unit Cost", "Total Cost"]
        assert rows[1] == ["Appliances", 'Gas Range 30"', "1", "ea", "", "800.00", "800.00"]
        assert rows[2][-2:] == ["", ""]

    def test_without_costs(self, bom: BillOfMaterials) -> None:
        exporter = BomExporter(output_format="csv", include_costs=False)
        header = next(csv.reader(io.StringIO(exporter.format(bom))))
        assert header == ["Category", "Item", "Quantity", "Unit", "Notes"]


class TestJsonFormat:
    def test_structure(self, bom: BillOfMaterials) -> None:
        data = json.loads(BomExporter(output_format="json").format(bom))
        assert [c["name"] for c in data["categories"]] == ["Appliances", "Hardware"]
        first = data["categories"][0]["items"][0]
        assert "category" not in first
        assert first["total_price"] == 800
        assert data["cost_summary"] == {
            "categories": {"Appliances": 800, "Hardware": 0},
            "total": 800,
        }

    def test_without_costs(self, bom: BillOfMaterials) -> None:
        data = json.loads(BomExporter(output_format="json", include_costs=False).format(bom))
        assert "cost_summary" not in data
        assert "unit_price" not in data["categories"][0]["items"][0]


class TestExport:
    def test_export_uses_price_book(self, tmp_path, garage_model) -> None:
        exporter = BomExporter(output_format="json", price_book={"Garage Door Opener": 350})
        path = tmp_path / "bom.json"
        exporter.export(garage_model, path)
        data = json.loads(path.read_text())
        assert data["cost_summary"]["total"] == 350
