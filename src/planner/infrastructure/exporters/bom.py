"""Bill of Materials exporter.

Runs the materials take-off for a design and writes it as text, CSV, or JSON.
Lines are grouped by category in calculation order; costs are shown when
requested and only for priced lines.
"""

from __future__ import annotations

import csv
import io
import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar

from planner.domain.services.takeoff import BillOfMaterials, calculate_materials
from planner.infrastructure.exporters.base import ExporterRegistry

if TYPE_CHECKING:
    from planner.domain.entities import ConfigurationModel


logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ("text", "csv", "json")


@ExporterRegistry.register("bom")  # type: ignore[arg-type]
class BomExporter:
    """Materials take-off as a text, CSV, or JSON document.

    Attributes:
        format_name: "bom"
        file_extension: "txt", "csv", or "json" based on output_format
    """

    format_name: ClassVar[str] = "bom"

    def __init__(
        self,
        output_format: str = "text",
        include_costs: bool = True,
        price_book: Mapping[str, float] | None = None,
    ) -> None:
        """Initialize the BOM exporter.

        Args:
            output_format: Output format - "text", "csv", or "json".
            include_costs: Whether to include price columns in output.
            price_book: Optional description -> unit price overrides.
        """
        if output_format not in OUTPUT_FORMATS:
            raise ValueError(
                f"Invalid output format: {output_format}. "
                f"Must be one of: {', '.join(OUTPUT_FORMATS)}"
            )
        self.output_format = output_format
        self.include_costs = include_costs
        self.price_book = dict(price_book or {})

        self._file_extension = {
            "text": "txt",
            "csv": "csv",
            "json": "json",
        }[output_format]

    @property
    def file_extension(self) -> str:
        return self._file_extension

    def generate(self, model: ConfigurationModel) -> BillOfMaterials:
        return calculate_materials(model, self.price_book)

    def export(self, model: ConfigurationModel, path: Path) -> None:
        content = self.export_string(model)
        path.write_text(content, encoding="utf-8")
        logger.info(f"Exported BOM to {path}")

    def export_string(self, model: ConfigurationModel) -> str:
        return self.format(self.generate(model))

    def format(self, bom: BillOfMaterials) -> str:
        """Render an already computed bill in the configured format."""
        if self.output_format == "csv":
            return self.format_csv(bom)
        if self.output_format == "json":
            return self.format_json(bom)
        return self.format_text(bom)

    def format_text(self, bom: BillOfMaterials) -> str:
        lines: list[str] = []
        lines.append("=" * 60)
        lines.append("BILL OF MATERIALS")
        lines.append("=" * 60)
        lines.append("")

        if bom.is_empty:
            lines.append("  (No materials)")
            lines.append("")

        for category, items in bom.by_category().items():
            lines.append(category.upper())
            lines.append("-" * 40)
            for item in items:
                cost_str = ""
                if self.include_costs and item.unit_price is not None:
                    cost_str = f" @ ${item.unit_price:.2f} = ${item.total_price:.2f}"
                lines.append(f"  {item.description}: {item.quantity} {item.unit}{cost_str}")
                if item.notes:
                    lines.append(f"    ({item.notes})")
            lines.append("")

        if self.include_costs and not bom.is_empty:
            totals = bom.category_totals
            width = max(len(category) for category in totals) + 1
            lines.append("=" * 60)
            lines.append("COST SUMMARY")
            lines.append("-" * 40)
            for category, total in totals.items():
                lines.append(f"  {category + ':':<{width}} ${total:>10.2f}")
            lines.append("-" * 40)
            lines.append(f"  {'TOTAL:':<{width}} ${bom.total_cost:>10.2f}")
            lines.append("")

        return "\n".join(lines)

    def format_csv(self, bom: BillOfMaterials) -> str:
        output = io.StringIO()
        writer = csv.writer(output)

        header = ["Category", "Item", "Quantity", "Unit", "Notes"]
        if self.include_costs:
            header += ["Unit Cost", "Total Cost"]
        writer.writerow(header)

        for item in bom:
            row: list[Any] = [
                item.category,
                item.description,
                item.quantity,
                item.unit,
                item.notes or "",
            ]
            if self.include_costs:
                row.append(f"{item.unit_price:.2f}" if item.unit_price is not None else "")
                row.append(f"{item.total_price:.2f}" if item.total_price is not None else "")
            writer.writerow(row)

        return output.getvalue()

    def format_json(self, bom: BillOfMaterials) -> str:
        data: dict[str, Any] = {
            "categories": [
                {
                    "name": category,
                    "items": [self._item_dict(item) for item in items],
                }
                for category, items in bom.by_category().items()
            ],
        }
        if self.include_costs:
            data["cost_summary"] = {
                "categories": bom.category_totals,
                "total": bom.total_cost,
            }
        return json.dumps(data, indent=2)

    def _item_dict(self, item) -> dict[str, Any]:
        data = item.to_dict()
        del data["category"]
        if not self.include_costs:
            data.pop("unit_price", None)
            data.pop("total_price", None)
        return data


__all__ = ["BomExporter", "OUTPUT_FORMATS"]
