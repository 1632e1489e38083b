"""JSON exporter writing the normalized design file.

The output is the same document ``load_config`` reads, with every default
resolved and every placed item written as a full record, so an exported
design can be loaded back unchanged.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from planner.application.config import config_to_json
from planner.infrastructure.exporters.base import ExporterRegistry

if TYPE_CHECKING:
    from planner.domain.entities import ConfigurationModel


logger = logging.getLogger(__name__)


@ExporterRegistry.register("json")
class DesignJsonExporter:
    """Design file as indented JSON."""

    format_name: ClassVar[str] = "json"
    file_extension: ClassVar[str] = "json"

    def export(self, model: ConfigurationModel, path: Path) -> None:
        path.write_text(self.export_string(model), encoding="utf-8")
        logger.info(f"Exported design JSON to {path}")

    def export_string(self, model: ConfigurationModel) -> str:
        return config_to_json(model)
