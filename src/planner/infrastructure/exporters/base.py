"""Exporter protocol, format registry and multi-format export manager."""

from __future__ import annotations

import logging
from abc import abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar, Protocol, runtime_checkable

if TYPE_CHECKING:
    from planner.domain.entities import ConfigurationModel


logger = logging.getLogger(__name__)


@runtime_checkable
class Exporter(Protocol):
    """Interface every design exporter implements.

    Attributes:
        format_name: Registry key, e.g. "svg" or "stl".
        file_extension: Extension without the leading dot.
    """

    format_name: ClassVar[str]
    file_extension: ClassVar[str]

    @abstractmethod
    def export(self, model: ConfigurationModel, path: Path) -> None:
        """Write the design to ``path``."""
        ...

    def export_string(self, model: ConfigurationModel) -> str:
        """Render the design as text.

        Raises:
            NotImplementedError: For binary formats such as STL.
        """
        raise NotImplementedError(
            f"Format '{self.format_name}' does not support string export"
        )


class ExporterRegistry:
    """Format name -> exporter class lookup.

    Exporter modules register themselves at import time:

        @ExporterRegistry.register("svg")
        class SvgExporter:
            format_name = "svg"
            file_extension = "svg"
    """

    _exporters: ClassVar[dict[str, type[Exporter]]] = {}

    @classmethod
    def register(cls, format_name: str):
        """Class decorator adding an exporter under ``format_name``."""

        def decorator(exporter_class: type[Exporter]) -> type[Exporter]:
            if format_name in cls._exporters:
                logger.warning(
                    f"Overwriting existing exporter for format '{format_name}'"
                )
            cls._exporters[format_name] = exporter_class
            logger.debug(f"Registered exporter '{format_name}': {exporter_class.__name__}")
            return exporter_class

        return decorator

    @classmethod
    def get(cls, format_name: str) -> type[Exporter]:
        """Look up an exporter class.

        Raises:
            KeyError: If nothing is registered under ``format_name``.
        """
        if format_name not in cls._exporters:
            available = ", ".join(sorted(cls._exporters))
            raise KeyError(
                f"No exporter registered for format '{format_name}'. "
                f"Available formats: {available or 'none'}"
            )
        return cls._exporters[format_name]

    @classmethod
    def available_formats(cls) -> list[str]:
        return sorted(cls._exporters)

    @classmethod
    def is_registered(cls, format_name: str) -> bool:
        return format_name in cls._exporters

    @classmethod
    def clear(cls) -> None:
        """Remove every registration (used by tests)."""
        cls._exporters.clear()


class ExportManager:
    """Writes one design to several formats in a directory.

    Files are named ``{project_name}_{format}.{ext}``.
    """

    def __init__(self, output_dir: Path) -> None:
        self.output_dir = Path(output_dir)

    def export_all(
        self,
        formats: list[str],
        model: ConfigurationModel,
        project_name: str = "design",
    ) -> dict[str, Path]:
        """Export to every format in ``formats``.

        Returns:
            Format name -> written path.

        Raises:
            KeyError: If any format is not registered.
            OSError: If a file cannot be written.
        """
        self.output_dir.mkdir(parents=True, exist_ok=True)
        results: dict[str, Path] = {}
        for format_name in formats:
            exporter = ExporterRegistry.get(format_name)()
            filepath = self.output_dir / f"{project_name}_{format_name}.{exporter.file_extension}"
            logger.info(f"Exporting to {format_name}: {filepath}")
            exporter.export(model, filepath)
            results[format_name] = filepath
        return results

    def export_single(
        self,
        format_name: str,
        model: ConfigurationModel,
        project_name: str = "design",
    ) -> Path:
        return self.export_all([format_name], model, project_name)[format_name]
