"""Integration tests for the validate CLI command."""

import json
from pathlib import Path
from typing import Any

import pytest
from typer.testing import CliRunner

from planner.cli.main import app

runner = CliRunner()


def _kitchen(items: list[dict[str, Any]] | None = None) -> dict[str, Any]:
    return {
        "schema_version": "1.0",
        "planner_type": "kitchen",
        "name": "Test Kitchen",
        "room": {"width": 12, "length": 14, "height": 8},
        "items": items or [],
    }


@pytest.fixture
def write_design(tmp_path: Path):
    """Write a design dict (or raw text) to a file and return its path."""

    def _write(content: dict[str, Any] | str, name: str = "design.json") -> Path:
        path = tmp_path / name
        text = content if isinstance(content, str) else json.dumps(content, indent=2)
        path.write_text(text)
        return path

    return _write


class TestValidateCommand:
    """Tests for 'planner validate'."""

    def test_valid_design(self, write_design) -> None:
        path = write_design(
            _kitchen([{"id": "cab-1", "catalog_id": "base-24", "x": 0, "y": 0}])
        )

        result = runner.invoke(app, ["validate", str(path)])

        assert result.exit_code == 0
        assert f"Validating {path}" in result.output
        assert "Validation passed. Design is valid." in result.output

    def test_empty_design_is_valid(self, write_design) -> None:
        result = runner.invoke(app, ["validate", str(write_design(_kitchen()))])

        assert result.exit_code == 0

    def test_overlap_is_a_warning(self, write_design) -> None:
        path = write_design(
            _kitchen(
                [
                    {"id": "cab-1", "catalog_id": "base-24", "x": 0, "y": 0},
                    {"id": "cab-2", "catalog_id": "base-24", "x": 12, "y": 0},
                ]
            )
        )

        result = runner.invoke(app, ["validate", str(path)])

        assert result.exit_code == 2
        assert "Warnings:" in result.output
        assert "Cabinets overlap" in result.output
        assert "Validation passed with 1 warning(s)" in result.output

    def test_out_of_room_items_warn(self, write_design) -> None:
        path = write_design(
            _kitchen(
                [
                    {"id": "cab-1", "catalog_id": "base-24", "x": -6, "y": 0},
                    {"id": "cab-2", "catalog_id": "base-24", "x": 130, "y": 60},
                ]
            )
        )

        result = runner.invoke(app, ["validate", str(path)])

        assert result.exit_code == 2
        assert "is positioned outside the room" in result.output
        assert "extends beyond room boundaries" in result.output
        assert "Validation passed with 2 warning(s)" in result.output

    def test_invalid_json(self, write_design) -> None:
        path = write_design('{"schema_version": "1.0",\n  "room": }')

        result = runner.invoke(app, ["validate", str(path)])

        assert result.exit_code == 1
        assert "Invalid JSON syntax" in result.output
        assert "Line 2" in result.output
        assert "Validation failed." in result.output

    def test_schema_error_reports_path(self, write_design) -> None:
        design = _kitchen()
        design["room"]["width"] = -4
        path = write_design(design)

        result = runner.invoke(app, ["validate", str(path)])

        assert result.exit_code == 1
        assert "Errors:" in result.output
        assert "room.width" in result.output

    def test_unsupported_version(self, write_design) -> None:
        design = _kitchen()
        design["schema_version"] = "9.0"

        result = runner.invoke(app, ["validate", str(write_design(design))])

        assert result.exit_code == 1
        assert "schema_version" in result.output

    def test_missing_file(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["validate", str(tmp_path / "missing.json")])

        assert result.exit_code == 1
        assert "Design file not found" in result.output
