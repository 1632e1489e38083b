"""Design file loading with structured errors.

Reads JSON design files and validates them against ConfigurationSchema.
Every failure surfaces as a ConfigError whose ``error_type`` names the
stage that failed, so the CLI and the web API can report it consistently.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from planner.application.config.schema import ConfigurationSchema, PriceBookSchema


class ConfigError(Exception):
    """Raised when a design file cannot be read, parsed or validated.

    Attributes:
        message: Human-readable summary
        error_type: One of file_not_found, permission_denied, file_read_error,
            json_parse, validation
        path: Source file, when the design came from disk
        details: Per-problem records (JSON path and message, or line/column)
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


def _format_json_path(loc: tuple[str | int, ...]) -> str:
    """Render a pydantic error location as a JSON path.

    Examples:
        >>> _format_json_path(("room", "width"))
        'room.width'
        >>> _format_json_path(("items", 2, "item", "cabinet", "width"))
        'items[2].item.cabinet.width'
    """
    parts: list[str] = []
    for segment in loc:
        if isinstance(segment, int):
            if parts:
                parts[-1] = f"{parts[-1]}[{segment}]"
            else:
                parts.append(f"[{segment}]")
        else:
            parts.append(str(segment))
    return ".".join(parts)


def _extract_validation_errors(
    error: PydanticValidationError,
) -> list[dict[str, Any]]:
    """Flatten a pydantic ValidationError into path/message records."""
    return [
        {
            "path": _format_json_path(err["loc"]),
            "message": err["msg"],
            "value": err.get("input"),
            "error_type": err["type"],
        }
        for err in error.errors()
    ]


def _format_validation_error_message(details: list[dict[str, Any]]) -> str:
    lines = ["Design validation failed:"]
    for detail in details:
        path = detail["path"] or "<root>"
        value = detail.get("value")
        if value is not None and not isinstance(value, (dict, list)):
            lines.append(f"  - {path}: {detail['message']} (got: {value!r})")
        else:
            lines.append(f"  - {path}: {detail['message']}")
    return "\n".join(lines)


def validate_data(
    data: Any,
    model: type[BaseModel] = ConfigurationSchema,
    path: Path | None = None,
) -> Any:
    """Validate parsed JSON against ``model``.

    Raises:
        ConfigError: With error_type "validation" and one detail per problem.
    """
    try:
        return model.model_validate(data)
    except PydanticValidationError as e:
        details = _extract_validation_errors(e)
        raise ConfigError(
            message=_format_validation_error_message(details),
            error_type="validation",
            path=path,
            details=details,
        ) from e


def parse_json(content: str, path: Path | None = None) -> Any:
    """Parse JSON text, reporting syntax errors with line and column."""
    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        source = f" in {path}" if path else ""
        raise ConfigError(
            message=f"Invalid JSON{source} (line {e.lineno}, column {e.colno}): {e.msg}",
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        ) from e


def read_design_file(path: Path) -> str:
    """Read a design file's text.

    Raises:
        ConfigError: file_not_found, permission_denied or file_read_error.
    """
    if not path.exists():
        raise ConfigError(
            message=f"Design file not found: {path}",
            error_type="file_not_found",
            path=path,
        )
    try:
        return path.read_text(encoding="utf-8")
    except PermissionError as e:
        raise ConfigError(
            message=f"Permission denied reading design file: {path}",
            error_type="permission_denied",
            path=path,
        ) from e
    except OSError as e:
        raise ConfigError(
            message=f"Error reading design file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        ) from e


def load_config(path: Path) -> ConfigurationSchema:
    """Load and validate a design from a JSON file.

    Example:
        >>> try:
        ...     config = load_config(Path("garage.json"))
        ... except ConfigError as e:
        ...     for detail in e.details:
        ...         print(f"{detail['path']}: {detail['message']}")
    """
    content = read_design_file(path)
    data = parse_json(content, path)
    return validate_data(data, ConfigurationSchema, path)


def load_config_from_dict(data: dict[str, Any]) -> ConfigurationSchema:
    """Validate a design already parsed into a dictionary (e.g. a request body)."""
    return validate_data(data, ConfigurationSchema)


def load_config_from_json(content: str) -> ConfigurationSchema:
    """Parse and validate a design from JSON text."""
    return validate_data(parse_json(content), ConfigurationSchema)


def load_price_book(path: Path) -> dict[str, float]:
    """Load a JSON price book mapping line descriptions to unit prices.

    Raises:
        ConfigError: If the file is unreadable, not JSON, or has negative
            or non-numeric prices.
    """
    content = read_design_file(path)
    data = parse_json(content, path)
    return validate_data(data, PriceBookSchema, path).root
