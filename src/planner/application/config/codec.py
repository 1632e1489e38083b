"""Saved-design JSON codec.

Storage of saved designs belongs to the host; this module only fixes the
record shape and its JSON encoding. Encoding is deterministic, so
``export_design(import_design(text)) == text`` for any text this module
produced, and ``import_design(export_design(d)) == d``.
"""

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from planner.application.config.adapter import config_to_model, model_to_config
from planner.application.config.loader import parse_json, validate_data
from planner.application.config.schema import SavedDesignSchema
from planner.domain.entities import ConfigurationModel

__all__ = [
    "SavedDesign",
    "config_to_json",
    "design_to_dict",
    "export_design",
    "import_design",
    "new_saved_design",
]


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class SavedDesign:
    """A named, timestamped design as the host persists it."""

    id: str
    name: str
    config: ConfigurationModel
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)


def new_saved_design(config: ConfigurationModel, name: str | None = None) -> SavedDesign:
    """Wrap a model in a fresh record with a random id and current timestamps."""
    stamp = _now()
    return SavedDesign(
        id=str(uuid.uuid4()),
        name=name if name is not None else config.name,
        config=config,
        created_at=stamp,
        updated_at=stamp,
    )


def _to_schema(design: SavedDesign) -> SavedDesignSchema:
    return SavedDesignSchema(
        id=design.id,
        name=design.name,
        config=model_to_config(design.config),
        created_at=design.created_at,
        updated_at=design.updated_at,
    )


def design_to_dict(design: SavedDesign) -> dict[str, Any]:
    """JSON-compatible dictionary form of a saved design."""
    return _to_schema(design).model_dump(mode="json")


def export_design(design: SavedDesign) -> str:
    """Encode a saved design as indented JSON."""
    return _to_schema(design).model_dump_json(indent=2)


def import_design(content: str) -> SavedDesign:
    """Decode a saved design.

    Raises:
        ConfigError: If the text is not valid JSON or not a valid record.
    """
    record: SavedDesignSchema = validate_data(parse_json(content), SavedDesignSchema)
    return SavedDesign(
        id=record.id,
        name=record.name,
        config=config_to_model(record.config),
        created_at=record.created_at,
        updated_at=record.updated_at,
    )


def config_to_json(config: ConfigurationModel) -> str:
    """Encode just the design (no saved-design envelope) as indented JSON."""
    return model_to_config(config).model_dump_json(indent=2)
