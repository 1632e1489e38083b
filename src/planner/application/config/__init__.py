"""Design file schema, loading and conversion.

Public API:
    - ConfigurationSchema: Root model of a design file
    - SavedDesignSchema: Saved-design record model
    - load_config: Load a design from a JSON file
    - load_config_from_dict: Validate a parsed design
    - load_config_from_json: Parse and validate design text
    - ConfigError: Exception for unreadable or invalid designs
    - config_to_model / model_to_config: Schema <-> domain conversion
    - export_design / import_design: Saved-design JSON codec

Example:
    >>> from pathlib import Path
    >>> from planner.application.config import load_config, config_to_model
    >>> model = config_to_model(load_config(Path("garage.json")))
"""

from planner.application.config.adapter import config_to_model, model_to_config
from planner.application.config.codec import (
    SavedDesign,
    config_to_json,
    design_to_dict,
    export_design,
    import_design,
    new_saved_design,
)
from planner.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
    load_config_from_json,
    load_price_book,
)
from planner.application.config.schema import (
    CURRENT_VERSION,
    SUPPORTED_VERSIONS,
    ApplianceItemConfig,
    CabinetItemConfig,
    ConfigurationSchema,
    DisplayConfig,
    FeaturesConfig,
    OpeningConfig,
    OpeningItemConfig,
    PriceBookSchema,
    PlacedItemConfig,
    RoomConfig,
    SavedDesignSchema,
)

__all__ = [
    "ApplianceItemConfig",
    "CURRENT_VERSION",
    "CabinetItemConfig",
    "ConfigError",
    "ConfigurationSchema",
    "DisplayConfig",
    "FeaturesConfig",
    "OpeningConfig",
    "OpeningItemConfig",
    "PriceBookSchema",
    "PlacedItemConfig",
    "RoomConfig",
    "SUPPORTED_VERSIONS",
    "SavedDesign",
    "SavedDesignSchema",
    "config_to_json",
    "config_to_model",
    "design_to_dict",
    "export_design",
    "import_design",
    "load_config",
    "load_config_from_dict",
    "load_config_from_json",
    "load_price_book",
    "model_to_config",
    "new_saved_design",
]
