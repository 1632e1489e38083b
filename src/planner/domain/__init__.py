"""Domain layer - room model, catalog, placement and take-off."""

from .catalog import APPLIANCE_CATALOG, CABINET_CATALOG, OPENING_CATALOG, catalog_for, get_catalog_item
from .entities import (
    ApplianceSpec,
    CabinetSpec,
    CatalogItem,
    ConfigurationModel,
    Features,
    Opening,
    OpeningSpec,
    PlacedItem,
    RoomSpec,
)
from .value_objects import (
    ApplianceType,
    CabinetFinish,
    CabinetType,
    CountertopMaterial,
    ItemKind,
    ItemWall,
    OpeningType,
    PlannerType,
    Point2D,
    Point3D,
    RoofingMaterial,
    RoofStyle,
    SidingType,
    StructureWall,
    ViewMode,
    WallFraming,
)

__all__ = [
    "APPLIANCE_CATALOG",
    "ApplianceSpec",
    "ApplianceType",
    "CABINET_CATALOG",
    "CabinetFinish",
    "CabinetSpec",
    "CabinetType",
    "CatalogItem",
    "ConfigurationModel",
    "CountertopMaterial",
    "Features",
    "ItemKind",
    "ItemWall",
    "OPENING_CATALOG",
    "Opening",
    "OpeningSpec",
    "OpeningType",
    "PlacedItem",
    "PlannerType",
    "Point2D",
    "Point3D",
    "RoofStyle",
    "RoofingMaterial",
    "RoomSpec",
    "SidingType",
    "StructureWall",
    "ViewMode",
    "WallFraming",
    "catalog_for",
    "get_catalog_item",
]
