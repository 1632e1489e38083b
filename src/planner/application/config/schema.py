"""Pydantic models for design files.

A design file is the JSON form of one ConfigurationModel. Placed items carry
their catalog record by value so that a design stays loadable after the
catalog changes; hand-written files and bundled templates may instead name a
stock entry with ``catalog_id``.
"""

from datetime import datetime
from typing import Annotated, Literal, Union

from pydantic import (
    BaseModel,
    RootModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

from planner.domain.catalog import get_catalog_item
from planner.domain.value_objects import (
    ApplianceType,
    CabinetFinish,
    CabinetType,
    CountertopMaterial,
    ItemWall,
    OpeningType,
    PlannerType,
    RoofingMaterial,
    RoofStyle,
    SidingType,
    StructureWall,
    ViewMode,
    WallFraming,
)

# Version 1.0: Initial design file format
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})
CURRENT_VERSION = "1.0"


class CabinetItemConfig(BaseModel):
    """Cabinet catalog record. Dimensions in inches."""

    model_config = ConfigDict(extra="forbid")

    kind: Literal["cabinet"] = "cabinet"
    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    cabinet_type: CabinetType
    width: float = Field(..., gt=0)
    height: float = Field(..., gt=0)
    depth: float = Field(..., gt=0)
    door_count: int = Field(default=0, ge=0)
    drawer_count: int = Field(default=0, ge=0)
    unit_price: float | None = Field(default=None, ge=0)


class ApplianceItemConfig(BaseModel):
    """Appliance catalog record. Dimensions in inches."""

    model_config = ConfigDict(extra="forbid")

    kind: Literal["appliance"] = "appliance"
    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    appliance_type: ApplianceType
    width: float = Field(..., gt=0)
    height: float = Field(..., gt=0)
    depth: float = Field(..., gt=0)
    unit_price: float | None = Field(default=None, ge=0)


class OpeningItemConfig(BaseModel):
    """Door or window catalog record. Dimensions in inches."""

    model_config = ConfigDict(extra="forbid")

    kind: Literal["opening"] = "opening"
    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    opening_type: OpeningType
    width: float = Field(..., gt=0)
    height: float = Field(..., gt=0)
    depth: float = Field(default=4.0, gt=0)
    sill_height: float = Field(default=0.0, ge=0)
    unit_price: float | None = Field(default=None, ge=0)


CatalogItemConfig = Annotated[
    Union[CabinetItemConfig, ApplianceItemConfig, OpeningItemConfig],
    Field(discriminator="kind"),
]


class RoomConfig(BaseModel):
    """Room envelope.

    Attributes:
        width: Width in feet (front/back wall length)
        length: Length in feet (side wall length)
        height: Wall height in feet
        grid_size: Snap grid spacing in inches
        snap_enabled: Snap items to the grid when a gesture ends
        wall_framing: Stud size for garage walls
        roof_style: Garage roof shape
        roof_pitch: Rise per 12 of run (clamped to 24)
        siding_type: Exterior siding
        roofing_material: Roof covering
        bays: Garage bay count (clamped to 1..3)
    """

    model_config = ConfigDict(extra="forbid")

    width: float = Field(..., gt=0)
    length: float = Field(..., gt=0)
    height: float = Field(..., gt=0)
    grid_size: float = Field(default=6.0, gt=0)
    snap_enabled: bool = False
    wall_framing: WallFraming = WallFraming.TWO_BY_FOUR
    roof_style: RoofStyle = RoofStyle.GABLE
    roof_pitch: float = Field(default=6.0, ge=0)
    siding_type: SidingType = SidingType.VINYL
    roofing_material: RoofingMaterial = RoofingMaterial.ASPHALT_SHINGLE
    bays: int = Field(default=1, ge=1)


class FeaturesConfig(BaseModel):
    """Feature flags. Garage flags are ignored by kitchens and vice versa."""

    model_config = ConfigDict(extra="forbid")

    has_walk_door: bool = False
    walk_door_wall: StructureWall = StructureWall.FRONT
    has_attic_trusses: bool = False
    is_insulated: bool = False
    has_electrical: bool = False
    cabinet_finish: CabinetFinish = CabinetFinish.WHITE
    countertop_material: CountertopMaterial = CountertopMaterial.GRANITE
    has_backsplash: bool = True
    has_island: bool = False
    has_pantry: bool = False


class PlacedItemConfig(BaseModel):
    """A placed catalog item. Give exactly one of ``item`` or ``catalog_id``."""

    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., min_length=1)
    item: CatalogItemConfig | None = None
    catalog_id: str | None = Field(
        default=None, description="Id of a stock catalog entry"
    )
    x: float = 0.0
    y: float = 0.0
    rotation: float = Field(default=0.0, ge=0, lt=360)
    wall: ItemWall = ItemWall.NORTH
    finish: CabinetFinish | None = None

    @field_validator("catalog_id")
    @classmethod
    def validate_catalog_id(cls, v: str | None) -> str | None:
        """Ensure a referenced catalog entry exists."""
        if v is None:
            return v
        try:
            get_catalog_item(v)
        except KeyError:
            raise ValueError(f"Unknown catalog item '{v}'") from None
        return v

    @model_validator(mode="after")
    def validate_item_source(self) -> "PlacedItemConfig":
        """Exactly one of 'item' and 'catalog_id' must be given."""
        if (self.item is None) == (self.catalog_id is None):
            raise ValueError("Specify exactly one of 'item' or 'catalog_id'")
        return self


class OpeningConfig(BaseModel):
    """Structural opening on an exterior wall. Units are feet."""

    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., min_length=1)
    opening_type: OpeningType
    width: float = Field(..., gt=0)
    height: float = Field(..., gt=0)
    wall: StructureWall = StructureWall.FRONT
    offset_from_left: float = Field(default=0.0, ge=0)
    offset_from_floor: float = Field(default=0.0, ge=0)


class DisplayConfig(BaseModel):
    """Host display preferences stored with a design."""

    model_config = ConfigDict(extra="forbid")

    show_grid: bool = False
    view_mode: ViewMode = ViewMode.PLAN


class ConfigurationSchema(BaseModel):
    """Root model of a design file.

    Example:
        >>> config = ConfigurationSchema(
        ...     schema_version="1.0",
        ...     planner_type="garage",
        ...     room=RoomConfig(width=20, length=20, height=9),
        ... )
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    planner_type: PlannerType
    name: str = ""
    room: RoomConfig
    features: FeaturesConfig = Field(default_factory=FeaturesConfig)
    items: list[PlacedItemConfig] = Field(default_factory=list)
    openings: list[OpeningConfig] = Field(default_factory=list)
    display: DisplayConfig = Field(default_factory=DisplayConfig)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Accept supported versions and newer minors of a supported major."""
        if v in SUPPORTED_VERSIONS:
            return v
        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v
        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
        )

    @model_validator(mode="after")
    def validate_unique_ids(self) -> "ConfigurationSchema":
        """Item ids and opening ids must each be unique."""
        for label, ids in (
            ("item", [item.id for item in self.items]),
            ("opening", [opening.id for opening in self.openings]),
        ):
            seen: set[str] = set()
            for identifier in ids:
                if identifier in seen:
                    raise ValueError(f"Duplicate {label} id '{identifier}'")
                seen.add(identifier)
        return self


class SavedDesignSchema(BaseModel):
    """Saved-design record: a named, timestamped design."""

    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., min_length=1)
    name: str
    config: ConfigurationSchema
    created_at: datetime
    updated_at: datetime


class PriceBookSchema(RootModel[dict[str, Annotated[float, Field(ge=0)]]]):
    """Line description -> unit price overrides for the materials take-off."""
