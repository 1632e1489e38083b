"""Domain entities for the structure planner.

Catalog records are immutable reference data. ``PlacedItem``, ``Opening`` and
``ConfigurationModel`` are the mutable state owned by a planner session and
changed only through the placement engine.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Union

from .value_objects import (
    ApplianceType,
    CabinetFinish,
    CabinetType,
    CountertopMaterial,
    ItemKind,
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

MIN_ROOM_DIMENSION_FT = 1.0
MIN_GRID_SIZE_IN = 0.5
MAX_ROOF_PITCH = 24.0
MAX_BAYS = 3

WALK_DOOR_ID = "walk-door"
WALK_DOOR_WIDTH_FT = 3.0
WALK_DOOR_HEIGHT_FT = 80 / 12


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


@dataclass(frozen=True)
class CabinetSpec:
    """Catalog entry for a cabinet box. Dimensions in inches."""

    id: str
    name: str
    cabinet_type: CabinetType
    width: float
    height: float
    depth: float
    door_count: int = 0
    drawer_count: int = 0
    unit_price: float | None = None
    kind: ItemKind = field(default=ItemKind.CABINET, init=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0 or self.depth <= 0:
            raise ValueError("Cabinet dimensions must be positive")
        if self.door_count < 0 or self.drawer_count < 0:
            raise ValueError("Door and drawer counts must be non-negative")

    @property
    def is_wall_mounted(self) -> bool:
        return self.cabinet_type.is_wall_mounted


@dataclass(frozen=True)
class ApplianceSpec:
    """Catalog entry for an appliance. Dimensions in inches."""

    id: str
    name: str
    appliance_type: ApplianceType
    width: float
    height: float
    depth: float
    unit_price: float | None = None
    kind: ItemKind = field(default=ItemKind.APPLIANCE, init=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0 or self.depth <= 0:
            raise ValueError("Appliance dimensions must be positive")

    @property
    def is_wall_mounted(self) -> bool:
        return self.appliance_type.is_wall_mounted


@dataclass(frozen=True)
class OpeningSpec:
    """Catalog entry for a door or window. Dimensions in inches.

    ``depth`` is the frame depth used when an opening is drawn as a solid.
    """

    id: str
    name: str
    opening_type: OpeningType
    width: float
    height: float
    depth: float = 4.0
    sill_height: float = 0.0
    unit_price: float | None = None
    kind: ItemKind = field(default=ItemKind.OPENING, init=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Opening dimensions must be positive")

    @property
    def is_wall_mounted(self) -> bool:
        return False


CatalogItem = Union[CabinetSpec, ApplianceSpec, OpeningSpec]


@dataclass(frozen=True)
class RoomSpec:
    """Room or structure envelope.

    Width, length and height are in feet; grid size is in inches. Use
    :meth:`sanitized` or :meth:`with_changes` for user input: they clamp
    out-of-range values instead of raising.
    """

    width: float
    length: float
    height: float
    grid_size: float = 6.0
    snap_enabled: bool = False
    wall_framing: WallFraming = WallFraming.TWO_BY_FOUR
    roof_style: RoofStyle = RoofStyle.GABLE
    roof_pitch: float = 6.0
    siding_type: SidingType = SidingType.VINYL
    roofing_material: RoofingMaterial = RoofingMaterial.ASPHALT_SHINGLE
    bays: int = 1

    def __post_init__(self) -> None:
        if self.width <= 0 or self.length <= 0 or self.height <= 0:
            raise ValueError("Room dimensions must be positive")
        if self.grid_size <= 0:
            raise ValueError("Grid size must be positive")

    @classmethod
    def sanitized(cls, **values: Any) -> RoomSpec:
        """Build a RoomSpec, clamping numeric fields into their valid ranges."""
        return cls(**_clamp_room_values(values))

    def with_changes(self, **changes: Any) -> RoomSpec:
        """Return a copy with ``changes`` applied and clamped."""
        return replace(self, **_clamp_room_values(changes))

    @property
    def width_in(self) -> float:
        return self.width * 12

    @property
    def length_in(self) -> float:
        return self.length * 12

    @property
    def height_in(self) -> float:
        return self.height * 12

    @property
    def floor_area(self) -> float:
        """Floor area in square feet."""
        return self.width * self.length

    @property
    def perimeter(self) -> float:
        """Perimeter in feet."""
        return (self.width + self.length) * 2


def _clamp_room_values(values: dict[str, Any]) -> dict[str, Any]:
    clamped = dict(values)
    for key in ("width", "length", "height"):
        if key in clamped:
            clamped[key] = max(MIN_ROOM_DIMENSION_FT, float(clamped[key]))
    if "grid_size" in clamped:
        clamped["grid_size"] = max(MIN_GRID_SIZE_IN, float(clamped["grid_size"]))
    if "roof_pitch" in clamped:
        clamped["roof_pitch"] = _clamp(float(clamped["roof_pitch"]), 0.0, MAX_ROOF_PITCH)
    if "bays" in clamped:
        clamped["bays"] = int(_clamp(int(clamped["bays"]), 1, MAX_BAYS))
    return clamped


@dataclass(frozen=True)
class Features:
    """Optional feature flags that drive the take-off categories."""

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


@dataclass
class PlacedItem:
    """A catalog item placed in the room.

    ``x``/``y`` are the top-left corner in room inches; ``rotation`` is in
    degrees and always kept in [0, 360). The catalog record is held by value.
    """

    id: str
    item: CatalogItem
    x: float = 0.0
    y: float = 0.0
    rotation: float = 0.0
    wall: ItemWall = ItemWall.NORTH
    finish: CabinetFinish | None = None

    @property
    def kind(self) -> ItemKind:
        return self.item.kind

    @property
    def name(self) -> str:
        return self.item.name

    @property
    def width(self) -> float:
        return self.item.width

    @property
    def depth(self) -> float:
        return self.item.depth

    @property
    def height(self) -> float:
        return self.item.height

    @property
    def is_wall_mounted(self) -> bool:
        return self.item.is_wall_mounted

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.depth


@dataclass
class Opening:
    """A structural door or window cut into an exterior wall. Units are feet."""

    id: str
    opening_type: OpeningType
    width: float
    height: float
    wall: StructureWall = StructureWall.FRONT
    offset_from_left: float = 0.0
    offset_from_floor: float = 0.0

    @classmethod
    def from_spec(
        cls,
        spec: OpeningSpec,
        opening_id: str,
        wall: StructureWall = StructureWall.FRONT,
        offset_from_left: float = 0.0,
    ) -> Opening:
        return cls(
            id=opening_id,
            opening_type=spec.opening_type,
            width=spec.width / 12,
            height=spec.height / 12,
            wall=wall,
            offset_from_left=offset_from_left,
            offset_from_floor=spec.sill_height / 12,
        )

    @property
    def area(self) -> float:
        """Opening area in square feet."""
        return self.width * self.height

    @property
    def is_door(self) -> bool:
        return self.opening_type.is_door


@dataclass
class ConfigurationModel:
    """The single source of truth for one planner design."""

    planner_type: PlannerType
    room: RoomSpec
    features: Features = field(default_factory=Features)
    items: list[PlacedItem] = field(default_factory=list)
    openings: list[Opening] = field(default_factory=list)
    name: str = ""
    show_grid: bool = False
    view_mode: ViewMode = ViewMode.PLAN

    def find_item(self, item_id: str) -> PlacedItem | None:
        for placed in self.items:
            if placed.id == item_id:
                return placed
        return None

    def items_of_kind(self, kind: ItemKind) -> list[PlacedItem]:
        return [placed for placed in self.items if placed.kind is kind]

    @property
    def cabinets(self) -> list[PlacedItem]:
        return self.items_of_kind(ItemKind.CABINET)

    @property
    def appliances(self) -> list[PlacedItem]:
        return self.items_of_kind(ItemKind.APPLIANCE)

    def structural_openings(self) -> list[Opening]:
        """Configured openings plus the walk door implied by the feature flag.

        The walk door sits one foot in from the far end of its wall.
        """
        openings = list(self.openings)
        if self.planner_type is PlannerType.GARAGE and self.features.has_walk_door:
            wall = self.features.walk_door_wall
            wall_length = self.room.width if wall.runs_along_width else self.room.length
            openings.append(
                Opening(
                    id=WALK_DOOR_ID,
                    opening_type=OpeningType.WALK_DOOR,
                    width=WALK_DOOR_WIDTH_FT,
                    height=WALK_DOOR_HEIGHT_FT,
                    wall=wall,
                    offset_from_left=max(0.0, wall_length - WALK_DOOR_WIDTH_FT - 1.0),
                )
            )
        return openings

    def openings_on(self, wall: StructureWall) -> list[Opening]:
        return [opening for opening in self.structural_openings() if opening.wall is wall]
