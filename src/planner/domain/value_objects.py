"""Value objects and enums shared by the planner domain."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class PlannerType(str, Enum):
    """Which planner variant a configuration belongs to."""

    GARAGE = "garage"
    KITCHEN = "kitchen"


class ItemKind(str, Enum):
    """Discriminator for catalog records."""

    CABINET = "cabinet"
    APPLIANCE = "appliance"
    OPENING = "opening"


class CabinetType(str, Enum):
    """Cabinet families used for anchoring and take-off grouping."""

    BASE = "base"
    WALL = "wall"
    TALL = "tall"
    CORNER_BASE = "corner-base"
    CORNER_WALL = "corner-wall"
    ISLAND = "island"
    PENINSULA = "peninsula"

    @property
    def is_wall_mounted(self) -> bool:
        """Wall-hung cabinets sit above the counter rather than on the floor."""
        return self in (CabinetType.WALL, CabinetType.CORNER_WALL)

    @property
    def is_counter_base(self) -> bool:
        """Cabinets that carry a countertop."""
        return self in (
            CabinetType.BASE,
            CabinetType.CORNER_BASE,
            CabinetType.ISLAND,
            CabinetType.PENINSULA,
        )


class ApplianceType(str, Enum):
    """Kitchen appliance families."""

    REFRIGERATOR = "refrigerator"
    STOVE = "stove"
    OVEN = "oven"
    DISHWASHER = "dishwasher"
    MICROWAVE = "microwave"
    SINK = "sink"

    @property
    def is_wall_mounted(self) -> bool:
        """Over-range microwaves hang at wall-cabinet height."""
        return self is ApplianceType.MICROWAVE


class OpeningType(str, Enum):
    """Doors, windows and passthroughs cut into a wall."""

    OVERHEAD_DOOR = "overhead-door"
    WALK_DOOR = "walk-door"
    SWING_DOOR = "swing-door"
    WINDOW = "window"
    PASSTHROUGH = "passthrough"

    @property
    def is_door(self) -> bool:
        return self in (
            OpeningType.OVERHEAD_DOOR,
            OpeningType.WALK_DOOR,
            OpeningType.SWING_DOOR,
        )


class ItemWall(str, Enum):
    """Wall an interior item is attached to (compass naming)."""

    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"
    ISLAND = "island"


class StructureWall(str, Enum):
    """Exterior wall of a structure that carries an opening."""

    FRONT = "front"
    BACK = "back"
    LEFT = "left"
    RIGHT = "right"

    @property
    def runs_along_width(self) -> bool:
        """Front and back walls span the structure width."""
        return self in (StructureWall.FRONT, StructureWall.BACK)


class RoofStyle(str, Enum):
    GABLE = "gable"
    HIP = "hip"
    GAMBREL = "gambrel"
    FLAT = "flat"


class WallFraming(str, Enum):
    TWO_BY_FOUR = "2x4"
    TWO_BY_SIX = "2x6"


class SidingType(str, Enum):
    VINYL = "vinyl"
    WOOD = "wood"
    METAL = "metal"
    FIBER_CEMENT = "fiber-cement"


class RoofingMaterial(str, Enum):
    ASPHALT_SHINGLE = "asphalt-shingle"
    METAL = "metal"
    RUBBER = "rubber"


class CabinetFinish(str, Enum):
    """Finish options offered for cabinet boxes and doors."""

    WHITE = "White"
    OAK = "Oak"
    WALNUT = "Walnut"
    GRAY = "Gray"
    BLACK = "Black"
    CHERRY = "Cherry"
    MAPLE = "Maple"


class CountertopMaterial(str, Enum):
    LAMINATE = "Laminate"
    GRANITE = "Granite"
    QUARTZ = "Quartz"
    MARBLE = "Marble"
    BUTCHER_BLOCK = "Butcher Block"
    CONCRETE = "Concrete"


class ViewMode(str, Enum):
    """Active canvas mode in the host UI."""

    PLAN = "2D"
    THREE_D = "3D"


@dataclass(frozen=True)
class Point2D:
    """A point in a 2D coordinate space (room inches or canvas pixels)."""

    x: float
    y: float

    def offset(self, dx: float, dy: float) -> Point2D:
        return Point2D(self.x + dx, self.y + dy)

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class Point3D:
    """A point in scene space (metres, Y-up)."""

    x: float
    y: float
    z: float

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)
