"""Conversion between design-file schemas and domain objects."""

from planner.application.config.schema import (
    CURRENT_VERSION,
    ApplianceItemConfig,
    CabinetItemConfig,
    ConfigurationSchema,
    DisplayConfig,
    FeaturesConfig,
    OpeningConfig,
    OpeningItemConfig,
    PlacedItemConfig,
    RoomConfig,
)
from planner.domain.catalog import get_catalog_item
from planner.domain.entities import (
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
from planner.domain.services.geometry import normalize_angle

__all__ = [
    "catalog_item_to_config",
    "config_to_catalog_item",
    "config_to_model",
    "model_to_config",
]


def config_to_catalog_item(
    config: CabinetItemConfig | ApplianceItemConfig | OpeningItemConfig,
) -> CatalogItem:
    """Build the frozen domain record for a catalog schema entry."""
    if isinstance(config, CabinetItemConfig):
        return CabinetSpec(
            id=config.id,
            name=config.name,
            cabinet_type=config.cabinet_type,
            width=config.width,
            height=config.height,
            depth=config.depth,
            door_count=config.door_count,
            drawer_count=config.drawer_count,
            unit_price=config.unit_price,
        )
    if isinstance(config, ApplianceItemConfig):
        return ApplianceSpec(
            id=config.id,
            name=config.name,
            appliance_type=config.appliance_type,
            width=config.width,
            height=config.height,
            depth=config.depth,
            unit_price=config.unit_price,
        )
    return OpeningSpec(
        id=config.id,
        name=config.name,
        opening_type=config.opening_type,
        width=config.width,
        height=config.height,
        depth=config.depth,
        sill_height=config.sill_height,
        unit_price=config.unit_price,
    )


def catalog_item_to_config(
    item: CatalogItem,
) -> CabinetItemConfig | ApplianceItemConfig | OpeningItemConfig:
    """Inverse of :func:`config_to_catalog_item`."""
    if isinstance(item, CabinetSpec):
        return CabinetItemConfig(
            id=item.id,
            name=item.name,
            cabinet_type=item.cabinet_type,
            width=item.width,
            height=item.height,
            depth=item.depth,
            door_count=item.door_count,
            drawer_count=item.drawer_count,
            unit_price=item.unit_price,
        )
    if isinstance(item, ApplianceSpec):
        return ApplianceItemConfig(
            id=item.id,
            name=item.name,
            appliance_type=item.appliance_type,
            width=item.width,
            height=item.height,
            depth=item.depth,
            unit_price=item.unit_price,
        )
    return OpeningItemConfig(
        id=item.id,
        name=item.name,
        opening_type=item.opening_type,
        width=item.width,
        height=item.height,
        depth=item.depth,
        sill_height=item.sill_height,
        unit_price=item.unit_price,
    )


def _placed_item(config: PlacedItemConfig) -> PlacedItem:
    if config.item is not None:
        item = config_to_catalog_item(config.item)
    else:
        item = get_catalog_item(config.catalog_id)
    return PlacedItem(
        id=config.id,
        item=item,
        x=config.x,
        y=config.y,
        rotation=normalize_angle(config.rotation),
        wall=config.wall,
        finish=config.finish,
    )


def config_to_model(config: ConfigurationSchema) -> ConfigurationModel:
    """Build a ConfigurationModel from a validated design.

    Room values are clamped into range; item positions are kept as stored so
    that exported designs round-trip exactly.
    """
    room = RoomSpec.sanitized(**config.room.model_dump())
    features = Features(**config.features.model_dump())
    return ConfigurationModel(
        planner_type=config.planner_type,
        room=room,
        features=features,
        items=[_placed_item(item) for item in config.items],
        openings=[
            Opening(
                id=opening.id,
                opening_type=opening.opening_type,
                width=opening.width,
                height=opening.height,
                wall=opening.wall,
                offset_from_left=opening.offset_from_left,
                offset_from_floor=opening.offset_from_floor,
            )
            for opening in config.openings
        ],
        name=config.name,
        show_grid=config.display.show_grid,
        view_mode=config.display.view_mode,
    )


def model_to_config(model: ConfigurationModel) -> ConfigurationSchema:
    """Snapshot a ConfigurationModel as a design schema.

    Items are written with their full catalog record, never by catalog id.
    """
    room = model.room
    features = model.features
    return ConfigurationSchema(
        schema_version=CURRENT_VERSION,
        planner_type=model.planner_type,
        name=model.name,
        room=RoomConfig(
            width=room.width,
            length=room.length,
            height=room.height,
            grid_size=room.grid_size,
            snap_enabled=room.snap_enabled,
            wall_framing=room.wall_framing,
            roof_style=room.roof_style,
            roof_pitch=room.roof_pitch,
            siding_type=room.siding_type,
            roofing_material=room.roofing_material,
            bays=room.bays,
        ),
        features=FeaturesConfig(
            has_walk_door=features.has_walk_door,
            walk_door_wall=features.walk_door_wall,
            has_attic_trusses=features.has_attic_trusses,
            is_insulated=features.is_insulated,
            has_electrical=features.has_electrical,
            cabinet_finish=features.cabinet_finish,
            countertop_material=features.countertop_material,
            has_backsplash=features.has_backsplash,
            has_island=features.has_island,
            has_pantry=features.has_pantry,
        ),
        items=[
            PlacedItemConfig(
                id=placed.id,
                item=catalog_item_to_config(placed.item),
                x=placed.x,
                y=placed.y,
                rotation=placed.rotation,
                wall=placed.wall,
                finish=placed.finish,
            )
            for placed in model.items
        ],
        openings=[
            OpeningConfig(
                id=opening.id,
                opening_type=opening.opening_type,
                width=opening.width,
                height=opening.height,
                wall=opening.wall,
                offset_from_left=opening.offset_from_left,
                offset_from_floor=opening.offset_from_floor,
            )
            for opening in model.openings
        ],
        display=DisplayConfig(show_grid=model.show_grid, view_mode=model.view_mode),
    )
