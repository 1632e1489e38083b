"""Advisory checks over a design.

Placement always clamps, so a model built through the placement engine
never produces bounds warnings; imported or hand-edited designs can.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..value_objects import ItemKind
from .geometry import anchor_base_height

if TYPE_CHECKING:
    from ..entities import ConfigurationModel, PlacedItem

__all__ = ["design_warnings", "items_overlap"]

_KIND_LABELS = {
    ItemKind.CABINET: ("Cabinet", "Cabinets"),
    ItemKind.APPLIANCE: ("Appliance", "Appliances"),
    ItemKind.OPENING: ("Opening", "Openings"),
}


def items_overlap(a: PlacedItem, b: PlacedItem) -> bool:
    """True when two items on the same wall occupy the same space.

    Uses unrotated footprints plus the vertical band each item fills, so a
    wall cabinet hung above a base cabinet does not overlap it. Items that
    only touch along an edge do not overlap.
    """
    if a.wall is not b.wall:
        return False
    a_low = anchor_base_height(a)
    b_low = anchor_base_height(b)
    if a_low + a.height <= b_low or b_low + b.height <= a_low:
        return False
    return not (
        a.right <= b.x
        or b.right <= a.x
        or a.bottom <= b.y
        or b.bottom <= a.y
    )


def design_warnings(model: ConfigurationModel) -> list[str]:
    """Return human-readable warnings for out-of-room and overlapping items."""
    warnings: list[str] = []
    room_w = model.room.width_in
    room_l = model.room.length_in

    for placed in model.items:
        label = _KIND_LABELS[placed.kind][0]
        if placed.x < 0 or placed.y < 0:
            warnings.append(f'{label} "{placed.name}" is positioned outside the room')
        if placed.right > room_w or placed.bottom > room_l:
            warnings.append(f'{label} "{placed.name}" extends beyond room boundaries')

    items = model.items
    for i, first in enumerate(items):
        for second in items[i + 1:]:
            if items_overlap(first, second):
                if first.kind is second.kind:
                    label = _KIND_LABELS[first.kind][1]
                else:
                    label = "Items"
                warnings.append(f'{label} overlap: "{first.name}" and "{second.name}"')
    return warnings
