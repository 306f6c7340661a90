# sortbutton/sorting/placement.py
"""
Where the sort button goes on each loot panel.

Offsets are in pixels from the bottom centre of the screen. Most panels have a
fixed height; resizable panels grow one row per six slots, up to MAX_PANEL_ROWS.
"""
import math
from typing import Dict, NamedTuple, Optional

from sortbutton.config import (
    BASE_Y_OFFSET, Y_OFFSET_PER_ROW, SLOTS_PER_ROW, MAX_PANEL_ROWS,
    DEFAULT_BUTTON_HEIGHT, LEGACY_BUTTON_HEIGHT, RESIZABLE_PANELS, DEFAULT_LOOT_PANEL
)

OFFSET_Y_BY_PANEL: Dict[str, float] = {
    "dropboxcontents": BASE_Y_OFFSET + Y_OFFSET_PER_ROW * 2,
    "furnace": 277,
    "generic": BASE_Y_OFFSET + Y_OFFSET_PER_ROW * 6,
    "genericsmall": BASE_Y_OFFSET + Y_OFFSET_PER_ROW,
    "largefurnace": 395,
    "toolcupboard": 560,
    "vendingmachine.storage": BASE_Y_OFFSET + Y_OFFSET_PER_ROW * 5,
}

# Index 0 is row 1.
OFFSET_Y_BY_ROW = tuple(BASE_Y_OFFSET + Y_OFFSET_PER_ROW * row for row in range(1, MAX_PANEL_ROWS + 1))

# Some panels still render 21px rows instead of 23px.
HEIGHT_OVERRIDE_BY_PANEL: Dict[str, int] = {
    "dropboxcontents": LEGACY_BUTTON_HEIGHT,
    "furnace": LEGACY_BUTTON_HEIGHT,
    "largefurnace": LEGACY_BUTTON_HEIGHT,
    "toolcupboard": LEGACY_BUTTON_HEIGHT,
    "vendingmachine.storage": LEGACY_BUTTON_HEIGHT,
}


class ContainerShape(NamedTuple):
    capacity: int
    panel_name: str
    is_restricted_subregion: bool = False


class RenderInstruction(NamedTuple):
    offset_x: float
    offset_y: float
    height: int


def row_count(capacity: int) -> int:
    """Visible rows of a resizable panel. Rows past the maximum reuse the last offset."""
    if capacity <= 0:
        return 1
    return min(math.ceil(capacity / SLOTS_PER_ROW), MAX_PANEL_ROWS)


def resolve_offset_y(shape: ContainerShape) -> Optional[float]:
    if shape.panel_name in RESIZABLE_PANELS:
        return OFFSET_Y_BY_ROW[row_count(shape.capacity) - 1]
    return OFFSET_Y_BY_PANEL.get(shape.panel_name)


def resolve_height(panel_name: str) -> int:
    return HEIGHT_OVERRIDE_BY_PANEL.get(panel_name, DEFAULT_BUTTON_HEIGHT)


def resolve_placement(shape: ContainerShape, offset_x: float) -> Optional[RenderInstruction]:
    """Returns the render instruction, or None when the panel has no known layout."""
    offset_y = resolve_offset_y(shape)
    if offset_y is None:
        return None
    return RenderInstruction(offset_x, offset_y, resolve_height(shape.panel_name))


def determine_loot_panel_name(entity) -> str:
    """Owner panel (mailbox-like entities) wins over the entity's panel name."""
    return entity.owner_panel or entity.panel_name or DEFAULT_LOOT_PANEL


def shape_of(entity, container) -> ContainerShape:
    return ContainerShape(
        capacity=container.capacity,
        panel_name=determine_loot_panel_name(entity),
        is_restricted_subregion=bool(entity.is_building_privilege),
    )
