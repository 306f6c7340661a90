# sortbutton/items/container.py
from enum import IntFlag
from typing import TYPE_CHECKING, Any, Iterator, List, Optional

from .item import Item
from sortbutton.utils.logger import Logger

if TYPE_CHECKING:
    from sortbutton.world.entity import StorageEntity


class ContainerFlag(IntFlag):
    NONE = 0
    IS_PLAYER = 1
    IS_LOCKED = 2
    NO_ITEM_INPUT = 4


class ItemContainer:
    """
    Fixed-capacity, slot-indexed item storage owned by the host.
    `item_list` keeps insertion order; each item's `position` names its slot.
    """

    def __init__(self, capacity: int, flags: ContainerFlag = ContainerFlag.NONE,
                 entity_owner: Optional['StorageEntity'] = None):
        self.capacity = capacity
        self.flags = flags
        self.entity_owner = entity_owner
        self.item_list: List[Item] = []

    # --- Flags ---
    def has_flag(self, flag: ContainerFlag) -> bool:
        return bool(self.flags & flag)

    def set_flag(self, flag: ContainerFlag, on: bool = True) -> None:
        self.flags = (self.flags | flag) if on else (self.flags & ~flag)

    def is_locked(self) -> bool:
        return self.has_flag(ContainerFlag.IS_LOCKED)

    def player_item_input_blocked(self) -> bool:
        return self.has_flag(ContainerFlag.NO_ITEM_INPUT)

    # --- Slots ---
    def get_slot(self, position: int) -> Optional[Item]:
        for item in self.item_list:
            if item.position == position:
                return item
        return None

    def occupied_positions(self) -> set:
        return {item.position for item in self.item_list}

    def find_free_slot(self, max_position: Optional[int] = None) -> int:
        """First free slot index below capacity (and below `max_position` if given), or -1."""
        limit = self.capacity if max_position is None else min(self.capacity, max_position)
        occupied = self.occupied_positions()
        for position in range(max(limit, 0)):
            if position not in occupied:
                return position
        return -1

    def is_full(self) -> bool:
        return self.find_free_slot() == -1

    def insert(self, item: Item, max_position: Optional[int] = None) -> bool:
        position = self.find_free_slot(max_position)
        if position == -1:
            return False
        return self.insert_at(item, position)

    def insert_at(self, item: Item, position: int) -> bool:
        """Places `item` at an explicit slot. Used by the host when loading saved contents."""
        if position < 0 or position >= self.capacity or self.get_slot(position) is not None:
            return False
        if item.parent is not None:
            item.parent.remove(item)
        item.position = position
        item.parent = self
        self.item_list.append(item)
        return True

    def remove(self, item: Item) -> bool:
        if item not in self.item_list:
            return False
        self.item_list.remove(item)
        item.parent = None
        item.position = -1
        return True

    def items_by_position(self) -> List[Item]:
        return sorted(self.item_list, key=lambda item: item.position)

    def total_amounts(self) -> dict:
        """Sum of amounts per display name; handy for conservation checks."""
        totals: dict = {}
        for item in self.item_list:
            totals[item.display_name] = totals.get(item.display_name, 0) + item.amount
        return totals

    def __iter__(self) -> Iterator[Item]:
        return iter(self.item_list)

    def __len__(self) -> int:
        return len(self.item_list)

    def to_dict(self) -> dict:
        return {
            "capacity": self.capacity,
            "flags": int(self.flags),
            "items": [item.to_dict() for item in self.items_by_position()],
        }

    @classmethod
    def from_dict(cls, data: dict, entity_owner: Any = None) -> 'ItemContainer':
        container = cls(int(data.get("capacity", 0)), ContainerFlag(int(data.get("flags", 0))), entity_owner)
        for item_data in data.get("items", []):
            item = Item.from_dict(item_data)
            position = int(item_data.get("position", -1))
            if not container.insert_at(item, position) and not container.insert(item):
                Logger.warning("ItemContainer", f"No free slot for saved item {item!r}; it was not loaded.")
        return container
