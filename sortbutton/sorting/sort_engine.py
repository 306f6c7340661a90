# sortbutton/sorting/sort_engine.py
"""
Deterministic container sort.

Ordering, ascending: category rank (only when sorting by category), then the
canonical display name compared by code point, then amount. Python's str
comparison is already ordinal, so the result never depends on the viewer's locale.
"""
from typing import TYPE_CHECKING, Callable, List, Optional, Sequence, Tuple

from sortbutton.config import RESTRICTED_SLOT_LIMIT
from sortbutton.items.categories import DEFAULT_CATEGORY_ORDER, CategoryOrderTable
from sortbutton.items.container import ItemContainer
from sortbutton.items.item import Item
from sortbutton.utils.logger import Logger

if TYPE_CHECKING:
    from sortbutton.world.player import Player


def item_sort_key(by_category: bool,
                  table: Optional[CategoryOrderTable] = None) -> Callable[[Item], Tuple]:
    table = table or DEFAULT_CATEGORY_ORDER
    if by_category:
        return lambda item: (table.rank(item.category), item.display_name, item.amount)
    return lambda item: (item.display_name, item.amount)


def sort_items(items: Sequence[Item], by_category: bool,
               table: Optional[CategoryOrderTable] = None) -> List[Item]:
    """Returns a new list holding the same items in sorted order."""
    return sorted(items, key=item_sort_key(by_category, table))


def select_sortable(container: ItemContainer, restricted: bool) -> List[Item]:
    """Items taking part in a sort. Restricted containers only offer their leading slots."""
    if restricted:
        return [item for item in container.item_list if item.position < RESTRICTED_SLOT_LIMIT]
    return list(container.item_list)


class SortResult:
    """Outcome of applying a sort to a live container."""

    def __init__(self):
        self.placed: List[Item] = []
        self.returned: List[Item] = []

    @property
    def sorted_count(self) -> int:
        return len(self.placed) + len(self.returned)

    def __repr__(self) -> str:
        return f"SortResult(placed={len(self.placed)}, returned={len(self.returned)})"


def sort_container(container: ItemContainer, initiator: 'Player', by_category: bool,
                   restricted: bool = False, table: Optional[CategoryOrderTable] = None) -> SortResult:
    """
    Sorts `container` in place.

    Every participating item is removed first, then re-inserted in order into the
    first free slot. An item that no longer fits (the container shrank, or slots
    were taken meanwhile) goes to the initiator instead of being lost.
    """
    result = SortResult()
    participants = select_sortable(container, restricted)

    # Walk backwards so removal never disturbs the indices still to visit.
    for item in reversed(participants):
        item.remove_from_container()

    max_position = RESTRICTED_SLOT_LIMIT if restricted else None
    for item in sort_items(participants, by_category, table):
        if item.move_to_container(container, max_position=max_position):
            result.placed.append(item)
        else:
            initiator.give_item(item)
            result.returned.append(item)

    if result.returned:
        Logger.debug("SortEngine", f"{len(result.returned)} item(s) did not fit back and were given to {initiator.name}.")
    return result
