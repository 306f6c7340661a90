# sortbutton/items/categories.py
"""
Item categories and their sort ranks.

Ranks are dense (0..N-1) and follow the lexicographic order of the canonical
category names, so "sort by category" compares two ints instead of two strings.
"""
from enum import Enum
from typing import Dict, Iterable, Optional, Type


class ItemCategory(Enum):
    WEAPON = 0
    CONSTRUCTION = 1
    ITEMS = 2
    RESOURCES = 3
    ATTIRE = 4
    TOOL = 5
    MEDICAL = 6
    FOOD = 7
    AMMUNITION = 8
    TRAPS = 9
    MISC = 10
    ALL = 11
    COMMON = 12
    COMPONENT = 13
    SEARCH = 14
    FAVOURITE = 15
    ELECTRICAL = 16
    FUN = 17

    @property
    def canonical_name(self) -> str:
        """Symbolic name as the host spells it ("Ammunition", "Weapon"...)."""
        return self.name.capitalize()

    @classmethod
    def from_name(cls, name: str) -> "ItemCategory":
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown item category: {name!r}") from None


def build_category_ranks(categories: Iterable[ItemCategory]) -> Dict[ItemCategory, int]:
    """Assigns ranks by sorting categories on their canonical name."""
    ordered = sorted(set(categories), key=lambda category: category.canonical_name)
    return {category: rank for rank, category in enumerate(ordered)}


class CategoryOrderTable:
    """Immutable-after-build lookup from category to rank."""

    def __init__(self, categories: Optional[Iterable[ItemCategory]] = None,
                 enum_type: Type[ItemCategory] = ItemCategory):
        self._enum_type = enum_type
        self._categories = tuple(categories) if categories is not None else None
        self._ranks: Dict[ItemCategory, int] = {}
        self.rebuild()

    def rebuild(self) -> None:
        """Recomputes ranks from the category set. Calling it twice yields the same table."""
        source = self._categories if self._categories is not None else list(self._enum_type)
        self._ranks = build_category_ranks(source)

    def rank(self, category: ItemCategory) -> int:
        return self._ranks[category]

    def ordered(self):
        """Categories in rank order."""
        return sorted(self._ranks, key=self._ranks.__getitem__)

    def __len__(self) -> int:
        return len(self._ranks)

    def __contains__(self, category) -> bool:
        return category in self._ranks


DEFAULT_CATEGORY_ORDER = CategoryOrderTable()
