# sortbutton/items/item.py
import uuid
from typing import TYPE_CHECKING, Any, Dict, Optional

from .categories import ItemCategory

if TYPE_CHECKING:
    from .container import ItemContainer


class Item:
    """
    A stack of one item definition living in a container slot.
    The sort only ever repositions items; it never changes amount or identity.
    """

    def __init__(self, display_name: str, category: ItemCategory = ItemCategory.MISC,
                 amount: int = 1, uid: Optional[str] = None):
        if amount <= 0:
            raise ValueError(f"Item amount must be positive, got {amount}")
        self.uid = uid or f"item_{uuid.uuid4().hex[:12]}"
        self.display_name = display_name
        self.category = category
        self.amount = amount
        self.position = -1
        self.parent: Optional['ItemContainer'] = None

    def remove_from_container(self) -> bool:
        """Detaches the item from its container, freeing its slot."""
        if self.parent is None:
            return False
        return self.parent.remove(self)

    def move_to_container(self, container: 'ItemContainer', max_position: Optional[int] = None) -> bool:
        """Inserts the item into the first free slot of `container`."""
        if self.parent is not None:
            self.remove_from_container()
        return container.insert(self, max_position=max_position)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "uid": self.uid,
            "display_name": self.display_name,
            "category": self.category.name,
            "amount": self.amount,
            "position": self.position,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Item':
        item = cls(
            display_name=data["display_name"],
            category=ItemCategory.from_name(data.get("category", "MISC")),
            amount=int(data.get("amount", 1)),
            uid=data.get("uid"),
        )
        return item

    def __repr__(self) -> str:
        return f"Item({self.display_name!r}, {self.category.canonical_name}, x{self.amount}, slot={self.position})"
