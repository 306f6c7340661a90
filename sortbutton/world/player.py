# sortbutton/world/player.py
from typing import TYPE_CHECKING, List, Optional, Set

from sortbutton.items.container import ContainerFlag, ItemContainer
from sortbutton.items.item import Item
from sortbutton.utils.logger import Logger

if TYPE_CHECKING:
    from .entity import StorageEntity


class LootPanel:
    """What the player is currently looting: the source entity and its visible containers."""

    def __init__(self):
        self.entity_source: Optional['StorageEntity'] = None
        self.containers: List[ItemContainer] = []

    def start(self, entity: 'StorageEntity', containers: Optional[List[ItemContainer]] = None) -> None:
        self.entity_source = entity
        self.containers = list(containers) if containers is not None else [entity.inventory]

    def clear(self) -> None:
        self.entity_source = None
        self.containers = []

    @property
    def is_looting(self) -> bool:
        return self.entity_source is not None


class Player:
    def __init__(self, player_id: int, name: str = "Player", language: str = "en",
                 permissions: Optional[Set[str]] = None, inventory_slots: int = 24):
        self.player_id = player_id
        self.name = name
        self.language = language
        self.permissions: Set[str] = set(permissions or ())
        self.inventory = ItemContainer(inventory_slots, ContainerFlag.IS_PLAYER)
        self.loot = LootPanel()
        self.is_connected = True
        self.is_destroyed = False
        self.is_server = False
        # Items that did not fit in the inventory land on the ground at the player's feet.
        self.dropped_items: List[Item] = []
        self.messages: List[str] = []

    def has_permission(self, permission: str) -> bool:
        return permission in self.permissions

    def grant(self, permission: str) -> None:
        self.permissions.add(permission)

    def revoke(self, permission: str) -> None:
        self.permissions.discard(permission)

    def give_item(self, item: Item) -> bool:
        """Moves the item into the player's inventory, dropping it if there is no room."""
        if item.move_to_container(self.inventory):
            return True
        Logger.debug("Player", f"Inventory of {self.name} full, dropping {item.display_name} x{item.amount}.")
        self.dropped_items.append(item)
        return False

    def send_message(self, message: str) -> None:
        self.messages.append(message)

    def last_message(self) -> Optional[str]:
        return self.messages[-1] if self.messages else None

    def disconnect(self) -> None:
        self.is_connected = False
        self.loot.clear()

