# sortbutton/world/entity.py
from typing import Optional, Set

from sortbutton.items.container import ItemContainer


class StorageEntity:
    """
    A world entity holding one item container (box, furnace, drop box, cupboard...).

    `kind` is the host's entity class tag; it selects behaviour through registries
    (behind-checks) rather than through subclassing.
    """

    def __init__(self, entity_id: int, prefab_name: str, capacity: int,
                 kind: str = "storage", panel_name: Optional[str] = None,
                 owner_panel: Optional[str] = None, owner_id: int = 0, skin_id: int = 0,
                 prefab_id: int = 0, is_building_privilege: bool = False):
        self.entity_id = entity_id
        self.prefab_name = prefab_name
        self.prefab_id = prefab_id
        self.skin_id = skin_id
        self.kind = kind
        self.panel_name = panel_name
        # Mailbox-like entities show a different panel to their owner.
        self.owner_panel = owner_panel
        self.owner_id = owner_id
        self.is_building_privilege = is_building_privilege
        self.is_destroyed = False
        self.inventory = ItemContainer(capacity, entity_owner=self)
        # Players currently standing at the entity's rear access side.
        self.behind_player_ids: Set[int] = set()

    def player_behind(self, player) -> bool:
        return player.player_id in self.behind_player_ids

    def destroy(self) -> None:
        self.is_destroyed = True

    def __repr__(self) -> str:
        return f"StorageEntity({self.entity_id}, {self.prefab_name!r}, kind={self.kind!r})"
