# sortbutton/sorting/eligibility.py
"""
Checks that decide whether a player may see the sort button or sort a container.
"""
from typing import Callable, Dict, Optional

from sortbutton.items.container import ContainerFlag, ItemContainer

BehindCheck = Callable[[object, object], bool]


def can_player_sort_container(container: ItemContainer) -> bool:
    if (container.is_locked()
            or container.player_item_input_blocked()
            or container.has_flag(ContainerFlag.IS_PLAYER)
            or container.capacity <= 1):
        return False
    return True


def _player_behind(player, entity) -> bool:
    return entity.player_behind(player)


class BehindCheckRegistry:
    """
    Entity kinds that only allow sorting from a particular side.
    Kinds without an entry are always eligible.
    """

    def __init__(self, checks: Optional[Dict[str, BehindCheck]] = None):
        if checks is None:
            checks = {
                "dropbox": _player_behind,
                "vendingmachine": _player_behind,
            }
        self._checks: Dict[str, BehindCheck] = dict(checks)

    def register(self, kind: str, check: BehindCheck) -> None:
        self._checks[kind] = check

    def unregister(self, kind: str) -> None:
        self._checks.pop(kind, None)

    def can_player_sort_entity(self, player, entity) -> bool:
        if entity is None or entity.is_destroyed:
            return False
        check = self._checks.get(entity.kind)
        if check is None:
            return True
        return bool(check(player, entity))
