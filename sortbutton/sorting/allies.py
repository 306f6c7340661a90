# sortbutton/sorting/allies.py
"""
Ally resolution for containers owned by someone else.

A player is an ally of an owner when they are the owner, share a team, or a
clan or friends service vouches for them. Clans and friends are optional
services looked up on the service locator.
"""
from typing import Any, Dict, Optional

from plugins.service_locator import ServiceLocator, ServiceNotFoundException
from sortbutton.utils.logger import Logger


class AllyResolver:
    def __init__(self, world, service_locator: Optional[ServiceLocator], config: Dict[str, Any]):
        self.world = world
        self.service_locator = service_locator
        self.config = config

    def is_ally(self, player_id: int, target_id: int) -> bool:
        if player_id == target_id or self.is_on_same_team(player_id, target_id):
            return True
        return (self.is_clan_member_or_ally(str(player_id), str(target_id))
                or self.is_friend(str(player_id), str(target_id)))

    def is_on_same_team(self, player_id: int, target_id: int) -> bool:
        if not self.config.get("use_teams", True) or not self.world:
            return False
        team = self.world.find_players_team(player_id)
        return team is not None and target_id in team.members

    def is_clan_member_or_ally(self, player_id: str, target_id: str) -> bool:
        if not self.config.get("use_clans", True):
            return False
        clans = self._optional_service("clans")
        if clans is None:
            Logger.error("SortButton", "use_clans is set to true, but no 'clans' service is registered!")
            return False
        return bool(clans.is_member_or_ally(player_id, target_id))

    def is_friend(self, player_id: str, target_id: str) -> bool:
        if not self.config.get("use_friends", True):
            return False
        friends = self._optional_service("friends")
        if friends is None:
            Logger.error("SortButton", "use_friends is set to true, but no 'friends' service is registered!")
            return False
        # Asks whether the owner has befriended the looter.
        return bool(friends.has_friend(target_id, player_id))

    def _optional_service(self, name: str) -> Any:
        if not self.service_locator:
            return None
        try:
            return self.service_locator.get_service(name)
        except ServiceNotFoundException:
            return None
