# sortbutton/world/world.py
"""
The host's world state, reduced to what the sort button collaborates with.
"""
import zlib
from typing import Dict, Iterable, List, Optional, Set

from .entity import StorageEntity
from .player import Player


class StringPool:
    """Maps prefab paths to stable numeric ids. Unregistered paths resolve to 0."""

    def __init__(self, prefab_names: Iterable[str] = ()):
        self._ids: Dict[str, int] = {}
        for name in prefab_names:
            self.register(name)

    def register(self, prefab_name: str) -> int:
        prefab_id = self._ids.get(prefab_name)
        if prefab_id is None:
            prefab_id = zlib.crc32(prefab_name.encode("utf-8")) or 1
            self._ids[prefab_name] = prefab_id
        return prefab_id

    def get(self, prefab_name: str) -> int:
        return self._ids.get(prefab_name, 0)


class PlayerTeam:
    def __init__(self, team_id: int, members: Iterable[int] = ()):
        self.team_id = team_id
        self.members: Set[int] = set(members)


class World:
    def __init__(self):
        self.players: Dict[int, Player] = {}
        self.entities: Dict[int, StorageEntity] = {}
        self.teams: Dict[int, PlayerTeam] = {}
        self.string_pool = StringPool()
        self._next_entity_id = 1

    # --- Players ---
    def add_player(self, player: Player) -> Player:
        self.players[player.player_id] = player
        return player

    def find_player(self, player_id: int) -> Optional[Player]:
        return self.players.get(player_id)

    def active_players(self) -> List[Player]:
        return [p for p in self.players.values() if p.is_connected and not p.is_destroyed]

    def is_player_valid(self, player_id: int) -> bool:
        player = self.players.get(player_id)
        return player is not None and player.is_connected and not player.is_destroyed

    # --- Entities ---
    def spawn_entity(self, prefab_name: str, capacity: int, **kwargs) -> StorageEntity:
        entity_id = self._next_entity_id
        self._next_entity_id += 1
        entity = StorageEntity(entity_id, prefab_name, capacity,
                               prefab_id=self.string_pool.register(prefab_name), **kwargs)
        self.entities[entity_id] = entity
        return entity

    def find_entity(self, entity_id: int) -> Optional[StorageEntity]:
        return self.entities.get(entity_id)

    def is_entity_valid(self, entity_id: int) -> bool:
        entity = self.entities.get(entity_id)
        return entity is not None and not entity.is_destroyed

    def destroy_entity(self, entity_id: int) -> None:
        entity = self.entities.pop(entity_id, None)
        if entity:
            entity.destroy()

    # --- Teams ---
    def create_team(self, team_id: int, members: Iterable[int]) -> PlayerTeam:
        team = PlayerTeam(team_id, members)
        self.teams[team_id] = team
        return team

    def find_players_team(self, player_id: int) -> Optional[PlayerTeam]:
        for team in self.teams.values():
            if player_id in team.members:
                return team
        return None
