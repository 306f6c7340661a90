# sortbutton/world/__init__.py
"""
Host world model: players, storage entities, teams and prefab ids.
"""
from .entity import StorageEntity
from .player import Player, LootPanel
from .world import World, StringPool, PlayerTeam
