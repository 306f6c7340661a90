# sortbutton/core/game_server.py
"""
Headless host: owns the world, the plugin manager and the tick loop, and turns
player actions (open/close loot, chat, button clicks) into host events.
"""
from typing import Iterable, List, Optional

from sortbutton.commands.command_system import CommandProcessor
from sortbutton.config import PLUGIN_DATA_DIR
from sortbutton.items.container import ItemContainer
from sortbutton.ui.overlay import OverlaySink, PygameOverlaySink
from sortbutton.utils.logger import Logger
from sortbutton.world.entity import StorageEntity
from sortbutton.world.player import Player
from sortbutton.world.world import World
from plugins.event_system import EVENT_LOOT_ENTITY, EVENT_PLAYER_LOOT_END, EVENT_LOOT_ENTITY_END
from plugins.plugin_system import PluginManager

TICK_SECONDS = 0.05


class GameServer:
    def __init__(self, overlay_sink: Optional[OverlaySink] = None, config_dir: str = PLUGIN_DATA_DIR):
        self.world = World()
        self.command_processor = CommandProcessor()
        self.overlay_sink = overlay_sink or PygameOverlaySink()
        self.plugin_manager = PluginManager(self.world, self.command_processor, config_dir=config_dir)
        self.plugin_manager.service_locator.register_service("overlay_sink", self.overlay_sink)
        self.current_time = 0.0

    @property
    def event_system(self):
        return self.plugin_manager.event_system

    @property
    def service_locator(self):
        return self.plugin_manager.service_locator

    def start(self, plugins: Optional[Iterable[str]] = None) -> None:
        """Load plugins (all discovered ones by default), then signal that the server is ready."""
        if plugins is None:
            self.plugin_manager.load_all_plugins()
        else:
            for plugin_name in plugins:
                self.plugin_manager.load_plugin(plugin_name)
        self.plugin_manager.on_server_initialized()
        Logger.info("GameServer", f"Server initialized with plugins: {list(self.plugin_manager.plugins)}")

    def shutdown(self) -> None:
        self.plugin_manager.unload_all_plugins()

    # --- Players ---
    def connect_player(self, player_id: int, name: str = "Player", permissions: Iterable[str] = (),
                       language: str = "en") -> Player:
        return self.world.add_player(Player(player_id, name, language=language, permissions=set(permissions)))

    def disconnect_player(self, player: Player) -> None:
        if player.loot.is_looting:
            self.close_loot(player)
        player.disconnect()

    # --- Looting ---
    def open_loot(self, player: Player, entity: StorageEntity,
                  containers: Optional[List[ItemContainer]] = None) -> None:
        # Switching containers ends the previous loot session first.
        if player.loot.is_looting:
            self.close_loot(player)
        player.loot.start(entity, containers)
        self.event_system.publish(EVENT_LOOT_ENTITY, {"player": player, "entity": entity})

    def close_loot(self, player: Player) -> None:
        entity = player.loot.entity_source
        player.loot.clear()
        self.event_system.publish(EVENT_PLAYER_LOOT_END, {"player": player})
        if entity is not None:
            self.event_system.publish(EVENT_LOOT_ENTITY_END, {"player": player, "entity": entity})

    # --- Loop ---
    def tick(self, seconds: float = TICK_SECONDS) -> None:
        self.current_time += seconds
        self.plugin_manager.on_tick(self.current_time)

    # --- Input ---
    def process_command(self, player: Player, text: str) -> str:
        context = {"player": player, "world": self.world, "server": self}
        result = self.command_processor.process_input(text, context)
        if result:
            player.send_message(result)
        return result

    def click(self, player: Player, pos) -> Optional[str]:
        """Routes a click on the player's overlay to the button's command."""
        hit_test = getattr(self.overlay_sink, "hit_test", None)
        if hit_test is None:
            return None
        command_name = hit_test(player.player_id, pos)
        if command_name is None:
            return None
        self.process_command(player, command_name)
        return command_name
