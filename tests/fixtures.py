# tests/fixtures.py
import json
import os
import shutil
import sys
import tempfile
import unittest
from typing import Any, Dict, List, Optional, Tuple, cast

# Get the absolute path to the project root (one level up from tests/)
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))

if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from sortbutton.config import PERMISSION_USE
from sortbutton.core.game_server import GameServer
from sortbutton.items.categories import ItemCategory
from sortbutton.items.container import ItemContainer
from sortbutton.items.item import Item
from sortbutton.ui.overlay import OverlaySink
from sortbutton.utils.logger import Logger, LogLevel
from sortbutton.world.entity import StorageEntity
from sortbutton.world.player import Player
from plugins.sort_button_plugin import SortButtonPlugin
from plugins.sort_button_plugin.config import DEFAULT_CONFIG

WOODEN_BOX = "assets/prefabs/deployable/woodenbox/woodbox_deployed.prefab"
LARGE_BOX = "assets/prefabs/deployable/large wood storage/box.wooden.large.prefab"
DROPBOX = "assets/prefabs/deployable/dropbox/dropbox.deployed.prefab"
VENDING_MACHINE = "assets/prefabs/deployable/vendingmachine/vendingmachine.deployed.prefab"
TOOL_CUPBOARD = "assets/prefabs/deployable/tool cupboard/cupboard.tool.deployed.prefab"
FURNACE = "assets/prefabs/deployable/furnace/furnace.prefab"  # not configured


class RecordingOverlaySink(OverlaySink):
    """
    Overlay sink that remembers every call instead of drawing.
    """
    def __init__(self):
        self.calls: List[Tuple[str, int, Any]] = []
        self.visible: Dict[int, List[Dict[str, Any]]] = {}

    def show_overlay(self, player, elements):
        self.calls.append(("show", player.player_id, elements))
        self.visible[player.player_id] = elements

    def hide_overlay(self, player, panel_name):
        self.calls.append(("hide", player.player_id, panel_name))
        self.visible.pop(player.player_id, None)

    def count(self, kind: str, player_id: Optional[int] = None) -> int:
        return sum(1 for call in self.calls
                   if call[0] == kind and (player_id is None or call[1] == player_id))

    def element(self, player_id: int, suffix: str = "") -> Dict[str, Any]:
        """The visible element whose name ends with `suffix` ('' is the root panel)."""
        for element in self.visible[player_id]:
            if suffix and element["name"].endswith(suffix):
                return element
            if not suffix and element["parent"] == "Overlay":
                return element
        raise KeyError(suffix)


def make_items(container: ItemContainer, rows) -> List[Item]:
    """rows: (name, amount, category[, position]) tuples."""
    items = []
    for row in rows:
        name, amount, category = row[0], row[1], row[2]
        item = Item(name, category, amount)
        if len(row) > 3:
            container.insert_at(item, row[3])
        else:
            container.insert(item)
        items.append(item)
    return items


def contents(container: ItemContainer) -> List[Tuple[str, int]]:
    return [(item.display_name, item.amount) for item in container.items_by_position()]


class GameTestBase(unittest.TestCase):
    """Base class for tests that need a running server with the sort button plugin."""

    def make_overlay_sink(self) -> OverlaySink:
        return RecordingOverlaySink()

    def prepare_config(self) -> None:
        """Runs before the server starts. Override to write a config file."""
        pass

    def setUp(self):
        self.config_dir = tempfile.mkdtemp(prefix="sortbutton_test_")
        self.log_lines: List[str] = []
        self._previous_log_level = Logger.get_level()
        Logger.set_sink(self.log_lines.append)
        Logger.set_level(LogLevel.DEBUG)

        self.prepare_config()

        self.overlay = self.make_overlay_sink()
        self.server = GameServer(overlay_sink=self.overlay, config_dir=self.config_dir)
        self.world = self.server.world
        for prefab in DEFAULT_CONFIG["containers_by_prefab_name"]:
            self.world.string_pool.register(prefab)
        self.server.start(["sort_button_plugin"])

        plugin = self.server.plugin_manager.get_plugin("sort_button_plugin")
        if plugin is None:
            self.fail("Sort button plugin failed to load.")
        self.plugin = cast(SortButtonPlugin, plugin)

        self.player = self.server.connect_player(1, "Alice", permissions={PERMISSION_USE})

    def tearDown(self):
        self.server.shutdown()
        Logger.reset_sink()
        Logger.set_level(self._previous_log_level)
        shutil.rmtree(self.config_dir, ignore_errors=True)

    # --- Helpers ---
    @property
    def config_path(self) -> str:
        return os.path.join(self.config_dir, "sort_button_plugin.json")

    def write_config(self, config: Dict[str, Any]) -> None:
        with open(self.config_path, "w", encoding="utf-8") as f:
            json.dump(config, f)

    def spawn_box(self, capacity: int = 12, prefab: str = WOODEN_BOX, **kwargs) -> StorageEntity:
        kwargs.setdefault("panel_name", "generic_resizable")
        return self.world.spawn_entity(prefab, capacity, **kwargs)

    def open_and_tick(self, entity: StorageEntity, player: Optional[Player] = None) -> None:
        player = player or self.player
        self.server.open_loot(player, entity)
        self.server.tick()

    def assertLogged(self, substring: str):
        all_text = "\n".join(self.log_lines)
        self.assertIn(substring, all_text, f"Expected log line containing '{substring}'.")

    def assertMessageContains(self, player: Player, substring: str):
        all_text = "\n".join(player.messages)
        self.assertIn(substring, all_text, f"Expected message '{substring}' not found.")
