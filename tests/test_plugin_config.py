import json
import unittest

from tests.fixtures import GameTestBase, WOODEN_BOX, FURNACE
from sortbutton.commands.command_system import registered_commands
from plugins.sort_button_plugin.config import DEFAULT_CONFIG

class TestMissingConfig(GameTestBase):

    def test_defaults_written(self):
        with open(self.config_path, encoding="utf-8") as f:
            saved = json.load(f)
        self.assertEqual(saved, DEFAULT_CONFIG)
        self.assertEqual(self.plugin.config, DEFAULT_CONFIG)

    def test_defaults_not_shared(self):
        self.plugin.config["commands"].append("sb")
        self.assertEqual(DEFAULT_CONFIG["commands"], ["sortbutton"])

class TestOutdatedConfig(GameTestBase):

    def prepare_config(self):
        self.write_config({
            "check_ownership": False,
            "containers_by_prefab_name": {WOODEN_BOX: {"enabled": False}},
        })

    def test_missing_keys_backfilled(self):
        self.assertLogged("Configuration appears to be outdated; updating and saving")
        with open(self.config_path, encoding="utf-8") as f:
            saved = json.load(f)
        self.assertEqual(set(saved), set(DEFAULT_CONFIG))
        self.assertFalse(saved["check_ownership"])
        self.assertEqual(saved["containers_by_prefab_name"][WOODEN_BOX], {"enabled": False, "offset_x": 476.5})
        self.assertEqual(set(saved["containers_by_prefab_name"]), set(DEFAULT_CONFIG["containers_by_prefab_name"]))

    def test_user_values_kept(self):
        self.open_and_tick(self.spawn_box(owner_id=99, prefab=WOODEN_BOX))
        # Wooden boxes are disabled.
        self.assertEqual(self.overlay.calls, [])

        large = self.spawn_box(prefab="assets/prefabs/deployable/large wood storage/box.wooden.large.prefab",
                               owner_id=99)
        self.server.close_loot(self.player)
        self.open_and_tick(large)
        # Ownership checks are off, so a stranger's box is fine.
        self.assertEqual(self.overlay.count("show"), 1)

class TestCorruptConfig(GameTestBase):

    def prepare_config(self):
        with open(self.config_path, "w", encoding="utf-8") as f:
            f.write("{ this is not json")

    def test_reset_to_defaults(self):
        self.assertLogged("is invalid; using defaults")
        self.assertEqual(self.plugin.config, DEFAULT_CONFIG)
        with open(self.config_path, encoding="utf-8") as f:
            self.assertEqual(json.load(f), DEFAULT_CONFIG)

class TestNonObjectConfig(GameTestBase):

    def prepare_config(self):
        self.write_config(["sortbutton"])

    def test_reset_to_defaults(self):
        self.assertLogged("configuration root must be an object")
        self.assertEqual(self.plugin.config, DEFAULT_CONFIG)

class TestEmptyCommandList(GameTestBase):

    def prepare_config(self):
        config = json.loads(json.dumps(DEFAULT_CONFIG))
        config["commands"] = []
        self.write_config(config)

    def test_reset_to_default_command(self):
        self.assertEqual(self.plugin.config["commands"], ["sortbutton"])
        with open(self.config_path, encoding="utf-8") as f:
            self.assertEqual(json.load(f)["commands"], ["sortbutton"])
        self.assertIn("sortbutton", registered_commands)

class TestCustomCommands(GameTestBase):

    def prepare_config(self):
        self.write_config({"commands": ["sb", "sorter"]})

    def test_every_name_registered(self):
        self.server.process_command(self.player, "/sb")
        self.assertIn("Sort Button is now", self.player.last_message())
        self.server.process_command(self.player, "/sorter")
        self.assertIn("Enabled", self.player.last_message())

        self.server.process_command(self.player, "/sortbutton")
        self.assertIn("Unknown command", self.player.last_message())

    def test_help_names_first_command(self):
        self.server.process_command(self.player, "/sorter help")
        self.assertMessageContains(self.player, "/sb")

    def test_commands_removed_on_unload(self):
        self.server.plugin_manager.unload_plugin("sort_button_plugin")
        for name in ("sb", "sorter", "sortbutton.sort", "sortbutton.order"):
            self.assertNotIn(name, registered_commands)

class TestSkinAndPrefabConfiguration(GameTestBase):

    def prepare_config(self):
        self.write_config({
            "containers_by_prefab_name": {
                WOODEN_BOX: {"enabled": True, "offset_x": 400},
                "assets/prefabs/deployable/bogus/bogus.prefab": {"enabled": True, "offset_x": 1},
            },
            "containers_by_skin_id": {"555": {"enabled": True, "offset_x": 300}},
        })

    def test_invalid_prefab_logged(self):
        self.assertLogged("Invalid prefab in configuration: assets/prefabs/deployable/bogus/bogus.prefab")

    def test_prefab_offset(self):
        self.open_and_tick(self.spawn_box())
        self.assertEqual(self.overlay.element(1)["offset_min"], "400 236")

    def test_skin_wins_over_prefab(self):
        self.open_and_tick(self.spawn_box(skin_id=555))
        self.assertEqual(self.overlay.element(1)["offset_min"], "300 236")

    def test_skin_makes_unlisted_prefab_supported(self):
        self.open_and_tick(self.spawn_box(prefab=FURNACE, skin_id=555))
        self.assertEqual(self.overlay.element(1)["offset_min"], "300 236")

if __name__ == '__main__':
    unittest.main()
