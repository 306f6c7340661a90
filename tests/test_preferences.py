import json
import os
import shutil
import tempfile
import unittest

from tests.fixtures import PROJECT_ROOT  # noqa: F401
from sortbutton.sorting.preferences import PlayerPreference, PreferenceStore
from sortbutton.utils.logger import Logger

class TestPreferenceStore(unittest.TestCase):

    def setUp(self):
        self.data_dir = tempfile.mkdtemp(prefix="sortbutton_prefs_")
        self.data_path = os.path.join(self.data_dir, "sort_button_plugin_data.json")
        self.store = PreferenceStore(self.data_path)
        self.log_lines = []
        Logger.set_sink(self.log_lines.append)

    def tearDown(self):
        Logger.reset_sink()
        shutil.rmtree(self.data_dir, ignore_errors=True)

    def test_lookup_does_not_allocate(self):
        preference = self.store.get(42)
        self.assertIs(preference, self.store.default)
        self.assertIs(self.store.get(43), preference)
        self.assertFalse(self.store.has_record(42))
        self.assertTrue(preference.enabled)
        self.assertTrue(preference.sort_by_category)

    def test_default_is_read_only(self):
        with self.assertRaises(AttributeError):
            self.store.get(42).enabled = False
        self.assertTrue(self.store.default.enabled)

    def test_create_if_missing(self):
        preference = self.store.get(42, create_if_missing=True)
        self.assertIsNot(preference, self.store.default)
        self.assertFalse(preference.read_only)
        preference.sort_by_category = False
        self.assertIs(self.store.get(42), preference)
        self.assertFalse(self.store.get(42).sort_by_category)
        self.assertTrue(self.store.has_record(42))

    def test_configured_defaults(self):
        store = PreferenceStore(self.data_path, default_enabled=False, default_sort_by_category=False)
        self.assertFalse(store.get(1).enabled)
        self.assertFalse(store.get(1, create_if_missing=True).sort_by_category)

    def test_save_and_load(self):
        self.store.get(7, create_if_missing=True).enabled = False
        self.assertTrue(self.store.save())

        with open(self.data_path, encoding="utf-8") as f:
            raw = json.load(f)
        self.assertEqual(raw, {"player_data": {"7": {"enabled": False, "sort_by_category": True}}})

        reloaded = PreferenceStore(self.data_path)
        reloaded.load()
        self.assertTrue(reloaded.has_record(7))
        self.assertFalse(reloaded.get(7).enabled)

    def test_missing_file_starts_empty(self):
        self.store.load()
        self.assertEqual(self.store.player_data, {})
        self.assertFalse(os.path.exists(self.data_path))

    def test_corrupt_file_is_reset(self):
        with open(self.data_path, "w", encoding="utf-8") as f:
            f.write("{not json")

        self.store.load()

        self.assertEqual(self.store.player_data, {})
        self.assertIn("unreadable", "\n".join(self.log_lines))
        with open(self.data_path, encoding="utf-8") as f:
            self.assertEqual(json.load(f), {"player_data": {}})

    def test_wrong_shape_is_reset(self):
        with open(self.data_path, "w", encoding="utf-8") as f:
            json.dump({"player_data": {"1": {"enabled": True}}}, f)
        self.store.load()
        self.assertEqual(self.store.player_data, {})

    def test_preference_repr(self):
        self.assertEqual(repr(PlayerPreference(False, True)),
                         "PlayerPreference(enabled=False, sort_by_category=True)")
