# sortbutton/sorting/preferences.py
"""
Per-player sort button preferences, persisted as a flat JSON data file.
"""
import json
import os
from typing import Any, Dict, Optional

from sortbutton.utils.logger import Logger


class PlayerPreference:
    """`enabled` shows the button; `sort_by_category` picks the sort mode."""

    def __init__(self, enabled: bool = True, sort_by_category: bool = True, read_only: bool = False):
        object.__setattr__(self, "_read_only", False)
        self.enabled = enabled
        self.sort_by_category = sort_by_category
        object.__setattr__(self, "_read_only", read_only)

    def __setattr__(self, name: str, value: Any) -> None:
        if self._read_only:
            raise AttributeError("The shared default preference is read-only; use create_if_missing=True")
        object.__setattr__(self, name, value)

    @property
    def read_only(self) -> bool:
        return self._read_only

    def to_dict(self) -> Dict[str, bool]:
        return {"enabled": self.enabled, "sort_by_category": self.sort_by_category}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'PlayerPreference':
        return cls(bool(data["enabled"]), bool(data["sort_by_category"]))

    def __repr__(self) -> str:
        return f"PlayerPreference(enabled={self.enabled}, sort_by_category={self.sort_by_category})"


class PreferenceStore:
    def __init__(self, data_path: str, default_enabled: bool = True, default_sort_by_category: bool = True):
        self.data_path = data_path
        self.default_enabled = default_enabled
        self.default_sort_by_category = default_sort_by_category
        # Handed out to players with no record so lookups never allocate.
        self.default = PlayerPreference(default_enabled, default_sort_by_category, read_only=True)
        self.player_data: Dict[int, PlayerPreference] = {}

    def get(self, player_id: int, create_if_missing: bool = False) -> PlayerPreference:
        preference = self.player_data.get(player_id)
        if preference is not None:
            return preference

        if create_if_missing:
            preference = PlayerPreference(self.default_enabled, self.default_sort_by_category)
            self.player_data[player_id] = preference
            return preference

        return self.default

    def has_record(self, player_id: int) -> bool:
        return player_id in self.player_data

    def load(self) -> None:
        if not os.path.exists(self.data_path):
            self.player_data = {}
            return
        try:
            with open(self.data_path, 'r', encoding='utf-8') as f:
                raw = json.load(f)
            self.player_data = {
                int(player_id): PlayerPreference.from_dict(data)
                for player_id, data in raw["player_data"].items()
            }
            Logger.info("PreferenceStore", f"Loaded preferences for {len(self.player_data)} player(s).")
        except Exception as e:
            Logger.warning("PreferenceStore", f"Data file {self.data_path} is unreadable ({e}); resetting.")
            self.clear()

    def save(self) -> bool:
        data = {"player_data": {str(pid): pref.to_dict() for pid, pref in self.player_data.items()}}
        try:
            directory = os.path.dirname(self.data_path)
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(self.data_path, 'w', encoding='utf-8') as f:
                json.dump(data, f, indent=2)
            return True
        except OSError as e:
            Logger.error("PreferenceStore", f"Error saving preferences to {self.data_path}: {e}")
            return False

    def clear(self) -> None:
        self.player_data = {}
        self.save()
