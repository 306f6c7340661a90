# sortbutton/sorting/visibility.py
from typing import Any, Dict, List, Set

from sortbutton.config import UI_PANEL_NAME


class SortButtonVisibility:
    """
    Tracks which players currently see the sort button so the overlay sink only
    receives real Hidden -> Shown and Shown -> Hidden transitions.
    """

    def __init__(self, overlay_sink):
        self.overlay_sink = overlay_sink
        self.shown: Set[int] = set()

    def is_shown(self, player) -> bool:
        return player.player_id in self.shown

    def show(self, player, elements: List[Dict[str, Any]]) -> bool:
        if player.player_id in self.shown:
            return False
        self.overlay_sink.show_overlay(player, elements)
        self.shown.add(player.player_id)
        return True

    def hide(self, player) -> bool:
        if player.player_id not in self.shown:
            return False
        self.overlay_sink.hide_overlay(player, UI_PANEL_NAME)
        self.shown.discard(player.player_id)
        return True

    def hide_all(self, players) -> int:
        return sum(1 for player in players if self.hide(player))
