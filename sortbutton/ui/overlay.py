# sortbutton/ui/overlay.py
"""
Overlay sinks receive element lists for a player and display or remove them.

PygameOverlaySink lays the elements out the way the game client does: the root
panel is anchored to the bottom centre of the screen and children are offset
from the root's position, with y growing upwards.
"""
import os
from typing import Any, Dict, List, Optional, Tuple

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
import pygame

from sortbutton.config import SCREEN_WIDTH, SCREEN_HEIGHT, COLOR_WHITE
from sortbutton.utils.logger import Logger


class OverlaySink:
    def show_overlay(self, player, elements: List[Dict[str, Any]]) -> None:
        raise NotImplementedError

    def hide_overlay(self, player, panel_name: str) -> None:
        raise NotImplementedError


class OverlayButton:
    def __init__(self, name: str, rect: pygame.Rect, color: Tuple[int, int, int, int],
                 command: Optional[str] = None, text: str = "",
                 text_color: Tuple[int, int, int, int] = (*COLOR_WHITE, 255)):
        self.name = name
        self.rect = rect
        self.color = color
        self.command = command
        self.text = text
        self.text_color = text_color

    def __repr__(self) -> str:
        return f"OverlayButton({self.name!r}, {self.rect}, command={self.command!r})"


def parse_color(value: str) -> Tuple[int, int, int, int]:
    """'r g b a' floats in 0..1 to an RGBA tuple."""
    parts = [float(p) for p in value.split()]
    while len(parts) < 4:
        parts.append(1.0)
    return tuple(max(0, min(255, round(p * 255))) for p in parts[:4])  # type: ignore


def _pair(value: str) -> Tuple[float, float]:
    x, y = value.split()
    return float(x), float(y)


class PygameOverlaySink(OverlaySink):
    def __init__(self, screen_size: Tuple[int, int] = (SCREEN_WIDTH, SCREEN_HEIGHT)):
        self.screen_size = screen_size
        # player_id -> panel name -> laid out buttons
        self.overlays: Dict[int, Dict[str, List[OverlayButton]]] = {}
        self._font = None

    def show_overlay(self, player, elements: List[Dict[str, Any]]) -> None:
        if not elements:
            return
        root_name = elements[0]["name"]
        self.overlays.setdefault(player.player_id, {})[root_name] = self.layout(elements)

    def hide_overlay(self, player, panel_name: str) -> None:
        panels = self.overlays.get(player.player_id)
        if panels and panel_name in panels:
            panels.pop(panel_name)
            if not panels:
                self.overlays.pop(player.player_id)

    def is_visible(self, player_id: int, panel_name: Optional[str] = None) -> bool:
        panels = self.overlays.get(player_id, {})
        return bool(panels) if panel_name is None else panel_name in panels

    def layout(self, elements: List[Dict[str, Any]]) -> List[OverlayButton]:
        width, height = self.screen_size
        # Bottom-left corner of each element, in bottom-up coordinates.
        origins: Dict[str, Tuple[float, float]] = {}
        buttons: List[OverlayButton] = []

        for element in elements:
            parent = element.get("parent")
            if parent in origins:
                base_x, base_y = origins[parent]
                parent_w, parent_h = 0.0, 0.0
            else:
                base_x, base_y = 0.0, 0.0
                parent_w, parent_h = float(width), float(height)

            anchor_x, anchor_y = _pair(element.get("anchor_min", "0 0"))
            min_x, min_y = _pair(element.get("offset_min", "0 0"))
            max_x, max_y = _pair(element.get("offset_max", "0 0"))
            left = base_x + anchor_x * parent_w + min_x
            bottom = base_y + anchor_y * parent_h + min_y
            origins[element["name"]] = (left, bottom)

            rect_w = max_x - min_x
            rect_h = max_y - min_y
            rect = pygame.Rect(round(left), round(height - bottom - rect_h), round(rect_w), round(rect_h))
            buttons.append(OverlayButton(
                element["name"],
                rect,
                parse_color(element.get("color", "0 0 0 0")),
                command=element.get("command"),
                text=element.get("text", ""),
                text_color=parse_color(element.get("text_color", "1 1 1 1")),
            ))
        return buttons

    def buttons_for(self, player_id: int) -> List[OverlayButton]:
        return [button for panel in self.overlays.get(player_id, {}).values() for button in panel]

    def hit_test(self, player_id: int, pos: Tuple[int, int]) -> Optional[str]:
        """Command of the topmost clickable element under `pos`."""
        for button in reversed(self.buttons_for(player_id)):
            if button.command and button.rect.collidepoint(pos):
                return button.command
        return None

    def draw(self, surface: pygame.Surface, player_id: int) -> int:
        drawn = 0
        for button in self.buttons_for(player_id):
            if button.rect.width <= 0 or button.rect.height <= 0 or button.color[3] == 0:
                continue
            pygame.draw.rect(surface, button.color, button.rect)
            self._draw_text(surface, button)
            drawn += 1
        return drawn

    def _draw_text(self, surface: pygame.Surface, button: OverlayButton) -> None:
        if not button.text or not pygame.font.get_init():
            return
        try:
            if self._font is None:
                self._font = pygame.font.Font(None, 16)
            text_surface = self._font.render(button.text, True, button.text_color)
            surface.blit(text_surface, text_surface.get_rect(center=button.rect.center))
        except pygame.error as e:
            Logger.warning("Overlay", f"Could not render label '{button.text}': {e}")
