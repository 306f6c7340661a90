# sortbutton/ui/sort_button_ui.py
"""
Element template for the sort button overlay.

Three elements: an invisible anchor panel placed at the loot panel's top-right,
a narrow sort order toggle ("C"/"N") and the sort button itself. The template
JSON is built once and only the per-player values are substituted on each show.
"""
import json
from string import Template
from typing import Any, Dict, List, Optional

from sortbutton.config import (
    UI_PANEL_NAME, UI_COMMAND_SORT, UI_COMMAND_ORDER,
    ORDER_COLOR_CATEGORY, ORDER_COLOR_NAME, SORT_BUTTON_COLOR, BUTTON_TEXT_COLOR,
    BUTTON_FONT_SIZE, SORT_BUTTON_WIDTH, SORT_ORDER_BUTTON_WIDTH
)
from sortbutton.sorting.placement import RenderInstruction


class SortButtonTemplate:
    def __init__(self):
        self._cached: Optional[Template] = None

    def _build(self) -> Template:
        elements = [
            {
                "name": UI_PANEL_NAME,
                "parent": "Overlay",
                "type": "panel",
                "color": "0 0 0 0",
                "anchor_min": "0.5 0",
                "anchor_max": "0.5 0",
                "offset_min": "$offset_x $offset_y",
                "offset_max": "$offset_x $offset_y",
                "cursor_enabled": False,
            },
            {
                "name": f"{UI_PANEL_NAME}.order",
                "parent": UI_PANEL_NAME,
                "type": "button",
                "command": UI_COMMAND_ORDER,
                "color": "$order_color",
                "anchor_min": "0 0",
                "anchor_max": "0 0",
                "offset_min": "0 0",
                "offset_max": f"{SORT_ORDER_BUTTON_WIDTH} $height",
                "text": "$order_text",
                "font_size": BUTTON_FONT_SIZE,
                "align": "MiddleCenter",
                "text_color": BUTTON_TEXT_COLOR,
            },
            {
                "name": f"{UI_PANEL_NAME}.sort",
                "parent": UI_PANEL_NAME,
                "type": "button",
                "command": UI_COMMAND_SORT,
                "color": SORT_BUTTON_COLOR,
                "anchor_min": "0 0",
                "anchor_max": "0 0",
                "offset_min": f"{SORT_ORDER_BUTTON_WIDTH} 0",
                "offset_max": f"{SORT_ORDER_BUTTON_WIDTH + SORT_BUTTON_WIDTH} $height",
                "text": "$sort_text",
                "font_size": BUTTON_FONT_SIZE,
                "align": "MiddleCenter",
                "text_color": BUTTON_TEXT_COLOR,
            },
        ]
        return Template(json.dumps(elements))

    @property
    def is_cached(self) -> bool:
        return self._cached is not None

    def render_json(self, instruction: RenderInstruction, sort_by_category: bool, sort_text: str) -> str:
        if self._cached is None:
            self._cached = self._build()
        return self._cached.substitute(
            offset_x=_format_number(instruction.offset_x),
            offset_y=_format_number(instruction.offset_y),
            height=_format_number(instruction.height),
            order_color=ORDER_COLOR_CATEGORY if sort_by_category else ORDER_COLOR_NAME,
            order_text="C" if sort_by_category else "N",
            # Escape for embedding inside a JSON string literal.
            sort_text=json.dumps(sort_text)[1:-1],
        )

    def render(self, instruction: RenderInstruction, sort_by_category: bool, sort_text: str) -> List[Dict[str, Any]]:
        return json.loads(self.render_json(instruction, sort_by_category, sort_text))


def _format_number(value: float) -> str:
    return f"{value:g}"
