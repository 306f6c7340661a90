# sortbutton/config/config_sorting.py
"""
Layout and sorting constants for the sort button overlay.
"""

# --- Loot panel layout (pixels from the bottom of the screen) ---
BASE_Y_OFFSET = 112
Y_OFFSET_PER_ROW = 62
SLOTS_PER_ROW = 6
MAX_PANEL_ROWS = 8

DEFAULT_BUTTON_HEIGHT = 23
LEGACY_BUTTON_HEIGHT = 21

SORT_BUTTON_WIDTH = 79
SORT_ORDER_BUTTON_WIDTH = 17

# Panels whose height follows the container's slot count.
RESIZABLE_PANELS = ("generic_resizable", "animal-storage")
DEFAULT_LOOT_PANEL = "generic_resizable"

# --- Sorting ---
# Building privilege containers only sort their first slots; the tail holds upkeep-exempt items.
RESTRICTED_SLOT_LIMIT = 24

# --- Overlay ---
UI_PANEL_NAME = "UISortButton"
UI_COMMAND_SORT = "sortbutton.sort"
UI_COMMAND_ORDER = "sortbutton.order"
ORDER_COLOR_CATEGORY = "0.75 0.43 0.18 0.8"
ORDER_COLOR_NAME = "0.26 0.58 0.80 0.8"
SORT_BUTTON_COLOR = "0.41 0.50 0.25 0.8"
BUTTON_TEXT_COLOR = "0.77 0.92 0.67 0.8"
BUTTON_FONT_SIZE = 12

PERMISSION_USE = "sortbutton.use"
