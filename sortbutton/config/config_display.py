# sortbutton/config/config_display.py
"""
Text format codes and colours shared by chat messages and the overlay renderer.
"""

COLOR_WHITE = (255, 255, 255)

FORMAT_RED = "[[RED]]"
FORMAT_GREEN = "[[GREEN]]"
FORMAT_YELLOW = "[[YELLOW]]"
FORMAT_ORANGE = "[[ORANGE]]"
FORMAT_SKY_BLUE = "[[SKY_BLUE]]"
FORMAT_FIREBRICK = "[[FIREBRICK]]"
FORMAT_FOREST_GREEN = "[[FOREST_GREEN]]"
FORMAT_RESET = "[[/]]"

FORMAT_ERROR = FORMAT_RED
