# sortbutton/config/config_game.py
"""
Configuration for file paths, screen geometry and logging.
"""
import os

# --- Directories and Files ---
# config_game.py is in sortbutton/config/, so we go up two levels to get to root.
BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
DATA_DIR = os.path.join(BASE_DIR, "data")
PLUGIN_DATA_DIR = os.path.join(DATA_DIR, "plugins")

# --- Screen (overlay coordinates are anchored to the bottom centre) ---
SCREEN_WIDTH = 1600
SCREEN_HEIGHT = 920

# --- Logging ---
LOG_LEVEL_NAME = "INFO"
