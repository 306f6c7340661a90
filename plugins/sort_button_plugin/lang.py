"""
plugins/sort_button_plugin/lang.py
Chat and button strings for the Sort Button plugin.
"""
from sortbutton.config import (
    FORMAT_GREEN, FORMAT_YELLOW, FORMAT_ORANGE, FORMAT_SKY_BLUE,
    FORMAT_FIREBRICK, FORMAT_FOREST_GREEN, FORMAT_RESET
)

ERROR_NO_PERMISSION = "Error.NoPermission"
INFO_BUTTON_STATUS = "Info.ButtonStatus"
INFO_HELP = "Info.Help"
INFO_SORT_TYPE = "Info.SortType"
FORMAT_BUTTON_TEXT = "Format.ButtonText"
FORMAT_CATEGORY_TEXT = "Format.Category"
FORMAT_DISABLED = "Format.Disabled"
FORMAT_ENABLED = "Format.Enabled"
FORMAT_NAME_TEXT = "Format.Name"
FORMAT_PREFIX = "Format.Prefix"

DEFAULT_LANGUAGE = "en"

MESSAGES = {
    "en": {
        ERROR_NO_PERMISSION: "You do not have permission to use this command",
        FORMAT_BUTTON_TEXT: "Sort",
        FORMAT_CATEGORY_TEXT: f"{FORMAT_ORANGE}Category{FORMAT_RESET}",
        FORMAT_DISABLED: f"{FORMAT_FIREBRICK}Disabled{FORMAT_RESET}",
        FORMAT_ENABLED: f"{FORMAT_FOREST_GREEN}Enabled{FORMAT_RESET}",
        FORMAT_NAME_TEXT: f"{FORMAT_SKY_BLUE}Name{FORMAT_RESET}",
        FORMAT_PREFIX: f"{FORMAT_GREEN}[Sort Button]{FORMAT_RESET}: ",
        INFO_BUTTON_STATUS: "Sort Button is now {0}",
        INFO_SORT_TYPE: "Sort Type is now {0}",
        INFO_HELP: ("List Commands:\n"
                    f"{FORMAT_YELLOW}/{{0}}{FORMAT_RESET} - Enable/Disable Sort Button.\n"
                    f"{FORMAT_YELLOW}/{{0}} <sort | type>{FORMAT_RESET} - change sort type."),
    },
    "ru": {
        ERROR_NO_PERMISSION: "У вас нет разрешения на использование этой команды",
        FORMAT_BUTTON_TEXT: "Сортировать",
        FORMAT_CATEGORY_TEXT: f"{FORMAT_ORANGE}Категория{FORMAT_RESET}",
        FORMAT_DISABLED: f"{FORMAT_FIREBRICK}Отключена{FORMAT_RESET}",
        FORMAT_ENABLED: f"{FORMAT_FOREST_GREEN}Включена{FORMAT_RESET}",
        FORMAT_NAME_TEXT: f"{FORMAT_SKY_BLUE}Имя{FORMAT_RESET}",
        FORMAT_PREFIX: f"{FORMAT_GREEN}[Sort Button]{FORMAT_RESET}: ",
        INFO_BUTTON_STATUS: "Кнопка сортировки теперь {0}",
        INFO_SORT_TYPE: "Тип сортировки теперь {0}",
        INFO_HELP: ("Список команд:\n"
                    f"{FORMAT_YELLOW}/{{0}}{FORMAT_RESET} - Включить/Отключить кнопку сортировки.\n"
                    f"{FORMAT_YELLOW}/{{0}} <sort | type>{FORMAT_RESET} - изменить тип сортировки."),
    },
}


def lang(key: str, language: str = DEFAULT_LANGUAGE, *args) -> str:
    """Message for `key` in the player's language, falling back to English."""
    table = MESSAGES.get(language, MESSAGES[DEFAULT_LANGUAGE])
    template = table.get(key, MESSAGES[DEFAULT_LANGUAGE].get(key, key))
    return template.format(*args)
