# sortbutton/commands/command_system.py
from typing import List, Dict, Any, Optional
from functools import wraps

from sortbutton.config import FORMAT_ERROR, FORMAT_RESET

# Dictionary to store all registered commands
registered_commands: Dict[str, Dict[str, Any]] = {}

def command(name: str, aliases: Optional[List[str]] = None, category: str = "other",
           help_text: str = "No help available.", plugin_id: Optional[str] = None):
    """
    Decorator for registering commands.
    """
    aliases = aliases or []

    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            return func(*args, **kwargs)

        cmd_data = {
            "name": name,
            "aliases": aliases,
            "handler": wrapper,
            "help_text": help_text,
            "category": category,
            "plugin_id": plugin_id
        }
        registered_commands[name] = cmd_data
        for alias in aliases:
            registered_commands[alias] = cmd_data

        return wrapper
    return decorator

def unregister_command(name: str) -> bool:
    """Unregister a command and all its aliases."""
    if name not in registered_commands:
        return False

    cmd_data = registered_commands[name]
    cmd_name = cmd_data["name"]

    registered_commands.pop(cmd_name, None)
    for alias in cmd_data["aliases"]:
        registered_commands.pop(alias, None)

    return True

def unregister_plugin_commands(plugin_id: str) -> int:
    """Unregister all commands registered by a specific plugin."""
    if not plugin_id: return 0

    unique_names_to_unregister = {
        cmd_data["name"] for cmd_data in registered_commands.values()
        if cmd_data.get("plugin_id") == plugin_id
    }

    count = 0
    for cmd_name in unique_names_to_unregister:
        if unregister_command(cmd_name):
            count += 1
    return count

class CommandProcessor:
    """Dispatches chat and UI command text to registered handlers."""

    def process_input(self, text: str, context: Any = None) -> str:
        """
        Execute the command using a longest-match-first strategy, so multi-word
        names win over their first word.
        """
        text = text.strip().lstrip("/").lower()
        if not text: return ""
        parts = text.split()

        for i in range(len(parts), 0, -1):
            potential_cmd = " ".join(parts[:i])
            if potential_cmd in registered_commands:
                cmd_data = registered_commands[potential_cmd]
                args = parts[i:]

                if context is not None and isinstance(context, dict):
                     context['executed_command_name'] = cmd_data.get('name', potential_cmd)

                return cmd_data["handler"](args, context)

        return f"{FORMAT_ERROR}Unknown command: {parts[0]}{FORMAT_RESET}"
