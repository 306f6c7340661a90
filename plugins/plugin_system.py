"""
plugins/plugin_system.py
Plugin system for the game server.
Provides infrastructure for loading and managing plugins.
"""
import copy
import importlib
import inspect
import json
import os
import traceback
from typing import Dict, List, Any, Callable, Optional

from sortbutton.commands.command_system import command, registered_commands, unregister_plugin_commands
from sortbutton.config import PLUGIN_DATA_DIR
from sortbutton.utils.logger import Logger
from plugins.event_system import (
    EventSystem, EVENT_TICK, EVENT_SERVER_INITIALIZED, EVENT_PLUGIN_LOADED, EVENT_PLUGIN_UNLOADED
)
from plugins.service_locator import ServiceLocator


class PluginManager:
    def __init__(self, world=None, command_processor=None, config_dir: str = PLUGIN_DATA_DIR):
        self.world = world
        self.command_processor = command_processor
        self.config_dir = config_dir
        self.plugins: Dict[str, Any] = {}  # Plugin ID to instance mapping
        self.server_initialized = False

        self.event_system = EventSystem()
        self.service_locator = ServiceLocator()
        self.service_locator.register_service("event_system", self.event_system)
        self.service_locator.register_service("plugin_manager", self)
        if world:
            self.service_locator.register_service("world", world)
        if command_processor:
            self.service_locator.register_service("command_processor", command_processor)

        self.plugin_path = os.path.dirname(os.path.abspath(__file__))

    def discover_plugins(self) -> List[str]:
        plugin_modules = []
        for dirname in sorted(os.listdir(self.plugin_path)):
            full_dir_path = os.path.join(self.plugin_path, dirname)
            init_file = os.path.join(full_dir_path, "__init__.py")
            if os.path.isdir(full_dir_path) and os.path.exists(init_file) and dirname != "__pycache__":
                plugin_modules.append(dirname)

        Logger.debug("PluginManager", f"Discovered plugin modules: {plugin_modules}")
        return plugin_modules

    def _constructor_kwargs(self, plugin_class) -> Dict[str, Any]:
        """Match constructor parameters against standard dependencies and registered services."""
        params = inspect.signature(plugin_class.__init__).parameters
        standard = {
            "world": self.world,
            "command_processor": self.command_processor,
            "event_system": self.event_system,
            "service_locator": self.service_locator,
            "config_dir": self.config_dir,
        }
        kwargs = {}
        for name in params:
            if name == "self":
                continue
            if name in standard:
                kwargs[name] = standard[name]
            elif self.service_locator.has_service(name):
                kwargs[name] = self.service_locator.get_service(name)
        return kwargs

    def load_plugin(self, plugin_name: str) -> bool:
        try:
            module = importlib.import_module(f"plugins.{plugin_name}")

            plugin_class = None
            for name, obj in inspect.getmembers(module):
                if (inspect.isclass(obj) and
                    hasattr(obj, "plugin_id") and
                    obj.__module__ == module.__name__):
                    plugin_class = obj
                    break

            if plugin_class is None:
                Logger.warning("PluginManager", f"No plugin class found in {plugin_name}")
                return False

            if plugin_class.plugin_id in self.plugins:
                Logger.debug("PluginManager", f"Plugin {plugin_class.plugin_id} is already loaded")
                return True

            plugin = plugin_class(**self._constructor_kwargs(plugin_class))

            if hasattr(plugin, "initialize"):
                plugin.initialize()

            self.service_locator.register_service(f"plugin:{plugin.plugin_id}", plugin)
            self.plugins[plugin.plugin_id] = plugin

            # Late loads still need the server-ready signal the others already got.
            if self.server_initialized:
                self._safe_call(plugin, "on_server_initialized")

            Logger.info("PluginManager", f"Loaded plugin: {plugin.plugin_id}")
            self.event_system.publish(EVENT_PLUGIN_LOADED, {
                "plugin_id": plugin.plugin_id,
                "plugin_name": getattr(plugin, "plugin_name", plugin.plugin_id)
            })
            return True

        except Exception as e:
            Logger.error("PluginManager", f"Error loading plugin {plugin_name}: {e}")
            traceback.print_exc()
            return False

    def load_all_plugins(self) -> None:
        for plugin_name in self.discover_plugins():
            self.load_plugin(plugin_name)

    def unload_plugin(self, plugin_id: str) -> bool:
        if plugin_id not in self.plugins:
            return False

        plugin = self.plugins[plugin_id]
        self._safe_call(plugin, "cleanup")

        unregister_plugin_commands(plugin_id)
        self.service_locator.unregister_service(f"plugin:{plugin_id}")
        self.plugins.pop(plugin_id)

        self.event_system.publish(EVENT_PLUGIN_UNLOADED, {"plugin_id": plugin_id})
        Logger.info("PluginManager", f"Unloaded plugin: {plugin_id}")
        return True

    def unload_all_plugins(self) -> None:
        for plugin_id in list(self.plugins.keys()):
            self.unload_plugin(plugin_id)

    def get_plugin(self, plugin_id: str) -> Optional[Any]:
        return self.plugins.get(plugin_id)

    def on_server_initialized(self) -> None:
        self.server_initialized = True
        self.event_system.publish(EVENT_SERVER_INITIALIZED, {})

    def on_tick(self, current_time: float) -> None:
        self.event_system.publish(EVENT_TICK, {"current_time": current_time})

    def _safe_call(self, plugin, method_name, *args, **kwargs):
        """
        Safely call a plugin method with error handling.

        Returns:
            The result of the method call, or None if an error occurred.
        """
        method = getattr(plugin, method_name, None)
        if not callable(method):
            return None

        try:
            return method(*args, **kwargs)
        except Exception as e:
            Logger.error("PluginManager", f"Error in plugin {plugin.plugin_id} {method_name}: {e}")
            traceback.print_exc()
            return None


class PluginBase:
    plugin_id = "base_plugin"
    plugin_name = "Base Plugin"

    def __init__(self, world=None, command_processor=None, event_system=None, config_dir: Optional[str] = None):
        self.world = world
        self.command_processor = command_processor
        self.event_system = event_system
        self.config_dir = config_dir or PLUGIN_DATA_DIR
        self.config = self.load_config()

    @property
    def config_path(self) -> str:
        return os.path.join(self.config_dir, f"{self.plugin_id}.json")

    def default_config(self) -> Dict[str, Any]:
        """DEFAULT_CONFIG from the plugin's config.py, if it has one."""
        try:
            config_module = importlib.import_module(f"plugins.{self.plugin_id}.config")
            return copy.deepcopy(getattr(config_module, "DEFAULT_CONFIG", {}))
        except ImportError:
            return {}

    def load_config(self) -> Dict[str, Any]:
        """
        Defaults from config.py overlaid with the JSON file in the config directory.
        Keys missing from the file are back-filled and the file re-saved; an
        unreadable file is replaced by the defaults.
        """
        defaults = self.default_config()

        if not os.path.exists(self.config_path):
            self.save_config(defaults)
            return defaults

        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                user_config = json.load(f)
            if not isinstance(user_config, dict):
                raise ValueError("configuration root must be an object")
        except (OSError, ValueError) as e:
            Logger.error(self.plugin_name, str(e))
            Logger.warning(self.plugin_name, f"Configuration file {self.config_path} is invalid; using defaults")
            self.save_config(defaults)
            return defaults

        if fill_missing_defaults(defaults, user_config):
            Logger.warning(self.plugin_name, "Configuration appears to be outdated; updating and saving")
            self.save_config(user_config)
        return user_config

    def save_config(self, config: Optional[Dict[str, Any]] = None) -> bool:
        config = self.config if config is None else config
        try:
            os.makedirs(self.config_dir, exist_ok=True)
            with open(self.config_path, 'w', encoding='utf-8') as f:
                json.dump(config, f, indent=2)
            Logger.debug(self.plugin_name, f"Configuration changes saved to {self.config_path}")
            return True
        except OSError as e:
            Logger.error(self.plugin_name, f"Error saving configuration: {e}")
            return False

    def initialize(self):
        pass

    def cleanup(self):
        pass


def fill_missing_defaults(defaults: Dict[str, Any], current: Dict[str, Any]) -> bool:
    """Copy keys present in `defaults` but absent from `current`, recursing into sections."""
    changed = False
    for key, default_value in defaults.items():
        if key not in current:
            current[key] = copy.deepcopy(default_value)
            changed = True
        elif isinstance(default_value, dict):
            if not isinstance(current[key], dict):
                current[key] = copy.deepcopy(default_value)
                changed = True
            elif fill_missing_defaults(default_value, current[key]):
                changed = True
    return changed


def register_plugin_command(plugin_id: str, name: str, handler: Callable,
                          aliases: Optional[List[str]] = None, category: str = "other",
                          help_text: str = "No help available.") -> bool:
    """
    Register a command for a plugin. Fails if another plugin or the core owns the name.
    """
    if name in registered_commands and registered_commands[name].get("plugin_id") != plugin_id:
        Logger.warning("PluginManager", f"Command '{name}' is already registered; skipping for {plugin_id}.")
        return False

    command(
        name=name,
        aliases=aliases or [],
        category=category,
        help_text=help_text,
        plugin_id=plugin_id
    )(wrap_plugin_command_handler(plugin_id, handler))
    return True

def wrap_plugin_command_handler(plugin_id: str, handler: Callable) -> Callable:
    """
    Wrap a plugin command handler so a failure degrades to "nothing happened".
    """
    def wrapper(args, context):
        try:
            if isinstance(context, dict):
                context["plugin_id"] = plugin_id
            return handler(args, context)
        except Exception as e:
            Logger.error(plugin_id, f"Error in plugin command: {e}")
            traceback.print_exc()
            return ""

    return wrapper
