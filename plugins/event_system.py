"""
plugins/event_system.py
Event system for the game server.
Provides a centralized way for the host and plugins to communicate.
"""
import traceback
from typing import Dict, List, Any, Callable

from sortbutton.utils.logger import Logger

# Host events
EVENT_SERVER_INITIALIZED = "server_initialized"
EVENT_TICK = "on_tick"
EVENT_LOOT_ENTITY = "loot_entity"
EVENT_PLAYER_LOOT_END = "player_loot_end"
EVENT_LOOT_ENTITY_END = "loot_entity_end"
EVENT_PLUGIN_LOADED = "plugin_loaded"
EVENT_PLUGIN_UNLOADED = "plugin_unloaded"


class EventSystem:
    """
    Centralized event system for server-wide communication.

    Callbacks receive (event_type, data). A failing callback is logged and
    never stops delivery to the remaining subscribers or reaches the publisher.
    """

    def __init__(self):
        """Initialize the event system."""
        self.subscribers: Dict[str, List[Callable]] = {}

    def subscribe(self, event_type: str, callback: Callable) -> None:
        """
        Subscribe to an event type.

        Args:
            event_type: The type of event to subscribe to.
            callback: The function to call when the event occurs.
        """
        callbacks = self.subscribers.setdefault(event_type, [])
        if callback not in callbacks:
            callbacks.append(callback)

    def unsubscribe(self, event_type: str, callback: Callable) -> None:
        """
        Unsubscribe from an event type.

        Args:
            event_type: The type of event to unsubscribe from.
            callback: The callback to remove.
        """
        if event_type in self.subscribers and callback in self.subscribers[event_type]:
            self.subscribers[event_type].remove(callback)

            # Clean up empty event types
            if not self.subscribers[event_type]:
                self.subscribers.pop(event_type)

    def is_subscribed(self, event_type: str, callback: Callable) -> bool:
        return callback in self.subscribers.get(event_type, [])

    def publish(self, event_type: str, data: Any = None) -> None:
        """
        Publish an event.

        Args:
            event_type: The type of event to publish.
            data: The event data.
        """
        # Copy so callbacks may unsubscribe while being notified.
        for callback in list(self.subscribers.get(event_type, [])):
            try:
                callback(event_type, data)
            except Exception as e:
                Logger.error("EventSystem", f"Error in event callback for {event_type}: {e}")
                traceback.print_exc()
