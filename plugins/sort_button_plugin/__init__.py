"""
plugins/sort_button_plugin/__init__.py
Sort Button plugin.
Adds a sort button to storage loot panels that sorts the container by name or category.
"""
import os
from typing import NamedTuple, Optional

from sortbutton.config import PERMISSION_USE
from sortbutton.core.scheduler import TickScheduler
from sortbutton.items.categories import DEFAULT_CATEGORY_ORDER
from sortbutton.sorting.allies import AllyResolver
from sortbutton.sorting.container_registry import ContainerConfiguration, ContainerRegistry
from sortbutton.sorting.eligibility import BehindCheckRegistry, can_player_sort_container
from sortbutton.sorting.placement import resolve_placement, shape_of
from sortbutton.sorting.preferences import PreferenceStore
from sortbutton.sorting.sort_engine import SortResult, sort_container
from sortbutton.sorting.visibility import SortButtonVisibility
from sortbutton.ui.sort_button_ui import SortButtonTemplate
from sortbutton.utils.logger import Logger
from plugins.event_system import (
    EVENT_SERVER_INITIALIZED, EVENT_TICK, EVENT_LOOT_ENTITY, EVENT_PLAYER_LOOT_END, EVENT_LOOT_ENTITY_END
)
from plugins.plugin_system import PluginBase
from . import lang as L


class LootOpenSnapshot(NamedTuple):
    """What the deferred placement needs, captured when the panel opened."""
    offset_x: float
    sort_by_category: bool


class SortButtonPlugin(PluginBase):
    """Sort button overlay for loot panels."""

    plugin_id = "sort_button_plugin"
    plugin_name = "Sort Button"

    def __init__(self, world=None, command_processor=None, event_system=None, service_locator=None,
                 overlay_sink=None, config_dir=None):
        super().__init__(world, command_processor, event_system, config_dir)
        self.service_locator = service_locator
        self.overlay_sink = overlay_sink

        self.category_order = DEFAULT_CATEGORY_ORDER
        self.behind_checks = BehindCheckRegistry()
        self.allies = AllyResolver(world, service_locator, self.config)
        self.containers = ContainerRegistry(self.config["containers_by_prefab_name"],
                                            self.config["containers_by_skin_id"])
        self.preferences = PreferenceStore(
            os.path.join(self.config_dir, f"{self.plugin_id}_data.json"),
            default_enabled=self.config["default_enabled"],
            default_sort_by_category=self.config["default_sort_by_category"],
        )
        self.visibility = SortButtonVisibility(overlay_sink)
        self.template = SortButtonTemplate()
        self.scheduler = TickScheduler(world)

    # --- Lifecycle ---
    def initialize(self):
        """Load data and register commands. Loot hooks wait for server initialisation."""
        if not self.config["commands"]:
            self.config["commands"] = ["sortbutton"]
            self.save_config()

        self.preferences.load()

        if self.event_system:
            self.event_system.subscribe(EVENT_SERVER_INITIALIZED, self._on_server_initialized)
            self.event_system.subscribe(EVENT_TICK, self._on_tick)
        else:
            Logger.warning("SortButton", "Event system not available; the button will never show.")

        from .commands import register_commands
        register_commands(self)

    def _on_server_initialized(self, event_type, data):
        self.on_server_initialized()

    def on_server_initialized(self):
        resolve = self.world.string_pool.get if self.world else (lambda name: 0)
        self.containers.on_server_initialized(resolve)
        self._subscribe_to_hooks()

    def _subscribe_to_hooks(self):
        if not self.event_system:
            return
        self.event_system.subscribe(EVENT_LOOT_ENTITY, self._on_loot_entity)
        self.event_system.subscribe(EVENT_PLAYER_LOOT_END, self._on_player_loot_end)
        self.event_system.subscribe(EVENT_LOOT_ENTITY_END, self._on_loot_entity_end)

    def cleanup(self):
        if self.event_system:
            self.event_system.unsubscribe(EVENT_SERVER_INITIALIZED, self._on_server_initialized)
            self.event_system.unsubscribe(EVENT_TICK, self._on_tick)
            self.event_system.unsubscribe(EVENT_LOOT_ENTITY, self._on_loot_entity)
            self.event_system.unsubscribe(EVENT_PLAYER_LOOT_END, self._on_player_loot_end)
            self.event_system.unsubscribe(EVENT_LOOT_ENTITY_END, self._on_loot_entity_end)
        if self.world:
            self.visibility.hide_all(self.world.active_players())
        self.scheduler.clear()

    # --- Event handlers ---
    def _on_tick(self, event_type, data):
        self.scheduler.run_pending()

    def _on_loot_entity(self, event_type, data):
        self.handle_loot_entity(data.get("player"), data.get("entity"), delay=True)

    def _on_player_loot_end(self, event_type, data):
        player = data.get("player")
        if player is not None:
            self.destroy_ui(player)

    # Also listened to because some hosts skip player_loot_end.
    def _on_loot_entity_end(self, event_type, data):
        player = data.get("player")
        if player is not None:
            self.destroy_ui(player)

    # --- Checks ---
    def is_authorized_for_owner(self, player, entity) -> bool:
        owner_id = entity.owner_id
        if self.config["check_ownership"] and owner_id != 0 and not self.allies.is_ally(player.player_id, owner_id):
            return False
        return True

    def _entity_configuration(self, player, entity) -> Optional[ContainerConfiguration]:
        """Container configuration if everything except the looted-container count allows sorting."""
        configuration = self.containers.enabled_configuration(entity)
        if configuration is None:
            return None
        if not self.behind_checks.can_player_sort_entity(player, entity):
            return None
        if not self.preferences.get(player.player_id).enabled:
            return None
        if not self.is_authorized_for_owner(player, entity):
            return None
        return configuration

    # --- Core ---
    def handle_loot_entity(self, player, entity, delay: bool = True) -> None:
        if player is None or entity is None or not player.has_permission(PERMISSION_USE):
            return

        configuration = self._entity_configuration(player, entity)
        if configuration is None:
            return

        snapshot = LootOpenSnapshot(configuration.offset_x,
                                    self.preferences.get(player.player_id).sort_by_category)
        if delay:
            # Wait a tick so the host has settled which containers the player is viewing.
            self.scheduler.next_tick(player.player_id, entity.entity_id, self._handle_loot_entity_delayed, snapshot)
        else:
            self._handle_loot_entity_delayed(player, entity, snapshot)

    def _handle_loot_entity_delayed(self, player, entity, snapshot: LootOpenSnapshot) -> None:
        # The player moved on to another container before the tick.
        if player.loot.entity_source is not entity:
            return

        # Loot panels with multiple containers are not supported.
        if len(player.loot.containers) != 1:
            return

        container = player.loot.containers[0]
        instruction = resolve_placement(shape_of(entity, container), snapshot.offset_x)
        if instruction is None:
            Logger.debug("SortButton", f"No placement for loot panel of {entity!r}.")
            return

        self.create_button_ui(player, instruction, snapshot.sort_by_category)

    def create_button_ui(self, player, instruction, sort_by_category: bool) -> bool:
        sort_text = L.lang(L.FORMAT_BUTTON_TEXT, player.language)
        elements = self.template.render(instruction, sort_by_category, sort_text)
        return self.visibility.show(player, elements)

    def destroy_ui(self, player) -> bool:
        return self.visibility.hide(player)

    def recreate_sort_button(self, player) -> None:
        self.destroy_ui(player)
        entity = player.loot.entity_source
        if entity is not None:
            self.handle_loot_entity(player, entity, delay=False)

    def sort_looted_container(self, player) -> Optional[SortResult]:
        if player.is_server or not player.has_permission(PERMISSION_USE):
            return None

        # Loot panels with multiple containers are not supported.
        if len(player.loot.containers) != 1:
            return None

        entity = player.loot.entity_source
        if entity is None or self._entity_configuration(player, entity) is None:
            return None

        container = player.loot.containers[0]
        if not can_player_sort_container(container):
            return None

        by_category = self.preferences.get(player.player_id).sort_by_category
        owner = container.entity_owner or entity
        result = sort_container(container, player, by_category,
                                restricted=shape_of(owner, container).is_restricted_subregion,
                                table=self.category_order)
        Logger.debug("SortButton", f"{player.name} sorted {entity!r}: {result}")
        return result

    def toggle_sort_order(self, player) -> None:
        if player.is_server or not player.has_permission(PERMISSION_USE):
            return

        preference = self.preferences.get(player.player_id, create_if_missing=True)
        preference.sort_by_category = not preference.sort_by_category
        self.preferences.save()

        self.recreate_sort_button(player)

    # --- Chat command ---
    def cmd_sort_button(self, player, args) -> str:
        if player.is_server:
            return ""

        if not player.has_permission(PERMISSION_USE):
            return self._message(player, L.lang(L.ERROR_NO_PERMISSION, player.language))

        preference = self.preferences.get(player.player_id, create_if_missing=True)

        if not args:
            preference.enabled = not preference.enabled
            self.preferences.save()
            status_key = L.FORMAT_ENABLED if preference.enabled else L.FORMAT_DISABLED
            return self._message(player, L.lang(L.INFO_BUTTON_STATUS, player.language,
                                                L.lang(status_key, player.language)))

        if args[0].lower() in ("sort", "type"):
            preference.sort_by_category = not preference.sort_by_category
            self.preferences.save()
            mode_key = L.FORMAT_CATEGORY_TEXT if preference.sort_by_category else L.FORMAT_NAME_TEXT
            return self._message(player, L.lang(L.INFO_SORT_TYPE, player.language,
                                                L.lang(mode_key, player.language)))

        return self._message(player, L.lang(L.INFO_HELP, player.language, self.config["commands"][0]))

    def _message(self, player, message: str) -> str:
        return L.lang(L.FORMAT_PREFIX, player.language) + message
