# sortbutton/sorting/container_registry.py
"""
Which container types get a sort button, and at which X offset.

Configured by prefab path and by skin id. Prefab paths are resolved to prefab
ids once the server has initialised; a skin id match wins over the prefab.
"""
from typing import Any, Callable, Dict, Optional

from sortbutton.utils.logger import Logger

DEFAULT_OFFSET_X = 476.5


class ContainerConfiguration:
    def __init__(self, enabled: bool = True, offset_x: float = DEFAULT_OFFSET_X):
        self.enabled = enabled
        self.offset_x = offset_x

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'ContainerConfiguration':
        data = data or {}
        return cls(bool(data.get("enabled", True)), float(data.get("offset_x", DEFAULT_OFFSET_X)))

    def to_dict(self) -> Dict[str, Any]:
        return {"enabled": self.enabled, "offset_x": self.offset_x}

    def __repr__(self) -> str:
        return f"ContainerConfiguration(enabled={self.enabled}, offset_x={self.offset_x})"


class ContainerRegistry:
    def __init__(self, by_prefab_name: Dict[str, Any], by_skin_id: Dict[Any, Any]):
        self.by_prefab_name = {name: ContainerConfiguration.from_dict(data)
                               for name, data in (by_prefab_name or {}).items()}
        # JSON object keys are strings; skin ids are ints.
        self.by_skin_id = {int(skin_id): ContainerConfiguration.from_dict(data)
                           for skin_id, data in (by_skin_id or {}).items()}
        self.by_prefab_id: Dict[int, ContainerConfiguration] = {}

    def on_server_initialized(self, resolve_prefab_id: Callable[[str], int]) -> None:
        self.by_prefab_id.clear()
        for prefab_name, configuration in self.by_prefab_name.items():
            prefab_id = resolve_prefab_id(prefab_name)
            if prefab_id == 0:
                Logger.error("ContainerRegistry", f"Invalid prefab in configuration: {prefab_name}")
                continue
            self.by_prefab_id[prefab_id] = configuration

    def get_container_configuration(self, entity) -> Optional[ContainerConfiguration]:
        if entity.skin_id != 0:
            configuration = self.by_skin_id.get(entity.skin_id)
            if configuration is not None:
                return configuration
        return self.by_prefab_id.get(entity.prefab_id)

    def enabled_configuration(self, entity) -> Optional[ContainerConfiguration]:
        """Configuration for a supported, enabled container type; None otherwise."""
        configuration = self.get_container_configuration(entity)
        if configuration is None or not configuration.enabled:
            return None
        return configuration
