"""
plugins/service_locator.py
Named services shared between the host and plugins.

Optional collaborators (overlay sink, clans, friends) are registered here so a
plugin can use them without importing their implementations. Each plugin
manager owns its own locator.
"""
from typing import Dict, Any, List


class ServiceNotFoundException(Exception):
    """Raised when no service is registered under the requested name."""
    pass


class ServiceLocator:
    def __init__(self):
        self._services: Dict[str, Any] = {}

    def register_service(self, service_name: str, service: Any) -> None:
        """Registers `service` under `service_name`, replacing any previous one."""
        self._services[service_name] = service

    def get_service(self, service_name: str) -> Any:
        """
        Look up a service by name.

        Raises:
            ServiceNotFoundException: If nothing is registered under that name.
        """
        try:
            return self._services[service_name]
        except KeyError:
            raise ServiceNotFoundException(f"Service '{service_name}' not found") from None

    def unregister_service(self, service_name: str) -> None:
        self._services.pop(service_name, None)

    def has_service(self, service_name: str) -> bool:
        return service_name in self._services

    def get_service_names(self) -> List[str]:
        return list(self._services)
