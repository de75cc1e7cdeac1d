"""Plugin base: request dispatch and namespace registration."""
from __future__ import annotations

import logging
from typing import Any

from ..interfaces.request_manager import RequestManager

logger = logging.getLogger(__name__)


class PluginBase:
    """Holds a request manager and any plugins registered beneath it.

    Registered plugins are reachable as attributes named after their
    namespace, so ``near.register_plugin(AuroraPlugin())`` exposes
    ``near.aurora``.
    """

    plugin_namespace: str = ""

    def __init__(self, request_manager: RequestManager | None = None) -> None:
        self._request_manager = request_manager
        self._plugins: dict[str, PluginBase] = {}

    @property
    def request_manager(self) -> RequestManager:
        if self._request_manager is None:
            raise RuntimeError(
                f"Plugin '{self.plugin_namespace}' is not attached to a request manager"
            )
        return self._request_manager

    def link(self, request_manager: RequestManager) -> None:
        """Attach a request manager (and cascade to sub-plugins lacking one)."""
        if self._request_manager is None:
            self._request_manager = request_manager
        for plugin in self._plugins.values():
            plugin.link(self._request_manager)

    @property
    def plugins(self) -> dict[str, PluginBase]:
        return dict(self._plugins)

    def register_plugin(self, plugin: PluginBase) -> None:
        namespace = plugin.plugin_namespace
        if not namespace:
            raise ValueError(f"{type(plugin).__name__} has no plugin_namespace")
        if namespace in self._plugins or hasattr(type(self), namespace):
            raise ValueError(f"Namespace '{namespace}' is already registered")

        if self._request_manager is not None:
            plugin.link(self._request_manager)
        self._plugins[namespace] = plugin
        logger.debug(
            "Registered plugin '%s' on %s", namespace, type(self).__name__
        )

    def __getattr__(self, name: str) -> Any:
        plugins = self.__dict__.get("_plugins", {})
        if name in plugins:
            return plugins[name]
        raise AttributeError(
            f"{type(self).__name__!r} object has no attribute {name!r}"
        )

    async def send_json_rpc(self, method: str, params: dict[str, Any] | list[Any]) -> Any:
        """Dispatch one JSON-RPC call through the request manager."""
        logger.debug("%s -> %s %s", self.plugin_namespace, method, params)
        return await self.request_manager.send(method, params)
