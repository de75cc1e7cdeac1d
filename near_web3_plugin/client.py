"""Host client: owns the transport and exposes registered plugins."""
from __future__ import annotations

from .config import ProviderConfig
from .interfaces.request_manager import RequestManager
from .plugins.base import PluginBase
from .rpc import HttpProvider


class Web3Client(PluginBase):
    """Root of the plugin tree.

    ``Web3Client("https://rpc.testnet.near.org")`` builds an
    :class:`HttpProvider`; any object implementing ``RequestManager`` can be
    passed instead.
    """

    plugin_namespace = "web3"

    def __init__(
        self, provider: RequestManager | ProviderConfig | str, rpc_timeout: int = 30
    ) -> None:
        if isinstance(provider, str):
            provider = ProviderConfig(rpc_url=provider, rpc_timeout=rpc_timeout)
        if isinstance(provider, ProviderConfig):
            provider = HttpProvider(provider)
        super().__init__(provider)

    @property
    def provider(self) -> RequestManager:
        return self.request_manager
