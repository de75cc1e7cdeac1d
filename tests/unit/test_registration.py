"""Unit tests for plugin registration and the host client."""
from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from near_web3_plugin.client import Web3Client
from near_web3_plugin.config import ProviderConfig
from near_web3_plugin.plugins import AuroraPlugin, NearPlugin
from near_web3_plugin.rpc import HttpProvider


class TestWeb3Client:
    def test_builds_http_provider_from_url(self) -> None:
        client = Web3Client("https://rpc.testnet.near.org", rpc_timeout=7)
        assert isinstance(client.provider, HttpProvider)
        assert client.provider.rpc_url == "https://rpc.testnet.near.org"
        assert client.provider.timeout == 7

    def test_builds_http_provider_from_config(
        self, sample_provider_config: ProviderConfig
    ) -> None:
        client = Web3Client(sample_provider_config)
        assert client.provider.rpc_url == "https://rpc.example.com"

    def test_accepts_request_manager(self, request_manager: AsyncMock) -> None:
        client = Web3Client(request_manager)
        assert client.provider is request_manager


class TestRegisterPlugin:
    def test_plugin_reachable_by_namespace(self, request_manager: AsyncMock) -> None:
        client = Web3Client(request_manager)
        near = NearPlugin()
        client.register_plugin(near)

        assert client.near is near
        assert near.request_manager is request_manager

    def test_nested_plugins_share_transport(self, request_manager: AsyncMock) -> None:
        client = Web3Client(request_manager)
        near = NearPlugin()
        near.register_plugin(AuroraPlugin())
        client.register_plugin(near)

        assert isinstance(client.near.aurora, AuroraPlugin)
        assert client.near.aurora.request_manager is request_manager

    def test_plugin_keeps_its_own_transport(self, request_manager: AsyncMock) -> None:
        own = AsyncMock()
        client = Web3Client(request_manager)
        client.register_plugin(AuroraPlugin(own))
        assert client.aurora.request_manager is own

    def test_duplicate_namespace_raises(self, request_manager: AsyncMock) -> None:
        client = Web3Client(request_manager)
        client.register_plugin(NearPlugin())
        with pytest.raises(ValueError, match="already registered"):
            client.register_plugin(NearPlugin())

    def test_unknown_namespace_raises_attribute_error(
        self, request_manager: AsyncMock
    ) -> None:
        client = Web3Client(request_manager)
        with pytest.raises(AttributeError):
            client.near  # noqa: B018

    def test_unattached_plugin_raises(self) -> None:
        with pytest.raises(RuntimeError, match="not attached"):
            NearPlugin().request_manager  # noqa: B018

    @pytest.mark.asyncio
    async def test_calls_go_through_host_transport(
        self, request_manager: AsyncMock
    ) -> None:
        client = Web3Client(request_manager)
        near = NearPlugin()
        near.register_plugin(AuroraPlugin())
        client.register_plugin(near)

        await client.near.aurora.txpool_status()
        request_manager.send.assert_awaited_once_with("txpool_status", [])
