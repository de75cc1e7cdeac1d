"""Scenarios against a live NEAR node (set NEAR_LOCALNET_URL to enable)."""
from __future__ import annotations

import os

import pytest

from near_web3_plugin import AuroraPlugin, NearPlugin, Web3Client

LOCALNET_URL = os.environ.get("NEAR_LOCALNET_URL")

pytestmark = [
    pytest.mark.localnet,
    pytest.mark.skipif(not LOCALNET_URL, reason="NEAR_LOCALNET_URL not set"),
]


@pytest.fixture()
def web3() -> Web3Client:
    client = Web3Client(LOCALNET_URL or "")
    near = NearPlugin()
    near.register_plugin(AuroraPlugin())
    client.register_plugin(near)
    return client


@pytest.mark.asyncio
async def test_genesis_block_height(web3: Web3Client) -> None:
    block = await web3.near.block({"blockId": 0})
    assert block["header"]["height"] == 0


@pytest.mark.asyncio
async def test_get_block_number_at_genesis(web3: Web3Client) -> None:
    assert await web3.near.get_block_number({"blockId": 0}) == 0


@pytest.mark.asyncio
async def test_final_block(web3: Web3Client) -> None:
    block = await web3.near.get_block({"finality": "final"})
    assert block["header"]["height"] >= 0
    assert "author" in block
    assert "chunks" in block


@pytest.mark.asyncio
async def test_balance_is_non_negative(web3: Web3Client) -> None:
    assert await web3.near.get_balance("test.near", {"blockId": 0}) >= 0


@pytest.mark.asyncio
async def test_status_aliases(web3: Web3Client) -> None:
    assert await web3.near.get_protocol_version() is not None
    assert isinstance(await web3.near.get_coinbase(), list)
    assert await web3.near.get_gas_price() >= 0
