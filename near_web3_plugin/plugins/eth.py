"""Ethereum-standard JSON-RPC methods shared by EVM-compatible plugins."""
from __future__ import annotations

from typing import Any

from .base import PluginBase

BlockTag = int | str


def _to_int(value: Any) -> int:
    """Parse a quantity returned by an Ethereum node (hex string or int)."""
    if isinstance(value, int):
        return value
    return int(value, 16) if value.startswith(("0x", "0X")) else int(value)


def _block_tag(block: BlockTag) -> str:
    if isinstance(block, int):
        return hex(block)
    return block


class EthPlugin(PluginBase):
    """The subset of ``eth_*`` methods every EVM endpoint answers."""

    plugin_namespace = "eth"

    async def get_block_number(self) -> int:
        """Number of the latest block."""
        return _to_int(await self.send_json_rpc("eth_blockNumber", []))

    async def get_block(
        self, block: BlockTag = "latest", hydrated: bool = False
    ) -> dict[str, Any] | None:
        """Fetch a block by number, tag (``latest``...) or 32-byte hash."""
        if isinstance(block, str) and block.startswith("0x") and len(block) == 66:
            return await self.send_json_rpc("eth_getBlockByHash", [block, hydrated])
        return await self.send_json_rpc(
            "eth_getBlockByNumber", [_block_tag(block), hydrated]
        )

    async def get_protocol_version(self) -> str:
        """Ethereum protocol version string of the node."""
        return await self.send_json_rpc("eth_protocolVersion", [])

    async def is_syncing(self) -> bool | dict[str, Any]:
        """``False``, or the sync progress object while the node catches up."""
        return await self.send_json_rpc("eth_syncing", [])

    async def get_coinbase(self) -> str:
        """Address that receives block rewards."""
        return await self.send_json_rpc("eth_coinbase", [])

    async def get_gas_price(self) -> int:
        """Current gas price in wei."""
        return _to_int(await self.send_json_rpc("eth_gasPrice", []))

    async def get_balance(self, address: str, block: BlockTag = "latest") -> int:
        """Balance of ``address`` in wei at ``block``."""
        return _to_int(
            await self.send_json_rpc("eth_getBalance", [address, _block_tag(block)])
        )

    async def get_chain_id(self) -> int:
        """EIP-155 chain id."""
        return _to_int(await self.send_json_rpc("eth_chainId", []))
