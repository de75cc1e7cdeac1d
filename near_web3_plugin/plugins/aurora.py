"""Aurora Engine plugin.

Adds the Aurora-specific RPC methods listed at https://doc.aurora.dev/evm/rpc
on top of the standard Ethereum methods of :class:`EthPlugin`.
"""
from typing import Any

from .eth import EthPlugin


class AuroraPlugin(EthPlugin):
    """Aurora (EVM on NEAR) RPC plugin."""

    plugin_namespace = "aurora"

    async def parity_pending_transactions(self) -> Any:
        """``parity_pendingTransactions``"""
        return await self.send_json_rpc("parity_pendingTransactions", [])

    async def txpool_status(self) -> Any:
        """``txpool_status``"""
        return await self.send_json_rpc("txpool_status", [])

    async def txpool_inspect(self) -> Any:
        """``txpool_inspect``"""
        return await self.send_json_rpc("txpool_inspect", [])

    async def txpool_content(self) -> Any:
        """``txpool_content``"""
        return await self.send_json_rpc("txpool_content", [])
