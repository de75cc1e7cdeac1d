"""NEAR Protocol RPC plugin.

Maps NEAR operations onto the node's JSON-RPC methods
(https://docs.near.org/api/rpc/introduction) and adds aliases that follow
the Ethereum client naming (``get_block_number``, ``get_balance``...), so
code written against an Ethereum-shaped client can talk to a NEAR node.
"""
from __future__ import annotations

import json
import logging
from collections.abc import Mapping, Sequence
from typing import Any

from ..error_types import get_error_type_from_error_message
from ..exceptions import TypedError, UnsupportedOperationError
from ..interfaces import RequestManager, SignedTransaction
from ..models import (
    AccessKeyWithPublicKey,
    BlockId,
    BlockReference,
    ChangesType,
    Finality,
)
from ..transactions import TransactionEncoder, encode_transaction, to_base64
from ..utils import base_encode
from .base import PluginBase

logger = logging.getLogger(__name__)

BlockQuery = BlockReference | Mapping[str, Any] | BlockId

_NOT_COMPATIBLE = "Method not compatible with Near Protocol RPC."


def _block_params(block_query: BlockQuery) -> dict[str, Any]:
    return BlockReference.coerce(block_query).to_params()


def _tx_hash(tx_hash: bytes | bytearray | str) -> str:
    """Normalize a transaction hash to its base58 string form."""
    if isinstance(tx_hash, str):
        return tx_hash
    if isinstance(tx_hash, (bytes, bytearray)):
        return base_encode(tx_hash)
    raise TypeError(f"Transaction hash must be bytes or str, not {type(tx_hash).__name__}")


def _access_key(key: AccessKeyWithPublicKey | Mapping[str, Any]) -> dict[str, Any]:
    if isinstance(key, AccessKeyWithPublicKey):
        return key.to_params()
    return dict(key)


class NearPlugin(PluginBase):
    """NEAR Protocol RPC plugin, registered under the ``near`` namespace."""

    plugin_namespace = "near"

    def __init__(
        self,
        request_manager: RequestManager | None = None,
        transaction_encoder: TransactionEncoder = encode_transaction,
    ) -> None:
        super().__init__(request_manager)
        self._encode_transaction = transaction_encoder

    # ------------------------------------------------------------------
    # Node and transactions
    # ------------------------------------------------------------------

    async def status(self) -> dict[str, Any]:
        """Node status: version, chain id, sync info and current validators."""
        return await self.send_json_rpc("status", [])

    async def send_transaction(
        self, signed_transaction: SignedTransaction | bytes
    ) -> dict[str, Any]:
        """Submit a signed transaction and wait until it is fully executed."""
        data = self._encode_transaction(signed_transaction)
        return await self.send_json_rpc("broadcast_tx_commit", [to_base64(data)])

    async def send_transaction_async(
        self, signed_transaction: SignedTransaction | bytes
    ) -> str:
        """Submit a signed transaction and return its hash immediately."""
        data = self._encode_transaction(signed_transaction)
        return await self.send_json_rpc("broadcast_tx_async", [to_base64(data)])

    async def tx_status(
        self, tx_hash: bytes | bytearray | str, account_id: str
    ) -> dict[str, Any]:
        """Final execution outcome of a transaction.

        Args:
            tx_hash: Raw hash bytes or its base58 string.
            account_id: Account that signed the transaction.
        """
        return await self.send_json_rpc("tx", [_tx_hash(tx_hash), account_id])

    async def tx_status_receipts(
        self, tx_hash: bytes | bytearray | str, account_id: str
    ) -> dict[str, Any]:
        """Like :meth:`tx_status` but with the receipts included."""
        return await self.send_json_rpc(
            "EXPERIMENTAL_tx_status", [_tx_hash(tx_hash), account_id]
        )

    async def query(
        self, params: Mapping[str, Any] | str, data: str | None = None
    ) -> dict[str, Any]:
        """Run a ``query`` request (view_account, view_code, call_function...).

        Either a single mapping (``block_id`` or ``blockId`` is sent as
        ``block_id``) or the legacy ``(path, data)`` pair is accepted. In the
        legacy form ``data`` is forwarded as given, so an omitted one goes out
        as ``null``.

        Raises:
            TypedError: if the node's result carries an ``error`` field.
        """
        if isinstance(params, Mapping):
            if data is not None:
                raise TypeError("query() takes either a params mapping or (path, data)")
            request = dict(params)
            block_id = request.pop("block_id", None)
            camel_block_id = request.pop("blockId", None)
            if block_id is None:
                block_id = camel_block_id
            if block_id is not None:
                request["block_id"] = block_id
            result = await self.send_json_rpc("query", request)
        else:
            result = await self.send_json_rpc("query", [params, data])

        if isinstance(result, Mapping) and result.get("error"):
            error = result["error"]
            if isinstance(error, Mapping):
                message = str(error.get("message", error))
                name = error.get("name")
            else:
                message, name = str(error), None
            logger.debug("query %s failed: %s", params, error)
            raise TypedError(
                f"Querying failed: {error}.\n{json.dumps(result, indent=2, default=str)}",
                get_error_type_from_error_message(message, name),
                context=result,
            )
        return result

    # ------------------------------------------------------------------
    # Blocks, chunks, network
    # ------------------------------------------------------------------

    async def block(self, block_query: BlockQuery) -> dict[str, Any]:
        """Block details for a block id (height or hash) or a finality.

        Example::

            await client.near.block({"finality": "final"})
            await client.near.block(BlockReference(block_id=123456))
        """
        return await self.send_json_rpc("block", _block_params(block_query))

    async def block_changes(self, block_query: BlockQuery) -> dict[str, Any]:
        """State changes introduced by a block."""
        return await self.send_json_rpc(
            "EXPERIMENTAL_changes_in_block", _block_params(block_query)
        )

    async def chunk(self, chunk_id: str | Mapping[str, Any]) -> dict[str, Any]:
        """Chunk details by chunk hash, or by ``{block_id, shard_id}``."""
        if isinstance(chunk_id, Mapping):
            chunk_id = dict(chunk_id)
        return await self.send_json_rpc("chunk", [chunk_id])

    async def validators(self, block_id: BlockId | None) -> dict[str, Any]:
        """Validators of the epoch of ``block_id`` (``None`` for latest)."""
        return await self.send_json_rpc("validators", [block_id])

    async def experimental_protocol_config(
        self, block_query: BlockQuery | Mapping[str, Any]
    ) -> dict[str, Any]:
        """Protocol config at a block, or ``{"sync_checkpoint": "genesis"}``."""
        if isinstance(block_query, Mapping) and "sync_checkpoint" in block_query:
            params = {k: v for k, v in block_query.items() if k != "blockId"}
            if block_query.get("blockId") is not None:
                params["block_id"] = block_query["blockId"]
        else:
            params = _block_params(block_query)
        return await self.send_json_rpc("EXPERIMENTAL_protocol_config", params)

    async def light_client_proof(self, request: Mapping[str, Any]) -> dict[str, Any]:
        """Proof that a transaction or receipt outcome is included in the chain."""
        return await self.send_json_rpc("EXPERIMENTAL_light_client_proof", dict(request))

    async def next_light_client_block(
        self, request: Mapping[str, Any]
    ) -> dict[str, Any]:
        """Next light client block as far ahead as the given hash can verify."""
        return await self.send_json_rpc("next_light_client_block", dict(request))

    async def gas_price(self, block_id: BlockId | None) -> dict[str, Any]:
        """Gas price at a block height or hash (``None`` for latest)."""
        return await self.send_json_rpc("gas_price", [block_id])

    # ------------------------------------------------------------------
    # State changes
    # ------------------------------------------------------------------

    async def _changes(
        self, changes_type: ChangesType, block_query: BlockQuery, **payload: Any
    ) -> dict[str, Any]:
        """Send an ``EXPERIMENTAL_changes`` request of the given type."""
        params: dict[str, Any] = {"changes_type": changes_type.value, **payload}
        params.update(_block_params(block_query))
        return await self.send_json_rpc("EXPERIMENTAL_changes", params)

    async def access_key_changes(
        self, account_ids: Sequence[str], block_query: BlockQuery
    ) -> dict[str, Any]:
        """Changes to all access keys of the given accounts."""
        return await self._changes(
            ChangesType.ALL_ACCESS_KEY_CHANGES,
            block_query,
            account_ids=list(account_ids),
        )

    async def single_access_key_changes(
        self,
        access_keys: Sequence[AccessKeyWithPublicKey | Mapping[str, Any]],
        block_query: BlockQuery,
    ) -> dict[str, Any]:
        """Changes to specific access keys (account id plus public key)."""
        return await self._changes(
            ChangesType.SINGLE_ACCESS_KEY_CHANGES,
            block_query,
            keys=[_access_key(k) for k in access_keys],
        )

    async def account_changes(
        self, account_ids: Sequence[str], block_query: BlockQuery
    ) -> dict[str, Any]:
        """Account changes (balance, storage, code hash) of the given accounts."""
        return await self._changes(
            ChangesType.ACCOUNT_CHANGES, block_query, account_ids=list(account_ids)
        )

    async def contract_state_changes(
        self, account_ids: Sequence[str], block_query: BlockQuery, key_prefix: str = ""
    ) -> dict[str, Any]:
        """Contract storage changes. ``key_prefix`` must already be base64."""
        return await self._changes(
            ChangesType.DATA_CHANGES,
            block_query,
            account_ids=list(account_ids),
            key_prefix_base64=key_prefix,
        )

    async def contract_code_changes(
        self, account_ids: Sequence[str], block_query: BlockQuery
    ) -> dict[str, Any]:
        """Contract code changes; code comes back as base64-encoded WASM."""
        return await self._changes(
            ChangesType.CONTRACT_CODE_CHANGES,
            block_query,
            account_ids=list(account_ids),
        )

    # ------------------------------------------------------------------
    # Ethereum-client aliases
    # ------------------------------------------------------------------

    async def get_block(self, block_query: BlockQuery) -> dict[str, Any]:
        """Alias of :meth:`block`."""
        return await self.block(block_query)

    async def get_block_number(self, block_query: BlockQuery) -> int:
        """Height of the referenced block."""
        return (await self.block(block_query))["header"]["height"]

    async def get_protocol_version(self) -> Any:
        """Protocol version of the node, as the node reports it."""
        return (await self.status())["protocol_version"]

    async def is_syncing(self) -> bool | dict[str, Any]:
        """``False`` when the node is synced, otherwise its full sync info.

        Plain ``status()["sync_info"]`` is available for callers that always
        want the sync metadata.
        """
        sync_info = (await self.status())["sync_info"]
        if not sync_info.get("syncing"):
            return False
        return sync_info

    async def get_coinbase(self) -> list[Any]:
        """Account ids of the current validators."""
        validators = (await self.status())["validators"]
        # entries are bare account ids on some nodes, {"account_id": ...} on others;
        # a mapping without an account id is passed through unchanged
        return [
            (v.get("account_id") or v) if isinstance(v, Mapping) else v
            for v in validators
        ]

    async def get_gas_price(self) -> int:
        """Latest gas price as an integer."""
        return int((await self.gas_price(None))["gas_price"])

    async def get_balance(
        self, account_id: str, block_query: BlockQuery | None = None
    ) -> int:
        """Account balance in yoctoNEAR (final block unless told otherwise)."""
        if block_query is None:
            block_query = BlockReference(finality=Finality.FINAL)
        account = await self.query(
            {
                "request_type": "view_account",
                "account_id": account_id,
                **_block_params(block_query),
            }
        )
        return int(account["amount"])

    async def get_code(
        self, account_id: str, block_query: BlockQuery | None = None
    ) -> str:
        """Base64-encoded WASM deployed on ``account_id``."""
        if block_query is None:
            block_query = BlockReference(finality=Finality.FINAL)
        view = await self.query(
            {
                "request_type": "view_code",
                "account_id": account_id,
                **_block_params(block_query),
            }
        )
        return view["code_base64"]

    async def is_mining(self) -> bool:
        """Not available on NEAR."""
        raise UnsupportedOperationError(_NOT_COMPATIBLE)

    async def get_hashrate(self) -> int:
        """Not available on NEAR."""
        raise UnsupportedOperationError(_NOT_COMPATIBLE)

    async def get_accounts(self) -> list[str]:
        """Not available on NEAR."""
        raise UnsupportedOperationError(_NOT_COMPATIBLE)
