"""JSON-RPC over HTTP provider."""
import asyncio
import itertools
import logging
import ssl
from typing import Any

import aiohttp
import certifi

from ..config import ProviderConfig
from ..exceptions import JsonRpcError, ProviderError

logger = logging.getLogger(__name__)


class HttpProvider:
    """Single-endpoint JSON-RPC client. One POST per call, no retries."""

    def __init__(self, config: ProviderConfig) -> None:
        self.rpc_url = config.rpc_url
        self.timeout = config.rpc_timeout
        self._ids = itertools.count(1)

    async def send(self, method: str, params: dict[str, Any] | list[Any]) -> Any:
        """POST a JSON-RPC 2.0 request and return its ``result`` member."""
        payload = {
            "jsonrpc": "2.0",
            "id": next(self._ids),
            "method": method,
            "params": params,
        }

        ssl_context = ssl.create_default_context(cafile=certifi.where())

        try:
            connector = aiohttp.TCPConnector(ssl=ssl_context)
            async with aiohttp.ClientSession(connector=connector) as session:
                async with session.post(
                    self.rpc_url,
                    json=payload,
                    timeout=aiohttp.ClientTimeout(total=self.timeout),
                ) as response:
                    status = response.status
                    body = await response.json(content_type=None)
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            logger.warning("RPC endpoint %s failed: %s", self.rpc_url, e)
            raise ProviderError(
                f"Request to {self.rpc_url} failed: {e}",
                details={"method": method},
            ) from e

        if isinstance(body, dict) and body.get("error") is not None:
            error = body["error"]
            if not isinstance(error, dict):
                error = {"message": str(error)}
            logger.debug("%s returned error: %s", method, error)
            raise JsonRpcError(error)

        if status >= 400 or not isinstance(body, dict):
            raise ProviderError(
                f"Unexpected response (HTTP {status}) from {self.rpc_url}",
                details={"method": method, "status": status, "body": body},
            )

        return body.get("result")
