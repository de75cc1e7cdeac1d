"""Request manager protocol: JSON-RPC dispatch abstraction."""
from typing import Any, Protocol


class RequestManager(Protocol):
    """Anything that can send one JSON-RPC request and return its result."""

    async def send(self, method: str, params: dict[str, Any] | list[Any]) -> Any: ...
