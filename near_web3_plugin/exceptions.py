"""Typed exceptions raised by the NEAR and Aurora plugins."""
from __future__ import annotations

from typing import Any


class NearPluginError(Exception):
    """Base exception for the package."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.details = details or {}


class ProviderError(NearPluginError):
    """The transport failed (connection, HTTP status, undecodable body)."""


class JsonRpcError(ProviderError):
    """The node answered with a JSON-RPC ``error`` member."""

    def __init__(self, error: dict[str, Any]) -> None:
        self.code = error.get("code")
        self.rpc_message = error.get("message", "")
        self.data = error.get("data")
        self.cause = error.get("cause")
        self.name = error.get("name")
        super().__init__(
            f"JSON-RPC error {self.code}: {self.rpc_message}", details=dict(error)
        )


class TypedError(NearPluginError):
    """RPC-level application error carrying a classified error kind."""

    def __init__(self, message: str, type: str, context: Any = None) -> None:
        super().__init__(message)
        self.type = type
        self.context = context

    def __str__(self) -> str:
        return f"[{self.type}] {super().__str__()}"


class UnsupportedOperationError(NearPluginError, NotImplementedError):
    """Ethereum-shaped method that has no NEAR Protocol equivalent."""
