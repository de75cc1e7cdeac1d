"""JSON-RPC transports."""
from .http_provider import HttpProvider

__all__ = ["HttpProvider"]
