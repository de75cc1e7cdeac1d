"""Signed transaction protocol: serialization abstraction."""
from typing import Protocol


class SignedTransaction(Protocol):
    """A signed NEAR transaction that knows its borsh serialization."""

    def encode(self) -> bytes: ...
