"""Signed-transaction serialization hook used by ``send_transaction``."""
from __future__ import annotations

import base64
from typing import Any, Callable

TransactionEncoder = Callable[[Any], bytes]


def encode_transaction(signed_transaction: Any) -> bytes:
    """Return the canonical (borsh) bytes of a signed transaction.

    Bytes-like values are taken as already serialized. Objects exposing
    ``serialize()`` or ``encode()`` are asked to serialize themselves.
    """
    if isinstance(signed_transaction, (bytes, bytearray, memoryview)):
        return bytes(signed_transaction)
    for attr in ("serialize", "encode"):
        method = getattr(signed_transaction, attr, None)
        if callable(method):
            return bytes(method())
    raise TypeError(
        f"Cannot serialize transaction of type {type(signed_transaction).__name__}"
    )


def to_base64(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")
