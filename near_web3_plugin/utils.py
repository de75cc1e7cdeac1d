"""Base58 helpers shared by the plugins."""
from __future__ import annotations

import base58


def base_encode(value: bytes | bytearray | str) -> str:
    """Encode bytes (or a str, one code point per byte) as base58.

    A ``str`` is converted by taking each character's code point as a
    single byte, so only Latin-1 text survives the conversion.
    """
    if isinstance(value, str):
        value = bytes(ord(c) & 0xFF for c in value)
    return base58.b58encode(bytes(value)).decode("ascii")


def base_decode(value: str) -> bytes:
    """Decode a base58 string. Raises ``ValueError`` on invalid characters."""
    return base58.b58decode(value)
