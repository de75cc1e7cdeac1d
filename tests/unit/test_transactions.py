"""Unit tests for signed transaction serialization."""
from __future__ import annotations

import pytest

from near_web3_plugin.transactions import encode_transaction, to_base64


class _Serializable:
    def serialize(self) -> bytes:
        return b"serialized"


class _Encodable:
    def encode(self) -> bytes:
        return b"encoded"


class TestEncodeTransaction:
    def test_bytes_pass_through(self) -> None:
        assert encode_transaction(b"\x00\x01") == b"\x00\x01"

    def test_bytearray_pass_through(self) -> None:
        assert encode_transaction(bytearray(b"\x02")) == b"\x02"

    def test_serialize_method(self) -> None:
        assert encode_transaction(_Serializable()) == b"serialized"

    def test_encode_method(self) -> None:
        assert encode_transaction(_Encodable()) == b"encoded"

    def test_unknown_object_raises(self) -> None:
        with pytest.raises(TypeError, match="Cannot serialize"):
            encode_transaction(object())


def test_to_base64() -> None:
    assert to_base64(b"\x01\x02\x03") == "AQID"
