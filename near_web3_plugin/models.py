"""Request-side data models: all frozen (immutable)."""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

BlockId = int | str


class Finality(str, Enum):
    """Consistency level requested for a block query."""

    OPTIMISTIC = "optimistic"
    NEAR_FINAL = "near-final"
    FINAL = "final"


class ChangesType(str, Enum):
    """``changes_type`` values accepted by ``EXPERIMENTAL_changes``."""

    ALL_ACCESS_KEY_CHANGES = "all_access_key_changes"
    SINGLE_ACCESS_KEY_CHANGES = "single_access_key_changes"
    ACCOUNT_CHANGES = "account_changes"
    DATA_CHANGES = "data_changes"
    CONTRACT_CODE_CHANGES = "contract_code_changes"


@dataclass(frozen=True)
class BlockReference:
    """Either a block id (height or hash) or a finality, never both."""

    block_id: BlockId | None = None
    finality: Finality | None = None

    def __post_init__(self) -> None:
        if (self.block_id is None) == (self.finality is None):
            raise ValueError(
                "BlockReference needs exactly one of block_id or finality"
            )
        if self.finality is not None and not isinstance(self.finality, Finality):
            object.__setattr__(self, "finality", Finality(self.finality))

    @classmethod
    def from_block_id(cls, block_id: BlockId) -> BlockReference:
        return cls(block_id=block_id)

    @classmethod
    def from_finality(cls, finality: Finality | str) -> BlockReference:
        return cls(finality=Finality(finality))

    @classmethod
    def coerce(cls, value: Any) -> BlockReference:
        """Build a reference from a mapping, a bare block id or an instance.

        Mappings may use ``blockId``, ``block_id`` or ``finality`` keys.
        """
        if isinstance(value, BlockReference):
            return value
        if isinstance(value, Mapping):
            block_id = value.get("block_id")
            if block_id is None:
                block_id = value.get("blockId")
            return cls(block_id=block_id, finality=value.get("finality"))
        if isinstance(value, (int, str)) and not isinstance(value, bool):
            return cls(block_id=value)
        raise TypeError(f"Cannot build a BlockReference from {value!r}")

    def to_params(self) -> dict[str, Any]:
        """Wire form: only the populated key is emitted."""
        if self.block_id is not None:
            return {"block_id": self.block_id}
        assert self.finality is not None
        return {"finality": self.finality.value}


@dataclass(frozen=True)
class AccessKeyWithPublicKey:
    """Access key identified by its owner account and public key."""

    account_id: str
    public_key: str

    def to_params(self) -> dict[str, str]:
        return {"account_id": self.account_id, "public_key": self.public_key}
