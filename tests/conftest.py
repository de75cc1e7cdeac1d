"""Shared test fixtures and sample node responses."""
from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock

import pytest

from near_web3_plugin.config import ProviderConfig
from near_web3_plugin.plugins import AuroraPlugin, NearPlugin


# ---------------------------------------------------------------------------
# Request manager fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def request_manager() -> AsyncMock:
    """Stand-in transport; set ``send.return_value`` per test."""
    manager = AsyncMock()
    manager.send = AsyncMock(return_value={})
    return manager


@pytest.fixture()
def near(request_manager: AsyncMock) -> NearPlugin:
    return NearPlugin(request_manager)


@pytest.fixture()
def aurora(request_manager: AsyncMock) -> AuroraPlugin:
    return AuroraPlugin(request_manager)


@pytest.fixture()
def sample_provider_config() -> ProviderConfig:
    return ProviderConfig(rpc_url="https://rpc.example.com", rpc_timeout=5)


# ---------------------------------------------------------------------------
# Sample node responses
# ---------------------------------------------------------------------------


@pytest.fixture()
def sample_sync_info() -> dict[str, Any]:
    return {
        "earliest_block_hash": "8snisqbicmC4JKp9tMTzXH5xwFJCKFxKZMv7uowBVZRA",
        "earliest_block_height": 0,
        "epoch_id": "9HxhRsYmbabnk1T7ANvKhicggzn5jfm1rVyfEEVDqoFN",
        "epoch_start_height": 9501,
        "latest_block_hash": "B775wfpR6zzYWG1HKJs3GNw73ZjodtdBi6XcvzREZu65",
        "latest_block_height": 9998,
        "latest_block_time": "2023-11-08T09:17:26.990259717Z",
        "latest_state_root": "4aDwnhjSqLnsM5JLXHgCx3iehfinTBR5yRBQ5rS8CBv1",
        "syncing": False,
    }


@pytest.fixture()
def sample_status(sample_sync_info: dict[str, Any]) -> dict[str, Any]:
    return {
        "chain_id": "localnet",
        "protocol_version": 63,
        "latest_protocol_version": 63,
        "sync_info": sample_sync_info,
        "validators": [{"account_id": "a.near"}, "b.near"],
        "version": {"version": "1.36.0", "build": "crates-0.17.0"},
    }


@pytest.fixture()
def sample_block() -> dict[str, Any]:
    return {
        "author": "test.near",
        "chunks": [],
        "header": {
            "height": 9998,
            "hash": "B775wfpR6zzYWG1HKJs3GNw73ZjodtdBi6XcvzREZu65",
            "gas_price": "100000000",
        },
    }


@pytest.fixture()
def sample_account_view() -> dict[str, Any]:
    return {
        "amount": "1000000000000000000000000000000000",
        "locked": "0",
        "code_hash": "11111111111111111111111111111111",
        "storage_usage": 182,
        "block_height": 0,
        "block_hash": "8snisqbicmC4JKp9tMTzXH5xwFJCKFxKZMv7uowBVZRA",
    }


# ---------------------------------------------------------------------------
# Config YAML fixture
# ---------------------------------------------------------------------------

SAMPLE_YAML = textwrap.dedent("""\
    near:
      rpc_url: "https://near.example.com"
      rpc_timeout: 10
    aurora:
      network: aurora-testnet
      rpc_timeout: 20
""")


@pytest.fixture()
def sample_yaml_path(tmp_path: Path) -> Path:
    cfg_file = tmp_path / "config.yaml"
    cfg_file.write_text(SAMPLE_YAML)
    return cfg_file
