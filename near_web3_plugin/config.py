"""Configuration loader: reads config.yaml, interpolates env vars, validates."""
from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Well-known endpoints
# ---------------------------------------------------------------------------

NETWORKS: dict[str, str] = {
    "mainnet": "https://rpc.mainnet.near.org",
    "testnet": "https://rpc.testnet.near.org",
    "betanet": "https://rpc.betanet.near.org",
    "localnet": "http://localhost:3030",
    "archival-mainnet": "https://archival-rpc.mainnet.near.org",
    "archival-testnet": "https://archival-rpc.testnet.near.org",
    "aurora-mainnet": "https://mainnet.aurora.dev",
    "aurora-testnet": "https://testnet.aurora.dev",
}

# ---------------------------------------------------------------------------
# Frozen config dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ProviderConfig:
    rpc_url: str = NETWORKS["mainnet"]
    rpc_timeout: int = 30


@dataclass(frozen=True)
class AppConfig:
    near: ProviderConfig = field(default_factory=ProviderConfig)
    aurora: ProviderConfig = field(
        default_factory=lambda: ProviderConfig(rpc_url=NETWORKS["aurora-mainnet"])
    )


# ---------------------------------------------------------------------------
# Env interpolation
# ---------------------------------------------------------------------------

_ENV_VAR_RE = re.compile(r"\$\{([^}]+)}")


def _interpolate_env(value: Any) -> Any:
    """Recursively replace ${VAR} references with environment variable values."""
    if isinstance(value, str):
        return _ENV_VAR_RE.sub(lambda m: os.environ.get(m.group(1), ""), value)
    if isinstance(value, dict):
        return {k: _interpolate_env(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_interpolate_env(item) for item in value]
    return value


# ---------------------------------------------------------------------------
# YAML → dataclass builders
# ---------------------------------------------------------------------------


def resolve_rpc_url(value: str) -> str:
    """Map a network name (``testnet``, ``localnet``...) to its URL."""
    return NETWORKS.get(value, value)


def _build_provider(raw: dict[str, Any], default: ProviderConfig) -> ProviderConfig:
    rpc_url = raw.get("rpc_url")
    if rpc_url is None and "network" in raw:
        rpc_url = raw["network"]
    return ProviderConfig(
        rpc_url=resolve_rpc_url(rpc_url) if rpc_url is not None else default.rpc_url,
        rpc_timeout=int(raw.get("rpc_timeout", default.rpc_timeout)),
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def load_config(config_path: str | Path | None = None) -> AppConfig:
    """Load and validate provider configuration from YAML + .env.

    Args:
        config_path: Path to config.yaml. Defaults to ``config.yaml`` in the
            project root (two levels up from this file).
    """
    load_dotenv()

    if config_path is None:
        config_path = Path(__file__).resolve().parent.parent / "config.yaml"
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path) as f:
        raw = yaml.safe_load(f) or {}

    raw = _interpolate_env(raw)

    defaults = AppConfig()
    cfg = AppConfig(
        near=_build_provider(raw.get("near") or {}, defaults.near),
        aurora=_build_provider(raw.get("aurora") or {}, defaults.aurora),
    )

    _validate(cfg)
    logger.info("Configuration loaded from %s", config_path)
    return cfg


def _validate(cfg: AppConfig) -> None:
    """Raise on invalid configuration."""
    for name, provider in (("near", cfg.near), ("aurora", cfg.aurora)):
        if not provider.rpc_url:
            raise ValueError(f"Provider '{name}' has no rpc_url")
        if provider.rpc_timeout <= 0:
            raise ValueError(
                f"Provider '{name}' has a non-positive rpc_timeout "
                f"({provider.rpc_timeout})"
            )
