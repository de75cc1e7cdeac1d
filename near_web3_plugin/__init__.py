"""web3-style NEAR Protocol and Aurora JSON-RPC plugins."""
from .client import Web3Client
from .exceptions import (
    JsonRpcError,
    NearPluginError,
    ProviderError,
    TypedError,
    UnsupportedOperationError,
)
from .models import AccessKeyWithPublicKey, BlockReference, ChangesType, Finality
from .plugins import AuroraPlugin, EthPlugin, NearPlugin, PluginBase
from .utils import base_decode, base_encode

__version__ = "0.1.0"

__all__ = [
    "AccessKeyWithPublicKey",
    "AuroraPlugin",
    "BlockReference",
    "ChangesType",
    "EthPlugin",
    "Finality",
    "JsonRpcError",
    "NearPlugin",
    "NearPluginError",
    "PluginBase",
    "ProviderError",
    "TypedError",
    "UnsupportedOperationError",
    "Web3Client",
    "base_decode",
    "base_encode",
]
