"""NEAR and Aurora plugins."""
from .aurora import AuroraPlugin
from .base import PluginBase
from .eth import EthPlugin
from .near import NearPlugin

__all__ = ["AuroraPlugin", "EthPlugin", "NearPlugin", "PluginBase"]
