"""Configuration management for torrentapi."""

from .manager import ConfigManager
from .schema import ClientConfig

__all__ = ["ConfigManager", "ClientConfig"]
