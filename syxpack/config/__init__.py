"""Configuration and logging setup."""

from syxpack.config.logging import configure_logging
from syxpack.config.settings import SyxSettings

__all__ = ["configure_logging", "SyxSettings"]
