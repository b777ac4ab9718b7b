"""Configuration management for llmprovider."""

from llmprovider.config.base import LoggingConfig, configure_logging
from llmprovider.config.provider import ProviderConfig
from llmprovider.config.system import SystemConfig

__all__ = [
    # Base configuration
    "LoggingConfig",
    "configure_logging",
    # Provider configuration
    "ProviderConfig",
    # System configuration
    "SystemConfig",
]
