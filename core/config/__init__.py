"""
Runtime Configuration Module

Provides configuration loading and management for the checksum service.
"""

from .runtime import (
    RuntimeConfig,
    SecurityConfig,
    ServerConfig,
    default_config_template,
    get_default_config,
    load_runtime_config,
    set_default_config,
)

__all__ = [
    "RuntimeConfig",
    "SecurityConfig",
    "ServerConfig",
    "default_config_template",
    "get_default_config",
    "load_runtime_config",
    "set_default_config",
]
