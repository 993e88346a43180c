"""
Runtime Configuration

Central configuration for the HTTP server, response hardening and logging.
"""

from __future__ import annotations

import copy
import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)


# Environment variable prefix
ENV_PREFIX = "SSLSERVER_"


@dataclass
class ServerConfig:
    """Configuration for the uvicorn server."""
    host: str = "0.0.0.0"
    port: int = 8443
    ssl_certfile: Optional[str] = None
    ssl_keyfile: Optional[str] = None
    ssl_keyfile_password: Optional[str] = None

    @property
    def tls_enabled(self) -> bool:
        return bool(self.ssl_certfile and self.ssl_keyfile)


@dataclass
class SecurityConfig:
    """Configuration for response hardening headers and CORS."""
    headers_enabled: bool = True
    hsts_max_age: int = 31536000
    content_security_policy: str = "default-src 'self'"
    cors_origins: list[str] = field(default_factory=lambda: ["*"])


@dataclass
class RuntimeConfig:
    """
    Complete runtime configuration for the checksum service.

    Can be loaded from:
    - Environment variables
    - JSON or YAML file
    - Programmatic construction
    """
    server: ServerConfig = field(default_factory=ServerConfig)
    security: SecurityConfig = field(default_factory=SecurityConfig)
    log_level: str = "INFO"
    log_file: Optional[str] = None
    extra: dict[str, Any] = field(default_factory=dict)

    @staticmethod
    def _get_env_overrides() -> dict[str, Any]:
        """
        Get configuration overrides from environment variables.

        Supported variables:
        - SSLSERVER_HOST / SSLSERVER_PORT: bind address
        - SSLSERVER_TLS_CERT_FILE / SSLSERVER_TLS_KEY_FILE: PEM files for TLS
        - SSLSERVER_TLS_KEY_PASSWORD: password for the key file
        - SSLSERVER_LOG_LEVEL / SSLSERVER_LOG_FILE: logging
        - SSLSERVER_SECURITY_HEADERS: enable hardening headers (true/false)
        - SSLSERVER_CORS_ORIGINS: comma-separated allowed origins
        """
        overrides: dict[str, Any] = {}

        # Server settings
        if os.getenv(f"{ENV_PREFIX}HOST"):
            overrides.setdefault("server", {})["host"] = os.getenv(f"{ENV_PREFIX}HOST")
        if os.getenv(f"{ENV_PREFIX}PORT"):
            overrides.setdefault("server", {})["port"] = int(os.getenv(f"{ENV_PREFIX}PORT", "8443"))
        if os.getenv(f"{ENV_PREFIX}TLS_CERT_FILE"):
            overrides.setdefault("server", {})["ssl_certfile"] = os.getenv(f"{ENV_PREFIX}TLS_CERT_FILE")
        if os.getenv(f"{ENV_PREFIX}TLS_KEY_FILE"):
            overrides.setdefault("server", {})["ssl_keyfile"] = os.getenv(f"{ENV_PREFIX}TLS_KEY_FILE")
        if os.getenv(f"{ENV_PREFIX}TLS_KEY_PASSWORD"):
            overrides.setdefault("server", {})["ssl_keyfile_password"] = os.getenv(
                f"{ENV_PREFIX}TLS_KEY_PASSWORD"
            )

        # Security settings
        if os.getenv(f"{ENV_PREFIX}SECURITY_HEADERS"):
            overrides.setdefault("security", {})["headers_enabled"] = (
                os.getenv(f"{ENV_PREFIX}SECURITY_HEADERS", "true").lower() == "true"
            )
        if os.getenv(f"{ENV_PREFIX}CORS_ORIGINS"):
            origins = os.getenv(f"{ENV_PREFIX}CORS_ORIGINS", "")
            overrides.setdefault("security", {})["cors_origins"] = [
                o.strip() for o in origins.split(",") if o.strip()
            ]

        # Logging
        if os.getenv(f"{ENV_PREFIX}LOG_LEVEL"):
            overrides["log_level"] = os.getenv(f"{ENV_PREFIX}LOG_LEVEL")
        if os.getenv(f"{ENV_PREFIX}LOG_FILE"):
            overrides["log_file"] = os.getenv(f"{ENV_PREFIX}LOG_FILE")

        return overrides

    @classmethod
    def from_env(cls) -> "RuntimeConfig":
        """
        Load configuration purely from environment variables.

        Uses defaults for any values not specified in env vars.
        """
        return cls.from_dict(cls._get_env_overrides())

    @classmethod
    def from_file(cls, path: str | Path) -> "RuntimeConfig":
        """Load configuration from a JSON file, or YAML for .yaml/.yml."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            if path.suffix in (".yaml", ".yml"):
                import yaml
                data = yaml.safe_load(f) or {}
            else:
                data = json.load(f)

        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RuntimeConfig":
        """Load configuration from a dictionary (supports partial data)."""
        server_data = data.get("server", {})
        security_data = data.get("security", {})

        server = ServerConfig(**server_data) if server_data else ServerConfig()
        security = SecurityConfig(**security_data) if security_data else SecurityConfig()

        return cls(
            server=server,
            security=security,
            log_level=data.get("log_level", "INFO"),
            log_file=data.get("log_file"),
            extra=data.get("extra", {}),
        )

    def with_env_overrides(self) -> "RuntimeConfig":
        """
        Return a new config with environment variable overrides applied.

        This allows loading from a config file first, then overlaying env vars.
        """
        overrides = self._get_env_overrides()
        if not overrides:
            return self

        new_config = copy.deepcopy(self)

        for key, value in overrides.get("server", {}).items():
            setattr(new_config.server, key, value)

        for key, value in overrides.get("security", {}).items():
            setattr(new_config.security, key, value)

        if "log_level" in overrides:
            new_config.log_level = overrides["log_level"]
        if "log_file" in overrides:
            new_config.log_file = overrides["log_file"]

        return new_config

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a dictionary (secrets omitted)."""
        return {
            "server": {
                "host": self.server.host,
                "port": self.server.port,
                "ssl_certfile": self.server.ssl_certfile,
                "ssl_keyfile": self.server.ssl_keyfile,
            },
            "security": {
                "headers_enabled": self.security.headers_enabled,
                "hsts_max_age": self.security.hsts_max_age,
                "content_security_policy": self.security.content_security_policy,
                "cors_origins": list(self.security.cors_origins),
            },
            "log_level": self.log_level,
            "log_file": self.log_file,
            "extra": self.extra,
        }


def default_config_paths() -> list[Path]:
    """Config file search order when no explicit path is given."""
    return [
        Path.cwd() / "sslserver.json",
        Path.cwd() / ".sslserver.json",
        Path.cwd() / "sslserver.yaml",
        Path.home() / ".config" / "sslserver" / "config.json",
    ]


def load_runtime_config(config_path: str | Path | None = None) -> RuntimeConfig:
    """Load RuntimeConfig from a config file, then overlay environment variables.

    An explicit ``config_path`` must exist and parse. Otherwise the first
    readable file from ``default_config_paths()`` is used; files that fail
    to parse are logged and skipped.

    Environment variables ALWAYS override config file values.
    """
    if config_path is not None:
        return RuntimeConfig.from_file(config_path).with_env_overrides()

    config: RuntimeConfig | None = None

    for path in default_config_paths():
        if path.exists():
            try:
                config = RuntimeConfig.from_file(path)
                logger.info(f"Loaded config from {path}")
                break
            except Exception as e:
                logger.warning(f"Failed to parse {path}: {e}")

    if config is None:
        # No config file found; start with defaults
        config = RuntimeConfig()

    return config.with_env_overrides()


def default_config_template() -> str:
    """Get a template configuration file."""
    return json.dumps(RuntimeConfig().to_dict(), indent=2) + "\n"


# Global default configuration
_default_config: Optional[RuntimeConfig] = None


def get_default_config() -> RuntimeConfig:
    """Get the default runtime configuration."""
    global _default_config
    if _default_config is None:
        _default_config = load_runtime_config()
    return _default_config


def set_default_config(config: RuntimeConfig | None) -> None:
    """Set (or reset with None) the default runtime configuration."""
    global _default_config
    _default_config = config
