"""
FastAPI Application

Main application setup and configuration.

Usage:
    uvicorn api.app:app --reload

    # Or run directly
    python -m api.app
"""

from __future__ import annotations

import logging
import sys

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api import __version__
from api.routes import health, checksum, digest
from api.errors import (
    APIError,
    api_error_handler,
    digest_error_handler,
    generic_error_handler,
)
from api.security import SecurityHeadersMiddleware
from core.config.runtime import RuntimeConfig, get_default_config
from core.schemas.errors import DigestException


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """Configure root logging once; respects SSLSERVER_LOG_LEVEL via config."""
    log_level = getattr(logging, (level or "INFO").upper(), logging.INFO)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        handlers=handlers,
    )


def create_app(config: RuntimeConfig | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    config = config or get_default_config()

    app = FastAPI(
        title="SSL Server Checksum API",
        description="""
HTTP API computing checksums and digests of a text value.

## Endpoints

- **GET /checksum?text=...** - CRC32 checksum as lowercase hex
- **GET /hash?text=...** - SHA-256 digest as lowercase hex
- **GET /health** - Health check

Both data endpoints return plain text of the form
`Data: {data} | Checksum: {hex}` / `Data: {data} | Hash: {hex}` and fall
back to the sample string `Hello World Check Sum!` when `text` is
absent or empty.
        """,
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.state.config = config

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.security.cors_origins,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    if config.security.headers_enabled:
        app.add_middleware(SecurityHeadersMiddleware, config=config.security)

    # Register exception handlers
    app.add_exception_handler(APIError, api_error_handler)
    app.add_exception_handler(DigestException, digest_error_handler)
    app.add_exception_handler(Exception, generic_error_handler)

    # Include routers
    app.include_router(health.router)
    app.include_router(checksum.router)
    app.include_router(digest.router)

    logger.info(
        f"Created app (security_headers={config.security.headers_enabled}, "
        f"cors_origins={config.security.cors_origins})"
    )

    return app


_config = get_default_config()
configure_logging(_config.log_level, _config.log_file)

# Create the application instance
app = create_app(_config)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        app,
        host=_config.server.host,
        port=_config.server.port,
        ssl_certfile=_config.server.ssl_certfile,
        ssl_keyfile=_config.server.ssl_keyfile,
        ssl_keyfile_password=_config.server.ssl_keyfile_password,
    )
