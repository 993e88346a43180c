"""
CLI Serve Command

Run the HTTP API with uvicorn, over TLS when a certificate and key
are configured.

Usage:
    sslserver serve [--host HOST] [--port PORT] [--certfile PEM --keyfile PEM]
"""

from __future__ import annotations

import copy
import logging
from argparse import Namespace

import uvicorn

from core.config.runtime import RuntimeConfig


logger = logging.getLogger(__name__)


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1


def apply_cli_overrides(config: RuntimeConfig, args: Namespace) -> RuntimeConfig:
    """Return a copy of ``config`` with the serve flags applied."""
    config = copy.deepcopy(config)
    if args.host:
        config.server.host = args.host
    if args.port:
        config.server.port = args.port
    if args.certfile:
        config.server.ssl_certfile = args.certfile
    if args.keyfile:
        config.server.ssl_keyfile = args.keyfile
    return config


def serve_cmd(args: Namespace) -> int:
    """Handle serve command."""
    from api.app import create_app

    config = apply_cli_overrides(args.runtime_config, args)
    server = config.server

    if bool(server.ssl_certfile) != bool(server.ssl_keyfile):
        logger.error("TLS needs both a certificate file and a key file")
        return EXIT_RUNTIME_ERROR

    scheme = "https" if server.tls_enabled else "http"
    logger.info(f"Serving on {scheme}://{server.host}:{server.port}")
    if not server.tls_enabled:
        logger.warning("TLS is not configured; serving plain HTTP")

    uvicorn.run(
        create_app(config),
        host=server.host,
        port=server.port,
        ssl_certfile=server.ssl_certfile,
        ssl_keyfile=server.ssl_keyfile,
        ssl_keyfile_password=server.ssl_keyfile_password,
        log_level=config.log_level.lower(),
    )
    return EXIT_SUCCESS
