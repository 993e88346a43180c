"""
CLI Main Entry Point

Parses command-line arguments and dispatches to subcommands.

Usage:
    python -m sslserver_cli serve [--host HOST] [--port PORT] [--certfile PEM] [--keyfile PEM]
    python -m sslserver_cli hash "<text>" [--salt-length N] [--json]
    python -m sslserver_cli verify "<text>" <expected> [--json]
    python -m sslserver_cli salt [--length N] [--json]
    python -m sslserver_cli checksum "<text>" [--json]
    python -m sslserver_cli config --init

Environment Variables:
    SSLSERVER_HOST              Bind address (default: 0.0.0.0)
    SSLSERVER_PORT              Bind port (default: 8443)
    SSLSERVER_TLS_CERT_FILE     PEM certificate for TLS
    SSLSERVER_TLS_KEY_FILE      PEM private key for TLS
    SSLSERVER_LOG_LEVEL         Log level (default: INFO)
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
import traceback
from pathlib import Path
from typing import Sequence

from sslserver_cli import __version__
from sslserver_cli.commands import digest, serve
from core.config.runtime import (
    default_config_template,
    load_runtime_config,
)


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1
EXIT_VERIFICATION_FAILED = 2


def setup_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """Configure logging for the CLI."""
    log_level = getattr(logging, level.upper(), logging.INFO)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="sslserver",
        description="SSL Server CLI - Serve the checksum API and compute digests offline.",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        default=None,
        help="Path to configuration file (default: ./sslserver.json or ~/.config/sslserver/config.json)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (overrides config)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- serve command ---
    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the HTTP API",
        description="Serve /checksum and /hash with uvicorn, over TLS when configured.",
    )
    serve_parser.add_argument("--host", type=str, default=None, help="Bind address")
    serve_parser.add_argument("--port", type=int, default=None, help="Bind port")
    serve_parser.add_argument("--certfile", type=str, default=None, help="PEM certificate file")
    serve_parser.add_argument("--keyfile", type=str, default=None, help="PEM private key file")
    serve_parser.set_defaults(func=serve.serve_cmd)

    # --- hash command ---
    hash_parser = subparsers.add_parser(
        "hash",
        help="Compute the SHA-256 digest of a text value",
    )
    hash_parser.add_argument("text", type=str, help="Text to hash")
    hash_parser.add_argument(
        "--salt-length",
        type=int,
        default=0,
        help="Append a fresh random salt of N bytes before hashing",
    )
    hash_parser.add_argument("--json", action="store_true", help="JSON output")
    hash_parser.set_defaults(func=digest.hash_cmd)

    # --- verify command ---
    verify_parser = subparsers.add_parser(
        "verify",
        help="Check a text value against an expected SHA-256 digest",
    )
    verify_parser.add_argument("text", type=str, help="Text to verify")
    verify_parser.add_argument("expected", type=str, help="Expected lowercase hex digest")
    verify_parser.add_argument("--json", action="store_true", help="JSON output")
    verify_parser.set_defaults(func=digest.verify_cmd)

    # --- salt command ---
    salt_parser = subparsers.add_parser(
        "salt",
        help="Generate a random hex salt",
    )
    salt_parser.add_argument(
        "--length", "-n",
        type=int,
        default=16,
        help="Salt length in bytes (default: 16)",
    )
    salt_parser.add_argument("--json", action="store_true", help="JSON output")
    salt_parser.set_defaults(func=digest.salt_cmd)

    # --- checksum command ---
    checksum_parser = subparsers.add_parser(
        "checksum",
        help="Compute the CRC32 checksum of a text value",
    )
    checksum_parser.add_argument("text", type=str, help="Text to checksum")
    checksum_parser.add_argument("--json", action="store_true", help="JSON output")
    checksum_parser.set_defaults(func=digest.checksum_cmd)

    # --- config command ---
    config_parser = subparsers.add_parser(
        "config",
        help="Manage configuration",
        description="Initialize or display configuration.",
    )
    config_parser.add_argument(
        "--init",
        action="store_true",
        default=False,
        help="Create a template configuration file",
    )
    config_parser.add_argument(
        "--show",
        action="store_true",
        default=False,
        help="Show current configuration",
    )
    config_parser.add_argument(
        "--path",
        type=str,
        default="sslserver.json",
        help="Path for config file (default: sslserver.json)",
    )
    config_parser.set_defaults(func=config_cmd)

    return parser


def config_cmd(args: argparse.Namespace) -> int:
    """Handle config command."""
    if args.init:
        config_path = Path(args.path)
        if config_path.exists():
            print(f"Error: Config file already exists: {config_path}", file=sys.stderr)
            return EXIT_RUNTIME_ERROR

        config_path.write_text(default_config_template())
        print(f"Created configuration file: {config_path}")
        print("\nEdit this file to configure your settings.")
        print("You can also use environment variables (SSLSERVER_* prefix).")
        return EXIT_SUCCESS

    if args.show:
        print(json.dumps(args.runtime_config.to_dict(), indent=2))
        return EXIT_SUCCESS

    # Default: show help
    print("Usage: sslserver config [--init|--show]")
    print("  --init  Create a template configuration file")
    print("  --show  Show current configuration")
    return EXIT_SUCCESS


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return EXIT_RUNTIME_ERROR

    try:
        config = load_runtime_config(args.config)
    except Exception as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    setup_logging(args.log_level or config.log_level, config.log_file)
    if args.log_level:
        config.log_level = args.log_level
    args.runtime_config = config

    try:
        return args.func(args)
    except KeyboardInterrupt:
        print("\nInterrupted", file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    except Exception as e:
        logging.getLogger(__name__).debug(traceback.format_exc())
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR


if __name__ == "__main__":
    sys.exit(main())
