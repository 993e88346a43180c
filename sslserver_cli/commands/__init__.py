"""
CLI command modules.
"""

from sslserver_cli.commands import digest, serve

__all__ = ["digest", "serve"]
