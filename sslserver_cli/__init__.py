"""
SSL Server CLI

Command-line interface for the checksum service.

Usage:
    python -m sslserver_cli serve --port 8443
    python -m sslserver_cli hash "some text"
    python -m sslserver_cli verify "some text" <sha256-hex>
    python -m sslserver_cli salt --length 16
    python -m sslserver_cli checksum "some text"
"""

__version__ = "0.1.0"
