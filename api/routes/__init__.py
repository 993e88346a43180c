"""API route handlers."""

from api.routes import health, checksum, digest

__all__ = ["health", "checksum", "digest"]
