"""
Schemas
File: __init__.py

Purpose: Export the error taxonomy shared by the digest utilities,
the HTTP API and the CLI.
"""

from .errors import (
    AlgorithmUnavailableException,
    DigestError,
    DigestException,
    ErrorCodes,
    InvalidArgumentException,
    InvalidInputException,
)

__all__ = [
    "ErrorCodes",
    "DigestError",
    "DigestException",
    "InvalidInputException",
    "InvalidArgumentException",
    "AlgorithmUnavailableException",
]
