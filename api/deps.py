"""
API Dependencies

Dependency injection for the API.
Provides the shared ``text`` query parameter handling for the
checksum and hash routes.
"""

from __future__ import annotations

from typing import Optional

from fastapi import Query


# Data used when the caller supplies no text (or an empty one)
DEFAULT_TEXT = "Hello World Check Sum!"


def resolve_text(text: Optional[str]) -> str:
    """Return ``text`` unless it is None or empty, else DEFAULT_TEXT."""
    return text if text else DEFAULT_TEXT


def get_text(
    text: Optional[str] = Query(
        default=None,
        description="Text to process; defaults to the service's sample string",
    ),
) -> str:
    """Resolve the optional ``text`` query parameter to the data to process."""
    return resolve_text(text)
