"""
Checksum Route

CRC32 checksum of the supplied text (or the default sample string).
"""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from api.deps import get_text
from core.crypto.hashing import crc32_hex


router = APIRouter(tags=["checksum"])


def format_checksum(data: str) -> str:
    """Render the response body for ``data``."""
    return f"Data: {data} | Checksum: {crc32_hex(data)}"


@router.get("/checksum", response_class=PlainTextResponse)
def checksum(data: str = Depends(get_text)) -> str:
    """
    Return ``Data: {data} | Checksum: {crc32}``.

    ``text`` falls back to the default sample string when absent or empty.
    """
    return format_checksum(data)
