"""
Hash Route

SHA-256 digest of the supplied text (or the default sample string).
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from api.deps import get_text
from core.crypto.hashing import sha256_hex
from core.schemas.errors import AlgorithmUnavailableException


logger = logging.getLogger(__name__)

router = APIRouter(tags=["hash"])

# Body returned when the runtime cannot produce the digest
HASH_ERROR_BODY = "Error generating checksum"


def format_hash(data: str) -> str:
    """Render the response body for ``data``."""
    return f"Data: {data} | Hash: {sha256_hex(data)}"


@router.get("/hash", response_class=PlainTextResponse)
def get_hash(data: str = Depends(get_text)) -> str:
    """
    Return ``Data: {data} | Hash: {sha256}``.

    If the digest algorithm is unavailable the body is a fixed error
    message; the status stays 200.
    """
    try:
        return format_hash(data)
    except AlgorithmUnavailableException as e:
        logger.error(f"Hash generation failed: {e.message}", exc_info=True)
        return HASH_ERROR_BODY
