"""
Hashing Utilities
SHA-256 digests, CRC32 checksums and salt generation.

This module provides:
- SHA-256 hashing of text or raw bytes, rendered as lowercase hex
- Verification of an input against an expected SHA-256 hex digest
- Cryptographically secure salt generation
- CRC32 checksums for non-cryptographic integrity checks

Security/Determinism Notes:
- Text is always encoded as UTF-8 before hashing
- No normalization of input or of expected digests (comparison is exact)
- All functions are pure apart from reading the OS random source for salts
"""
from __future__ import annotations

import hashlib
import hmac
import secrets
import zlib
from typing import Union

from core.schemas.errors import (
    AlgorithmUnavailableException,
    InvalidArgumentException,
    InvalidInputException,
)


DIGEST_ALGORITHM = "sha256"
SHA256_HEX_LENGTH = 64

HashInput = Union[str, bytes, bytearray, memoryview]


def to_bytes(data: HashInput) -> bytes:
    """
    Normalize hash input to raw bytes.

    Args:
        data: Text (encoded as UTF-8) or a bytes-like object

    Returns:
        Raw bytes

    Raises:
        InvalidInputException: If data is None or not text/bytes
    """
    if data is None:
        raise InvalidInputException("Input cannot be None")
    if isinstance(data, str):
        return data.encode("utf-8")
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    raise InvalidInputException(
        f"Input must be str or bytes, got {type(data).__name__}",
        details={"type": type(data).__name__},
    )


def _new_digest(algorithm: str):
    try:
        return hashlib.new(algorithm)
    except ValueError as e:
        raise AlgorithmUnavailableException(algorithm) from e


def sha256_hex(data: HashInput) -> str:
    """
    Compute the SHA-256 digest of text or bytes as lowercase hex.

    Args:
        data: Text (UTF-8 encoded before hashing) or raw bytes

    Returns:
        64-character lowercase hex digest

    Raises:
        InvalidInputException: If data is None
        AlgorithmUnavailableException: If the runtime has no SHA-256

    Example:
        >>> sha256_hex("abc")
        'ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad'
    """
    raw = to_bytes(data)
    digest = _new_digest(DIGEST_ALGORITHM)
    digest.update(raw)
    return digest.hexdigest()


def verify(data: HashInput | None, expected_hash: str | None) -> bool:
    """
    Check whether data hashes to the expected SHA-256 hex digest.

    The comparison is exact and case-sensitive. Absent or unusable
    arguments yield False instead of raising.

    Args:
        data: Text or bytes to hash
        expected_hash: Expected lowercase hex digest

    Returns:
        True if sha256_hex(data) == expected_hash
    """
    if data is None or expected_hash is None:
        return False
    try:
        actual = sha256_hex(data)
    except InvalidInputException:
        return False
    return hmac.compare_digest(actual.encode("utf-8"), expected_hash.encode("utf-8"))


def generate_salt(length: int) -> str:
    """
    Generate a random salt from the OS CSPRNG.

    Args:
        length: Number of random bytes (must be > 0)

    Returns:
        Hex string of exactly 2 * length characters

    Raises:
        InvalidArgumentException: If length is not a positive integer
    """
    if isinstance(length, bool) or not isinstance(length, int):
        raise InvalidArgumentException(
            f"Salt length must be an integer, got {type(length).__name__}",
            argument="length",
        )
    if length <= 0:
        raise InvalidArgumentException(
            f"Salt length must be positive, got {length}",
            argument="length",
        )
    return secrets.token_hex(length)


def hash_with_salt(data: HashInput, salt: str) -> str:
    """
    Hash data with a hex salt appended.

    Rule: sha256_hex(data + salt), with bytes input extended by the
    UTF-8 bytes of the salt.
    """
    if salt is None:
        raise InvalidInputException("Salt cannot be None")
    return sha256_hex(to_bytes(data) + salt.encode("utf-8"))


def crc32_hex(data: HashInput) -> str:
    """
    Compute the CRC32 checksum of text or bytes as lowercase hex.

    The value is rendered without zero padding, so the result is between
    1 and 8 characters long.

    Example:
        >>> crc32_hex("abc")
        '352441c2'
    """
    return format(zlib.crc32(to_bytes(data)) & 0xFFFFFFFF, "x")


__all__ = [
    "DIGEST_ALGORITHM",
    "SHA256_HEX_LENGTH",
    "to_bytes",
    "sha256_hex",
    "verify",
    "generate_salt",
    "hash_with_salt",
    "crc32_hex",
]
