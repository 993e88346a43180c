"""
Core cryptographic utilities.

SHA-256 digests, CRC32 checksums, verification and salt generation.
"""
from .hashing import (
    DIGEST_ALGORITHM,
    SHA256_HEX_LENGTH,
    crc32_hex,
    generate_salt,
    hash_with_salt,
    sha256_hex,
    to_bytes,
    verify,
)

__all__ = [
    "DIGEST_ALGORITHM",
    "SHA256_HEX_LENGTH",
    "crc32_hex",
    "generate_salt",
    "hash_with_salt",
    "sha256_hex",
    "to_bytes",
    "verify",
]
