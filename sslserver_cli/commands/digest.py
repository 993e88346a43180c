"""
CLI Digest Commands

Offline access to the digest utilities:
- hash: SHA-256 of a text value, optionally salted
- verify: compare a text value against an expected SHA-256 digest
- salt: generate a random hex salt
- checksum: CRC32 of a text value

Usage:
    sslserver hash "<text>" [--salt-length N] [--json]
    sslserver verify "<text>" <expected> [--json]
    sslserver salt [--length N] [--json]
    sslserver checksum "<text>" [--json]
"""

from __future__ import annotations

import json
import logging
import sys
from argparse import Namespace
from dataclasses import dataclass, asdict
from typing import Any

from core.crypto.hashing import (
    SHA256_HEX_LENGTH,
    crc32_hex,
    generate_salt,
    hash_with_salt,
    sha256_hex,
    verify,
)
from core.schemas.errors import DigestException


logger = logging.getLogger(__name__)


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1
EXIT_VERIFICATION_FAILED = 2


@dataclass
class DigestSummary:
    """Result of a digest command for CLI output."""
    input: str = ""
    algorithm: str = "sha256"
    value: str = ""
    salt: str | None = None
    valid: bool | None = None

    def to_dict(self) -> dict[str, Any]:
        d = asdict(self)
        if d["salt"] is None:
            del d["salt"]
        if d["valid"] is None:
            del d["valid"]
        return d


def print_summary(summary: DigestSummary, as_json: bool) -> None:
    """Print a summary as JSON or as human-readable lines."""
    if as_json:
        print(json.dumps(summary.to_dict(), indent=2))
        return

    print(f"input: {summary.input}")
    print(f"{summary.algorithm}: {summary.value}")
    if summary.algorithm == "sha256" and summary.value:
        print(f"length: {len(summary.value)} characters")
    if summary.salt is not None:
        print(f"salt: {summary.salt}")
    if summary.valid is not None:
        print(f"verification: {'PASS' if summary.valid else 'FAIL'}")


def _print_error(exc: DigestException, as_json: bool) -> None:
    if as_json:
        print(json.dumps(exc.to_error_model().model_dump(), indent=2))
    else:
        print(f"Error: {exc.message}", file=sys.stderr)


def hash_cmd(args: Namespace) -> int:
    """Handle hash command."""
    try:
        if args.salt_length:
            salt = generate_salt(args.salt_length)
            value = hash_with_salt(args.text, salt)
        else:
            salt = None
            value = sha256_hex(args.text)
    except DigestException as e:
        logger.error(f"Hashing failed: {e.message}")
        _print_error(e, args.json)
        return EXIT_RUNTIME_ERROR

    print_summary(DigestSummary(input=args.text, value=value, salt=salt), args.json)
    return EXIT_SUCCESS


def verify_cmd(args: Namespace) -> int:
    """Handle verify command."""
    if len(args.expected) != SHA256_HEX_LENGTH:
        logger.warning(
            f"Expected digest has {len(args.expected)} characters, "
            f"a SHA-256 hex digest has {SHA256_HEX_LENGTH}"
        )

    ok = verify(args.text, args.expected)
    summary = DigestSummary(input=args.text, value=args.expected, valid=ok)
    print_summary(summary, args.json)
    return EXIT_SUCCESS if ok else EXIT_VERIFICATION_FAILED


def salt_cmd(args: Namespace) -> int:
    """Handle salt command."""
    try:
        salt = generate_salt(args.length)
    except DigestException as e:
        _print_error(e, args.json)
        return EXIT_RUNTIME_ERROR

    if args.json:
        print(json.dumps({"length": args.length, "salt": salt}, indent=2))
    else:
        print(salt)
    return EXIT_SUCCESS


def checksum_cmd(args: Namespace) -> int:
    """Handle checksum command."""
    summary = DigestSummary(input=args.text, algorithm="crc32", value=crc32_hex(args.text))
    print_summary(summary, args.json)
    return EXIT_SUCCESS
