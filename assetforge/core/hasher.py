"""Content hashing for cache-busting filenames and canonical serialization.

The digest is a 64-bit non-cryptographic fingerprint rendered as exactly
8 lowercase base-36 characters. It depends only on the input bytes, so it
is stable across processes, platforms and locales.
"""

from __future__ import annotations

import hashlib
import json
from typing import Any

DIGEST_LENGTH = 8
_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"
_MODULUS = 36**DIGEST_LENGTH


def hash64(data: bytes) -> int:
    """Return an unsigned 64-bit hash of ``data`` (BLAKE2b, 8-byte digest)."""
    return int.from_bytes(hashlib.blake2b(data, digest_size=8).digest(), "big")


def to_base36(value: int, width: int = DIGEST_LENGTH) -> str:
    """Encode a non-negative integer as zero-padded base-36, ``width`` chars.

    Values that do not fit keep their low-order digits.
    """
    if value < 0:
        raise ValueError("base-36 encoding requires a non-negative integer")
    chars = []
    for _ in range(width):
        value, rem = divmod(value, 36)
        chars.append(_ALPHABET[rem])
    return "".join(reversed(chars))


def content_digest(data: bytes) -> str:
    """Return the 8-character base-36 content digest of ``data``."""
    return to_base36(hash64(data) % _MODULUS)


def canonical_json_bytes(obj: Any) -> bytes:
    """Produce canonical JSON bytes: sorted keys, compact, ASCII, UTF-8."""
    return json.dumps(
        obj, sort_keys=True, separators=(",", ":"), ensure_ascii=True
    ).encode("utf-8")
