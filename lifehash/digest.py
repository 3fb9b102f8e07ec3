"""SHA-256 digests of byte blocks."""

from __future__ import annotations

import hashlib
from collections.abc import Iterable

DIGEST_LENGTH = 32


def sha256(data: bytes | bytearray | memoryview | Iterable[int]) -> bytes:
    """Return the 32-byte SHA-256 digest of ``data``.

    ``data`` may be any bytes-like object or an iterable of byte values.
    """
    if not isinstance(data, (bytes, bytearray, memoryview)):
        data = bytes(data)
    return hashlib.sha256(data).digest()