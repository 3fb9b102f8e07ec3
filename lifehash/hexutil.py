"""Hexadecimal and binary text conversions."""

from __future__ import annotations

from .bits import BitEnumerator

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def data_to_hex(data: bytes) -> str:
    """Return the lower-case hexadecimal form of ``data``."""
    return bytes(data).hex()


def hex_to_data(hex_string: str) -> bytes:
    """Decode a hexadecimal string; raises ValueError if it is invalid."""
    if len(hex_string) % 2 != 0:
        raise ValueError("Hex string must have even number of characters.")
    if any(ch not in _HEX_DIGITS for ch in hex_string):
        raise ValueError("Invalid hex digit")
    return bytes.fromhex(hex_string)


def to_data(utf8: str | bytes) -> bytes:
    """Return the UTF-8 bytes of a string (bytes pass through)."""
    if isinstance(utf8, str):
        return utf8.encode("utf-8")
    return bytes(utf8)


def to_binary(data: bytes) -> str:
    """Return ``data`` as a string of 1s and 0s."""
    return "".join("1" if bit else "0" for bit in BitEnumerator(data))