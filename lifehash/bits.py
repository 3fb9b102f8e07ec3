"""Packing bits into bytes and reading them back out."""

from __future__ import annotations

from collections.abc import Iterator


class BitAggregator:
    """Accumulates bits, most significant first, into a block of bytes."""

    def __init__(self) -> None:
        self._data = bytearray()
        self._mask = 0

    def append(self, bit: bool) -> None:
        if self._mask == 0:
            self._mask = 0x80
            self._data.append(0)
        if bit:
            self._data[-1] |= self._mask
        self._mask >>= 1

    def data(self) -> bytes:
        return bytes(self._data)


class BitEnumerator:
    """Reads the bits of a block of bytes, singly or in clusters."""

    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)
        self._index = 0
        self._mask = 0x80

    def has_next(self) -> bool:
        if not self._data:
            return False
        return self._mask != 0 or self._index != len(self._data) - 1

    def next(self) -> bool:
        if not self.has_next():
            raise ValueError("BitEnumerator underflow.")
        if self._mask == 0:
            self._mask = 0x80
            self._index += 1
        bit = (self._data[self._index] & self._mask) != 0
        self._mask >>= 1
        return bit

    def _next_uint(self, width: int) -> int:
        value = 0
        for _ in range(width):
            value = (value << 1) | int(self.next())
        return value

    def next_uint2(self) -> int:
        return self._next_uint(2)

    def next_uint8(self) -> int:
        return self._next_uint(8)

    def next_uint16(self) -> int:
        return self._next_uint(16)

    def next_frac(self) -> float:
        return self.next_uint16() / 65535.0

    def __iter__(self) -> Iterator[bool]:
        while self.has_next():
            yield self.next()