"""Bitmaps stored least-significant bit first."""

from __future__ import annotations

from collections.abc import Iterable


def set_bit(byte: int, i: int) -> int:
    """Return ``byte`` with bit ``i`` set."""
    if not 0 <= i < 8:
        raise ValueError(f"bit index must be between 0 and 7, got {i}")
    return byte | (1 << i)


class BitmapIter:
    """Iterator over ``length`` bits of ``data`` starting at bit ``offset``."""

    def __init__(self, data: bytes, offset: int, length: int) -> None:
        start = offset // 8
        if start > len(data):
            raise ValueError(
                f"offset {offset} is beyond the end of a {len(data)}-byte bitmap"
            )
        self._bytes = iter(bytes(data[start:]))
        self._current = next(self._bytes, 0)
        self._mask = 1 << (offset % 8)
        self._length = length
        self._index = 0
        self._done = False

    def __iter__(self) -> BitmapIter:
        return self

    def __next__(self) -> bool:
        if self._done or self._index == self._length:
            raise StopIteration
        self._index += 1
        value = bool(self._current & self._mask)
        self._mask = ((self._mask << 1) | (self._mask >> 7)) & 0xFF
        if self._mask == 1:
            following = next(self._bytes, None)
            if following is None:
                self._done = True
                raise StopIteration
            self._current = following
        return value

    def __length_hint__(self) -> int:
        return self._length - self._index


def encode_bool(values: Iterable[bool]) -> bytes:
    """Pack booleans into bytes, least-significant bit first."""
    out = bytearray()
    for position, value in enumerate(values):
        bit = position % 8
        if bit == 0:
            out.append(0)
        if value:
            out[-1] = set_bit(out[-1], bit)
    return bytes(out)