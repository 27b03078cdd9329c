"""Zig-zag encoded signed LEB128 integers."""

from __future__ import annotations

from . import uleb128

_MASK64 = (1 << 64) - 1
_I64_MIN = -(1 << 63)
_I64_MAX = (1 << 63) - 1


def decode(values: bytes) -> tuple[int, int]:
    """Decode a zig-zag LEB128 value, returning ``(value, bytes_consumed)``."""
    unsigned, consumed = uleb128.decode(values)
    return (unsigned >> 1) ^ -(unsigned & 1), consumed


def encode(value: int) -> bytes:
    """Encode a signed 64-bit integer as zig-zag LEB128."""
    if not _I64_MIN <= value <= _I64_MAX:
        raise ValueError(f"value {value} is not a signed 64-bit integer")
    return uleb128.encode(((value << 1) ^ (value >> 63)) & _MASK64)