"""Unsigned LEB128 variable-length integers."""

from __future__ import annotations

from ..errors import OutOfSpecError

_U64_MAX = (1 << 64) - 1


def decode(values: bytes) -> tuple[int, int]:
    """Decode a ULEB128 value, returning ``(value, bytes_consumed)``."""
    result = 0
    shift = 0
    consumed = 0
    for byte in values:
        consumed += 1
        if shift == 63 and byte > 1:
            raise OutOfSpecError("ULEB128 value does not fit in 64 bits")
        result |= (byte & 0x7F) << shift
        if not byte & 0x80:
            break
        shift += 7
    return result, consumed


def encode(value: int) -> bytes:
    """Encode an unsigned 64-bit integer as ULEB128 (at most 10 bytes)."""
    if not 0 <= value <= _U64_MAX:
        raise ValueError(f"value {value} is not an unsigned 64-bit integer")
    out = bytearray()
    while True:
        byte = value & 0x7F
        value >>= 7
        if value:
            out.append(byte | 0x80)
        else:
            out.append(byte)
            return bytes(out)