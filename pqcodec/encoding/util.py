"""Small helpers shared by the encoders and decoders."""

from __future__ import annotations

from ..errors import OutOfSpecError


def get_length(values: bytes) -> int:
    """Return the little-endian ``u32`` stored in the first four bytes."""
    if len(values) < 4:
        raise OutOfSpecError(
            f"expected at least 4 bytes for a length, got {len(values)}"
        )
    return int.from_bytes(values[:4], "little")


def ceil8(value: int) -> int:
    """Return ``value / 8`` rounded up."""
    return -(-value // 8)