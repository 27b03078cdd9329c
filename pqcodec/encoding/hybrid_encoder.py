"""Writers of RLE/bit-packing hybrid data.

Only bit-packed runs are produced: a ULEB128 header holding the number of
8-value groups, followed by the packed values.
"""

from __future__ import annotations

from collections.abc import Iterable

from . import bitmap, bitpacking, uleb128
from .util import ceil8


def _bitpacked_header(length: int) -> bytes:
    # The lowest bit set marks the run as bit-packed.
    return uleb128.encode((ceil8(length) << 1) | 1)


def encode_u32(values: Iterable[int], num_bits: int) -> bytes:
    """Encode unsigned integers as one bit-packed hybrid run."""
    values = list(values)
    out = bytearray(_bitpacked_header(len(values)))
    for start in range(0, len(values), bitpacking.BLOCK_LEN):
        chunk = values[start:start + bitpacking.BLOCK_LEN]
        used = len(chunk)
        chunk.extend([0] * (bitpacking.BLOCK_LEN - used))
        packed = bitpacking.encode_pack(chunk, num_bits)
        out += packed[: ceil8(used * num_bits)]
    return bytes(out)


def encode_bool(values: Iterable[bool]) -> bytes:
    """Encode booleans as one bit-packed hybrid run of bit width 1."""
    values = list(values)
    return _bitpacked_header(len(values)) + bitmap.encode_bool(values)