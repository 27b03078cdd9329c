"""The ``DELTA_BINARY_PACKED`` encoding of 64-bit integers."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import pairwise

from ..errors import OutOfSpecError
from . import bitpacking, uleb128, zigzag_leb128
from .util import ceil8

_BLOCK_SIZE = 128
_MINI_BLOCKS = 1
_MAX_BIT_WIDTH = 32


def _wrap_i64(value: int) -> int:
    return ((value + (1 << 63)) % (1 << 64)) - (1 << 63)


class _Block:
    """Iterator over the deltas stored in one block."""

    def __init__(
        self,
        values: bytes,
        num_mini_blocks: int,
        values_per_mini_block: int,
        length: int,
    ) -> None:
        self._values = values
        self._values_per_mini_block = values_per_mini_block
        self._remaining = min(length, num_mini_blocks * values_per_mini_block)

        self.min_delta, consumed = zigzag_leb128.decode(values)
        bitwidths = values[consumed:consumed + num_mini_blocks]
        if len(bitwidths) < num_mini_blocks:
            raise OutOfSpecError(
                f"block needs {num_mini_blocks} bit widths "
                f"but only {len(bitwidths)} bytes remain"
            )
        self._bitwidths = iter(bitwidths)
        # Bytes of this block consumed so far, counted from its start.
        self.consumed_bytes = consumed + num_mini_blocks
        self._index = 0
        self._miniblock: bitpacking.Decoder | None = None
        self._advance_miniblock()

    def _advance_miniblock(self) -> None:
        num_bits = next(self._bitwidths, None)
        if num_bits is None:
            raise OutOfSpecError("block has no mini-block left")
        if num_bits > 0:
            length = min(self._remaining, self._values_per_mini_block)
            size = ceil8(self._values_per_mini_block * num_bits)
            start = self.consumed_bytes
            if start + size > len(self._values):
                raise OutOfSpecError(
                    f"mini-block needs {size} bytes "
                    f"but only {len(self._values) - start} remain"
                )
            self._miniblock = bitpacking.Decoder(
                self._values[start:start + size], num_bits, length
            )
            self.consumed_bytes += size
        else:
            self._miniblock = None
        self._index = 0

    def __iter__(self) -> _Block:
        return self

    def __next__(self) -> int:
        if self._remaining == 0:
            raise StopIteration
        offset = next(self._miniblock) if self._miniblock is not None else 0
        self._index += 1
        self._remaining -= 1
        if self._remaining > 0 and self._index == self._values_per_mini_block:
            self._advance_miniblock()
        return self.min_delta + offset


class Decoder:
    """Iterator over the integers of a ``DELTA_BINARY_PACKED`` buffer."""

    def __init__(self, values: bytes) -> None:
        data = bytes(values)
        self._data = data

        block_size, offset = uleb128.decode(data)
        if block_size % 128:
            raise OutOfSpecError(
                f"block size must be a multiple of 128, got {block_size}"
            )
        num_mini_blocks, consumed = uleb128.decode(data[offset:])
        offset += consumed
        if num_mini_blocks == 0:
            raise OutOfSpecError("number of mini-blocks must be positive")
        total_count, consumed = uleb128.decode(data[offset:])
        offset += consumed
        first_value, consumed = zigzag_leb128.decode(data[offset:])
        offset += consumed

        values_per_mini_block = block_size // num_mini_blocks
        if values_per_mini_block % 8:
            raise OutOfSpecError(
                "values per mini-block must be a multiple of 8, "
                f"got {values_per_mini_block}"
            )

        self._num_mini_blocks = num_mini_blocks
        self._values_per_mini_block = values_per_mini_block
        self._values_remaining = total_count
        self._next_value = first_value
        # Bytes consumed before the current block.
        self._consumed = offset
        self._block: _Block | None = None
        if total_count > 1:
            self._block = _Block(
                data[offset:], num_mini_blocks, values_per_mini_block, total_count - 1
            )

    def consumed_bytes(self) -> int:
        """Return the number of bytes consumed so far."""
        block = self._block.consumed_bytes if self._block is not None else 0
        return self._consumed + block

    def __iter__(self) -> Decoder:
        return self

    def __next__(self) -> int:
        if self._values_remaining == 0:
            raise StopIteration
        result = self._next_value
        self._values_remaining -= 1
        if self._values_remaining == 0:
            return result

        delta = next(self._block, None)
        if delta is None:
            self._consumed += self._block.consumed_bytes
            self._block = _Block(
                self._data[self._consumed:],
                self._num_mini_blocks,
                self._values_per_mini_block,
                self._values_remaining,
            )
            delta = next(self._block, None)
            if delta is None:
                raise OutOfSpecError("block holds no values")

        self._next_value = _wrap_i64(self._next_value + delta)
        return result

    def __length_hint__(self) -> int:
        return self._values_remaining


def encode(values: Iterable[int]) -> bytes:
    """Encode integers as ``DELTA_BINARY_PACKED`` with one mini-block per block."""
    values = list(values)
    if not values:
        raise ValueError("cannot encode an empty sequence")

    out = bytearray()
    out += uleb128.encode(_BLOCK_SIZE)
    out += uleb128.encode(_MINI_BLOCKS)
    out += uleb128.encode(len(values))
    out += zigzag_leb128.encode(values[0])

    deltas = [current - previous for previous, current in pairwise(values)]
    for start in range(0, len(deltas), _BLOCK_SIZE):
        chunk = deltas[start:start + _BLOCK_SIZE]
        min_delta = min(chunk)
        num_bits = (max(chunk) - min_delta).bit_length()
        if num_bits > _MAX_BIT_WIDTH:
            raise ValueError(
                f"deltas span {num_bits} bits; at most {_MAX_BIT_WIDTH} are supported"
            )
        # <min delta> <bit widths of the mini-blocks> <mini-blocks>
        out += zigzag_leb128.encode(min_delta)
        out.append(num_bits)
        if num_bits:
            packed = [delta - min_delta for delta in chunk]
            packed.extend([0] * (_BLOCK_SIZE - len(packed)))
            out += bitpacking.encode(packed, num_bits)
    return bytes(out)