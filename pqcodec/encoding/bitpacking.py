"""Bit-packing of unsigned 32-bit integers in blocks of 32 values.

Values are laid out least-significant bit first, one after another, so a
block of 32 values at ``num_bits`` bits each occupies ``4 * num_bits`` bytes.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from ..errors import OutOfSpecError

BLOCK_LEN = 32


def _check_num_bits(num_bits: int, minimum: int) -> None:
    if not minimum <= num_bits <= 32:
        raise ValueError(
            f"num_bits must be between {minimum} and 32, got {num_bits}"
        )


def encode_pack(values: Sequence[int], num_bits: int) -> bytes:
    """Pack exactly 32 values into ``4 * num_bits`` bytes."""
    _check_num_bits(num_bits, 0)
    if len(values) != BLOCK_LEN:
        raise ValueError(
            f"a pack holds exactly {BLOCK_LEN} values, got {len(values)}"
        )
    word = 0
    for position, value in enumerate(values):
        if value < 0 or value >> num_bits:
            raise ValueError(f"value {value} does not fit in {num_bits} bits")
        word |= value << (position * num_bits)
    return word.to_bytes(BLOCK_LEN * num_bits // 8, "little")


def encode(values: Iterable[int], num_bits: int) -> bytes:
    """Bit-pack ``values`` using ``num_bits`` bits each.

    The last block is padded with zeros; the result holds
    ``len(values) * num_bits // 8`` bytes.
    """
    values = list(values)
    out = bytearray()
    for start in range(0, len(values), BLOCK_LEN):
        chunk = values[start:start + BLOCK_LEN]
        chunk.extend([0] * (BLOCK_LEN - len(chunk)))
        out += encode_pack(chunk, num_bits)
    return bytes(out[: len(values) * num_bits // 8])


def _decode_pack(chunk: bytes, num_bits: int) -> list[int]:
    # A short chunk behaves as if padded with zero bytes.
    word = int.from_bytes(chunk, "little")
    mask = (1 << num_bits) - 1
    return [(word >> (i * num_bits)) & mask for i in range(BLOCK_LEN)]


class Decoder:
    """Iterator over ``length`` bit-packed values of ``num_bits`` bits."""

    def __init__(self, compressed: bytes, num_bits: int, length: int) -> None:
        _check_num_bits(num_bits, 1)
        self._data = bytes(compressed)
        self._num_bits = num_bits
        self._block_size = BLOCK_LEN * num_bits // 8
        self._remaining = length
        self._pack = _decode_pack(self._data[: self._block_size], num_bits)
        self._offset = self._block_size
        self._index = 0

    def __iter__(self) -> Decoder:
        return self

    def __next__(self) -> int:
        if self._remaining == 0:
            raise StopIteration
        if self._index == BLOCK_LEN:
            raise OutOfSpecError(
                "bit-packed buffer holds fewer values than requested"
            )
        result = self._pack[self._index]
        self._index += 1
        if self._index == BLOCK_LEN and self._offset < len(self._data):
            end = self._offset + self._block_size
            self._pack = _decode_pack(self._data[self._offset:end], self._num_bits)
            self._offset = end
            self._index = 0
        self._remaining -= 1
        return result

    def __length_hint__(self) -> int:
        return self._remaining