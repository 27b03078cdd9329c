"""Decoding of RLE/bit-packing hybrid encoded values."""

from __future__ import annotations

from collections.abc import Iterator
from itertools import repeat

from . import bitpacking
from .hybrid_runs import Bitpacked, Rle, RunDecoder


class HybridRleDecoder:
    """Iterator over ``num_values`` hybrid-encoded unsigned integers.

    Once the data runs out, or when ``num_bits`` is zero, zeros are yielded.
    """

    def __init__(self, data: bytes, num_bits: int, num_values: int) -> None:
        if not 0 <= num_bits <= 32:
            raise ValueError(f"num_bits must be between 0 and 32, got {num_bits}")
        self._runs = RunDecoder(data, num_bits)
        self._num_bits = num_bits
        self._remaining = num_values
        self._state: Iterator[int] | None = self._read_next()

    def _read_next(self) -> Iterator[int] | None:
        if self._num_bits == 0:
            return None
        run = next(self._runs, None)
        if isinstance(run, Bitpacked):
            length = min(len(run.data) * 8 // self._num_bits, self._remaining)
            return bitpacking.Decoder(run.data, self._num_bits, length)
        if isinstance(run, Rle):
            value = int.from_bytes(run.data[:4], "little")
            return repeat(value, run.count)
        return None

    def __iter__(self) -> HybridRleDecoder:
        return self

    def __next__(self) -> int:
        if self._remaining == 0:
            raise StopIteration
        while True:
            if self._state is None:
                value = 0
                break
            value = next(self._state, None)
            if value is not None:
                break
            self._state = self._read_next()
        self._remaining -= 1
        return value

    def __len__(self) -> int:
        return self._remaining