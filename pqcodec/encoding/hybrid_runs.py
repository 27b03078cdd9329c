"""Splitting of RLE/bit-packing hybrid data into its runs."""

from __future__ import annotations

from dataclasses import dataclass

from ..errors import OutOfSpecError
from . import uleb128
from .util import ceil8


@dataclass(frozen=True)
class Bitpacked:
    """A bit-packed run; the consumer must know its bit width."""

    data: bytes


@dataclass(frozen=True)
class Rle:
    """A run-length encoded value repeated ``count`` times."""

    data: bytes
    count: int


class RunDecoder:
    """Iterator over the runs of hybrid-encoded ``values``."""

    def __init__(self, values: bytes, num_bits: int) -> None:
        self._values = bytes(values)
        self.num_bits = num_bits

    def __iter__(self) -> RunDecoder:
        return self

    def __next__(self) -> Bitpacked | Rle:
        if not self._values:
            raise StopIteration
        indicator, consumed = uleb128.decode(self._values)
        values = self._values[consumed:]
        if indicator & 1:
            size = min((indicator >> 1) * self.num_bits, len(values))
            self._values = values[size:]
            return Bitpacked(values[:size])
        run_length = indicator >> 1
        size = ceil8(self.num_bits)
        if size > len(values):
            raise OutOfSpecError(
                f"RLE run needs {size} bytes but only {len(values)} remain"
            )
        self._values = values[size:]
        return Rle(values[:size], run_length)