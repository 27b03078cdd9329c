"""Decoding of the ``DELTA_BYTE_ARRAY`` (incremental) encoding."""

from __future__ import annotations

from . import delta_bitpacked, delta_length_byte_array


class Decoder:
    """Iterator over the prefix lengths of a ``DELTA_BYTE_ARRAY`` buffer.

    After every prefix length has been read, :meth:`into_lengths` returns a
    decoder of the suffixes.
    """

    def __init__(self, values: bytes) -> None:
        self._values = bytes(values)
        self._prefix_lengths = delta_bitpacked.Decoder(self._values)

    def __iter__(self) -> Decoder:
        return self

    def __next__(self) -> int:
        return next(self._prefix_lengths) & 0xFFFFFFFF

    def into_lengths(self) -> delta_length_byte_array.Decoder:
        """Return a decoder of the suffix lengths and values."""
        if self._prefix_lengths.__length_hint__():
            raise ValueError("all prefix lengths must be consumed first")
        start = self._prefix_lengths.consumed_bytes()
        return delta_length_byte_array.Decoder(self._values[start:])