"""The ``DELTA_LENGTH_BYTE_ARRAY`` encoding of byte strings."""

from __future__ import annotations

from collections.abc import Iterable

from ..errors import OutOfSpecError
from . import delta_bitpacked


class Decoder:
    """Iterator over the lengths of a ``DELTA_LENGTH_BYTE_ARRAY`` buffer.

    Once every length has been read, :meth:`into_values` returns the
    concatenated values.
    """

    def __init__(self, values: bytes) -> None:
        self._values = bytes(values)
        self._lengths = delta_bitpacked.Decoder(self._values)
        self._total_length = 0

    def __iter__(self) -> Decoder:
        return self

    def __next__(self) -> int:
        length = next(self._lengths)
        self._total_length += length
        return length

    def into_values(self) -> bytes:
        """Return the concatenated values that follow the lengths."""
        if self._lengths.__length_hint__():
            raise ValueError("all lengths must be consumed before the values")
        start = self._lengths.consumed_bytes()
        end = start + self._total_length
        if end > len(self._values):
            raise OutOfSpecError(
                f"values need {self._total_length} bytes "
                f"but only {len(self._values) - start} remain"
            )
        return self._values[start:end]


def encode(items: Iterable[bytes | str]) -> bytes:
    """Encode byte strings (``str`` as UTF-8) as ``DELTA_LENGTH_BYTE_ARRAY``."""
    items = [item.encode() if isinstance(item, str) else bytes(item) for item in items]
    return delta_bitpacked.encode(len(item) for item in items) + b"".join(items)