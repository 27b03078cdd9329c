"""Decoding of ``PLAIN`` encoded byte arrays."""

from __future__ import annotations

from ..errors import OutOfSpecError
from .util import get_length


class Decoder:
    """Iterator over length-prefixed byte strings.

    Iteration stops once fewer than four bytes remain; ``length`` serves as
    the expected number of items.
    """

    def __init__(self, values: bytes, length: int) -> None:
        self._values = bytes(values)
        self._remaining = length

    def __iter__(self) -> Decoder:
        return self

    def __next__(self) -> bytes:
        values = self._values
        if len(values) < 4:
            raise StopIteration
        size = get_length(values)
        end = 4 + size
        if end > len(values):
            raise OutOfSpecError(
                f"byte array needs {size} bytes but only {len(values) - 4} remain"
            )
        self._values = values[end:]
        self._remaining = max(self._remaining - 1, 0)
        return values[4:end]

    def __length_hint__(self) -> int:
        return self._remaining