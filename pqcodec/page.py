"""Splitting of data page buffers into levels and values."""

from __future__ import annotations

from .encoding.util import get_length
from .errors import OutOfSpecError


def _take_length_prefixed(buffer: bytes) -> tuple[bytes, bytes]:
    length = get_length(buffer)
    end = 4 + length
    if end > len(buffer):
        raise OutOfSpecError(
            f"level buffer needs {length} bytes but only {len(buffer) - 4} remain"
        )
    return buffer[4:end], buffer[end:]


def split_buffer_v1(
    buffer: bytes, has_rep: bool, has_def: bool
) -> tuple[bytes, bytes, bytes]:
    """Split a v1 page buffer into ``(rep levels, def levels, values)``.

    In v1 pages each level section is prefixed by its little-endian ``u32``
    length and is only present when the column has such levels.
    """
    buffer = bytes(buffer)
    rep, buffer = _take_length_prefixed(buffer) if has_rep else (b"", buffer)
    def_, buffer = _take_length_prefixed(buffer) if has_def else (b"", buffer)
    return rep, def_, buffer


def split_buffer_v2(
    buffer: bytes, rep_level_buffer_length: int, def_level_buffer_length: int
) -> tuple[bytes, bytes, bytes]:
    """Split a v2 page buffer into ``(rep levels, def levels, values)``.

    The level section lengths come from the page header.
    """
    buffer = bytes(buffer)
    if rep_level_buffer_length < 0 or def_level_buffer_length < 0:
        raise OutOfSpecError("level buffer lengths must not be negative")
    levels_end = rep_level_buffer_length + def_level_buffer_length
    if levels_end > len(buffer):
        raise OutOfSpecError(
            f"level buffers need {levels_end} bytes but the page holds {len(buffer)}"
        )
    return (
        buffer[:rep_level_buffer_length],
        buffer[rep_level_buffer_length:levels_end],
        buffer[levels_end:],
    )