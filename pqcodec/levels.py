"""Helpers for definition and repetition levels."""


def get_bit_width(max_level: int) -> int:
    """Return the number of bits needed to store levels up to ``max_level``.

    The level is treated as a 16-bit signed integer.
    """
    return (max_level & 0xFFFF).bit_length()