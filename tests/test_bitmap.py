import operator

import pytest

from pqcodec.encoding.bitmap import BitmapIter, encode_bool, set_bit


def test_set_bit_sets_only_that_bit():
    for i in range(8):
        result = set_bit(0, i)
        assert result & (1 << i)
        assert bin(result).count("1") == 1


def test_set_bit_keeps_existing_bits():
    assert set_bit(0b11111111, 4) == 0b11111111


def test_set_bit_invalid_index():
    with pytest.raises(ValueError):
        set_bit(0, 8)


def test_encode_bool_all_true():
    assert encode_bool([True] * 8) == bytes([0b11111111])


def test_encode_bool_from_bitmap_iter():
    bits = BitmapIter(bytes([0b10011101, 0b10011101]), 0, 14)
    assert encode_bool(bits) == bytes([0b10011101, 0b00011101])


def test_encode_bool_empty():
    assert encode_bool([]) == b""


def test_roundtrip():
    values = [bool((i * 5) % 3) for i in range(21)]
    encoded = encode_bool(values)
    assert len(encoded) == 3
    assert list(BitmapIter(encoded, 0, len(values))) == values


def test_offset_matches_slice():
    data = bytes([0b10110101, 0b01101100, 0b11100011])
    full = list(BitmapIter(data, 0, 20))
    assert list(BitmapIter(data, 3, 12)) == full[3:15]
    assert list(BitmapIter(data, 9, 6)) == full[9:15]


def test_length_hint():
    bits = BitmapIter(bytes([0b1, 0b0]), 0, 10)
    assert operator.length_hint(bits) == 10
    next(bits)
    assert operator.length_hint(bits) == 9


def test_offset_beyond_data():
    with pytest.raises(ValueError):
        BitmapIter(b"\x00", 16, 1)