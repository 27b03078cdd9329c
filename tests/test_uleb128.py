import pytest

from pqcodec.encoding.uleb128 import decode, encode
from pqcodec.errors import OutOfSpecError


def test_decode_1():
    data = bytes([0xE5, 0x8E, 0x26, 0xDE, 0xAD, 0xBE, 0xEF])
    value, length = decode(data)
    assert value == 624_485
    assert length == 3


def test_decode_2():
    data = bytes([0b00010000, 0b00000001, 0b00000011, 0b00000011])
    value, length = decode(data)
    assert value == 16
    assert length == 1


@pytest.mark.parametrize("original", [123124234, 0, 2**64 - 1])
def test_round_trip(original):
    encoded = encode(original)
    container = encoded + bytes(10 - len(encoded))
    value, length = decode(container)
    assert value == original
    assert length == len(encoded)


def test_max_value_uses_ten_bytes():
    assert len(encode(2**64 - 1)) == 10


def test_encode_known_value():
    assert encode(624_485) == bytes([0xE5, 0x8E, 0x26])


@pytest.mark.parametrize("value", [-1, 2**64])
def test_encode_out_of_range(value):
    with pytest.raises(ValueError):
        encode(value)


def test_decode_overflow_raises():
    data = bytes([0xFF] * 9 + [0x02])
    with pytest.raises(OutOfSpecError):
        decode(data)