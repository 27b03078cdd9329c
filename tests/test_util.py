import struct

import pytest

from pqcodec.encoding.util import ceil8, get_length
from pqcodec.errors import OutOfSpecError


@pytest.mark.parametrize("length", [0, 5, 255, 65536, 2**32 - 1])
def test_get_length_round_trip(length):
    data = struct.pack("<I", length) + b"trailing"
    assert get_length(data) == length


def test_get_length_reads_little_endian():
    assert get_length(bytes([1, 0, 0, 0])) == 1


def test_get_length_too_short():
    with pytest.raises(OutOfSpecError):
        get_length(b"\x01\x02\x03")


def test_ceil8_exact_multiples():
    for n in range(0, 100):
        assert ceil8(8 * n) == n


def test_ceil8_is_smallest_cover():
    for value in range(1, 500):
        result = ceil8(value)
        assert result * 8 >= value
        assert (result - 1) * 8 < value


def test_ceil8_zero():
    assert ceil8(0) == 0