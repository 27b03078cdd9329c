import pytest

from pqcodec.encoding.delta_bitpacked import Decoder, encode
from pqcodec.errors import OutOfSpecError


def test_single_value():
    data = bytes([128, 1, 4, 1, 2])
    decoder = Decoder(data)
    assert list(decoder) == [1]
    assert decoder.consumed_bytes() == 5


def test_from_spec():
    data = bytes([128, 1, 4, 5, 2, 2, 0, 0, 0, 0])
    decoder = Decoder(data)
    assert list(decoder) == [1, 2, 3, 4, 5]
    assert decoder.consumed_bytes() == 10


def test_case2():
    data = bytes(
        [128, 1, 4, 6, 2, 7, 3, 0, 0, 0, 0b01101101, 0b00001011]
        + [0] * 10
        + [1, 2, 3]
    )
    decoder = Decoder(data)
    assert list(decoder) == [1, 2, 3, 4, 5, 1]
    assert decoder.consumed_bytes() == len(data) - 3


def test_multiple_miniblocks():
    data = bytes(
        [128, 1, 4, 65, 100]
        + [7, 3, 4, 255, 0]
        + [0] * 12
        + [0x88] * 16
        + [1, 2, 3]
    )
    expected = [50] + list(range(46, -79, -4)) + list(range(-74, 51, 4))
    decoder = Decoder(data)
    assert list(decoder) == expected
    assert decoder.consumed_bytes() == len(data) - 3


def test_constant_delta():
    assert encode(range(1, 6)) == bytes([128, 1, 1, 5, 2, 2, 0])


def test_negative_min_delta():
    expected = bytes(
        [128, 1, 1, 6, 2, 7, 3, 0b01101101, 0b00001011] + [0] * (128 * 3 // 8 - 2)
    )
    assert encode([1, 2, 3, 4, 5, 1]) == expected


@pytest.mark.parametrize(
    "data",
    [
        [1, 3, 1, 2, 3],
        [1, 3, -1, 2, 3],
        [1, 3, -1, 2, 3, 10, 1] + [x - 10 for x in range(128)],
    ],
)
def test_roundtrip(data):
    assert list(Decoder(encode(data))) == data


def test_another_consumes_everything():
    data = [2, 3, 1, 2, 1]
    buffer = encode(data)
    decoder = Decoder(buffer)
    assert list(decoder) == data
    assert decoder.consumed_bytes() == len(buffer)


def test_length_hint_counts_down():
    decoder = Decoder(encode([5, 6, 7]))
    assert decoder.__length_hint__() == 3
    next(decoder)
    assert decoder.__length_hint__() == 2


def test_encode_empty_raises():
    with pytest.raises(ValueError):
        encode([])


def test_bad_block_size_raises():
    with pytest.raises(OutOfSpecError):
        Decoder(bytes([100, 4, 1, 2]))


def test_truncated_miniblock_raises():
    with pytest.raises(OutOfSpecError):
        Decoder(bytes([128, 1, 4, 6, 2, 7, 3, 0, 0, 0, 0b01101101]))