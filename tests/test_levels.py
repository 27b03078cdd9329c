import pytest

from pqcodec.levels import get_bit_width


@pytest.mark.parametrize(
    "level, expected",
    [
        (0, 0),
        (1, 1),
        (2, 2),
        (3, 2),
        (4, 3),
        (5, 3),
        (6, 3),
        (7, 3),
        (8, 4),
        (15, 4),
        (255, 8),
        (256, 9),
    ],
)
def test_get_bit_width(level, expected):
    assert get_bit_width(level) == expected


def test_negative_level_uses_all_bits():
    assert get_bit_width(-1) == 16


def test_bit_width_holds_value():
    for level in range(1, 2000):
        width = get_bit_width(level)
        assert level < (1 << width)
        assert level >= (1 << (width - 1))