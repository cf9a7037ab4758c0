import pytest

from childcare_gap.rounding import round_to


@pytest.mark.parametrize(
    "value,decimals,expected",
    [
        (2101 / 40, 2, 52.53),
        (2693 / 40, 2, 67.33),
        (14.63 * 0.85, 2, 12.44),
        (2.5, 0, 3.0),
        (-2.5, 0, -3.0),
        (1.23456, 4, 1.2346),
        (40.3125, 2, 40.31),
    ],
)
def test_round_half_away_from_zero(value, decimals, expected):
    assert round_to(value, decimals) == expected


def test_tiny_negative_rounds_to_plain_zero():
    result = round_to(-0.004, 2)
    assert result == 0.0
    assert str(result) == "0.0"


def test_differs_from_builtin_round_on_halves():
    assert round(0.5) == 0
    assert round_to(0.5, 0) == 1.0
