import pytest

from childcare_gap.income import estimate_ccs, higher_ccs_percent, standard_ccs_percent


@pytest.mark.parametrize(
    "income,expected",
    [
        (0, 90),
        (85_279, 90),
        (85_280, 90),
        (90_278, 90),
        (90_279, 89),
        (185_279, 70),
        (535_278, 1),
        (535_279, 0),
        (900_000, 0),
    ],
)
def test_standard_percent(income, expected):
    assert standard_ccs_percent(income) == expected


@pytest.mark.parametrize(
    "income,expected",
    [
        (100_000, 95),
        (143_273, 95),
        (146_273, 94),
        (188_272, 81),
        (188_273, 80),
        (250_000, 80),
        (267_563, 80),
        (270_563, 79),
        (357_562, 51),
        (357_563, 50),
        (367_562, 50),
        (367_563, 0),
    ],
)
def test_higher_percent(income, expected):
    assert higher_ccs_percent(income) == expected


class TestEstimateCcs:
    def test_standard_rate_by_default(self):
        estimate = estimate_ccs(150_000, number_of_children=2)

        assert estimate.standard_percent == 78
        assert estimate.higher_percent == 93
        assert estimate.applicable_percent == 78
        assert estimate.hourly_rate_cap == 14.63

    def test_higher_rate_for_second_child(self):
        estimate = estimate_ccs(150_000, number_of_children=2, use_higher_ccs=True)

        assert estimate.applicable_percent == 93

    def test_higher_rate_needs_more_than_one_child(self):
        estimate = estimate_ccs(150_000, number_of_children=1, use_higher_ccs=True)

        assert estimate.applicable_percent == 78

    def test_higher_rate_stops_at_cutoff(self):
        estimate = estimate_ccs(400_000, number_of_children=3, use_higher_ccs=True)

        assert estimate.higher_percent == 0
        assert estimate.applicable_percent == standard_ccs_percent(400_000)
