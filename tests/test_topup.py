import pytest

from childcare_gap.sessions import HourPool, Session, repeat_fortnight
from childcare_gap.topup import apply_top_up, daily_share, split_program_hours


class TestApplyTopUp:
    def test_reduces_gap(self):
        top_up = apply_top_up(25.6, 15.36)

        assert top_up.amount == 15.36
        assert top_up.estimated_gap_fee == 10.24

    def test_negative_funding_is_ignored(self):
        top_up = apply_top_up(25.6, -4)

        assert top_up.amount == 0
        assert top_up.estimated_gap_fee == 25.6

    def test_uncapped_funding_floors_gap_at_zero(self):
        top_up = apply_top_up(10, 15)

        assert top_up.amount == 15
        assert top_up.estimated_gap_fee == 0

    def test_capped_funding_stops_at_gap(self):
        top_up = apply_top_up(10, 15, cap_at_gap=True)

        assert top_up.amount == 10
        assert top_up.estimated_gap_fee == 0


class TestSplitProgramHours:
    def test_fully_covered_session(self):
        hours = split_program_hours(6, 1.5, 10, 10)

        assert (hours.ccs_covered, hours.non_ccs_covered) == (6, 0)

    def test_ccs_runs_out_inside_program(self):
        hours = split_program_hours(6, 1.5, 10, 5)

        assert hours.ccs_covered == 3.5
        assert hours.non_ccs_covered == 2.5
        assert hours.total == 6

    def test_ccs_runs_out_before_program(self):
        hours = split_program_hours(6, 4, 10, 2)

        assert (hours.ccs_covered, hours.non_ccs_covered) == (0, 6)

    def test_program_pool_limits_hours(self):
        hours = split_program_hours(6, 1.5, 10, 5, available_program_hours=4)

        assert hours.ccs_covered == 3.5
        assert hours.non_ccs_covered == 0.5

    def test_empty_program_pool(self):
        hours = split_program_hours(6, 0, 10, 10, available_program_hours=0)

        assert hours.total == 0


@pytest.mark.parametrize("weekly,days,expected", [(35.66, 3, 11.89), (52.53, 3, 17.51), (50, 0, 0)])
def test_daily_share(weekly, days, expected):
    assert daily_share(weekly, days) == expected


class TestHourPool:
    def test_draw_until_empty(self):
        pool = HourPool(25)

        assert [pool.draw(10) for _ in range(4)] == [10, 10, 5, 0]
        assert pool.remaining == 0

    def test_negative_budget_is_empty(self):
        pool = HourPool(-5)

        assert pool.draw(10) == 0

    def test_negative_draw_grants_nothing(self):
        pool = HourPool(10)

        assert pool.draw(-3) == 0
        assert pool.remaining == 10


def test_repeat_fortnight_keeps_program_only_on_program_days():
    session = Session(150, 7, 17, True, 8.5, 14.5)

    fortnight = repeat_fortnight(session, days=[0, 2], program_days=[2])

    assert len(fortnight) == 10
    assert [s.is_booked for s in fortnight[:5]] == [True, False, True, False, False]
    assert not fortnight[0].has_program
    assert fortnight[2].program_hours == 6
    assert fortnight[7].program_offset == 1.5
