"""VIC Free Kinder tests."""
import pytest

from childcare_gap.outcome import NotApplicable, Reason
from childcare_gap.vic import (
    COHORTS,
    annual_offset,
    calculate_vic_daily,
    calculate_vic_fortnightly,
    calculate_vic_fortnightly_sessions,
    weekly_offset,
)


@pytest.mark.parametrize(
    "cohort,hours,annual,weekly",
    [
        ("standard", 15, 2101, 52.53),
        ("priority", 15, 2693, 67.33),
        ("standard", 7.5, 1050.5, 26.26),
    ],
)
def test_offset_pro_rated_by_kinder_hours(cohort, hours, annual, weekly):
    assert annual_offset(cohort, hours) == annual
    assert weekly_offset(cohort, hours) == weekly


class TestCalculateVicDaily:
    def test_standard_cohort_three_days(self):
        result = calculate_vic_daily(85, 5, 120, 8, 18, "standard", 15, 3)

        assert result.ccs_entitlement == 96.9
        assert result.gap_before_free_kinder == 23.1
        assert result.weekly_offset == 52.53
        assert result.daily_offset == 17.51
        assert result.estimated_gap_fee == 5.59

    def test_priority_cohort_three_days(self):
        result = calculate_vic_daily(85, 5, 120, 8, 18, "priority", 15, 3)

        assert result.weekly_offset == 67.33
        assert result.daily_offset == 22.44
        assert result.estimated_gap_fee == 0.66

    def test_offset_capped_at_gap(self):
        result = calculate_vic_daily(90, 5, 50, 8, 13, "standard", 15, 2)

        assert result.gap_before_free_kinder == 7.25
        assert result.daily_offset == 7.25
        assert result.estimated_gap_fee == 0

    def test_no_days_attended(self):
        result = calculate_vic_daily(85, 5, 120, 8, 18, "standard", 15, 0)

        assert result == NotApplicable(Reason.NO_BOOKED_DAYS)


class TestCalculateVicFortnightly:
    def test_flat_fortnight(self):
        result = calculate_vic_fortnightly(85, 5, 72, 120, 8, 18, "standard", 15, 3)

        assert len(result.sessions) == 6
        assert all(d.top_up_amount == 17.51 for d in result.sessions)
        assert result.total_top_up == pytest.approx(105.06)

    def test_sessions_share_offset_per_week(self, build_fortnight, weekday_slots):
        sessions = build_fortnight(weekday_slots(0, 2, 4), 120, 8, 18)

        result = calculate_vic_fortnightly_sessions(sessions, 85, 5, 72, "standard", 15)

        booked = [d for d in result.sessions if d.session_fee > 0]
        assert [d.top_up_amount for d in booked] == [17.51] * 6
        assert result.total_gap_fee == pytest.approx(33.54)


@pytest.mark.parametrize("cohort", COHORTS)
def test_every_cohort_has_an_offset(cohort):
    assert weekly_offset(cohort, 15) > 0
