"""QLD Free Kindy tests.

$125 for a 10 hour day ($12.50/hr) with 7.5 kindy hours, the shape of the
Department of Education worked examples.
"""
import pytest

from childcare_gap.outcome import NotApplicable, Reason
from childcare_gap.qld import calculate_qld_daily, calculate_qld_fortnightly


class TestCalculateQldDaily:
    def test_sixty_percent_ccs(self):
        result = calculate_qld_daily(60, 5, 125, 8, 18, 7.5)

        assert result.applicable_ccs_hourly_rate == 7.5
        assert result.ccs_amount == 75
        assert result.ccs_entitlement == 71.25
        assert result.gap_before_kindy == 53.75
        assert result.kindy_ccs_per_hour == pytest.approx(7.125)
        assert result.kindy_ccs_covered_hours == 7.5
        assert result.kindy_non_ccs_covered_hours == 0
        # 7.5 hrs x ($12.50 - $7.125)
        assert result.kindy_funding_amount == 40.31
        assert result.estimated_gap_fee == 13.44

    def test_ninety_percent_ccs(self):
        result = calculate_qld_daily(90, 5, 125, 8, 18, 7.5)

        assert result.applicable_ccs_hourly_rate == 11.25
        assert result.ccs_amount == 112.5

    def test_no_ccs_funds_full_hourly_fee(self):
        result = calculate_qld_daily(0, 0, 125, 8, 18, 7.5)

        assert result.kindy_funding_amount == 93.75
        assert result.estimated_gap_fee == 31.25

    def test_withholding_above_five_percent_is_normalised(self):
        result = calculate_qld_daily(60, 10, 125, 8, 18, 7.5)

        # Gap still reflects the family's actual entitlement
        assert result.ccs_entitlement == 67.5
        assert result.gap_before_kindy == 57.5
        # Funding is the same as at 5%
        assert result.kindy_funding_amount == 40.31
        assert result.estimated_gap_fee == 17.19

    def test_withholding_below_five_percent_is_kept_not_raised(self):
        result = calculate_qld_daily(60, 0, 125, 8, 18, 7.5)

        assert result.gap_before_kindy == 50
        assert result.kindy_funding_amount == 37.5
        assert result.estimated_gap_fee == 12.5

    def test_withholding_above_five_percent_can_raise_gap_with_more_ccs(self):
        # Kindy covers the whole session: the gap uses the actual 6% entitlement
        # while funding uses the 5% normalised one, so they no longer cancel.
        without_ccs = calculate_qld_daily(0, 6, 7.5, 6, 9, 3)
        with_ccs = calculate_qld_daily(1, 6, 7.5, 6, 9, 3)

        assert without_ccs.estimated_gap_fee == 0
        assert with_ccs.ccs_entitlement == pytest.approx(0.0846)
        assert with_ccs.kindy_ccs_per_hour == pytest.approx(0.0285)
        assert with_ccs.gap_before_kindy == 7.42
        assert with_ccs.kindy_funding_amount == 7.41
        assert with_ccs.estimated_gap_fee == 0.01

    def test_kindy_hours_capped_at_fifteen(self):
        result = calculate_qld_daily(60, 5, 200, 0, 20, 18)

        assert result.kindy_ccs_covered_hours == 15
        assert result.kindy_non_ccs_covered_hours == 0


class TestCalculateQldFortnightly:
    def test_two_kindy_days_a_week(self, build_fortnight, weekday_slots):
        sessions = build_fortnight(
            weekday_slots(0, 1, 2), 125, 8, 18, program=(8, 15.5), program_slots=weekday_slots(0, 1),
        )

        result = calculate_qld_fortnightly(sessions, 60, 5, 72)

        kindy = [s for s in result.sessions if s.kindy_funding_amount > 0]
        regular = [s for s in result.sessions if s.session_hours > 0 and s.kindy_funding_amount == 0]
        assert len(kindy) == 4
        assert len(regular) == 2
        assert all(s.kindy_funding_amount == 40.31 for s in kindy)
        assert all(s.estimated_gap_fee == 13.44 for s in kindy)
        assert all(s.estimated_gap_fee == 53.75 for s in regular)
        assert result.total_kindy_funding == pytest.approx(161.24)

    def test_weekly_kindy_pool_runs_out(self, build_fortnight):
        sessions = build_fortnight([0, 1, 2], 125, 8, 18, program=(8, 15.5), program_slots=[0, 1, 2])

        result = calculate_qld_fortnightly(sessions, 60, 5, 72)

        mon, tue, wed = result.sessions[:3]
        assert mon.kindy_funding_amount == 40.31
        assert tue.kindy_funding_amount == 40.31
        assert tue.remaining_kindy_hours == 0
        assert wed.kindy_funding_amount == 0
        # Week 2 starts with a fresh 15 hours
        assert result.sessions[5].remaining_kindy_hours == 15

    def test_nothing_booked(self, build_fortnight):
        result = calculate_qld_fortnightly(build_fortnight([], 125, 8, 18), 60, 5, 72)

        assert result == NotApplicable(Reason.NO_BOOKED_DAYS)
