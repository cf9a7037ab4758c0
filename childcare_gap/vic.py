"""VIC Free Kinder for Long Day Care.

The annual offset for the child's cohort is pro-rated by enrolled kinder
hours against a 15 hours/week program, spread over 40 program weeks and
then over the days attended. It is applied after CCS, up to the gap.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Union

from .ccs import compute_session_ccs
from .outcome import NotApplicable, Reason
from .rates import RATES_2026
from .rounding import round_to
from .sessions import Session
from .topup import FlatFortnightResult, apply_top_up, daily_share, flat_fortnight, flat_fortnight_sessions, net_gap

VIC_FREE_KINDER_WEEKS = RATES_2026["vic"]["program_weeks"]
VIC_FREE_KINDER_OFFSET = RATES_2026["vic"]["offset"]
BASELINE_HOURS_PER_WEEK = RATES_2026["vic"]["baseline_hours_per_week"]
COHORTS = tuple(VIC_FREE_KINDER_OFFSET)


def annual_offset(cohort: str, kinder_hours_per_week: float) -> float:
    return round_to(VIC_FREE_KINDER_OFFSET[cohort] * (kinder_hours_per_week / BASELINE_HOURS_PER_WEEK), 2)


def weekly_offset(cohort: str, kinder_hours_per_week: float) -> float:
    return round_to(annual_offset(cohort, kinder_hours_per_week) / VIC_FREE_KINDER_WEEKS, 2)


@dataclass(frozen=True)
class VicDailyResult:
    session_hours: float
    hourly_session_fee: float
    ccs_entitlement: float
    gap_before_free_kinder: float
    annual_offset: float
    weekly_offset: float
    daily_offset: float
    estimated_gap_fee: float


def calculate_vic_daily(
    ccs_percent: float,
    ccs_withholding_percent: float,
    session_fee: float,
    session_start_hour: float,
    session_end_hour: float,
    cohort: str,
    kinder_hours_per_week: float,
    days_per_week: int,
) -> Union[VicDailyResult, NotApplicable]:
    """Daily out-of-pocket cost; ``daily_offset`` is the offset actually applied."""
    if days_per_week <= 0:
        return NotApplicable(Reason.NO_BOOKED_DAYS)

    ccs = compute_session_ccs(
        session_fee, session_start_hour, session_end_hour, ccs_percent, ccs_withholding_percent,
    )
    weekly = weekly_offset(cohort, kinder_hours_per_week)
    top_up = apply_top_up(net_gap(session_fee, ccs), daily_share(weekly, days_per_week), cap_at_gap=True)

    return VicDailyResult(
        session_hours=ccs.session_hours,
        hourly_session_fee=ccs.hourly_session_fee,
        ccs_entitlement=ccs.ccs_entitlement,
        gap_before_free_kinder=top_up.gap_before,
        annual_offset=annual_offset(cohort, kinder_hours_per_week),
        weekly_offset=weekly,
        daily_offset=top_up.amount,
        estimated_gap_fee=top_up.estimated_gap_fee,
    )


def calculate_vic_fortnightly(
    ccs_percent: float,
    ccs_withholding_percent: float,
    fortnightly_ccs_hours: float,
    session_fee: float,
    session_start_hour: float,
    session_end_hour: float,
    cohort: str,
    kinder_hours_per_week: float,
    days_per_week: int,
) -> Union[FlatFortnightResult, NotApplicable]:
    weekly = weekly_offset(cohort, kinder_hours_per_week)
    return flat_fortnight(
        session_fee,
        session_start_hour,
        session_end_hour,
        days_per_week,
        ccs_percent,
        ccs_withholding_percent,
        fortnightly_ccs_hours,
        daily_share(weekly, days_per_week),
    )


def calculate_vic_fortnightly_sessions(
    sessions: Sequence[Session],
    ccs_percent: float,
    ccs_withholding_percent: float,
    fortnightly_ccs_hours: float,
    cohort: str,
    kinder_hours_per_week: float,
) -> Union[FlatFortnightResult, NotApplicable]:
    return flat_fortnight_sessions(
        sessions,
        ccs_percent,
        ccs_withholding_percent,
        fortnightly_ccs_hours,
        weekly_offset(cohort, kinder_hours_per_week),
    )
