"""NSW Start Strong for Long Day Care fee relief.

A flat annual amount per age group and tier, divided by the service's
operating weeks and then by the days attended each week. Relief is applied
after CCS and never exceeds the remaining gap.
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

NSW_FEE_RELIEF = RATES_2026["nsw"]["fee_relief"]
AGE_GROUPS = tuple(NSW_FEE_RELIEF)
FEE_RELIEF_TIERS = ("standard", "maximum")


def annual_fee_relief(age_group: str, fee_relief_tier: str) -> float:
    return NSW_FEE_RELIEF[age_group][fee_relief_tier]


def weekly_fee_relief(age_group: str, fee_relief_tier: str, service_weeks: float) -> float:
    if service_weeks <= 0:
        return 0.0
    return round_to(annual_fee_relief(age_group, fee_relief_tier) / service_weeks, 2)


@dataclass(frozen=True)
class NswDailyResult:
    session_hours: float
    hourly_session_fee: float
    ccs_entitlement: float
    gap_before_fee_relief: float
    annual_fee_relief: float
    weekly_fee_relief: float
    daily_fee_relief: float
    estimated_gap_fee: float


def calculate_nsw_daily(
    ccs_percent: float,
    ccs_withholding_percent: float,
    session_fee: float,
    session_start_hour: float,
    session_end_hour: float,
    age_group: str,
    fee_relief_tier: str,
    service_weeks: float,
    days_per_week: int,
) -> Union[NswDailyResult, NotApplicable]:
    """Daily out-of-pocket cost; ``daily_fee_relief`` is the relief actually applied."""
    if days_per_week <= 0:
        return NotApplicable(Reason.NO_BOOKED_DAYS)

    ccs = compute_session_ccs(
        session_fee, session_start_hour, session_end_hour, ccs_percent, ccs_withholding_percent,
    )
    weekly = weekly_fee_relief(age_group, fee_relief_tier, service_weeks)
    top_up = apply_top_up(net_gap(session_fee, ccs), daily_share(weekly, days_per_week), cap_at_gap=True)

    return NswDailyResult(
        session_hours=ccs.session_hours,
        hourly_session_fee=ccs.hourly_session_fee,
        ccs_entitlement=ccs.ccs_entitlement,
        gap_before_fee_relief=top_up.gap_before,
        annual_fee_relief=annual_fee_relief(age_group, fee_relief_tier),
        weekly_fee_relief=weekly,
        daily_fee_relief=top_up.amount,
        estimated_gap_fee=top_up.estimated_gap_fee,
    )


def calculate_nsw_fortnightly(
    ccs_percent: float,
    ccs_withholding_percent: float,
    fortnightly_ccs_hours: float,
    session_fee: float,
    session_start_hour: float,
    session_end_hour: float,
    age_group: str,
    fee_relief_tier: str,
    service_weeks: float,
    days_per_week: int,
) -> Union[FlatFortnightResult, NotApplicable]:
    """The same session ``days_per_week`` days a week for two weeks."""
    weekly = weekly_fee_relief(age_group, fee_relief_tier, service_weeks)
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


def calculate_nsw_fortnightly_sessions(
    sessions: Sequence[Session],
    ccs_percent: float,
    ccs_withholding_percent: float,
    fortnightly_ccs_hours: float,
    age_group: str,
    fee_relief_tier: str,
    service_weeks: float,
) -> Union[FlatFortnightResult, NotApplicable]:
    """Per-session fortnight; weekly relief is shared across each week's booked days."""
    return flat_fortnight_sessions(
        sessions,
        ccs_percent,
        ccs_withholding_percent,
        fortnightly_ccs_hours,
        weekly_fee_relief(age_group, fee_relief_tier, service_weeks),
    )
