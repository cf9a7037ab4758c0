"""Week 1 vs week 2 gaps when the fortnightly CCS pool runs out.

Flat per-day calculators (NSW, VIC, and the daily views of the others)
price one representative day. This works out whether the CCS hours pool
leaves week 2 with less subsidy than week 1 without re-running the
per-session fortnight.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .outcome import NotApplicable, Reason


@dataclass(frozen=True)
class WeeklyGaps:
    week1_gap: float
    week2_gap: float


def compute_weekly_gaps(
    session_fee: float,
    session_hours: float,
    days_per_week: int,
    ccs_hours_per_fortnight: float,
    full_daily_ccs: float,
    daily_state_funding: float = 0.0,
) -> Union[WeeklyGaps, NotApplicable]:
    """Daily gap in each week, pro-rating CCS by the share of hours the pool covers.

    ``full_daily_ccs`` is one day's entitlement with full CCS coverage.
    Week 1 draws on the pool first; week 2 gets what is left.
    """
    if session_hours <= 0:
        return NotApplicable(Reason.INVALID_TIME_RANGE)
    if days_per_week <= 0:
        return NotApplicable(Reason.NO_BOOKED_DAYS)

    weekly_hours = session_hours * days_per_week
    if ccs_hours_per_fortnight >= weekly_hours * 2:
        return NotApplicable(Reason.POOL_COVERS_FORTNIGHT)

    week1_ratio = min(1, ccs_hours_per_fortnight / weekly_hours)
    week2_ratio = min(1, max(0, ccs_hours_per_fortnight - weekly_hours) / weekly_hours)

    return WeeklyGaps(
        week1_gap=max(0, session_fee - full_daily_ccs * week1_ratio - daily_state_funding),
        week2_gap=max(0, session_fee - full_daily_ccs * week2_ratio - daily_state_funding),
    )
