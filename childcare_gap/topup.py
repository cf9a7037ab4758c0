"""Layering state funding on top of the CCS result.

Every jurisdiction follows the same outline: price the session with the CCS
engine, work out the gap left before state funding, compute a raw funding
amount, then floor the funding and the final gap at zero. Two funding shapes
exist:

* program-hour funding (ACT, QLD): the per-hour gap is funded for hours
  inside the program window, drawn from a weekly hour pool, and any
  program hours the CCS pool did not reach are funded at the full hourly fee;
* flat daily funding (NSW, VIC): an annual dollar amount becomes a weekly
  amount shared across that week's booked days, capped at the gap.

Jurisdictions plug in only the part that differs: a ``FundingBasis``
function for program-hour funding, or the weekly dollar amount for flat
funding.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Union

from .ccs import CcsResult, compute_session_ccs, hourly_fee, session_ccs
from .outcome import NotApplicable, Reason, check_session
from .rounding import round_to
from .sessions import (
    HourPool,
    Session,
    booked_days_per_week,
    check_fortnight,
    has_booked_day,
    week_of,
    weekday_of,
)

logger = logging.getLogger(__name__)


###############################################################################
# SHARED TOP-UP RULE
###############################################################################

@dataclass(frozen=True)
class TopUp:
    gap_before: float
    amount: float
    estimated_gap_fee: float


def apply_top_up(gap_before: float, raw_amount: float, cap_at_gap: bool = False) -> TopUp:
    """Apply a raw funding amount to the gap, never producing a negative gap."""
    amount = max(0, raw_amount)
    if cap_at_gap:
        amount = min(amount, gap_before)
    amount = round_to(amount, 2)
    return TopUp(
        gap_before=gap_before,
        amount=amount,
        estimated_gap_fee=round_to(max(0, gap_before - amount), 2),
    )


###############################################################################
# PROGRAM-HOUR FUNDING (ACT, QLD)
###############################################################################

@dataclass(frozen=True)
class FundingBasis:
    """What a jurisdiction funds program hours against."""
    gap_before: float
    subsidy_per_hour: float


# (session_fee, ccs result) -> funding basis
BasisRule = Callable[[float, CcsResult], FundingBasis]


@dataclass(frozen=True)
class ProgramHours:
    ccs_covered: float
    non_ccs_covered: float

    @property
    def total(self) -> float:
        return self.ccs_covered + self.non_ccs_covered


def split_program_hours(
    program_hours: float,
    program_offset: float,
    session_hours: float,
    applicable_ccs_hours: float,
    available_program_hours: Optional[float] = None,
) -> ProgramHours:
    """Split the fundable program hours into CCS-covered and uncovered hours.

    When CCS covers the whole session, every program hour is CCS-covered.
    Otherwise the CCS hours run from the session start, so only the part of
    the program window before they run out is covered. ``available_program_hours``
    is what is left in the weekly program pool (unlimited when omitted).
    """
    if applicable_ccs_hours >= session_hours:
        ccs_funded = program_hours
    else:
        ccs_funded = max(0, min(program_hours, applicable_ccs_hours - program_offset))
    non_ccs_funded = program_hours - ccs_funded

    if available_program_hours is None:
        applicable = program_hours
    else:
        applicable = min(program_hours, available_program_hours)
    covered = min(applicable, ccs_funded)
    uncovered = min(max(0, applicable - covered), non_ccs_funded)
    return ProgramHours(ccs_covered=covered, non_ccs_covered=uncovered)


def program_funding(hours: ProgramHours, hourly_session_fee: float, subsidy_per_hour: float) -> float:
    return (
        hours.ccs_covered * (hourly_session_fee - subsidy_per_hour)
        + hours.non_ccs_covered * hourly_session_fee
    )


@dataclass(frozen=True)
class ProgramDailyResult:
    session_hours: float
    hourly_session_fee: float
    applicable_ccs_hourly_rate: float
    applicable_ccs_hours: float
    ccs_amount: float
    ccs_withholding: float
    ccs_entitlement: float
    gap_before_kindy: float
    kindy_funding_amount: float
    estimated_gap_fee: float
    kindy_ccs_covered_hours: float
    kindy_non_ccs_covered_hours: float
    kindy_ccs_per_hour: float


def program_daily(
    session_fee: float,
    session_start_hour: float,
    session_end_hour: float,
    ccs_percent: float,
    ccs_withholding_percent: float,
    program_hours: float,
    basis: BasisRule,
    available_program_hours: Optional[float] = None,
    ccs_hours_available: Optional[float] = None,
) -> ProgramDailyResult:
    """Single session with a program block starting at the session start."""
    ccs = compute_session_ccs(
        session_fee, session_start_hour, session_end_hour,
        ccs_percent, ccs_withholding_percent,
        ccs_hours_available=ccs_hours_available,
    )
    hourly_session_fee = hourly_fee(session_fee, ccs.session_hours)
    funding_basis = basis(session_fee, ccs)
    hours = split_program_hours(
        program_hours, 0, ccs.session_hours, ccs.applicable_ccs_hours, available_program_hours,
    )
    top_up = apply_top_up(
        funding_basis.gap_before,
        program_funding(hours, hourly_session_fee, funding_basis.subsidy_per_hour),
    )
    return ProgramDailyResult(
        session_hours=ccs.session_hours,
        hourly_session_fee=ccs.hourly_session_fee,
        applicable_ccs_hourly_rate=ccs.applicable_ccs_hourly_rate,
        applicable_ccs_hours=ccs.applicable_ccs_hours,
        ccs_amount=ccs.ccs_amount,
        ccs_withholding=ccs.ccs_withholding,
        ccs_entitlement=ccs.ccs_entitlement,
        gap_before_kindy=top_up.gap_before,
        kindy_funding_amount=top_up.amount,
        estimated_gap_fee=top_up.estimated_gap_fee,
        kindy_ccs_covered_hours=hours.ccs_covered,
        kindy_non_ccs_covered_hours=hours.non_ccs_covered,
        kindy_ccs_per_hour=round_to(funding_basis.subsidy_per_hour, 4),
    )


@dataclass(frozen=True)
class ProgramFortnightSession:
    week: int
    day: str
    session_hours: float
    hourly_session_fee: float
    applicable_ccs_hourly_rate: float
    applicable_ccs_hours: float
    ccs_amount: float
    ccs_withholding: float
    ccs_entitlement: float
    gap_before_kindy: float
    kindy_funding_amount: float
    estimated_gap_fee: float
    remaining_ccs_hours: float
    remaining_kindy_hours: float


@dataclass(frozen=True)
class ProgramFortnightResult:
    sessions: List[ProgramFortnightSession]
    total_session_fees: float
    total_ccs_entitlement: float
    total_kindy_funding: float
    total_gap_fee: float


def program_fortnight(
    sessions: Sequence[Session],
    ccs_percent: float,
    ccs_withholding_percent: float,
    fortnightly_ccs_hours: float,
    program_hours_per_week: float,
    basis: BasisRule,
) -> Union[ProgramFortnightResult, NotApplicable]:
    """Fold a fortnight through the CCS pool and the two weekly program pools.

    The pools live only for this call. Sessions claim hours in schedule
    order, so earlier days are funded first.
    """
    sessions = check_fortnight(sessions)
    if not has_booked_day(sessions):
        return NotApplicable(Reason.NO_BOOKED_DAYS)

    ccs_pool = HourPool(fortnightly_ccs_hours)
    program_pools = {1: HourPool(program_hours_per_week), 2: HourPool(program_hours_per_week)}
    results = []

    for i, session in enumerate(sessions):
        week = week_of(i)
        program_pool = program_pools[week]
        if not session.is_booked:
            logger.debug("Skipping unbooked session %d (%s, week %d)", i, weekday_of(i), week)
            results.append(ProgramFortnightSession(
                week, weekday_of(i), 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0,
                ccs_pool.remaining, program_pool.remaining,
            ))
            continue

        ccs = session_ccs(session, ccs_percent, ccs_withholding_percent, ccs_pool)
        funding_basis = basis(session.session_fee, ccs)

        raw_funding = 0.0
        if session.has_program:
            hours = split_program_hours(
                session.program_hours,
                session.program_offset,
                ccs.session_hours,
                ccs.applicable_ccs_hours,
                program_pool.remaining,
            )
            program_pool.draw(session.program_hours)
            if hours.total <= 0:
                logger.debug("Program pool empty for week %d at %s", week, weekday_of(i))
            raw_funding = program_funding(
                hours, hourly_fee(session.session_fee, ccs.session_hours), funding_basis.subsidy_per_hour,
            )

        top_up = apply_top_up(funding_basis.gap_before, raw_funding)
        results.append(ProgramFortnightSession(
            week=week,
            day=weekday_of(i),
            session_hours=ccs.session_hours,
            hourly_session_fee=ccs.hourly_session_fee,
            applicable_ccs_hourly_rate=ccs.applicable_ccs_hourly_rate,
            applicable_ccs_hours=ccs.applicable_ccs_hours,
            ccs_amount=ccs.ccs_amount,
            ccs_withholding=ccs.ccs_withholding,
            ccs_entitlement=ccs.ccs_entitlement,
            gap_before_kindy=top_up.gap_before,
            kindy_funding_amount=top_up.amount,
            estimated_gap_fee=top_up.estimated_gap_fee,
            remaining_ccs_hours=ccs_pool.remaining,
            remaining_kindy_hours=program_pool.remaining,
        ))

    return ProgramFortnightResult(
        sessions=results,
        total_session_fees=round_to(sum(s.session_fee for s in sessions if s.is_booked), 2),
        total_ccs_entitlement=round_to(sum(r.ccs_entitlement for r in results), 2),
        total_kindy_funding=round_to(sum(r.kindy_funding_amount for r in results), 2),
        total_gap_fee=round_to(sum(r.estimated_gap_fee for r in results), 2),
    )


###############################################################################
# FLAT DAILY FUNDING (NSW, VIC)
###############################################################################

def daily_share(weekly_amount: float, days: int) -> float:
    """Split a weekly dollar amount evenly across ``days`` booked days."""
    return round_to(weekly_amount / days, 2) if days > 0 else 0.0


def net_gap(session_fee: float, ccs: CcsResult) -> float:
    return round_to(session_fee - ccs.ccs_entitlement, 2)


@dataclass(frozen=True)
class FlatFortnightDay:
    week: int
    day: str
    session_fee: float
    ccs_entitlement: float
    top_up_amount: float
    gap_fee: float


@dataclass(frozen=True)
class FlatFortnightResult:
    sessions: List[FlatFortnightDay]
    total_session_fees: float
    total_ccs_entitlement: float
    total_top_up: float
    total_gap_fee: float


def _flat_totals(days: List[FlatFortnightDay]) -> FlatFortnightResult:
    return FlatFortnightResult(
        sessions=days,
        total_session_fees=round_to(sum(d.session_fee for d in days), 2),
        total_ccs_entitlement=round_to(sum(d.ccs_entitlement for d in days), 2),
        total_top_up=round_to(sum(d.top_up_amount for d in days), 2),
        total_gap_fee=round_to(sum(d.gap_fee for d in days), 2),
    )


def flat_fortnight_sessions(
    sessions: Sequence[Session],
    ccs_percent: float,
    ccs_withholding_percent: float,
    fortnightly_ccs_hours: float,
    weekly_amount: float,
) -> Union[FlatFortnightResult, NotApplicable]:
    """Share ``weekly_amount`` across each week's booked days of a schedule.

    The daily share is recomputed from each week's live booked-day count, so
    a three-day week and a two-day week receive different daily amounts.
    """
    sessions = check_fortnight(sessions)
    week_counts = booked_days_per_week(sessions)
    if sum(week_counts) == 0:
        return NotApplicable(Reason.NO_BOOKED_DAYS)

    ccs_pool = HourPool(fortnightly_ccs_hours)
    days = []
    for i, session in enumerate(sessions):
        week = week_of(i)
        if not session.is_booked:
            logger.debug("Skipping unbooked session %d (%s, week %d)", i, weekday_of(i), week)
            days.append(FlatFortnightDay(week, weekday_of(i), 0.0, 0.0, 0.0, 0.0))
            continue

        ccs = session_ccs(session, ccs_percent, ccs_withholding_percent, ccs_pool)
        if ccs.applicable_ccs_hours < ccs.session_hours:
            logger.debug("CCS pool exhausted at %s, week %d", weekday_of(i), week)
        top_up = apply_top_up(
            net_gap(session.session_fee, ccs),
            daily_share(weekly_amount, week_counts[week - 1]),
            cap_at_gap=True,
        )
        days.append(FlatFortnightDay(
            week=week,
            day=weekday_of(i),
            session_fee=session.session_fee,
            ccs_entitlement=ccs.ccs_entitlement,
            top_up_amount=top_up.amount,
            gap_fee=top_up.estimated_gap_fee,
        ))
    return _flat_totals(days)


def flat_fortnight(
    session_fee: float,
    session_start_hour: float,
    session_end_hour: float,
    days_per_week: int,
    ccs_percent: float,
    ccs_withholding_percent: float,
    fortnightly_ccs_hours: float,
    daily_amount: float,
) -> Union[FlatFortnightResult, NotApplicable]:
    """The same session booked ``days_per_week`` days in each week."""
    if days_per_week <= 0:
        return NotApplicable(Reason.NO_BOOKED_DAYS)
    invalid = check_session(session_fee, session_start_hour, session_end_hour)
    if invalid:
        return invalid

    session = Session(session_fee, session_start_hour, session_end_hour)
    ccs_pool = HourPool(fortnightly_ccs_hours)
    days = []
    for d in range(int(days_per_week) * 2):
        ccs = session_ccs(session, ccs_percent, ccs_withholding_percent, ccs_pool)
        top_up = apply_top_up(net_gap(session_fee, ccs), daily_amount, cap_at_gap=True)
        days.append(FlatFortnightDay(
            week=1 if d < days_per_week else 2,
            day=f"Day {d + 1}",
            session_fee=session_fee,
            ccs_entitlement=ccs.ccs_entitlement,
            top_up_amount=top_up.amount,
            gap_fee=top_up.estimated_gap_fee,
        ))
    return _flat_totals(days)
