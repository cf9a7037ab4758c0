"""Federal Child Care Subsidy engine.

``compute_session_ccs`` is the core every calculator shares: state and
territory funding (Free Kindy, Start Strong, ...) is layered on top of its
result. ``calculate_ccs_daily`` and ``calculate_ccs_fortnightly`` are the
CCS-only calculators.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Union

from .outcome import NotApplicable, Reason, check_session
from .rates import CCS_HOURLY_RATE_CAP, hourly_rate_cap as rate_cap_for
from .rounding import round_to
from .sessions import HourPool, Session, check_fortnight, has_booked_day, week_of, weekday_of

logger = logging.getLogger(__name__)

###############################################################################
# CORE SESSION ENGINE
###############################################################################

@dataclass(frozen=True)
class CcsResult:
    session_hours: float
    hourly_session_fee: float
    applicable_ccs_hourly_rate: float
    applicable_ccs_hours: float
    ccs_amount: float
    ccs_withholding: float
    ccs_entitlement: float


def hourly_fee(session_fee: float, session_hours: float) -> float:
    return session_fee / session_hours if session_hours > 0 else 0.0


def compute_session_ccs(
    session_fee: float,
    session_start_hour: float,
    session_end_hour: float,
    ccs_percent: float,
    ccs_withholding_percent: float,
    hourly_rate_cap: float = CCS_HOURLY_RATE_CAP,
    ccs_hours_available: Optional[float] = None,
) -> CcsResult:
    """Compute the CCS entitlement for a single session.

    The subsidy rate is taken on the lower of the actual hourly fee and the
    cap, and the amount can never exceed the fee charged. ``ccs_hours_available``
    limits the subsidised hours when a fortnightly pool is being drawn down;
    omitted, the whole session is subsidised.

    Amounts are kept at 4 decimals so withholding is applied before any
    cent rounding.
    """
    session_hours = session_end_hour - session_start_hour
    hourly_session_fee = hourly_fee(session_fee, session_hours)

    ccs_rate = ccs_percent / 100
    applicable_ccs_hourly_rate = round_to(min(hourly_session_fee, hourly_rate_cap) * ccs_rate, 2)

    if ccs_hours_available is None:
        applicable_ccs_hours = session_hours
    else:
        applicable_ccs_hours = min(session_hours, max(0, ccs_hours_available))

    ccs_amount = round_to(min(applicable_ccs_hours * applicable_ccs_hourly_rate, session_fee), 4)
    ccs_withholding = round_to(ccs_amount * (ccs_withholding_percent / 100), 4)
    ccs_entitlement = round_to(ccs_amount - ccs_withholding, 4)

    return CcsResult(
        session_hours=session_hours,
        hourly_session_fee=round_to(hourly_session_fee, 4),
        applicable_ccs_hourly_rate=applicable_ccs_hourly_rate,
        applicable_ccs_hours=applicable_ccs_hours,
        ccs_amount=ccs_amount,
        ccs_withholding=ccs_withholding,
        ccs_entitlement=ccs_entitlement,
    )


def session_ccs(
    session: Session,
    ccs_percent: float,
    ccs_withholding_percent: float,
    pool: HourPool,
    hourly_rate_cap: float = CCS_HOURLY_RATE_CAP,
) -> CcsResult:
    """Price one fortnight session, drawing its subsidised hours from ``pool``."""
    granted = pool.draw(session.hours)
    return compute_session_ccs(
        session.session_fee,
        session.start_hour,
        session.end_hour,
        ccs_percent,
        ccs_withholding_percent,
        hourly_rate_cap=hourly_rate_cap,
        ccs_hours_available=granted,
    )


###############################################################################
# CCS-ONLY CALCULATORS
###############################################################################

@dataclass(frozen=True)
class CcsDailyResult:
    session_hours: float
    hourly_session_fee: float
    hourly_rate_cap: float
    ccs_hourly_rate: float
    ccs_amount: float
    ccs_withholding: float
    ccs_entitlement: float
    estimated_gap_fee: float


def calculate_ccs_daily(
    ccs_percent: float,
    ccs_withholding_percent: float,
    session_fee: float,
    session_start_hour: float,
    session_end_hour: float,
    care_type: str = "centre-based",
    school_age: bool = False,
) -> Union[CcsDailyResult, NotApplicable]:
    invalid = check_session(session_fee, session_start_hour, session_end_hour)
    if invalid:
        return invalid

    cap = rate_cap_for(care_type, school_age)
    ccs = compute_session_ccs(
        session_fee, session_start_hour, session_end_hour,
        ccs_percent, ccs_withholding_percent, hourly_rate_cap=cap,
    )
    return CcsDailyResult(
        session_hours=ccs.session_hours,
        hourly_session_fee=ccs.hourly_session_fee,
        hourly_rate_cap=cap,
        ccs_hourly_rate=ccs.applicable_ccs_hourly_rate,
        ccs_amount=ccs.ccs_amount,
        ccs_withholding=ccs.ccs_withholding,
        ccs_entitlement=ccs.ccs_entitlement,
        estimated_gap_fee=round_to(max(0, session_fee - ccs.ccs_entitlement), 2),
    )


@dataclass(frozen=True)
class CcsFortnightSession:
    week: int
    day: str
    session_hours: float
    applicable_ccs_hours: float
    ccs_amount: float
    ccs_withholding: float
    ccs_entitlement: float
    gap_fee: float
    remaining_ccs_hours: float


@dataclass(frozen=True)
class CcsFortnightResult:
    sessions: List[CcsFortnightSession]
    total_session_fees: float
    total_ccs_entitlement: float
    total_gap_fee: float


def calculate_ccs_fortnightly(
    sessions: Sequence[Session],
    ccs_percent: float,
    ccs_withholding_percent: float,
    fortnightly_ccs_hours: float,
    care_type: str = "centre-based",
    school_age: bool = False,
) -> Union[CcsFortnightResult, NotApplicable]:
    """Price a ten-session fortnight against the fortnightly CCS hours pool.

    Sessions draw on the pool in schedule order; once it is spent, later
    sessions get no subsidy.
    """
    sessions = check_fortnight(sessions)
    if not has_booked_day(sessions):
        return NotApplicable(Reason.NO_BOOKED_DAYS)

    cap = rate_cap_for(care_type, school_age)
    pool = HourPool(fortnightly_ccs_hours)
    results = []
    for i, session in enumerate(sessions):
        if not session.is_booked:
            logger.debug("Skipping unbooked session %d (%s, week %d)", i, weekday_of(i), week_of(i))
            results.append(CcsFortnightSession(
                week_of(i), weekday_of(i), 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, pool.remaining,
            ))
            continue

        ccs = session_ccs(session, ccs_percent, ccs_withholding_percent, pool, hourly_rate_cap=cap)
        if ccs.applicable_ccs_hours < ccs.session_hours:
            logger.debug("CCS pool exhausted at session %d (%s, week %d)", i, weekday_of(i), week_of(i))
        results.append(CcsFortnightSession(
            week=week_of(i),
            day=weekday_of(i),
            session_hours=ccs.session_hours,
            applicable_ccs_hours=ccs.applicable_ccs_hours,
            ccs_amount=ccs.ccs_amount,
            ccs_withholding=ccs.ccs_withholding,
            ccs_entitlement=ccs.ccs_entitlement,
            gap_fee=round_to(max(0, session.session_fee - ccs.ccs_entitlement), 2),
            remaining_ccs_hours=pool.remaining,
        ))

    return CcsFortnightResult(
        sessions=results,
        total_session_fees=round_to(sum(s.session_fee for s in sessions if s.is_booked), 2),
        total_ccs_entitlement=round_to(sum(r.ccs_entitlement for r in results), 2),
        total_gap_fee=round_to(sum(r.gap_fee for r in results), 2),
    )
