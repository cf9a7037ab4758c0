"""QLD Free Kindy: 15 funded kindy hours a week, 40 weeks a year.

Kindy hours are funded against a CCS-per-hour figure normalised to at most
5% withholding, which is how the Department of Education's published
worked examples are calculated. The gap before funding still uses the
family's actual entitlement.
"""

from __future__ import annotations

from functools import partial
from typing import Optional, Sequence, Union

from .ccs import CcsResult
from .outcome import NotApplicable
from .rates import RATES_2026
from .rounding import round_to
from .sessions import Session
from .topup import (
    FundingBasis,
    ProgramDailyResult,
    ProgramFortnightResult,
    program_daily,
    program_fortnight,
)

QLD_KINDY_HOURS_PER_WEEK = RATES_2026["qld"]["kindy_hours_per_week"]
NORMALISED_WITHHOLDING_RATE = RATES_2026["qld"]["normalised_withholding_rate"]


def normalised_entitlement(ccs: CcsResult, ccs_withholding_percent: float) -> float:
    """Re-derive the entitlement with withholding capped at 5%.

    The actual entitlement is grossed back up by the actual withholding rate,
    then withholding is re-applied at ``min(actual, 5%)``. The re-applied
    withholding is rounded to 4 decimals before the per-hour rate is derived.
    """
    rate = ccs_withholding_percent / 100
    entitlement = ccs.ccs_entitlement
    if rate < 1:
        grossed_up = entitlement + entitlement * ((rate * 100) / (100 - rate * 100))
    else:
        grossed_up = ccs.ccs_amount
    # Below 5% the family's own withholding stands; it is never raised to 5%
    withholding = round_to(grossed_up * min(rate, NORMALISED_WITHHOLDING_RATE), 4)
    return grossed_up - withholding


def qld_funding_basis(session_fee: float, ccs: CcsResult, ccs_withholding_percent: float) -> FundingBasis:
    normalised = normalised_entitlement(ccs, ccs_withholding_percent)
    return FundingBasis(
        gap_before=round_to(session_fee - ccs.ccs_entitlement, 2),
        subsidy_per_hour=normalised / ccs.applicable_ccs_hours if ccs.applicable_ccs_hours > 0 else 0.0,
    )


def calculate_qld_daily(
    ccs_percent: float,
    ccs_withholding_percent: float,
    session_fee: float,
    session_start_hour: float,
    session_end_hour: float,
    kindy_program_hours: float,
    ccs_hours_available: Optional[float] = None,
) -> ProgramDailyResult:
    """Daily out-of-pocket cost for a Free Kindy session (at most 15 kindy hours)."""
    return program_daily(
        session_fee,
        session_start_hour,
        session_end_hour,
        ccs_percent,
        ccs_withholding_percent,
        kindy_program_hours,
        partial(qld_funding_basis, ccs_withholding_percent=ccs_withholding_percent),
        available_program_hours=QLD_KINDY_HOURS_PER_WEEK,
        ccs_hours_available=ccs_hours_available,
    )


def calculate_qld_fortnightly(
    sessions: Sequence[Session],
    ccs_percent: float,
    ccs_withholding_percent: float,
    fortnightly_ccs_hours: float,
) -> Union[ProgramFortnightResult, NotApplicable]:
    return program_fortnight(
        sessions,
        ccs_percent,
        ccs_withholding_percent,
        fortnightly_ccs_hours,
        QLD_KINDY_HOURS_PER_WEEK,
        partial(qld_funding_basis, ccs_withholding_percent=ccs_withholding_percent),
    )
