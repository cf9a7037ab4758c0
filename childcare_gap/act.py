"""ACT 3-Year-Old Preschool.

Preschool program hours are free to the parent: the funding ($2,575/year for
300 hours) is paid to the provider and covers the gap between the session
fee and CCS for the preschool hours. The ACT gap is taken against the
pre-withholding CCS amount, so withholding never reaches the family's gap.
"""

from __future__ import annotations

from typing import Optional, Sequence, Union

from .ccs import CcsResult
from .outcome import NotApplicable
from .rates import RATES_2026, act_program_hours_per_week
from .rounding import round_to
from .sessions import Session
from .topup import (
    FundingBasis,
    ProgramDailyResult,
    ProgramFortnightResult,
    program_daily,
    program_fortnight,
)

ACT_PROGRAM_WEEKS_PER_YEAR = RATES_2026["act"]["program_weeks"]
ACT_TOTAL_PROGRAM_HOURS = RATES_2026["act"]["total_program_hours"]


def act_funding_basis(session_fee: float, ccs: CcsResult) -> FundingBasis:
    subsidy_per_hour = ccs.ccs_amount / ccs.applicable_ccs_hours if ccs.applicable_ccs_hours > 0 else 0.0
    return FundingBasis(
        gap_before=round_to(session_fee - ccs.ccs_amount, 2),
        subsidy_per_hour=subsidy_per_hour,
    )


def calculate_act_daily(
    ccs_percent: float,
    ccs_withholding_percent: float,
    session_fee: float,
    session_start_hour: float,
    session_end_hour: float,
    kindy_program_hours: float,
    ccs_hours_available: Optional[float] = None,
) -> ProgramDailyResult:
    """Daily out-of-pocket cost for a session containing a preschool block."""
    return program_daily(
        session_fee,
        session_start_hour,
        session_end_hour,
        ccs_percent,
        ccs_withholding_percent,
        kindy_program_hours,
        act_funding_basis,
        ccs_hours_available=ccs_hours_available,
    )


def calculate_act_fortnightly(
    sessions: Sequence[Session],
    ccs_percent: float,
    ccs_withholding_percent: float,
    fortnightly_ccs_hours: float,
    program_weeks: float = ACT_PROGRAM_WEEKS_PER_YEAR,
) -> Union[ProgramFortnightResult, NotApplicable]:
    """Fortnightly costs; each week gets ``300 / program_weeks`` preschool hours."""
    return program_fortnight(
        sessions,
        ccs_percent,
        ccs_withholding_percent,
        fortnightly_ccs_hours,
        act_program_hours_per_week(program_weeks),
        act_funding_basis,
    )
