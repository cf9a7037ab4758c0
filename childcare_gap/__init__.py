"""Out-of-pocket child care cost estimates: federal CCS plus state top-ups."""

from .act import calculate_act_daily, calculate_act_fortnightly
from .ccs import calculate_ccs_daily, calculate_ccs_fortnightly, compute_session_ccs
from .income import estimate_ccs, higher_ccs_percent, standard_ccs_percent
from .nsw import calculate_nsw_daily, calculate_nsw_fortnightly, calculate_nsw_fortnightly_sessions
from .outcome import NotApplicable, Reason, is_applicable
from .qld import calculate_qld_daily, calculate_qld_fortnightly
from .rates import DEFAULTS, RATES_2026, hourly_rate_cap
from .rounding import round_to
from .sessions import WEEKDAYS, Session, repeat_fortnight
from .vic import calculate_vic_daily, calculate_vic_fortnightly, calculate_vic_fortnightly_sessions
from .weekly import compute_weekly_gaps

__all__ = [
    "RATES_2026",
    "DEFAULTS",
    "hourly_rate_cap",
    "round_to",
    "Session",
    "WEEKDAYS",
    "repeat_fortnight",
    "NotApplicable",
    "Reason",
    "is_applicable",
    "compute_session_ccs",
    "calculate_ccs_daily",
    "calculate_ccs_fortnightly",
    "estimate_ccs",
    "standard_ccs_percent",
    "higher_ccs_percent",
    "calculate_act_daily",
    "calculate_act_fortnightly",
    "calculate_nsw_daily",
    "calculate_nsw_fortnightly",
    "calculate_nsw_fortnightly_sessions",
    "calculate_qld_daily",
    "calculate_qld_fortnightly",
    "calculate_vic_daily",
    "calculate_vic_fortnightly",
    "calculate_vic_fortnightly_sessions",
    "compute_weekly_gaps",
]
