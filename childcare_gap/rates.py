"""Child Care Subsidy & state top-up rate tables
==============================================

FY2026 (1 July 2025 – 30 June 2026) figures.

Notes
-----
* Hourly rate caps follow the Family Assistance Guide 3.5.3.
* Income thresholds are the FY2026 CCS income-test bands.
* State programs: ACT 3-Year-Old Preschool, NSW Start Strong for Long Day Care,
  QLD Free Kindy, VIC Free Kinder (2026 amounts).
* All monetary amounts are stored in *dollars* (AUD).
"""

from __future__ import annotations

from typing import Dict

###############################################################################
# FY2026 RATES & THRESHOLDS
###############################################################################

RATES_2026: Dict[str, Dict] = {
    "ccs": {
        # Hourly fee caps
        "hourly_rate_cap": {
            "centre-based": 14.63,   # centre based day care, below school age
            "school-age": 12.81,     # OSHC and school-age children
            "family-day-care": 13.56,
        },
        "default_withholding_percent": 5,
        # Fortnightly subsidised hours by recognised activity (hours/fortnight)
        "activity_test_hours": {
            "8-16": 36,
            "17-48": 72,
            "48+": 100,
        },
    },
    "income": {
        "standard": {
            "max_percent": 90,
            "lower_threshold": 85_279,
            "cutoff": 535_279,
            "taper_step": 5_000,  # 1 point per $5,000
        },
        "higher": {
            "max_percent": 95,
            "lower_threshold": 143_273,
            "first_floor": 80,
            "first_floor_from": 188_273,
            "second_taper_from": 267_563,
            "second_floor": 50,
            "second_floor_from": 357_563,
            "cutoff": 367_563,
            "taper_step": 3_000,  # 1 point per $3,000
        },
    },
    "act": {
        # $2,575/year for 300 hours, paid to the provider
        "total_program_hours": 300,
        "program_weeks": 40,
    },
    "nsw": {
        # Start Strong for LDC annual fee relief by age group and tier
        "fee_relief": {
            "4+": {"standard": 1783, "maximum": 2563},
            "3": {"standard": 423, "maximum": 769},
        },
    },
    "qld": {
        "kindy_hours_per_week": 15,
        # Free Kindy worked examples are published at 5% withholding
        "normalised_withholding_rate": 0.05,
    },
    "vic": {
        "offset": {"standard": 2101, "priority": 2693},
        "program_weeks": 40,
        "baseline_hours_per_week": 15,
    },
}

# Presentation defaults for the calculator inputs
DEFAULTS: Dict[str, float] = {
    "ccs_percent": 85,
    "ccs_withholding_percent": 5,
    "session_fee": 150,
    "session_start_hour": 8,
    "session_end_hour": 18,
    "ccs_hours_per_fortnight": 72,
    "days_per_week": 3,
}

CARE_TYPES = ("centre-based", "family-day-care", "oshc")


###############################################################################
# HELPER FUNCTIONS
###############################################################################

def hourly_rate_cap(care_type: str = "centre-based", school_age: bool = False) -> float:
    """Return the CCS hourly rate cap for a care type."""
    caps = RATES_2026["ccs"]["hourly_rate_cap"]
    if care_type not in CARE_TYPES:
        raise ValueError(f"Unknown care type: {care_type!r}")
    if care_type == "family-day-care":
        return caps["family-day-care"]
    if care_type == "oshc" or school_age:
        return caps["school-age"]
    return caps["centre-based"]


def activity_test_hours(tier: str) -> int:
    return RATES_2026["ccs"]["activity_test_hours"][tier]


def act_program_hours_per_week(program_weeks: float = RATES_2026["act"]["program_weeks"]) -> float:
    """Weekly ACT preschool hours: 300 hours spread over the program weeks."""
    if program_weeks <= 0:
        return 0.0
    return RATES_2026["act"]["total_program_hours"] / program_weeks


CCS_HOURLY_RATE_CAP = RATES_2026["ccs"]["hourly_rate_cap"]["centre-based"]
