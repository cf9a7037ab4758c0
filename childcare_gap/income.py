"""Estimate a family's CCS percentage from adjusted taxable income."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .rates import CCS_HOURLY_RATE_CAP, RATES_2026


def _taper(income: float, start: float, step: float) -> int:
    return math.floor((income - start) / step)


def standard_ccs_percent(income: float) -> int:
    """Standard rate: 90% tapering 1 point per $5,000 above the threshold."""
    r = RATES_2026["income"]["standard"]
    if income <= r["lower_threshold"]:
        return r["max_percent"]
    if income >= r["cutoff"]:
        return 0
    return max(0, r["max_percent"] - _taper(income, r["lower_threshold"], r["taper_step"]))


def higher_ccs_percent(income: float) -> int:
    """Higher rate for a second or later child under 6."""
    r = RATES_2026["income"]["higher"]
    if income <= r["lower_threshold"]:
        return r["max_percent"]
    if income >= r["cutoff"]:
        return 0
    # First taper, 95% down to 80%
    if income < r["first_floor_from"]:
        return max(r["first_floor"], r["max_percent"] - _taper(income, r["lower_threshold"], r["taper_step"]))
    if income < r["second_taper_from"]:
        return r["first_floor"]
    # Second taper, 80% down to 50%
    if income < r["second_floor_from"]:
        return max(r["second_floor"], r["first_floor"] - _taper(income, r["second_taper_from"], r["taper_step"]))
    return r["second_floor"]


@dataclass(frozen=True)
class CcsEstimate:
    standard_percent: int
    higher_percent: int
    applicable_percent: int
    hourly_rate_cap: float


def estimate_ccs(
    income: float,
    number_of_children: int = 1,
    use_higher_ccs: bool = False,
) -> CcsEstimate:
    """Return the applicable CCS % plus both raw percentages.

    The higher rate only applies when asked for, with more than one child,
    and below the higher-rate cutoff.
    """
    standard = standard_ccs_percent(income)
    higher = higher_ccs_percent(income)
    eligible_for_higher = (
        use_higher_ccs
        and number_of_children > 1
        and income < RATES_2026["income"]["higher"]["cutoff"]
    )
    return CcsEstimate(
        standard_percent=standard,
        higher_percent=higher,
        applicable_percent=higher if eligible_for_higher else standard,
        hourly_rate_cap=CCS_HOURLY_RATE_CAP,
    )
