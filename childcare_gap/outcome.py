"""Result-or-reason values returned by calculators that validate their inputs."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Reason(str, Enum):
    INVALID_TIME_RANGE = "invalid_time_range"
    NO_FEE = "no_fee"
    NO_BOOKED_DAYS = "no_booked_days"
    POOL_COVERS_FORTNIGHT = "pool_covers_fortnight"


@dataclass(frozen=True)
class NotApplicable:
    """No meaningful result for the given inputs.

    Falsy, so ``if result:`` reads the same as a null check.
    """
    reason: Reason

    def __bool__(self) -> bool:
        return False


def is_applicable(result: object) -> bool:
    return not isinstance(result, NotApplicable)


def check_session(session_fee: float, start_hour: float, end_hour: float) -> Optional[NotApplicable]:
    """Return the reason a single session cannot be priced, if any."""
    if end_hour <= start_hour:
        return NotApplicable(Reason.INVALID_TIME_RANGE)
    if session_fee <= 0:
        return NotApplicable(Reason.NO_FEE)
    return None
