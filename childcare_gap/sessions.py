"""Sessions of care and the ten-slot fortnightly schedule."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable, List, Optional, Sequence, Tuple

WEEKDAYS: Tuple[str, ...] = ("Mon", "Tue", "Wed", "Thu", "Fri")
DAYS_PER_WEEK = len(WEEKDAYS)
FORTNIGHT_LENGTH = DAYS_PER_WEEK * 2


@dataclass(frozen=True)
class Session:
    """One day of care. Hours are fractional hour-of-day (8.5 = 8:30am)."""
    session_fee: float = 0.0
    start_hour: float = 0.0
    end_hour: float = 0.0
    booked: bool = True
    # State-funded program window inside the session (ACT/QLD)
    program_start_hour: Optional[float] = None
    program_end_hour: Optional[float] = None

    @property
    def hours(self) -> float:
        return self.end_hour - self.start_hour

    @property
    def is_booked(self) -> bool:
        return self.booked and self.session_fee > 0 and self.end_hour > self.start_hour

    @property
    def has_program(self) -> bool:
        return self.program_start_hour is not None and self.program_end_hour is not None

    @property
    def program_hours(self) -> float:
        if not self.has_program:
            return 0.0
        return self.program_end_hour - self.program_start_hour

    @property
    def program_offset(self) -> float:
        """Hours from session start to program start."""
        if not self.has_program:
            return 0.0
        return self.program_start_hour - self.start_hour


def week_of(index: int) -> int:
    return 1 if index < DAYS_PER_WEEK else 2


def weekday_of(index: int) -> str:
    return WEEKDAYS[index % DAYS_PER_WEEK]


def check_fortnight(sessions: Sequence[Session]) -> List[Session]:
    sessions = list(sessions)
    if len(sessions) != FORTNIGHT_LENGTH:
        raise ValueError(f"A fortnight has {FORTNIGHT_LENGTH} sessions, got {len(sessions)}")
    return sessions


def has_booked_day(sessions: Iterable[Session]) -> bool:
    return any(s.is_booked for s in sessions)


def booked_days_per_week(sessions: Sequence[Session]) -> Tuple[int, int]:
    week1 = sum(1 for s in sessions[:DAYS_PER_WEEK] if s.is_booked)
    week2 = sum(1 for s in sessions[DAYS_PER_WEEK:] if s.is_booked)
    return week1, week2


def repeat_fortnight(
    session: Session,
    days: Iterable[int],
    program_days: Iterable[int] = (),
) -> List[Session]:
    """Book ``session`` on the given weekday indexes (0 = Mon) of both weeks.

    Days listed in ``program_days`` keep the session's program window; other
    booked days have it cleared.
    """
    days = set(days)
    program_days = set(program_days)
    fortnight = []
    for i in range(FORTNIGHT_LENGTH):
        day = i % DAYS_PER_WEEK
        if day not in days:
            fortnight.append(Session(booked=False))
        elif day in program_days:
            fortnight.append(session)
        else:
            fortnight.append(replace(session, program_start_hour=None, program_end_hour=None))
    return fortnight


class HourPool:
    """Running remainder of an hour budget, never over-drawn."""

    def __init__(self, hours: float):
        self.remaining = max(0.0, hours)

    def draw(self, hours: float) -> float:
        """Take up to ``hours`` from the pool and return what was granted."""
        granted = min(max(0.0, hours), max(0.0, self.remaining))
        self.remaining = max(0.0, self.remaining - granted)
        return granted

    def __repr__(self) -> str:
        return f"HourPool(remaining={self.remaining!r})"
