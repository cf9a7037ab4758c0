"""Shared fixtures for building fortnightly schedules."""
from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from childcare_gap.sessions import FORTNIGHT_LENGTH, Session  # noqa: E402


@pytest.fixture
def build_fortnight():
    """Build ten sessions from a set of booked slot indexes (0-9).

    ``program_slots`` get the program window ``program``; the others have none.
    """
    def _build(booked, fee, start, end, program=None, program_slots=()):
        booked = set(booked)
        program_slots = set(program_slots)
        sessions = []
        for i in range(FORTNIGHT_LENGTH):
            if i not in booked:
                sessions.append(Session(booked=False))
                continue
            window = program if (program and i in program_slots) else (None, None)
            sessions.append(Session(fee, start, end, True, *window))
        return sessions

    return _build


@pytest.fixture
def weekday_slots():
    """Slot indexes for the given weekday indexes in both weeks."""
    def _slots(*days):
        return [d for d in days] + [d + 5 for d in days]

    return _slots
