"""
Tests for conflict checking across recurring and one-time bookings.
"""

from __future__ import annotations

from datetime import date, datetime

from call_scheduler.application.scheduling.conflicts import (
    find_conflict,
    has_overlap,
    would_overlap,
    would_overlap_upcoming,
)
from call_scheduler.domain.entities.call_type import CallType

MONDAY = date(2024, 3, 4)


def at(day: date, hhmm: str) -> datetime:
    return datetime.fromisoformat(f"{day.isoformat()}T{hhmm}")


def test_one_time_new_against_weekly_booking_from_an_earlier_monday(make_booking):
    """A weekly 11:10 Monday call blocks 11:00-11:20 but not 11:20-11:40 on a later Monday."""
    existing = [make_booking("r1", "2024-02-12", "11:10")]

    assert would_overlap(at(MONDAY, "11:00"), at(MONDAY, "11:20"), MONDAY, False, None, existing) is True
    assert would_overlap(at(MONDAY, "11:20"), at(MONDAY, "11:40"), MONDAY, False, None, existing) is False


def test_one_time_new_against_weekly_booking_on_the_same_date(make_booking):
    existing = [make_booking("r1", "2024-03-04", "11:10")]

    assert would_overlap(at(MONDAY, "11:00"), at(MONDAY, "11:20"), MONDAY, False, None, existing) is True
    assert would_overlap(at(MONDAY, "11:20"), at(MONDAY, "11:40"), MONDAY, False, None, existing) is False


def test_weekly_booking_on_another_weekday_does_not_block(make_booking):
    existing = [make_booking("r1", "2024-03-05", "11:10")]  # Tuesday
    assert would_overlap(at(MONDAY, "11:00"), at(MONDAY, "11:20"), MONDAY, False, None, existing) is False


def test_one_time_bookings_only_conflict_on_the_same_date(make_booking):
    existing = [make_booking("o1", "2024-02-26", "11:10", call_type=CallType.onboarding)]
    assert would_overlap(at(MONDAY, "11:00"), at(MONDAY, "11:20"), MONDAY, False, None, existing) is False

    existing = [make_booking("o1", "2024-03-04", "11:10", call_type=CallType.onboarding)]
    assert would_overlap(at(MONDAY, "11:30"), at(MONDAY, "11:50"), MONDAY, False, None, existing) is True
    assert would_overlap(at(MONDAY, "11:50"), at(MONDAY, "12:10"), MONDAY, False, None, existing) is False


def test_recurring_new_against_recurring_existing_matches_on_weekday(make_booking):
    existing = [make_booking("r1", "2024-02-12", "11:10")]
    assert would_overlap(at(MONDAY, "11:10"), at(MONDAY, "11:30"), MONDAY, True, 1, existing) is True
    assert would_overlap(at(MONDAY, "11:10"), at(MONDAY, "11:30"), MONDAY, True, 2, existing) is False


def test_recurring_new_against_one_time_existing_uses_new_weekday(make_booking):
    existing = [make_booking("o1", "2024-02-26", "11:10", call_type=CallType.onboarding)]
    assert would_overlap(at(MONDAY, "11:30"), at(MONDAY, "11:50"), MONDAY, True, 1, existing) is True
    assert would_overlap(at(MONDAY, "11:30"), at(MONDAY, "11:50"), MONDAY, True, 3, existing) is False


def test_no_existing_bookings_accepts():
    assert would_overlap(at(MONDAY, "11:00"), at(MONDAY, "11:20"), MONDAY, False, None, []) is False


def test_has_overlap_and_find_conflict(make_booking):
    weekly = make_booking("r1", "2024-02-12", "11:10")
    other = make_booking("o1", "2024-03-04", "15:10", call_type=CallType.onboarding)
    candidate = make_booking("n1", "2024-03-04", "11:10", is_recurring=False)
    free = make_booking("n2", "2024-03-04", "12:10", is_recurring=False)

    assert find_conflict(candidate, [other, weekly]) == weekly
    assert has_overlap(candidate, [other, weekly]) is True
    assert has_overlap(free, [other, weekly]) is False


def test_booking_never_conflicts_with_itself(make_booking):
    booking = make_booking("r1", "2024-03-04", "11:10")
    assert has_overlap(booking, [booking]) is False


def test_upcoming_weeks_are_checked_for_a_new_weekly_booking(make_booking):
    next_week = [make_booking("o1", "2024-03-11", "11:10", call_type=CallType.onboarding)]

    assert would_overlap_upcoming(at(MONDAY, "11:30"), at(MONDAY, "11:50"), MONDAY, next_week) is True
    assert would_overlap_upcoming(at(MONDAY, "11:50"), at(MONDAY, "12:10"), MONDAY, next_week) is False

    two_weeks = [make_booking("o2", "2024-03-18", "11:10", call_type=CallType.onboarding)]
    assert would_overlap_upcoming(at(MONDAY, "11:10"), at(MONDAY, "11:30"), MONDAY, two_weeks) is False
    assert would_overlap_upcoming(at(MONDAY, "11:10"), at(MONDAY, "11:30"), MONDAY, two_weeks, horizon_weeks=2) is True


def test_upcoming_check_ignores_past_and_weekly_bookings(make_booking):
    past = make_booking("o1", "2024-02-26", "11:10", call_type=CallType.onboarding)
    weekly = make_booking("r1", "2024-03-11", "11:10")

    assert would_overlap_upcoming(at(MONDAY, "11:10"), at(MONDAY, "11:30"), MONDAY, [past, weekly]) is False
