"""
Conflict detection for new bookings.

Which existing bookings are compared depends on the recurrence of both sides:
- recurring vs recurring: same recurring weekday
- recurring existing vs one-time new: weekday of both anchor dates
- one-time existing vs recurring new: existing weekday vs new recurring weekday
- one-time vs one-time: same calendar date

A weekly booking is also checked against one-time bookings on the later
weeks it is projected onto (would_overlap_upcoming).

When days match on weekday, the existing booking is moved onto the new
booking's date before the intervals are compared, so only time of day counts.

The result is advisory. Nothing is reserved, so a check followed by a write is
not atomic and two concurrent writers can both pass the check.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Iterable

from call_scheduler.application.scheduling.overlap import overlaps
from call_scheduler.application.scheduling.recurrence import DEFAULT_HORIZON_WEEKS
from call_scheduler.application.utils.date_utils import day_of_week, weeks_between
from call_scheduler.domain.entities.booking import Booking


def _same_day(
    existing: Booking,
    day: date,
    is_recurring: bool,
    recurring_day_of_week: int | None,
) -> bool:
    if existing.is_recurring and is_recurring:
        return existing.recurring_day_of_week == recurring_day_of_week
    if existing.is_recurring:
        return day_of_week(existing.date) == day_of_week(day)
    if is_recurring:
        return day_of_week(existing.date) == recurring_day_of_week
    return existing.date == day


def _interval_on(existing: Booking, day: date) -> tuple[datetime, datetime]:
    start = datetime.combine(day, existing.start_time.time())
    return start, start + (existing.end_time - existing.start_time)


def _conflicts(
    existing: Booking,
    start_time: datetime,
    end_time: datetime,
    day: date,
    is_recurring: bool,
    recurring_day_of_week: int | None,
) -> bool:
    if not _same_day(existing, day, is_recurring, recurring_day_of_week):
        return False
    existing_start, existing_end = _interval_on(existing, day)
    return overlaps(start_time, end_time, existing_start, existing_end)


def would_overlap(
    start_time: datetime,
    end_time: datetime,
    day: date,
    is_recurring: bool,
    recurring_day_of_week: int | None,
    existing_bookings: Iterable[Booking],
) -> bool:
    """True when the proposed interval conflicts with any existing booking."""
    return any(
        _conflicts(existing, start_time, end_time, day, is_recurring, recurring_day_of_week)
        for existing in existing_bookings
    )


def find_conflict(new_booking: Booking, existing_bookings: Iterable[Booking]) -> Booking | None:
    """First existing booking that conflicts with new_booking, if any."""
    for existing in existing_bookings:
        if existing.storage_id == new_booking.storage_id:
            continue
        if _conflicts(
            existing,
            new_booking.start_time,
            new_booking.end_time,
            new_booking.date,
            new_booking.is_recurring,
            new_booking.recurring_day_of_week,
        ):
            return existing
    return None


def has_overlap(new_booking: Booking, existing_bookings: Iterable[Booking]) -> bool:
    return find_conflict(new_booking, existing_bookings) is not None


def would_overlap_upcoming(
    start_time: datetime,
    end_time: datetime,
    day: date,
    existing_bookings: Iterable[Booking],
    horizon_weeks: int | None = DEFAULT_HORIZON_WEEKS,
) -> bool:
    """
    True when a weekly booking anchored on day would land on a one-time booking
    in one of the later weeks it is projected onto.
    """
    for existing in existing_bookings:
        if existing.is_recurring or day_of_week(existing.date) != day_of_week(day):
            continue
        weeks = weeks_between(day, existing.date)
        if weeks < 1 or (horizon_weeks is not None and weeks > horizon_weeks):
            continue
        offset = existing.date - day
        if overlaps(start_time + offset, end_time + offset, existing.start_time, existing.end_time):
            return True
    return False
