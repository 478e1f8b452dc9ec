"""
Weekly recurrence for follow-up bookings.

Two separate rules live here:
- projection: a recurring booking is re-materialized on a later date, limited
  to a horizon of whole weeks after its anchor date (one week by default)
- display marking: a booked slot is shown as a recurring occurrence on any
  later week with the same weekday, with no horizon
"""

from __future__ import annotations

from dataclasses import replace
from datetime import date

from call_scheduler.application.utils.date_utils import combine, day_of_week, weeks_between
from call_scheduler.domain.entities.booking import Booking
from call_scheduler.domain.entities.call_type import CallType, calculate_end_time

DEFAULT_HORIZON_WEEKS = 1


def occurs_on(booking: Booking, on_date: date, horizon_weeks: int | None = DEFAULT_HORIZON_WEEKS) -> bool:
    """
    Whether a recurring booking manifests on on_date.

    With horizon_weeks=1 only the occurrence exactly one week after the anchor
    date counts. horizon_weeks=None projects onto every later week.
    """
    if not booking.is_recurring or booking.recurring_day_of_week is None:
        return False
    if day_of_week(on_date) != booking.recurring_day_of_week:
        return False
    weeks = weeks_between(booking.date, on_date)
    if horizon_weeks is None:
        return weeks >= 1
    return 1 <= weeks <= horizon_weeks


def project_booking(
    booking: Booking,
    on_date: date,
    horizon_weeks: int | None = DEFAULT_HORIZON_WEEKS,
) -> Booking | None:
    if not occurs_on(booking, on_date, horizon_weeks):
        return None
    start_time = combine(on_date, booking.time)
    return replace(
        booking,
        id=f"{booking.id}-{on_date.isoformat()}",
        date=on_date,
        start_time=start_time,
        end_time=calculate_end_time(start_time, booking.call_type),
        original_id=booking.storage_id,
    )


def is_recurring_display(booking: Booking | None, on_date: date) -> bool:
    """Display-only marking of a recurring follow-up on the same weekday of a later week."""
    if booking is None or not booking.is_recurring or booking.call_type != CallType.followup:
        return False
    if day_of_week(on_date) != day_of_week(booking.start_time.date()):
        return False
    return weeks_between(booking.start_time, on_date) >= 1
