"""
Daily slot grid and booking placement.

The grid runs from 10:30 to 19:30 in 20 minute slots (27 per day). Bookings
for a date are the ones stored on it plus recurring bookings projected onto
it; each booking marks the slot it starts on (with the booking attached) and
any following slots it covers (as continuations).
"""

from __future__ import annotations

import math
from dataclasses import replace
from datetime import date, datetime, time, timedelta
from typing import Iterable, Sequence

from call_scheduler.application.exceptions import InvalidInputError
from call_scheduler.application.scheduling.conflicts import would_overlap
from call_scheduler.application.scheduling.overlap import overlaps
from call_scheduler.application.scheduling.recurrence import DEFAULT_HORIZON_WEEKS, project_booking
from call_scheduler.application.utils.date_utils import parse_date
from call_scheduler.domain.entities.booking import Booking
from call_scheduler.domain.entities.call_type import CallType, calculate_end_time, call_duration
from call_scheduler.domain.entities.time_slot import TimeSlot

DAY_START = time(10, 30)
DAY_END = time(19, 30)
SLOT_MINUTES = 20

# A booking anchors on a slot when their starts are this close.
ANCHOR_TOLERANCE = timedelta(seconds=60)


def generate_slots(day: date | datetime) -> list[TimeSlot]:
    day = parse_date(day)
    step = timedelta(minutes=SLOT_MINUTES)
    current = datetime.combine(day, DAY_START)
    end = datetime.combine(day, DAY_END)

    slots: list[TimeSlot] = []
    while current < end:
        slot_end = current + step
        slots.append(
            TimeSlot(
                time=current.strftime("%H:%M"),
                start_time=current,
                end_time=slot_end,
            )
        )
        current = slot_end
    return slots


def bookings_for_date(
    day: date | datetime,
    all_bookings: Iterable[Booking],
    horizon_weeks: int | None = DEFAULT_HORIZON_WEEKS,
) -> list[Booking]:
    """Bookings stored on day, followed by recurring bookings projected onto it."""
    day = parse_date(day)
    direct: list[Booking] = []
    projected: list[Booking] = []

    for booking in all_bookings:
        if booking.date == day:
            direct.append(booking)
            continue
        instance = project_booking(booking, day, horizon_weeks)
        if instance is not None:
            projected.append(instance)

    return direct + projected


def populate_slots(slots: Sequence[TimeSlot], bookings: Sequence[Booking]) -> list[TimeSlot]:
    """
    Mark slots covered by bookings. Returns new slots, inputs are not modified.

    The first booking overlapping a slot wins; bookings are expected not to
    overlap each other.
    """
    populated: list[TimeSlot] = []
    for slot in slots:
        booking = next(
            (b for b in bookings if overlaps(slot.start_time, slot.end_time, b.start_time, b.end_time)),
            None,
        )
        if booking is None:
            populated.append(slot)
            continue

        is_anchor = abs(booking.start_time - slot.start_time) < ANCHOR_TOLERANCE
        populated.append(
            replace(
                slot,
                is_booked=True,
                booking=booking if is_anchor else None,
                is_booking_continuation=not is_anchor,
            )
        )
    return populated


def find_slot_index(slots: Sequence[TimeSlot], slot_start: datetime) -> int:
    for index, slot in enumerate(slots):
        if slot.start_time == slot_start:
            return index
    raise InvalidInputError(f"No slot starts at {slot_start.isoformat()}")


def required_slots(call_type: CallType) -> int:
    return math.ceil(call_duration(call_type) / SLOT_MINUTES)


def can_accommodate_booking(
    slot_start: datetime,
    call_type: CallType,
    slots: Sequence[TimeSlot],
    existing_bookings: Iterable[Booking],
) -> bool:
    """Whether a call of call_type can start at slot_start on a populated grid."""
    index = find_slot_index(slots, slot_start)
    required = required_slots(call_type)
    if index + required > len(slots):
        return False
    if any(slot.is_booked for slot in slots[index : index + required]):
        return False

    end_time = calculate_end_time(slot_start, call_type)
    return not would_overlap(slot_start, end_time, slot_start.date(), False, None, existing_bookings)


def available_start_times(
    day: date | datetime,
    call_type: CallType,
    all_bookings: Sequence[Booking],
    horizon_weeks: int | None = DEFAULT_HORIZON_WEEKS,
) -> list[str]:
    slots = populate_slots(generate_slots(day), bookings_for_date(day, all_bookings, horizon_weeks))
    return [
        slot.time
        for slot in slots
        if can_accommodate_booking(slot.start_time, call_type, slots, all_bookings)
    ]
