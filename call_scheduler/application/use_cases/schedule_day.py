from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date

from call_scheduler.application.ports.booking_store import BookingStorePort
from call_scheduler.application.scheduling.recurrence import DEFAULT_HORIZON_WEEKS, is_recurring_display
from call_scheduler.application.scheduling.slots import (
    available_start_times,
    bookings_for_date,
    generate_slots,
    populate_slots,
)
from call_scheduler.application.utils.date_utils import parse_date
from call_scheduler.domain.entities.booking import Booking
from call_scheduler.domain.entities.call_type import CallType
from call_scheduler.domain.entities.time_slot import TimeSlot


@dataclass(frozen=True)
class DaySchedule:
    date: date
    slots: list[TimeSlot]
    bookings: list[Booking]
    recurring_slots: frozenset[str]  # labels of anchor slots shown as a recurring occurrence
    available: dict[CallType, list[str]]

    def slot_status(self, slot: TimeSlot) -> str:
        """booked, continuation, available, or blocked (free, but no call can start there)."""
        if slot.booking is not None:
            return "booked"
        if slot.is_booked:
            return "continuation"
        if any(slot.time in times for times in self.available.values()):
            return "available"
        return "blocked"


class ScheduleDayUseCase:
    def __init__(self, store: BookingStorePort, horizon_weeks: int | None = DEFAULT_HORIZON_WEEKS) -> None:
        self._store = store
        self._horizon_weeks = horizon_weeks
        self._logger = logging.getLogger(__name__)

    def execute(self, day: date | str) -> DaySchedule:
        day = parse_date(day)
        all_bookings = self._store.list_bookings()
        day_bookings = bookings_for_date(day, all_bookings, self._horizon_weeks)
        slots = populate_slots(generate_slots(day), day_bookings)

        # Projected instances carry this week's start; the display rule needs the source booking.
        by_id = {b.id: b for b in all_bookings}
        recurring_slots = frozenset(
            slot.time
            for slot in slots
            if slot.booking is not None
            and is_recurring_display(by_id.get(slot.booking.storage_id, slot.booking), day)
        )

        available = {
            call_type: available_start_times(day, call_type, all_bookings, self._horizon_weeks)
            for call_type in CallType
        }

        self._logger.debug("Day schedule built with %s bookings", len(day_bookings), extra={"date": day.isoformat()})
        return DaySchedule(
            date=day,
            slots=slots,
            bookings=day_bookings,
            recurring_slots=recurring_slots,
            available=available,
        )
