from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import date

from call_scheduler.application.exceptions import InvalidInputError
from call_scheduler.application.ports.booking_store import BookingStorePort
from call_scheduler.application.scheduling.conflicts import would_overlap, would_overlap_upcoming
from call_scheduler.application.scheduling.recurrence import DEFAULT_HORIZON_WEEKS
from call_scheduler.application.scheduling.slots import find_slot_index, generate_slots, required_slots
from call_scheduler.application.utils.date_utils import combine, day_of_week, parse_date
from call_scheduler.domain.entities.booking import Booking, BookingDraft
from call_scheduler.domain.entities.call_type import CallType, calculate_end_time

# "<original id>-YYYY-MM-DD" as produced for projected recurrence instances
_PROJECTED_ID_RE = re.compile(r"^(?P<original_id>.+)-\d{4}-\d{2}-\d{2}$")


@dataclass(frozen=True)
class BookingResult:
    action: str  # "booked" or "conflict"
    booking: Booking | None
    message: str | None = None


class BookingUseCase:
    """
    Creates and deletes bookings against the store.

    The conflict check runs on a snapshot of the store and is not atomic with
    the write that follows it. Two callers booking the same slot at the same
    time can both pass the check and both be stored.
    """

    def __init__(self, store: BookingStorePort, horizon_weeks: int | None = DEFAULT_HORIZON_WEEKS) -> None:
        self._store = store
        self._horizon_weeks = horizon_weeks
        self._logger = logging.getLogger(__name__)

    def create_booking(
        self,
        client_id: str,
        call_type: CallType | str,
        day: date | str,
        time: str,
    ) -> BookingResult:
        try:
            call_type = CallType(call_type)
        except ValueError as e:
            raise InvalidInputError(f"Unknown call type: {call_type!r}") from e

        day = parse_date(day)
        client = self._store.get_client(client_id)
        if client is None:
            raise InvalidInputError(f"Unknown client: {client_id!r}")

        start_time = combine(day, time)
        end_time = calculate_end_time(start_time, call_type)
        slots = generate_slots(day)
        if find_slot_index(slots, start_time) + required_slots(call_type) > len(slots):
            raise InvalidInputError(f"A {call_type.value} call at {time} runs past the end of the day")

        is_recurring = call_type == CallType.followup
        recurring_day_of_week = day_of_week(day) if is_recurring else None

        # Same-date and weekly bookings on this weekday block it; a new weekly
        # follow-up must also clear one-time bookings on the weeks it projects onto.
        existing = self._store.list_bookings()
        conflict = would_overlap(start_time, end_time, day, False, None, existing)
        if not conflict and is_recurring:
            conflict = would_overlap_upcoming(start_time, end_time, day, existing, self._horizon_weeks)
        if conflict:
            self._logger.info(
                "Booking rejected",
                extra={"client_id": client_id, "date": day.isoformat(), "time": time, "reason": "conflict"},
            )
            return BookingResult(
                action="conflict",
                booking=None,
                message="This time slot conflicts with an existing booking. Please choose a different time.",
            )

        draft = BookingDraft(
            client_id=client.id,
            client_name=client.name,
            client_phone=client.phone,
            call_type=call_type,
            date=day,
            time=start_time.strftime("%H:%M"),
            start_time=start_time,
            end_time=end_time,
            is_recurring=is_recurring,
            recurring_day_of_week=recurring_day_of_week,
        )
        booking_id = self._store.create_booking(draft)
        booking = self._store.get_booking(booking_id)

        self._logger.info(
            "Booking created",
            extra={"booking_id": booking_id, "client_id": client_id, "call_type": call_type.value},
        )
        return BookingResult(action="booked", booking=booking)

    def resolve_storage_id(self, booking_id: str) -> str:
        """Map a projected recurrence id back to the id of the stored booking."""
        if self._store.get_booking(booking_id) is not None:
            return booking_id
        match = _PROJECTED_ID_RE.match(booking_id)
        if match:
            return match.group("original_id")
        return booking_id

    def delete_booking(self, booking_id: str) -> bool:
        storage_id = self.resolve_storage_id(booking_id)
        deleted = self._store.delete_booking(storage_id)
        if not deleted:
            self._logger.warning("Booking not found for deletion", extra={"booking_id": booking_id})
        return deleted
