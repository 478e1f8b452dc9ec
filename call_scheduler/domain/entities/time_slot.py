from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from call_scheduler.domain.entities.booking import Booking


@dataclass(frozen=True)
class TimeSlot:
    time: str  # HH:MM label
    start_time: datetime
    end_time: datetime
    is_booked: bool = False
    booking: Booking | None = None  # only on the slot where the booking starts
    is_booking_continuation: bool = False
