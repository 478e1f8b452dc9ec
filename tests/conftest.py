from __future__ import annotations

from datetime import date, datetime

import pytest

from call_scheduler.domain.entities.booking import Booking
from call_scheduler.application.utils.date_utils import day_of_week
from call_scheduler.domain.entities.call_type import CallType, calculate_end_time
from call_scheduler.domain.entities.client import Client
from call_scheduler.infrastructure.store.memory_store import MemoryBookingStore


def build_booking(
    booking_id: str,
    day: str,
    time: str,
    call_type: CallType = CallType.followup,
    is_recurring: bool | None = None,
    client_id: str = "c1",
) -> Booking:
    anchor = date.fromisoformat(day)
    start = datetime.fromisoformat(f"{day}T{time}")
    if is_recurring is None:
        is_recurring = call_type == CallType.followup
    return Booking(
        id=booking_id,
        client_id=client_id,
        client_name="Sarah Johnson",
        client_phone="+1 (555) 123-4567",
        call_type=call_type,
        date=anchor,
        time=time,
        start_time=start,
        end_time=calculate_end_time(start, call_type),
        is_recurring=is_recurring,
        recurring_day_of_week=day_of_week(anchor) if is_recurring else None,
    )


@pytest.fixture
def make_booking():
    return build_booking


@pytest.fixture
def clients() -> list[Client]:
    return [
        Client(id="c1", name="Sarah Johnson", phone="+1 (555) 123-4567"),
        Client(id="c2", name="Michael Chen", phone="+1 (555) 234-5678"),
    ]


@pytest.fixture
def memory_store(clients) -> MemoryBookingStore:
    return MemoryBookingStore(clients=clients)
