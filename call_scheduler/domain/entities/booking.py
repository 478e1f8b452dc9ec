from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime

from call_scheduler.domain.entities.call_type import CallType


@dataclass(frozen=True)
class BookingDraft:
    client_id: str
    client_name: str
    client_phone: str
    call_type: CallType
    date: date
    time: str  # HH:MM, grid aligned
    start_time: datetime
    end_time: datetime
    is_recurring: bool = False
    recurring_day_of_week: int | None = None  # 0=Sunday .. 6=Saturday


@dataclass(frozen=True)
class Booking:
    id: str
    client_id: str
    client_name: str
    client_phone: str
    call_type: CallType
    date: date
    time: str
    start_time: datetime
    end_time: datetime
    is_recurring: bool = False
    recurring_day_of_week: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    # Set only on projected recurrence instances; id is then "<original_id>-<date>"
    original_id: str | None = None

    @property
    def is_projected(self) -> bool:
        return self.original_id is not None

    @property
    def storage_id(self) -> str:
        """Id to use against the store; projected instances resolve to their source."""
        return self.original_id or self.id
