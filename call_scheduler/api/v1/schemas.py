import datetime as dt

from pydantic import BaseModel, Field

from call_scheduler.domain.entities.call_type import CallType


class ClientSchema(BaseModel):
    id: str
    name: str
    phone: str


class CreateClientRequestSchema(BaseModel):
    name: str = Field(min_length=1)
    phone: str = Field(min_length=1)


class BookingSchema(BaseModel):
    id: str
    storage_id: str
    client_id: str
    client_name: str
    client_phone: str
    call_type: CallType
    date: dt.date
    time: str
    start_time: dt.datetime
    end_time: dt.datetime
    is_recurring: bool
    recurring_day_of_week: int | None = None
    is_projected: bool = False
    created_at: dt.datetime | None = None
    updated_at: dt.datetime | None = None


class CreateBookingRequestSchema(BaseModel):
    client_id: str
    call_type: CallType
    date: dt.date
    time: str = Field(pattern=r"^\d{1,2}:\d{2}$")


class TimeSlotSchema(BaseModel):
    time: str
    start_time: dt.datetime
    end_time: dt.datetime
    is_booked: bool
    is_booking_continuation: bool
    recurring_display: bool = False
    booking: BookingSchema | None = None


class DayScheduleSchema(BaseModel):
    date: dt.date
    slots: list[TimeSlotSchema]
    available: dict[CallType, list[str]] = Field(default_factory=dict)
