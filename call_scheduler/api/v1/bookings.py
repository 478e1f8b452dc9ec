import logging

from fastapi import APIRouter, Depends, HTTPException, Response

from call_scheduler.api.v1.schemas import (
    BookingSchema,
    CreateBookingRequestSchema,
    DayScheduleSchema,
    TimeSlotSchema,
)
from call_scheduler.application.exceptions import InvalidInputError
from call_scheduler.application.use_cases.booking import BookingUseCase
from call_scheduler.application.use_cases.schedule_day import ScheduleDayUseCase
from call_scheduler.domain.entities.booking import Booking
from call_scheduler.wiring.dependencies import get_booking_use_case, get_schedule_day_use_case

router = APIRouter()
logger = logging.getLogger(__name__)


def _to_schema(booking: Booking) -> BookingSchema:
    return BookingSchema(
        id=booking.id,
        storage_id=booking.storage_id,
        client_id=booking.client_id,
        client_name=booking.client_name,
        client_phone=booking.client_phone,
        call_type=booking.call_type,
        date=booking.date,
        time=booking.time,
        start_time=booking.start_time,
        end_time=booking.end_time,
        is_recurring=booking.is_recurring,
        recurring_day_of_week=booking.recurring_day_of_week,
        is_projected=booking.is_projected,
        created_at=booking.created_at,
        updated_at=booking.updated_at,
    )


@router.get("/schedule/{day}", response_model=DayScheduleSchema)
def get_schedule(day: str, uc: ScheduleDayUseCase = Depends(get_schedule_day_use_case)):
    try:
        schedule = uc.execute(day)
    except InvalidInputError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return DayScheduleSchema(
        date=schedule.date,
        slots=[
            TimeSlotSchema(
                time=slot.time,
                start_time=slot.start_time,
                end_time=slot.end_time,
                is_booked=slot.is_booked,
                is_booking_continuation=slot.is_booking_continuation,
                recurring_display=slot.time in schedule.recurring_slots,
                booking=_to_schema(slot.booking) if slot.booking else None,
            )
            for slot in schedule.slots
        ],
        available=schedule.available,
    )


@router.post("/bookings", response_model=BookingSchema, status_code=201)
def create_booking(req: CreateBookingRequestSchema, uc: BookingUseCase = Depends(get_booking_use_case)):
    try:
        result = uc.create_booking(
            client_id=req.client_id,
            call_type=req.call_type,
            day=req.date,
            time=req.time,
        )
    except InvalidInputError as e:
        raise HTTPException(status_code=400, detail=str(e))

    if result.action == "conflict" or result.booking is None:
        raise HTTPException(status_code=409, detail=result.message or "Booking conflict")
    return _to_schema(result.booking)


@router.delete("/bookings/{booking_id}", status_code=204)
def delete_booking(booking_id: str, uc: BookingUseCase = Depends(get_booking_use_case)) -> Response:
    if not uc.delete_booking(booking_id):
        raise HTTPException(status_code=404, detail="Booking not found")
    return Response(status_code=204)
