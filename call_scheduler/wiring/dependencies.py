import logging

from call_scheduler.application.ports.booking_store import BookingStorePort
from call_scheduler.application.use_cases.booking import BookingUseCase
from call_scheduler.application.use_cases.schedule_day import ScheduleDayUseCase
from call_scheduler.core.config import settings
from call_scheduler.infrastructure.store.json_store import JsonBookingStore
from call_scheduler.infrastructure.store.memory_store import MemoryBookingStore


_booking_store: BookingStorePort | None = None


def get_booking_store() -> BookingStorePort:
    global _booking_store
    if _booking_store is None:
        logger = logging.getLogger(__name__)
        if settings.STORE_PROVIDER.lower() == "json":
            logger.info("Using JsonBookingStore at %s", settings.DATA_FILE)
            _booking_store = JsonBookingStore(data_file=settings.DATA_FILE)
        else:
            logger.info("Using MemoryBookingStore")
            _booking_store = MemoryBookingStore()
    return _booking_store


def get_schedule_day_use_case() -> ScheduleDayUseCase:
    return ScheduleDayUseCase(store=get_booking_store(), horizon_weeks=settings.recurrence_horizon)


def get_booking_use_case() -> BookingUseCase:
    return BookingUseCase(store=get_booking_store(), horizon_weeks=settings.recurrence_horizon)
