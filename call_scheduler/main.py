import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from call_scheduler.api.v1.bookings import router as bookings_router
from call_scheduler.api.v1.clients import router as clients_router
from call_scheduler.application.exceptions import BookingStoreError
from call_scheduler.core.config import settings
from call_scheduler.core.log_config import configure_logging

configure_logging()
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.APP_NAME, version="1.0.0")

app.include_router(clients_router, prefix="/api/v1", tags=["clients"])
app.include_router(bookings_router, prefix="/api/v1", tags=["bookings"])


@app.exception_handler(BookingStoreError)
async def booking_store_error_handler(request: Request, exc: BookingStoreError) -> JSONResponse:
    logger.error("Booking store failure", exc_info=exc, extra={"error": str(exc)})
    return JSONResponse(status_code=500, content={"detail": "Booking store unavailable"})


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
