from __future__ import annotations

import logging
import uuid
from dataclasses import asdict
from datetime import datetime

from call_scheduler.application.ports.booking_store import BookingStorePort
from call_scheduler.domain.entities.booking import Booking, BookingDraft
from call_scheduler.domain.entities.client import Client


class MemoryBookingStore(BookingStorePort):
    def __init__(self, clients: list[Client] | None = None) -> None:
        self._bookings: dict[str, Booking] = {}
        self._clients: dict[str, Client] = {c.id: c for c in clients or []}
        self._logger = logging.getLogger(__name__)

    def list_bookings(self) -> list[Booking]:
        # dicts keep insertion order, so reversing gives newest first
        return list(reversed(self._bookings.values()))

    def get_booking(self, booking_id: str) -> Booking | None:
        return self._bookings.get(booking_id)

    def create_booking(self, draft: BookingDraft) -> str:
        booking_id = uuid.uuid4().hex
        now = datetime.now()
        self._bookings[booking_id] = Booking(id=booking_id, created_at=now, updated_at=now, **asdict(draft))
        self._logger.info("Booking stored", extra={"booking_id": booking_id, "client_id": draft.client_id})
        return booking_id

    def delete_booking(self, booking_id: str) -> bool:
        if booking_id in self._bookings:
            del self._bookings[booking_id]
            self._logger.info("Booking deleted", extra={"booking_id": booking_id})
            return True
        return False

    def list_clients(self) -> list[Client]:
        return list(self._clients.values())

    def get_client(self, client_id: str) -> Client | None:
        return self._clients.get(client_id)

    def add_client(self, name: str, phone: str) -> str:
        client_id = uuid.uuid4().hex
        self._clients[client_id] = Client(id=client_id, name=name, phone=phone)
        return client_id
