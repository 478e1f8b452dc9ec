from __future__ import annotations

from abc import ABC, abstractmethod

from call_scheduler.domain.entities.booking import Booking, BookingDraft
from call_scheduler.domain.entities.client import Client


class BookingStorePort(ABC):
    @abstractmethod
    def list_bookings(self) -> list[Booking]:
        """All persisted bookings, newest first."""
        raise NotImplementedError

    @abstractmethod
    def get_booking(self, booking_id: str) -> Booking | None:
        raise NotImplementedError

    @abstractmethod
    def create_booking(self, draft: BookingDraft) -> str:
        """Persist a new booking. Returns the assigned id."""
        raise NotImplementedError

    @abstractmethod
    def delete_booking(self, booking_id: str) -> bool:
        """
        Delete a booking by its storage id. Returns True if a booking was removed.
        Projected recurrence ids are not storage ids and never match.
        """
        raise NotImplementedError

    @abstractmethod
    def list_clients(self) -> list[Client]:
        raise NotImplementedError

    @abstractmethod
    def get_client(self, client_id: str) -> Client | None:
        raise NotImplementedError

    @abstractmethod
    def add_client(self, name: str, phone: str) -> str:
        """Add a client. Returns the assigned id."""
        raise NotImplementedError
