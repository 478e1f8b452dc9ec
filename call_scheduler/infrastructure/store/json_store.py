from __future__ import annotations

import json
import logging
import threading
import uuid
from datetime import date, datetime
from pathlib import Path
from typing import Any

from call_scheduler.application.exceptions import BookingStoreError
from call_scheduler.application.ports.booking_store import BookingStorePort
from call_scheduler.domain.entities.booking import Booking, BookingDraft
from call_scheduler.domain.entities.call_type import CallType, calculate_end_time
from call_scheduler.domain.entities.client import Client


class JsonBookingStore(BookingStorePort):
    """Keeps clients and bookings in a single JSON document."""

    def __init__(self, data_file: str = "./data/scheduler.json") -> None:
        self._path = Path(data_file)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._lock = threading.Lock()
        self._logger = logging.getLogger(__name__)

    def _load(self) -> dict[str, Any]:
        """Load the document, return an empty one if the file is missing."""
        if not self._path.exists():
            return {"clients": [], "bookings": [], "version": 1}

        try:
            with open(self._path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            raise BookingStoreError(f"Cannot read booking store {self._path}: {e}") from e

        if not isinstance(data, dict):
            raise BookingStoreError(f"Booking store {self._path} is not a JSON object")

        data.setdefault("clients", [])
        data.setdefault("bookings", [])
        data.setdefault("version", 1)
        return data

    def _save(self, data: dict[str, Any]) -> None:
        """Write the document atomically through a temp file."""
        temp_path = self._path.with_suffix(".json.tmp")
        try:
            with open(temp_path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
            temp_path.replace(self._path)
        except OSError as e:
            if temp_path.exists():
                temp_path.unlink()
            raise BookingStoreError(f"Cannot write booking store {self._path}: {e}") from e

    def _serialize_booking(self, booking: Booking) -> dict[str, Any]:
        result = {
            "id": booking.id,
            "client_id": booking.client_id,
            "client_name": booking.client_name,
            "client_phone": booking.client_phone,
            "call_type": booking.call_type.value,
            "date": booking.date.isoformat(),
            "time": booking.time,
            "start_time": booking.start_time.isoformat(),
            "end_time": booking.end_time.isoformat(),
            "is_recurring": booking.is_recurring,
            "recurring_day_of_week": booking.recurring_day_of_week,
            "created_at": booking.created_at.isoformat() if booking.created_at else None,
            "updated_at": booking.updated_at.isoformat() if booking.updated_at else None,
        }
        # Absent optional fields are dropped rather than stored as null
        return {key: value for key, value in result.items() if value is not None}

    def _deserialize_booking(self, data: dict[str, Any]) -> Booking:
        created_at = data.get("created_at")
        updated_at = data.get("updated_at")
        call_type = CallType(data["call_type"])
        start_time = datetime.fromisoformat(data["start_time"])
        return Booking(
            id=data["id"],
            client_id=data["client_id"],
            client_name=data.get("client_name", ""),
            client_phone=data.get("client_phone", ""),
            call_type=call_type,
            date=date.fromisoformat(data["date"]),
            time=data["time"],
            start_time=start_time,
            # Stored end_time is informational; the duration table is authoritative
            end_time=calculate_end_time(start_time, call_type),
            is_recurring=data.get("is_recurring", False),
            recurring_day_of_week=data.get("recurring_day_of_week"),
            created_at=datetime.fromisoformat(created_at) if created_at else None,
            updated_at=datetime.fromisoformat(updated_at) if updated_at else None,
        )

    def list_bookings(self) -> list[Booking]:
        with self._lock:
            data = self._load()
        # Later writes come first among bookings created in the same instant
        bookings = [self._deserialize_booking(item) for item in reversed(data["bookings"])]
        return sorted(bookings, key=lambda b: b.created_at or datetime.min, reverse=True)

    def get_booking(self, booking_id: str) -> Booking | None:
        with self._lock:
            data = self._load()
        for item in data["bookings"]:
            if item["id"] == booking_id:
                return self._deserialize_booking(item)
        return None

    def create_booking(self, draft: BookingDraft) -> str:
        booking_id = uuid.uuid4().hex
        now = datetime.now()
        booking = Booking(
            id=booking_id,
            client_id=draft.client_id,
            client_name=draft.client_name,
            client_phone=draft.client_phone,
            call_type=draft.call_type,
            date=draft.date,
            time=draft.time,
            start_time=draft.start_time,
            end_time=draft.end_time,
            is_recurring=draft.is_recurring,
            recurring_day_of_week=draft.recurring_day_of_week,
            created_at=now,
            updated_at=now,
        )
        with self._lock:
            data = self._load()
            data["bookings"].append(self._serialize_booking(booking))
            self._save(data)
        self._logger.info("Booking stored", extra={"booking_id": booking_id, "client_id": draft.client_id})
        return booking_id

    def delete_booking(self, booking_id: str) -> bool:
        with self._lock:
            data = self._load()
            remaining = [item for item in data["bookings"] if item["id"] != booking_id]
            if len(remaining) == len(data["bookings"]):
                return False
            data["bookings"] = remaining
            self._save(data)
        self._logger.info("Booking deleted", extra={"booking_id": booking_id})
        return True

    def list_clients(self) -> list[Client]:
        with self._lock:
            data = self._load()
        return [Client(id=item["id"], name=item["name"], phone=item["phone"]) for item in data["clients"]]

    def get_client(self, client_id: str) -> Client | None:
        for client in self.list_clients():
            if client.id == client_id:
                return client
        return None

    def add_client(self, name: str, phone: str) -> str:
        client_id = uuid.uuid4().hex
        with self._lock:
            data = self._load()
            data["clients"].append({"id": client_id, "name": name, "phone": phone})
            self._save(data)
        return client_id
