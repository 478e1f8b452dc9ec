from __future__ import annotations

from datetime import datetime, timedelta
from enum import Enum


class CallType(str, Enum):
    onboarding = "onboarding"
    followup = "followup"


# Canonical durations. Every component derives end times from this table.
CALL_DURATIONS: dict[CallType, int] = {
    CallType.onboarding: 40,
    CallType.followup: 20,
}


def call_duration(call_type: CallType | str) -> int:
    """Duration in minutes for a call type."""
    return CALL_DURATIONS[CallType(call_type)]


def calculate_end_time(start_time: datetime, call_type: CallType | str) -> datetime:
    return start_time + timedelta(minutes=call_duration(call_type))
