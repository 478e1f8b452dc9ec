from __future__ import annotations

import math
import re
from datetime import date, datetime, time, timedelta

from call_scheduler.application.exceptions import InvalidInputError

_TIME_RE = re.compile(r"^(\d{1,2}):(\d{2})$")

ONE_WEEK = timedelta(days=7)


def parse_date(value: str | date) -> date:
    """Parse a YYYY-MM-DD string. Dates and datetimes pass through as their calendar day."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(value.strip())
    except (AttributeError, ValueError) as e:
        raise InvalidInputError(f"Invalid date: {value!r}") from e


def parse_time(value: str) -> time:
    """Parse an HH:MM wall-clock time."""
    match = _TIME_RE.match(value.strip()) if isinstance(value, str) else None
    if not match:
        raise InvalidInputError(f"Invalid time: {value!r}")
    hour, minute = int(match.group(1)), int(match.group(2))
    if hour > 23 or minute > 59:
        raise InvalidInputError(f"Invalid time: {value!r}")
    return time(hour, minute)


def combine(day: date, time_label: str) -> datetime:
    return datetime.combine(day, parse_time(time_label))


def day_of_week(value: date) -> int:
    """Day of week with 0=Sunday .. 6=Saturday."""
    return (value.weekday() + 1) % 7


def weeks_between(start: date | datetime, end: date | datetime) -> int:
    """Whole weeks from start to end, rounded half up to the nearest week."""
    if not isinstance(start, datetime):
        start = datetime.combine(start, time.min)
    if not isinstance(end, datetime):
        end = datetime.combine(end, time.min)
    return math.floor((end - start) / ONE_WEEK + 0.5)


def format_date(value: date) -> str:
    """e.g. 'Monday, January 8, 2024'"""
    return f"{value:%A}, {value:%B} {value.day}, {value.year}"


def format_time(time_label: str) -> str:
    """'13:20' -> '1:20 PM'"""
    parsed = parse_time(time_label)
    suffix = "PM" if parsed.hour >= 12 else "AM"
    display_hour = parsed.hour % 12 or 12
    return f"{display_hour}:{parsed.minute:02d} {suffix}"
