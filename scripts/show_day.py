#!/usr/bin/env python3
"""
Print the call grid for one day from the configured booking store.

Usage:
  python3 scripts/show_day.py --date 2024-01-08
  STORE_PROVIDER=json DATA_FILE=./data/scheduler.json python3 scripts/show_day.py
"""

from __future__ import annotations

import argparse
import sys
from datetime import date
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from call_scheduler.application.use_cases.schedule_day import DaySchedule
from call_scheduler.application.utils.date_utils import format_date, format_time, parse_date
from call_scheduler.core.log_config import configure_logging
from call_scheduler.domain.entities.call_type import CallType
from call_scheduler.wiring.dependencies import get_schedule_day_use_case

CALL_TYPE_LABELS = {
    CallType.onboarding: "Onboarding",
    CallType.followup: "Follow-up",
}


def _render(schedule: DaySchedule) -> str:
    lines = [format_date(schedule.date), "-" * 60]
    for slot in schedule.slots:
        label = format_time(slot.time).rjust(8)
        status = schedule.slot_status(slot)
        if status == "booked":
            booking = slot.booking
            text = f"{CALL_TYPE_LABELS[booking.call_type]}: {booking.client_name} ({booking.client_phone})"
            if booking.is_recurring:
                text += " [weekly]"
            if slot.time in schedule.recurring_slots:
                text += " [recurring]"
        elif status == "continuation":
            text = "  (continued)"
        elif status == "blocked":
            text = "Blocked (weekly booking)"
        else:
            text = "Available"
        lines.append(f"{label}  {text}")
    lines.append("-" * 60)
    for call_type, times in schedule.available.items():
        lines.append(f"{CALL_TYPE_LABELS[call_type]} start times: {len(times)}")
    return "\n".join(lines)


def main() -> int:
    parser = argparse.ArgumentParser(description="Show the call schedule for a day.")
    parser.add_argument("--date", default=date.today().isoformat(), help="YYYY-MM-DD (default: today)")
    parser.add_argument("--log-level", default=None)
    args = parser.parse_args()

    configure_logging(args.log_level)
    schedule = get_schedule_day_use_case().execute(parse_date(args.date))
    print(_render(schedule))
    return 0


if __name__ == "__main__":
    sys.exit(main())
