from __future__ import annotations

from datetime import datetime


def overlaps(start_a: datetime, end_a: datetime, start_b: datetime, end_b: datetime) -> bool:
    """Half-open interval test: back-to-back intervals do not overlap."""
    return start_a < end_b and start_b < end_a
