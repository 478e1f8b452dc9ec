"""
Tests for the half-open interval overlap test.
"""

from __future__ import annotations

from datetime import datetime

import pytest

from call_scheduler.application.scheduling.overlap import overlaps


def t(hhmm: str) -> datetime:
    return datetime.fromisoformat(f"2024-03-04T{hhmm}")


def test_back_to_back_intervals_do_not_overlap():
    """An interval ending exactly when the next begins is not a conflict."""
    assert overlaps(t("10:00"), t("10:20"), t("10:20"), t("10:40")) is False
    assert overlaps(t("10:20"), t("10:40"), t("10:00"), t("10:20")) is False


def test_partial_and_contained_intervals_overlap():
    assert overlaps(t("11:00"), t("11:20"), t("11:10"), t("11:30")) is True
    assert overlaps(t("11:00"), t("11:40"), t("11:10"), t("11:30")) is True
    assert overlaps(t("11:00"), t("11:20"), t("11:00"), t("11:20")) is True


@pytest.mark.parametrize(
    "a, b",
    [
        (("10:00", "10:20"), ("10:20", "10:40")),
        (("10:00", "10:40"), ("10:20", "11:00")),
        (("10:00", "12:00"), ("10:30", "10:50")),
        (("09:00", "09:20"), ("14:00", "14:20")),
    ],
)
def test_overlap_is_symmetric(a, b):
    first = overlaps(t(a[0]), t(a[1]), t(b[0]), t(b[1]))
    second = overlaps(t(b[0]), t(b[1]), t(a[0]), t(a[1]))
    assert first == second


def test_inverted_interval_still_returns_a_boolean():
    """Malformed input is accepted and gives a defined answer."""
    assert overlaps(t("11:00"), t("10:00"), t("10:00"), t("12:00")) is True
    assert overlaps(t("11:00"), t("10:00"), t("12:00"), t("13:00")) is False
