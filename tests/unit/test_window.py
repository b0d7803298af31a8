"""Unit tests for report window resolution."""

from datetime import datetime, timedelta, timezone

import pytest
from dateutil import tz

from daily_report.errors import InvalidTime
from daily_report.report import resolve_window
from daily_report.report.window import default_since

JST = tz.tzoffset("JST", 9 * 3600)
NEW_YORK = tz.gettz("America/New_York")


def test_explicit_bounds_are_kept():
    """Test that given bounds are used as-is (in UTC)."""
    since = datetime(2025, 1, 6, 8, 0, tzinfo=timezone.utc)
    until = datetime(2025, 1, 7, 8, 0, tzinfo=timezone.utc)

    window = resolve_window(since, until)

    assert window.since == since
    assert window.until == until


def test_bounds_are_normalized_to_utc():
    """Test that offset timestamps are converted to UTC."""
    since = datetime(2025, 1, 7, 17, 0, tzinfo=JST)
    window = resolve_window(since, since + timedelta(hours=1))

    assert window.since == datetime(2025, 1, 7, 8, 0, tzinfo=timezone.utc)
    assert window.since.utcoffset() == timedelta(0)


def test_default_until_is_now():
    """Test that a missing end defaults to the current time."""
    before = datetime.now(timezone.utc)
    window = resolve_window(since=datetime(2025, 1, 1, tzinfo=timezone.utc))
    after = datetime.now(timezone.utc)

    assert before <= window.until <= after


def test_default_since_is_yesterday_five_pm_local():
    """Test the default start against a fixed clock and timezone."""
    now = datetime(2025, 1, 8, 3, 0, tzinfo=timezone.utc)  # 12:00 JST on Jan 8

    window = resolve_window(now=now, local_tz=JST)

    assert window.since == datetime(2025, 1, 7, 8, 0, tzinfo=timezone.utc)  # Jan 7 17:00 JST
    assert window.until == now


def test_default_since_uses_local_date():
    """Test that the previous day is taken from the local calendar, not UTC."""
    now = datetime(2025, 1, 8, 20, 0, tzinfo=timezone.utc)  # 05:00 JST on Jan 9

    since = default_since(now, local_tz=JST)

    assert since == datetime(2025, 1, 8, 8, 0, tzinfo=timezone.utc)  # Jan 8 17:00 JST


def test_default_since_with_real_clock():
    """Test the default window against the system clock."""
    window = resolve_window(local_tz=JST)

    local_until = window.until.astimezone(JST)
    local_since = window.since.astimezone(JST)
    assert local_since.hour == 17 and local_since.minute == 0
    assert local_since.date() == (window.until - timedelta(hours=24)).astimezone(JST).date()
    assert abs((datetime.now(timezone.utc) - window.until).total_seconds()) < 5
    assert local_since < local_until


def test_custom_cutoff_hour():
    """Test that the local cutoff hour is configurable."""
    now = datetime(2025, 1, 8, 3, 0, tzinfo=timezone.utc)

    since = default_since(now, local_tz=JST, cutoff_hour=9)

    assert since == datetime(2025, 1, 7, 0, 0, tzinfo=timezone.utc)


def test_nonexistent_local_time_raises():
    """Test a start that falls into a DST gap."""
    now = datetime(2025, 3, 10, 12, 0, tzinfo=timezone.utc)  # yesterday local = Mar 9

    with pytest.raises(InvalidTime, match="does not exist"):
        default_since(now, local_tz=NEW_YORK, cutoff_hour=2)


def test_ambiguous_local_time_raises():
    """Test a start that falls into a repeated DST hour."""
    now = datetime(2025, 11, 3, 12, 0, tzinfo=timezone.utc)  # yesterday local = Nov 2

    with pytest.raises(InvalidTime, match="ambiguous"):
        default_since(now, local_tz=NEW_YORK, cutoff_hour=1)


def test_dst_day_at_five_pm_is_valid():
    """Test that DST changeover days still resolve at 17:00."""
    now = datetime(2025, 3, 10, 12, 0, tzinfo=timezone.utc)

    since = default_since(now, local_tz=NEW_YORK)

    assert since == datetime(2025, 3, 9, 21, 0, tzinfo=timezone.utc)  # 17:00 EDT
