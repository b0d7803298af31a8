"""Report time window resolution."""

from datetime import datetime, time, timedelta, timezone, tzinfo
from typing import Optional

from dateutil import tz

from daily_report.errors import InvalidTime
from daily_report.models import TimeWindow

DEFAULT_CUTOFF_HOUR = 17


def default_since(
    now: datetime,
    local_tz: Optional[tzinfo] = None,
    cutoff_hour: int = DEFAULT_CUTOFF_HOUR,
) -> datetime:
    """Return yesterday's ``cutoff_hour``:00 local time, in UTC.

    "Yesterday" is the local calendar date 24 hours before ``now``.

    Raises:
        InvalidTime: If that local time does not exist or is ambiguous
    """
    local_tz = local_tz or tz.tzlocal()
    day = (now - timedelta(hours=24)).astimezone(local_tz).date()
    start = datetime.combine(day, time(cutoff_hour), tzinfo=local_tz)

    if not tz.datetime_exists(start):
        raise InvalidTime(f"{start:%Y-%m-%d %H:%M} does not exist in the local timezone")
    if tz.datetime_ambiguous(start):
        raise InvalidTime(f"{start:%Y-%m-%d %H:%M} is ambiguous in the local timezone")
    return start.astimezone(timezone.utc)


def resolve_window(
    since: Optional[datetime] = None,
    until: Optional[datetime] = None,
    now: Optional[datetime] = None,
    local_tz: Optional[tzinfo] = None,
    cutoff_hour: int = DEFAULT_CUTOFF_HOUR,
) -> TimeWindow:
    """Fill in missing window bounds.

    Args:
        since: Window start; defaults to yesterday ``cutoff_hour``:00 local time
        until: Window end; defaults to the current time
        now: Current instant, for tests; defaults to the system clock
        local_tz: Local timezone, for tests; defaults to the system timezone
        cutoff_hour: Local hour of the default start

    Returns:
        TimeWindow in UTC

    Raises:
        InvalidTime: If the default start cannot be computed
    """
    now = now or datetime.now(timezone.utc)
    if since is None:
        since = default_since(now, local_tz=local_tz, cutoff_hour=cutoff_hour)
    if until is None:
        until = now
    return TimeWindow(since=since, until=until)
