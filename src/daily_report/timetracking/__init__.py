"""Time-tracking integrations."""

from daily_report.timetracking.base import BaseTimeTracker
from daily_report.timetracking.wakatime import WakaTimeTracker

__all__ = ["BaseTimeTracker", "WakaTimeTracker"]
