"""WakaTime integration.

The WakaTime API is not queried yet; the tracker returns a fixed entry so
the report keeps its final shape.
"""

from typing import List

from daily_report.models import LanguageUsage, TimeWindow
from daily_report.timetracking.base import BaseTimeTracker


class WakaTimeTracker(BaseTimeTracker):
    """WakaTime provider returning placeholder usage."""

    name = "wakatime"

    def language_usage(self, window: TimeWindow) -> List[LanguageUsage]:
        # TODO: query /api/v1/users/current/summaries for the window once the API client exists
        return [LanguageUsage(language="typescript", hours=3)]
