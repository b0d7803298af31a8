"""Base class for time-tracking providers."""

from abc import ABC, abstractmethod
from typing import Any, List

from daily_report.models import LanguageUsage, TimeWindow


class BaseTimeTracker(ABC):
    """Abstract base class for time-tracking providers."""

    name: str = "time tracking"

    def __init__(self, api_key: str, **kwargs: Any) -> None:
        """Initialize the tracker.

        Args:
            api_key: API key for the provider
            **kwargs: Additional provider-specific parameters
        """
        self.api_key = api_key
        self.config = kwargs

    @abstractmethod
    def language_usage(self, window: TimeWindow) -> List[LanguageUsage]:
        """Return time spent per language within the window.

        Args:
            window: Report time window

        Returns:
            List of LanguageUsage entries
        """
        pass
