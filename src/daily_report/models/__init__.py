"""Data models for commit retrieval and reporting."""

from daily_report.models.commit import (
    CommitRecord,
    LanguageUsage,
    RepositoryContext,
    RepositoryReport,
    TimeWindow,
)
from daily_report.models.config import ReportConfig, Settings

__all__ = [
    "CommitRecord",
    "TimeWindow",
    "RepositoryContext",
    "RepositoryReport",
    "LanguageUsage",
    "ReportConfig",
    "Settings",
]
