"""Commit retrieval from local Git repositories."""

from daily_report.extraction.coauthors import extract_co_author_emails
from daily_report.extraction.history import GitRepositoryHistory, HistoryCommit, RepositoryHistory
from daily_report.extraction.remotes import normalize_remote_url, resolve_base_url
from daily_report.extraction.walker import CommitWalker, get_commits

__all__ = [
    "CommitWalker",
    "GitRepositoryHistory",
    "HistoryCommit",
    "RepositoryHistory",
    "extract_co_author_emails",
    "get_commits",
    "normalize_remote_url",
    "resolve_base_url",
]
