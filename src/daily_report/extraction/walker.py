"""Commit history traversal and filtering."""

import heapq
import itertools
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Iterator, List, Optional, Union

import structlog

from daily_report.extraction.coauthors import extract_co_author_emails
from daily_report.extraction.history import GitRepositoryHistory, HistoryCommit, RepositoryHistory
from daily_report.models import CommitRecord, TimeWindow

SHORT_HASH_LENGTH = 7


class CommitWalker:
    """Walks a repository's history from HEAD and emits report-ready commits."""

    def __init__(self, history: RepositoryHistory, logger: Optional[Any] = None) -> None:
        """Initialize the walker.

        Args:
            history: Commit graph to read
            logger: Structured logger; defaults to this module's logger
        """
        self.history = history
        self.log = logger or structlog.get_logger(__name__)

    def walk(
        self,
        window: TimeWindow,
        base_url: str,
        author_email: Optional[str] = None,
    ) -> List[CommitRecord]:
        """Collect qualifying commits, newest first.

        Every commit reachable from HEAD is visited once. Commits outside the
        window, or not written by ``author_email`` (as author or co-author),
        are skipped without stopping the traversal.

        Args:
            window: Inclusive time window
            base_url: Hosted repository URL used for commit links
            author_email: Optional exact-match author filter

        Returns:
            List of CommitRecord objects

        Raises:
            RepositoryAccessError: If HEAD or any commit cannot be read
        """
        records: List[CommitRecord] = []
        visited = 0

        for commit in self._iter_history():
            visited += 1
            timestamp = datetime.fromtimestamp(commit.committed_date, tz=timezone.utc)
            if not window.contains(timestamp):
                continue
            if author_email is not None and not self.is_authored_by(commit, author_email):
                continue
            records.append(self._to_record(commit, timestamp, base_url))

        self.log.debug(
            "history_walked",
            repo_path=str(self.history.root),
            visited=visited,
            matched=len(records),
        )
        return records

    @staticmethod
    def is_authored_by(commit: HistoryCommit, email: str) -> bool:
        """Check the primary author, then the co-author trailers."""
        if commit.author_email == email:
            return True
        return email in extract_co_author_emails(commit.message)

    def _iter_history(self) -> Iterator[HistoryCommit]:
        """Yield reachable commits by descending commit time.

        Ties keep discovery order, so repeated walks give the same sequence.
        """
        order = itertools.count()
        head = self.history.commit(self.history.head())
        seen = {head.hexsha}
        queue = [(-head.committed_date, next(order), head)]

        while queue:
            _, _, commit = heapq.heappop(queue)
            for parent_id in commit.parent_ids:
                if parent_id in seen:
                    continue
                seen.add(parent_id)
                parent = self.history.commit(parent_id)
                heapq.heappush(queue, (-parent.committed_date, next(order), parent))
            yield commit

    @staticmethod
    def _to_record(commit: HistoryCommit, timestamp: datetime, base_url: str) -> CommitRecord:
        full_hash = commit.hexsha
        if len(full_hash) < SHORT_HASH_LENGTH:
            raise ValueError(f"Commit id too short for a short hash: {full_hash!r}")

        lines = commit.message.splitlines()
        return CommitRecord(
            title=lines[0] if lines else "",
            hash=full_hash,
            short_hash=full_hash[:SHORT_HASH_LENGTH],
            commit_url=f"{base_url}/commit/{full_hash}",
            timestamp=timestamp,
        )


def get_commits(
    repo_path: Union[str, Path],
    window: TimeWindow,
    base_url: str,
    author_email: Optional[str] = None,
    logger: Optional[Any] = None,
) -> List[CommitRecord]:
    """Open a Git repository and return its qualifying commits, newest first.

    Raises:
        RepositoryAccessError: If the path is not a repository or history cannot be read
    """
    walker = CommitWalker(GitRepositoryHistory(repo_path), logger=logger)
    return walker.walk(window, base_url, author_email=author_email)
