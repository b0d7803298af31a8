"""Shared fixtures for unit tests."""

from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

import git
import pytest
import structlog
from git import Actor

from daily_report.errors import RepositoryAccessError
from daily_report.extraction import HistoryCommit, RepositoryHistory

ALICE = Actor("Alice Example", "alice@example.com")
BOB = Actor("Bob Example", "bob@example.com")

BASE_TIME = datetime(2025, 1, 7, 9, 0, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo logging configuration done by CLI invocations."""
    yield
    structlog.reset_defaults()


def git_date(when: datetime) -> str:
    """Format a datetime the way git stores it internally."""
    return f"{int(when.timestamp())} +0000"


def make_commit(
    repo: git.Repo,
    message: str,
    when: datetime,
    author: Actor = ALICE,
    parents: Optional[Sequence[git.Commit]] = None,
) -> git.Commit:
    """Create a commit with a fixed author and timestamp."""
    work_dir = Path(repo.working_tree_dir)
    name = f"file_{len(list(work_dir.glob('file_*')))}.txt"
    (work_dir / name).write_text(message)
    repo.index.add([name])
    return repo.index.commit(
        message,
        parent_commits=list(parents) if parents is not None else None,
        author=author,
        committer=author,
        author_date=git_date(when),
        commit_date=git_date(when),
    )


def init_repo(path: Path, remotes: Sequence[Tuple[str, str]] = ()) -> git.Repo:
    """Initialise an empty repository with the given remotes."""
    path.mkdir(parents=True, exist_ok=True)
    repo = git.Repo.init(path)
    repo.config_writer().set_value("user", "name", "Test User").release()
    repo.config_writer().set_value("user", "email", "test@example.com").release()
    for name, url in remotes:
        repo.create_remote(name, url)
    return repo


@pytest.fixture
def widgets_repo(tmp_path):
    """A repository with a GitHub remote and three commits an hour apart."""
    repo = init_repo(tmp_path / "widgets", [("origin", "git@github.com:acme/widgets.git")])
    make_commit(repo, "Initial commit", BASE_TIME)
    make_commit(repo, "Add parser\n\nLonger explanation.", BASE_TIME.replace(hour=10), author=BOB)
    make_commit(
        repo,
        "Fix #141 and #7\n\nCo-authored-by: Alice Example <alice@example.com>",
        BASE_TIME.replace(hour=11),
        author=BOB,
    )
    yield repo


def fake_id(number: int) -> str:
    """Return a 40-character hex commit id."""
    return f"{number:040x}"


class InMemoryHistory(RepositoryHistory):
    """RepositoryHistory over a dict of commits."""

    def __init__(
        self,
        commits: List[HistoryCommit],
        head_id: Optional[str] = None,
        remotes: Sequence[Tuple[str, str]] = (("origin", "https://github.com/acme/widgets.git"),),
        root: Path = Path("/repos/widgets"),
    ) -> None:
        self.commits: Dict[str, HistoryCommit] = {c.hexsha: c for c in commits}
        self.head_id = head_id if head_id is not None else (commits[-1].hexsha if commits else None)
        self._remotes = list(remotes)
        self._root = root
        self.lookups: List[str] = []

    @property
    def root(self) -> Path:
        return self._root

    def head(self) -> str:
        if self.head_id is None:
            raise RepositoryAccessError("HEAD does not exist")
        return self.head_id

    def commit(self, commit_id: str) -> HistoryCommit:
        self.lookups.append(commit_id)
        try:
            return self.commits[commit_id]
        except KeyError as e:
            raise RepositoryAccessError(f"Cannot read commit {commit_id}") from e

    def remotes(self) -> List[Tuple[str, str]]:
        return list(self._remotes)
