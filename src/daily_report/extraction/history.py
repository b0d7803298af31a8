"""Read-only access to a repository's commit graph."""

import configparser
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import FrozenSet, List, Tuple, Union

import git
from git import Repo

from daily_report.errors import RepositoryAccessError


@dataclass(frozen=True)
class HistoryCommit:
    """The parts of a commit the walker needs."""

    hexsha: str
    author_email: str
    committed_date: int
    message: str
    parent_ids: Tuple[str, ...] = field(default_factory=tuple)


class RepositoryHistory(ABC):
    """Abstract base class for commit graph backends."""

    @property
    @abstractmethod
    def root(self) -> Path:
        """Directory the repository lives in."""
        pass

    @abstractmethod
    def head(self) -> str:
        """Return the commit id the head reference points at.

        Raises:
            RepositoryAccessError: If head cannot be resolved (e.g., empty repository)
        """
        pass

    @abstractmethod
    def commit(self, commit_id: str) -> HistoryCommit:
        """Look up a commit by id.

        Raises:
            RepositoryAccessError: If the commit cannot be read
        """
        pass

    @abstractmethod
    def remotes(self) -> List[Tuple[str, str]]:
        """Return ``(name, url)`` pairs in configured order."""
        pass


class GitRepositoryHistory(RepositoryHistory):
    """Commit graph backed by a local Git repository through GitPython."""

    def __init__(self, repo_path: Union[str, Path]) -> None:
        """Open the repository.

        Args:
            repo_path: Path to the repository working tree or git dir

        Raises:
            RepositoryAccessError: If the path does not exist or is not a repository
        """
        self.repo_path = Path(repo_path)
        if not self.repo_path.exists():
            raise RepositoryAccessError(f"Repository path does not exist: {repo_path}")

        try:
            self.repo = Repo(self.repo_path)
        except (git.exc.InvalidGitRepositoryError, git.exc.NoSuchPathError) as e:
            raise RepositoryAccessError(f"Invalid Git repository: {repo_path}") from e

        # Commits at a shallow clone boundary have their parents cut off
        self.shallow_ids = self._read_shallow_ids()

    @property
    def root(self) -> Path:
        return Path(self.repo.working_tree_dir or self.repo.git_dir)

    def head(self) -> str:
        try:
            return self.repo.head.commit.hexsha
        except (ValueError, git.exc.GitError) as e:
            raise RepositoryAccessError(f"Cannot resolve HEAD in {self.repo_path}: {e}") from e

    def commit(self, commit_id: str) -> HistoryCommit:
        try:
            commit = self.repo.commit(commit_id)
            message = commit.message
            if isinstance(message, bytes):
                message = message.decode("utf-8", errors="replace")
            parents = () if commit.hexsha in self.shallow_ids else commit.parents
            return HistoryCommit(
                hexsha=commit.hexsha,
                author_email=commit.author.email or "",
                committed_date=int(commit.committed_date),
                message=message or "",
                parent_ids=tuple(p.hexsha for p in parents),
            )
        except (ValueError, git.exc.GitError) as e:
            raise RepositoryAccessError(f"Cannot read commit {commit_id} in {self.repo_path}: {e}") from e

    def _read_shallow_ids(self) -> FrozenSet[str]:
        shallow_file = Path(self.repo.common_dir) / "shallow"
        try:
            return frozenset(shallow_file.read_text().split())
        except FileNotFoundError:
            return frozenset()
        except OSError as e:
            raise RepositoryAccessError(f"Cannot read shallow boundary of {self.repo_path}: {e}") from e

    def remotes(self) -> List[Tuple[str, str]]:
        try:
            return [(remote.name, remote.url) for remote in self.repo.remotes]
        except (configparser.Error, ValueError, git.exc.GitError) as e:
            raise RepositoryAccessError(f"Cannot read remotes of {self.repo_path}: {e}") from e
