"""End-to-end report generation across repositories."""

from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Any, Callable, Iterable, List, Optional, Union

import structlog

from daily_report.errors import NoGitHubRemote, RepositoryAccessError
from daily_report.extraction import CommitWalker, GitRepositoryHistory, RepositoryHistory, resolve_base_url
from daily_report.extraction.remotes import DEFAULT_FORGE_HOSTS
from daily_report.models import RepositoryContext, RepositoryReport, ReportConfig, TimeWindow
from daily_report.report.assembler import DEFAULT_TITLE, render_report, render_time_tracking
from daily_report.timetracking import BaseTimeTracker

HistoryFactory = Callable[[Union[str, Path]], RepositoryHistory]


def repository_name(repo_path: Union[str, Path]) -> str:
    """Return the last segment of the resolved repository path."""
    path = Path(repo_path).expanduser().resolve()
    return path.name or str(path)


def collect_repository(
    repo_path: Union[str, Path],
    window: TimeWindow,
    author_email: Optional[str] = None,
    forge_hosts: Iterable[str] = DEFAULT_FORGE_HOSTS,
    logger: Optional[Any] = None,
    history_factory: HistoryFactory = GitRepositoryHistory,
) -> RepositoryReport:
    """Resolve the base URL and walk the history of one repository.

    Failures are recorded on the returned report instead of being raised,
    so one broken repository does not stop the others.

    Args:
        repo_path: Repository path
        window: Inclusive time window
        author_email: Optional author filter
        forge_hosts: Hosts recognised when resolving the base URL
        logger: Structured logger; defaults to this module's logger
        history_factory: Opens a RepositoryHistory for a path

    Returns:
        RepositoryReport with either commits or an error message
    """
    log = (logger or structlog.get_logger(__name__)).bind(repo_path=str(repo_path))
    name = repository_name(repo_path)

    try:
        history = history_factory(repo_path)
        base_url = resolve_base_url(history.remotes(), forge_hosts)
        context = RepositoryContext(path=str(repo_path), base_url=base_url)
        commits = CommitWalker(history, logger=log).walk(window, context.base_url, author_email=author_email)
    except (RepositoryAccessError, NoGitHubRemote) as e:
        log.warning("repository_failed", error=str(e), error_type=type(e).__name__)
        return RepositoryReport(path=str(repo_path), name=name, error=str(e))

    log.info("commits_collected", base_url=context.base_url, count=len(commits))
    return RepositoryReport(path=context.path, name=name, base_url=context.base_url, commits=commits)


def collect_reports(
    config: ReportConfig,
    window: TimeWindow,
    forge_hosts: Iterable[str] = DEFAULT_FORGE_HOSTS,
    max_workers: int = 1,
    logger: Optional[Any] = None,
    history_factory: HistoryFactory = GitRepositoryHistory,
) -> List[RepositoryReport]:
    """Collect every configured repository, keeping the configured order.

    With ``max_workers > 1`` repositories are walked in a thread pool; the
    result order is still that of ``config.repo_paths``.
    """
    hosts = tuple(forge_hosts)

    def collect(path: str) -> RepositoryReport:
        return collect_repository(
            path,
            window,
            author_email=config.author_email,
            forge_hosts=hosts,
            logger=logger,
            history_factory=history_factory,
        )

    paths = list(config.repo_paths)
    if max_workers > 1 and len(paths) > 1:
        with ThreadPoolExecutor(max_workers=min(max_workers, len(paths))) as pool:
            return list(pool.map(collect, paths))
    return [collect(path) for path in paths]


def generate_report(
    reports: List[RepositoryReport],
    window: TimeWindow,
    tracker: Optional[BaseTimeTracker] = None,
    title: str = DEFAULT_TITLE,
) -> str:
    """Render collected repositories plus the time-tracking section."""
    trailer = None
    if tracker is not None:
        trailer = render_time_tracking(tracker.name, tracker.language_usage(window))
    return render_report(reports, title=title, trailer=trailer)
