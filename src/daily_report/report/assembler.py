"""Rendering of the final text report."""

from typing import List, Optional, Sequence

from daily_report.models import CommitRecord, LanguageUsage, RepositoryReport
from daily_report.report.linker import link_ticket_references

DEFAULT_TITLE = "What I did"


def format_commit_line(commit: CommitRecord, base_url: str) -> str:
    """Format one commit as a Markdown list item."""
    title = link_ticket_references(commit.title, base_url)
    return f"- {title} ([{commit.short_hash}]({commit.commit_url}))"


def render_repository_section(report: RepositoryReport) -> str:
    """Render a repository heading followed by its commits."""
    lines = [f"{report.name}:"]
    lines.extend(format_commit_line(commit, report.base_url or "") for commit in report.commits)
    return "\n".join(lines)


def render_time_tracking(tracker_name: str, usage: Sequence[LanguageUsage]) -> str:
    """Render the trailing time-tracking section."""
    lines = [f"## {tracker_name}"]
    lines.extend(f"- {entry.language}: {entry.hours:g} hours" for entry in usage)
    return "\n".join(lines)


def render_report(
    reports: Sequence[RepositoryReport],
    title: str = DEFAULT_TITLE,
    trailer: Optional[str] = None,
) -> str:
    """Assemble the full report.

    Repositories without commits (including failed ones) are left out. The
    rest keep their input order, separated by a single blank line.

    Args:
        reports: Per-repository results in configured order
        title: Top-level heading text
        trailer: Optional closing section, appended after a blank line

    Returns:
        Report text without a trailing newline
    """
    blocks: List[str] = [f"# {title}"]
    blocks.extend(render_repository_section(report) for report in reports if report.commits)
    if trailer:
        blocks.append(trailer)
    return "\n\n".join(blocks)
