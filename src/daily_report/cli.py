"""Command-line interface for daily-report."""

from datetime import datetime
from typing import List, Optional

import structlog
import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from daily_report.errors import InvalidArgument, InvalidTime
from daily_report.logging_config import configure_logging
from daily_report.models import ReportConfig, Settings
from daily_report.report import collect_reports, generate_report, resolve_window
from daily_report.timetracking import WakaTimeTracker
from daily_report.validation import parse_timestamp, validate_author_email

app = typer.Typer(
    name="daily-report",
    help="Generate a daily report from Git commit history and WakaTime data",
    add_completion=False,
)
err_console = Console(stderr=True)


def _timestamp_option(value: Optional[str]) -> Optional[datetime]:
    if value is None:
        return None
    try:
        return parse_timestamp(value)
    except InvalidArgument as e:
        raise typer.BadParameter(str(e)) from e


def _email_option(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    try:
        return validate_author_email(value)
    except InvalidArgument as e:
        raise typer.BadParameter(str(e)) from e


@app.callback()
def main(
    ctx: typer.Context,
    log_level: Optional[str] = typer.Option(None, "--log-level", "-l", help="Log level (default from DAILY_REPORT_LOG_LEVEL or WARNING)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging (same as --log-level DEBUG)"),
) -> None:
    """Daily report generator."""
    try:
        settings = Settings()
    # pydantic ValidationError and malformed JSON values are both ValueErrors
    except ValueError as e:
        err_console.print(f"[bold red]Error:[/bold red] invalid DAILY_REPORT_ settings: {escape(str(e))}")
        raise typer.Exit(1)
    level = "DEBUG" if verbose else (log_level or settings.log_level)
    try:
        configure_logging(level)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--log-level") from e
    ctx.obj = settings


@app.command()
def generate(
    ctx: typer.Context,
    repo_path: List[str] = typer.Option(["."], "--repo-path", "-r", help="Repository path (repeatable)"),
    wakatime_api_key: str = typer.Option(..., "--wakatime-api-key", "-w", envvar="WAKATIME_API_KEY", help="WakaTime API key"),
    since: Optional[str] = typer.Option(None, "--since", "-s", help="Report start, RFC 3339 (default: yesterday 17:00 local time)"),
    until: Optional[str] = typer.Option(None, "--until", "-u", help="Report end, RFC 3339 (default: now)"),
    author_email: Optional[str] = typer.Option(None, "--author-email", "-a", help="Only commits by this author or co-author"),
) -> None:
    """Generate the daily report and print it to standard output."""
    settings: Settings = ctx.obj or Settings()
    logger = structlog.get_logger("daily_report")

    try:
        config = ReportConfig(
            repo_paths=repo_path,
            author_email=_email_option(author_email),
            since=_timestamp_option(since),
            until=_timestamp_option(until),
        )
    except ValidationError as e:
        raise typer.BadParameter(str(e)) from e

    try:
        window = resolve_window(config.since, config.until, cutoff_hour=settings.cutoff_hour)
    except InvalidTime as e:
        err_console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)

    logger.info(
        "report_started",
        repo_paths=config.repo_paths,
        author_email=config.author_email,
        since=window.since.isoformat(),
        until=window.until.isoformat(),
    )

    reports = collect_reports(
        config,
        window,
        forge_hosts=settings.forge_hosts,
        max_workers=settings.max_workers,
        logger=logger,
    )
    tracker = WakaTimeTracker(api_key=wakatime_api_key)
    typer.echo(generate_report(reports, window, tracker=tracker, title=settings.report_title))

    failed = [report for report in reports if report.failed]
    for report in failed:
        err_console.print(f"[bold red]Error:[/bold red] {escape(report.path)}: {escape(report.error or '')}", highlight=False)
    if failed:
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
