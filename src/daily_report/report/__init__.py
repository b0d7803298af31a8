"""Report window, rendering and the per-repository pipeline."""

from daily_report.report.assembler import render_report
from daily_report.report.linker import link_ticket_references
from daily_report.report.pipeline import collect_reports, collect_repository, generate_report
from daily_report.report.window import resolve_window

__all__ = [
    "collect_reports",
    "collect_repository",
    "generate_report",
    "link_ticket_references",
    "render_report",
    "resolve_window",
]
