"""Daily activity reports from local Git history."""

__version__ = "0.1.0"
