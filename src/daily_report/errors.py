"""Exceptions raised by the report pipeline."""


class ReportError(Exception):
    """Base class for all report generation failures."""


class RepositoryAccessError(ReportError):
    """Path is not a repository, or its history cannot be read."""


class NoGitHubRemote(ReportError):
    """No configured remote matches a recognised hosting URL pattern."""


class InvalidTime(ReportError):
    """The default window start falls on a nonexistent or ambiguous local time."""


class InvalidArgument(ReportError, ValueError):
    """Malformed user input such as a bad email or timestamp."""
