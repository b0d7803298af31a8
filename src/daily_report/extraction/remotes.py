"""Derive a hosted web URL from a repository's remotes."""

import re
from typing import Iterable, Optional, Sequence, Tuple

from daily_report.errors import NoGitHubRemote

DEFAULT_FORGE_HOSTS: Tuple[str, ...] = ("github.com",)

# owner/repo, optionally followed by ".git" and/or a trailing slash
_PROJECT = r"(?P<project>[^/\s]+/[^/\s]+?)(?:\.git)?/?"

_SCP_SSH = re.compile(r"^git@(?P<host>[^:/\s]+):" + _PROJECT + r"$")
_URL_SSH = re.compile(r"^ssh://git@(?P<host>[^:/\s]+)(?::\d+)?/" + _PROJECT + r"$")
_HTTPS = re.compile(r"^https://(?P<host>[^/\s]+)/" + _PROJECT + r"$")


def normalize_remote_url(url: str, hosts: Iterable[str] = DEFAULT_FORGE_HOSTS) -> Optional[str]:
    """Convert one remote URL to ``https://<host>/<owner>/<repo>``.

    Args:
        url: Remote URL in SSH (``git@host:owner/repo.git``, ``ssh://git@host/owner/repo``)
            or HTTPS form
        hosts: Host names that are recognised

    Returns:
        The canonical HTTPS URL, or None if the URL does not point at a known host
    """
    allowed = {host.lower() for host in hosts}
    url = url.strip()
    for pattern in (_SCP_SSH, _URL_SSH, _HTTPS):
        match = pattern.match(url)
        if match and match.group("host").lower() in allowed:
            return f"https://{match.group('host')}/{match.group('project')}"
    return None


def resolve_base_url(
    remotes: Sequence[Tuple[str, str]],
    hosts: Iterable[str] = DEFAULT_FORGE_HOSTS,
) -> str:
    """Pick the base URL from the first remote that points at a known host.

    Remotes are checked in the order given; no remote name is preferred.

    Raises:
        NoGitHubRemote: If no remote matches
    """
    hosts = tuple(hosts)
    for _name, url in remotes:
        base_url = normalize_remote_url(url, hosts)
        if base_url is not None:
            return base_url

    names = ", ".join(name for name, _ in remotes) or "none"
    raise NoGitHubRemote(
        f"No remote points at a recognised host ({', '.join(hosts)}); remotes: {names}"
    )
