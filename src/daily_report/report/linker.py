"""Ticket reference links in commit titles."""

import re

TICKET_PATTERN = re.compile(r"#(\d+)")


def link_ticket_references(title: str, base_url: str) -> str:
    """Rewrite every ``#<digits>`` into a Markdown link to the issue tracker.

    >>> link_ticket_references("Fix #7", "https://github.com/acme/widgets")
    'Fix [#7](https://github.com/acme/widgets/issues/7)'
    """
    return TICKET_PATTERN.sub(
        lambda match: f"[#{match.group(1)}]({base_url}/issues/{match.group(1)})",
        title,
    )
