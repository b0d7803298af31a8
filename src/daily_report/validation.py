"""Parsing and validation of user-supplied report options."""

import re
from datetime import datetime, timezone

from dateutil import parser

from daily_report.errors import InvalidArgument

# RFC 3339 date-time; the offset is checked separately for a clearer message
RFC3339_PATTERN = re.compile(
    r"\d{4}-\d{2}-\d{2}[Tt ]\d{2}:\d{2}:\d{2}(?:\.\d+)?(?:[Zz]|[+-]\d{2}:\d{2})?"
)


def parse_timestamp(value: str) -> datetime:
    """Parse an RFC 3339 timestamp into a UTC datetime.

    Args:
        value: Timestamp such as ``2025-01-07T17:00:00Z`` or ``2025-01-07T17:00:00+09:00``

    Returns:
        Timezone-aware datetime in UTC

    Raises:
        InvalidArgument: If the value cannot be parsed or carries no UTC offset
    """
    value = value.strip()
    if not RFC3339_PATTERN.fullmatch(value):
        raise InvalidArgument(f"Invalid RFC 3339 timestamp: {value!r} (example: 2025-01-07T17:00:00Z)")

    try:
        parsed = parser.isoparse(value)
    except (ValueError, OverflowError) as e:
        raise InvalidArgument(
            f"Invalid RFC 3339 timestamp: {value!r} (example: 2025-01-07T17:00:00Z)"
        ) from e

    if parsed.tzinfo is None:
        raise InvalidArgument(
            f"Timestamp needs a UTC offset: {value!r} (example: 2025-01-07T17:00:00Z)"
        )
    return parsed.astimezone(timezone.utc)


def validate_author_email(value: str) -> str:
    """Check that an author filter looks like an email address.

    Only the shape is checked: the value must contain both ``@`` and ``.``.
    """
    if "@" in value and "." in value:
        return value
    raise InvalidArgument(f"Invalid email address: {value!r}")
