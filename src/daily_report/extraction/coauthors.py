"""Co-author trailer parsing."""

import re
from typing import List

CO_AUTHOR_PATTERN = re.compile(r"Co-authored-by:[ \t]*[^<>\n]*<([^<>\n]+)>", re.IGNORECASE)


def extract_co_author_emails(message: str) -> List[str]:
    """Collect co-author emails from anywhere in a commit message.

    Duplicates are dropped; the order of first appearance is kept.
    """
    emails: List[str] = []
    for match in CO_AUTHOR_PATTERN.finditer(message or ""):
        email = match.group(1).strip()
        if email and email not in emails:
            emails.append(email)
    return emails
