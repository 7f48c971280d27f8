"""Show name matching used by gateways to resolve a show from a pattern."""

import re
from typing import Optional


def _compile(pattern: str) -> "re.Pattern[str]":
    """Compile a case-insensitive pattern, falling back to a literal match."""
    try:
        return re.compile(pattern, re.IGNORECASE)
    except re.error:
        return re.compile(re.escape(pattern), re.IGNORECASE)


def matches(pattern: str, candidate: Optional[str]) -> bool:
    """
    Check whether a show name matches a lookup pattern.

    The pattern is searched anywhere in the candidate, ignoring case.
    Regular expression syntax is honoured; a pattern that is not a valid
    regular expression is matched as a plain substring.

    Args:
        pattern: Lookup pattern as typed by the caller
        candidate: Show name to test

    Returns:
        True if the pattern occurs in the candidate
    """
    if candidate is None:
        return False
    return _compile(pattern).search(candidate) is not None
