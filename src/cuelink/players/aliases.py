"""
Player name normalization.

League rosters are typed in by hand, so the same player shows up with
different capitalisation and stray spaces:
- "John Smith"
- "JOHN SMITH"
- "  John   Smith "

Everything that compares names runs them through normalize_name first.
"""

import re

_NON_SLUG_CHARS = re.compile(r"[^a-z0-9\s-]")
_WHITESPACE = re.compile(r"\s+")
_REPEATED_HYPHENS = re.compile(r"-+")


def normalize_name(
    name: str,
    case_sensitive: bool = False,
    ignore_whitespace: bool = True,
) -> str:
    """
    Normalize a player name for comparison.

    Args:
        name: Raw player name as recorded by a league
        case_sensitive: Keep the original casing when True
        ignore_whitespace: Trim the name and collapse runs of whitespace
                           to a single space when True

    Returns:
        The normalized name

    Examples:
        >>> normalize_name("  John   SMITH ")
        'john smith'
        >>> normalize_name("John  Smith", case_sensitive=True)
        'John Smith'
        >>> normalize_name(" John ", ignore_whitespace=False)
        ' john '
    """
    normalized = name

    if not case_sensitive:
        normalized = normalized.lower()

    if ignore_whitespace:
        normalized = " ".join(normalized.split())

    return normalized


def slugify_name(name: str) -> str:
    """
    Turn a player name into a URL-safe slug.

    The name is normalized with the defaults, characters other than
    letters, digits, spaces and hyphens are dropped, and spaces become
    hyphens.

    Examples:
        >>> slugify_name("  JOHN   SMITH  ")
        'john-smith'
        >>> slugify_name("Shaun O'Brien-Jones")
        'shaun-obrien-jones'
        >>> slugify_name("???")
        ''
    """
    slug = _NON_SLUG_CHARS.sub("", normalize_name(name))
    slug = _WHITESPACE.sub("-", slug)
    slug = _REPEATED_HYPHENS.sub("-", slug)
    return slug.strip("-")
