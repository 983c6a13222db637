"""
Edit-distance primitives for comparing player names.

Names are compared as plain strings here; callers normalize them first
(see aliases.normalize_name) so that case and spacing differences do not
count as edits.
"""

from rapidfuzz.distance import Levenshtein


def edit_distance(a: str, b: str) -> int:
    """
    Levenshtein distance between two strings.

    Every single-character insertion, deletion or substitution costs 1.
    The distance is symmetric and a string is at distance len(s) from
    the empty string.

    Examples:
        >>> edit_distance("john smith", "jon smith")
        1
        >>> edit_distance("", "abc")
        3
    """
    return Levenshtein.distance(a, b)


def similarity(a: str, b: str) -> float:
    """
    Normalized similarity from 0.0 (nothing in common) to 1.0 (identical).

    Computed as 1 - distance / longest length. An empty string on either
    side gives 0.0, even when both are empty: there is nothing to compare,
    which is not the same as a match.

    Examples:
        >>> similarity("john smith", "john smith")
        1.0
        >>> similarity("", "")
        0.0
    """
    if not a or not b:
        return 0.0

    distance = edit_distance(a, b)
    return 1.0 - distance / max(len(a), len(b))
