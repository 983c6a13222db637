"""
Candidate matching for league players.

Finds records in other leagues that probably belong to the same person.
Scoring is name-based only:
1. Same league - never a match (0.0). A league's own roster already
   tells its players apart.
2. Identical names after normalization - exact match (1.0)
3. Anything else - edit-distance similarity of the normalized names

Results are suggestions. Whoever consumes them (an admin review screen,
or the link_players script) decides which to accept.
"""

import logging
from typing import Optional, Sequence

from cuelink.config import settings
from cuelink.players.aliases import normalize_name
from cuelink.players.models import (
    LeaguePlayer,
    MatchOptions,
    PlayerKey,
    PlayerMatch,
    unordered_pair_key,
)
from cuelink.players.similarity import similarity

logger = logging.getLogger(__name__)

EXACT_MATCH_REASON = "Exact name match"


def match_confidence(
    player1: LeaguePlayer,
    player2: LeaguePlayer,
    options: Optional[MatchOptions] = None,
) -> float:
    """
    Score how likely two league records are the same person.

    Args:
        player1: First league record
        player2: Second league record
        options: Normalization options (configured defaults when None)

    Returns:
        Confidence from 0.0 to 1.0

    Examples:
        >>> match_confidence(
        ...     LeaguePlayer("wrexham", "John Smith"),
        ...     LeaguePlayer("chester", "JOHN SMITH"),
        ... )
        1.0
        >>> match_confidence(
        ...     LeaguePlayer("wrexham", "John Smith"),
        ...     LeaguePlayer("wrexham", "John Smith"),
        ... )
        0.0
    """
    if player1.league_id == player2.league_id:
        return 0.0

    if options is None:
        case_sensitive = settings.match_case_sensitive
        ignore_whitespace = settings.match_ignore_whitespace
    else:
        case_sensitive = options.case_sensitive
        ignore_whitespace = options.ignore_whitespace

    name1 = normalize_name(player1.player_id, case_sensitive, ignore_whitespace)
    name2 = normalize_name(player2.player_id, case_sensitive, ignore_whitespace)

    if name1 == name2:
        return 1.0

    return similarity(name1, name2)


def describe_confidence(confidence: float) -> str:
    """Human-readable reason for a match at the given confidence."""
    if confidence == 1.0:
        return EXACT_MATCH_REASON
    return f"Fuzzy name match ({round(confidence * 100)}% similarity)"


def find_potential_matches(
    target: LeaguePlayer,
    candidates: Sequence[LeaguePlayer],
    options: Optional[MatchOptions] = None,
) -> list[PlayerMatch]:
    """
    Find records in other leagues that may be the same person as target.

    Candidates from the target's own league are skipped. Each returned
    match has the target as player1 and the candidate as player2.

    Args:
        target: The record to find matches for
        candidates: Pool of records to search
        options: Threshold and normalization options

    Returns:
        Matches at or above options.min_confidence, highest confidence
        first. Equal confidences are ordered by the candidate's league
        and player id.
    """
    options = options or MatchOptions.from_settings()
    matches = []

    for candidate in candidates:
        if candidate.league_id == target.league_id:
            continue

        confidence = match_confidence(target, candidate, options)
        if confidence >= options.min_confidence:
            matches.append(PlayerMatch(
                player1=target,
                player2=candidate,
                confidence=confidence,
                reason=describe_confidence(confidence),
            ))

    matches.sort(key=lambda m: (-m.confidence, m.player2.league_id, m.player2.player_id))

    logger.debug(
        "Matched %s against %d candidates: %d above %.2f",
        target.label, len(candidates), len(matches), options.min_confidence,
    )
    return matches


def find_all_potential_matches(
    players: Sequence[LeaguePlayer],
    options: Optional[MatchOptions] = None,
) -> list[PlayerMatch]:
    """
    Find every cross-league pair of records that may be the same person.

    Each unordered pair is scored once. Records repeated in the input
    (same league and player id, e.g. one per season) don't produce
    duplicate pairs, and a record is never paired with itself.

    This compares every record with every other one. For big rosters,
    bucket players first (by first letter, say) and call this per bucket.

    Args:
        players: All league records to compare
        options: Threshold and normalization options

    Returns:
        Matches at or above options.min_confidence, highest confidence
        first. Equal confidences are ordered by pair key.
    """
    options = options or MatchOptions.from_settings()
    matches = []
    seen_pairs: set[tuple[PlayerKey, PlayerKey]] = set()

    for i, player1 in enumerate(players):
        for player2 in players[i + 1:]:
            if player1.league_id == player2.league_id:
                continue

            pair_key = unordered_pair_key(player1, player2)
            if pair_key in seen_pairs:
                continue
            seen_pairs.add(pair_key)

            confidence = match_confidence(player1, player2, options)
            if confidence >= options.min_confidence:
                matches.append(PlayerMatch(
                    player1=player1,
                    player2=player2,
                    confidence=confidence,
                    reason=describe_confidence(confidence),
                ))

    matches.sort(key=lambda m: (-m.confidence, m.pair_key))

    logger.debug(
        "Compared %d cross-league pairs from %d records: %d above %.2f",
        len(seen_pairs), len(players), len(matches), options.min_confidence,
    )
    return matches
