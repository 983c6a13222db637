"""
Player link management.

A PlayerLink ties several league records to one canonical identity.
These functions take the current links and return new ones; they never
modify their arguments. Storing the result, and making sure two writers
don't overwrite each other's changes, is the caller's job.

Confidence for a member only ever goes up: merging links, or adding a
record that is already present, keeps the higher of the two scores.
"""

import logging
import uuid
from typing import Iterable, Optional, Sequence

from cuelink.players.aliases import slugify_name
from cuelink.players.clock import Clock, now_ms
from cuelink.players.models import LinkedPlayerEntry, PlayerKey, PlayerLink

logger = logging.getLogger(__name__)


class InvalidArgumentError(ValueError):
    """Raised when an operation has nothing sensible to work on."""


def create_player_link(
    canonical_id: str,
    players: Iterable[LinkedPlayerEntry],
    clock: Clock = now_ms,
) -> PlayerLink:
    """
    Create a new link for a group of matched league records.

    Args:
        canonical_id: Id for the new identity (see generate_canonical_id)
        players: Member records with their confidence
        clock: Time source for created_at/updated_at

    Returns:
        New PlayerLink with created_at == updated_at
    """
    timestamp = clock()
    return PlayerLink(
        id=canonical_id,
        linked_players=tuple(players),
        created_at=timestamp,
        updated_at=timestamp,
    )


def merge_player_links(links: Sequence[PlayerLink], clock: Clock = now_ms) -> PlayerLink:
    """
    Merge several links into one.

    Use this when two identities turn out to be the same person. The
    merged link keeps the id and created_at of the oldest input link so
    references to that id stay valid; when several links share the
    oldest created_at, the first of them in input order wins.

    Members are combined by (league_id, player_id). A record present in
    more than one link keeps its highest confidence.

    Args:
        links: Links to merge
        clock: Time source for the merged link's updated_at

    Returns:
        The merged link. A single input link is returned as is.

    Raises:
        InvalidArgumentError: If links is empty
    """
    if not links:
        raise InvalidArgumentError("Cannot merge an empty list of player links")

    if len(links) == 1:
        return links[0]

    # min() keeps the first of equal elements, so ties go to input order
    oldest = min(links, key=lambda link: link.created_at)

    merged: dict[PlayerKey, LinkedPlayerEntry] = {}
    for link in links:
        for entry in link.linked_players:
            existing = merged.get(entry.key)
            if existing is None or entry.confidence > existing.confidence:
                merged[entry.key] = entry

    logger.debug(
        "Merged %d links into %s (%d players)",
        len(links), oldest.id, len(merged),
    )

    return PlayerLink(
        id=oldest.id,
        linked_players=tuple(merged.values()),
        created_at=oldest.created_at,
        updated_at=clock(),
    )


def add_player_to_link(
    link: PlayerLink,
    entry: LinkedPlayerEntry,
    clock: Clock = now_ms,
) -> PlayerLink:
    """
    Add a league record to a link.

    If the record is already a member, its confidence becomes the higher
    of the stored and new values. updated_at is refreshed either way.
    """
    linked_players = list(link.linked_players)

    for index, existing in enumerate(linked_players):
        if existing.key == entry.key:
            if entry.confidence > existing.confidence:
                linked_players[index] = entry
            break
    else:
        linked_players.append(entry)

    return PlayerLink(
        id=link.id,
        linked_players=tuple(linked_players),
        created_at=link.created_at,
        updated_at=clock(),
    )


def remove_player_from_link(
    link: PlayerLink,
    league_id: str,
    player_id: str,
    clock: Clock = now_ms,
) -> PlayerLink:
    """
    Remove a league record from a link.

    Removing a record that isn't a member is not an error; the link
    comes back with the same members and a refreshed updated_at.
    """
    linked_players = tuple(
        entry for entry in link.linked_players
        if not (entry.league_id == league_id and entry.player_id == player_id)
    )

    if len(linked_players) == len(link.linked_players):
        logger.debug("%s:%s is not in link %s", league_id, player_id, link.id)

    return PlayerLink(
        id=link.id,
        linked_players=linked_players,
        created_at=link.created_at,
        updated_at=clock(),
    )


def resolve_canonical_id(
    league_id: str,
    player_id: str,
    links: Iterable[PlayerLink],
) -> Optional[str]:
    """
    Find the canonical id for a league record.

    Each record is expected to belong to at most one link. If that
    doesn't hold, the first containing link in iteration order is used.

    Returns:
        The link id, or None if no link contains the record
    """
    for link in links:
        if link.contains(league_id, player_id):
            return link.id
    return None


def get_linked_players(
    canonical_id: str,
    links: Iterable[PlayerLink],
) -> list[LinkedPlayerEntry]:
    """All league records linked to a canonical id (empty if unknown)."""
    for link in links:
        if link.id == canonical_id:
            return list(link.linked_players)
    return []


def _to_base36(value: int) -> str:
    """Render a non-negative integer in lowercase base 36, e.g. 35 -> 'z'."""
    digits = "0123456789abcdefghijklmnopqrstuvwxyz"
    if value == 0:
        return "0"
    result = []
    while value:
        value, remainder = divmod(value, 36)
        result.append(digits[remainder])
    return "".join(reversed(result))


def generate_canonical_id(name: str, clock: Clock = now_ms) -> str:
    """
    Mint a new canonical id for a player name.

    The id starts with a slug of the name, so it is readable and the
    same for "John Smith" and "  JOHN   SMITH  ". A suffix built from the
    current time and a random component makes every call return a
    different id, even for the same name in the same millisecond. This
    doesn't look anything up: each call creates a new identity id.

    Examples:
        generate_canonical_id("John Smith")  # 'john-smith-m1x2k3p0-9f86d081'
        generate_canonical_id("")            # 'm1x2k3p0-1c2b3a4d'
    """
    suffix = f"{_to_base36(clock())}-{uuid.uuid4().hex[:8]}"
    slug = slugify_name(name)
    if not slug:
        return suffix
    return f"{slug}-{suffix}"
