"""
Turn accepted matches into identity links.

find_all_potential_matches returns pairs. When several pairs share a
record (John Smith in wrexham matches chester, and chester matches
liverpool), they describe one person, so they are collected into one
group and become one PlayerLink.
"""

import logging
from typing import Callable, Iterable

from cuelink.players.clock import Clock, now_ms
from cuelink.players.links import create_player_link, generate_canonical_id
from cuelink.players.models import LinkedPlayerEntry, PlayerKey, PlayerLink, PlayerMatch

logger = logging.getLogger(__name__)


def group_matches(
    matches: Iterable[PlayerMatch],
    id_factory: Callable[[str], str] = generate_canonical_id,
) -> dict[str, list[PlayerMatch]]:
    """
    Group matches that share a league record.

    Matches are taken in order. A match joins the group that already
    holds either of its records; otherwise it starts a new group keyed by
    a canonical id minted from player1's player_id. A match whose records
    sit in two different groups folds the later group into the earlier
    one, so every record ends up in exactly one group.

    Args:
        matches: Matches to group, usually sorted by confidence
        id_factory: Builds the canonical id for a new group

    Returns:
        Canonical id -> matches in that group, in creation order
    """
    groups: dict[str, list[PlayerMatch]] = {}
    owner: dict[PlayerKey, str] = {}

    for match in matches:
        keys = (match.player1.key, match.player2.key)
        found = {owner[key] for key in keys if key in owner}

        if not found:
            group_id = id_factory(match.player1.player_id)
            groups[group_id] = []
        else:
            # Earliest-created group survives
            group_id, *later = [gid for gid in groups if gid in found]
            for merge_id in later:
                groups[group_id].extend(groups.pop(merge_id))
                for key, gid in owner.items():
                    if gid == merge_id:
                        owner[key] = group_id

        groups[group_id].append(match)
        for key in keys:
            owner[key] = group_id

    logger.debug("Grouped matches into %d identities", len(groups))
    return groups


def build_links_from_groups(
    groups: dict[str, list[PlayerMatch]],
    clock: Clock = now_ms,
) -> list[PlayerLink]:
    """
    Create one PlayerLink per group.

    Every record that appears in a group's matches becomes a member,
    with the highest confidence among the matches it appears in.
    """
    links = []

    for canonical_id, matches in groups.items():
        entries: dict[PlayerKey, LinkedPlayerEntry] = {}

        for match in matches:
            for player in (match.player1, match.player2):
                existing = entries.get(player.key)
                if existing is None or match.confidence > existing.confidence:
                    entries[player.key] = LinkedPlayerEntry(
                        league_id=player.league_id,
                        player_id=player.player_id,
                        confidence=match.confidence,
                    )

        links.append(create_player_link(canonical_id, entries.values(), clock=clock))

    return links
