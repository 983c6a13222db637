"""
Player identity module.

This module handles matching player records from different leagues to
a single canonical identity. Leagues record players by name, and names
are typed by hand, so the same person can appear as "John Smith" in one
league and "Jon Smith" in another.

Key components:
- aliases / similarity: Name normalization and edit-distance scoring
- matching: Candidate search with confidence scores
- links: Create, merge and query identity links
- grouping: Turn accepted matches into links

The matching strategy:
1. Same league - never matched
2. Identical normalized names - confidence 1.0
3. Otherwise - edit-distance similarity, reported above a threshold
"""

from cuelink.players.aliases import normalize_name, slugify_name
from cuelink.players.grouping import build_links_from_groups, group_matches
from cuelink.players.links import (
    InvalidArgumentError,
    add_player_to_link,
    create_player_link,
    generate_canonical_id,
    get_linked_players,
    merge_player_links,
    remove_player_from_link,
    resolve_canonical_id,
)
from cuelink.players.matching import (
    find_all_potential_matches,
    find_potential_matches,
    match_confidence,
)
from cuelink.players.models import (
    LeaguePlayer,
    LinkedPlayerEntry,
    MatchOptions,
    PlayerLink,
    PlayerMatch,
)
from cuelink.players.similarity import edit_distance, similarity

__all__ = [
    "InvalidArgumentError",
    "LeaguePlayer",
    "LinkedPlayerEntry",
    "MatchOptions",
    "PlayerLink",
    "PlayerMatch",
    "add_player_to_link",
    "build_links_from_groups",
    "create_player_link",
    "edit_distance",
    "find_all_potential_matches",
    "find_potential_matches",
    "generate_canonical_id",
    "get_linked_players",
    "group_matches",
    "match_confidence",
    "merge_player_links",
    "normalize_name",
    "remove_player_from_link",
    "resolve_canonical_id",
    "similarity",
    "slugify_name",
]
