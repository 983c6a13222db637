#!/usr/bin/env python3
"""
Suggest player links across leagues from a roster export.

Reads a JSON list of league players, finds likely cross-league matches,
groups them into identities and prints a summary. Without --dry-run the
resulting links are written as JSON for the store to import.

Roster format:
    [{"leagueId": "wrexham", "playerId": "John Smith"}, ...]

Usage:
    python scripts/link_players.py roster.json --dry-run
    python scripts/link_players.py roster.json --min-confidence 0.8 --output links.json
"""

import argparse
import json
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from cuelink.config import settings
from cuelink.players.grouping import build_links_from_groups, group_matches
from cuelink.players.matching import find_all_potential_matches
from cuelink.players.models import LeaguePlayer, MatchOptions, PlayerLink, PlayerMatch

logger = logging.getLogger(__name__)


def _confidence_arg(value: str) -> float:
    try:
        parsed = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {value!r}")
    if not 0.0 <= parsed <= 1.0:
        raise argparse.ArgumentTypeError(f"must be between 0 and 1, got {parsed}")
    return parsed


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Suggest cross-league player links")
    parser.add_argument("roster", type=Path, help="JSON file listing league players")
    parser.add_argument(
        "--min-confidence",
        type=_confidence_arg,
        default=settings.match_min_confidence,
        help="Minimum match confidence (0-1)",
    )
    parser.add_argument("--dry-run", action="store_true", help="Print suggestions only")
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("player_links.json"),
        help="Where to write the links (ignored with --dry-run)",
    )
    return parser.parse_args(argv)


def load_roster(path: Path) -> list[LeaguePlayer]:
    """Read league players from a roster export."""
    rows = json.loads(path.read_text(encoding="utf-8"))
    return [
        LeaguePlayer(
            league_id=row["leagueId"],
            player_id=row["playerId"],
            display_name=row.get("displayName"),
        )
        for row in rows
    ]


def link_to_dict(link: PlayerLink) -> dict:
    return {
        "id": link.id,
        "linkedPlayers": [
            {
                "leagueId": entry.league_id,
                "playerId": entry.player_id,
                "confidence": entry.confidence,
            }
            for entry in link.linked_players
        ],
        "createdAt": link.created_at,
        "updatedAt": link.updated_at,
    }


def format_summary(groups: dict[str, list[PlayerMatch]]) -> str:
    """Render suggested groups for review on the console."""
    lines = ["=" * 80, "SUGGESTED PLAYER LINKS", "=" * 80]

    if not groups:
        lines.append("No potential matches found.")
        return "\n".join(lines)

    for number, (canonical_id, matches) in enumerate(groups.items(), start=1):
        lines.append(f"\nGroup {number} (Canonical ID: {canonical_id}):")
        lines.append("-" * 80)

        players: dict[str, LeaguePlayer] = {}
        for match in matches:
            players.setdefault(match.player1.key, match.player1)
            players.setdefault(match.player2.key, match.player2)
        for player in players.values():
            lines.append(f"  * {player.player_id} ({player.league_id})")

        lines.append("  Matches:")
        for match in matches:
            lines.append(
                f"    {match.player1.player_id} ({match.player1.league_id}) <-> "
                f"{match.player2.player_id} ({match.player2.league_id}) - "
                f"{round(match.confidence * 100)}% ({match.reason})"
            )

    lines.append("=" * 80)
    lines.append(f"Total groups: {len(groups)}")
    return "\n".join(lines)


def run(args: argparse.Namespace) -> list[PlayerLink]:
    players = load_roster(args.roster)
    logger.info("Loaded %d players from %s", len(players), args.roster)

    if not players:
        logger.info("No players found. Nothing to link.")
        return []

    options = MatchOptions(
        min_confidence=args.min_confidence,
        case_sensitive=settings.match_case_sensitive,
        ignore_whitespace=settings.match_ignore_whitespace,
    )
    matches = find_all_potential_matches(players, options)
    logger.info("Found %d potential match(es) at >= %.2f", len(matches), args.min_confidence)

    groups = group_matches(matches)
    print(format_summary(groups))

    links = build_links_from_groups(groups)

    if args.dry_run:
        logger.info("[DRY RUN] %d link(s) not written", len(links))
        return links

    payload = [link_to_dict(link) for link in links]
    args.output.write_text(json.dumps(payload, indent=2), encoding="utf-8")
    logger.info("Wrote %d link(s) to %s", len(links), args.output)
    return links


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%H:%M:%S",
    )

    try:
        run(args)
    except (OSError, ValueError, KeyError) as exc:
        logger.error("Linking failed: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
