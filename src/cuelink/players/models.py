"""
Value types for player identity resolution.

Everything here is a frozen dataclass. Link operations never edit a
record in place; they build a new one, so a collection of links handed
to one caller can't be changed underneath another.

Confidence values are checked when a record is built, so a bad score is
rejected at the boundary instead of surfacing later inside a merge.
"""

from dataclasses import dataclass, field
from typing import Optional

from cuelink.config import settings


def _check_confidence(value: float, owner: str) -> None:
    if not 0.0 <= value <= 1.0:
        raise ValueError(f"{owner} confidence must be between 0 and 1, got {value}")


# Identity of a league record. Compared as a tuple so ids containing
# separators can never collide.
PlayerKey = tuple[str, str]


def player_key(league_id: str, player_id: str) -> PlayerKey:
    return (league_id, player_id)


def player_label(league_id: str, player_id: str) -> str:
    """Display form of a league record, e.g. 'wrexham:John Smith'."""
    return f"{league_id}:{player_id}"


@dataclass(frozen=True)
class LeaguePlayer:
    """
    A player record scoped to one league.

    player_id is usually the name the league records the player under.
    display_name is carried along for presentation and is not part of
    the record's identity.
    """
    league_id: str
    player_id: str
    display_name: Optional[str] = field(default=None, compare=False)

    @property
    def key(self) -> PlayerKey:
        return player_key(self.league_id, self.player_id)

    @property
    def label(self) -> str:
        return player_label(self.league_id, self.player_id)


def unordered_pair_key(player1: LeaguePlayer, player2: LeaguePlayer) -> tuple[PlayerKey, PlayerKey]:
    """Key for an unordered pair of league records."""
    first, second = sorted((player1.key, player2.key))
    return (first, second)


@dataclass(frozen=True)
class PlayerMatch:
    """
    A candidate pairing of two league players.

    Produced by the matching functions and handed to whoever accepts or
    rejects it.
    """
    player1: LeaguePlayer
    player2: LeaguePlayer
    confidence: float  # 0.0 to 1.0
    reason: str  # e.g. 'Exact name match'

    def __post_init__(self) -> None:
        _check_confidence(self.confidence, "PlayerMatch")

    @property
    def pair_key(self) -> tuple[PlayerKey, PlayerKey]:
        """Order-independent key for the pair of records."""
        return unordered_pair_key(self.player1, self.player2)

    def __repr__(self) -> str:
        return (
            f"<PlayerMatch({self.player1.label!r} <-> {self.player2.label!r}, "
            f"conf={self.confidence:.2f})>"
        )


@dataclass(frozen=True)
class LinkedPlayerEntry:
    """One league record belonging to a PlayerLink."""
    league_id: str
    player_id: str
    confidence: float

    def __post_init__(self) -> None:
        _check_confidence(self.confidence, "LinkedPlayerEntry")

    @property
    def key(self) -> PlayerKey:
        return player_key(self.league_id, self.player_id)

    @property
    def label(self) -> str:
        return player_label(self.league_id, self.player_id)


@dataclass(frozen=True)
class PlayerLink:
    """
    One resolved real-world player.

    id is the canonical identity id the rest of the system refers to.
    linked_players holds at most one entry per (league_id, player_id).
    Timestamps are epoch milliseconds.
    """
    id: str
    linked_players: tuple[LinkedPlayerEntry, ...]
    created_at: int
    updated_at: int

    def __post_init__(self) -> None:
        # Accept any iterable but always store a tuple
        object.__setattr__(self, "linked_players", tuple(self.linked_players))

        if self.updated_at < self.created_at:
            raise ValueError(
                f"PlayerLink {self.id!r} updated_at ({self.updated_at}) "
                f"is before created_at ({self.created_at})"
            )

        seen: set[PlayerKey] = set()
        for entry in self.linked_players:
            if entry.key in seen:
                raise ValueError(f"PlayerLink {self.id!r} lists {entry.label!r} twice")
            seen.add(entry.key)

    def contains(self, league_id: str, player_id: str) -> bool:
        """True if this link holds the given league record."""
        return any(
            entry.league_id == league_id and entry.player_id == player_id
            for entry in self.linked_players
        )

    def __repr__(self) -> str:
        return f"<PlayerLink(id={self.id!r}, players={len(self.linked_players)})>"


@dataclass(frozen=True)
class MatchOptions:
    """
    Knobs for candidate matching.

    Defaults mirror the configuration defaults; use from_settings() to
    pick up values overridden through the environment.
    """
    min_confidence: float = 0.7
    case_sensitive: bool = False
    ignore_whitespace: bool = True

    def __post_init__(self) -> None:
        if not 0.0 <= self.min_confidence <= 1.0:
            raise ValueError(
                f"min_confidence must be between 0 and 1, got {self.min_confidence}"
            )

    @classmethod
    def from_settings(cls) -> "MatchOptions":
        return cls(
            min_confidence=settings.match_min_confidence,
            case_sensitive=settings.match_case_sensitive,
            ignore_whitespace=settings.match_ignore_whitespace,
        )

