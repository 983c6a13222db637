"""
Pytest configuration and fixtures.

This file is automatically loaded by pytest and provides
shared fixtures for all tests.
"""

import pytest

from cuelink.players.models import LeaguePlayer


class SteppingClock:
    """
    Fake clock for link timestamps.

    Returns start, start + step, start + 2 * step, ... so every call
    is a strictly later mutation time.
    """

    def __init__(self, start: int = 1_700_000_000_000, step: int = 1000):
        self.current = start - step
        self.step = step

    def __call__(self) -> int:
        self.current += self.step
        return self.current


@pytest.fixture
def clock():
    """A fresh stepping clock for each test."""
    return SteppingClock()


@pytest.fixture
def fixed_clock():
    """A clock stuck on one millisecond."""
    return lambda: 1_700_000_000_000


@pytest.fixture
def sample_roster():
    """Players from four leagues, including repeats across leagues."""
    return [
        LeaguePlayer("wrexham", "John Smith"),
        LeaguePlayer("chester", "John Smith"),
        LeaguePlayer("liverpool", "Jon Smith"),
        LeaguePlayer("wrexham", "Jane Doe"),
        LeaguePlayer("chester", "Jane Doe"),
        LeaguePlayer("manchester", "Bob Jones"),
    ]
