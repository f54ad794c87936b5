"""Pytest fixtures shared by the football_league tests."""

import pytest
from loguru import logger

from football_league import League, Player, Position, Team


@pytest.fixture
def make_player():
    """Factory for players with sensible default skills."""

    def _make(name="Alex Morgan", position=Position.FORWARD, pace=7, shooting=7, passing=7, **kwargs):
        return Player(name, position, pace, shooting, passing, **kwargs)

    return _make


@pytest.fixture
def team(make_player):
    """A team with three distinctly named players."""
    team = Team("Arsenal", city="London", stadium="Emirates Stadium")
    team.add_player(make_player("Saka", Position.FORWARD, 9, 8, 8))
    team.add_player(make_player("Rice", Position.MIDFIELDER, 7, 6, 9))
    team.add_player(make_player("Raya", Position.GOALKEEPER, 5, 2, 6))
    return team


@pytest.fixture
def league():
    """A league with teams A, B and C and no matches played."""
    league = League("Test League", country="England")
    for name in ("A", "B", "C"):
        league.add_team(Team(name))
    return league


@pytest.fixture
def log_records():
    """Collect loguru records emitted during the test."""
    records = []
    handler_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
    yield records
    logger.remove(handler_id)
