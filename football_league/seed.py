"""Demo data the application starts with."""

from __future__ import annotations

from typing import List, Optional, Tuple

from loguru import logger

from .league import League
from .models import Player, Position, Team
from .settings import LeagueSettings, config

DEMO_TEAMS: Tuple[str, ...] = (
    "Manchester United",
    "Liverpool",
    "Arsenal",
    "Chelsea",
    "Manchester City",
)

# (name, position, pace, shooting, passing)
DEMO_SQUAD: Tuple[Tuple[str, Position, int, int, int], ...] = (
    ("Player 1", Position.FORWARD, 9, 8, 7),
    ("Player 2", Position.MIDFIELDER, 7, 6, 9),
    ("Player 3", Position.DEFENDER, 6, 4, 6),
    ("Player 4", Position.GOALKEEPER, 5, 2, 5),
    ("Player 5", Position.MIDFIELDER, 8, 7, 8),
)


def build_demo_squad() -> List[Player]:
    """Return fresh Player objects for one demo team."""

    return [
        Player(name=name, position=position, pace=pace, shooting=shooting, passing=passing)
        for name, position, pace, shooting, passing in DEMO_SQUAD
    ]


def build_demo_league(settings: Optional[LeagueSettings] = None) -> League:
    """Create the start-up league described by ``settings``."""

    if settings is None:
        settings = config.league

    league = League(settings.name, country=settings.country)
    if not settings.seed_demo_teams:
        return league

    for team_name in DEMO_TEAMS:
        team = Team(team_name)
        for player in build_demo_squad():
            team.add_player(player)
        league.add_team(team)

    logger.info(f"Seeded {league.name} with {len(league.teams)} demo teams")
    return league


__all__ = ["DEMO_SQUAD", "DEMO_TEAMS", "build_demo_league", "build_demo_squad"]
