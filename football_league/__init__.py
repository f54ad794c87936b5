"""football_league package exposing the domain model and its snapshots."""

from .errors import InvalidArgumentError, LeagueError, NotFoundError
from .league import League
from .models import (
    CardType,
    MatchOutcome,
    MatchRecord,
    Player,
    Position,
    Team,
    clamp_skill,
    overall_rating,
)
from .seed import build_demo_league
from .snapshots import (
    LeagueSnapshot,
    MatchSnapshot,
    PlayerSnapshot,
    TeamSnapshot,
)

__all__ = [
    "CardType",
    "InvalidArgumentError",
    "League",
    "LeagueError",
    "LeagueSnapshot",
    "MatchOutcome",
    "MatchRecord",
    "MatchSnapshot",
    "NotFoundError",
    "Player",
    "PlayerSnapshot",
    "Position",
    "Team",
    "TeamSnapshot",
    "build_demo_league",
    "clamp_skill",
    "overall_rating",
]
