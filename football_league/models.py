"""Domain models for the football_league project.

Players belong to exactly one team and teams to exactly one league; nothing
holds a reference back to its owner, so every lookup walks down by name.
Out-of-range skill values are clamped on write, non-integers are rejected,
and derived values (overall rating, goal difference) are computed on read.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
import math
from typing import List, Optional, Union

from loguru import logger

from .errors import InvalidArgumentError, NotFoundError
from .snapshots import (
    MatchSnapshot,
    PlayerSnapshot,
    SkillSnapshot,
    StatusSnapshot,
    TeamSnapshot,
    TeamStatsSnapshot,
)

SKILL_MIN = 1
SKILL_MAX = 10

POINTS_FOR_WIN = 3
POINTS_FOR_DRAW = 1
POINTS_FOR_LOSS = 0


class Position(Enum):
    """Playing positions a player can be registered under."""

    FORWARD = "Forward"
    MIDFIELDER = "Midfielder"
    DEFENDER = "Defender"
    GOALKEEPER = "Goalkeeper"

    @classmethod
    def coerce(cls, value: Union["Position", str]) -> "Position":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            wanted = value.strip().lower()
            for member in cls:
                if member.value.lower() == wanted or member.name.lower() == wanted:
                    return member
        raise InvalidArgumentError(f"Unknown position: {value!r}")


class CardType(Enum):
    """Disciplinary cards a referee can show."""

    YELLOW = "yellow"
    RED = "red"

    @classmethod
    def coerce(cls, value: Union["CardType", str]) -> "CardType":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise InvalidArgumentError(f"Unknown card type: {value!r}")


class MatchOutcome(Enum):
    """Supported outcomes for a home/away fixture."""

    HOME_WIN = "home_win"
    AWAY_WIN = "away_win"
    DRAW = "draw"


def clamp_skill(value: int) -> int:
    """Clamp ``value`` into the inclusive skill range."""

    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"Skill values must be integers, got {value!r}")
    return max(SKILL_MIN, min(SKILL_MAX, value))


def overall_rating(pace: int, shooting: int, passing: int) -> int:
    """Mean of the three skills, rounded half up."""

    return math.floor((pace + shooting + passing) / 3 + 0.5)


_SKILL_FIELDS = frozenset({"pace", "shooting", "passing"})


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Player:
    """A squad member with skill ratings and disciplinary status."""

    name: str
    position: Position
    pace: int
    shooting: int
    passing: int
    age: int = 25
    nationality: str = "Unknown"
    jersey_number: int = 0
    is_injured: bool = field(default=False, init=False)
    yellow_cards: int = field(default=0, init=False)
    red_cards: int = field(default=0, init=False)

    def __setattr__(self, name: str, value: object) -> None:
        # Every write goes through here, including the generated __init__.
        if name in _SKILL_FIELDS:
            value = clamp_skill(value)
        elif name == "position":
            value = Position.coerce(value)
        super().__setattr__(name, value)

    @property
    def overall_rating(self) -> int:
        return overall_rating(self.pace, self.shooting, self.passing)

    def update_stats(self, pace: int, shooting: int, passing: int) -> None:
        """Overwrite all three skills at once."""

        skills = [clamp_skill(value) for value in (pace, shooting, passing)]
        self.pace, self.shooting, self.passing = skills

    def set_injury_status(self, is_injured: bool) -> None:
        self.is_injured = bool(is_injured)

    def add_card(self, kind: Union[CardType, str]) -> None:
        """Record a card; a second yellow in the current tally becomes a red."""

        card = CardType.coerce(kind)
        if card is CardType.RED:
            self.red_cards += 1
            return

        self.yellow_cards += 1
        if self.yellow_cards >= 2:
            self.red_cards += 1
            self.yellow_cards = 0

    def snapshot(self) -> PlayerSnapshot:
        return PlayerSnapshot(
            name=self.name,
            position=self.position.value,
            age=self.age,
            nationality=self.nationality,
            jersey_number=self.jersey_number,
            stats=SkillSnapshot(
                pace=self.pace,
                shooting=self.shooting,
                passing=self.passing,
                overall=self.overall_rating,
            ),
            status=StatusSnapshot(
                is_injured=self.is_injured,
                yellow_cards=self.yellow_cards,
                red_cards=self.red_cards,
            ),
        )


@dataclass
class Team:
    """A club with an ordered roster and accumulated league statistics."""

    name: str
    city: str = "Unknown"
    stadium: str = "Unknown"
    players: List[Player] = field(default_factory=list, init=False)
    _points: int = field(default=0, init=False, repr=False)
    _goals_for: int = field(default=0, init=False, repr=False)
    _goals_against: int = field(default=0, init=False, repr=False)

    @property
    def points(self) -> int:
        return self._points

    @property
    def goals_for(self) -> int:
        return self._goals_for

    @property
    def goals_against(self) -> int:
        return self._goals_against

    @property
    def goal_difference(self) -> int:
        return self._goals_for - self._goals_against

    # Roster operations -------------------------------------------------
    def add_player(self, player: Player) -> None:
        if not isinstance(player, Player):
            raise InvalidArgumentError(f"Expected a Player, got {type(player).__name__}")
        self.players.append(player)
        logger.debug(f"Added player {player.name} to {self.name}")

    def _index_of(self, player_name: str) -> Optional[int]:
        for index, player in enumerate(self.players):
            if player.name == player_name:
                return index
        return None

    def get_player(self, player_name: str) -> Optional[Player]:
        index = self._index_of(player_name)
        if index is None:
            return None
        return self.players[index]

    def remove_player(self, player_name: str) -> Player:
        """Remove and return the first player called ``player_name``."""

        index = self._index_of(player_name)
        if index is None:
            logger.warning(f"Player not found in {self.name}: {player_name}")
            raise NotFoundError("player", player_name)
        removed = self.players.pop(index)
        logger.debug(f"Removed player {player_name} from {self.name}")
        return removed

    # Statistics --------------------------------------------------------
    def update_stats(self, goals_scored: int, goals_conceded: int, points_earned: int) -> None:
        """Accumulate one match into the team totals.

        Only ``League.record_match`` calls this.
        """

        self._goals_for += goals_scored
        self._goals_against += goals_conceded
        self._points += points_earned

    def snapshot(self) -> TeamSnapshot:
        return TeamSnapshot(
            name=self.name,
            city=self.city,
            stadium=self.stadium,
            players=[player.snapshot() for player in self.players],
            stats=TeamStatsSnapshot(
                points=self.points,
                goals_for=self.goals_for,
                goals_against=self.goals_against,
                goal_difference=self.goal_difference,
            ),
        )


@dataclass(frozen=True)
class MatchRecord:
    """A single recorded result between two teams of the same league."""

    home_team: str
    away_team: str
    home_goals: int
    away_goals: int
    played_at: datetime = field(default_factory=_utcnow)

    @property
    def outcome(self) -> MatchOutcome:
        if self.home_goals > self.away_goals:
            return MatchOutcome.HOME_WIN
        if self.home_goals < self.away_goals:
            return MatchOutcome.AWAY_WIN
        return MatchOutcome.DRAW

    def points_for(self, team_name: str) -> int:
        """Return the league points awarded to ``team_name``."""

        if team_name == self.home_team:
            winning = MatchOutcome.HOME_WIN
        elif team_name == self.away_team:
            winning = MatchOutcome.AWAY_WIN
        else:
            raise InvalidArgumentError(f"{team_name} did not play in this match")

        outcome = self.outcome
        if outcome is MatchOutcome.DRAW:
            return POINTS_FOR_DRAW
        return POINTS_FOR_WIN if outcome is winning else POINTS_FOR_LOSS

    def snapshot(self) -> MatchSnapshot:
        return MatchSnapshot(
            home_team=self.home_team,
            away_team=self.away_team,
            home_goals=self.home_goals,
            away_goals=self.away_goals,
            played_at=self.played_at,
        )


__all__ = [
    "CardType",
    "MatchOutcome",
    "MatchRecord",
    "Player",
    "Position",
    "Team",
    "clamp_skill",
    "overall_rating",
]
