"""Read-only views of the domain model handed to presentation code.

Snapshots are frozen pydantic models. ``model_dump(by_alias=True)`` yields the
camelCase keys a browser front end expects, while attribute access keeps the
snake_case names.
"""

from __future__ import annotations

from datetime import datetime
from typing import List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class SnapshotModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class SkillSnapshot(SnapshotModel):
    pace: int = Field(..., ge=1, le=10)
    shooting: int = Field(..., ge=1, le=10)
    passing: int = Field(..., ge=1, le=10)
    overall: int = Field(..., ge=1, le=10)


class StatusSnapshot(SnapshotModel):
    is_injured: bool
    yellow_cards: int = Field(..., ge=0)
    red_cards: int = Field(..., ge=0)


class PlayerSnapshot(SnapshotModel):
    name: str
    position: str
    age: int
    nationality: str
    jersey_number: int
    stats: SkillSnapshot
    status: StatusSnapshot


class TeamStatsSnapshot(SnapshotModel):
    points: int
    goals_for: int
    goals_against: int
    goal_difference: int


class TeamSnapshot(SnapshotModel):
    name: str
    city: str
    stadium: str
    players: List[PlayerSnapshot] = Field(default_factory=list)
    stats: TeamStatsSnapshot


class MatchSnapshot(SnapshotModel):
    home_team: str
    away_team: str
    home_goals: int = Field(..., ge=0)
    away_goals: int = Field(..., ge=0)
    played_at: datetime


class LeagueSnapshot(SnapshotModel):
    name: str
    country: str
    teams: List[TeamSnapshot] = Field(default_factory=list)
    matches: List[MatchSnapshot] = Field(default_factory=list)
    standings: List[TeamSnapshot] = Field(default_factory=list)


__all__ = [
    "LeagueSnapshot",
    "MatchSnapshot",
    "PlayerSnapshot",
    "SkillSnapshot",
    "StatusSnapshot",
    "TeamSnapshot",
    "TeamStatsSnapshot",
]
