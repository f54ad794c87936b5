"""In-memory league holding teams, the match log and the league table."""

from __future__ import annotations

from typing import List, Optional

from loguru import logger

from .errors import InvalidArgumentError, NotFoundError
from .models import MatchRecord, Player, Team
from .snapshots import LeagueSnapshot, TeamSnapshot


class League:
    """Owns an ordered set of teams and an append-only match log.

    Instances are not thread-safe; keep each league on one thread of control.
    """

    def __init__(self, name: str, country: str = "Unknown") -> None:
        self.name = name
        self.country = country
        self.teams: List[Team] = []
        self.matches: List[MatchRecord] = []

    # Team operations ---------------------------------------------------
    def add_team(self, team: Team) -> None:
        if not isinstance(team, Team):
            raise InvalidArgumentError(f"Expected a Team, got {type(team).__name__}")
        self.teams.append(team)
        logger.info(f"Team {team.name} joined {self.name}")

    def _index_of(self, team_name: str) -> Optional[int]:
        for index, team in enumerate(self.teams):
            if team.name == team_name:
                return index
        return None

    def get_team(self, team_name: str) -> Optional[Team]:
        index = self._index_of(team_name)
        if index is None:
            return None
        return self.teams[index]

    def remove_team(self, team_name: str) -> Team:
        """Remove and return the first team called ``team_name``."""

        index = self._index_of(team_name)
        if index is None:
            logger.warning(f"Team not found in {self.name}: {team_name}")
            raise NotFoundError("team", team_name)
        removed = self.teams.pop(index)
        logger.info(f"Team {team_name} left {self.name}")
        return removed

    def _require_team(self, team_name: str) -> Team:
        team = self.get_team(team_name)
        if team is None:
            logger.warning(f"Team not found in {self.name}: {team_name}")
            raise NotFoundError("team", team_name)
        return team

    # Player operations -------------------------------------------------
    def get_player(self, team_name: str, player_name: str) -> Optional[Player]:
        team = self.get_team(team_name)
        if team is None:
            return None
        return team.get_player(player_name)

    # Match operations --------------------------------------------------
    def record_match(
        self,
        home_team_name: str,
        away_team_name: str,
        home_goals: int,
        away_goals: int,
    ) -> MatchRecord:
        """Apply a result to both teams and append it to the match log.

        Both teams are resolved and the score validated before anything is
        written, so a failing call leaves the league exactly as it was.
        """

        for goals in (home_goals, away_goals):
            if isinstance(goals, bool) or not isinstance(goals, int):
                raise InvalidArgumentError(f"Goals must be integers, got {goals!r}")

        home = self._require_team(home_team_name)
        away = self._require_team(away_team_name)
        if home is away:
            raise InvalidArgumentError(f"{home_team_name} cannot play itself")
        if home_goals < 0 or away_goals < 0:
            raise InvalidArgumentError(
                f"Goals must not be negative: {home_goals}-{away_goals}"
            )

        match = MatchRecord(
            home_team=home_team_name,
            away_team=away_team_name,
            home_goals=home_goals,
            away_goals=away_goals,
        )
        home.update_stats(home_goals, away_goals, match.points_for(home_team_name))
        away.update_stats(away_goals, home_goals, match.points_for(away_team_name))
        self.matches.append(match)

        logger.info(
            f"Recorded {home_team_name} {home_goals}-{away_goals} {away_team_name}"
        )
        return match

    # Reporting helpers -------------------------------------------------
    def get_standings(self) -> List[TeamSnapshot]:
        """Team snapshots ordered by points, then goal difference.

        ``sorted`` is stable, so teams level on both keep the order in which
        they joined the league.
        """

        return sorted(
            (team.snapshot() for team in self.teams),
            key=lambda snapshot: (-snapshot.stats.points, -snapshot.stats.goal_difference),
        )

    def snapshot(self) -> LeagueSnapshot:
        return LeagueSnapshot(
            name=self.name,
            country=self.country,
            teams=[team.snapshot() for team in self.teams],
            matches=[match.snapshot() for match in self.matches],
            standings=self.get_standings(),
        )


__all__ = ["League"]
