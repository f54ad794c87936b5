"""Exceptions raised by the football_league domain model."""

from __future__ import annotations


class LeagueError(Exception):
    """Base class for every error raised by this package."""


class NotFoundError(LeagueError, LookupError):
    """A team or player lookup by name found no match."""

    def __init__(self, kind: str, name: str) -> None:
        super().__init__(f"{kind.capitalize()} not found: {name}")
        self.kind = kind
        self.name = name


class InvalidArgumentError(LeagueError, ValueError):
    """A value passed to the model is not acceptable."""


__all__ = ["InvalidArgumentError", "LeagueError", "NotFoundError"]
