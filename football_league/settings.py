"""
Configuration for football_league.

Defaults can be overridden with a dictionary or with environment variables
following the pattern ``FOOTBALL_{SECTION}_{FIELD}``, for example::

    FOOTBALL_LEAGUE_NAME="Serie A"
    FOOTBALL_LEAGUE_SEED_DEMO_TEAMS=false
    FOOTBALL_LOGGING_LEVEL=DEBUG
"""

import os
import sys
from typing import Dict, Mapping, Optional

from loguru import logger
from pydantic import BaseModel, Field, ValidationError, field_validator

ENV_PREFIX = "FOOTBALL_"

_LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class LeagueSettings(BaseModel):
    """League created at start-up"""

    name: str = Field(default="Premier League", min_length=1)
    country: str = Field(default="England", min_length=1)
    seed_demo_teams: bool = Field(
        default=True, description="Populate the league with the demo clubs"
    )


class LoggingSettings(BaseModel):
    """Logging Configuration"""

    level: str = Field(default="INFO", description="Minimum loguru level")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v):
        level = v.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level: {v}")
        return level


class FootballLeagueConfig(BaseModel):
    league: LeagueSettings = Field(default_factory=LeagueSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


def load_config(
    config_data: Optional[Dict] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> FootballLeagueConfig:
    """
    Build the configuration from defaults, ``config_data`` and the environment.

    Environment variables win over ``config_data``. An invalid result is
    reported and replaced by the defaults.
    """
    if environ is None:
        environ = os.environ

    config_dict: Dict[str, Dict] = {}
    for section, fields in (config_data or {}).items():
        config_dict[section] = dict(fields)

    sections = set(FootballLeagueConfig.model_fields)
    for env_var, value in environ.items():
        if not env_var.startswith(ENV_PREFIX):
            continue
        remainder = env_var[len(ENV_PREFIX):].lower()
        section, _, field = remainder.partition("_")
        if section not in sections or not field:
            continue
        config_dict.setdefault(section, {})[field] = value

    try:
        return FootballLeagueConfig(**config_dict)
    except ValidationError as e:
        logger.warning(f"Configuration validation failed, using defaults: {e}")
        return FootballLeagueConfig()


def configure_logging(settings: Optional[LoggingSettings] = None) -> None:
    """Send loguru output to stderr at the configured level."""
    if settings is None:
        settings = config.logging
    logger.remove()
    logger.add(sys.stderr, level=settings.level)


# Global configuration instance
config = load_config()
