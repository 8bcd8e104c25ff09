"""Immutable league snapshot records consumed by the algorithms."""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True)


class Player(_Record):
    id: str = Field(..., min_length=1)
    name: str
    pitching_rating: float = 0.0
    hitting_rating: float = 0.0
    ruthlessness: float = 0.0
    team_id: Optional[str] = None


class Position(_Record):
    """A player as fielded by a specific team."""

    team_id: str
    data: Player


class Team(_Record):
    id: str = Field(..., min_length=1)
    full_name: str = ""
    lineup: List[str] = Field(default_factory=list)


class Game(_Record):
    id: str = Field(..., min_length=1)
    season: int = 0
    day: int = 0
    home_team: str
    away_team: str
    home_pitcher: Optional[str] = None
    away_pitcher: Optional[str] = None
    home_pitcher_name: Optional[str] = None
    away_pitcher_name: Optional[str] = None


class GameSnapshot(_Record):
    """Historical copy of a special-event game."""

    valid_from: Optional[datetime] = None
    data: Game


class PitchingStats(_Record):
    player_id: str
    games: int = Field(default=0, ge=0)
    strikeouts_per_9: float = 0.0


class AtBats(_Record):
    player_id: str
    at_bats: int = Field(..., ge=0)


class Strikeouts(_Record):
    player_id: str
    strikeouts: int = Field(..., ge=0)


class Idol(_Record):
    player_id: str


class LeagueState(_Record):
    """Aggregate root of one evaluation run.

    ``special_games`` is ordered newest first; entries from earlier seasons
    are expected to trail the current season's.
    """

    season: int = 0
    teams: List[Team] = Field(default_factory=list)
    games: List[Game] = Field(default_factory=list)
    players: List[Position] = Field(default_factory=list)
    pitcher_stats: List[PitchingStats] = Field(default_factory=list)
    at_bats: List[AtBats] = Field(default_factory=list)
    strikeouts: List[Strikeouts] = Field(default_factory=list)
    idols: List[Idol] = Field(default_factory=list)
    special_games: List[GameSnapshot] = Field(default_factory=list)
