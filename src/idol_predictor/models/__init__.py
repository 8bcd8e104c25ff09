"""Canonical league models shared across ingestion and algorithm layers."""

from .league import (
    AtBats,
    Game,
    GameSnapshot,
    Idol,
    LeagueState,
    PitchingStats,
    Player,
    Position,
    Strikeouts,
    Team,
)
from .team_pair import TeamPair, TeamPosition

__all__ = [
    "AtBats",
    "Game",
    "GameSnapshot",
    "Idol",
    "LeagueState",
    "PitchingStats",
    "Player",
    "Position",
    "Strikeouts",
    "Team",
    "TeamPair",
    "TeamPosition",
]
