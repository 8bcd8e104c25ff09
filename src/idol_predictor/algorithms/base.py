"""Algorithm records, strategies and the pitcher context they score."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Tuple, Union

from idol_predictor.models import (
    Game,
    LeagueState,
    PitchingStats,
    Player,
    Position,
    Team,
    TeamPosition,
)


class AlgorithmError(Exception):
    """Raised when an algorithm cannot pick a pitcher at all."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NoCandidatesError(AlgorithmError):
    pass


class Forbidden(Enum):
    FORBIDDEN = "forbidden"
    UNFORBIDDEN = "unforbidden"


class PrintedStat(Enum):
    SO9 = "SO/9"

    def resolve(self, pitcher: "PitcherRef") -> Optional[float]:
        if self is PrintedStat.SO9:
            return pitcher.stats.strikeouts_per_9 if pitcher.stats is not None else None
        raise ValueError(f"Unhandled printed stat {self!r}")


@dataclass(frozen=True)
class PitcherRef:
    """Fully resolved context for one pitcher in one game."""

    id: str
    position: Position
    player: Player
    stats: Optional[PitchingStats]
    game: Game
    state: LeagueState
    team: Team
    opponent: Team
    team_pos: TeamPosition


@dataclass(frozen=True)
class ScoredPitcher:
    pitcher: PitcherRef
    score: float


ScoreFunc = Callable[[PitcherRef], Optional[float]]
SelectFunc = Callable[[LeagueState], ScoredPitcher]


@dataclass(frozen=True)
class Maximize:
    """Pick the pitcher with the greatest score; ``None`` scores are skipped."""

    score: ScoreFunc


@dataclass(frozen=True)
class Custom:
    """Pick the pitcher directly from the whole league state."""

    select: SelectFunc


Strategy = Union[Maximize, Custom]


@dataclass(frozen=True)
class Algorithm:
    name: str
    printed_stats: Tuple[PrintedStat, ...]
    forbidden: Forbidden
    strategy: Strategy

    @property
    def is_forbidden(self) -> bool:
        return self.forbidden is Forbidden.FORBIDDEN
