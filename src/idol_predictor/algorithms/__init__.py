"""Pitcher scoring algorithms and the registry that names them."""

from .base import (
    Algorithm,
    AlgorithmError,
    Custom,
    Forbidden,
    Maximize,
    NoCandidatesError,
    PitcherRef,
    PrintedStat,
    ScoredPitcher,
)
from .context import iter_pitchers, pitcher_ref, pitcher_ref_for_position
from .registry import (
    ALGORITHMS,
    ALL_ALGORITHMS,
    JOKE_ALGORITHMS,
    find_algorithm,
    get_algorithm,
    iter_algorithms,
)

__all__ = [
    "ALGORITHMS",
    "ALL_ALGORITHMS",
    "JOKE_ALGORITHMS",
    "Algorithm",
    "AlgorithmError",
    "Custom",
    "Forbidden",
    "Maximize",
    "NoCandidatesError",
    "PitcherRef",
    "PrintedStat",
    "ScoredPitcher",
    "find_algorithm",
    "get_algorithm",
    "iter_algorithms",
    "iter_pitchers",
    "pitcher_ref",
    "pitcher_ref_for_position",
]
