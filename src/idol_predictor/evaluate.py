"""Run an algorithm against a league snapshot and pick the winning pitcher."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from idol_predictor.algorithms import (
    Algorithm,
    Custom,
    Maximize,
    NoCandidatesError,
    PitcherRef,
    PrintedStat,
    ScoredPitcher,
    get_algorithm,
    iter_pitchers,
)
from idol_predictor.models import LeagueState


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Evaluation:
    algorithm: Algorithm
    result: ScoredPitcher
    stats: Tuple[Tuple[PrintedStat, Optional[float]], ...]

    @property
    def pitcher(self) -> PitcherRef:
        return self.result.pitcher

    @property
    def score(self) -> float:
        return self.result.score


def displayed_stats(algorithm: Algorithm) -> Tuple[PrintedStat, ...]:
    """Printed stats to show next to a pick; forbidden algorithms show none."""

    if algorithm.is_forbidden:
        return ()
    return algorithm.printed_stats


def maximize(strategy: Maximize, state: LeagueState) -> ScoredPitcher:
    """Highest-scoring pitcher; the first one seen wins ties."""

    best: Optional[ScoredPitcher] = None
    for pitcher in iter_pitchers(state):
        score = strategy.score(pitcher)
        if score is None or math.isnan(score):
            logger.debug("Skipping %s (%s): no score", pitcher.player.name, pitcher.id)
            continue
        if best is None or score > best.score:
            best = ScoredPitcher(pitcher=pitcher, score=score)
    if best is None:
        raise NoCandidatesError("No pitcher could be scored!")
    return best


def evaluate(algorithm: Union[Algorithm, int], state: LeagueState) -> Evaluation:
    """Pick a pitcher with ``algorithm`` (an ``Algorithm`` or registry id).

    Raises ``AlgorithmError`` when no pitcher can be picked and ``KeyError``
    for an unknown id.
    """

    if not isinstance(algorithm, Algorithm):
        algorithm = get_algorithm(algorithm)

    strategy = algorithm.strategy
    if isinstance(strategy, Maximize):
        result = maximize(strategy, state)
    elif isinstance(strategy, Custom):
        result = strategy.select(state)
    else:
        raise TypeError(f"Unsupported strategy {strategy!r}")

    logger.info(
        "%s picked %s (%s) with score %.3f",
        algorithm.name,
        result.pitcher.player.name,
        result.pitcher.id,
        result.score,
    )
    stats = tuple((stat, stat.resolve(result.pitcher)) for stat in displayed_stats(algorithm))
    return Evaluation(algorithm=algorithm, result=result, stats=stats)
