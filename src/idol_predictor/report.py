"""Serializable views of an evaluation for the command line."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel

from idol_predictor.algorithms import Algorithm
from idol_predictor.evaluate import Evaluation


class PrintedStatResponse(BaseModel):
    stat: str
    value: float | None


class PickResponse(BaseModel):
    algorithm: str
    player_id: str
    name: str
    team_id: str
    opponent_id: str
    game_id: str
    side: str
    score: float
    stats: List[PrintedStatResponse]


class AlgorithmResponse(BaseModel):
    id: int
    name: str
    joke: bool
    forbidden: bool
    printed_stats: List[str]


def pick_response(evaluation: Evaluation) -> PickResponse:
    pitcher = evaluation.pitcher
    return PickResponse(
        algorithm=evaluation.algorithm.name,
        player_id=pitcher.id,
        name=pitcher.player.name,
        team_id=pitcher.team.id,
        opponent_id=pitcher.opponent.id,
        game_id=pitcher.game.id,
        side=pitcher.team_pos.value,
        score=evaluation.score,
        stats=[PrintedStatResponse(stat=stat.value, value=value) for stat, value in evaluation.stats],
    )


def algorithm_response(algorithm_id: int, algorithm: Algorithm, *, joke: bool) -> AlgorithmResponse:
    return AlgorithmResponse(
        id=algorithm_id,
        name=algorithm.name,
        joke=joke,
        forbidden=algorithm.is_forbidden,
        printed_stats=[stat.value for stat in algorithm.printed_stats],
    )


def format_pick(evaluation: Evaluation) -> str:
    pitcher = evaluation.pitcher
    team = pitcher.team.full_name or pitcher.team.id
    opponent = pitcher.opponent.full_name or pitcher.opponent.id
    parts = [
        f"{evaluation.algorithm.name}: {pitcher.player.name} ({team}, {pitcher.team_pos.value} vs {opponent})",
        f"score {evaluation.score:.3f}",
    ]
    for stat, value in evaluation.stats:
        shown = "-" if value is None else f"{value:.2f}"
        parts.append(f"{stat.value} {shown}")
    return ", ".join(parts)
