"""Build pitcher contexts from games in a league snapshot."""

from __future__ import annotations

import logging
from typing import Iterator, Optional

from idol_predictor.algorithms.base import AlgorithmError, PitcherRef
from idol_predictor.lookup import find_pitching_stats, find_position, game_teams, pitcher_ids
from idol_predictor.models import Game, LeagueState, PitchingStats, Position, TeamPosition


logger = logging.getLogger(__name__)


def pitcher_ref(game: Game, side: TeamPosition, state: LeagueState) -> Optional[PitcherRef]:
    """Context for the starting pitcher on ``side`` of ``game``.

    Returns ``None`` when the game's teams or the pitcher cannot be resolved.
    Missing pitching stats are allowed and leave ``stats`` unset.
    """

    teams = game_teams(game, state)
    if teams is None:
        logger.debug("Game %s: teams not resolvable", game.id)
        return None
    ids = pitcher_ids(game)
    if ids is None:
        logger.debug("Game %s: starting pitchers not set", game.id)
        return None
    player_id = ids.get(side)
    position = find_position(player_id, state)
    if position is None:
        logger.debug("Game %s: pitcher %s not found", game.id, player_id)
        return None
    return PitcherRef(
        id=player_id,
        position=position,
        player=position.data,
        stats=find_pitching_stats(player_id, state),
        game=game,
        state=state,
        team=teams.get(side),
        opponent=teams.other(side),
        team_pos=side,
    )


def iter_pitchers(state: LeagueState) -> Iterator[PitcherRef]:
    """Every resolvable starting pitcher, games in state order, home before away."""

    for game in state.games:
        for side in (TeamPosition.HOME, TeamPosition.AWAY):
            pitcher = pitcher_ref(game, side, state)
            if pitcher is not None:
                yield pitcher


def pitcher_ref_for_position(
    position: Position,
    game: Game,
    state: LeagueState,
    *,
    stats: Optional[PitchingStats] = None,
) -> PitcherRef:
    """Context for an arbitrary player placed on its team's side of ``game``."""

    teams = game_teams(game, state)
    if teams is None:
        raise AlgorithmError("Couldn't get teams!")
    side = TeamPosition.AWAY if teams.away.id == position.team_id else TeamPosition.HOME
    return PitcherRef(
        id=position.data.id,
        position=position,
        player=position.data,
        stats=stats,
        game=game,
        state=state,
        team=teams.get(side),
        opponent=teams.other(side),
        team_pos=side,
    )
