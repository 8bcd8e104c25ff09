"""Resolve id cross-references between league entities.

Every lookup is a linear scan over the snapshot; the first matching record
wins. Nothing is indexed or cached, so results always reflect the state
passed in.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Optional, TypeVar

from idol_predictor.models import (
    Game,
    LeagueState,
    PitchingStats,
    Position,
    Team,
    TeamPair,
)

T = TypeVar("T")


def _first(items: Iterable[T]) -> Optional[T]:
    return next(iter(items), None)


def find_team(team_id: str, state: LeagueState) -> Optional[Team]:
    return _first(team for team in state.teams if team.id == team_id)


def find_position(player_id: str, state: LeagueState) -> Optional[Position]:
    return _first(position for position in state.players if position.data.id == player_id)


def find_pitching_stats(player_id: str, state: LeagueState) -> Optional[PitchingStats]:
    return _first(stats for stats in state.pitcher_stats if stats.player_id == player_id)


def team_ids(game: Game) -> TeamPair[str]:
    return TeamPair(home=game.home_team, away=game.away_team)


def pitcher_ids(game: Game) -> Optional[TeamPair[str]]:
    """Starting pitcher ids, or ``None`` until both sides have one."""

    if game.home_pitcher is None or game.away_pitcher is None:
        return None
    return TeamPair(home=game.home_pitcher, away=game.away_pitcher)


def pitcher_names(game: Game) -> Optional[TeamPair[str]]:
    if game.home_pitcher_name is None or game.away_pitcher_name is None:
        return None
    return TeamPair(home=game.home_pitcher_name, away=game.away_pitcher_name)


def game_teams(game: Game, state: LeagueState) -> Optional[TeamPair[Team]]:
    return team_ids(game).and_then(lambda team_id: find_team(team_id, state))


def pitcher_positions(game: Game, state: LeagueState) -> Optional[TeamPair[Position]]:
    ids = pitcher_ids(game)
    if ids is None:
        return None
    return ids.and_then(lambda player_id: find_position(player_id, state))


def pitcher_stats(game: Game, state: LeagueState) -> Optional[TeamPair[PitchingStats]]:
    ids = pitcher_ids(game)
    if ids is None:
        return None
    return ids.and_then(lambda player_id: find_pitching_stats(player_id, state))


def team_at_bats(team: Team, state: LeagueState) -> Iterator[Optional[int]]:
    """Yield cumulative at-bats for each lineup slot, in lineup order."""

    for player_id in team.lineup:
        record = _first(row for row in state.at_bats if row.player_id == player_id)
        yield record.at_bats if record is not None else None


def team_strikeouts(team: Team, state: LeagueState) -> Iterator[Optional[int]]:
    """Yield cumulative strikeouts for each lineup slot, in lineup order."""

    for player_id in team.lineup:
        record = _first(row for row in state.strikeouts if row.player_id == player_id)
        yield record.strikeouts if record is not None else None
