"""Named pitcher-picking algorithms, indexable by a stable integer id."""

from __future__ import annotations

import math
from statistics import fmean
from typing import Callable, Iterable, Optional, Tuple

from idol_predictor.algorithms.base import (
    Algorithm,
    AlgorithmError,
    Custom,
    Forbidden,
    Maximize,
    PitcherRef,
    PrintedStat,
    ScoredPitcher,
)
from idol_predictor.algorithms.context import pitcher_ref_for_position
from idol_predictor.lookup import (
    pitcher_ids,
    pitcher_names,
    pitcher_positions,
    team_at_bats,
    team_ids,
    team_strikeouts,
)
from idol_predictor.models import LeagueState, Position, TeamPair

LIFT_ID = "c73b705c-40ad-4633-a6ed-d357ee2e2bcf"
UNRANKED_IDOL_INDEX = 20
STAT_RATIO_BASELINE = 0.2


def _best_by(name: str) -> str:
    return f"Best by {name}"


def _half_stars(rating: float) -> float:
    return math.floor(rating * 10.0) / 2.0


def opponent_strikeout_rate(pitcher: PitcherRef) -> Optional[float]:
    """Mean strikeouts per at-bat over the opponent's lineup.

    Slots without both records, or with zero at-bats, are skipped. Returns
    ``None`` when no slot is usable.
    """

    ratios = [
        strikeouts / at_bats
        for strikeouts, at_bats in zip(
            team_strikeouts(pitcher.opponent, pitcher.state),
            team_at_bats(pitcher.opponent, pitcher.state),
        )
        if strikeouts is not None and at_bats
    ]
    if not ratios:
        return None
    return fmean(ratios)


def best_by_so9(x: PitcherRef) -> Optional[float]:
    if x.stats is None:
        return None
    return x.stats.strikeouts_per_9


def best_by_ruthlessness(x: PitcherRef) -> Optional[float]:
    return x.player.ruthlessness


def best_by_stat_ratio(x: PitcherRef) -> Optional[float]:
    so9 = best_by_so9(x)
    rate = opponent_strikeout_rate(x)
    if so9 is None or rate is None:
        return None
    return so9 * (STAT_RATIO_BASELINE + rate)


def worst_by_stat_ratio(x: PitcherRef) -> Optional[float]:
    so9 = best_by_so9(x)
    rate = opponent_strikeout_rate(x)
    if so9 is None or not rate:
        return None
    return -so9 / rate


def against_lift(x: PitcherRef) -> Optional[float]:
    return 1.0 if x.opponent.id == LIFT_ID else 0.0


def best_by_idolization(x: PitcherRef) -> Optional[float]:
    rank = next(
        (index for index, idol in enumerate(x.state.idols) if idol.player_id == x.player.id),
        UNRANKED_IDOL_INDEX,
    )
    return -float(rank) - 1.0


def best_by_batting_stars(x: PitcherRef) -> Optional[float]:
    return _half_stars(x.player.hitting_rating)


def best_by_name_length(x: PitcherRef) -> Optional[float]:
    return float(len(x.player.name))


def best_by_games_per_game(x: PitcherRef) -> Optional[float]:
    if x.stats is None or x.stats.games == 0:
        return None
    normal_games = x.stats.games
    extra = 0
    # newest first: stop at the first game from another season
    for snapshot in x.state.special_games:
        if snapshot.data.season != x.state.season:
            break
        ids = pitcher_ids(snapshot.data)
        if ids is not None and x.id in ids:
            extra += 1
    return (normal_games + extra) / normal_games


def _pick_best_player(
    state: LeagueState, score: Callable[[Position], float]
) -> ScoredPitcher:
    candidates = [
        (position, score(position))
        for position in state.players
        if "Best" in position.data.name
    ]
    if not candidates:
        raise AlgorithmError("No Best player!")
    # later candidates win ties
    position, value = max(reversed(candidates), key=lambda item: item[1])
    game = next(
        (game for game in state.games if position.team_id in team_ids(game)),
        None,
    )
    if game is None:
        raise AlgorithmError("No Best game!")
    return ScoredPitcher(pitcher=pitcher_ref_for_position(position, game, state), score=value)


def best_by_bestness(state: LeagueState) -> ScoredPitcher:
    return _pick_best_player(state, lambda position: 4.0 / len(position.data.name))


def best_best_by_stars(state: LeagueState) -> ScoredPitcher:
    return _pick_best_player(state, lambda position: _half_stars(position.data.pitching_rating))


def best_by_games_name(state: LeagueState) -> ScoredPitcher:
    def has_games_pitcher(names: Optional[TeamPair[str]]) -> bool:
        return names is not None and names.any_side(lambda name: "Games" in name)

    game = next((game for game in state.games if has_games_pitcher(pitcher_names(game))), None)
    if game is None:
        raise AlgorithmError("No Games game!")
    positions = pitcher_positions(game, state)
    position = next(
        (position for position in positions or () if "Games" in position.data.name),
        None,
    )
    if position is None:
        raise AlgorithmError("Lost the Games!")
    return ScoredPitcher(pitcher=pitcher_ref_for_position(position, game, state), score=1.0)


SO9 = Algorithm(
    name=_best_by("SO/9"),
    printed_stats=(),
    forbidden=Forbidden.UNFORBIDDEN,
    strategy=Maximize(best_by_so9),
)

RUTHLESSNESS = Algorithm(
    name=_best_by("ruthlessness"),
    printed_stats=(PrintedStat.SO9,),
    forbidden=Forbidden.FORBIDDEN,
    strategy=Maximize(best_by_ruthlessness),
)

STAT_RATIO = Algorithm(
    name=_best_by("(SO/9)(SO/AB)"),
    printed_stats=(PrintedStat.SO9,),
    forbidden=Forbidden.UNFORBIDDEN,
    strategy=Maximize(best_by_stat_ratio),
)

LIFT = Algorithm(
    name="Against Lift",
    printed_stats=(),
    forbidden=Forbidden.UNFORBIDDEN,
    strategy=Maximize(against_lift),
)

BESTNESS = Algorithm(
    name=_best_by("Bestness"),
    printed_stats=(),
    forbidden=Forbidden.UNFORBIDDEN,
    strategy=Custom(best_by_bestness),
)

BEST_BEST = Algorithm(
    name="Best Best by Stars",
    printed_stats=(),
    forbidden=Forbidden.UNFORBIDDEN,
    strategy=Custom(best_best_by_stars),
)

WORST_STAT_RATIO = Algorithm(
    name="Worst by (-SO/9)/(SO/AB)",
    printed_stats=(PrintedStat.SO9,),
    forbidden=Forbidden.UNFORBIDDEN,
    strategy=Maximize(worst_by_stat_ratio),
)

IDOLS = Algorithm(
    name=_best_by("idolization"),
    printed_stats=(),
    forbidden=Forbidden.UNFORBIDDEN,
    strategy=Maximize(best_by_idolization),
)

BATTING_STARS = Algorithm(
    name=_best_by("batting stars"),
    printed_stats=(),
    forbidden=Forbidden.UNFORBIDDEN,
    strategy=Maximize(best_by_batting_stars),
)

NAME_LENGTH = Algorithm(
    name=_best_by("name length"),
    printed_stats=(),
    forbidden=Forbidden.UNFORBIDDEN,
    strategy=Maximize(best_by_name_length),
)

GAMES_PER_GAME = Algorithm(
    name=_best_by("games per game"),
    printed_stats=(),
    forbidden=Forbidden.UNFORBIDDEN,
    strategy=Maximize(best_by_games_per_game),
)

GAMES_NAME_PER_GAME = Algorithm(
    name=_best_by("Games per game"),
    printed_stats=(),
    forbidden=Forbidden.UNFORBIDDEN,
    strategy=Custom(best_by_games_name),
)

_SERIOUS: Tuple[Algorithm, ...] = (SO9, RUTHLESSNESS, STAT_RATIO)

_JOKES: Tuple[Algorithm, ...] = (
    LIFT,
    BESTNESS,
    BEST_BEST,
    WORST_STAT_RATIO,
    IDOLS,
    BATTING_STARS,
    NAME_LENGTH,
    GAMES_PER_GAME,
    GAMES_NAME_PER_GAME,
)

ALL_ALGORITHMS: Tuple[Algorithm, ...] = _SERIOUS + _JOKES
ALGORITHMS: Tuple[int, ...] = tuple(range(len(_SERIOUS)))
JOKE_ALGORITHMS: Tuple[int, ...] = tuple(range(len(_SERIOUS), len(ALL_ALGORITHMS)))


def iter_algorithms() -> Iterable[Tuple[int, Algorithm]]:
    """Return ``(id, algorithm)`` pairs, serious algorithms first."""

    return enumerate(ALL_ALGORITHMS)


def get_algorithm(algorithm_id: int) -> Algorithm:
    """Fetch an algorithm by id, raising KeyError if missing."""

    valid = isinstance(algorithm_id, int) and not isinstance(algorithm_id, bool)
    if not valid or not 0 <= algorithm_id < len(ALL_ALGORITHMS):
        raise KeyError(f"No algorithm with id={algorithm_id!r}")
    return ALL_ALGORITHMS[algorithm_id]


def find_algorithm(name: str) -> Tuple[int, Algorithm]:
    """Resolve an algorithm by its exact display name.

    Names are case-sensitive: "Best by games per game" and "Best by Games per
    game" are different algorithms.
    """

    wanted = name.strip()
    for algorithm_id, algorithm in iter_algorithms():
        if algorithm.name == wanted:
            return algorithm_id, algorithm
    raise KeyError(f"No algorithm named {name!r}")
