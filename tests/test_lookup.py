from idol_predictor.lookup import (
    game_teams,
    pitcher_ids,
    pitcher_names,
    pitcher_positions,
    pitcher_stats,
    team_at_bats,
    team_strikeouts,
)
from idol_predictor.models import (
    AtBats,
    Game,
    LeagueState,
    PitchingStats,
    Player,
    Position,
    Strikeouts,
    Team,
    TeamPair,
)


def _state(**overrides) -> LeagueState:
    data = dict(
        teams=[
            Team(id="t1", lineup=["a1", "a2", "a3"]),
            Team(id="t2", lineup=["b1"]),
        ],
        games=[
            Game(id="g1", home_team="t1", away_team="t2", home_pitcher="a1", away_pitcher="b1"),
        ],
        players=[
            Position(team_id="t1", data=Player(id="a1", name="Alpha")),
            Position(team_id="t2", data=Player(id="b1", name="Beta")),
        ],
        pitcher_stats=[
            PitchingStats(player_id="a1", games=3, strikeouts_per_9=7.5),
            PitchingStats(player_id="b1", games=2, strikeouts_per_9=4.0),
            PitchingStats(player_id="a1", games=9, strikeouts_per_9=99.0),
        ],
        at_bats=[AtBats(player_id="a1", at_bats=10), AtBats(player_id="a3", at_bats=4)],
        strikeouts=[Strikeouts(player_id="a3", strikeouts=1)],
    )
    data.update(overrides)
    return LeagueState(**data)


def test_game_teams_resolves_both_sides():
    state = _state()
    teams = game_teams(state.games[0], state)
    assert teams is not None
    assert teams.map(lambda team: team.id) == TeamPair(home="t1", away="t2")


def test_game_teams_missing_team_is_absent():
    state = _state(teams=[Team(id="t1")])
    assert game_teams(state.games[0], state) is None


def test_pitcher_ids_absent_until_both_assigned():
    game = Game(id="g", home_team="t1", away_team="t2", home_pitcher="a1")
    assert pitcher_ids(game) is None
    assert pitcher_positions(game, _state()) is None
    assert pitcher_stats(game, _state()) is None


def test_pitcher_names_absent_until_both_known():
    game = Game(id="g", home_team="t1", away_team="t2", home_pitcher_name="Alpha")
    assert pitcher_names(game) is None
    named = game.model_copy(update={"away_pitcher_name": "Beta"})
    assert pitcher_names(named) == TeamPair(home="Alpha", away="Beta")


def test_pitcher_positions_and_stats_resolve():
    state = _state()
    game = state.games[0]
    positions = pitcher_positions(game, state)
    assert positions is not None
    assert positions.map(lambda position: position.data.name) == TeamPair(home="Alpha", away="Beta")

    stats = pitcher_stats(game, state)
    assert stats is not None
    # first record for a1 wins
    assert stats.home.strikeouts_per_9 == 7.5
    assert stats.away.games == 2


def test_pitcher_positions_unknown_player_is_absent():
    state = _state(players=[Position(team_id="t1", data=Player(id="a1", name="Alpha"))])
    assert pitcher_positions(state.games[0], state) is None


def test_lineup_aggregates_follow_lineup_order_and_length():
    state = _state()
    team = state.teams[0]
    assert list(team_at_bats(team, state)) == [10, None, 4]
    assert list(team_strikeouts(team, state)) == [None, None, 1]


def test_lineup_aggregates_are_empty_for_empty_lineup():
    state = _state()
    assert list(team_at_bats(Team(id="empty"), state)) == []


def test_empty_pitcher_id_is_still_assigned():
    game = Game(id="g", home_team="t1", away_team="t2", home_pitcher="", away_pitcher="b1")
    assert pitcher_ids(game) == TeamPair(home="", away="b1")
