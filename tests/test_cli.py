import json
from pathlib import Path

import pytest

from idol_predictor import cli
from idol_predictor.models import Game, LeagueState, PitchingStats, Player, Position, Team


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in (
        "IDOL_PREDICTOR_STATE",
        "IDOL_PREDICTOR_STATE_URL",
        "IDOL_PREDICTOR_ALGORITHM",
        "IDOL_PREDICTOR_HTTP_TIMEOUT",
        "IDOL_PREDICTOR_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


def _write_state(tmp_path: Path) -> Path:
    state = LeagueState(
        teams=[
            Team(id="t1", full_name="Home Team", lineup=["a1"]),
            Team(id="t2", full_name="Away Team", lineup=["b1"]),
        ],
        games=[Game(id="g1", home_team="t1", away_team="t2", home_pitcher="a1", away_pitcher="b1")],
        players=[
            Position(team_id="t1", data=Player(id="a1", name="Pitcher A")),
            Position(team_id="t2", data=Player(id="b1", name="Pitcher B")),
        ],
        pitcher_stats=[
            PitchingStats(player_id="a1", games=5, strikeouts_per_9=9.0),
            PitchingStats(player_id="b1", games=5, strikeouts_per_9=3.0),
        ],
    )
    path = tmp_path / "state.json"
    path.write_text(state.model_dump_json(), encoding="utf-8")
    return path


def test_list_prints_serious_then_joke(capsys):
    cli.main(["--list"])
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 12
    assert lines[0].split(maxsplit=1) == ["0", "Best by SO/9"]
    assert lines[3].endswith("Against Lift (joke)")


def test_list_as_json(capsys):
    cli.main(["--list", "--json"])
    rows = json.loads(capsys.readouterr().out)
    assert [row["id"] for row in rows] == list(range(12))
    assert rows[1]["forbidden"] is True
    assert rows[2]["printed_stats"] == ["SO/9"]


def test_pick_from_state_file(tmp_path: Path, capsys):
    cli.main(["--state", str(_write_state(tmp_path)), "--algorithm", "0"])
    out = capsys.readouterr().out
    assert "Best by SO/9: Pitcher A (Home Team, home vs Away Team)" in out
    assert "score 9.000" in out


def test_pick_as_json(tmp_path: Path, capsys):
    cli.main(["--state", str(_write_state(tmp_path)), "--algorithm", "0", "--json"])
    payload = json.loads(capsys.readouterr().out)
    assert payload["player_id"] == "a1"
    assert payload["side"] == "home"
    assert payload["opponent_id"] == "t2"
    assert payload["stats"] == []


def test_stat_ratio_without_lineup_records_exits(tmp_path: Path):
    with pytest.raises(SystemExit, match="No pitcher could be scored!"):
        cli.main(["--state", str(_write_state(tmp_path)), "--algorithm", "2"])


def test_algorithm_default_comes_from_env(tmp_path: Path, capsys, monkeypatch):
    monkeypatch.setenv("IDOL_PREDICTOR_STATE", str(_write_state(tmp_path)))
    monkeypatch.setenv("IDOL_PREDICTOR_ALGORITHM", "9")
    cli.main(["--json"])
    payload = json.loads(capsys.readouterr().out)
    assert payload["algorithm"] == "Best by name length"
    assert payload["player_id"] == "a1"
    assert payload["score"] == 9.0


def test_unknown_algorithm_exits(tmp_path: Path):
    with pytest.raises(SystemExit, match="Unknown algorithm id 99"):
        cli.main(["--state", str(_write_state(tmp_path)), "--algorithm", "99"])


def test_algorithm_error_exits(tmp_path: Path):
    with pytest.raises(SystemExit, match="No Best player!"):
        cli.main(["--state", str(_write_state(tmp_path)), "--algorithm", "4"])


def test_missing_state_exits(tmp_path: Path):
    with pytest.raises(SystemExit, match="file not found"):
        cli.main(["--state", str(tmp_path / "nope.json")])
    with pytest.raises(SystemExit, match="No league state given"):
        cli.main([])


def test_unreadable_state_exits(tmp_path: Path):
    with pytest.raises(SystemExit, match="Could not load league state"):
        cli.main(["--state", str(tmp_path)])
