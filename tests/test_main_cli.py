"""Tests for the command-line interface."""

import json

import pytest

from rpi_engine.main import main


@pytest.fixture
def sample_file(tmp_path):
    path = tmp_path / "sample.json"
    assert main(["sample", "-o", str(path)]) == 0
    return path


def test_sample_writes_dataset(sample_file, capsys):
    data = json.loads(sample_file.read_text())
    assert len(data) == 6
    assert {"id", "name", "competitiveLevel", "games"} <= set(data[0])


def test_rank_prints_and_saves(sample_file, tmp_path, capsys):
    out = tmp_path / "rankings.json"

    assert main(["rank", "--input", str(sample_file), "--output", str(out)]) == 0

    printed = capsys.readouterr().out
    assert "Loaded 6 teams (28 game records)" in printed
    assert "RPI RANKINGS - UNKNOWN SPORT" in printed

    payload = json.loads(out.read_text())
    assert [r["rank"] for r in payload["results"]] == [1, 2, 3, 4, 5, 6]
    rpis = [r["rpi"] for r in payload["results"]]
    assert rpis == sorted(rpis, reverse=True)
    assert payload["coefficients"]["clwp_coeff"] == 0.9


def test_rank_with_sport_and_overrides(sample_file, tmp_path, capsys):
    overrides = tmp_path / "coeffs.json"
    overrides.write_text(json.dumps({"diffCoeff": 0.3}))
    out = tmp_path / "rankings.json"

    code = main([
        "rank", "-i", str(sample_file), "--sport", "baseball",
        "-c", str(overrides), "-o", str(out), "--top", "3", "--workers", "2",
    ])

    assert code == 0
    assert "BASEBALL" in capsys.readouterr().out
    coeffs = json.loads(out.read_text())["coefficients"]
    assert coeffs["oclwp_coeff"] == 0.5
    assert coeffs["diff_coeff"] == 0.3


def test_rank_from_match_csv(tmp_path, capsys):
    matches = tmp_path / "matches.csv"
    matches.write_text("team1_id,team2_id,team1_score,team2_score\n1,2,3,1\n2,3,2,0\n1,3,4,4\n")

    assert main(["rank", "--matches", str(matches)]) == 0
    assert "Team 1" in capsys.readouterr().out


def test_rank_missing_file(tmp_path, capsys):
    assert main(["rank", "--input", str(tmp_path / "nope.json")]) == 1
    assert "Error loading data" in capsys.readouterr().out


def test_rank_unknown_sport(sample_file, capsys):
    assert main(["rank", "-i", str(sample_file), "--sport", "curling"]) == 1
    assert "Unknown sport" in capsys.readouterr().out


def test_rank_requires_input():
    with pytest.raises(SystemExit):
        main(["rank"])


def test_presets(capsys):
    assert main(["presets"]) == 0
    printed = capsys.readouterr().out
    assert "pickle_ball" in printed
    assert len(printed.strip().splitlines()) == 9


def test_suggest(sample_file, capsys):
    assert main(["suggest", "-i", str(sample_file), "--team-id", "1"]) == 0
    printed = capsys.readouterr().out
    assert "Panthers Elite" in printed
    assert "clwp_coeff" in printed


def test_suggest_unknown_team(sample_file, capsys):
    assert main(["suggest", "-i", str(sample_file), "--team-id", "99"]) == 1
    assert "team 99 not found" in capsys.readouterr().out


def test_compare(sample_file, capsys):
    assert main(["compare", "-i", str(sample_file), "--candidate", "soccer"]) == 0
    printed = capsys.readouterr().out
    assert "Unknown Sport vs Soccer (6 teams)" in printed
    assert "Spearman" in printed


def test_no_command(capsys):
    assert main([]) == 1


def test_rank_reports_wrongly_typed_game_fields(tmp_path, capsys):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps([
        {"id": 1, "name": "A", "games": [
            {"opponentId": 2, "teamScore": 5, "opponentScore": 3, "isWin": True, "competitiveLevelDiff": None},
        ]},
        {"id": 2, "name": "B", "games": [
            {"opponentId": 1, "teamScore": 3, "opponentScore": 5, "isWin": False, "isTie": "false"},
        ]},
    ]))

    assert main(["rank", "--input", str(path)]) == 1
    printed = capsys.readouterr().out
    assert "Error loading data" in printed
    assert "competitiveLevelDiff" in printed
    assert "isTie" in printed


def test_rank_min_games_filters_every_team(tmp_path, capsys):
    matches = tmp_path / "matches.csv"
    matches.write_text("team1_id,team2_id,team1_score,team2_score\n1,2,3,1\n")

    assert main(["rank", "--matches", str(matches), "--min-games"]) == 0
    printed = capsys.readouterr().out
    assert "No teams with at least 3 games." in printed
    assert "Empty DataFrame" not in printed
