"""Tests for dataset loading, saving and validation."""

import json

import pytest

from rpi_engine.data.loader import DataLoader, DatasetError, dataset_stats, parse_teams_payload
from rpi_engine.data.validators import validate_teams, validate_teams_payload
from rpi_engine.models.coefficients import DEFAULT_COEFFICIENTS
from rpi_engine.models.team import Game, Team
from rpi_engine.rating.engine import rank_all


CAMEL_DATASET = [
    {
        "id": 1,
        "name": "Panthers",
        "competitiveLevel": 8,
        "games": [
            {"opponentId": 2, "teamScore": 75, "opponentScore": 68, "isWin": True, "competitiveLevelDiff": 1},
        ],
    },
    {
        "id": 2,
        "name": "Warriors",
        "games": [
            {"opponentId": 1, "teamScore": 68, "opponentScore": 75, "isWin": False, "isTie": False,
             "competitiveLevelDiff": -1},
        ],
    },
]


class TestParse:
    def test_parses_camel_case_list(self):
        teams = parse_teams_payload(CAMEL_DATASET)
        assert [t.id for t in teams] == [1, 2]
        assert teams[0].competitive_level == 8
        assert teams[0].games[0].competitive_level_diff == 1
        assert teams[0].games[0].is_tie is False

    def test_defaults_for_optional_fields(self):
        teams = parse_teams_payload({"teams": [
            {"id": 3, "name": "C", "games": [
                {"opponent_id": 4, "team_score": 1, "opponent_score": 1, "is_win": False},
            ]},
        ]})
        assert teams[0].competitive_level == 5
        assert teams[0].games[0].competitive_level_diff == 0
        assert teams[0].games[0].is_tie is False

    def test_rejects_non_list(self):
        with pytest.raises(DatasetError, match="list of teams"):
            parse_teams_payload({"data": []})

    def test_rejects_missing_identity(self):
        with pytest.raises(DatasetError, match=r"teams\[0\]"):
            parse_teams_payload([{"id": "1", "name": "A", "games": []}])

    def test_rejects_bad_game(self):
        bad = [{"id": 1, "name": "A", "games": [{"opponentId": 2, "teamScore": 1, "opponentScore": 0}]}]
        with pytest.raises(DatasetError, match="isWin"):
            parse_teams_payload(bad)

    def test_dataset_error_is_value_error(self):
        assert issubclass(DatasetError, ValueError)


class TestDataLoader:
    def test_json_round_trip(self, tmp_path):
        path = tmp_path / "teams.json"
        path.write_text(json.dumps(CAMEL_DATASET))

        teams = DataLoader.load_teams_from_json(str(path))
        out = tmp_path / "copy.json"
        DataLoader.save_teams_to_json(teams, str(out))

        assert DataLoader.load_teams_from_json(str(out)) == teams

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json")
        with pytest.raises(DatasetError, match="Invalid JSON"):
            DataLoader.load_teams_from_json(str(path))

    def test_save_results(self, tmp_path):
        results = rank_all(parse_teams_payload(CAMEL_DATASET))
        path = tmp_path / "results.json"
        DataLoader.save_results_to_json(results, str(path), DEFAULT_COEFFICIENTS)

        payload = json.loads(path.read_text())
        assert payload["coefficients"]["clwp_coeff"] == 0.9
        assert [r["rank"] for r in payload["results"]] == [1, 2]
        assert payload["results"][0]["teamName"] == "Panthers"

    def test_sample_data_is_consistent(self, tmp_path):
        path = tmp_path / "sample.json"
        written = DataLoader.create_sample_data(str(path))
        loaded = DataLoader.load_teams_from_json(str(path))

        assert loaded == written
        assert len(loaded) == 6
        assert validate_teams(loaded) == []

    def test_load_matches_from_csv(self, tmp_path):
        matches = tmp_path / "matches.csv"
        matches.write_text("team1_id,team2_id,team1_score,team2_score\n1,2,3,1\n2,3,2,2\n")
        team_table = tmp_path / "teams.csv"
        team_table.write_text("id,name,competitive_level\n1,A,4\n2,B,5\n3,C,6\n")

        teams = DataLoader.load_matches_from_csv(str(matches), str(team_table))

        assert [t.name for t in teams] == ["A", "B", "C"]
        assert teams[0].games[0].competitive_level_diff == 1
        assert teams[2].games[0].is_tie

    def test_load_matches_missing_columns(self, tmp_path):
        matches = tmp_path / "matches.csv"
        matches.write_text("team1_id,team2_id\n1,2\n")
        with pytest.raises(DatasetError, match="missing columns"):
            DataLoader.load_matches_from_csv(str(matches))


def test_dataset_stats():
    stats = dataset_stats(parse_teams_payload(CAMEL_DATASET) + [Team(id=9, name="Idle")])
    assert stats["team_count"] == 3
    assert stats["total_game_records"] == 2
    assert stats["mean_games_per_team"] == pytest.approx(2 / 3)
    assert stats["max_games_per_team"] == 1


def test_dataset_stats_empty():
    assert dataset_stats([])["total_game_records"] == 0


class TestValidateTeams:
    def test_clean_dataset(self):
        assert validate_teams(parse_teams_payload(CAMEL_DATASET)) == []

    def test_unknown_opponent(self):
        team = Team(id=1, name="A", games=[Game(opponent_id=5, team_score=1, opponent_score=0, is_win=True)])
        warnings = validate_teams([team])
        assert warnings == ["team 1 game[0] references unknown opponent 5"]

    def test_flag_mismatch(self):
        a = Team(id=1, name="A", games=[Game(opponent_id=2, team_score=1, opponent_score=3, is_win=True)])
        b = Team(id=2, name="B", games=[Game(opponent_id=1, team_score=3, opponent_score=1, is_win=True)])
        warnings = validate_teams([a, b])
        assert any("win flag disagrees" in w for w in warnings)

    def test_missing_mirror(self):
        a = Team(id=1, name="A", games=[Game(opponent_id=2, team_score=1, opponent_score=0, is_win=True)])
        b = Team(id=2, name="B")
        assert validate_teams([a, b]) == ["team 1 game[0] has no mirror record on opponent 2"]

    def test_duplicate_ids(self):
        assert validate_teams([Team(id=1, name="A"), Team(id=1, name="B")]) == ["team id 1 appears 2 times"]


def test_validate_payload_reports_all_problems():
    errors = validate_teams_payload([
        "not a team",
        {"id": 2, "name": "B"},
        {"id": 3, "name": "C", "games": [{"opponentId": 1, "teamScore": "7", "opponentScore": 2, "isWin": True}]},
    ])
    assert len(errors) == 3
    assert "teamScore" in errors[2]


def game_row(**overrides):
    row = {"opponentId": 2, "teamScore": 3, "opponentScore": 5, "isWin": False}
    row.update(overrides)
    return row


@pytest.mark.parametrize("overrides, field", [
    ({"competitiveLevelDiff": None}, "competitiveLevelDiff"),
    ({"competitiveLevelDiff": "1"}, "competitiveLevelDiff"),
    ({"competitive_level_diff": 1.5}, "competitiveLevelDiff"),
    ({"isTie": "false"}, "isTie"),
    ({"is_tie": 0}, "isTie"),
])
def test_rejects_wrongly_typed_optional_game_fields(overrides, field):
    with pytest.raises(DatasetError, match=field):
        parse_teams_payload([{"id": 1, "name": "A", "games": [game_row(**overrides)]}])


@pytest.mark.parametrize("level", [None, "8", 7.5, True])
def test_rejects_wrongly_typed_competitive_level(level):
    with pytest.raises(DatasetError, match="competitiveLevel"):
        parse_teams_payload([{"id": 1, "name": "A", "competitiveLevel": level, "games": []}])


def test_parsed_tie_flag_is_kept_as_given():
    teams = parse_teams_payload([{"id": 1, "name": "A", "games": [game_row(isTie=False)]}])
    assert teams[0].games[0].is_tie is False
    assert rank_all(teams)[0].ties == 0


def test_parsed_teams_are_hashable():
    teams = parse_teams_payload(CAMEL_DATASET)
    assert isinstance(teams[0].games, tuple)
    assert len({teams[0], teams[1]}) == 2
