"""Tests for score differential and domination streak detection."""

import pytest

from rpi_engine.models.team import Game, Team
from rpi_engine.rating.differential import diff
from rpi_engine.rating.streak import has_domination, longest_win_streak


def game(score, opp):
    return Game(
        opponent_id=2,
        team_score=score,
        opponent_score=opp,
        is_win=score > opp,
        is_tie=score == opp,
    )


def team_from(results):
    """Build a team from a string like 'WWLWT'."""
    scores = {"W": (10, 5), "L": (5, 10), "T": (6, 6)}
    return Team(id=1, name="A", games=[game(*scores[r]) for r in results])


class TestDiff:
    def test_average_normalized_margin(self):
        team = Team(id=1, name="A", games=[game(10, 5), game(8, 12), game(15, 10)])
        # (5/15 - 4/20 + 5/25) / 3
        assert diff(team) == pytest.approx((1 / 3 - 0.2 + 0.2) / 3)

    def test_blowout_win_and_loss(self):
        assert diff(Team(id=1, name="A", games=[game(20, 5)])) == pytest.approx(0.6)
        assert diff(Team(id=1, name="A", games=[game(5, 25)])) == pytest.approx(-2 / 3)

    def test_scoreless_game_dilutes_average(self):
        team = Team(id=1, name="A", games=[game(10, 5), game(0, 0)])
        assert diff(team) == pytest.approx((5 / 15) / 2)

    def test_shutouts_hit_bounds(self):
        assert diff(Team(id=1, name="A", games=[game(3, 0)])) == 1.0
        assert diff(Team(id=1, name="A", games=[game(0, 3)])) == -1.0

    def test_no_games(self):
        assert diff(Team(id=1, name="A")) == 0


class TestDomination:
    def test_eight_consecutive_wins(self):
        assert has_domination(team_from("W" * 8))

    def test_seven_consecutive_wins(self):
        assert not has_domination(team_from("W" * 7))
        assert not has_domination(team_from("W" * 7 + "L"))

    def test_streak_broken_by_loss(self):
        team = team_from("WWWWWLWWWWW")
        assert longest_win_streak(team) == 5
        assert not has_domination(team)

    def test_streak_broken_by_tie(self):
        assert not has_domination(team_from("WWWWTWWWW"))

    def test_longer_streak(self):
        assert has_domination(team_from("L" + "W" * 10 + "L"))

    def test_uses_stored_order(self):
        ordered = team_from("L" + "W" * 8)
        interleaved = team_from("WWWWLWWWW")
        # Same record, different storage order
        assert has_domination(ordered)
        assert not has_domination(interleaved)

    def test_win_flag_with_tie_flag_does_not_count(self):
        odd = Game(opponent_id=2, team_score=5, opponent_score=5, is_win=True, is_tie=True)
        team = Team(id=1, name="A", games=[game(10, 5)] * 4 + [odd] + [game(10, 5)] * 4)
        assert not has_domination(team)

    def test_few_games_short_circuit(self):
        assert longest_win_streak(team_from("WWW")) == 3
        assert not has_domination(team_from("WWW"))
