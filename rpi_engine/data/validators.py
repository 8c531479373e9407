"""Data-quality checks for assembled team graphs.

The rating engine skips unresolved opponents and inconsistent records
without complaint; these checks are how a caller surfaces such problems.
"""

from __future__ import annotations

from collections import Counter
from typing import Dict, List, Sequence

from ..models.team import Team


def validate_teams(teams: Sequence[Team]) -> List[str]:
    """
    Return human-readable warnings about a team graph.

    Checks duplicate ids, opponent references that do not resolve, win/tie
    flags that disagree with the scores, and games that have no mirror
    record on the opponent's side.
    """
    warnings: List[str] = []

    id_counts = Counter(team.id for team in teams)
    for team_id, count in sorted(id_counts.items()):
        if count > 1:
            warnings.append(f"team id {team_id} appears {count} times")

    by_id: Dict[int, Team] = {team.id: team for team in teams}

    for team in teams:
        for idx, game in enumerate(team.games):
            where = f"team {team.id} game[{idx}]"

            if game.is_tie != (game.team_score == game.opponent_score):
                warnings.append(f"{where} tie flag disagrees with score {game.team_score}-{game.opponent_score}")
            elif not game.is_tie and game.is_win != (game.team_score > game.opponent_score):
                warnings.append(f"{where} win flag disagrees with score {game.team_score}-{game.opponent_score}")

            opponent = by_id.get(game.opponent_id)
            if opponent is None:
                warnings.append(f"{where} references unknown opponent {game.opponent_id}")
                continue

            if not any(g.opponent_id == team.id for g in opponent.games):
                warnings.append(f"{where} has no mirror record on opponent {game.opponent_id}")

    return warnings


def validate_teams_payload(payload) -> List[str]:
    """Structural checks on a raw team dataset before parsing."""
    errors: List[str] = []
    teams = payload.get("teams") if isinstance(payload, dict) else payload
    if not isinstance(teams, list):
        return ["dataset must be a list of teams or an object with a 'teams' list"]

    for idx, row in enumerate(teams):
        if not isinstance(row, dict):
            errors.append(f"teams[{idx}] must be an object")
            continue
        if not _is_int(row.get("id")) or not isinstance(row.get("name"), str):
            errors.append(f"teams[{idx}] missing required fields: id (integer) and name (string)")
            continue
        if not _optional(row, "competitiveLevel", "competitive_level", _is_int):
            errors.append(f"team {row['id']} competitiveLevel must be an integer")
        games = row.get("games")
        if not isinstance(games, list):
            errors.append(f"teams[{idx}] missing games list")
            continue
        for g_idx, game in enumerate(games):
            if not isinstance(game, dict):
                errors.append(f"team {row['id']} games[{g_idx}] must be an object")
                continue
            missing = [
                key for key, snake, check in _GAME_FIELDS
                if not check(game.get(key, game.get(snake)))
            ]
            missing += [
                key for key, snake, check in _OPTIONAL_GAME_FIELDS
                if not _optional(game, key, snake, check)
            ]
            if missing:
                errors.append(f"team {row['id']} games[{g_idx}] missing/invalid fields: {', '.join(missing)}")
    return errors


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_bool(value) -> bool:
    return isinstance(value, bool)


def _optional(row: dict, key: str, snake: str, check) -> bool:
    """True when neither spelling of the field is present, or the present value passes ``check``."""
    for name in (key, snake):
        if name in row:
            return check(row[name])
    return True


_GAME_FIELDS = [
    ("opponentId", "opponent_id", _is_int),
    ("teamScore", "team_score", _is_number),
    ("opponentScore", "opponent_score", _is_number),
    ("isWin", "is_win", _is_bool),
]

# May be omitted, but a present value (null included) must have the right type
_OPTIONAL_GAME_FIELDS = [
    ("isTie", "is_tie", _is_bool),
    ("competitiveLevelDiff", "competitive_level_diff", _is_int),
]
