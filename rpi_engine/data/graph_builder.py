"""
Assemble the engine's team graph from flat match rows.

A match row names two teams and their scores. Each row may instead carry a
``games`` list of per-game score pairs (a best-of series, for example), in
which case every game becomes its own pair of records. Every played game is
recorded twice, once on each team, with the competitive level difference
negated between the two sides.
"""

from __future__ import annotations

import logging
from collections import OrderedDict
from typing import Dict, Iterable, List, Mapping, Optional

import pandas as pd

from ..models.team import DEFAULT_COMPETITIVE_LEVEL, Game, Team

logger = logging.getLogger(__name__)


def _level(info: Optional[Mapping], default_level: int) -> int:
    if not info:
        return default_level
    return info.get("competitive_level") or info.get("competitiveLevel") or default_level


def _score(value) -> float:
    if value is None or (isinstance(value, float) and pd.isna(value)):
        return 0
    # numpy scalars from DataFrame rows
    return value.item() if hasattr(value, "item") else value


def _mirror_games(
    team1_id: int,
    team2_id: int,
    team1_score: float,
    team2_score: float,
    level_diff: int,
    match_date: Optional[str],
) -> tuple:
    tie = bool(team1_score == team2_score)
    game1 = Game(
        opponent_id=team2_id,
        team_score=team1_score,
        opponent_score=team2_score,
        is_win=bool(team1_score > team2_score),
        is_tie=tie,
        competitive_level_diff=level_diff,
        match_date=match_date,
    )
    game2 = Game(
        opponent_id=team1_id,
        team_score=team2_score,
        opponent_score=team1_score,
        is_win=bool(team2_score > team1_score),
        is_tie=tie,
        competitive_level_diff=-level_diff,
        match_date=match_date,
    )
    return game1, game2


def build_teams_from_matches(
    matches: Iterable[Mapping],
    team_info: Optional[Mapping[int, Mapping]] = None,
    default_level: int = DEFAULT_COMPETITIVE_LEVEL,
    include_idle: bool = False,
) -> List[Team]:
    """
    Build Team records from match rows.

    Args:
        matches: Rows with ``team1_id``, ``team2_id`` and either
            ``team1_score``/``team2_score`` or a ``games`` list of score pairs.
            ``match_date`` is optional.
        team_info: Optional team id -> {"name", "competitive_level"}
        default_level: Level assumed for teams without one
        include_idle: Also emit teams from ``team_info`` that played no games

    Returns:
        Teams in order of first appearance, each with its games in match order
    """
    team_info = team_info or {}
    games_by_team: Dict[int, List[Game]] = OrderedDict()

    for idx, match in enumerate(matches):
        team1_id = match.get("team1_id")
        team2_id = match.get("team2_id")
        if team1_id is None or team2_id is None or pd.isna(team1_id) or pd.isna(team2_id):
            logger.warning("Skipping match row %d: missing team id", idx)
            continue
        team1_id = int(team1_id)
        team2_id = int(team2_id)

        level_diff = _level(team_info.get(team2_id), default_level) - _level(team_info.get(team1_id), default_level)
        match_date = match.get("match_date")
        if match_date is not None and pd.isna(match_date):
            match_date = None

        score_pairs = match.get("games")
        if not score_pairs:
            score_pairs = [{"team1_score": match.get("team1_score"), "team2_score": match.get("team2_score")}]

        for pair in score_pairs:
            game1, game2 = _mirror_games(
                team1_id,
                team2_id,
                _score(pair.get("team1_score")),
                _score(pair.get("team2_score")),
                level_diff,
                match_date,
            )
            games_by_team.setdefault(team1_id, []).append(game1)
            games_by_team.setdefault(team2_id, []).append(game2)

    if include_idle:
        for team_id in team_info:
            games_by_team.setdefault(int(team_id), [])

    teams = []
    for team_id, games in games_by_team.items():
        info = team_info.get(team_id) or {}
        teams.append(Team(
            id=team_id,
            name=info.get("name") or f"Team {team_id}",
            competitive_level=_level(info, default_level),
            games=tuple(games),
        ))

    logger.info("Built %d teams from match rows", len(teams))
    return teams


def team_info_from_frame(df: pd.DataFrame) -> Dict[int, Dict]:
    """
    Convert a team table (``id``, ``name``, optional ``competitive_level``) to a lookup.
    """
    info: Dict[int, Dict] = {}
    for row in df.to_dict(orient="records"):
        level = row.get("competitive_level")
        name = row.get("name")
        info[int(row["id"])] = {
            "name": None if name is None or pd.isna(name) else str(name),
            "competitive_level": None if level is None or pd.isna(level) else int(level),
        }
    return info


def build_teams_from_frame(
    matches: pd.DataFrame,
    teams: Optional[pd.DataFrame] = None,
    default_level: int = DEFAULT_COMPETITIVE_LEVEL,
) -> List[Team]:
    """
    Build Team records from a match table, one row per game.

    Args:
        matches: Columns ``team1_id``, ``team2_id``, ``team1_score``,
            ``team2_score`` and optionally ``match_date``
        teams: Optional team table for names and competitive levels
        default_level: Level assumed for teams without one

    Returns:
        Teams in order of first appearance
    """
    required = {"team1_id", "team2_id", "team1_score", "team2_score"}
    missing = required - set(matches.columns)
    if missing:
        raise ValueError(f"Match table missing columns: {', '.join(sorted(missing))}")

    team_info = team_info_from_frame(teams) if teams is not None else None
    return build_teams_from_matches(
        matches.to_dict(orient="records"),
        team_info=team_info,
        default_level=default_level,
    )
