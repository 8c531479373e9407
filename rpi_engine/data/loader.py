"""Data loader for team datasets and ranking results."""

import json
import logging
from typing import Dict, List, Optional, Sequence

import numpy as np
import pandas as pd

from ..models.coefficients import Coefficients
from ..models.result import RankedResult
from ..models.team import Team
from .graph_builder import build_teams_from_frame, build_teams_from_matches
from .validators import validate_teams_payload

logger = logging.getLogger(__name__)


class DatasetError(ValueError):
    """Raised when a team dataset is structurally invalid."""


# Small league used by the ``sample`` command
SAMPLE_TEAMS = {
    1: {"name": "Panthers Elite", "competitive_level": 8},
    2: {"name": "Warriors Pro", "competitive_level": 9},
    3: {"name": "Dragons United", "competitive_level": 8},
    4: {"name": "Eagles Academy", "competitive_level": 7},
    5: {"name": "Titans FC", "competitive_level": 6},
    6: {"name": "Storm Select", "competitive_level": 9},
}

# (team1, team2, score1, score2)
SAMPLE_MATCHES = [
    (1, 2, 75, 68),
    (1, 3, 82, 71),
    (2, 3, 91, 88),
    (1, 4, 79, 73),
    (2, 4, 77, 72),
    (3, 4, 84, 76),
    (1, 5, 88, 81),
    (2, 5, 85, 80),
    (3, 5, 90, 85),
    (4, 5, 70, 70),
    (1, 6, 71, 74),
    (2, 6, 79, 81),
    (4, 6, 66, 80),
    (5, 6, 60, 72),
]


def parse_teams_payload(payload) -> List[Team]:
    """
    Parse a raw dataset (list of teams, or ``{"teams": [...]}``) into Team objects.

    Raises:
        DatasetError: If the payload fails structural validation
    """
    errors = validate_teams_payload(payload)
    if errors:
        raise DatasetError("; ".join(errors[:5]) + (f" (+{len(errors) - 5} more)" if len(errors) > 5 else ""))

    rows = payload.get("teams") if isinstance(payload, dict) else payload
    return [Team.from_dict(row) for row in rows]


def dataset_stats(teams: Sequence[Team]) -> Dict[str, float]:
    """Team count, total game records and games per team for display."""
    counts = np.array([len(t.games) for t in teams], dtype=float)
    return {
        "team_count": len(teams),
        # Each match is recorded once per participant
        "total_game_records": int(counts.sum()) if len(counts) else 0,
        "mean_games_per_team": float(counts.mean()) if len(counts) else 0.0,
        "max_games_per_team": int(counts.max()) if len(counts) else 0,
    }


class DataLoader:
    """Loads team datasets and writes ranking results."""

    @staticmethod
    def load_teams_from_json(file_path: str) -> List[Team]:
        """
        Load teams from a JSON file.

        Args:
            file_path: Path to JSON file

        Returns:
            List of Team objects
        """
        with open(file_path, 'r') as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise DatasetError(f"Invalid JSON in {file_path}: {e}") from e

        teams = parse_teams_payload(data)
        logger.info("Loaded %d teams from %s", len(teams), file_path)
        return teams

    @staticmethod
    def load_matches_from_csv(file_path: str, teams_csv: Optional[str] = None) -> List[Team]:
        """
        Build teams from a match table CSV (one row per game).

        Args:
            file_path: CSV with team1_id, team2_id, team1_score, team2_score[, match_date]
            teams_csv: Optional CSV with id, name[, competitive_level]

        Returns:
            List of Team objects
        """
        matches = pd.read_csv(file_path)
        team_table = pd.read_csv(teams_csv) if teams_csv else None
        try:
            return build_teams_from_frame(matches, team_table)
        except ValueError as e:
            raise DatasetError(f"{file_path}: {e}") from e

    @staticmethod
    def save_teams_to_json(teams: Sequence[Team], file_path: str) -> None:
        """Write teams in the same format ``load_teams_from_json`` reads."""
        with open(file_path, 'w') as f:
            json.dump([t.to_dict() for t in teams], f, indent=2)

    @staticmethod
    def save_results_to_json(
        results: Sequence[RankedResult],
        file_path: str,
        coeffs: Optional[Coefficients] = None,
    ) -> None:
        """
        Save ranked results to a JSON file.

        Args:
            results: Results in rank order
            file_path: Output file path
            coeffs: Coefficients used for the run, recorded alongside the results
        """
        payload = {
            "coefficients": coeffs.to_dict() if coeffs else None,
            "results": [r.to_dict(rank=i + 1) for i, r in enumerate(results)],
        }
        with open(file_path, 'w') as f:
            json.dump(payload, f, indent=2)

    @staticmethod
    def create_sample_data(output_path: str) -> List[Team]:
        """
        Create a sample team dataset.

        Args:
            output_path: Path to save sample data

        Returns:
            The teams written
        """
        matches = [
            {"team1_id": t1, "team2_id": t2, "team1_score": s1, "team2_score": s2}
            for t1, t2, s1, s2 in SAMPLE_MATCHES
        ]
        teams = build_teams_from_matches(matches, team_info=SAMPLE_TEAMS)
        DataLoader.save_teams_to_json(teams, output_path)
        return teams
