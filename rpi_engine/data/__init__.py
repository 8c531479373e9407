"""Dataset assembly, loading and validation."""

from .graph_builder import build_teams_from_frame, build_teams_from_matches
from .loader import DataLoader, DatasetError, dataset_stats, parse_teams_payload
from .validators import validate_teams, validate_teams_payload

__all__ = [
    "DataLoader",
    "DatasetError",
    "build_teams_from_frame",
    "build_teams_from_matches",
    "dataset_stats",
    "parse_teams_payload",
    "validate_teams",
    "validate_teams_payload",
]
