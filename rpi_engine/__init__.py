"""Competitive-level adjusted RPI rankings for team sports."""

from .models import DEFAULT_COEFFICIENTS, Coefficients, Game, RankedResult, Team
from .rating import RPIEngine, TeamIndex, rank_all

__version__ = "0.1.0"

__all__ = [
    "Coefficients",
    "DEFAULT_COEFFICIENTS",
    "Game",
    "RPIEngine",
    "RankedResult",
    "Team",
    "TeamIndex",
    "rank_all",
]
