"""Rating engine: level-adjusted win percentage, schedule strength, RPI."""

from .clwp import clwp
from .differential import diff
from .engine import RPIEngine, calculate_rpi, compose_rpi, rank_all
from .index import TeamIndex
from .level import adjust
from .schedule import oclwp, ooclwp
from .streak import has_domination, longest_win_streak
from .suggestions import suggest_coefficients

__all__ = [
    "RPIEngine",
    "TeamIndex",
    "adjust",
    "calculate_rpi",
    "clwp",
    "compose_rpi",
    "diff",
    "has_domination",
    "longest_win_streak",
    "oclwp",
    "ooclwp",
    "rank_all",
    "suggest_coefficients",
]
