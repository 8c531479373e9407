"""Graph model and configuration records."""

from .coefficients import DEFAULT_COEFFICIENTS, Coefficients
from .result import RankedResult
from .team import Game, Team

__all__ = ["Coefficients", "DEFAULT_COEFFICIENTS", "Game", "RankedResult", "Team"]
