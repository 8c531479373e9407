"""Competitive-Level Winning Percentage (CLWP)."""

from ..models.coefficients import Coefficients
from ..models.team import Team
from .level import adjust


def clwp(team: Team, coeffs: Coefficients) -> float:
    """
    Calculate a team's level-adjusted winning percentage.

    Ties count 0.5 toward both wins and losses without adjustment. Wins and
    losses are each worth 1 before the competitive level adjustment.

    Args:
        team: Team to evaluate
        coeffs: Rating coefficients

    Returns:
        adjusted_wins / (adjusted_wins + adjusted_losses), or 0 when the
        team has no games or the denominator collapses to zero
    """
    if not team.games:
        return 0.0

    adjusted_wins = 0.0
    adjusted_losses = 0.0

    for game in team.games:
        if game.is_tie:
            adjusted_wins += 0.5
            adjusted_losses += 0.5
        elif game.is_win:
            adjusted_wins += adjust(1, game.competitive_level_diff, coeffs, True)
        else:
            adjusted_losses += adjust(1, game.competitive_level_diff, coeffs, False)

    total = adjusted_wins + adjusted_losses
    if total == 0:
        return 0.0
    return adjusted_wins / total
