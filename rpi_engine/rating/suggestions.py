"""Coefficient suggestions tailored to one team's profile."""

from ..models.coefficients import DEFAULT_COEFFICIENTS, Coefficients
from ..models.result import RankedResult


def suggest_coefficients(result: RankedResult, base: Coefficients = DEFAULT_COEFFICIENTS) -> Coefficients:
    """
    Nudge coefficients toward the strengths a team's ranked result shows.

    Each rule moves one coefficient a small step from ``base`` and clamps it;
    rules that do not fire leave the base value in place.

    Args:
        result: Ranked result for the selected team
        base: Starting coefficients

    Returns:
        Suggested coefficients
    """
    overrides = {}

    if result.clwp > 0.7:
        overrides["clwp_coeff"] = min(0.95, base.clwp_coeff + 0.05)
    elif result.clwp < 0.3:
        overrides["clwp_coeff"] = max(0.5, base.clwp_coeff - 0.05)

    # Strong schedule
    if result.oclwp > 0.6:
        overrides["oclwp_coeff"] = min(0.2, base.oclwp_coeff + 0.05)

    if result.ooclwp > 0.6:
        overrides["ooclwp_coeff"] = min(0.2, base.ooclwp_coeff + 0.05)

    if result.diff > 0.05:
        overrides["diff_coeff"] = min(0.2, base.diff_coeff + 0.05)
    elif result.diff < -0.05:
        overrides["diff_coeff"] = max(0.05, base.diff_coeff - 0.03)

    if result.wins >= 8:
        overrides["domination_coeff"] = min(0.95, base.domination_coeff + 0.05)

    if result.games < 5:
        overrides["min_games"] = max(1, base.min_games - 1)

    win_rate = result.wins / result.games if result.games > 0 else 0.0
    if win_rate > 0.7:
        overrides["clgw_step"] = min(0.1, base.clgw_step + 0.02)
    elif win_rate < 0.3:
        overrides["clgl_step"] = max(0.05, base.clgl_step - 0.02)

    return base.replace(**overrides)
