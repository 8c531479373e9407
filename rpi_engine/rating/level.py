"""Competitive level adjustment for individual wins and losses."""

from ..models.coefficients import Coefficients


def adjust(base_value: float, level_diff: int, coeffs: Coefficients, is_win: bool) -> float:
    """
    Bias a win or loss value by the relative competitive level of the opponent.

    Upsets are rewarded and expected wins discounted; losses to stronger
    opponents are forgiven and losses to weaker ones punished.

    Args:
        base_value: Unadjusted value of the result (1 for a full win/loss)
        level_diff: Opponent level minus own level (positive = stronger opponent)
        coeffs: Coefficients providing ``clgw_step`` / ``clgl_step``
        is_win: True to adjust a win, False to adjust a loss

    Returns:
        Adjusted value
    """
    step = coeffs.clgw_step if is_win else coeffs.clgl_step
    delta = abs(level_diff) * step

    if level_diff > 0:
        return base_value + delta if is_win else base_value - delta
    if level_diff < 0:
        return base_value - delta if is_win else base_value + delta
    return base_value
