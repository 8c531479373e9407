"""Normalized score differential (DIFF)."""

from ..models.team import Team


def diff(team: Team) -> float:
    """
    Average normalized score margin, bounded to [-1, 1].

    Each game contributes (team_score - opponent_score) / total_score.
    Scoreless games contribute nothing but still count in the divisor, so
    they pull the average toward zero.
    """
    if not team.games:
        return 0.0

    total = 0.0
    for game in team.games:
        points = game.team_score + game.opponent_score
        if points == 0:
            continue
        total += (game.team_score - game.opponent_score) / points

    return total / len(team.games)
