"""Win-streak detection driving the domination penalty."""

from ..models.team import Team

DOMINATION_STREAK = 8


def longest_win_streak(team: Team) -> int:
    """Longest run of consecutive untied wins, in stored game order."""
    current = 0
    longest = 0
    for game in team.games:
        if game.is_win and not game.is_tie:
            current += 1
            longest = max(longest, current)
        else:
            current = 0
    return longest


def has_domination(team: Team, threshold: int = DOMINATION_STREAK) -> bool:
    """
    Check whether a team triggers the domination penalty.

    Games are scanned in the order they were supplied, not sorted by
    ``match_date``; a different ingestion order can change the result.

    Args:
        team: Team to check
        threshold: Streak length that triggers the penalty

    Returns:
        True if the longest untied win streak reaches ``threshold``
    """
    if len(team.games) < threshold:
        return False
    return longest_win_streak(team) >= threshold
