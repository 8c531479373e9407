"""
Schedule strength aggregates: opponents' CLWP and opponents' opponents' CLWP.

The two hops deduplicate differently. OCLWP averages over the unique set of
a team's opponents. OOCLWP deduplicates each opponent's own opponent list
(minus the team being rated) but not across opponents, so a third team
reached through two different opponents is counted once per path. Changing
either rule changes every rating.
"""

from typing import List, Sequence, Union

from ..models.coefficients import Coefficients
from ..models.team import Team
from .index import TeamIndex

TeamsLike = Union[TeamIndex, Sequence[Team]]


def unique_ids(ids) -> List[int]:
    """Deduplicate ids, keeping first-seen order."""
    return list(dict.fromkeys(ids))


def oclwp(team: Team, teams: TeamsLike, coeffs: Coefficients) -> float:
    """
    Average CLWP of a team's unique, resolvable opponents.

    Args:
        team: Team to evaluate
        teams: TeamIndex (or plain team sequence) used to resolve opponents
        coeffs: Rating coefficients

    Returns:
        Mean opponent CLWP; 0 when there are no games or no opponent resolves
    """
    if not team.games:
        return 0.0

    index = TeamIndex.of(teams)
    total = 0.0
    count = 0

    for opp_id in unique_ids(team.opponent_ids):
        value = index.clwp(opp_id, coeffs)
        if value is None:
            continue
        total += value
        count += 1

    if count == 0:
        return 0.0
    return total / count


def ooclwp(team: Team, teams: TeamsLike, coeffs: Coefficients) -> float:
    """
    Average CLWP two hops out, excluding the team itself.

    Outer loop: unique first-hop opponents that resolve. Inner loop: that
    opponent's unique opponent ids other than ``team.id``. Every resolvable
    second-hop id adds to the running total and count, with no
    deduplication across different first-hop opponents.

    Args:
        team: Team to evaluate
        teams: TeamIndex (or plain team sequence) used to resolve opponents
        coeffs: Rating coefficients

    Returns:
        Path-weighted mean CLWP; 0 when nothing resolves
    """
    if not team.games:
        return 0.0

    index = TeamIndex.of(teams)
    total = 0.0
    count = 0

    for opp_id in unique_ids(team.opponent_ids):
        opponent = index.resolve(opp_id)
        if opponent is None:
            continue

        second_hop = unique_ids(i for i in opponent.opponent_ids if i != team.id)
        for opp_opp_id in second_hop:
            value = index.clwp(opp_opp_id, coeffs)
            if value is None:
                continue
            total += value
            count += 1

    if count == 0:
        return 0.0
    return total / count
