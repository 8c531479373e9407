"""RPI composition and ranking."""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Sequence, Union

from ..models.coefficients import DEFAULT_COEFFICIENTS, Coefficients
from ..models.result import RankedResult
from ..models.team import Team
from .clwp import clwp as compute_clwp
from .differential import diff as compute_diff
from .index import TeamIndex
from .schedule import oclwp as compute_oclwp
from .schedule import ooclwp as compute_ooclwp
from .streak import has_domination

logger = logging.getLogger(__name__)


def _team_clwp(team: Team, index: TeamIndex, coeffs: Coefficients) -> float:
    if index.resolve(team.id) is team:
        return index.clwp(team.id, coeffs)
    return compute_clwp(team, coeffs)


def compose_rpi(
    clwp: float,
    oclwp: float,
    ooclwp: float,
    diff: float,
    dominated: bool,
    coeffs: Coefficients,
) -> float:
    """Weighted sum of the components, with the domination multiplier applied last."""
    base = coeffs.clwp_coeff * clwp + coeffs.oclwp_coeff * oclwp + coeffs.ooclwp_coeff * ooclwp
    adjusted = base + coeffs.diff_coeff * diff
    if dominated:
        return adjusted * coeffs.domination_coeff
    return adjusted


def calculate_rpi(
    team: Team,
    teams: Union[TeamIndex, Sequence[Team]],
    coeffs: Coefficients = DEFAULT_COEFFICIENTS,
) -> float:
    """
    Calculate the final RPI for one team.

    Args:
        team: Team to rate
        teams: TeamIndex (or plain team sequence) for opponent lookups
        coeffs: Rating coefficients

    Returns:
        Final RPI score
    """
    index = TeamIndex.of(teams)
    return compose_rpi(
        _team_clwp(team, index, coeffs),
        compute_oclwp(team, index, coeffs),
        compute_ooclwp(team, index, coeffs),
        compute_diff(team),
        has_domination(team),
        coeffs,
    )


class RPIEngine:
    """Rates every team in a schedule graph and orders them by RPI."""

    def __init__(self, coeffs: Optional[Coefficients] = None, workers: int = 1):
        """
        Initialize the engine.

        Args:
            coeffs: Rating coefficients (defaults to DEFAULT_COEFFICIENTS)
            workers: Thread count for per-team evaluation; 1 runs inline
        """
        self.coeffs = coeffs or DEFAULT_COEFFICIENTS
        self.workers = max(1, workers)

    def evaluate(self, team: Team, index: TeamIndex) -> RankedResult:
        """
        Compute every metric for a single team.

        Win/loss/tie counts and WP are reported for auditing; they do not
        feed into the RPI.
        """
        coeffs = self.coeffs
        clwp = _team_clwp(team, index, coeffs)
        oclwp = compute_oclwp(team, index, coeffs)
        ooclwp = compute_ooclwp(team, index, coeffs)
        diff = compute_diff(team)
        dominated = has_domination(team)

        wins = sum(1 for g in team.games if g.is_win and not g.is_tie)
        losses = sum(1 for g in team.games if g.is_loss)
        ties = sum(1 for g in team.games if g.is_tie)
        games = len(team.games)
        wp = (wins + 0.5 * ties) / games if games > 0 else 0.0

        return RankedResult(
            team_id=team.id,
            team_name=team.name,
            games=games,
            wins=wins,
            losses=losses,
            ties=ties,
            wp=wp,
            clwp=clwp,
            oclwp=oclwp,
            ooclwp=ooclwp,
            diff=diff,
            rpi=compose_rpi(clwp, oclwp, ooclwp, diff, dominated, coeffs),
            has_domination=dominated,
        )

    def rank(self, teams: Union[TeamIndex, Sequence[Team]]) -> List[RankedResult]:
        """
        Rate all teams and sort by RPI descending.

        The sort is stable, so equal RPIs keep their input order.
        """
        index = TeamIndex.of(teams)
        team_list = list(index)

        if self.workers > 1 and len(team_list) > 1:
            with ThreadPoolExecutor(max_workers=self.workers) as pool:
                results = list(pool.map(lambda t: self.evaluate(t, index), team_list))
        else:
            results = [self.evaluate(team, index) for team in team_list]

        logger.debug("Rated %d teams (%d cached CLWP values)", len(results), index.cache_size)
        return sorted(results, key=lambda r: r.rpi, reverse=True)


def rank_all(
    teams: Union[TeamIndex, Sequence[Team]],
    coeffs: Coefficients = DEFAULT_COEFFICIENTS,
    workers: int = 1,
) -> List[RankedResult]:
    """
    Rate every team and return results in rank order.

    Args:
        teams: Teams (or a prebuilt TeamIndex) forming the schedule graph
        coeffs: Rating coefficients
        workers: Thread count for per-team evaluation

    Returns:
        RankedResult list sorted by RPI descending; rank is 1-based position
    """
    return RPIEngine(coeffs, workers=workers).rank(teams)
