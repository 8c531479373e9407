"""Id-based team lookup shared by every graph-level metric."""

from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Tuple, Union

from ..models.coefficients import Coefficients
from ..models.team import Team
from .clwp import clwp as compute_clwp


class TeamIndex:
    """
    Read-only map from team id to Team for the duration of one run.

    Lookups of unknown ids return None instead of raising, so aggregate
    loops can skip unresolved opponents. CLWP values are memoized per
    (team id, coefficients) because many teams share opponents.
    """

    def __init__(self, teams: Iterable[Team]):
        """
        Initialize the index.

        Args:
            teams: Teams in input order. Duplicate ids are not supported; the
                last team with a given id wins the lookup.
        """
        self._teams: List[Team] = list(teams)
        self._by_id: Dict[int, Team] = {team.id: team for team in self._teams}
        self._clwp_cache: Dict[Tuple[int, Coefficients], float] = {}

    @classmethod
    def of(cls, teams: Union["TeamIndex", Sequence[Team]]) -> "TeamIndex":
        """Return ``teams`` unchanged if already indexed, otherwise index it."""
        if isinstance(teams, TeamIndex):
            return teams
        return cls(teams)

    def resolve(self, team_id: int) -> Optional[Team]:
        return self._by_id.get(team_id)

    def clwp(self, team_id: int, coeffs: Coefficients) -> Optional[float]:
        """Memoized CLWP of a team, or None if the id does not resolve."""
        key = (team_id, coeffs)
        if key in self._clwp_cache:
            return self._clwp_cache[key]

        team = self.resolve(team_id)
        if team is None:
            return None

        value = compute_clwp(team, coeffs)
        self._clwp_cache[key] = value
        return value

    def unresolved_opponents(self) -> List[int]:
        """Sorted opponent ids referenced by some game but missing from the index."""
        missing = {
            game.opponent_id
            for team in self._teams
            for game in team.games
            if game.opponent_id not in self._by_id
        }
        return sorted(missing)

    @property
    def cache_size(self) -> int:
        return len(self._clwp_cache)

    def __contains__(self, team_id: int) -> bool:
        return team_id in self._by_id

    def __len__(self) -> int:
        return len(self._teams)

    def __iter__(self) -> Iterator[Team]:
        return iter(self._teams)
