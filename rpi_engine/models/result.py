"""Ranked output record for a single team."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class RankedResult:
    """Per-team output of a ranking run. Position in the result list is the rank."""

    team_id: int
    team_name: str
    games: int
    wins: int
    losses: int
    ties: int
    wp: float
    clwp: float
    oclwp: float
    ooclwp: float
    diff: float
    rpi: float
    has_domination: bool = False

    def to_dict(self, rank: Optional[int] = None) -> dict:
        """Convert result to dictionary, optionally tagging its rank."""
        data = {
            "teamId": self.team_id,
            "teamName": self.team_name,
            "games": self.games,
            "wins": self.wins,
            "losses": self.losses,
            "ties": self.ties,
            "wp": self.wp,
            "clwp": self.clwp,
            "oclwp": self.oclwp,
            "ooclwp": self.ooclwp,
            "diff": self.diff,
            "rpi": self.rpi,
            "hasDomination": self.has_domination,
        }
        if rank is not None:
            data = {"rank": rank, **data}
        return data
