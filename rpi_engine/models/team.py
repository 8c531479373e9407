"""Team and game models for RPI calculations."""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple


DEFAULT_COMPETITIVE_LEVEL = 5


def _pick(data: dict, *keys, default=None):
    """Return the first key present in ``data`` (camelCase or snake_case)."""
    for key in keys:
        if key in data:
            return data[key]
    return default


@dataclass(frozen=True)
class Game:
    """
    One side of a played match, attached to the team that played it.

    Every real match produces two Game records, one per participant, with
    ``competitive_level_diff`` negated between them.
    """

    opponent_id: int
    team_score: float
    opponent_score: float
    is_win: bool
    is_tie: bool = False
    # Opponent level minus own level (positive = stronger opponent)
    competitive_level_diff: int = 0
    # Carried for display only; streak detection scans stored order
    match_date: Optional[str] = None

    @property
    def is_loss(self) -> bool:
        return not self.is_win and not self.is_tie

    def to_dict(self) -> dict:
        """Convert game to dictionary."""
        data = {
            "opponentId": self.opponent_id,
            "teamScore": self.team_score,
            "opponentScore": self.opponent_score,
            "isWin": self.is_win,
            "isTie": self.is_tie,
            "competitiveLevelDiff": self.competitive_level_diff,
        }
        if self.match_date is not None:
            data["matchDate"] = self.match_date
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "Game":
        """Create game from dictionary."""
        return cls(
            opponent_id=_pick(data, "opponentId", "opponent_id"),
            team_score=_pick(data, "teamScore", "team_score"),
            opponent_score=_pick(data, "opponentScore", "opponent_score"),
            is_win=_pick(data, "isWin", "is_win"),
            is_tie=_pick(data, "isTie", "is_tie", default=False),
            competitive_level_diff=_pick(data, "competitiveLevelDiff", "competitive_level_diff", default=0),
            match_date=_pick(data, "matchDate", "match_date"),
        )


@dataclass(frozen=True)
class Team:
    """
    A node in the schedule graph: a team and the games it played.

    ``games`` is stored as a tuple so a Team is hashable and cannot change
    under a TeamIndex that has already memoized its CLWP.
    """

    id: int
    name: str
    competitive_level: int = DEFAULT_COMPETITIVE_LEVEL
    games: Tuple[Game, ...] = field(default_factory=tuple)

    def __post_init__(self):
        if not isinstance(self.games, tuple):
            object.__setattr__(self, "games", tuple(self.games))

    @property
    def opponent_ids(self) -> List[int]:
        """Opponent ids in stored game order, duplicates included."""
        return [g.opponent_id for g in self.games]

    def to_dict(self) -> dict:
        """Convert team to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "competitiveLevel": self.competitive_level,
            "games": [g.to_dict() for g in self.games],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Team":
        """Create team from dictionary."""
        level = _pick(data, "competitiveLevel", "competitive_level")
        return cls(
            id=data["id"],
            name=data["name"],
            competitive_level=level if isinstance(level, int) else DEFAULT_COMPETITIVE_LEVEL,
            games=tuple(Game.from_dict(g) for g in data.get("games", [])),
        )
