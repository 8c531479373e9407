"""Tunable RPI coefficients."""

from dataclasses import asdict, dataclass, fields, replace
from typing import Dict, Optional


# camelCase keys used by exported datasets
_CAMEL_KEYS = {
    "clwpCoeff": "clwp_coeff",
    "oclwpCoeff": "oclwp_coeff",
    "ooclwpCoeff": "ooclwp_coeff",
    "diffCoeff": "diff_coeff",
    "dominationCoeff": "domination_coeff",
    "clgwStep": "clgw_step",
    "clglStep": "clgl_step",
    "minGames": "min_games",
    "diffInterval": "diff_interval",
}


@dataclass(frozen=True)
class Coefficients:
    """
    Weights and step sizes consumed by every rating stage.

    The three percentage weights are not required to sum to 1. ``min_games``
    is advisory (used for display filtering only) and ``diff_interval`` is
    reserved for display bucketing; neither enters the RPI formula.
    """

    clwp_coeff: float = 0.9
    oclwp_coeff: float = 0.1
    ooclwp_coeff: float = 0.1
    diff_coeff: float = 0.1
    domination_coeff: float = 0.9
    # Competitive level grade step for wins / losses
    clgw_step: float = 0.05
    clgl_step: float = 0.1
    min_games: int = 3
    diff_interval: float = 15

    def replace(self, **overrides) -> "Coefficients":
        """Return a copy with the given fields overridden."""
        return replace(self, **overrides)

    def to_dict(self) -> Dict[str, float]:
        """Convert coefficients to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict, base: Optional["Coefficients"] = None) -> "Coefficients":
        """
        Create coefficients from a dictionary.

        Args:
            data: Mapping using snake_case or camelCase keys
            base: Values for keys missing from ``data`` (defaults to DEFAULT_COEFFICIENTS)

        Returns:
            Coefficients instance

        Raises:
            ValueError: If ``data`` contains an unknown key
        """
        known = {f.name for f in fields(cls)}
        overrides = {}
        for key, value in data.items():
            name = _CAMEL_KEYS.get(key, key)
            if name not in known:
                raise ValueError(f"Unknown coefficient: {key}")
            overrides[name] = value
        return replace(base or DEFAULT_COEFFICIENTS, **overrides)


DEFAULT_COEFFICIENTS = Coefficients()
