"""Sport-specific coefficient presets."""

from dataclasses import dataclass
from typing import Dict, Optional, Union

from ..models.coefficients import DEFAULT_COEFFICIENTS, Coefficients


@dataclass(frozen=True)
class SportConfig:
    """Preset coefficients and display terminology for one sport."""

    id: int
    name: str
    display_name: str
    coefficients: Coefficients
    # Scoring unit shown next to differentials ("points", "runs", "goals")
    points_term: str = "points"
    show_diff: bool = True
    show_domination: bool = True


# NCAA-standard presets weight opponents heaviest (25-50-25) and disable the
# domination penalty.
SPORT_CONFIGS: Dict[int, SportConfig] = {
    1: SportConfig(
        id=1,
        name="baseball",
        display_name="Baseball",
        coefficients=Coefficients(
            clwp_coeff=0.25, oclwp_coeff=0.50, ooclwp_coeff=0.25,
            diff_coeff=0.05, domination_coeff=1.0,
            clgw_step=0.05, clgl_step=0.1, min_games=5, diff_interval=5,
        ),
        points_term="runs",
    ),
    2: SportConfig(
        id=2,
        name="soccer",
        display_name="Soccer",
        coefficients=Coefficients(
            clwp_coeff=0.25, oclwp_coeff=0.50, ooclwp_coeff=0.25,
            diff_coeff=0.08, domination_coeff=1.0,
            clgw_step=0.05, clgl_step=0.1, min_games=4, diff_interval=3,
        ),
        points_term="goals",
    ),
    3: SportConfig(
        id=3,
        name="football",
        display_name="Football",
        coefficients=Coefficients(
            clwp_coeff=0.35, oclwp_coeff=0.40, ooclwp_coeff=0.25,
            diff_coeff=0.15, domination_coeff=0.9,
            clgw_step=0.06, clgl_step=0.12, min_games=3, diff_interval=14,
        ),
    ),
    4: SportConfig(
        id=4,
        name="volleyball",
        display_name="Volleyball",
        coefficients=Coefficients(
            clwp_coeff=0.25, oclwp_coeff=0.50, ooclwp_coeff=0.25,
            diff_coeff=0.03, domination_coeff=1.0,
            clgw_step=0.04, clgl_step=0.08, min_games=5, diff_interval=5,
        ),
        show_domination=False,
    ),
    5: SportConfig(
        id=5,
        name="basketball",
        display_name="Basketball",
        coefficients=Coefficients(
            clwp_coeff=0.90, oclwp_coeff=0.10, ooclwp_coeff=0.10,
            diff_coeff=0.10, domination_coeff=0.9,
            clgw_step=0.05, clgl_step=0.1, min_games=4, diff_interval=10,
        ),
    ),
    6: SportConfig(
        id=6,
        name="hockey",
        display_name="Hockey",
        coefficients=Coefficients(
            clwp_coeff=0.25, oclwp_coeff=0.50, ooclwp_coeff=0.25,
            diff_coeff=0.08, domination_coeff=1.0,
            clgw_step=0.05, clgl_step=0.1, min_games=4, diff_interval=2,
        ),
        points_term="goals",
    ),
    7: SportConfig(
        id=7,
        name="lacrosse",
        display_name="Lacrosse",
        coefficients=Coefficients(
            clwp_coeff=0.30, oclwp_coeff=0.45, ooclwp_coeff=0.25,
            diff_coeff=0.10, domination_coeff=1.0,
            clgw_step=0.05, clgl_step=0.1, min_games=4, diff_interval=3,
        ),
        points_term="goals",
    ),
    8: SportConfig(
        id=8,
        name="pickle_ball",
        display_name="Pickleball",
        coefficients=Coefficients(
            clwp_coeff=0.25, oclwp_coeff=0.50, ooclwp_coeff=0.25,
            diff_coeff=0.02, domination_coeff=1.0,
            clgw_step=0.04, clgl_step=0.08, min_games=6, diff_interval=5,
        ),
        show_domination=False,
    ),
}

DEFAULT_SPORT_CONFIG = SportConfig(
    id=0,
    name="unknown",
    display_name="Unknown Sport",
    coefficients=DEFAULT_COEFFICIENTS,
)


def get_sport_config(sport_id: Optional[int]) -> SportConfig:
    """Return the preset for ``sport_id``, falling back to the default preset."""
    if not sport_id:
        return DEFAULT_SPORT_CONFIG
    return SPORT_CONFIGS.get(sport_id, DEFAULT_SPORT_CONFIG)


def get_sport_config_by_name(name: str) -> SportConfig:
    """
    Look up a preset by sport name or display name (case-insensitive).

    Raises:
        ValueError: If no preset matches
    """
    key = name.strip().lower().replace(" ", "_")
    if key in ("default", DEFAULT_SPORT_CONFIG.name):
        return DEFAULT_SPORT_CONFIG
    for config in SPORT_CONFIGS.values():
        if key in (config.name, config.display_name.lower()):
            return config
    raise ValueError(f"Unknown sport: {name}")


def resolve_sport(value: Union[str, int, None]) -> SportConfig:
    """Resolve a CLI-style sport argument given as an id or a name."""
    if value is None:
        return DEFAULT_SPORT_CONFIG
    if isinstance(value, int) or str(value).isdigit():
        sport_id = int(value)
        if sport_id and sport_id not in SPORT_CONFIGS:
            raise ValueError(f"Unknown sport id: {sport_id}")
        return get_sport_config(sport_id)
    return get_sport_config_by_name(value)


def get_sport_type(sport_id: Optional[int]) -> str:
    """Sport type name for ``sport_id`` ("unknown" when not a known sport)."""
    return get_sport_config(sport_id).name
