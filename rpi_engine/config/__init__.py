"""Coefficient presets."""

from .sports import (
    DEFAULT_SPORT_CONFIG,
    SPORT_CONFIGS,
    SportConfig,
    get_sport_config,
    get_sport_config_by_name,
    get_sport_type,
    resolve_sport,
)

__all__ = [
    "DEFAULT_SPORT_CONFIG",
    "SPORT_CONFIGS",
    "SportConfig",
    "get_sport_config",
    "get_sport_config_by_name",
    "get_sport_type",
    "resolve_sport",
]
