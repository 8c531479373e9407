"""Tabular views of ranking results."""

from typing import Optional, Sequence

import pandas as pd

from ..models.result import RankedResult

RESULT_COLUMNS = [
    "rank", "team_id", "team_name", "games", "wins", "losses", "ties",
    "wp", "clwp", "oclwp", "ooclwp", "diff", "rpi", "has_domination",
]


def results_to_frame(results: Sequence[RankedResult]) -> pd.DataFrame:
    """One row per team in rank order, with a 1-based ``rank`` column."""
    rows = [
        {"rank": i + 1, **{col: getattr(r, col) for col in RESULT_COLUMNS[1:]}}
        for i, r in enumerate(results)
    ]
    return pd.DataFrame(rows, columns=RESULT_COLUMNS)


def format_results_table(
    results: Sequence[RankedResult],
    top: Optional[int] = None,
    min_games: Optional[int] = None,
) -> str:
    """
    Render results as a fixed-width text table.

    Args:
        results: Results in rank order
        top: Only show the first ``top`` rows
        min_games: Hide teams with fewer games (ranks are not renumbered)

    Returns:
        Table text
    """
    df = results_to_frame(results)
    if min_games is not None:
        df = df[df["games"] >= min_games]
    if df.empty:
        return f"No teams with at least {min_games} games." if min_games is not None else "No teams to rank."
    if top is not None:
        df = df.head(top)

    df = df.drop(columns=["team_id"]).rename(columns={"has_domination": "dom"})
    df["dom"] = df["dom"].map({True: "*", False: ""})
    return df.to_string(
        index=False,
        float_format=lambda v: f"{v:.4f}",
    )
