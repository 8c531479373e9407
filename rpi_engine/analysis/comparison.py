"""
Compare two rankings of the same teams.

Used to judge how sensitive the ranking is to a change of coefficients, for
example a sport preset versus the defaults.
"""

from __future__ import annotations

from typing import Dict, Sequence

import numpy as np
import pandas as pd
from scipy.stats import kendalltau, spearmanr

from ..models.result import RankedResult


def rank_movements(baseline: Sequence[RankedResult], candidate: Sequence[RankedResult]) -> pd.DataFrame:
    """
    Per-team rank change between two rankings.

    Only teams present in both rankings are included. ``rank_change`` is
    positive when a team moves up in the candidate ranking.

    Returns:
        DataFrame sorted by absolute rank change, largest first
    """
    base = pd.DataFrame(
        [(r.team_id, r.team_name, i + 1, r.rpi) for i, r in enumerate(baseline)],
        columns=["team_id", "team_name", "baseline_rank", "baseline_rpi"],
    )
    cand = pd.DataFrame(
        [(r.team_id, i + 1, r.rpi) for i, r in enumerate(candidate)],
        columns=["team_id", "candidate_rank", "candidate_rpi"],
    )
    merged = base.merge(cand, on="team_id", how="inner")
    merged["rank_change"] = merged["baseline_rank"] - merged["candidate_rank"]
    merged["abs_change"] = merged["rank_change"].abs()
    merged = merged.sort_values(["abs_change", "baseline_rank"], ascending=[False, True], kind="mergesort")
    return merged.drop(columns=["abs_change"]).reset_index(drop=True)


def compare_rankings(baseline: Sequence[RankedResult], candidate: Sequence[RankedResult]) -> Dict[str, float]:
    """
    Rank correlation and movement summary between two rankings.

    Args:
        baseline: Reference ranking
        candidate: Ranking to compare against the reference

    Returns:
        Dict with spearman, kendall, mean_abs_rank_change, max_rank_change, n_teams
    """
    moves = rank_movements(baseline, candidate)
    n = len(moves)
    if n < 2:
        return {
            "spearman": 1.0,
            "kendall": 1.0,
            "mean_abs_rank_change": 0.0,
            "max_rank_change": 0,
            "n_teams": n,
        }

    rho, _ = spearmanr(moves["baseline_rank"], moves["candidate_rank"])
    tau, _ = kendalltau(moves["baseline_rank"], moves["candidate_rank"])
    abs_change = np.abs(moves["rank_change"].to_numpy())

    return {
        "spearman": float(rho),
        "kendall": float(tau),
        "mean_abs_rank_change": float(abs_change.mean()),
        "max_rank_change": int(abs_change.max()),
        "n_teams": n,
    }
