"""Result tables and ranking comparisons."""

from .comparison import compare_rankings, rank_movements
from .tables import format_results_table, results_to_frame

__all__ = ["compare_rankings", "format_results_table", "rank_movements", "results_to_frame"]
