"""Batch simulation and statistics for the king-majority question."""

from warsim.analysis.stats import AggregateStats, reduce_results
from warsim.analysis.batch import BatchConfig, run_batch
from warsim.analysis.report import format_game, format_summary, save_json

__all__ = [
    # Statistics
    "AggregateStats",
    "reduce_results",
    # Batches
    "BatchConfig",
    "run_batch",
    # Reporting
    "format_summary",
    "format_game",
    "save_json",
]
