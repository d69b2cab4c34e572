"""Human-readable and JSON reports for batch statistics."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from warsim.analysis.batch import BatchConfig
from warsim.analysis.stats import AggregateStats
from warsim.simulation.game import GameResult


def _significance(pvalue: float) -> str:
    if pvalue < 0.001:
        sig_str = "p < 0.001"
    elif pvalue < 0.01:
        sig_str = "p < 0.01"
    elif pvalue < 0.05:
        sig_str = "p < 0.05"
    else:
        sig_str = f"p = {pvalue:.3f}"
    sig_label = "SIGNIFICANT" if pvalue < 0.05 else "not significant"
    return f"{sig_str} ({sig_label})"


def format_summary(aggregate: AggregateStats) -> str:
    """Format batch statistics as a multi-line report."""
    lines = [
        "=" * 50,
        "War Simulation Report",
        "=" * 50,
        f"Games simulated: {aggregate.games}",
        f"  Player 0 wins: {aggregate.player0_wins}",
        f"  Player 1 wins: {aggregate.player1_wins}",
        f"  Draws: {aggregate.draws}",
        "",
        "--- Rounds per game ---",
        f"  Mean: {aggregate.mean_rounds:.1f} +/- {aggregate.std_rounds:.1f}",
        f"  Median: {aggregate.median_rounds:.1f}",
        f"  95th percentile: {aggregate.rounds_percentile(95):.1f}",
        f"  Mean settled chains: {aggregate.mean_chains:.1f}",
        f"  Longest tie chain: {aggregate.longest_chain} rounds",
        "",
        "--- King majority at deal ---",
        f"  Games with a strict majority: {aggregate.majority_games} "
        f"({aggregate.majority_fraction:.1%})",
        f"  Majority holder win rate: {aggregate.majority_win_rate:.1%}",
        f"  Non-majority holder win rate: {aggregate.non_majority_win_rate:.1%}",
        f"  Majority advantage: {_significance(aggregate.majority_pvalue)}",
        f"  Even split games: {aggregate.even_games} "
        f"(player 0 win rate {aggregate.even_split_win_rate:.1%})",
    ]
    return "\n".join(lines)


def format_game(result: GameResult) -> str:
    """Format a single game result."""
    winner = "draw" if result.winner is None else f"player {result.winner}"
    lines = [
        f"Number of rounds = {result.rounds}",
        f"Settled chains = {result.chains} (ties: {result.ties}, longest chain: {result.longest_chain})",
        f"Kings dealt = {result.initial_kings[0]} / {result.initial_kings[1]}",
        f"Final cards = {result.final_cards[0]} / {result.final_cards[1]}",
        f"Winner = {winner}",
    ]
    if result.unclaimed:
        lines.append(f"Unclaimed pot = {' '.join(str(card) for card in result.unclaimed)}")
    return "\n".join(lines)


def save_json(
    aggregate: AggregateStats,
    output_path: Path,
    config: Optional[BatchConfig] = None,
) -> None:
    """Save summary statistics as JSON."""
    data = {
        "metadata": {
            "timestamp": datetime.now(timezone.utc).isoformat(),
        },
        "summary": aggregate.to_dict(),
    }
    if config is not None:
        data["metadata"]["config"] = {
            "num_games": config.num_games,
            "seed": config.seed,
            "workers": config.workers,
            "max_rounds": config.max_rounds,
        }

    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w") as f:
        json.dump(data, f, indent=2)
