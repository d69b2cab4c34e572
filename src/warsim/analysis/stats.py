"""Aggregate statistics over many simulated games."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List

import numpy as np
from scipy import stats

from warsim.simulation.game import GameResult


@dataclass
class AggregateStats:
    """Running reduction over GameResults.

    Counts are plain sums and round counts are concatenated, so `merge` is
    associative and commutative and partial results from parallel workers can
    be combined in any order.
    """

    games: int = 0
    draws: int = 0
    player0_wins: int = 0
    player1_wins: int = 0
    rounds: List[int] = field(default_factory=list)
    total_chains: int = 0
    total_ties: int = 0
    longest_chain: int = 0

    # King majority at deal time
    majority_games: int = 0
    majority_wins: int = 0      # Majority holder won
    majority_losses: int = 0    # Non-majority holder won
    even_games: int = 0         # Kings split 2-2
    even_player0_wins: int = 0
    even_player1_wins: int = 0

    def add(self, result: GameResult) -> None:
        """Fold one game into the reduction."""
        self.games += 1
        self.rounds.append(result.rounds)
        self.total_chains += result.chains
        self.total_ties += result.ties
        self.longest_chain = max(self.longest_chain, result.longest_chain)

        if result.winner is None:
            self.draws += 1
        elif result.winner == 0:
            self.player0_wins += 1
        else:
            self.player1_wins += 1

        if result.king_majority is None:
            self.even_games += 1
            if result.winner == 0:
                self.even_player0_wins += 1
            elif result.winner == 1:
                self.even_player1_wins += 1
        else:
            self.majority_games += 1
            if result.majority_won is True:
                self.majority_wins += 1
            elif result.majority_won is False:
                self.majority_losses += 1

    def merge(self, other: "AggregateStats") -> "AggregateStats":
        """Combine two partial reductions into a new one."""
        return AggregateStats(
            games=self.games + other.games,
            draws=self.draws + other.draws,
            player0_wins=self.player0_wins + other.player0_wins,
            player1_wins=self.player1_wins + other.player1_wins,
            rounds=self.rounds + other.rounds,
            total_chains=self.total_chains + other.total_chains,
            total_ties=self.total_ties + other.total_ties,
            longest_chain=max(self.longest_chain, other.longest_chain),
            majority_games=self.majority_games + other.majority_games,
            majority_wins=self.majority_wins + other.majority_wins,
            majority_losses=self.majority_losses + other.majority_losses,
            even_games=self.even_games + other.even_games,
            even_player0_wins=self.even_player0_wins + other.even_player0_wins,
            even_player1_wins=self.even_player1_wins + other.even_player1_wins,
        )

    @property
    def mean_rounds(self) -> float:
        return float(np.mean(self.rounds)) if self.rounds else 0.0

    @property
    def median_rounds(self) -> float:
        return float(np.median(self.rounds)) if self.rounds else 0.0

    @property
    def std_rounds(self) -> float:
        if len(self.rounds) < 2:
            return 0.0
        return float(np.std(self.rounds, ddof=1))

    def rounds_percentile(self, q: float) -> float:
        """Round count at percentile q (0-100)."""
        return float(np.percentile(self.rounds, q)) if self.rounds else 0.0

    @property
    def mean_chains(self) -> float:
        return self.total_chains / self.games if self.games > 0 else 0.0

    @property
    def draw_rate(self) -> float:
        return self.draws / self.games if self.games > 0 else 0.0

    @property
    def majority_fraction(self) -> float:
        """Fraction of games where one player was dealt a strict king majority."""
        return self.majority_games / self.games if self.games > 0 else 0.0

    @property
    def majority_win_rate(self) -> float:
        """Win rate of the king-majority holder."""
        return self.majority_wins / self.majority_games if self.majority_games > 0 else 0.0

    @property
    def non_majority_win_rate(self) -> float:
        """Win rate of the opponent of the king-majority holder."""
        return self.majority_losses / self.majority_games if self.majority_games > 0 else 0.0

    @property
    def even_split_win_rate(self) -> float:
        """Player 0 win rate when kings were split evenly."""
        return self.even_player0_wins / self.even_games if self.even_games > 0 else 0.0

    @property
    def majority_pvalue(self) -> float:
        """One-sided binomial p-value that the majority holder wins more than half.

        Draws are excluded. Returns 1.0 when there is nothing to test.
        """
        decided = self.majority_wins + self.majority_losses
        if decided == 0:
            return 1.0
        return float(
            stats.binomtest(self.majority_wins, decided, 0.5, alternative="greater").pvalue
        )

    def to_dict(self) -> Dict[str, Any]:
        """Summary values suitable for JSON export."""
        return {
            "games": self.games,
            "player0_wins": self.player0_wins,
            "player1_wins": self.player1_wins,
            "draws": self.draws,
            "rounds": {
                "mean": self.mean_rounds,
                "median": self.median_rounds,
                "std": self.std_rounds,
                "min": min(self.rounds) if self.rounds else 0,
                "max": max(self.rounds) if self.rounds else 0,
                "p95": self.rounds_percentile(95),
            },
            "mean_chains": self.mean_chains,
            "total_ties": self.total_ties,
            "longest_chain": self.longest_chain,
            "king_majority": {
                "games": self.majority_games,
                "fraction": self.majority_fraction,
                "majority_win_rate": self.majority_win_rate,
                "non_majority_win_rate": self.non_majority_win_rate,
                "pvalue": self.majority_pvalue,
            },
            "even_split": {
                "games": self.even_games,
                "player0_win_rate": self.even_split_win_rate,
            },
        }


def reduce_results(results: Iterable[GameResult]) -> AggregateStats:
    """Fold GameResults into a fresh AggregateStats."""
    aggregate = AggregateStats()
    for result in results:
        aggregate.add(result)
    return aggregate
