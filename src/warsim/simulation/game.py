"""Game driver: runs tie chains until a player can no longer draw."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from warsim.simulation.cards import SUIT_SIZE, Card, count_kings, validate_deck
from warsim.simulation.errors import RoundLimitExceeded
from warsim.simulation.player import Player, deal
from warsim.simulation.rounds import ChainStatus, resolve_chain
from warsim.simulation.shuffle import SeededEntropy

logger = logging.getLogger(__name__)

DEFAULT_MAX_ROUNDS = 100_000


@dataclass(frozen=True)
class GameResult:
    """Result of one simulated game."""

    winner: Optional[int]  # Player ID, None for a draw
    rounds: int  # Every draw-and-compare step, ties included
    chains: int  # Settled tie chains
    ties: int
    longest_chain: int
    initial_kings: tuple[int, int]
    final_cards: tuple[int, int]
    unclaimed: tuple[Card, ...] = ()  # Pot orphaned when both players ran out
    seed: Optional[int] = None

    @property
    def is_draw(self) -> bool:
        return self.winner is None

    @property
    def king_majority(self) -> Optional[int]:
        """Player dealt strictly more kings, or None on an even split."""
        left, right = self.initial_kings
        if left > right:
            return 0
        if right > left:
            return 1
        return None

    @property
    def majority_won(self) -> Optional[bool]:
        """Whether the king-majority holder won; None without a majority or winner."""
        majority = self.king_majority
        if majority is None or self.winner is None:
            return None
        return self.winner == majority


def check_conservation(
    left: Player,
    right: Player,
    unclaimed: tuple[Card, ...] = (),
    suit_size: int = SUIT_SIZE,
) -> None:
    """Raise DeckError unless both players plus unclaimed cards form one full deck."""
    validate_deck(left.cards() + right.cards() + list(unclaimed), suit_size)


def play_game(
    left: Player,
    right: Player,
    max_rounds: int = DEFAULT_MAX_ROUNDS,
    seed: Optional[int] = None,
    verify: bool = False,
    suit_size: int = SUIT_SIZE,
) -> GameResult:
    """Play a game to completion.

    Args:
        left: Player 0, freshly dealt
        right: Player 1, freshly dealt
        max_rounds: Safety cap on draw-and-compare steps
        seed: Recorded on the result for reproduction
        verify: Check card conservation after every chain
        suit_size: Ranks per suit, used by the conservation check

    Returns:
        GameResult with winner, round counts and king metrics

    Raises:
        RoundLimitExceeded: If the game runs past max_rounds
    """
    initial_kings = (count_kings(left.cards(), suit_size), count_kings(right.cards(), suit_size))

    rounds = 0
    chains = 0
    ties = 0
    longest_chain = 0

    while True:
        outcome = resolve_chain(left, right)
        rounds += outcome.rounds
        ties += outcome.ties
        longest_chain = max(longest_chain, outcome.rounds)

        if outcome.status is ChainStatus.STALEMATE:
            unclaimed = outcome.pot if outcome.winner is None else ()
            if verify:
                check_conservation(left, right, unclaimed, suit_size)
            result = GameResult(
                winner=outcome.winner,
                rounds=rounds,
                chains=chains,
                ties=ties,
                longest_chain=longest_chain,
                initial_kings=initial_kings,
                final_cards=(left.total_cards(), right.total_cards()),
                unclaimed=unclaimed,
                seed=seed,
            )
            logger.debug(
                f"Game over after {rounds} rounds ({chains} chains): winner={result.winner}"
            )
            return result

        chains += 1
        if verify:
            check_conservation(left, right, suit_size=suit_size)
        if rounds > max_rounds:
            raise RoundLimitExceeded(max_rounds, rounds)


def simulate_game(
    seed: int,
    max_rounds: int = DEFAULT_MAX_ROUNDS,
    suit_size: int = SUIT_SIZE,
    verify: bool = False,
) -> GameResult:
    """Deal a fresh deck from `seed` and play it out."""
    entropy = SeededEntropy(seed)
    left, right = deal(entropy, suit_size)
    return play_game(
        left,
        right,
        max_rounds=max_rounds,
        seed=seed,
        verify=verify,
        suit_size=suit_size,
    )
