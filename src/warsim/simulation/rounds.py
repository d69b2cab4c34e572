"""Round resolver: one tie chain of draw-and-compare steps."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from warsim.simulation.cards import Card, compare_ranks
from warsim.simulation.player import Player

logger = logging.getLogger(__name__)


class ChainStatus(Enum):
    """How a tie chain ended."""

    SETTLED = "settled"      # A higher card took the pot
    STALEMATE = "stalemate"  # A player could not draw


@dataclass(frozen=True)
class ChainOutcome:
    """Result of resolving one tie chain.

    For a settled chain `winner` took the pot. For a stalemate `winner` is the
    player who could still draw (and took the pot), or None when neither
    could, in which case `pot` is left unclaimed.
    """

    status: ChainStatus
    winner: Optional[int]
    rounds: int
    pot: tuple[Card, ...]

    @property
    def ties(self) -> int:
        """Tied rounds in this chain."""
        if self.status is ChainStatus.SETTLED:
            return self.rounds - 1
        return self.rounds


def resolve_chain(left: Player, right: Player) -> ChainOutcome:
    """Draw from both players until one card outranks the other.

    Every card drawn during the chain goes into a single pot that is awarded
    whole to the eventual winner. Ties loop rather than recurse.
    """
    pot: List[Card] = []
    rounds = 0

    while True:
        left_out = left.is_empty()
        right_out = right.is_empty()
        if left_out or right_out:
            return _stalemate(left, right, left_out, right_out, rounds, pot)

        left_card = left.draw()
        right_card = right.draw()
        assert left_card is not None and right_card is not None
        pot.append(left_card)
        pot.append(right_card)
        rounds += 1

        result = compare_ranks(left_card, right_card)
        if result == 0:
            logger.debug(f"Tie on {left_card} / {right_card}, pot now {len(pot)}")
            continue

        winner = left if result > 0 else right
        winner.award(pot)
        return ChainOutcome(
            status=ChainStatus.SETTLED,
            winner=winner.player_id,
            rounds=rounds,
            pot=tuple(pot),
        )


def _stalemate(
    left: Player,
    right: Player,
    left_out: bool,
    right_out: bool,
    rounds: int,
    pot: List[Card],
) -> ChainOutcome:
    if left_out and right_out:
        winner = None
        if pot:
            logger.debug(f"Both players exhausted mid-chain, {len(pot)} cards unclaimed")
    else:
        survivor = right if left_out else left
        survivor.award(pot)
        winner = survivor.player_id

    return ChainOutcome(
        status=ChainStatus.STALEMATE,
        winner=winner,
        rounds=rounds,
        pot=tuple(pot),
    )
