"""Player stacks and the initial deal."""

from __future__ import annotations

from collections import deque
from typing import Deque, Iterable, List, Optional, Sequence, Tuple

from warsim.simulation.cards import SUIT_SIZE, Card, build_deck
from warsim.simulation.errors import DeckError
from warsim.simulation.shuffle import EntropySource, shuffle


class Player:
    """Draw stack and won stack of one player.

    Cards are drawn from the front of the draw stack. Captured cards go to the
    won stack, which is shuffled into the draw stack only when a draw finds the
    draw stack empty.
    """

    def __init__(
        self,
        player_id: int,
        cards: Iterable[Card],
        entropy: EntropySource,
    ) -> None:
        self.player_id = player_id
        self.entropy = entropy
        self._draw_stack: Deque[Card] = deque(cards)
        self._won_stack: List[Card] = []
        self.replenishments = 0

    @property
    def draw_stack(self) -> Tuple[Card, ...]:
        return tuple(self._draw_stack)

    @property
    def won_stack(self) -> Tuple[Card, ...]:
        return tuple(self._won_stack)

    def is_empty(self) -> bool:
        """True when the player holds no cards at all and cannot draw."""
        return not self._draw_stack and not self._won_stack

    def total_cards(self) -> int:
        return len(self._draw_stack) + len(self._won_stack)

    def cards(self) -> List[Card]:
        """All cards held, draw stack first."""
        return list(self._draw_stack) + self._won_stack

    def draw(self) -> Optional[Card]:
        """Take the top card, replenishing from the won stack if needed.

        Returns None when both stacks are empty.
        """
        if not self._draw_stack and self._won_stack:
            self._replenish()
        if not self._draw_stack:
            return None
        return self._draw_stack.popleft()

    def award(self, cards: Iterable[Card]) -> None:
        """Add captured cards to the won stack."""
        self._won_stack.extend(cards)

    def _replenish(self) -> None:
        self._draw_stack = deque(shuffle(self._won_stack, self.entropy))
        self._won_stack = []
        self.replenishments += 1

    def __repr__(self) -> str:
        return (
            f"Player(id={self.player_id}, draw={len(self._draw_stack)}, "
            f"won={len(self._won_stack)})"
        )


def split(
    deck: Sequence[Card],
    entropy: EntropySource,
) -> Tuple[Player, Player]:
    """Split a shuffled deck into two equal draw stacks.

    Player 0 gets the first half, player 1 the second. No randomness is used
    here; `entropy` is only handed to the players for later replenishment.
    """
    if len(deck) % 2 != 0:
        raise DeckError(f"Deck of {len(deck)} cards cannot be split in two")
    half = len(deck) // 2
    return Player(0, deck[:half], entropy), Player(1, deck[half:], entropy)


def deal(entropy: EntropySource, suit_size: int = SUIT_SIZE) -> Tuple[Player, Player]:
    """Build, shuffle and split a fresh deck."""
    deck = shuffle(build_deck(suit_size), entropy)
    return split(deck, entropy)
