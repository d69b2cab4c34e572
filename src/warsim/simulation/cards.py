"""Card and deck model."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List

from warsim.simulation.errors import DeckError

SUIT_SIZE = 13
KING = 13

_RANK_LABELS = {1: "A", 11: "J", 12: "Q", 13: "K"}


class Suit(Enum):
    """Playing card suits."""

    HEARTS = "H"
    CLUBS = "C"
    DIAMONDS = "D"
    SPADES = "S"


@dataclass(frozen=True)
class Card:
    """Immutable playing card.

    Two cards are equal only when rank and suit match, so a deck never holds
    duplicates. Gameplay compares ranks alone, see `compare_ranks`.
    """

    rank: int
    suit: Suit

    @classmethod
    def create(cls, suit: Suit, rank: int, suit_size: int = SUIT_SIZE) -> "Card":
        """Create a card, rejecting ranks outside 1..suit_size."""
        if rank < 1 or rank > suit_size:
            raise DeckError(f"Rank {rank} is outside 1..{suit_size}")
        return cls(rank=rank, suit=suit)

    def __str__(self) -> str:
        return f"{_RANK_LABELS.get(self.rank, str(self.rank))}{self.suit.value}"


def compare_ranks(left: Card, right: Card) -> int:
    """Return 1 if left outranks right, -1 if right outranks left, 0 on a tie."""
    if left.rank > right.rank:
        return 1
    if left.rank < right.rank:
        return -1
    return 0


def build_deck(suit_size: int = SUIT_SIZE) -> List[Card]:
    """Build a full deck in canonical order (suit outer, rank inner)."""
    deck = [
        Card.create(suit, rank, suit_size)
        for suit in Suit
        for rank in range(1, suit_size + 1)
    ]
    validate_deck(deck, suit_size)
    return deck


def validate_deck(cards: Iterable[Card], suit_size: int = SUIT_SIZE) -> None:
    """Raise DeckError unless cards are exactly one of each rank/suit pair."""
    cards = list(cards)
    expected = len(Suit) * suit_size
    if len(cards) != expected:
        raise DeckError(f"Deck has {len(cards)} cards, expected {expected}")

    duplicates = [card for card, count in Counter(cards).items() if count > 1]
    if duplicates:
        raise DeckError(f"Duplicate cards in deck: {', '.join(map(str, duplicates))}")

    ranks = Counter(card.rank for card in cards)
    for rank in range(1, suit_size + 1):
        if ranks[rank] != len(Suit):
            raise DeckError(f"Rank {rank} appears {ranks[rank]} times, expected {len(Suit)}")


def count_kings(cards: Iterable[Card], king: int = KING) -> int:
    """Count cards of the highest rank."""
    return sum(1 for card in cards if card.rank == king)
