"""Shared fixtures for simulation tests."""

from typing import Callable, List, Optional

import pytest

from warsim.simulation.cards import Card, Suit
from warsim.simulation.player import Player
from warsim.simulation.shuffle import EntropySource


class IdentityEntropy(EntropySource):
    """Always picks the last index, so shuffling leaves order unchanged."""

    def randbelow(self, n: int) -> int:
        return n - 1


@pytest.fixture
def identity_entropy() -> EntropySource:
    return IdentityEntropy()


@pytest.fixture
def make_player(identity_entropy) -> Callable[..., Player]:
    """Factory for players with a scripted draw stack.

    Cards are given as (rank, suit) pairs or bare ranks; bare ranks default
    to clubs for player 0 and spades for player 1.
    """

    def _make(player_id: int, cards: List, won: Optional[List] = None) -> Player:
        default_suit = Suit.CLUBS if player_id == 0 else Suit.SPADES

        def to_card(item) -> Card:
            if isinstance(item, Card):
                return item
            if isinstance(item, tuple):
                return Card(item[0], item[1])
            return Card(item, default_suit)

        player = Player(player_id, [to_card(c) for c in cards], identity_entropy)
        if won:
            player.award([to_card(c) for c in won])
        return player

    return _make
