"""Tests for card and deck model."""

import pytest
from collections import Counter

from warsim.simulation.cards import (
    Card, Suit, build_deck, compare_ranks, count_kings, validate_deck,
)
from warsim.simulation.errors import DeckError


def test_build_deck_has_52_distinct_cards() -> None:
    """Test a standard deck has every rank/suit pair exactly once."""
    deck = build_deck()

    assert len(deck) == 52
    assert len(set(deck)) == 52
    assert {card.suit for card in deck} == set(Suit)


def test_each_rank_appears_four_times() -> None:
    """Test rank composition of the deck."""
    ranks = Counter(card.rank for card in build_deck())

    assert sorted(ranks) == list(range(1, 14))
    assert all(count == 4 for count in ranks.values())


def test_deck_is_in_canonical_order() -> None:
    """Test suits are outer, ranks inner, ascending."""
    deck = build_deck()

    first_suit = deck[:13]
    assert [card.rank for card in first_suit] == list(range(1, 14))
    assert all(card.suit == Suit.HEARTS for card in first_suit)


def test_small_deck() -> None:
    """Test a reduced suit size builds a proportionally smaller deck."""
    deck = build_deck(suit_size=3)

    assert len(deck) == 12
    assert max(card.rank for card in deck) == 3


def test_create_rejects_out_of_range_rank() -> None:
    """Test Card.create validates rank."""
    with pytest.raises(DeckError):
        Card.create(Suit.CLUBS, 0)
    with pytest.raises(DeckError):
        Card.create(Suit.CLUBS, 14)

    assert Card.create(Suit.CLUBS, 13) == Card(13, Suit.CLUBS)


def test_card_is_immutable() -> None:
    """Test cards are frozen."""
    card = Card(5, Suit.SPADES)

    with pytest.raises(AttributeError):
        card.rank = 6  # type: ignore


def test_card_str() -> None:
    """Test short card labels."""
    assert str(Card(13, Suit.SPADES)) == "KS"
    assert str(Card(1, Suit.HEARTS)) == "AH"
    assert str(Card(10, Suit.DIAMONDS)) == "10D"


def test_compare_ranks_ignores_suit() -> None:
    """Test comparison uses rank only."""
    assert compare_ranks(Card(13, Suit.CLUBS), Card(1, Suit.SPADES)) == 1
    assert compare_ranks(Card(2, Suit.SPADES), Card(3, Suit.CLUBS)) == -1
    assert compare_ranks(Card(7, Suit.HEARTS), Card(7, Suit.SPADES)) == 0


def test_validate_deck_rejects_duplicates() -> None:
    """Test a duplicated card is a structural error."""
    deck = build_deck()
    deck[0] = deck[1]

    with pytest.raises(DeckError, match="Duplicate"):
        validate_deck(deck)


def test_validate_deck_rejects_missing_cards() -> None:
    """Test a short deck is a structural error."""
    with pytest.raises(DeckError):
        validate_deck(build_deck()[:-1])


def test_count_kings() -> None:
    """Test king counting."""
    assert count_kings(build_deck()) == 4
    assert count_kings([Card(13, Suit.HEARTS), Card(12, Suit.HEARTS)]) == 1
    assert count_kings(build_deck(suit_size=3), king=3) == 4
