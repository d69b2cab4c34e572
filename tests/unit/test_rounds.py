"""Tests for the tie-chain round resolver."""

from warsim.simulation.cards import Card, Suit
from warsim.simulation.rounds import ChainStatus, resolve_chain


def test_first_player_wins_round(make_player) -> None:
    """Higher card takes both cards."""
    left = make_player(0, [13])
    right = make_player(1, [1])

    outcome = resolve_chain(left, right)

    assert outcome.status is ChainStatus.SETTLED
    assert outcome.winner == 0
    assert outcome.rounds == 1
    assert outcome.ties == 0
    assert len(left.won_stack) == 2
    assert len(right.won_stack) == 0


def test_second_player_wins_round(make_player) -> None:
    """Suit is ignored, rank decides."""
    left = make_player(0, [(1, Suit.SPADES)])
    right = make_player(1, [(2, Suit.HEARTS)])

    outcome = resolve_chain(left, right)

    assert outcome.winner == 1
    assert len(left.won_stack) == 0
    assert len(right.won_stack) == 2


def test_tie_broken_by_next_card(make_player) -> None:
    """A tie carries the pot into the next draw."""
    left = make_player(0, [1, 13, 10])
    right = make_player(1, [1, 12, 11, 12])

    outcome = resolve_chain(left, right)

    assert outcome.status is ChainStatus.SETTLED
    assert outcome.winner == 0
    assert outcome.rounds == 2
    assert outcome.ties == 1
    assert left.total_cards() == 5
    assert right.total_cards() == 2


def test_pot_holds_every_card_of_the_chain(make_player) -> None:
    """Pot size is twice the chain length and goes to the winner whole."""
    left = make_player(0, [4, 7, 9, 2])
    right = make_player(1, [4, 7, 9, 3])

    outcome = resolve_chain(left, right)

    assert outcome.rounds == 4
    assert len(outcome.pot) == 2 * outcome.rounds
    assert outcome.winner == 1
    assert set(right.won_stack) == set(outcome.pot)
    assert left.total_cards() == 0


def test_complete_tie_results_in_stalemate_with_empty_stacks(make_player) -> None:
    """Identical stacks exhaust both players; nobody claims the pot."""
    left = make_player(0, [1, 13, 10])
    right = make_player(1, [1, 13, 10])

    outcome = resolve_chain(left, right)

    assert outcome.status is ChainStatus.STALEMATE
    assert outcome.winner is None
    assert outcome.rounds == 3
    assert len(outcome.pot) == 6
    assert left.total_cards() == 0
    assert right.total_cards() == 0


def test_exhausted_mid_chain_forfeits_pot(make_player) -> None:
    """The player who still has cards takes the pot."""
    left = make_player(0, [5, 7])
    right = make_player(1, [5])

    outcome = resolve_chain(left, right)

    assert outcome.status is ChainStatus.STALEMATE
    assert outcome.winner == 0
    assert outcome.rounds == 1
    assert outcome.ties == 1
    assert left.total_cards() == 3
    assert right.is_empty()


def test_replenishes_during_tie(make_player) -> None:
    """A tie can continue from the won stack."""
    left = make_player(0, [5], won=[9])
    right = make_player(1, [5, 3])

    outcome = resolve_chain(left, right)

    assert outcome.status is ChainStatus.SETTLED
    assert outcome.winner == 0
    assert outcome.rounds == 2
    assert left.replenishments == 1
    assert left.total_cards() == 4
    assert right.is_empty()


def test_empty_player_before_draw(make_player) -> None:
    """No draw happens if a player starts with nothing."""
    left = make_player(0, [])
    right = make_player(1, [8])

    outcome = resolve_chain(left, right)

    assert outcome.status is ChainStatus.STALEMATE
    assert outcome.winner == 1
    assert outcome.rounds == 0
    assert outcome.pot == ()
    assert right.draw_stack == (Card(8, Suit.SPADES),)


def test_long_tie_chain_is_iterative(make_player) -> None:
    """Very long chains do not recurse."""
    ranks = [7] * 5000 + [1]
    left = make_player(0, ranks)
    right = make_player(1, [7] * 5000 + [2])

    outcome = resolve_chain(left, right)

    assert outcome.rounds == 5001
    assert outcome.winner == 1
    assert right.total_cards() == 10002
