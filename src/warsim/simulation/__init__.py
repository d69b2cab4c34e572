"""War game simulation engine."""

from warsim.simulation.cards import Card, Suit, build_deck, compare_ranks, count_kings
from warsim.simulation.errors import DeckError, RoundLimitExceeded, WarSimError
from warsim.simulation.game import GameResult, play_game, simulate_game
from warsim.simulation.player import Player, deal, split
from warsim.simulation.rounds import ChainOutcome, ChainStatus, resolve_chain
from warsim.simulation.shuffle import EntropySource, SeededEntropy, derive_seeds, shuffle

__all__ = [
    # Cards
    "Card",
    "Suit",
    "build_deck",
    "compare_ranks",
    "count_kings",
    # Shuffle
    "EntropySource",
    "SeededEntropy",
    "shuffle",
    "derive_seeds",
    # Players
    "Player",
    "split",
    "deal",
    # Rounds
    "ChainOutcome",
    "ChainStatus",
    "resolve_chain",
    # Game
    "GameResult",
    "play_game",
    "simulate_game",
    # Errors
    "WarSimError",
    "DeckError",
    "RoundLimitExceeded",
]
