"""Exceptions raised by the simulation engine."""


class WarSimError(Exception):
    """Base class for simulation errors."""
    pass


class DeckError(WarSimError):
    """Deck construction or split is structurally invalid."""
    pass


class RoundLimitExceeded(WarSimError):
    """A game ran past the round safety cap."""

    def __init__(self, max_rounds: int, rounds: int) -> None:
        super().__init__(
            f"Game exceeded the safety cap of {max_rounds} rounds "
            f"({rounds} rounds played)"
        )
        self.max_rounds = max_rounds
        self.rounds = rounds
