"""Shuffle service and entropy sources."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence, TypeVar

import numpy as np

T = TypeVar("T")


class EntropySource(ABC):
    """Source of uniformly random indices consumed by `shuffle`."""

    @abstractmethod
    def randbelow(self, n: int) -> int:
        """Return a uniformly random integer in [0, n)."""
        pass


class SeededEntropy(EntropySource):
    """Entropy from a seeded `random.Random` stream."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self.seed = seed
        self.rng = random.Random(seed)

    def randbelow(self, n: int) -> int:
        return self.rng.randrange(n)


def shuffle(cards: Sequence[T], entropy: EntropySource) -> List[T]:
    """Return a uniformly random permutation of cards (Fisher-Yates).

    The input is left untouched.
    """
    result = list(cards)
    for i in range(len(result) - 1, 0, -1):
        j = entropy.randbelow(i + 1)
        result[i], result[j] = result[j], result[i]
    return result


def derive_seeds(seed: int, count: int) -> List[int]:
    """Derive `count` independent per-game seeds from one batch seed.

    Uses numpy's SeedSequence spawning, so game i always gets the same seed
    for a given batch seed no matter how the batch is split across workers.
    """
    children = np.random.SeedSequence(seed).spawn(count)
    return [int(child.generate_state(1, dtype=np.uint64)[0]) for child in children]
