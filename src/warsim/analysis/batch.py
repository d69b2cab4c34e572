"""Batch runner: simulate many independent games and reduce them.

Each game owns its deck and players and draws from its own entropy stream,
so games can be farmed out to worker processes with no shared state. Workers
return partial AggregateStats which are merged in chunk order.
"""

from __future__ import annotations

import logging
import multiprocessing as mp
import random
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass
from functools import partial
from typing import List, Optional

from warsim.analysis.stats import AggregateStats
from warsim.simulation.cards import SUIT_SIZE
from warsim.simulation.game import DEFAULT_MAX_ROUNDS, simulate_game
from warsim.simulation.shuffle import derive_seeds

logger = logging.getLogger(__name__)


@dataclass
class BatchConfig:
    """Configuration for a batch of simulated games."""

    num_games: int = 10_000
    seed: Optional[int] = None
    workers: Optional[int] = 1  # None = cpu_count(), capped at 8
    max_rounds: int = DEFAULT_MAX_ROUNDS
    chunk_size: int = 500  # Games per worker task
    suit_size: int = SUIT_SIZE

    def __post_init__(self):
        """Validate and generate seed if not provided."""
        if self.num_games < 0:
            raise ValueError(f"num_games must be >= 0, got {self.num_games}")
        if self.max_rounds < 1:
            raise ValueError(f"max_rounds must be >= 1, got {self.max_rounds}")
        if self.chunk_size < 1:
            raise ValueError(f"chunk_size must be >= 1, got {self.chunk_size}")
        if self.workers is not None and self.workers < 1:
            raise ValueError(f"workers must be >= 1, got {self.workers}")
        if self.seed is not None and self.seed < 0:
            raise ValueError(f"seed must be >= 0, got {self.seed}")
        if self.workers is None:
            self.workers = min(mp.cpu_count(), 8)
        if self.seed is None:
            self.seed = random.randint(0, 2**32 - 1)


# Top-level so it can be pickled for worker processes.
def _run_chunk(seeds: List[int], max_rounds: int, suit_size: int) -> AggregateStats:
    """Simulate one game per seed and reduce them."""
    aggregate = AggregateStats()
    for seed in seeds:
        aggregate.add(simulate_game(seed, max_rounds=max_rounds, suit_size=suit_size))
    return aggregate


def _chunks(seeds: List[int], size: int) -> List[List[int]]:
    return [seeds[i:i + size] for i in range(0, len(seeds), size)]


def run_batch(config: BatchConfig) -> AggregateStats:
    """Run config.num_games games and return their merged statistics.

    The result depends only on the seed and game count, not on the number
    of workers or the chunk size.
    """
    assert config.seed is not None and config.workers is not None
    seeds = derive_seeds(config.seed, config.num_games)
    chunks = _chunks(seeds, config.chunk_size)
    run = partial(_run_chunk, max_rounds=config.max_rounds, suit_size=config.suit_size)

    logger.info(
        f"Simulating {config.num_games} games (seed={config.seed}, "
        f"workers={config.workers}, chunks={len(chunks)})"
    )

    total = AggregateStats()
    if config.workers == 1 or len(chunks) <= 1:
        partials = map(run, chunks)
        for i, part in enumerate(partials, start=1):
            total = total.merge(part)
            logger.debug(f"  Chunk {i}/{len(chunks)} done ({total.games} games)")
    else:
        with ProcessPoolExecutor(max_workers=config.workers) as executor:
            for i, part in enumerate(executor.map(run, chunks), start=1):
                total = total.merge(part)
                logger.debug(f"  Chunk {i}/{len(chunks)} done ({total.games} games)")

    logger.info(f"Batch complete: mean rounds {total.mean_rounds:.1f}")
    return total
