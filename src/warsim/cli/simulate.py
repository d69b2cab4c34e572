"""CLI for playing single games and running simulation batches."""

from __future__ import annotations

import logging
import random
from pathlib import Path

import click

from warsim.analysis.batch import BatchConfig, run_batch
from warsim.analysis.report import format_game, format_summary, save_json
from warsim.simulation.errors import WarSimError
from warsim.simulation.game import DEFAULT_MAX_ROUNDS, play_game
from warsim.simulation.player import deal
from warsim.simulation.shuffle import SeededEntropy

logger = logging.getLogger(__name__)


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
def main(verbose: bool):
    """Simulate two-player War and measure the effect of holding more kings."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(message)s")
    else:
        logging.basicConfig(level=logging.INFO, format="%(message)s")


@main.command()
@click.option("--seed", type=click.IntRange(min=0), default=None, help="Random seed for reproducibility")
@click.option("--max-rounds", type=int, default=DEFAULT_MAX_ROUNDS, help="Round safety cap")
@click.option("--show-stacks", is_flag=True, help="Print both players' final stacks")
def play(seed: int | None, max_rounds: int, show_stacks: bool):
    """Play a single game and print its result."""
    if seed is None:
        seed = random.randint(0, 2**32 - 1)

    left, right = deal(SeededEntropy(seed))
    try:
        result = play_game(left, right, max_rounds=max_rounds, seed=seed)
    except WarSimError as e:
        raise click.ClickException(str(e))

    click.echo(f"Seed = {seed}")
    click.echo(format_game(result))
    if show_stacks:
        for player in (left, right):
            click.echo(f"Player {player.player_id} draw stack: {' '.join(map(str, player.draw_stack))}")
            click.echo(f"Player {player.player_id} won stack: {' '.join(map(str, player.won_stack))}")


@main.command()
@click.option("-n", "--games", type=int, default=10_000, help="Number of games to simulate")
@click.option("--seed", type=click.IntRange(min=0), default=None, help="Batch seed for reproducibility")
@click.option(
    "-w", "--workers",
    type=int,
    default=1,
    help="Worker processes (0 = one per CPU, up to 8)",
)
@click.option("--max-rounds", type=int, default=DEFAULT_MAX_ROUNDS, help="Round safety cap per game")
@click.option("--chunk-size", type=int, default=500, help="Games per worker task")
@click.option(
    "--json", "json_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Also write the summary to this JSON file",
)
def simulate(
    games: int,
    seed: int | None,
    workers: int,
    max_rounds: int,
    chunk_size: int,
    json_path: str | None,
):
    """Simulate many games and report round counts and king-majority win rates."""
    try:
        config = BatchConfig(
            num_games=games,
            seed=seed,
            workers=workers or None,
            max_rounds=max_rounds,
            chunk_size=chunk_size,
        )
    except ValueError as e:
        raise click.BadParameter(str(e))

    try:
        aggregate = run_batch(config)
    except WarSimError as e:
        raise click.ClickException(str(e))

    click.echo(format_summary(aggregate))
    click.echo(f"\nSeed: {config.seed}")

    if json_path:
        save_json(aggregate, Path(json_path), config)
        click.echo(f"Summary saved to {json_path}")


if __name__ == "__main__":
    main()
