"""Benchmark sequential vs parallel batch simulation."""

import time

from warsim.analysis.batch import BatchConfig, run_batch


def benchmark_batch(num_games: int = 1000, workers: int = 1) -> dict:
    """Time one seeded batch."""
    config = BatchConfig(num_games=num_games, seed=42, workers=workers, chunk_size=250)

    start_time = time.perf_counter()
    aggregate = run_batch(config)
    total_duration_s = time.perf_counter() - start_time

    return {
        "total_games": num_games,
        "workers": workers,
        "total_duration_s": total_duration_s,
        "avg_ms_per_game": (total_duration_s * 1000) / num_games,
        "games_per_second": num_games / total_duration_s,
        "avg_rounds": aggregate.mean_rounds,
    }


def main():
    """Run batch benchmark."""
    print("=" * 60)
    print("WAR BATCH BENCHMARK")
    print("=" * 60)
    print()

    print("Warming up...")
    benchmark_batch(num_games=50)
    print()

    num_games = 2000
    for workers in (1, 2, 4):
        print(f"Running {num_games} games with {workers} worker(s)...")
        results = benchmark_batch(num_games=num_games, workers=workers)
        print(f"  Total duration: {results['total_duration_s']:.3f}s")
        print(f"  Avg per game:   {results['avg_ms_per_game']:.4f}ms")
        print(f"  Throughput:     {results['games_per_second']:.0f} games/sec")
        print(f"  Avg rounds:     {results['avg_rounds']:.1f}")
        print()


if __name__ == "__main__":
    main()
