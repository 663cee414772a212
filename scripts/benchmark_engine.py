"""
Benchmark script for engine throughput.

Plays complete games by picking uniformly among the legal directions, then reports moves per second
and score statistics. The random policy only exists to drive the engine.

Usage:
    python scripts/benchmark_engine.py --games 200 --seed 0
"""

import argparse
import time
from dataclasses import dataclass

import numpy as np
from numpy.random import default_rng
from tqdm import tqdm

from slidemerge.core.gameboard import max_tile
from slidemerge.core.gamemove import legal_directions
from slidemerge.envs import GameSession


@dataclass
class BenchmarkResults:
    """Container for benchmark results."""

    scores: list[int]
    max_tiles: list[int]
    moves: int
    elapsed_s: float

    @property
    def moves_per_second(self) -> float:
        return self.moves / self.elapsed_s if self.elapsed_s > 0 else float('inf')

    def summary(self) -> str:
        """Generate summary report."""
        tiles, counts = np.unique(self.max_tiles, return_counts=True)
        lines = [
            '=' * 60,
            'ENGINE BENCHMARK RESULTS',
            '=' * 60,
            f'Games:                 {len(self.scores):>8d}',
            f'Moves:                 {self.moves:>8d}',
            f'Throughput:            {self.moves_per_second:>8.1f} moves/second',
            '-' * 60,
            f'Score:                 {np.mean(self.scores):>8.1f} ± {np.std(self.scores):.1f}',
            f'Best score:            {max(self.scores):>8d}',
            '-' * 60,
            'Max tile distribution:',
        ]
        lines.extend(f'  {int(tile):>6d}: {count / len(self.max_tiles):>6.1%}' for tile, count in zip(tiles, counts))
        lines.append('=' * 60)
        return '\n'.join(lines)


def run_benchmark(num_games: int, seed: int | None = None, show_progress: bool = True) -> BenchmarkResults:
    """
    Play ``num_games`` random games and time them.

    Parameters
    ----------
    num_games : int
        Number of games to play.
    seed : int, optional
        Seed for both the move policy and the tile generator.
    show_progress : bool, optional
        Whether to display a progress bar.

    Returns
    -------
    BenchmarkResults
        Scores, max tiles, move count and elapsed time.
    """
    policy = default_rng(seed)
    session = GameSession(seed=seed)
    scores, tiles, moves = [], [], 0

    start = time.perf_counter()
    for _ in tqdm(range(num_games), desc='Games', unit='game', leave=False, disable=not show_progress):
        session.new_game()
        while not session.is_game_over:
            directions = legal_directions(session.board)
            session.move(directions[int(policy.integers(len(directions)))])
            moves += 1
        scores.append(session.score)
        tiles.append(max_tile(session.board))
    elapsed = time.perf_counter() - start

    return BenchmarkResults(scores=scores, max_tiles=tiles, moves=moves, elapsed_s=elapsed)


if __name__ == '__main__':
    parser = argparse.ArgumentParser(description='Benchmark the game engine')
    parser.add_argument('--games', type=int, default=100, help='Number of games to play')
    parser.add_argument('--seed', type=int, default=None, help='Random seed')
    args = parser.parse_args()

    print(run_benchmark(args.games, seed=args.seed).summary())
