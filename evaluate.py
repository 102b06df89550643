# -*- coding: utf-8 -*-
"""
Evaluate random play for a base.
"""
from collections import Counter
from typing import Dict

from tqdm import trange

from power2048.core.config import SUPPORTED_BASES
from power2048.utils.simulation import play_random_game


def evaluate(base: int, length: int = 10, seed: int | None = None) -> Dict[int, int]:
    """
    Play random games and count the largest tile of each.

    Parameters
    ----------
    base : int
        Merge base of the games.
    length : int, optional
        The number of games to play (default is 10).
    seed : int, optional
        Seed of the first game, the following games use the next seeds.

    Returns
    -------
    Dict[int, int]
        How many games ended with each largest tile.
    """
    score = []

    with trange(length) as period:
        for num in period:
            summary = play_random_game(base, seed=None if seed is None else seed + num)

            # ##: Log.
            period.set_description(f"Evaluation: {num + 1}")
            period.set_postfix(score=summary.score, max=summary.max_tile)

            # ##: Save max cells.
            score.append(summary.max_tile)

    # ##: Final log.
    frequency = Counter(score)
    return dict(sorted(frequency.items()))


if __name__ == "__main__":
    from argparse import ArgumentParser

    parser = ArgumentParser()
    parser.add_argument("--base", type=int, default=3, choices=SUPPORTED_BASES)
    parser.add_argument("--games", type=int, default=10)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args()

    result = evaluate(base=args.base, length=args.games, seed=args.seed)
    print(f"Random play with base {args.base}, max tiles: {result}")
