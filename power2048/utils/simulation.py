"""Random-play games, used to evaluate how far chance alone goes for a given base."""

from typing import NamedTuple

from numpy.random import default_rng

from power2048.core.config import Mode
from power2048.core.gamemove import legal_actions
from power2048.envs.powergame import GameStatus, PowerGame


class GameSummary(NamedTuple):
    """Outcome of a finished game."""

    score: int
    max_tile: int
    moves: int
    status: GameStatus


def play_random_game(base: int, seed: int | None = None, max_moves: int | None = None) -> GameSummary:
    """
    Play a classic game with uniformly random legal moves.

    Parameters
    ----------
    base : int
        Merge base.
    seed : int, optional
        Random number generator seed, for both tile spawns and move choice.
    max_moves : int, optional
        Stop after this many moves even if the game is not finished.

    Returns
    -------
    GameSummary
        Final score, largest tile, number of moves played and final status.
    """
    game = PowerGame(base=base, mode=Mode.CLASSIC, seed=seed)
    rng = default_rng(seed)

    moves = 0
    while not game.is_finished and (max_moves is None or moves < max_moves):
        actions = legal_actions(game.board)
        game.step(actions[rng.integers(len(actions))])
        moves += 1

    return GameSummary(score=game.score, max_tile=int(game.board.max()), moves=moves, status=game.status)
