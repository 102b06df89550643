# -*- coding: utf-8 -*-
"""
Play power 2048
"""
import logging
from typing import Any

from power2048.core.config import SUPPORTED_BASES, Mode
from power2048.core.gamemove import Direction
from power2048.envs import PowerGame
from power2048.storage import JsonFileStore
from power2048.utils.inputs import key_to_direction
from power2048.utils.windows import WindowBoard

MODES = list(Mode)


def step(game: PowerGame, direction: Direction):
    """
    Applied action into the game.

    Parameters
    ----------
    game: PowerGame
        The game

    direction: Direction
        Action to apply
    """
    result = game.step(direction)
    if result.moved:
        print(f"score={game.score} (+{result.score_gained})")
    if game.is_finished:
        print(f"finished: {game.status.value}")


def next_mode(mode: Mode) -> Mode:
    """Mode after the given one, cycling through all modes."""
    return MODES[(MODES.index(mode) + 1) % len(MODES)]


def key_handler(game: PowerGame, window: WindowBoard, event: Any):
    """
    Handle the keyboard.

    Parameters
    ----------
    game: PowerGame
        The game

    window: WindowBoard
        Class to draw the game board

    event: Any
        event to handle
    """
    if event.key == "escape":
        game.close()
        window.close()
        return None

    if event.key == "backspace":
        game.reset()
        return None

    if event.key == "m":
        game.set_mode(next_mode(game.mode))
        return None

    if event.key is not None and event.key.isdigit() and int(event.key) in SUPPORTED_BASES:
        game.set_base(int(event.key))
        return None

    # ##: Moves are ignored once the game is finished.
    direction = key_to_direction(event.key)
    if direction is not None:
        step(game, direction)
    return None


if __name__ == "__main__":
    from argparse import ArgumentParser

    parser = ArgumentParser(description="Arrows/WASD to move, 2-5 to change base, m to change mode, backspace to restart")
    parser.add_argument("--base", type=int, default=3, choices=SUPPORTED_BASES)
    parser.add_argument("--mode", type=str, default=Mode.CLASSIC.value, choices=[mode.value for mode in Mode])
    parser.add_argument("--store", type=str, default=None, help="JSON file keeping the high scores")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    window_board = WindowBoard(title="Power 2048", size=4)
    env = PowerGame(
        base=args.base,
        mode=Mode(args.mode),
        store=JsonFileStore(args.store) if args.store else JsonFileStore(),
        ticker_factory=window_board.new_ticker,
        listener=window_board.show_snapshot,
    )
    window_board.register_key_handler(lambda event: key_handler(env, window_board, event))
    window_board.register_swipe_handler(lambda direction: step(env, direction))

    # Blocking event loop
    window_board.show(block=True)
    env.close()
