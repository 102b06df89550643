"""Power 2048 game session: board, score, high score, countdown and game status."""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, NamedTuple

from numpy import ndarray
from numpy.random import PCG64DXSM, Generator, default_rng

from power2048.core.config import DEFAULT_BASE, GRID_SIZE, GameConfig, Mode
from power2048.core.gameboard import apply_move, fill_cells, has_any_move, has_won, new_board, spawn_tile
from power2048.core.gamemove import Direction
from power2048.envs.countdown import Countdown, TickerFactory
from power2048.storage.highscore import HighScoreStore, MemoryStore, load_high_score, save_high_score

logger = logging.getLogger(__name__)


class GameStatus(str, Enum):
    """
    Status of a game.

    Every status but IN_PROGRESS is terminal: a finished game never goes back to IN_PROGRESS.
    """

    IN_PROGRESS = 'in_progress'
    WON = 'won'
    LOST_NO_MOVES = 'lost_no_moves'
    LOST_TIME_UP = 'lost_time_up'

    @property
    def is_terminal(self) -> bool:
        return self is not GameStatus.IN_PROGRESS


@dataclass(frozen=True)
class MoveResult:
    """Outcome of a move attempt. A move that did not change the board has no other effect."""

    moved: bool
    score_gained: int = 0
    merged_cells: frozenset[tuple[int, int]] = field(default_factory=frozenset)


class GameSnapshot(NamedTuple):
    """Read-only view of a game for renderers."""

    board: ndarray
    last_spawn: tuple[int, int] | None
    merged_cells: frozenset[tuple[int, int]]
    score: int
    high_score: int
    status: GameStatus
    time_remaining: int | None
    base: int
    mode: Mode


class PowerGame:
    """
    Power 2048 game.

    This class owns the board and the score, and runs each move as: slide and merge, update the score, spawn a tile,
    check for a win, then check for a blocked board. Timed modes also own a countdown that ends the game when it
    reaches zero.

    Parameters
    ----------
    base : int, optional
        Merge base, one of 2, 3, 4 or 5 (default is 3).
    mode : Mode, optional
        Play mode (default is classic).
    size : int, optional
        The size of the square grid (default is 4).
    store : HighScoreStore, optional
        Where high scores are kept, in memory if not given.
    ticker_factory : TickerFactory, optional
        Builds the one-second ticker of timed modes. Without it, call ``tick`` once per second.
    listener : Callable[[GameSnapshot], None], optional
        Called with a snapshot after every change of the game.
    seed : int, optional
        Random number generator seed for reproducibility.
    """

    def __init__(
        self,
        base: int = DEFAULT_BASE,
        mode: Mode = Mode.CLASSIC,
        size: int = GRID_SIZE,
        store: HighScoreStore | None = None,
        ticker_factory: TickerFactory | None = None,
        listener: Callable[[GameSnapshot], None] | None = None,
        seed: int | None = None,
    ):
        self._config = GameConfig(base=base, mode=mode, size=size)
        self._store = store if store is not None else MemoryStore()
        self._ticker_factory = ticker_factory
        self._listener = listener
        self._rng: Generator = default_rng(seed) if seed is not None else default_rng(PCG64DXSM())

        self._board: ndarray = new_board(size)
        self._score = 0
        self._high_score = 0
        self._status = GameStatus.IN_PROGRESS
        self._last_spawn: tuple[int, int] | None = None
        self._merged_cells: frozenset[tuple[int, int]] = frozenset()
        self._countdown: Countdown | None = None

        self.reset()

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def base(self) -> int:
        return self._config.base

    @property
    def mode(self) -> Mode:
        return self._config.mode

    @property
    def size(self) -> int:
        return self._config.size

    @property
    def target_tile(self) -> int:
        return self._config.target_tile

    @property
    def board(self) -> ndarray:
        """Copy of the game board."""
        return self._board.copy()

    @property
    def score(self) -> int:
        return self._score

    @property
    def high_score(self) -> int:
        return self._high_score

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def is_finished(self) -> bool:
        return self._status.is_terminal

    @property
    def has_won(self) -> bool:
        return self._status is GameStatus.WON

    @property
    def last_spawn(self) -> tuple[int, int] | None:
        return self._last_spawn

    @property
    def merged_cells(self) -> frozenset[tuple[int, int]]:
        return self._merged_cells

    @property
    def time_remaining(self) -> int | None:
        """Seconds left in a timed mode, None in the classic mode."""
        if self._countdown is None:
            return None
        return self._countdown.remaining

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            board=self.board,
            last_spawn=self._last_spawn,
            merged_cells=self._merged_cells,
            score=self._score,
            high_score=self._high_score,
            status=self._status,
            time_remaining=self.time_remaining,
            base=self.base,
            mode=self.mode,
        )

    def reset(self, seed: int | None = None) -> GameSnapshot:
        """
        Start a new game with the current base and mode.

        The running countdown is cancelled, the board is emptied and two tiles are spawned, the score goes back to
        zero and the high score of the current (base, mode) is loaded.

        Parameters
        ----------
        seed : int, optional
            Reseed the random number generator.

        Returns
        -------
        GameSnapshot
            The new game.
        """
        self._cancel_countdown()

        if seed is not None:
            self._rng = default_rng(seed)

        self._board = new_board(self.size)
        self._score = 0
        self._status = GameStatus.IN_PROGRESS
        self._merged_cells = frozenset()
        self._high_score = load_high_score(self._store, self.base, self.mode)

        if self.mode.is_timed:
            self._countdown = Countdown(
                self.mode.seconds,
                on_tick=lambda _: self._notify(),
                on_expire=self.expire,
                ticker_factory=self._ticker_factory,
            )
            self._countdown.start()

        spawned = fill_cells(self._board, number_tile=2, base=self.base, rng=self._rng)
        self._last_spawn = spawned[-1] if spawned else None

        logger.debug('New game: base=%d, mode=%s', self.base, self.mode.value)
        self._notify()
        return self.snapshot()

    def set_base(self, base: int) -> GameSnapshot:
        """Switch to another base and start a new game."""
        self._config = GameConfig(base=base, mode=self.mode, size=self.size)
        return self.reset()

    def set_mode(self, mode: Mode) -> GameSnapshot:
        """Switch to another mode and start a new game."""
        self._config = GameConfig(base=self.base, mode=mode, size=self.size)
        return self.reset()

    def step(self, direction: Direction) -> MoveResult:
        """
        Apply a move to the board.

        Parameters
        ----------
        direction : Direction
            The move to apply (0: left, 1: up, 2: right, 3: down).

        Returns
        -------
        MoveResult
            Whether the board changed, the score gained and the merged cells.

        Notes
        -----
        - Once the game is finished, moves are ignored and nothing changes.
        - A move that changes nothing leaves the score, the high score and the board as they were and spawns no tile.
        - A move that changes the board spawns exactly one tile.
        """
        if self._status.is_terminal:
            return MoveResult(moved=False)

        self._merged_cells = frozenset()
        outcome = apply_move(self._board, direction, self.base)
        if not outcome.moved:
            return MoveResult(moved=False)

        # ##: Applied action and update score.
        self._board = outcome.board
        self._merged_cells = outcome.merged_cells
        self._score += outcome.gained
        self._save_high_score_if_needed()

        # ##: Fill randomly one cell.
        self._last_spawn = spawn_tile(self._board, self.base, self._rng)

        # ##: Check for the end of the game.
        if has_won(self._board, self.target_tile):
            self._finish(GameStatus.WON)
        elif not has_any_move(self._board):
            self._finish(GameStatus.LOST_NO_MOVES)

        self._notify()
        return MoveResult(moved=True, score_gained=outcome.gained, merged_cells=outcome.merged_cells)

    def tick(self) -> None:
        """Take one second off the countdown of a timed game."""
        if self._countdown is not None:
            self._countdown.tick()

    def expire(self) -> None:
        """End a running timed game because its time is up."""
        if self._status.is_terminal or self._countdown is None:
            return
        self._countdown.remaining = 0
        self._finish(GameStatus.LOST_TIME_UP)
        self._notify()

    def close(self) -> None:
        """Stop the countdown."""
        self._cancel_countdown()

    def render(self) -> None:
        """
        Render the game board. This method prints the current state of the game board to the console.
        """
        for row in self._board.tolist():
            print(' \t'.join(map(str, row)))
        print(f'Score: {self._score}\tBest: {self._high_score}\tStatus: {self._status.value}')

    def _finish(self, status: GameStatus) -> None:
        self._status = status
        self._cancel_countdown(keep=True)
        self._save_high_score_if_needed()
        logger.info('Game over (%s): score=%d, base=%d, mode=%s', status.value, self._score, self.base, self.mode.value)

    def _save_high_score_if_needed(self) -> None:
        if self._score > self._high_score:
            self._high_score = self._score
            save_high_score(self._store, self.base, self.mode, self._high_score)

    def _cancel_countdown(self, keep: bool = False) -> None:
        if self._countdown is not None:
            self._countdown.cancel()
            if not keep:
                self._countdown = None

    def _notify(self) -> None:
        if self._listener is not None:
            self._listener(self.snapshot())
