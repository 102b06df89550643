"""
Core functionality for simulating the power 2048 game, including board manipulation and game logic.

Tiles are powers of a base between 2 and 5: new tiles hold the base itself and two equal tiles merge into one tile
worth ``value * base``.
"""

from typing import NamedTuple

from numpy import any as np_any
from numpy import argwhere, array_equal, asarray, int64, ndarray, zeros, zeros_like
from numpy.random import PCG64DXSM, Generator, default_rng

from power2048.core.config import GRID_SIZE
from power2048.core.gamemove import Axis, Direction

# ##>: Module-level generator for performance (avoids repeated initialization).
_GENERATOR = default_rng(PCG64DXSM())


class LineMerge(NamedTuple):
    """Outcome of sliding and merging a single line to the left."""

    result: ndarray
    gained: int
    merged_indices: frozenset[int]


class BoardMove(NamedTuple):
    """Outcome of applying a move to a whole board."""

    board: ndarray
    moved: bool
    gained: int
    merged_cells: frozenset[tuple[int, int]]


def new_board(size: int = GRID_SIZE) -> ndarray:
    """Create an empty square board."""
    return zeros((size, size), dtype=int64)


def merge_line(line, base: int) -> LineMerge:
    """
    Slide a line to the left and merge adjacent equal values.

    Parameters
    ----------
    line : array_like
        A 1D sequence representing one row or column of the game board.
    base : int
        Merge base, two tiles of value ``v`` merge into ``v * base``.

    Returns
    -------
    LineMerge
        The new line (same length as the input, zero padded on the right), the sum of the merged values and the
        indices of the new line holding a merged tile.

    Notes
    -----
    - Zeros (empty cells) are ignored and removed before merging.
    - Merging occurs from the start of the line towards the end.
    - Each value can only be merged once per function call: ``[2, 2, 2, 2]`` gives ``[4, 4, 0, 0]``, not ``[8]``.
    """
    line = asarray(line)
    non_zero = line[line != 0]
    result = zeros_like(line)

    merged = []
    gained = 0

    # ##: Iterate over the line and merge values.
    i = position = 0
    while i < len(non_zero):
        if i + 1 < len(non_zero) and non_zero[i] == non_zero[i + 1]:
            value = int(non_zero[i]) * base
            result[position] = value
            merged.append(position)
            gained += value
            i += 2
        else:
            result[position] = non_zero[i]
            i += 1
        position += 1

    return LineMerge(result, gained, frozenset(merged))


def apply_move(board: ndarray, direction: Direction, base: int) -> BoardMove:
    """
    Apply a move to every row or column of the board.

    Parameters
    ----------
    board : ndarray
        The game board as a square 2D array. It is not modified.
    direction : Direction
        The move to apply (0: left, 1: up, 2: right, 3: down).
    base : int
        Merge base.

    Returns
    -------
    BoardMove
        The new board, whether any line changed, the score gained and the merged cells as (row, col).

    Notes
    -----
    - Left and right work on rows, up and down on columns.
    - Right and down read each line backwards, reduce it to the left and reverse the result, so merge indices are
      mirrored back to board coordinates.
    """
    direction = Direction(direction)
    size = board.shape[0]

    result = board.copy()
    lines = result if direction.axis is Axis.ROW else result.T

    moved = False
    gained = 0
    merged_cells = set()

    for index in range(lines.shape[0]):
        line = lines[index]
        merge = merge_line(line[::-1] if direction.reverse else line, base)
        reduced = merge.result[::-1] if direction.reverse else merge.result

        # ##: A line moved if any cell differs from its content before the move.
        if not array_equal(reduced, line):
            moved = True
            lines[index] = reduced
        gained += merge.gained

        # ##: Report merges in board coordinates.
        for position in merge.merged_indices:
            offset = size - 1 - position if direction.reverse else position
            merged_cells.add((index, offset) if direction.axis is Axis.ROW else (offset, index))

    return BoardMove(result, moved, gained, frozenset(merged_cells))


def spawn_tile(board: ndarray, base: int, rng: Generator | None = None) -> tuple[int, int] | None:
    """
    Place a new tile worth ``base`` on a uniformly chosen empty cell.

    Parameters
    ----------
    board : ndarray
        The game board. **Modified in-place.**
    base : int
        Value of the new tile.
    rng : Generator, optional
        Random generator, the module-level one if not given.

    Returns
    -------
    tuple[int, int] | None
        The (row, col) of the new tile, or None if the board is full (the board is then left unchanged).
    """
    rng = rng if rng is not None else _GENERATOR

    empty_cells = argwhere(board == 0)
    if len(empty_cells) == 0:
        return None

    row, col = empty_cells[rng.integers(len(empty_cells))]
    board[row, col] = base
    return int(row), int(col)


def fill_cells(state: ndarray, number_tile: int, base: int, rng: Generator | None = None) -> list[tuple[int, int]]:
    """
    Fill empty cells with new tiles worth ``base``.

    Parameters
    ----------
    state : ndarray
        The current state of the game board. **Modified in-place.**
    number_tile : int
        Number of new tiles to add.
    base : int
        Value of the new tiles.
    rng : Generator, optional
        Random generator, the module-level one if not given.

    Returns
    -------
    list[tuple[int, int]]
        Cells that received a tile, in placement order.

    Notes
    -----
    If there are fewer empty cells than requested, it fills all available cells.
    """
    return [cell for cell in (spawn_tile(state, base, rng) for _ in range(number_tile)) if cell is not None]


def has_any_move(state: ndarray) -> bool:
    """
    Check if any move is still possible.

    Parameters
    ----------
    state : ndarray
        The current state of the game board.

    Returns
    -------
    bool
        True if there is an empty cell or two equal tiles side by side in a row or in a column.

    Notes
    -----
    Only orthogonal neighbours count. Diagonals and wraparound are never checked.
    """
    return bool(
        np_any(state == 0) or np_any(state[:-1] == state[1:]) or np_any(state[:, :-1] == state[:, 1:])
    )


def has_won(state: ndarray, target_tile: int) -> bool:
    """Check if any tile reached the target."""
    return bool(np_any(state >= target_tile))
