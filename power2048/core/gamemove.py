"""
Move directions for the power 2048 game, and functions for determining legal and illegal moves.
"""

from enum import Enum, IntEnum

from numpy import ndarray


class Axis(str, Enum):
    """Lines a move operates on."""

    ROW = 'row'
    COLUMN = 'column'


class Direction(IntEnum):
    """
    Move direction.

    Each direction is a line axis and whether lines are read backwards, so that every move is a
    leftward slide-and-merge of the right lines.
    """

    LEFT = 0
    UP = 1
    RIGHT = 2
    DOWN = 3

    @property
    def axis(self) -> Axis:
        return Axis.ROW if self in (Direction.LEFT, Direction.RIGHT) else Axis.COLUMN

    @property
    def reverse(self) -> bool:
        return self in (Direction.RIGHT, Direction.DOWN)


# ##: All Actions.
ACTIONS: dict[str, Direction] = {direction.name.lower(): direction for direction in Direction}


def legal_actions_mask(state: ndarray) -> tuple[bool, bool, bool, bool]:
    """
    Get a boolean mask for all four directions in a single pass.

    Parameters
    ----------
    state : ndarray
        The current state of the game board.

    Returns
    -------
    tuple[bool, bool, bool, bool]
        Mask for (left, up, right, down) where True means action is legal.

    Notes
    -----
    Horizontal and vertical adjacencies are computed once, then all four directions are derived from them.
    """
    # ##>: Compute horizontal adjacency once for left/right.
    left_cols, right_cols = state[:, :-1], state[:, 1:]
    h_can_merge = (left_cols != 0) & (left_cols == right_cols)

    # ##>: Compute vertical adjacency once for up/down.
    top_rows, bottom_rows = state[:-1, :], state[1:, :]
    v_can_merge = (top_rows != 0) & (top_rows == bottom_rows)

    # ##>: Check slide conditions per direction.
    left = (left_cols == 0) & (right_cols != 0)
    right = (right_cols == 0) & (left_cols != 0)
    up = (top_rows == 0) & (bottom_rows != 0)
    down = (bottom_rows == 0) & (top_rows != 0)

    return (
        bool(left.any() or h_can_merge.any()),
        bool(up.any() or v_can_merge.any()),
        bool(right.any() or h_can_merge.any()),
        bool(down.any() or v_can_merge.any()),
    )


def illegal_actions(state: ndarray) -> list[Direction]:
    """
    Determine illegal actions for the current game board state.

    An action is illegal if it doesn't change the board state.
    """
    mask = legal_actions_mask(state)
    return [direction for direction in Direction if not mask[direction]]


def legal_actions(state: ndarray) -> list[Direction]:
    """
    Determine legal actions for the current game board state.

    Parameters
    ----------
    state : ndarray
        The current state of the game board.

    Returns
    -------
    list[Direction]
        Directions that would change the game board.
    """
    mask = legal_actions_mask(state)
    return [direction for direction in Direction if mask[direction]]
