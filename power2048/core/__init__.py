# -*- coding: utf-8 -*-
"""
This module provides the game logic of power 2048.

It includes functions for sliding and merging lines and boards, spawning tiles, detecting won and blocked boards,
checking legal and illegal actions, and the game configuration.
"""

from .config import GRID_SIZE, SUPPORTED_BASES, TARGET_TILE_BY_BASE, GameConfig, Mode
from .gameboard import (
    BoardMove,
    LineMerge,
    apply_move,
    fill_cells,
    has_any_move,
    has_won,
    merge_line,
    new_board,
    spawn_tile,
)
from .gamemove import ACTIONS, Axis, Direction, illegal_actions, legal_actions, legal_actions_mask

__all__ = [
    "ACTIONS",
    "Axis",
    "BoardMove",
    "Direction",
    "GRID_SIZE",
    "GameConfig",
    "LineMerge",
    "Mode",
    "SUPPORTED_BASES",
    "TARGET_TILE_BY_BASE",
    "apply_move",
    "fill_cells",
    "has_any_move",
    "has_won",
    "illegal_actions",
    "legal_actions",
    "legal_actions_mask",
    "merge_line",
    "new_board",
    "spawn_tile",
]
