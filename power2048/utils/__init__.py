# -*- coding: utf-8 -*-
"""
This module provides utilities around the game: tile and time display, input mapping and random-play simulation.

The matplotlib `WindowBoard` lives in `power2048.utils.windows` and is imported from there, so that the rest of the
package does not need a display.
"""

from .inputs import KEY_DIRECTIONS, SWIPE_THRESHOLD, key_to_direction, swipe_direction
from .simulation import GameSummary, play_random_game
from .tiles import PALETTE_LEVELS, format_time, is_power_of, tile_exponent, tile_level

__all__ = [
    "GameSummary",
    "KEY_DIRECTIONS",
    "PALETTE_LEVELS",
    "SWIPE_THRESHOLD",
    "format_time",
    "is_power_of",
    "key_to_direction",
    "play_random_game",
    "swipe_direction",
    "tile_exponent",
    "tile_level",
]
