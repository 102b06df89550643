# -*- coding: utf-8 -*-
"""
Python implementation of the power 2048 game.

This module provides the `PowerGame` class, which runs a game session: board, score, high score, countdown of the
timed modes and game status.
"""

from .countdown import Countdown, Ticker, TickerFactory
from .powergame import GameSnapshot, GameStatus, MoveResult, PowerGame

__all__ = ["Countdown", "GameSnapshot", "GameStatus", "MoveResult", "PowerGame", "Ticker", "TickerFactory"]
