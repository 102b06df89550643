# -*- coding: utf-8 -*-
"""
High-score persistence for power 2048.
"""

from .highscore import (
    DEFAULT_STORE_PATH,
    HighScoreStore,
    JsonFileStore,
    MemoryStore,
    high_score_key,
    load_high_score,
    save_high_score,
)

__all__ = [
    "DEFAULT_STORE_PATH",
    "HighScoreStore",
    "JsonFileStore",
    "MemoryStore",
    "high_score_key",
    "load_high_score",
    "save_high_score",
]
