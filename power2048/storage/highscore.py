"""
High-score persistence, one integer per (base, mode) pair kept in a key-value string store.
"""

import json
import logging
from pathlib import Path
from typing import Protocol

from power2048.core.config import Mode

logger = logging.getLogger(__name__)

# ##>: Default location of the on-disk store.
DEFAULT_STORE_PATH = Path.home() / '.power2048' / 'highscores.json'


class HighScoreStore(Protocol):
    """Key-value store of strings."""

    def get(self, key: str) -> str | None:
        ...

    def set(self, key: str, value: str) -> None:
        ...


class MemoryStore:
    """In-memory store, lost when the process ends."""

    def __init__(self, values: dict[str, str] | None = None):
        self.values = dict(values or {})

    def get(self, key: str) -> str | None:
        return self.values.get(key)

    def set(self, key: str, value: str) -> None:
        self.values[key] = value


class JsonFileStore:
    """
    Store backed by a JSON object on disk.

    Every write rewrites the whole file. A missing, unreadable or malformed file reads as an empty store.

    Parameters
    ----------
    path : str | Path
        Location of the JSON file, created with its parent directories on first write.
    """

    def __init__(self, path: str | Path = DEFAULT_STORE_PATH):
        self.path = Path(path)

    def _read(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            content = json.loads(self.path.read_text(encoding='utf-8'))
        except (OSError, ValueError) as error:
            logger.warning('Ignoring unreadable high-score file %s: %s', self.path, error)
            return {}
        if not isinstance(content, dict):
            logger.warning('Ignoring high-score file %s: expected a JSON object', self.path)
            return {}
        return {str(key): str(value) for key, value in content.items()}

    def get(self, key: str) -> str | None:
        return self._read().get(key)

    def set(self, key: str, value: str) -> None:
        values = self._read()
        values[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(values, indent=2, sort_keys=True), encoding='utf-8')


def high_score_key(base: int, mode: Mode) -> str:
    """
    Build the store key of a (base, mode) pair.

    Classic mode keeps one key per base, timed modes get one key per (base, duration).
    """
    mode = Mode(mode)
    if mode is Mode.CLASSIC:
        return f'power2048_highscore_base_{base}'
    return f'power2048_highscore_base_{base}_time_{mode.value}'


def load_high_score(store: HighScoreStore, base: int, mode: Mode) -> int:
    """
    Read the high score of a (base, mode) pair.

    Returns
    -------
    int
        The stored high score, 0 when nothing is stored or the stored value is not an integer.
    """
    key = high_score_key(base, mode)
    stored = store.get(key)
    if not stored:
        return 0
    try:
        return int(stored)
    except ValueError:
        logger.warning('Malformed high score %r under %s, using 0', stored, key)
        return 0


def save_high_score(store: HighScoreStore, base: int, mode: Mode, value: int) -> None:
    """Write the high score of a (base, mode) pair."""
    store.set(high_score_key(base, mode), str(int(value)))
