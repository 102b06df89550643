"""
Configuration of the power 2048 game: grid size, supported bases, target tiles and play modes.
"""

from dataclasses import dataclass
from enum import Enum

# ##>: Side of the square grid.
GRID_SIZE = 4

# ##>: Target tile to reach for each base.
TARGET_TILE_BY_BASE: dict[int, int] = {
    2: 2048,
    3: 6561,  # 3^8
    4: 65536,
    5: 78125,
}

SUPPORTED_BASES: tuple[int, ...] = tuple(TARGET_TILE_BY_BASE)
DEFAULT_BASE = 3


class Mode(str, Enum):
    """
    Play mode.

    CLASSIC: No timer.
    TIMED_30, TIMED_60, TIMED_300: Countdown of 30, 60 or 300 seconds.
    """

    CLASSIC = 'classic'
    TIMED_30 = '30'
    TIMED_60 = '60'
    TIMED_300 = '300'

    @property
    def seconds(self) -> int | None:
        """Countdown length in seconds, None for the classic mode."""
        if self is Mode.CLASSIC:
            return None
        return int(self.value)

    @property
    def is_timed(self) -> bool:
        return self is not Mode.CLASSIC


@dataclass(frozen=True)
class GameConfig:
    """
    Game configuration, validated on creation.

    Attributes
    ----------
    base : int
        Merge base, one of 2, 3, 4 or 5.
    mode : Mode
        Play mode.
    size : int
        Side of the square grid.
    """

    base: int = DEFAULT_BASE
    mode: Mode = Mode.CLASSIC
    size: int = GRID_SIZE

    def __post_init__(self):
        if self.base not in TARGET_TILE_BY_BASE:
            raise ValueError(f'Unsupported base {self.base}, expected one of {SUPPORTED_BASES}')

        # ##>: Accept raw mode values such as "60".
        object.__setattr__(self, 'mode', Mode(self.mode))

        if self.size < 2:
            raise ValueError(f'Grid size must be at least 2, got {self.size}')

    @property
    def target_tile(self) -> int:
        return TARGET_TILE_BY_BASE[self.base]
