"""
Helpers to display tiles and remaining time.
"""

# ##>: Number of distinct tile colours, higher exponents share the last one.
PALETTE_LEVELS = 11


def tile_exponent(value: int, base: int) -> int | None:
    """
    Find the exponent of a tile.

    Parameters
    ----------
    value : int
        Tile value.
    base : int
        Merge base of the game.

    Returns
    -------
    int | None
        k such that ``base ** k == value`` with k >= 1, None for empty cells and values that are not such a power.
    """
    if value < base:
        return None

    exponent, current = 1, base
    while current < value:
        current *= base
        exponent += 1
    return exponent if current == value else None


def is_power_of(value: int, base: int) -> bool:
    """Check if a value is ``base ** k`` for some k >= 1."""
    return tile_exponent(value, base) is not None


def tile_level(value: int, base: int) -> int:
    """
    Palette level of a tile.

    Returns
    -------
    int
        The exponent of the tile clamped to ``PALETTE_LEVELS``, 0 for empty cells and values that are not a power of
        the base.
    """
    exponent = tile_exponent(value, base)
    if exponent is None:
        return 0
    return min(exponent, PALETTE_LEVELS)


def format_time(seconds: int | None) -> str:
    """
    Format the remaining time of a game.

    ``None`` (untimed game) gives "∞", less than a minute gives "42s", otherwise "m:ss".
    """
    if seconds is None:
        return '∞'
    seconds = max(0, seconds)
    if seconds < 60:
        return f'{seconds}s'
    minutes, rest = divmod(seconds, 60)
    return f'{minutes}:{rest:02d}'
