"""
Map keyboard keys and swipe gestures to move directions.
"""

from power2048.core.gamemove import ACTIONS, Direction

# ##>: Minimal displacement (in pixels) for a swipe to count.
SWIPE_THRESHOLD = 30

# ##>: Arrow keys (named like the actions by matplotlib key events) and WASD.
KEY_DIRECTIONS: dict[str, Direction] = {
    **ACTIONS,
    "a": Direction.LEFT,
    "d": Direction.RIGHT,
    "w": Direction.UP,
    "s": Direction.DOWN,
}


def key_to_direction(key: str | None) -> Direction | None:
    """Direction bound to a key, None for any other key."""
    if not key:
        return None
    direction = KEY_DIRECTIONS.get(key)
    if direction is None:
        direction = KEY_DIRECTIONS.get(key.lower())
    return direction


def swipe_direction(dx: float, dy: float, threshold: float = SWIPE_THRESHOLD) -> Direction | None:
    """
    Direction of a swipe.

    Parameters
    ----------
    dx, dy : float
        Displacement between the start and the end of the gesture, in screen coordinates (y grows downwards).
    threshold : float, optional
        Gestures shorter than this on both axes are ignored (default is 30).

    Returns
    -------
    Direction | None
        The dominant direction of the gesture, or None if it is too short.
    """
    if abs(dx) < threshold and abs(dy) < threshold:
        return None
    if abs(dx) > abs(dy):
        return Direction.RIGHT if dx > 0 else Direction.LEFT
    return Direction.DOWN if dy > 0 else Direction.UP
