"""
Turn already-captured input into roll directions.

Event capture (keyboard listeners, pointer tracking) happens elsewhere;
this module only maps key codes, typed commands and swipe deltas onto the
four roll directions.
"""

from typing import Optional

from cuberoll.core.geometry import RollDirection

KEY_BINDINGS = {
    # browser KeyboardEvent.code values
    "ArrowUp": RollDirection.UP,
    "ArrowDown": RollDirection.DOWN,
    "ArrowLeft": RollDirection.LEFT,
    "ArrowRight": RollDirection.RIGHT,
    # text session shortcuts
    "w": RollDirection.UP,
    "s": RollDirection.DOWN,
    "a": RollDirection.LEFT,
    "d": RollDirection.RIGHT,
    "u": RollDirection.UP,
    "l": RollDirection.LEFT,
    "r": RollDirection.RIGHT,
    "up": RollDirection.UP,
    "down": RollDirection.DOWN,
    "left": RollDirection.LEFT,
    "right": RollDirection.RIGHT,
}


def direction_from_key(code: str) -> Optional[RollDirection]:
    """Direction bound to a key code or typed word, or None."""
    if code in KEY_BINDINGS:
        return KEY_BINDINGS[code]
    return KEY_BINDINGS.get(code.strip().lower())


def direction_from_swipe(dx: float, dy: float, threshold: float) -> Optional[RollDirection]:
    """
    Direction of a swipe gesture.

    Args:
        dx: Horizontal displacement in screen pixels (right is positive)
        dy: Vertical displacement in screen pixels (down is positive)
        threshold: Minimum displacement along the dominant axis

    Returns:
        The roll direction, or None for a swipe shorter than the threshold
        or with no displacement at all
    """
    if dx == 0 and dy == 0:
        return None
    if max(abs(dx), abs(dy)) < threshold:
        return None
    if abs(dx) >= abs(dy):
        return RollDirection.RIGHT if dx > 0 else RollDirection.LEFT
    # screen y grows downwards, board y grows upwards
    return RollDirection.DOWN if dy > 0 else RollDirection.UP
