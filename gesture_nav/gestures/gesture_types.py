"""
Gesture vocabulary shared by all recognition backends and the dispatcher.

A gesture is a plain immutable string: a simple direction ('left'), a
compound of the first two segment directions ('up+right') or one of the
two repeat markers.
"""

from typing import Literal, Optional, Tuple

SimpleDirection = Literal['left', 'right', 'up', 'down']
Gesture = str

LEFT = 'left'
RIGHT = 'right'
UP = 'up'
DOWN = 'down'

SIMPLE_DIRECTIONS: Tuple[str, ...] = (LEFT, RIGHT, UP, DOWN)

UD_REPEAT = 'UD_REPEAT'
LR_REPEAT = 'LR_REPEAT'
REPEAT_GESTURES: Tuple[str, ...] = (UD_REPEAT, LR_REPEAT)

COMPOUND_SEPARATOR = '+'


def compound(first: str, second: str) -> Gesture:
    """Build the compound gesture name for two segment directions."""
    return f"{first}{COMPOUND_SEPARATOR}{second}"


COMPOUND_GESTURES: Tuple[str, ...] = tuple(
    compound(a, b) for a in SIMPLE_DIRECTIONS for b in SIMPLE_DIRECTIONS if a != b
)

ALL_GESTURES: Tuple[str, ...] = SIMPLE_DIRECTIONS + COMPOUND_GESTURES + REPEAT_GESTURES


def is_gesture(value: Optional[str]) -> bool:
    """Return True if value is one of the gestures a recognizer can emit."""
    return value in ALL_GESTURES


def split_compound(gesture: Gesture) -> Tuple[str, ...]:
    """Return the segment directions a gesture is made of.

    Repeats expand to their four-segment minimum form.
    """
    if gesture == UD_REPEAT:
        return (UP, DOWN, UP, DOWN)
    if gesture == LR_REPEAT:
        return (LEFT, RIGHT, LEFT, RIGHT)
    return tuple(gesture.split(COMPOUND_SEPARATOR))
