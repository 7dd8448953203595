"""
Threshold-segment gesture recognizer.

Splits a pointer stroke into straight horizontal/vertical segments and
classifies the segment sequence as a simple direction, a two-segment
compound or an up/down / left/right repeat.
"""

import logging
from typing import List, Optional, Tuple

from ..config.settings import GestureConfig
from .base import RecognizerBackend
from .gesture_types import (
    DOWN, LEFT, LR_REPEAT, RIGHT, UD_REPEAT, UP, Gesture, compound
)

logger = logging.getLogger(__name__)


class GestureRecognizer(RecognizerBackend):
    """
    Stateful accumulator for a single gesture session.

    Each segment is measured from the anchor, i.e. the point where the
    previous segment was detected, so that multi-segment strokes work.
    """

    NAME = 'segment'

    def __init__(self, threshold: float = GestureConfig.SEGMENT_THRESHOLD,
                 repeat_min_segments: int = GestureConfig.REPEAT_MIN_SEGMENTS):
        self.threshold = threshold
        self.repeat_min_segments = repeat_min_segments
        self._directions: List[str] = []
        self._last_x = 0.0
        self._last_y = 0.0

    @property
    def segments(self) -> Tuple[str, ...]:
        """Snapshot of the segment directions detected so far."""
        return tuple(self._directions)

    @property
    def anchor(self) -> Tuple[float, float]:
        return self._last_x, self._last_y

    def start(self, x: float, y: float) -> None:
        self._directions = []
        self._last_x = x
        self._last_y = y

    def add_point(self, x: float, y: float) -> None:
        direction = self._classify_segment(x - self._last_x, y - self._last_y)
        if direction is None:
            return

        # Same direction as the last segment: keep the anchor where it is
        if self._directions and self._directions[-1] == direction:
            return

        self._directions.append(direction)
        self._last_x = x
        self._last_y = y
        logger.debug(f"Segment {len(self._directions)}: {direction} at ({x}, {y})")

    def end(self) -> Optional[Gesture]:
        gesture = self.current_gesture()
        self._directions = []
        return gesture

    def current_gesture(self) -> Optional[Gesture]:
        """Classify the segments seen so far without consuming the session."""
        directions = self._directions
        if not directions:
            return None
        if self._is_repeat(UP, DOWN):
            return UD_REPEAT
        if self._is_repeat(LEFT, RIGHT):
            return LR_REPEAT
        if len(directions) == 1:
            return directions[0]
        # Anything past the second segment is ignored
        return compound(directions[0], directions[1])

    def _classify_segment(self, dx: float, dy: float) -> Optional[str]:
        """Direction of a displacement, or None if diagonal or too short."""
        threshold = self.threshold
        if abs(dx) > threshold and abs(dy) < threshold:
            return RIGHT if dx > 0 else LEFT
        if abs(dy) > threshold and abs(dx) < threshold:
            return DOWN if dy > 0 else UP
        return None

    def _is_repeat(self, a: str, b: str) -> bool:
        """True if the whole sequence alternates between a and b."""
        directions = self._directions
        if len(directions) < self.repeat_min_segments:
            return False
        if directions[0] not in (a, b):
            return False
        other = b if directions[0] == a else a
        for i, direction in enumerate(directions):
            expected = directions[0] if i % 2 == 0 else other
            if direction != expected:
                return False
        return True
