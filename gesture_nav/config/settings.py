"""
Configuration settings for mouse gesture recognition.
"""

import math
from enum import IntEnum


class TriggerButton(IntEnum):
    """Mouse button that has to be held while drawing a gesture."""

    # Values follow MouseEvent.button numbering
    WHEEL_CLICK = 1
    RIGHT_CLICK = 2


class GestureConfig:
    """Configuration constants for mouse gesture recognition."""

    # Distance configurations (in pixels)
    SEGMENT_THRESHOLD = 75  # Earlier builds used 100

    # Repeat detection
    REPEAT_MIN_SEGMENTS = 4

    # Input
    TRIGGER_BUTTON = TriggerButton.RIGHT_CLICK

    # Recognition backend: 'segment' or 'template'
    BACKEND = 'segment'

    # Template matching
    TEMPLATE_RESAMPLE_POINTS = 64
    TEMPLATE_SQUARE_SIZE = 250.0
    TEMPLATE_ANGLE_RANGE = math.radians(15)
    TEMPLATE_ANGLE_PRECISION = math.radians(2)
    TEMPLATE_MIN_PATH_LENGTH = 75.0

    # Feedback
    DEBUG_LOG_FILE = None


class RecognitionConfig:
    """Configuration for template recognition sensitivity."""

    def __init__(self, similarity_threshold: float = 0.80):
        self.similarity_threshold = 0.0
        self.set_threshold(similarity_threshold)
        self.resample_points = GestureConfig.TEMPLATE_RESAMPLE_POINTS
        self.rotation_range = GestureConfig.TEMPLATE_ANGLE_RANGE
        self.min_path_length = GestureConfig.TEMPLATE_MIN_PATH_LENGTH

    def set_threshold(self, threshold: float):
        """Set the similarity threshold (0.0-1.0)."""
        self.similarity_threshold = max(0.0, min(1.0, threshold))

    def get_threshold(self) -> float:
        """Get the current similarity threshold."""
        return self.similarity_threshold
