"""
Gesture recognition backends.

This module provides the threshold-segment recognizer that turns a pointer
stroke into a directional gesture, and a trainable template matcher that
speaks the same gesture vocabulary.
"""

from .gesture_types import (
    ALL_GESTURES, LR_REPEAT, SIMPLE_DIRECTIONS, UD_REPEAT, compound, is_gesture
)
from .base import RecognizerBackend
from .segment_recognizer import GestureRecognizer
from .template_recognizer import RecognitionResult, TemplateRecognizer
from .backends import create_recognizer

__all__ = [
    'ALL_GESTURES',
    'LR_REPEAT',
    'SIMPLE_DIRECTIONS',
    'UD_REPEAT',
    'compound',
    'is_gesture',
    'RecognizerBackend',
    'GestureRecognizer',
    'RecognitionResult',
    'TemplateRecognizer',
    'create_recognizer'
]
