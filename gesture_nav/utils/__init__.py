"""
Utilities package for stroke processing and gesture feedback.
"""

from .gesture_utils import GeometryUtils, PathUtils

__all__ = [
    'GeometryUtils',
    'PathUtils'
]
