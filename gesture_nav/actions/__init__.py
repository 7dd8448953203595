"""
Navigation actions triggered by recognized gestures.
"""

from .action_surface import (
    ActionSurface, CommandActionSurface, DryRunActionSurface, KeyboardActionSurface, DEFAULT_SHORTCUTS
)
from .dispatcher import GestureActionMap, GESTURE_ACTIONS

__all__ = [
    'ActionSurface',
    'CommandActionSurface',
    'DryRunActionSurface',
    'KeyboardActionSurface',
    'DEFAULT_SHORTCUTS',
    'GestureActionMap',
    'GESTURE_ACTIONS'
]
