"""
Gesture to action mapping.
"""

import logging
from typing import Dict, Optional, Tuple

from ..gestures.gesture_types import Gesture, LR_REPEAT, UD_REPEAT
from .action_surface import ActionSurface

logger = logging.getLogger(__name__)

# gesture -> ActionSurface method name
GESTURE_ACTIONS: Dict[str, str] = {
    'left': 'next_page',
    'right': 'previous_page',
    'up': 'scroll_to_top',
    'down': 'scroll_to_bottom',
    'down+left': 'cycle_tab_left',
    'down+right': 'cycle_tab_right',
    'up+left': 'close_tab',
    'up+right': 'new_tab',
    'right+down': 'minimize_window',
    'right+up': 'maximize_window',
    'left+down': 'next_sibling_file',
    'left+up': 'previous_sibling_file',
    'up+down': 'toggle_fullscreen',
    'down+up': 'reopen_closed_tab',
    'left+right': 'open_search',
    'right+left': 'new_window',
    UD_REPEAT: 'refresh',
    LR_REPEAT: 'undo',
}

# Feedback glyph and label per command
ACTION_LABELS: Dict[str, Tuple[str, str]] = {
    'next_page': ('←', 'Next Page'),
    'previous_page': ('→', 'Previous Page'),
    'scroll_to_top': ('↑', 'Scroll to Top'),
    'scroll_to_bottom': ('↓', 'Scroll to Bottom'),
    'cycle_tab_left': ('↓←', 'Previous Tab'),
    'cycle_tab_right': ('↓→', 'Next Tab'),
    'close_tab': ('↑←', 'Close Tab'),
    'new_tab': ('↑→', 'New Tab'),
    'minimize_window': ('→↓', 'Minimize Window'),
    'maximize_window': ('→↑', 'Maximize Window'),
    'next_sibling_file': ('←↓', 'Next File'),
    'previous_sibling_file': ('←↑', 'Previous File'),
    'toggle_fullscreen': ('↑↓', 'Toggle Fullscreen'),
    'reopen_closed_tab': ('↓↑', 'Reopen Closed Tab'),
    'open_search': ('←→', 'Search'),
    'new_window': ('→←', 'New Window'),
    'refresh': ('↕', 'Refresh'),
    'undo': ('↔', 'Undo'),
}

CANCEL_GLYPH = '✕'


class GestureActionMap:
    """Executes the action surface command bound to a gesture."""

    def __init__(self, actions: ActionSurface, table: Optional[Dict[str, str]] = None):
        self.actions = actions
        self.table = dict(GESTURE_ACTIONS if table is None else table)

    def action_for(self, gesture: Optional[Gesture]) -> Optional[str]:
        """Name of the command bound to a gesture, or None."""
        if not gesture:
            return None
        return self.table.get(gesture)

    def describe(self, gesture: Optional[Gesture]) -> Tuple[str, str]:
        """Glyph and label for showing a gesture to the user."""
        action = self.action_for(gesture)
        if action is None:
            return CANCEL_GLYPH, ''
        return ACTION_LABELS.get(action, ('', action))

    def execute(self, gesture: Optional[Gesture]) -> bool:
        """
        Run the command for a gesture.

        Returns True if a command was invoked. None and unmapped gestures
        are ignored.
        """
        action = self.action_for(gesture)
        if action is None:
            if gesture:
                logger.debug(f"No action mapped for gesture {gesture}")
            return False
        command = getattr(self.actions, action, None)
        if command is None:
            logger.debug(f"Action surface has no command {action}")
            return False
        logger.info(f"Gesture {gesture} -> {action}")
        command()
        return True
