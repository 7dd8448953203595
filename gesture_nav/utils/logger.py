"""
Console feedback for recognized gestures.
"""

import datetime
import logging
from typing import Optional, Sequence, Tuple

logger = logging.getLogger(__name__)


class GestureLogger:
    """Shows recognized gestures to the user and optionally records them."""

    def __init__(self, debug_file: Optional[str] = None):
        self.debug_file = None
        if debug_file:
            try:
                self.debug_file = open(debug_file, 'w')
                self.debug_file.write(f"Gesture logging started at {datetime.datetime.now()}\n")
                self.debug_file.flush()
            except OSError as e:
                print(f"Warning: Could not open debug file: {e}")

    @staticmethod
    def _timestamp() -> str:
        return datetime.datetime.now().strftime("%H:%M:%S.%f")[:-3]

    def log_gesture(self, gesture: Optional[str], description: Tuple[str, str],
                    segments: Sequence[str] = (), executed: bool = False):
        """Log the final result of a gesture session."""
        timestamp = self._timestamp()
        glyph, label = description

        if gesture is None:
            print(f"[{timestamp}] {glyph} No gesture")
        elif executed:
            print(f"[{timestamp}] 🖱️ {glyph} {gesture}: {label}")
        else:
            print(f"[{timestamp}] 🖱️ {glyph} {gesture} (no action)")

        if segments:
            print(f"   Segments: {' → '.join(segments)}")

        if self.debug_file:
            try:
                self.debug_file.write(f"[{timestamp}] {gesture} segments={list(segments)} executed={executed}\n")
                self.debug_file.flush()
            except OSError as e:
                logger.warning(f"Could not write debug file: {e}")

    def log_live(self, gesture: Optional[str], description: Tuple[str, str]):
        """Show the gesture recognized so far while the button is held."""
        glyph, label = description
        text = f"{glyph} {gesture} {label}".strip() if gesture else glyph
        print(f"\r   {text:<40}", end="", flush=True)

    def close(self):
        """Close the debug file."""
        if self.debug_file:
            self.debug_file.close()
            self.debug_file = None
