#!/usr/bin/env python3
"""
Real-time mouse gesture segment monitor.
Shows the segments detected so far while you hold the trigger button.
Commands are recorded, not executed.
"""

import time
from gesture_nav.actions.action_surface import DryRunActionSurface
from gesture_nav.core.listener import MouseGestureListener

class SegmentMonitor:
    def __init__(self):
        self.listener = MouseGestureListener(actions=DryRunActionSurface(), backend='segment')
        self.running = False

    def start(self):
        """Start monitoring gesture segments."""
        if not self.listener.start():
            return False

        self.running = True
        print("🎯 Gesture Segment Monitor Started")
        print("=" * 50)
        print("🖱️  Hold the trigger button and move the mouse")
        print("⌨️  Press Ctrl+C to stop")
        print()

        try:
            self._monitor_loop()
        except KeyboardInterrupt:
            self.stop()

        return True

    def stop(self):
        """Stop monitoring."""
        self.running = False
        self.listener.stop()
        print(f"\n✅ Monitoring stopped ({len(self.listener.actions.calls)} commands recorded)")

    def _monitor_loop(self):
        """Main monitoring loop."""
        last_state = None

        while self.running:
            with self.listener.state_lock:
                state = (self.listener.button_down, self.listener.recognizer.segments)
                anchor = self.listener.recognizer.anchor

            if state != last_state:
                self._display_state(state, anchor)
                last_state = state

            time.sleep(0.1)  # Update every 100ms

    def _display_state(self, state, anchor):
        """Display current segment information."""
        button_down, segments = state
        print("\r" + " " * 80 + "\r", end="")
        if not button_down:
            print("🤏 Trigger button released...", end="\r")
            return
        path = " → ".join(segments) if segments else "(none yet)"
        print(f"👆 Segments: {path} | anchor ({anchor[0]:.0f}, {anchor[1]:.0f})", end="\r")

def main():
    """Main entry point."""
    monitor = SegmentMonitor()
    monitor.start()

if __name__ == "__main__":
    main()
