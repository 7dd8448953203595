#!/usr/bin/env python3
"""
Gesture Nav - Main Entry Point
Listens for mouse gestures drawn with the trigger button held and runs
the matching navigation command.
"""

import logging
import time
from gesture_nav.core.listener import MouseGestureListener

def main():
    """Main entry point for the mouse gesture listener."""
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")
    listener = MouseGestureListener()

    if not listener.start():
        return

    try:
        while True:
            time.sleep(0.1)
    except KeyboardInterrupt:
        print("\n👋 Stopping...")
    finally:
        listener.stop()

if __name__ == "__main__":
    main()
