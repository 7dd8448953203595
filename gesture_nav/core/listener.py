"""
Mouse gesture listener that coordinates the input device, gesture recognition
and action dispatch.
"""

import threading
import logging
from typing import Optional

from evdev import ecodes

from ..actions.action_surface import ActionSurface, KeyboardActionSurface
from ..actions.dispatcher import GestureActionMap
from ..config.settings import GestureConfig
from ..device.device_manager import DeviceManager
from ..gestures.backends import create_recognizer
from ..gestures.base import RecognizerBackend
from ..utils.logger import GestureLogger


class MouseGestureListener:
    """
    Drives one recognizer from a mouse.

    Every listener owns its recognizer; two listeners never share
    gesture state.
    """

    def __init__(self, config=GestureConfig, actions: Optional[ActionSurface] = None,
                 backend: Optional[str] = None, recognizer: Optional[RecognizerBackend] = None):
        self.config = config
        self.device_manager = DeviceManager(config.TRIGGER_BUTTON)
        self.recognizer = recognizer or create_recognizer(backend or config.BACKEND)
        self.actions = actions if actions is not None else KeyboardActionSurface()
        self.dispatcher = GestureActionMap(self.actions)
        self.logger = GestureLogger(config.DEBUG_LOG_FILE)

        # Pointer state
        self.x = 0
        self.y = 0
        self.button_down = False
        self.live_gesture = None
        self.last_gesture = None
        self._live_shown = False

        # Relative motion and trigger changes accumulated until the next SYN_REPORT
        self._pending_dx = 0
        self._pending_dy = 0
        self._pending_button: Optional[bool] = None

        # Thread management
        self.running = False
        self.thread = None
        self.state_lock = threading.Lock()

    def start(self) -> bool:
        """Start listening for mouse gestures."""
        device = self.device_manager.find_device()
        if not device:
            print("❌ No mouse found")
            return False

        self.running = True
        self._print_startup_info()

        self.thread = threading.Thread(target=self._event_loop)
        self.thread.daemon = True
        self.thread.start()
        return True

    def stop(self):
        """Stop the listener and release resources."""
        self.running = False
        if self.thread:
            self.thread.join(timeout=1)
        self.logger.close()
        self.actions.close()

    def _print_startup_info(self):
        info = self.device_manager.get_device_info()
        print(f"✅ Found: {info['name']}")
        print(f"🖱️  Trigger button: {self.config.TRIGGER_BUTTON.name}")
        print(f"🧠 Recognizer: {self.recognizer.NAME}")
        print(f"📏 Segment threshold: {self.config.SEGMENT_THRESHOLD}px")
        print("🎯 Ready! Hold the trigger button and draw a gesture.")

    def _event_loop(self):
        """Main event processing loop."""
        try:
            for event in self.device_manager.device.read_loop():
                if not self.running:
                    break
                with self.state_lock:
                    self.handle_event(event)
        except KeyboardInterrupt:
            pass
        except OSError as e:
            logging.error(f"Error in event loop: {e}")

    def handle_event(self, ev):
        """Handle one raw evdev event; state changes apply at SYN_REPORT."""
        if ev.type == ecodes.EV_KEY and ev.code == self.device_manager.trigger_code:
            # value 2 is autorepeat
            if ev.value in (0, 1):
                self._pending_button = ev.value == 1
        elif ev.type == ecodes.EV_REL:
            if ev.code == ecodes.REL_X:
                self._pending_dx += ev.value
            elif ev.code == ecodes.REL_Y:
                self._pending_dy += ev.value
        elif ev.type == ecodes.EV_SYN and ev.code == ecodes.SYN_REPORT:
            self._process_report()

    def _process_report(self):
        # Motion reported alongside a button change belongs to the stroke
        if self._pending_dx or self._pending_dy:
            self.handle_motion(self._pending_dx, self._pending_dy)
        if self._pending_button is not None:
            self.handle_button(self._pending_button)
        self._pending_dx = 0
        self._pending_dy = 0
        self._pending_button = None

    def handle_button(self, pressed: bool):
        """Trigger button went down or up."""
        if pressed:
            self.button_down = True
            self.live_gesture = None
            self.recognizer.start(self.x, self.y)
        elif self.button_down:
            self.button_down = False
            self._finish_gesture()

    def handle_motion(self, dx: int, dy: int):
        """Pointer moved by (dx, dy)."""
        self.x += dx
        self.y += dy
        if not self.button_down:
            return

        self.recognizer.add_point(self.x, self.y)

        gesture = self.recognizer.current_gesture()
        if gesture != self.live_gesture:
            self.live_gesture = gesture
            self._live_shown = True
            self.logger.log_live(gesture, self.dispatcher.describe(gesture))

    def _finish_gesture(self):
        segments = self.recognizer.segments
        gesture = self.recognizer.end()
        self.last_gesture = gesture
        self.live_gesture = None

        if self._live_shown:
            print()  # end the live feedback line
            self._live_shown = False
        try:
            executed = self.dispatcher.execute(gesture)
        except Exception as e:
            logging.error(f"Action for {gesture} failed: {e}")
            executed = False
        self.logger.log_gesture(gesture, self.dispatcher.describe(gesture), segments, executed)
