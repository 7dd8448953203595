"""
Device management for mouse discovery and initialization.
"""

import evdev
from evdev import ecodes
import logging

from ..config.settings import TriggerButton

logger = logging.getLogger(__name__)

TRIGGER_CODES = {
    TriggerButton.RIGHT_CLICK: ecodes.BTN_RIGHT,
    TriggerButton.WHEEL_CLICK: ecodes.BTN_MIDDLE,
}


def trigger_code(button: TriggerButton) -> int:
    """evdev key code for a trigger button."""
    return TRIGGER_CODES[TriggerButton(button)]


class DeviceManager:
    """Manages pointer device discovery."""

    def __init__(self, trigger_button: TriggerButton = TriggerButton.RIGHT_CLICK):
        self.device = None
        self.trigger_code = trigger_code(trigger_button)

    def is_pointer(self, device) -> bool:
        """True if the device reports relative motion and the trigger button."""
        caps = device.capabilities()
        rel_codes = caps.get(ecodes.EV_REL, [])
        key_codes = caps.get(ecodes.EV_KEY, [])
        return (ecodes.REL_X in rel_codes and
                ecodes.REL_Y in rel_codes and
                self.trigger_code in key_codes)

    def find_device(self):
        """Find the first mouse that can draw gestures."""
        devices = [evdev.InputDevice(path) for path in evdev.list_devices()]

        for device in devices:
            if self.is_pointer(device):
                self.device = device
                logger.info(f"Found mouse: {device.name}")
                return device

        logger.error("No mouse device found")
        return None

    def get_device_info(self):
        """Get device information."""
        return {
            'device': self.device,
            'name': self.device.name if self.device else None,
            'path': self.device.path if self.device else None,
            'trigger_code': self.trigger_code
        }
