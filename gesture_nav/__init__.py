"""
Gesture Nav Package
Mouse gesture recognition for navigation commands.
"""

from .core.listener import MouseGestureListener
from .gestures.segment_recognizer import GestureRecognizer
from .gestures.template_recognizer import TemplateRecognizer
from .actions.dispatcher import GestureActionMap
from .device.device_manager import DeviceManager

__version__ = "1.0.0"
__all__ = ["MouseGestureListener", "GestureRecognizer", "TemplateRecognizer",
           "GestureActionMap", "DeviceManager"]
