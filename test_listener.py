"""Tests for the mouse gesture listener and device discovery."""

from collections import namedtuple

from evdev import ecodes

from gesture_nav.actions.action_surface import DryRunActionSurface
from gesture_nav.config.settings import TriggerButton
from gesture_nav.core.listener import MouseGestureListener
from gesture_nav.device import device_manager
from gesture_nav.device.device_manager import DeviceManager, trigger_code

Event = namedtuple('Event', ['type', 'code', 'value'])


class FakeDevice:
    def __init__(self, name, caps):
        self.name = name
        self.path = f"/dev/input/{name}"
        self._caps = caps

    def capabilities(self):
        return self._caps


MOUSE_CAPS = {
    ecodes.EV_REL: [ecodes.REL_X, ecodes.REL_Y, ecodes.REL_WHEEL],
    ecodes.EV_KEY: [ecodes.BTN_LEFT, ecodes.BTN_RIGHT],
}
KEYBOARD_CAPS = {
    ecodes.EV_KEY: [ecodes.KEY_A, ecodes.KEY_B],
}


def make_listener(**kwargs):
    return MouseGestureListener(actions=DryRunActionSurface(), **kwargs)


def syn():
    return Event(ecodes.EV_SYN, ecodes.SYN_REPORT, 0)


def test_button_and_motion_dispatch_gesture():
    listener = make_listener()
    listener.handle_button(True)
    listener.handle_motion(100, 0)
    listener.handle_button(False)

    assert listener.last_gesture == 'right'
    assert listener.actions.calls == ['previous_page']


def test_motion_without_button_only_moves_pointer():
    listener = make_listener()
    listener.handle_motion(300, -20)
    listener.handle_button(False)

    assert (listener.x, listener.y) == (300, -20)
    assert listener.actions.calls == []


def test_gesture_starts_at_current_pointer_position():
    listener = make_listener()
    listener.handle_motion(500, 500)
    listener.handle_button(True)
    listener.handle_motion(0, -100)
    listener.handle_motion(-100, 0)
    listener.handle_button(False)

    assert listener.last_gesture == 'up+left'
    assert listener.actions.calls == ['close_tab']


def test_raw_events_are_batched_per_report():
    listener = make_listener()
    events = [
        Event(ecodes.EV_KEY, ecodes.BTN_RIGHT, 1), syn(),
        Event(ecodes.EV_REL, ecodes.REL_Y, -60), Event(ecodes.EV_REL, ecodes.REL_X, 5), syn(),
        Event(ecodes.EV_REL, ecodes.REL_Y, -60), syn(),
        Event(ecodes.EV_KEY, ecodes.BTN_RIGHT, 0), syn(),
    ]
    for event in events:
        listener.handle_event(event)

    assert (listener.x, listener.y) == (5, -120)
    assert listener.actions.calls == ['scroll_to_top']


def test_other_buttons_are_ignored():
    listener = make_listener()
    for event in [Event(ecodes.EV_KEY, ecodes.BTN_LEFT, 1), syn(),
                  Event(ecodes.EV_REL, ecodes.REL_X, 200), syn(),
                  Event(ecodes.EV_KEY, ecodes.BTN_LEFT, 0), syn()]:
        listener.handle_event(event)

    assert listener.actions.calls == []
    assert listener.last_gesture is None


def test_listeners_do_not_share_recognizers():
    first = make_listener()
    second = make_listener()
    assert first.recognizer is not second.recognizer

    first.handle_button(True)
    first.handle_motion(0, 100)
    second.handle_button(True)
    second.handle_button(False)
    first.handle_button(False)

    assert second.last_gesture is None
    assert first.last_gesture == 'down'


def test_template_backend_listener():
    listener = make_listener(backend='template')
    listener.handle_button(True)
    for _ in range(20):
        listener.handle_motion(-10, 0)
    listener.handle_button(False)

    assert listener.last_gesture == 'left'
    assert listener.actions.calls == ['next_page']


def test_unrecognized_stroke_runs_nothing():
    listener = make_listener()
    listener.handle_button(True)
    listener.handle_motion(90, 90)
    listener.handle_button(False)

    assert listener.last_gesture is None
    assert listener.actions.calls == []


def test_trigger_codes():
    assert trigger_code(TriggerButton.RIGHT_CLICK) == ecodes.BTN_RIGHT
    assert trigger_code(TriggerButton.WHEEL_CLICK) == ecodes.BTN_MIDDLE


def test_is_pointer():
    manager = DeviceManager()
    assert manager.is_pointer(FakeDevice('mouse', MOUSE_CAPS))
    assert not manager.is_pointer(FakeDevice('kbd', KEYBOARD_CAPS))
    # No middle button on this mouse
    assert not DeviceManager(TriggerButton.WHEEL_CLICK).is_pointer(FakeDevice('mouse', MOUSE_CAPS))


def test_find_device(monkeypatch):
    devices = {
        'event0': FakeDevice('kbd', KEYBOARD_CAPS),
        'event1': FakeDevice('mouse', MOUSE_CAPS),
    }
    monkeypatch.setattr(device_manager.evdev, 'list_devices', lambda: list(devices))
    monkeypatch.setattr(device_manager.evdev, 'InputDevice', lambda path: devices[path])

    manager = DeviceManager()
    assert manager.find_device() is devices['event1']
    assert manager.get_device_info()['name'] == 'mouse'


def test_start_without_device(monkeypatch):
    monkeypatch.setattr(device_manager.evdev, 'list_devices', lambda: [])
    listener = make_listener()
    assert listener.start() is False


class FlakySurface(DryRunActionSurface):
    """Fails the first command, then records as usual."""

    def __init__(self):
        super().__init__()
        self.failures = 0

    def perform(self, command):
        if self.failures == 0:
            self.failures += 1
            raise PermissionError("/dev/uinput not writable")
        super().perform(command)


class ScriptedDevice:
    def __init__(self, events):
        self.events = events

    def read_loop(self):
        yield from self.events


def stroke_events(dx, dy):
    return [
        Event(ecodes.EV_KEY, ecodes.BTN_RIGHT, 1), syn(),
        Event(ecodes.EV_REL, ecodes.REL_X, dx), Event(ecodes.EV_REL, ecodes.REL_Y, dy), syn(),
        Event(ecodes.EV_KEY, ecodes.BTN_RIGHT, 0), syn(),
    ]


def test_failed_action_keeps_event_loop_running():
    listener = MouseGestureListener(actions=FlakySurface())
    listener.device_manager.device = ScriptedDevice(stroke_events(100, 0) + stroke_events(-100, 0))
    listener.running = True
    listener._event_loop()

    assert listener.actions.failures == 1
    assert listener.actions.calls == ['next_page']
    assert listener.last_gesture == 'left'


def test_release_reported_with_final_motion():
    listener = make_listener()
    events = [
        Event(ecodes.EV_KEY, ecodes.BTN_RIGHT, 1), syn(),
        Event(ecodes.EV_REL, ecodes.REL_X, 100), Event(ecodes.EV_KEY, ecodes.BTN_RIGHT, 0), syn(),
    ]
    for event in events:
        listener.handle_event(event)

    assert listener.last_gesture == 'right'
    assert listener.actions.calls == ['previous_page']


def test_press_reported_with_motion_starts_after_move():
    listener = make_listener()
    events = [
        Event(ecodes.EV_REL, ecodes.REL_X, 300), Event(ecodes.EV_KEY, ecodes.BTN_RIGHT, 1), syn(),
        Event(ecodes.EV_KEY, ecodes.BTN_RIGHT, 0), syn(),
    ]
    for event in events:
        listener.handle_event(event)

    assert listener.x == 300
    assert listener.last_gesture is None
    assert listener.actions.calls == []
