"""
Action surface: the navigation commands a gesture can trigger.

ActionSurface declares one fire-and-forget method per command.
KeyboardActionSurface implements them by injecting keyboard shortcuts
through an evdev UInput virtual keyboard.
"""

import logging
from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Tuple

from evdev import UInput, ecodes

logger = logging.getLogger(__name__)


class ActionSurface(ABC):
    """Commands available to the gesture dispatcher."""

    @abstractmethod
    def next_page(self) -> None: ...

    @abstractmethod
    def previous_page(self) -> None: ...

    @abstractmethod
    def scroll_to_top(self) -> None: ...

    @abstractmethod
    def scroll_to_bottom(self) -> None: ...

    @abstractmethod
    def cycle_tab_left(self) -> None: ...

    @abstractmethod
    def cycle_tab_right(self) -> None: ...

    @abstractmethod
    def close_tab(self) -> None: ...

    @abstractmethod
    def new_tab(self) -> None: ...

    @abstractmethod
    def minimize_window(self) -> None: ...

    @abstractmethod
    def maximize_window(self) -> None: ...

    @abstractmethod
    def next_sibling_file(self) -> None: ...

    @abstractmethod
    def previous_sibling_file(self) -> None: ...

    @abstractmethod
    def refresh(self) -> None: ...

    @abstractmethod
    def undo(self) -> None: ...

    @abstractmethod
    def open_search(self) -> None: ...

    @abstractmethod
    def new_window(self) -> None: ...

    @abstractmethod
    def reopen_closed_tab(self) -> None: ...

    @abstractmethod
    def toggle_fullscreen(self) -> None: ...

    def close(self) -> None:
        """Release any resources held by the surface."""


# command -> key names, modifiers first
DEFAULT_SHORTCUTS: Dict[str, Tuple[str, ...]] = {
    'next_page': ('KEY_LEFTALT', 'KEY_RIGHT'),
    'previous_page': ('KEY_LEFTALT', 'KEY_LEFT'),
    'scroll_to_top': ('KEY_LEFTCTRL', 'KEY_HOME'),
    'scroll_to_bottom': ('KEY_LEFTCTRL', 'KEY_END'),
    'cycle_tab_left': ('KEY_LEFTCTRL', 'KEY_PAGEUP'),
    'cycle_tab_right': ('KEY_LEFTCTRL', 'KEY_PAGEDOWN'),
    'close_tab': ('KEY_LEFTCTRL', 'KEY_W'),
    'new_tab': ('KEY_LEFTCTRL', 'KEY_T'),
    'minimize_window': ('KEY_LEFTMETA', 'KEY_DOWN'),
    'maximize_window': ('KEY_LEFTMETA', 'KEY_UP'),
    'next_sibling_file': ('KEY_LEFTCTRL', 'KEY_LEFTALT', 'KEY_DOWN'),
    'previous_sibling_file': ('KEY_LEFTCTRL', 'KEY_LEFTALT', 'KEY_UP'),
    'refresh': ('KEY_F5',),
    'undo': ('KEY_LEFTCTRL', 'KEY_Z'),
    'open_search': ('KEY_LEFTCTRL', 'KEY_LEFTSHIFT', 'KEY_F'),
    'new_window': ('KEY_LEFTCTRL', 'KEY_N'),
    'reopen_closed_tab': ('KEY_LEFTCTRL', 'KEY_LEFTSHIFT', 'KEY_T'),
    'toggle_fullscreen': ('KEY_F11',),
}


class CommandActionSurface(ActionSurface):
    """Routes every command method through a single perform(command) call."""

    @abstractmethod
    def perform(self, command: str) -> None:
        """Carry out a named command."""

    def next_page(self):
        self.perform('next_page')

    def previous_page(self):
        self.perform('previous_page')

    def scroll_to_top(self):
        self.perform('scroll_to_top')

    def scroll_to_bottom(self):
        self.perform('scroll_to_bottom')

    def cycle_tab_left(self):
        self.perform('cycle_tab_left')

    def cycle_tab_right(self):
        self.perform('cycle_tab_right')

    def close_tab(self):
        self.perform('close_tab')

    def new_tab(self):
        self.perform('new_tab')

    def minimize_window(self):
        self.perform('minimize_window')

    def maximize_window(self):
        self.perform('maximize_window')

    def next_sibling_file(self):
        self.perform('next_sibling_file')

    def previous_sibling_file(self):
        self.perform('previous_sibling_file')

    def refresh(self):
        self.perform('refresh')

    def undo(self):
        self.perform('undo')

    def open_search(self):
        self.perform('open_search')

    def new_window(self):
        self.perform('new_window')

    def reopen_closed_tab(self):
        self.perform('reopen_closed_tab')

    def toggle_fullscreen(self):
        self.perform('toggle_fullscreen')


class KeyboardActionSurface(CommandActionSurface):
    """
    Synthesizes keyboard shortcuts via /dev/uinput.

    The virtual keyboard is created on first use, so constructing the
    surface never requires uinput permissions.
    """

    def __init__(self, shortcuts: Optional[Dict[str, Tuple[str, ...]]] = None,
                 uinput: Optional[UInput] = None):
        self.shortcuts = dict(DEFAULT_SHORTCUTS)
        if shortcuts:
            self.shortcuts.update(shortcuts)
        self._uinput = uinput

    def _device(self) -> UInput:
        if self._uinput is None:
            self._uinput = UInput(name='gesture-nav-keyboard')
            logger.info("Created virtual keyboard for gesture actions")
        return self._uinput

    def perform(self, command: str):
        """Press and release the shortcut bound to a command."""
        names = self.shortcuts[command]
        keys = [ecodes.ecodes[name] for name in names]
        ui = self._device()
        for key in keys:
            ui.write(ecodes.EV_KEY, key, 1)
        for key in reversed(keys):
            ui.write(ecodes.EV_KEY, key, 0)
        ui.syn()
        logger.debug(f"Sent {'+'.join(names)} for {command}")

    def close(self):
        if self._uinput is not None:
            self._uinput.close()
            self._uinput = None


class DryRunActionSurface(CommandActionSurface):
    """Records commands instead of carrying them out."""

    def __init__(self):
        self.calls: List[str] = []

    def perform(self, command: str):
        self.calls.append(command)
        logger.info(f"Dry run: {command}")
