"""
Abstract base class for gesture recognition backends.

Every backend consumes one pointer session at a time:
  - start(x, y) when the trigger button goes down
  - add_point(x, y) for every motion sample while it is held
  - end() when it is released, returning a gesture name or None
"""

from abc import ABC, abstractmethod
from typing import Optional, Tuple


class RecognizerBackend(ABC):
    """Base class for all recognition backends."""

    NAME: str = "UNNAMED_BACKEND"

    @abstractmethod
    def start(self, x: float, y: float) -> None:
        """Discard any unfinished session and begin a new one at (x, y)."""

    @abstractmethod
    def add_point(self, x: float, y: float) -> None:
        """Feed one raw pointer sample."""

    @abstractmethod
    def end(self) -> Optional[str]:
        """Classify the session. The session is consumed afterwards."""

    def current_gesture(self) -> Optional[str]:
        """Gesture recognized so far, for live feedback. None if unsupported."""
        return None

    @property
    def segments(self) -> Tuple[str, ...]:
        """Direction segments of the current session, if the backend tracks them."""
        return ()

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.NAME!r}>"
