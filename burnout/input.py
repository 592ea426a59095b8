"""Key-down event delivery.

``InputSource`` is the seam between the engine and whatever produces key
presses (a window toolkit, a terminal, a test). :class:`KeyEventQueue` is the
in-process implementation: events are queued and delivered strictly one at a
time, each handler running to completion before the next event is taken. An
event pushed from inside a handler waits its turn behind the current one.
"""

import logging
from collections import deque
from dataclasses import dataclass
from typing import Callable, Deque, List, Optional, Protocol

from burnout.types import KeyCode

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class KeyEvent:
    """Raw key-down event.

    Attributes:
        key_code: Numeric key code compared against the ``KeyMap``.
        key: Optional human readable key name, informational only.
    """

    key_code: KeyCode
    key: Optional[str] = None


KeyHandler = Callable[[KeyEvent], object]


class InputSource(Protocol):
    """Anything that can register a key-down handler."""

    def on_key_down(self, handler: KeyHandler) -> None: ...


class KeyEventQueue:
    """FIFO key event source with run-to-completion delivery."""

    def __init__(self) -> None:
        self._handlers: List[KeyHandler] = []
        self._pending: Deque[KeyEvent] = deque()
        self._pumping = False

    def on_key_down(self, handler: KeyHandler) -> None:
        self._handlers.append(handler)

    def push(self, event: KeyEvent) -> None:
        self._pending.append(event)

    def pump(self) -> int:
        """Deliver every pending event. Returns the number delivered.

        Re-entrant calls (a handler pumping the queue) return 0 immediately;
        the outer loop picks up whatever was pushed.
        """
        if self._pumping:
            return 0
        self._pumping = True
        delivered = 0
        try:
            while self._pending:
                event = self._pending.popleft()
                for handler in list(self._handlers):
                    handler(event)
                delivered += 1
        finally:
            self._pumping = False
        logger.debug("Delivered %d key event(s)", delivered)
        return delivered

    def key_down(self, key_code: KeyCode, key: Optional[str] = None) -> int:
        """Push a single key-down event and deliver the queue."""
        self.push(KeyEvent(key_code, key))
        return self.pump()
