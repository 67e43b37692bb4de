import curses
from logging import getLogger
from typing import Protocol

from ..types.enums import InputEventType
from ..types.input import InputEvent
from ..types.log import TRACE

logger = getLogger(__name__)

ESCAPE = "\x1b"
ENTER_KEYS = ("\n", "\r")
BACKSPACE_KEYS = ("\x7f", "\b")

BACKSPACE_KEYCODES = (curses.KEY_BACKSPACE,)
ENTER_KEYCODES = (curses.KEY_ENTER,)


class InputSource(Protocol):
    def next_event(self) -> InputEvent | None: ...


def event_from_key(key: str | int) -> InputEvent | None:
    """
    Map a curses key (str from get_wch, int for special keys) to an event.
    Keys without a meaning return None.
    """
    if isinstance(key, int):
        if key in BACKSPACE_KEYCODES:
            return InputEvent(event=InputEventType.BACKSPACE)
        if key in ENTER_KEYCODES:
            return InputEvent(event=InputEventType.SUBMIT)
        return None

    if key == ESCAPE:
        return InputEvent(event=InputEventType.CANCEL)
    if key in ENTER_KEYS:
        return InputEvent(event=InputEventType.SUBMIT)
    if key in BACKSPACE_KEYS:
        return InputEvent(event=InputEventType.BACKSPACE)
    if len(key) == 1 and key.isprintable():
        return InputEvent.typed(key)
    return None


class CursesInputSource:
    """
    Pulls key events from a curses window. Waits at most tick_ms for a key
    so the caller can redraw the timer in between.
    """

    def __init__(self, window: "curses.window", tick_ms: int) -> None:
        self._window = window
        self._window.keypad(True)
        self._window.timeout(tick_ms)

    def next_event(self) -> InputEvent | None:
        try:
            key = self._window.get_wch()
        except curses.error:
            # timeout, no key pressed
            return None

        event = event_from_key(key)
        logger.log(TRACE, "key: %r, event: %s", key, event)
        return event
