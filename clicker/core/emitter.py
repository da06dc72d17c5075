"""Synthetic input dispatch — sends one mouse event to the OS via pynput.

A failed dispatch is logged and reported as ``False``; it never raises
into the engine.  Every attempt, successful or not, is followed by the
settle delay so the OS input queue can catch up before the next event.
"""
from __future__ import annotations

import time
from typing import Callable, Optional

from pynput import mouse

from clicker.core.constants import SETTLE_DELAY_S
from clicker.core.models import (
    ButtonPress, ButtonRelease, InputEvent, MouseButton, MouseMove,
)

BUTTON_MAP: dict[MouseButton, mouse.Button] = {
    MouseButton.LEFT:   mouse.Button.left,
    MouseButton.MIDDLE: mouse.Button.middle,
    MouseButton.RIGHT:  mouse.Button.right,
}


class EventEmitter:
    """Dispatches MouseMove / ButtonPress / ButtonRelease events."""

    def __init__(
        self,
        controller=None,
        settle_delay: float = SETTLE_DELAY_S,
        log_callback: Optional[Callable[[str, str], None]] = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._mc           = controller if controller is not None else mouse.Controller()
        self._settle_delay = settle_delay
        self._sleep        = sleep
        # Optional callback(level: str, message: str) for dispatch failures
        self._log = log_callback or (lambda level, msg: None)

    def emit(self, event: InputEvent) -> bool:
        """Send ``event``; return True if the OS accepted it."""
        try:
            self._dispatch(event)
            ok = True
        except Exception as exc:          # noqa: BLE001
            self._log("WARNING", f"could not send {event!r}: {exc}")
            ok = False
        if self._settle_delay > 0:
            self._sleep(self._settle_delay)
        return ok

    def _dispatch(self, event: InputEvent) -> None:
        if isinstance(event, MouseMove):
            self._mc.position = (event.x, event.y)
        elif isinstance(event, ButtonPress):
            self._mc.press(BUTTON_MAP[event.button])
        elif isinstance(event, ButtonRelease):
            self._mc.release(BUTTON_MAP[event.button])
        else:
            raise TypeError(f"unsupported input event: {event!r}")
