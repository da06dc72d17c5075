"""Global hotkey manager — system-wide keyboard shortcuts via pynput.

Listens for key combinations defined in settings.ini [HOTKEYS] and
emits Qt signals that the main window can connect to its action handlers.

The listener runs in a daemon thread and is stopped when stop() is called
or the QObject is destroyed.
"""
from __future__ import annotations

from typing import Callable

from PySide6.QtCore import QObject, Signal

from pynput import keyboard


def _parse_hotkey(combo_str: str) -> str | None:
    """Convert 'Ctrl+Shift+R' / 'F6' into pynput GlobalHotKeys format.

    'Ctrl+Shift+R' → '<ctrl>+<shift>+r', 'F6' → '<f6>'.
    Returns None if the combo string is empty or unparseable.
    """
    if not combo_str or not combo_str.strip():
        return None

    _MAP = {
        "CTRL":  "<ctrl>",
        "ALT":   "<alt>",
        "SHIFT": "<shift>",
        "WIN":   "<cmd>",
        "SUPER": "<cmd>",
    }

    parts = [p.strip() for p in combo_str.split("+")]
    if any(not p for p in parts):
        return None

    result: list[str] = []
    for p in parts:
        upper = p.upper()
        if upper in _MAP:
            result.append(_MAP[upper])
        elif len(p) > 1 and upper[0] == "F" and upper[1:].isdigit():
            result.append(f"<{p.lower()}>")
        else:
            # Single character
            result.append(p.lower())
    return "+".join(result)


class HotkeyManager(QObject):
    """Manages global hotkeys for start/stop/toggle.

    Signals
    -------
    start_triggered  : emitted when the start hotkey is pressed
    stop_triggered   : emitted when the stop hotkey is pressed
    toggle_triggered : emitted when the toggle hotkey is pressed
    """

    start_triggered  = Signal()
    stop_triggered   = Signal()
    toggle_triggered = Signal()

    def __init__(self, settings, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._settings = settings
        self._listener: keyboard.GlobalHotKeys | None = None

    @property
    def is_active(self) -> bool:
        return self._listener is not None

    def bindings(self) -> dict[str, Callable]:
        """Return pynput combo → signal emitter for every configured hotkey."""
        signals = {
            "start":  self.start_triggered,
            "stop":   self.stop_triggered,
            "toggle": self.toggle_triggered,
        }
        hotkeys: dict[str, Callable] = {}
        for action, combo_str in self._settings.hotkeys.items():
            combo = _parse_hotkey(combo_str)
            if combo:
                hotkeys[combo] = signals[action].emit
        return hotkeys

    def start(self) -> None:
        """Start listening for global hotkeys."""
        if self._listener is not None:
            return

        hotkeys = self.bindings()
        if not hotkeys:
            return

        self._listener = keyboard.GlobalHotKeys(hotkeys)
        self._listener.daemon = True
        self._listener.start()

    def stop(self) -> None:
        """Stop the global hotkey listener."""
        if self._listener is not None:
            self._listener.stop()
            self._listener = None

    def restart(self) -> None:
        """Restart with potentially updated settings."""
        self.stop()
        self.start()
