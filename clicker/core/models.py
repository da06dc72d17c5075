"""Value types shared by the control surface and the click engine.

Every type here is a frozen dataclass or an Enum: a value handed to a
channel can never be changed by the sender afterwards, and each channel
message is a complete replacement, never a diff.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Union

from clicker.core.timing import Duration, convert_time_to_duration


# ---------------------------------------------------------------------------
# Configuration values
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ClickInterval:
    """Pause between emission rounds, decomposed for display."""

    hours:        int = 0
    minutes:      int = 0
    seconds:      int = 0
    milliseconds: int = 0

    def __post_init__(self) -> None:
        for name in ("hours", "minutes", "seconds", "milliseconds"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} cannot be negative")

    def to_duration(self) -> Duration:
        return convert_time_to_duration(
            self.hours, self.minutes, self.seconds, self.milliseconds,
        )


class MouseButton(Enum):
    LEFT   = "left"
    MIDDLE = "middle"
    RIGHT  = "right"


class ClickType(Enum):
    SINGLE = "single"
    DOUBLE = "double"

    @property
    def repeat_count(self) -> int:
        """Number of press/release pairs one emission round issues."""
        return _REPEAT_COUNTS[self]


_REPEAT_COUNTS: dict[ClickType, int] = {
    ClickType.SINGLE: 1,
    ClickType.DOUBLE: 2,
}


@dataclass(frozen=True)
class ClickOptions:
    button:     MouseButton = MouseButton.LEFT
    click_type: ClickType   = ClickType.SINGLE


@dataclass(frozen=True)
class CurrentCursor:
    """Click wherever the pointer already is."""


@dataclass(frozen=True)
class Fixed:
    """Move the pointer to (x, y) before every round of clicks."""

    x: int
    y: int

    def __post_init__(self) -> None:
        if self.x < 0 or self.y < 0:
            raise ValueError(f"coordinates must be non-negative, got ({self.x}, {self.y})")


ClickPosition = Union[CurrentCursor, Fixed]


# ---------------------------------------------------------------------------
# Synthetic input events
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class MouseMove:
    x: int
    y: int


@dataclass(frozen=True)
class ButtonPress:
    button: MouseButton


@dataclass(frozen=True)
class ButtonRelease:
    button: MouseButton


InputEvent = Union[MouseMove, ButtonPress, ButtonRelease]


# ---------------------------------------------------------------------------
# Engine snapshot
# ---------------------------------------------------------------------------

@dataclass
class EngineSnapshot:
    """The engine's own copy of the current desired configuration."""

    interval: ClickInterval = field(default_factory=ClickInterval)
    options:  ClickOptions  = field(default_factory=ClickOptions)
    position: ClickPosition = field(default_factory=CurrentCursor)
    running:  bool          = False
    # Cached conversion of ``interval``; refreshed whenever interval changes.
    delay:    Duration      = field(default_factory=Duration)
