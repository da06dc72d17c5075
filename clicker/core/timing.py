"""Interval → duration conversion.

``convert_time_to_duration`` is pure: it folds hours/minutes/seconds/
milliseconds into a single :class:`Duration` and saturates at
:attr:`Duration.MAX` instead of growing past the representable range.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from clicker.core.constants import (
    MAX_DURATION_SECONDS, NANOS_PER_MILLI, NANOS_PER_SECOND,
)

_MS_PER_SECOND = 1_000
_MS_PER_MINUTE = 60 * _MS_PER_SECOND
_MS_PER_HOUR   = 60 * _MS_PER_MINUTE


@dataclass(frozen=True, order=True)
class Duration:
    """Whole seconds plus a sub-second remainder in nanoseconds."""

    seconds: int = 0
    nanos:   int = 0

    MAX: ClassVar["Duration"]

    @property
    def total_ms(self) -> int:
        return self.seconds * _MS_PER_SECOND + self.nanos // NANOS_PER_MILLI

    def total_seconds(self) -> float:
        return self.seconds + self.nanos / NANOS_PER_SECOND

    def is_zero(self) -> bool:
        return self.seconds == 0 and self.nanos == 0


Duration.MAX = Duration(MAX_DURATION_SECONDS, NANOS_PER_SECOND - 1)


def convert_time_to_duration(
    hours: int, minutes: int, seconds: int, milliseconds: int,
) -> Duration:
    """Return ``ms + 1000·s + 60000·m + 3600000·h`` as a Duration.

    Raises ValueError for negative parts.  Totals past Duration.MAX come
    back as Duration.MAX.
    """
    if min(hours, minutes, seconds, milliseconds) < 0:
        raise ValueError("interval parts must be non-negative")

    total_ms = (
        milliseconds
        + seconds * _MS_PER_SECOND
        + minutes * _MS_PER_MINUTE
        + hours   * _MS_PER_HOUR
    )
    whole, rem_ms = divmod(total_ms, _MS_PER_SECOND)
    if whole > MAX_DURATION_SECONDS:
        return Duration.MAX
    return Duration(whole, rem_ms * NANOS_PER_MILLI)
