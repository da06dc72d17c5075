"""Tests for clicker.core.models — value types and defaults."""
import dataclasses

import pytest

from clicker.core.models import (
    ClickInterval, ClickOptions, ClickType, CurrentCursor, EngineSnapshot,
    Fixed, MouseButton,
)
from clicker.core.timing import Duration


class TestClickInterval:
    def test_defaults_are_zero(self):
        assert ClickInterval().to_duration().is_zero()

    def test_to_duration(self):
        assert ClickInterval(0, 0, 1, 250).to_duration() == Duration(1, 250_000_000)

    def test_negative_rejected(self):
        with pytest.raises(ValueError, match="seconds"):
            ClickInterval(seconds=-1)

    def test_frozen(self):
        iv = ClickInterval(milliseconds=5)
        with pytest.raises(dataclasses.FrozenInstanceError):
            iv.milliseconds = 6


class TestClickType:
    def test_repeat_counts(self):
        assert ClickType.SINGLE.repeat_count == 1
        assert ClickType.DOUBLE.repeat_count == 2

    def test_every_member_has_count(self):
        for click_type in ClickType:
            assert click_type.repeat_count >= 1


class TestClickOptions:
    def test_defaults(self):
        opts = ClickOptions()
        assert opts.button is MouseButton.LEFT
        assert opts.click_type is ClickType.SINGLE


class TestPosition:
    def test_fixed_equality(self):
        assert Fixed(10, 20) == Fixed(10, 20)
        assert Fixed(10, 20) != Fixed(20, 10)

    def test_fixed_negative_rejected(self):
        with pytest.raises(ValueError):
            Fixed(-1, 0)

    def test_current_cursor_equality(self):
        assert CurrentCursor() == CurrentCursor()
        assert CurrentCursor() != Fixed(0, 0)


class TestEngineSnapshot:
    def test_defaults(self):
        snap = EngineSnapshot()
        assert snap.interval == ClickInterval()
        assert snap.options == ClickOptions()
        assert snap.position == CurrentCursor()
        assert snap.running is False
        assert snap.delay.is_zero()
