"""Tests for clicker.core.timing — convert_time_to_duration and Duration."""
import itertools

import pytest

from clicker.core.timing import Duration, convert_time_to_duration


class TestConvert:
    def test_half_second(self):
        d = convert_time_to_duration(0, 0, 0, 500)
        assert d == Duration(0, 500_000_000)
        assert d.total_ms == 500

    def test_one_of_each(self):
        assert convert_time_to_duration(1, 1, 1, 1).total_ms == 3_661_001

    def test_zero(self):
        d = convert_time_to_duration(0, 0, 0, 0)
        assert d.is_zero()
        assert d.total_seconds() == 0.0

    def test_millis_carry_into_seconds(self):
        assert convert_time_to_duration(0, 0, 0, 2500) == Duration(2, 500_000_000)

    def test_total_seconds(self):
        assert convert_time_to_duration(0, 1, 30, 250).total_seconds() == pytest.approx(90.25)

    def test_negative_rejected(self):
        with pytest.raises(ValueError):
            convert_time_to_duration(0, -1, 0, 0)


class TestMonotonic:
    def test_increasing_any_part_never_decreases(self):
        samples = [0, 1, 59, 999, 1000, 123_456]
        for h, m, s, ms in itertools.product([0, 2], samples, [0, 61], samples):
            base = convert_time_to_duration(h, m, s, ms)
            assert convert_time_to_duration(h + 1, m, s, ms) >= base
            assert convert_time_to_duration(h, m + 1, s, ms) >= base
            assert convert_time_to_duration(h, m, s + 1, ms) >= base
            assert convert_time_to_duration(h, m, s, ms + 1) >= base


class TestSaturation:
    def test_huge_hours(self):
        assert convert_time_to_duration(10**30, 0, 0, 0) == Duration.MAX

    def test_huge_millis(self):
        assert convert_time_to_duration(0, 0, 0, 10**40) == Duration.MAX

    def test_max_is_largest(self):
        big = convert_time_to_duration(5_000_000_000_000, 0, 0, 0)
        assert big < Duration.MAX
        assert convert_time_to_duration(10**20, 10**20, 10**20, 10**20) == Duration.MAX

    def test_max_is_not_negative(self):
        assert Duration.MAX.seconds > 0
        assert Duration.MAX.nanos == 999_999_999
