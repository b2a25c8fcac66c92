#!/usr/bin/env python3
"""Tests for clock sources."""
from datetime import datetime

from rental import ManualClock, SystemClock


class TestManualClock:
    """Tests for ManualClock."""

    def test_returns_start(self):
        clock = ManualClock(datetime(2025, 1, 1, 9, 0))
        assert clock.now() == datetime(2025, 1, 1, 9, 0)

    def test_advance(self):
        clock = ManualClock(datetime(2025, 1, 1, 9, 0))
        assert clock.advance(days=2, hours=3) == datetime(2025, 1, 3, 12, 0)
        assert clock.now() == datetime(2025, 1, 3, 12, 0)

    def test_set(self):
        clock = ManualClock(datetime(2025, 1, 1, 9, 0))
        clock.set(datetime(2030, 6, 1))
        assert clock.now() == datetime(2030, 6, 1)


class TestSystemClock:
    """Tests for SystemClock."""

    def test_now_is_current(self):
        before = datetime.now()
        now = SystemClock().now()
        assert before <= now <= datetime.now()
