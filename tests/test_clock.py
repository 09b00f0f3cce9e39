"""Tests for the configurable time source."""

from datetime import datetime

from yaobserver import clock, set_clock


class TestClock:
    def test_default_is_wall_clock(self):
        before = datetime.now()
        stamp = clock.now()
        after = datetime.now()
        assert before <= stamp <= after

    def test_custom_clock(self):
        fixed = datetime(2000, 1, 1)
        set_clock(lambda: fixed)
        try:
            assert clock.now() == fixed
        finally:
            set_clock(None)

    def test_reset(self):
        set_clock(lambda: datetime(2000, 1, 1))
        set_clock(None)
        assert clock.now().year >= 2024
