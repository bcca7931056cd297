"""Tests for clicker.core.constants — verify documented values and types."""
from clicker.core import constants


class TestKillswitchConstants:
    def test_tolerance(self):
        assert constants.KILLSWITCH_TOLERANCE_PX == 2


class TestInterpreterConstants:
    def test_settle_interval(self):
        assert isinstance(constants.SETTLE_INTERVAL_MS, int)
        assert constants.SETTLE_INTERVAL_MS > 0

    def test_settle_attempts(self):
        assert isinstance(constants.SETTLE_ATTEMPTS, int)
        assert constants.SETTLE_ATTEMPTS > 0

    def test_settle_tolerance(self):
        assert isinstance(constants.SETTLE_TOLERANCE_PX, int)
        assert constants.SETTLE_TOLERANCE_PX >= 0


class TestTrackerConstants:
    def test_tracker_interval(self):
        assert isinstance(constants.TRACKER_INTERVAL_MS, int)
        assert 0 < constants.TRACKER_INTERVAL_MS < 1000

    def test_status_poll(self):
        assert isinstance(constants.STATUS_POLL_MS, int)
        assert constants.STATUS_POLL_MS > 0
