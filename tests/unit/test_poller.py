"""Tests for deployment status polling"""

import pytest

from uptimeguard.deploy.poller import wait_until_active


class StatusSequence:
    """Return statuses in order, then keep repeating the last one"""

    def __init__(self, *statuses):
        self.statuses = list(statuses)
        self.calls = 0

    def __call__(self):
        self.calls += 1
        if len(self.statuses) > 1:
            return self.statuses.pop(0)
        return self.statuses[0]


class TestWaitUntilActive:
    """Test the bounded fixed-interval poll"""

    def test_active_immediately(self):
        status = StatusSequence("ACTIVE")
        sleeps = []

        assert wait_until_active(status, max_wait=240, interval=5, sleep=sleeps.append)
        assert status.calls == 1
        assert sleeps == []

    def test_active_after_a_few_polls(self):
        status = StatusSequence("DEPLOY_IN_PROGRESS", "DEPLOY_IN_PROGRESS", "ACTIVE")
        sleeps = []

        assert wait_until_active(status, max_wait=240, interval=5, sleep=sleeps.append)
        assert status.calls == 3
        assert sleeps == [5, 5]

    def test_timeout_uses_exactly_configured_attempts(self):
        status = StatusSequence("DEPLOY_IN_PROGRESS")
        sleeps = []

        assert not wait_until_active(status, max_wait=240, interval=5, sleep=sleeps.append)
        assert status.calls == 48
        assert sum(sleeps) == 240

    def test_partial_interval_rounds_up(self):
        status = StatusSequence("")

        assert not wait_until_active(status, max_wait=12, interval=5, sleep=lambda s: None)
        assert status.calls == 3

    def test_active_on_last_attempt(self):
        status = StatusSequence("OFFLINE", "OFFLINE", "OFFLINE", "ACTIVE")

        assert wait_until_active(status, max_wait=20, interval=5, sleep=lambda s: None)
        assert status.calls == 4

    def test_active_after_ceiling_is_ignored(self):
        status = StatusSequence("OFFLINE", "OFFLINE", "OFFLINE", "OFFLINE", "ACTIVE")

        assert not wait_until_active(status, max_wait=20, interval=5, sleep=lambda s: None)
        assert status.calls == 4

    def test_status_must_match_exactly(self):
        status = StatusSequence("active")

        assert not wait_until_active(status, max_wait=10, interval=5, sleep=lambda s: None)

    def test_invalid_interval(self):
        with pytest.raises(ValueError):
            wait_until_active(lambda: "ACTIVE", max_wait=10, interval=0)
