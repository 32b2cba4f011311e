"""
Unit Tests for Periodic Timers
==============================
Cancellation tokens, periodic tasks and single-task timer slots.
"""

import pytest
from structlog.testing import capture_logs

from otpauth_core.errors import TimerStateError
from otpauth_core.timers import CancellationToken, PeriodicTask, TimerSlot


class TestCancellationToken:
    def test_cancel_reports_first_call_only(self):
        """Should report True only for the first cancel call."""
        token = CancellationToken()

        assert token.cancelled is False
        assert token.cancel() is True
        assert token.cancel() is False
        assert token.cancelled is True


class TestPeriodicTask:
    """Tests for the fixed-cadence task."""

    @pytest.mark.asyncio
    async def test_ticks_once_per_interval(self, ticker):
        """Should tick once per elapsed interval."""
        calls = []
        task = PeriodicTask(lambda: calls.append(ticker.clock.now_ms()), sleep=ticker.sleep).start()

        await ticker.tick(3)

        assert len(calls) == 3
        assert calls[1] - calls[0] == 1000
        assert task.ticks == 3
        task.cancel()

    @pytest.mark.asyncio
    async def test_tick_returning_false_stops(self, ticker):
        """Should stop when the tick returns False."""
        remaining = [3]

        def countdown():
            remaining[0] -= 1
            return remaining[0] > 0

        task = PeriodicTask(countdown, sleep=ticker.sleep).start()
        await ticker.tick(5)

        assert remaining[0] == 0
        assert task.done is True
        assert task.ticks == 3

    @pytest.mark.asyncio
    async def test_failing_tick_is_logged_and_cadence_continues(self, ticker):
        """Should log a tick that raises and keep ticking."""
        calls = []

        def flaky():
            calls.append(1)
            if len(calls) == 1:
                raise RuntimeError("tick failed")

        task = PeriodicTask(flaky, name="flaky", sleep=ticker.sleep).start()

        with capture_logs() as logs:
            await ticker.tick(3)

        assert len(calls) == 3
        assert task.live is True
        errors = [entry for entry in logs if entry["log_level"] == "error"]
        assert len(errors) == 1
        assert errors[0]["event"] == "Periodic task tick failed"
        assert errors[0]["task"] == "flaky"
        assert errors[0]["tick"] == 1
        task.cancel()

    @pytest.mark.asyncio
    async def test_stops_silently_when_condition_fails(self, ticker):
        """Should exit without ticking once the condition turns false."""
        active = [True]
        calls = []
        task = PeriodicTask(
            lambda: calls.append(1),
            should_continue=lambda: active[0],
            sleep=ticker.sleep,
        ).start()

        await ticker.tick(2)
        active[0] = False
        await ticker.tick(2)

        assert len(calls) == 2
        assert task.done is True
        await task.wait()

    @pytest.mark.asyncio
    async def test_cancel_is_idempotent(self, ticker):
        """Should cancel once and leave no pending sleep behind."""
        calls = []
        task = PeriodicTask(lambda: calls.append(1), sleep=ticker.sleep).start()
        await ticker.tick()

        assert task.cancel() is True
        assert task.cancel() is False

        await ticker.tick(3)
        await task.wait()

        assert len(calls) == 1
        assert task.live is False
        assert ticker.sleepers == 0

    @pytest.mark.asyncio
    async def test_start_twice_raises(self, ticker):
        """Should refuse a second start."""
        task = PeriodicTask(lambda: None, sleep=ticker.sleep).start()

        with pytest.raises(TimerStateError):
            task.start()
        task.cancel()

    @pytest.mark.asyncio
    async def test_start_after_cancel_raises(self, ticker):
        """Should refuse to start a cancelled task."""
        task = PeriodicTask(lambda: None, sleep=ticker.sleep)
        task.cancel()

        with pytest.raises(TimerStateError):
            task.start()
        assert task.started is False

    @pytest.mark.asyncio
    async def test_wait_before_start_returns(self):
        """Should return immediately when never started."""
        task = PeriodicTask(lambda: None)

        await task.wait()

        assert task.done is False


class TestTimerSlot:
    """Tests for the one-live-task-per-category slot."""

    @pytest.mark.asyncio
    async def test_replace_cancels_previous(self, ticker):
        """Should cancel the previous task when a new one is installed."""
        slot = TimerSlot("otp_countdown")
        first_calls, second_calls = [], []

        first = slot.replace(PeriodicTask(lambda: first_calls.append(1), sleep=ticker.sleep))
        await ticker.tick()
        second = slot.replace(PeriodicTask(lambda: second_calls.append(1), sleep=ticker.sleep))
        await ticker.tick(2)

        assert first.token.cancelled is True
        assert first.live is False
        assert second.live is True
        assert slot.current is second
        assert first_calls == [1]
        assert second_calls == [1, 1]
        assert ticker.sleepers == 1
        slot.cancel()

    @pytest.mark.asyncio
    async def test_at_most_one_live_task(self, ticker):
        """Should keep only the newest task live."""
        slot = TimerSlot("session")
        tasks = [slot.replace(PeriodicTask(lambda: None, sleep=ticker.sleep)) for _ in range(5)]
        await ticker.tick()

        assert sum(1 for task in tasks if task.live) == 1
        assert tasks[-1].live is True
        slot.cancel()

    @pytest.mark.asyncio
    async def test_cancel(self, ticker):
        """Should report whether a live task was cancelled."""
        slot = TimerSlot("session")

        assert slot.cancel() is False

        task = slot.replace(PeriodicTask(lambda: None, sleep=ticker.sleep))
        assert slot.is_active is True

        assert slot.cancel() is True
        assert slot.cancel() is False
        assert slot.is_active is False
        await task.wait()
