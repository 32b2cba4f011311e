"""
Shared fixtures for otpauth-core tests.
"""

import asyncio
import logging
from typing import List

import pytest
import structlog

from otpauth_core.clock import ManualClock
from otpauth_core.events import RecordingEventSink
from otpauth_core.otp import OTPPolicy, OTPStore

START_MS = 1_767_225_600_000  # 2026-01-01T00:00:00Z


class FakeTicker:
    """
    Stand-in for asyncio.sleep that only wakes sleepers when tick() is
    awaited, moving the manual clock forward at the same time.
    """

    def __init__(self, clock: ManualClock):
        self.clock = clock
        self._waiters: List[asyncio.Future] = []

    async def sleep(self, seconds: float) -> None:
        future = asyncio.get_running_loop().create_future()
        self._waiters.append(future)
        await future

    @property
    def sleepers(self) -> int:
        return sum(1 for future in self._waiters if not future.done())

    async def settle(self) -> None:
        """Let scheduled tasks run up to their next sleep."""
        for _ in range(10):
            await asyncio.sleep(0)

    async def tick(self, count: int = 1, seconds: float = 1.0) -> None:
        for _ in range(count):
            await self.settle()
            waiters, self._waiters = self._waiters, []
            self.clock.advance(seconds=seconds)
            for future in waiters:
                if not future.done():
                    future.set_result(None)
            await self.settle()


@pytest.fixture
def clock():
    return ManualClock(start_ms=START_MS)


@pytest.fixture
def sink():
    return RecordingEventSink()


@pytest.fixture
def store():
    return OTPStore()


@pytest.fixture
def policy(store, clock, sink):
    return OTPPolicy(store=store, clock=clock, events=sink)


@pytest.fixture
def ticker(clock):
    return FakeTicker(clock)


@pytest.fixture(autouse=True)
def reset_structlog():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()
    root.handlers[:] = handlers
    root.setLevel(level)
