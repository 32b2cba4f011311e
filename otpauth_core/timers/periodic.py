"""
Periodic Task
=============
Cancellable fixed-cadence task on the asyncio event loop.
"""

import asyncio
from typing import Awaitable, Callable, Optional
import structlog

from otpauth_core.errors import TimerStateError

from .cancellation import CancellationToken

logger = structlog.get_logger(__name__)


class PeriodicTask:
    """
    Runs ``tick`` once per interval until told to stop.

    Before every tick the task checks its cancellation token and the
    ``should_continue`` condition; if either says stop it exits quietly.
    A tick returning ``False`` also ends the task. A tick that raises is
    logged and the task keeps its cadence.
    """

    def __init__(
        self,
        tick: Callable[[], Optional[bool]],
        interval: float = 1.0,
        should_continue: Optional[Callable[[], bool]] = None,
        name: str = "periodic",
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self.name = name
        self.interval = interval
        self.token = CancellationToken()
        self.ticks = 0
        self._tick = tick
        self._should_continue = should_continue or (lambda: True)
        self._sleep = sleep
        self._task: Optional[asyncio.Task] = None

    def start(self) -> "PeriodicTask":
        """
        Schedule the task on the running event loop.

        Raises:
            TimerStateError: If already started or cancelled
        """
        if self._task is not None:
            raise TimerStateError(f"Periodic task '{self.name}' already started")
        if self.token.cancelled:
            raise TimerStateError(f"Periodic task '{self.name}' was cancelled")

        self._task = asyncio.get_running_loop().create_task(self._run(), name=self.name)
        return self

    async def _run(self) -> None:
        while True:
            await self._sleep(self.interval)

            if self.token.cancelled or not self._should_continue():
                break

            self.ticks += 1
            try:
                keep_going = self._tick()
            except Exception:
                # A failing tick is logged and the cadence carries on
                logger.exception("Periodic task tick failed", task=self.name, tick=self.ticks)
                continue
            if keep_going is False:
                break

        logger.debug("Periodic task stopped", task=self.name, ticks=self.ticks)

    def cancel(self) -> bool:
        """
        Stop the task. Safe to call more than once.

        Returns:
            True only for the call that actually cancelled
        """
        if not self.token.cancel():
            return False
        if self._task is not None and not self._task.done():
            self._task.cancel()
        return True

    @property
    def started(self) -> bool:
        return self._task is not None

    @property
    def done(self) -> bool:
        return self._task is not None and self._task.done()

    @property
    def live(self) -> bool:
        """Started, not cancelled and still running."""
        return self.started and not self.done and not self.token.cancelled

    async def wait(self) -> None:
        """Wait until the task has finished, however it ended."""
        if self._task is None:
            return
        await asyncio.wait({self._task})
