"""
Timer Slot
==========
Holds the single live periodic task of one timer category.
"""

from typing import Optional
import structlog

from .periodic import PeriodicTask

logger = structlog.get_logger(__name__)


class TimerSlot:
    """
    At most one live task per category.

    Replacing the task cancels the previous one before the new one
    starts.
    """

    def __init__(self, category: str):
        self.category = category
        self._current: Optional[PeriodicTask] = None

    @property
    def current(self) -> Optional[PeriodicTask]:
        return self._current

    @property
    def is_active(self) -> bool:
        return self._current is not None and self._current.live

    def replace(self, task: PeriodicTask) -> PeriodicTask:
        """Cancel the current task, then start and hold ``task``."""
        self.cancel()
        self._current = task
        task.start()
        logger.debug("Timer started", category=self.category, task=task.name)
        return task

    def cancel(self) -> bool:
        """
        Cancel the held task, if any.

        Returns:
            True if a task was cancelled by this call
        """
        task, self._current = self._current, None
        if task is None:
            return False
        return task.cancel()
