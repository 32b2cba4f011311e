"""
Cancellation Token
==================
"""


class CancellationToken:
    """One-shot stop signal checked by a periodic task before each tick."""

    def __init__(self):
        self._cancelled = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> bool:
        """
        Signal cancellation.

        Returns:
            True on the first call, False if already cancelled
        """
        if self._cancelled:
            return False
        self._cancelled = True
        return True
