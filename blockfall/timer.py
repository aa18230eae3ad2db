"""
Fall timer: turns elapsed frame time into gravity ticks.

The interval is read on every update, so holding the fast-descent key takes
effect on the next frame without restarting the timer.
"""

from __future__ import annotations

from typing import Callable


class FallTimer:
    """Periodic tick source driven by elapsed milliseconds.

    Attributes:
        running: Whether the timer is producing ticks.
    """

    def __init__(self, interval_fn: Callable[[], int]) -> None:
        """
        Args:
            interval_fn: Returns the current tick interval in milliseconds.
        """
        self._interval_fn = interval_fn
        self._elapsed_ms = 0
        self.running = False

    def start(self) -> None:
        """Start (or restart) the timer with an empty accumulator."""
        self._elapsed_ms = 0
        self.running = True

    def stop(self) -> None:
        """Stop producing ticks. Stopping a stopped timer is a no-op."""
        self.running = False
        self._elapsed_ms = 0

    def update(self, elapsed_ms: int) -> int:
        """Advance the timer and return how many ticks are due.

        Args:
            elapsed_ms: Milliseconds since the previous update.

        Returns:
            Number of ticks to run (0 while stopped).
        """
        if not self.running:
            return 0
        self._elapsed_ms += elapsed_ms
        interval = self._interval_fn()
        ticks = self._elapsed_ms // interval
        self._elapsed_ms -= ticks * interval
        return int(ticks)
