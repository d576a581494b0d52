"""Countdown state used to enforce the test deadline."""

from __future__ import annotations


class Countdown:
    """Whole-second countdown that only moves forward while running."""

    def __init__(self, duration_seconds: int) -> None:
        if duration_seconds <= 0:
            raise ValueError("Countdown duration must be a positive number of seconds.")
        self._duration = duration_seconds
        self._remaining = duration_seconds
        self._running = False

    def start(self) -> None:
        self._remaining = self._duration
        self._running = True

    def stop(self) -> None:
        self._running = False

    def tick(self) -> bool:
        """Advance one second. Returns True only on the tick that reaches zero."""
        if not self._running:
            return False
        self._remaining = max(0, self._remaining - 1)
        if self._remaining == 0:
            self._running = False
            return True
        return False

    @property
    def duration_seconds(self) -> int:
        return self._duration

    @property
    def remaining_seconds(self) -> int:
        return self._remaining

    def is_running(self) -> bool:
        return self._running
