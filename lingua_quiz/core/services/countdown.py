"""Caller-driven countdown for the whole-quiz time budget."""

from __future__ import annotations


class Countdown:
    """Tracks remaining seconds; advanced explicitly, never by a clock."""

    def __init__(self, limit_seconds: int) -> None:
        self._limit_seconds = limit_seconds
        self._remaining_seconds = limit_seconds

    @property
    def limit_seconds(self) -> int:
        return self._limit_seconds

    @property
    def remaining_seconds(self) -> int:
        return self._remaining_seconds

    @property
    def elapsed_seconds(self) -> int:
        return self._limit_seconds - self._remaining_seconds

    def is_expired(self) -> bool:
        return self._remaining_seconds == 0

    def restart(self) -> None:
        self._remaining_seconds = self._limit_seconds

    def advance(self, elapsed_seconds: int) -> int:
        """Subtract elapsed time, clamping at zero. Returns the remaining seconds."""
        if isinstance(elapsed_seconds, bool) or not isinstance(elapsed_seconds, int):
            raise ValueError("Elapsed time must be an integer number of seconds.")
        if elapsed_seconds < 0:
            raise ValueError("Elapsed time cannot be negative.")
        self._remaining_seconds = max(0, self._remaining_seconds - elapsed_seconds)
        return self._remaining_seconds
