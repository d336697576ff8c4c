"""Deterministic clock for tests."""

from __future__ import annotations

from datetime import datetime, timedelta

from clinicflow.interfaces.clock import Clock

from tests.fixtures.datagen import FIXED_NOW


class TickingClock(Clock):
    """Clock that starts at a fixed instant and advances on every read."""

    def __init__(
        self, start: datetime = FIXED_NOW, step: timedelta = timedelta(seconds=1)
    ) -> None:
        self._next = start
        self._step = step
        self.reads: list[datetime] = []

    def now(self) -> datetime:
        current = self._next
        self._next = current + self._step
        self.reads.append(current)
        return current

    @property
    def last(self) -> datetime:
        """The most recent instant handed out."""
        return self.reads[-1]
