"""Cooperative time-triggered task scheduler."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from wcx.common import time_reached

_U32_MASK = 0xFFFFFFFF


class Task:
    """A callback due at ``next_run_ms``, optionally repeating every ``period_ms``."""

    def __init__(
        self,
        start_at_ms: int,
        period_ms: int,
        repeat: bool,
        callback: Callable[[], None] | None,
    ) -> None:
        self.period_ms = period_ms
        self.next_run_ms = start_at_ms & _U32_MASK
        self.enabled = True
        self.repeat = repeat
        self.callback = callback

    def enable(self, enabled: bool) -> None:
        self.enabled = enabled

    def schedule_from_now(self, now_ms: int) -> None:
        self.next_run_ms = (now_ms + self.period_ms) & _U32_MASK

    def run(self, now_ms: int) -> bool:
        """Run the callback if due; return whether it ran."""
        if not self.enabled or self.callback is None:
            return False
        if not time_reached(now_ms, self.next_run_ms):
            return False
        self.callback()
        if self.repeat:
            self.next_run_ms = (self.next_run_ms + self.period_ms) & _U32_MASK
        else:
            self.enabled = False
        return True


class Scheduler:
    """Runs every due task in order on each tick."""

    def __init__(self, tasks: Iterable[Task]) -> None:
        self.tasks = list(tasks)

    def tick(self, now_ms: int) -> int:
        """Return the number of tasks that ran."""
        return sum(1 for task in self.tasks if task.run(now_ms))