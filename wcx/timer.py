"""One-shot and periodic software timers on a wrapping millisecond clock."""

from __future__ import annotations

from wcx.common import time_reached

_U32_MASK = 0xFFFFFFFF


class Timer:
    """Deadline timer; periodic timers re-arm by adding the interval on expiry."""

    def __init__(self, interval_ms: int, periodic: bool = False) -> None:
        self.interval_ms = interval_ms
        self.periodic = periodic
        self.deadline_ms = 0
        self.running = False

    def start(self, now_ms: int) -> None:
        self.deadline_ms = (now_ms + self.interval_ms) & _U32_MASK
        self.running = True

    def start_at(self, deadline_ms: int) -> None:
        self.deadline_ms = deadline_ms & _U32_MASK
        self.running = True

    def stop(self) -> None:
        self.running = False

    def remaining(self, now_ms: int) -> int:
        """Milliseconds until the deadline; 0 when stopped or already due."""
        if not self.running or time_reached(now_ms, self.deadline_ms):
            return 0
        return (self.deadline_ms - now_ms) & _U32_MASK

    def expired(self, now_ms: int) -> bool:
        """Return True once per expiry, re-arming or stopping the timer."""
        if not self.running or not time_reached(now_ms, self.deadline_ms):
            return False
        if self.periodic:
            self.deadline_ms = (self.deadline_ms + self.interval_ms) & _U32_MASK
        else:
            self.running = False
        return True