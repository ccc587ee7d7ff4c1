"""Time-based debouncer for a noisy digital input."""

from __future__ import annotations

from wcx.common import time_reached

_U32_MASK = 0xFFFFFFFF


class Debounce:
    """Accept a new input state only after it has held for ``interval_ms``."""

    def __init__(self, initial_state: bool = False, interval_ms: int = 0) -> None:
        self.state = initial_state
        self.candidate_state = initial_state
        self.interval_ms = interval_ms
        self.candidate_since_ms = 0
        self.changed = False
        self.rose = False
        self.fell = False

    def update(self, raw_state: bool, now_ms: int) -> bool:
        """Feed a raw sample; return the stable (debounced) state."""
        self.changed = False
        self.rose = False
        self.fell = False

        if raw_state != self.candidate_state:
            self.candidate_state = raw_state
            self.candidate_since_ms = now_ms
            return self.state

        deadline = (self.candidate_since_ms + self.interval_ms) & _U32_MASK
        if self.state != self.candidate_state and time_reached(now_ms, deadline):
            self.state = self.candidate_state
            self.changed = True
            self.rose = self.state
            self.fell = not self.state

        return self.state