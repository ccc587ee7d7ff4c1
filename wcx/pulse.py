"""Rising-edge pulse counter with period and frequency measurement."""

from __future__ import annotations

_U32_MASK = 0xFFFFFFFF


class PulseCounter:
    """Counts rising edges and measures the time between the last two."""

    def __init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        self.count = 0
        self.last_edge_ms = 0
        self.period_ms = 0
        self.last_state = False
        self.primed = False

    def update(self, state: bool, now_ms: int) -> None:
        if state and not self.last_state:
            self.count = (self.count + 1) & _U32_MASK
            if self.primed:
                self.period_ms = (now_ms - self.last_edge_ms) & _U32_MASK
            self.last_edge_ms = now_ms
            self.primed = True
        self.last_state = state

    def frequency_hz(self) -> float:
        """Frequency from the last period; 0.0 until a period is known."""
        if self.period_ms == 0:
            return 0.0
        return 1000.0 / self.period_ms