"""Software watchdog that fires once a subsystem misses its check-in deadline."""

from __future__ import annotations

from collections.abc import Callable

from wcx.common import time_reached

_U32_MASK = 0xFFFFFFFF


class Watchdog:
    """Heartbeat monitor: ``kick`` to signal liveness, ``check`` to detect timeouts."""

    def __init__(self, timeout_ms: int, on_expire: Callable[[], None] | None = None) -> None:
        self.timeout_ms = timeout_ms
        self.on_expire = on_expire
        self.last_kick = 0
        self.expired = False
        self.started = False

    def start(self, now_ms: int) -> None:
        self.last_kick = now_ms
        self.expired = False
        self.started = True

    def kick(self, now_ms: int) -> None:
        self.last_kick = now_ms
        self.expired = False

    def check(self, now_ms: int) -> bool:
        """Return True if expired; the callback runs once on the transition."""
        if not self.started:
            return False
        if self.expired:
            return True
        if time_reached(now_ms, (self.last_kick + self.timeout_ms) & _U32_MASK):
            self.expired = True
            if self.on_expire is not None:
                self.on_expire()
            return True
        return False