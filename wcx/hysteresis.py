"""Hysteresis comparator and multi-zone threshold detector."""

from __future__ import annotations

from enum import IntEnum


class Hysteresis:
    """Goes high above ``threshold_high`` and stays high until below ``threshold_low``."""

    def __init__(
        self, threshold_low: float, threshold_high: float, initial_state: bool = False
    ) -> None:
        self.threshold_low = threshold_low
        self.threshold_high = threshold_high
        self.state = initial_state

    def update(self, value: float) -> bool:
        if self.state:
            if value < self.threshold_low:
                self.state = False
        elif value > self.threshold_high:
            self.state = True
        return self.state


class Zone(IntEnum):
    LOW = 0
    NORMAL = 1
    HIGH = 2
    CRITICAL = 3


class ThresholdDetector:
    """Tracks which zone a value occupies, with hysteresis on the way back."""

    def __init__(
        self,
        low_threshold: float,
        high_threshold: float,
        critical_threshold: float,
        hysteresis: float,
    ) -> None:
        self.low_threshold = low_threshold
        self.high_threshold = high_threshold
        self.critical_threshold = critical_threshold
        self.hysteresis = hysteresis
        self.zone = Zone.NORMAL

    def update(self, value: float) -> Zone:
        hyst = self.hysteresis
        zone = self.zone
        if zone is Zone.LOW:
            if value > self.low_threshold + hyst:
                self.zone = Zone.NORMAL
        elif zone is Zone.NORMAL:
            if value < self.low_threshold:
                self.zone = Zone.LOW
            elif value > self.high_threshold:
                self.zone = Zone.HIGH
        elif zone is Zone.HIGH:
            if value > self.critical_threshold:
                self.zone = Zone.CRITICAL
            elif value < self.high_threshold - hyst:
                self.zone = Zone.NORMAL
        elif zone is Zone.CRITICAL:
            if value < self.critical_threshold - hyst:
                self.zone = Zone.HIGH
        return self.zone