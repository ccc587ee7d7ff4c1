"""Running count, minimum, maximum, mean and population variance."""

from __future__ import annotations


class RunningStats:
    """Accumulates samples without storing them."""

    def __init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        self.count = 0
        self.minimum = 0.0
        self.maximum = 0.0
        self.sum = 0.0
        self.sum_of_squares = 0.0

    def update(self, sample: float) -> None:
        if self.count == 0:
            self.minimum = sample
            self.maximum = sample
        else:
            self.minimum = min(self.minimum, sample)
            self.maximum = max(self.maximum, sample)
        self.count += 1
        self.sum += sample
        self.sum_of_squares += sample * sample

    def mean(self) -> float:
        if self.count == 0:
            return 0.0
        return self.sum / self.count

    def variance(self) -> float:
        """Population variance; 0.0 with fewer than two samples."""
        if self.count < 2:
            return 0.0
        mean = self.mean()
        return (self.sum_of_squares / self.count) - (mean * mean)