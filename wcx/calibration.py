"""Linear range and affine (scale/offset) sensor calibrations."""

from __future__ import annotations

from dataclasses import dataclass

from wcx.common import clamp, mapf


@dataclass
class LinearCalibration:
    """Map an input range onto an output range, optionally clamping the result."""

    input_min: float
    input_max: float
    output_min: float
    output_max: float
    clamp_output: bool = False

    def apply(self, input_value: float) -> float:
        output_value = mapf(
            input_value, self.input_min, self.input_max, self.output_min, self.output_max
        )
        if not self.clamp_output:
            return output_value
        lower = min(self.output_min, self.output_max)
        upper = max(self.output_min, self.output_max)
        return clamp(output_value, lower, upper)

    def inverse(self, output_value: float) -> float:
        return mapf(
            output_value, self.output_min, self.output_max, self.input_min, self.input_max
        )


@dataclass
class AffineCalibration:
    """Apply ``value * scale + offset``."""

    scale: float
    offset: float

    def apply(self, value: float) -> float:
        return (value * self.scale) + self.offset

    def inverse(self, value: float) -> float:
        """Undo :meth:`apply`; a zero scale yields 0.0."""
        if self.scale == 0.0:
            return 0.0
        return (value - self.offset) / self.scale