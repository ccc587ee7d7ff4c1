"""PID controller with derivative on measurement and integrator clamping."""

from __future__ import annotations

from wcx.common import clamp


class PidController:
    """Positional PID controller whose output and integrator are bounded."""

    def __init__(
        self, kp: float, ki: float, kd: float, output_min: float, output_max: float
    ) -> None:
        self.kp = kp
        self.ki = ki
        self.kd = kd
        self.output_min = output_min
        self.output_max = output_max
        self.integrator = 0.0
        self.previous_measurement = 0.0
        self.initialized = False

    def reset(self, measurement: float) -> None:
        """Clear the integrator and seed the derivative with ``measurement``."""
        self.integrator = 0.0
        self.previous_measurement = measurement
        self.initialized = True

    def compute(self, setpoint: float, measurement: float, dt_seconds: float) -> float:
        """Return the bounded control output; a non-positive ``dt_seconds`` yields 0.0."""
        if dt_seconds <= 0.0:
            return 0.0
        if not self.initialized:
            self.reset(measurement)

        error = setpoint - measurement
        proportional = self.kp * error

        self.integrator = clamp(
            self.integrator + self.ki * error * dt_seconds, self.output_min, self.output_max
        )

        derivative = -(measurement - self.previous_measurement) / dt_seconds
        self.previous_measurement = measurement

        output = proportional + self.integrator + self.kd * derivative
        return clamp(output, self.output_min, self.output_max)