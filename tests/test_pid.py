import pytest

from wcx.pid import PidController


def test_first_run_proportional_and_integral():
    pid = PidController(2.0, 1.0, 0.5, 0.0, 100.0)
    assert pid.compute(10.0, 8.0, 0.5) == pytest.approx(5.0, abs=1e-4)


def test_derivative_on_measurement_and_integral_accumulation():
    pid = PidController(2.0, 1.0, 0.5, 0.0, 100.0)
    pid.compute(10.0, 8.0, 0.5)
    assert pid.compute(10.0, 9.0, 0.5) == pytest.approx(2.5, abs=1e-4)


def test_output_clamped_to_maximum():
    pid = PidController(100.0, 0.0, 0.0, 0.0, 50.0)
    assert pid.compute(10.0, 0.0, 1.0) == pytest.approx(50.0, abs=1e-4)


@pytest.mark.parametrize("dt", [0.0, -1.0])
def test_non_positive_dt_returns_zero(dt):
    pid = PidController(1.0, 1.0, 1.0, -10.0, 10.0)
    assert pid.compute(5.0, 0.0, dt) == 0.0
    assert pid.initialized is False


def test_integrator_is_clamped():
    pid = PidController(0.0, 100.0, 0.0, -1.0, 1.0)
    pid.compute(10.0, 0.0, 1.0)
    assert pid.integrator == 1.0


def test_reset_seeds_measurement():
    pid = PidController(0.0, 0.0, 1.0, -100.0, 100.0)
    pid.reset(4.0)
    assert pid.integrator == 0.0
    assert pid.compute(0.0, 6.0, 1.0) == pytest.approx(-2.0)