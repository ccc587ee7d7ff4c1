import pytest

from wcx.filter import EmaFilter, MovingAverage


def test_moving_average_partial_window():
    avg = MovingAverage(4)
    assert avg.update(2.0) == pytest.approx(2.0, abs=1e-4)
    assert avg.update(4.0) == pytest.approx(3.0, abs=1e-4)


def test_moving_average_reset_seeds_window():
    avg = MovingAverage(4)
    avg.update(2.0)
    avg.reset(10.0)
    assert avg.value() == pytest.approx(10.0, abs=1e-4)
    assert avg.update(16.0) == pytest.approx(11.5, abs=1e-4)


def test_moving_average_empty_value_is_zero():
    assert MovingAverage(3).value() == 0.0


def test_moving_average_drops_oldest():
    avg = MovingAverage(2)
    avg.update(1.0)
    avg.update(3.0)
    assert avg.update(5.0) == pytest.approx(4.0)


def test_moving_average_rejects_zero_capacity():
    with pytest.raises(ValueError):
        MovingAverage(0)


def test_ema_first_sample_initializes():
    ema = EmaFilter(0.25, 0.0, False)
    assert ema.update(8.0) == pytest.approx(8.0, abs=1e-4)
    assert ema.update(12.0) == pytest.approx(9.0, abs=1e-4)
    assert ema.value() == pytest.approx(9.0, abs=1e-4)


def test_ema_preinitialized_state():
    ema = EmaFilter(0.5, 4.0, True)
    assert ema.update(8.0) == pytest.approx(6.0)


@pytest.mark.parametrize("alpha, expected", [(2.0, 1.0), (-1.0, 0.0), (0.3, 0.3)])
def test_ema_alpha_is_clamped(alpha, expected):
    assert EmaFilter(alpha).alpha == expected