import pytest

from wcx.rate_limiter import IntRateLimiter, RateLimiter


def test_float_sequence():
    rl = RateLimiter(10.0, 5.0)
    assert rl.value == 0.0
    assert rl.update(100.0) == pytest.approx(100.0, abs=0.001)
    assert rl.update(200.0) == pytest.approx(110.0, abs=0.001)
    assert rl.update(0.0) == pytest.approx(105.0, abs=0.001)
    assert rl.update(107.0) == pytest.approx(107.0, abs=0.001)

    rl.reset()
    assert rl.value == 0.0
    assert rl.update(50.0) == pytest.approx(50.0, abs=0.001)


def test_int_sequence():
    irl = IntRateLimiter(100, 50)
    assert irl.value == 0
    assert irl.update(1000) == 1000
    assert irl.update(2000) == 1100
    assert irl.update(0) == 1050
    assert irl.update(1080) == 1080


def test_int_reset_retakes_first_sample():
    irl = IntRateLimiter(1, 1)
    irl.update(10)
    irl.reset()
    assert irl.update(-500) == -500
    assert irl.update(0) == -499


def test_float_value_tracks_last_output():
    rl = RateLimiter(2.0, 2.0)
    rl.update(0.0)
    rl.update(10.0)
    assert rl.value == pytest.approx(2.0)