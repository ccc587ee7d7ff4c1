import pytest

from wcx.pulse import PulseCounter


def test_source_sequence():
    p = PulseCounter()
    assert p.count == 0

    p.update(False, 0)
    p.update(True, 100)
    assert p.count == 1
    assert p.period_ms == 0

    p.update(False, 200)
    p.update(True, 300)
    assert p.count == 2
    assert p.period_ms == 200
    assert p.frequency_hz() == pytest.approx(5.0, abs=0.001)

    p.update(True, 400)
    assert p.count == 2

    p.reset()
    assert p.count == 0


def test_frequency_zero_without_period():
    p = PulseCounter()
    p.update(True, 50)
    assert p.frequency_hz() == 0.0


def test_period_across_clock_wrap():
    p = PulseCounter()
    p.update(True, 0xFFFFFFF0)
    p.update(False, 0xFFFFFFF8)
    p.update(True, 0x10)
    assert p.period_ms == 0x20