import pytest

from wcx.hysteresis import Hysteresis, ThresholdDetector, Zone


def test_hysteresis_sequence():
    h = Hysteresis(20.0, 80.0, False)
    assert h.state is False
    assert h.update(50.0) is False
    assert h.update(81.0) is True
    assert h.update(50.0) is True
    assert h.update(19.0) is False
    assert h.state is False


def test_hysteresis_thresholds_are_strict():
    h = Hysteresis(20.0, 80.0, False)
    assert h.update(80.0) is False
    h = Hysteresis(20.0, 80.0, True)
    assert h.update(20.0) is True


def test_threshold_detector_sequence():
    det = ThresholdDetector(10.0, 80.0, 95.0, 5.0)
    assert det.zone is Zone.NORMAL
    assert det.update(5.0) is Zone.LOW
    assert det.update(12.0) is Zone.LOW
    assert det.update(16.0) is Zone.NORMAL
    assert det.update(85.0) is Zone.HIGH
    assert det.update(96.0) is Zone.CRITICAL
    assert det.update(92.0) is Zone.CRITICAL
    assert det.update(89.0) is Zone.HIGH
    assert det.zone is Zone.HIGH


def test_threshold_detector_high_back_to_normal():
    det = ThresholdDetector(10.0, 80.0, 95.0, 5.0)
    det.update(85.0)
    assert det.update(77.0) is Zone.HIGH
    assert det.update(74.0) is Zone.NORMAL


def test_normal_does_not_jump_to_critical():
    det = ThresholdDetector(10.0, 80.0, 95.0, 5.0)
    assert det.update(99.0) is Zone.HIGH
    assert det.update(99.0) is Zone.CRITICAL


@pytest.mark.parametrize(
    "zone, value", [(Zone.LOW, 0), (Zone.NORMAL, 1), (Zone.HIGH, 2), (Zone.CRITICAL, 3)]
)
def test_zone_values(zone, value):
    assert int(zone) == value