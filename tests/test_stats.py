import pytest

from wcx.stats import RunningStats


@pytest.fixture
def stats():
    s = RunningStats()
    for sample in (1.0, 2.0, 3.0):
        s.update(sample)
    return s


def test_count(stats):
    assert stats.count == 3


def test_min_max(stats):
    assert stats.minimum == pytest.approx(1.0, abs=1e-4)
    assert stats.maximum == pytest.approx(3.0, abs=1e-4)


def test_mean(stats):
    assert stats.mean() == pytest.approx(2.0, abs=1e-4)


def test_population_variance(stats):
    assert stats.variance() == pytest.approx(0.6666667, abs=2e-4)


def test_empty_stats():
    s = RunningStats()
    assert s.mean() == 0.0
    assert s.variance() == 0.0
    assert s.count == 0


def test_single_sample_variance_is_zero():
    s = RunningStats()
    s.update(-4.0)
    assert s.variance() == 0.0
    assert s.minimum == -4.0
    assert s.maximum == -4.0


def test_reset_clears(stats):
    stats.reset()
    assert (stats.count, stats.sum, stats.minimum, stats.maximum) == (0, 0.0, 0.0, 0.0)