from wcx.watchdog import Watchdog


def test_source_sequence():
    fired = []
    wd = Watchdog(100, lambda: fired.append(True))

    assert wd.check(200) is False

    wd.start(1000)
    assert wd.check(1050) is False
    assert wd.expired is False

    assert wd.check(1200) is True
    assert fired == [True]
    assert wd.expired is True

    wd.kick(1200)
    assert wd.expired is False
    assert wd.check(1250) is False
    assert wd.check(1400) is True
    assert len(fired) == 2


def test_callback_fires_once_per_expiry():
    calls = []
    wd = Watchdog(10, lambda: calls.append(1))
    wd.start(0)
    assert wd.check(10) is True
    assert wd.check(20) is True
    assert calls == [1]


def test_without_callback():
    wd = Watchdog(5)
    wd.start(0)
    assert wd.check(4) is False
    assert wd.check(5) is True


def test_deadline_across_wrap():
    wd = Watchdog(20)
    wd.start(0xFFFFFFF0)
    assert wd.check(2) is False
    assert wd.check(4) is True