import pytest

from wcx.lut import IntLookupTable, LookupTable


@pytest.fixture
def table():
    return LookupTable([(0.0, 0.0), (10.0, 100.0), (20.0, 200.0), (30.0, 400.0)])


@pytest.fixture
def itable():
    return IntLookupTable([(0, 0), (100, 1000), (200, 3000)])


def test_empty_tables_rejected():
    with pytest.raises(ValueError):
        LookupTable([])
    with pytest.raises(ValueError):
        IntLookupTable([])


def test_exact_match(table):
    assert table.lookup(10.0) == pytest.approx(100.0, abs=0.001)


@pytest.mark.parametrize("x, expected", [(5.0, 50.0), (25.0, 300.0), (15.0, 150.0)])
def test_interpolation(table, x, expected):
    assert table.lookup(x) == pytest.approx(expected, abs=0.001)


@pytest.mark.parametrize("x, expected", [(-5.0, 0.0), (50.0, 400.0)])
def test_clamped_outside(table, x, expected):
    assert table.lookup(x) == pytest.approx(expected, abs=0.001)


def test_single_point_table():
    lut = LookupTable([(3.0, 7.0)])
    assert lut.lookup(-100.0) == 7.0
    assert lut.lookup(100.0) == 7.0


@pytest.mark.parametrize(
    "x, expected", [(50, 500), (150, 2000), (-10, 0), (300, 3000), (100, 1000)]
)
def test_int_lookup(itable, x, expected):
    assert itable.lookup(x) == expected


def test_int_lookup_rounds_to_nearest():
    lut = IntLookupTable([(0, 0), (3, 1)])
    assert lut.lookup(1) == 0
    assert lut.lookup(2) == 1


def test_int_lookup_rounds_negative_slope():
    lut = IntLookupTable([(0, 0), (3, -1)])
    assert lut.lookup(1) == 0
    assert lut.lookup(2) == -1


def test_int_lookup_is_monotonic(itable):
    values = [itable.lookup(x) for x in range(-20, 220)]
    assert values == sorted(values)